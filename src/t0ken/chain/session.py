"""Read-only call session bound to one deployed contract."""

from __future__ import annotations

from typing import Any, Protocol

import structlog

log = structlog.get_logger(__name__)


class Caller(Protocol):
    def call(self, address: str, abi: list, function_name: str, args: list) -> Any: ...


class CallSession:
    """Invokes view functions of the contract at ``address``."""

    def __init__(self, caller: Caller, address: str, abi: list) -> None:
        self._caller = caller
        self.address = address
        self.abi = abi

    def call(self, function_name: str, *args: Any) -> Any:
        log.debug("session.call", address=self.address, function=function_name)
        return self._caller.call(self.address, self.abi, function_name, list(args))
