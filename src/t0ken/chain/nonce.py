"""
Nonce allocation for the signing account.

By default every allocation asks the node for the account's pending nonce;
nothing is cached, so two reads may differ if transactions were mined in
between.  An operator can force a specific nonce (for example to replace a
stuck transaction at the same position) with ``set_override``.

The allocator does not reserve nonces.  Instances are independent; one is
owned by each invocation's application context.
"""

from __future__ import annotations

from typing import Protocol

import structlog

from ..errors import ArgumentError

log = structlog.get_logger(__name__)


class NonceSource(Protocol):
    def pending_nonce_at(self, address: str) -> int: ...

    def ensure_connected(self) -> None: ...


class NonceAllocator:
    """Produces the nonce for the next transaction from ``address``."""

    def __init__(self, source: NonceSource, address: str) -> None:
        self._source = source
        self.address = address
        self._override = 0

    @property
    def override(self) -> int:
        return self._override

    def set_override(self, nonce: int) -> None:
        """
        Force ``nonce`` for the next allocation, or resynchronize when 0.

        Clearing checks that the connection is reachable so the next
        allocation can use the node's pending nonce.

        Raises:
            ArgumentError: If nonce is negative
            NetworkError: If resynchronization cannot reach the node
        """
        if nonce < 0:
            raise ArgumentError(f"Nonce must not be negative, got {nonce}")

        if nonce == 0:
            self._override = 0
            self._source.ensure_connected()
            log.debug("nonce.resync", address=self.address)
            return

        self._override = nonce
        log.debug("nonce.override", address=self.address, nonce=nonce)

    def next_nonce(self) -> int:
        """Return the override when set, otherwise the live pending nonce."""
        if self._override > 0:
            return self._override
        return self._source.pending_nonce_at(self.address)
