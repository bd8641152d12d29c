"""AppContext — shared Click context for all commands.

Created once by the root CLI group and found by subcommands through
``ctx.find_object(AppContext)``.  The connection, signing account, nonce
allocator and transactor are created lazily so ``--help``, ``abi`` and
``bin`` never touch the network or the private key.
"""

from __future__ import annotations

from typing import Optional

from eth_account.signers.local import LocalAccount

from ..chain.conn import Connection
from ..chain.nonce import NonceAllocator
from ..chain.tx import Transactor
from ..config import Settings
from ..errors import ResolutionError
from ..keys import get_account, resolve_address
from ..log import configure_logging
from ._base import Contract


class AppContext:
    """Per-invocation state: settings plus lazily built chain collaborators."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._connection: Optional[Connection] = None
        self._account: Optional[LocalAccount] = None
        self._nonces: Optional[NonceAllocator] = None
        self._transactor: Optional[Transactor] = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def connection(self) -> Connection:
        if self._connection is None:
            self._connection = Connection(self.settings.rpc_url)
        return self._connection

    def close(self) -> None:
        """Release the connection if one was opened."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    @property
    def account(self) -> LocalAccount:
        if self._account is None:
            self._account = get_account()
        return self._account

    @property
    def nonces(self) -> NonceAllocator:
        if self._nonces is None:
            # Load the signer before opening a connection
            address = self.account.address
            self._nonces = NonceAllocator(self.connection, address)
        return self._nonces

    @property
    def transactor(self) -> Transactor:
        if self._transactor is None:
            nonces = self.nonces
            self._transactor = Transactor(
                self.connection,
                self.account,
                nonces,
                chain_id=self.settings.chain_id,
            )
        return self._transactor

    def contract_address(self, contract: Contract, override: Optional[str] = None) -> str:
        """
        Resolve the target address for ``contract``.

        Priority: ``--address`` option  >  configured ``contract.config_key``.

        Raises:
            ResolutionError: If neither is available or the value cannot be
                resolved
        """
        if override:
            return resolve_address(override)

        configured = self.settings.get(contract.config_key)
        if configured:
            return resolve_address(configured)

        raise ResolutionError(
            f"No {contract.label} contract address. Use --address <address> or set "
            f"{contract.config_key} in {self.settings.env_path}."
        )
