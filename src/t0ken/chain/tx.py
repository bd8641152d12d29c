"""
Transaction Builder - Build, sign, and send contract transactions.

Uses eth-account for signing and the JSON-RPC connection for sending.
Nonces come from the caller's NonceAllocator, so a ``--nonce`` override
applies to the transaction built here.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from eth_account.signers.local import LocalAccount
from eth_utils import to_checksum_address

from ..errors import ContractCallError
from .conn import Connection
from .nonce import NonceAllocator
from .rpc import encode_function_call

log = structlog.get_logger(__name__)

DEFAULT_GAS_LIMIT = 500_000


class Transactor:
    """Signs and submits transactions from one account."""

    def __init__(
        self,
        connection: Connection,
        account: LocalAccount,
        nonces: NonceAllocator,
        chain_id: Optional[int] = None,
    ) -> None:
        self.connection = connection
        self.account = account
        self.nonces = nonces
        self._chain_id = chain_id

    def build(
        self,
        contract_address: str,
        abi: list,
        function_name: str,
        args: list,
        value: int = 0,
        gas_limit: Optional[int] = None,
    ) -> dict:
        """
        Build a contract call transaction (unsigned).

        Args:
            contract_address: 0x-prefixed contract address
            abi: Contract ABI
            function_name: Function to call
            args: Function arguments
            value: ETH value in wei (default: 0)
            gas_limit: Gas limit (default: 500k)

        Returns:
            Unsigned transaction dict
        """
        calldata = encode_function_call(abi, function_name, args)

        return {
            "to": to_checksum_address(contract_address),
            "data": calldata,
            "value": value,
            "nonce": self.nonces.next_nonce(),
            "gas": gas_limit or DEFAULT_GAS_LIMIT,
            "gasPrice": self.connection.gas_price(),
            "chainId": self._chain_id or self.connection.chain_id(),
        }

    def sign_and_send(self, tx: dict, wait: bool = True, timeout: int = 120) -> dict:
        """
        Sign a transaction and send it.

        Returns:
            Dict with tx_hash, nonce and, when waiting, receipt and status

        Raises:
            ContractCallError: If the mined transaction reverted
        """
        signed = self.account.sign_transaction(tx)
        raw_tx = "0x" + signed.raw_transaction.hex().removeprefix("0x")

        tx_hash = self.connection.send_raw_transaction(raw_tx)
        log.info("tx.sent", tx_hash=tx_hash, nonce=tx["nonce"], sender=self.account.address)
        result: dict[str, Any] = {"tx_hash": tx_hash, "nonce": tx["nonce"]}

        if wait:
            receipt = self.connection.wait_for_receipt(tx_hash, timeout=timeout)
            result["receipt"] = receipt
            result["status"] = int(receipt.get("status", "0x0"), 16)
            if result["status"] != 1:
                raise ContractCallError(f"Transaction {tx_hash} reverted")

        return result

    def transact(
        self,
        contract_address: str,
        abi: list,
        function_name: str,
        args: list,
        value: int = 0,
        gas_limit: Optional[int] = None,
        wait: bool = True,
    ) -> dict:
        """Build, sign, and send a contract call transaction."""
        tx = self.build(
            contract_address,
            abi,
            function_name,
            args,
            value=value,
            gas_limit=gas_limit,
        )
        return self.sign_and_send(tx, wait=wait)
