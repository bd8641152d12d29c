"""
Chain connection.

Binds an RPC endpoint to an httpx client and exposes the handful of
JSON-RPC methods the CLI needs.  All calls are synchronous and blocking.
"""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx
import structlog

from ..errors import ContractCallError, NetworkError
from .rpc import (
    DEFAULT_TIMEOUT,
    decode_function_result,
    encode_function_call,
    hex_to_int,
    rpc_call,
)

log = structlog.get_logger(__name__)


class Connection:
    """JSON-RPC connection to an Ethereum node."""

    def __init__(self, rpc_url: str, client: Optional[httpx.Client] = None) -> None:
        self.rpc_url = rpc_url
        self._client = client or httpx.Client(timeout=DEFAULT_TIMEOUT)
        self._chain_id: Optional[int] = None

    def close(self) -> None:
        self._client.close()

    def _rpc(self, method: str, params: list) -> Any:
        return rpc_call(self._client, self.rpc_url, method, params)

    def chain_id(self) -> int:
        """Chain ID reported by the node (queried once)."""
        if self._chain_id is None:
            self._chain_id = hex_to_int(self._rpc("eth_chainId", []))
        return self._chain_id

    def ensure_connected(self) -> None:
        """Raise NetworkError unless the node answers."""
        self.chain_id()

    def pending_nonce_at(self, address: str) -> int:
        """Next nonce for an address, including pending transactions."""
        nonce = hex_to_int(self._rpc("eth_getTransactionCount", [address, "pending"]))
        log.debug("chain.pending_nonce", address=address, nonce=nonce)
        return nonce

    def gas_price(self) -> int:
        return hex_to_int(self._rpc("eth_gasPrice", []))

    def call(self, address: str, abi: list, function_name: str, args: list) -> Any:
        """
        Read from a contract (eth_call at the latest block).

        Raises:
            ContractCallError: If the call reverts or returns no data
        """
        calldata = encode_function_call(abi, function_name, args)
        result = self._rpc("eth_call", [{"to": address, "data": calldata}, "latest"])

        if result is None or result == "0x":
            raise ContractCallError(
                f"{function_name} returned no data; is there a contract at {address}?"
            )

        if not isinstance(result, str):
            raise NetworkError(f"Malformed {function_name} result from node: {result!r}")

        return decode_function_result(abi, function_name, result)

    def send_raw_transaction(self, raw_tx: str) -> str:
        """Broadcast a signed transaction and return its hash."""
        return self._rpc("eth_sendRawTransaction", [raw_tx])

    def wait_for_receipt(
        self,
        tx_hash: str,
        timeout: int = 120,
        poll_interval: float = 2.0,
    ) -> dict:
        """
        Wait for a transaction receipt.

        Raises:
            NetworkError: If the receipt is not found within timeout
        """
        start = time.time()
        while time.time() - start < timeout:
            receipt = self._rpc("eth_getTransactionReceipt", [tx_hash])
            if receipt is not None:
                return receipt
            time.sleep(poll_interval)

        raise NetworkError(f"Transaction {tx_hash} not confirmed within {timeout}s")
