"""
JSON-RPC helpers.

Lightweight alternative to web3.py: uses httpx for HTTP + eth-abi for encoding.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
import structlog
from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError
from eth_hash.auto import keccak

from ..errors import ArgumentError, ArtifactError, ContractCallError, NetworkError

log = structlog.get_logger(__name__)

# Default HTTP timeout in seconds
DEFAULT_TIMEOUT = 30


def rpc_call(client: httpx.Client, url: str, method: str, params: list) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        client: HTTP client to send the request with
        url: RPC endpoint URL
        method: RPC method name (e.g., "eth_call")
        params: RPC parameters

    Returns:
        Result field from the RPC response

    Raises:
        NetworkError: If the endpoint cannot be reached or returns an error
        ContractCallError: If the node reports a reverted execution
    """
    payload = {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1,
    }

    log.debug("rpc.request", method=method, url=url)
    try:
        response = client.post(url, json=payload)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as exc:
        raise NetworkError(f"RPC request {method} to {url} failed: {exc}") from exc
    except ValueError as exc:
        raise NetworkError(f"RPC response for {method} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise NetworkError(f"RPC response for {method} is not a JSON object: {data!r}")

    if "error" in data:
        error = data["error"]
        message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
        if "revert" in message.lower():
            raise ContractCallError(f"{method}: {message}")
        raise NetworkError(f"RPC error: {error}")

    return data.get("result")


def find_function(abi: list, function_name: str) -> dict:
    """Find a function entry in an ABI by name."""
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    raise ArtifactError(f"Function {function_name} not found in ABI")


def function_selector(signature: str) -> bytes:
    """First 4 bytes of keccak256 of the canonical signature."""
    # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
    return keccak(signature.encode("utf-8"))[:4]


def encode_function_call(abi: list, function_name: str, args: list) -> str:
    """
    ABI-encode a function call.

    Returns:
        0x-prefixed hex encoded calldata
    """
    func = find_function(abi, function_name)

    input_types = [inp["type"] for inp in func.get("inputs", [])]
    if len(args) != len(input_types):
        raise ArgumentError(
            f"{function_name} expects {len(input_types)} argument(s), got {len(args)}"
        )

    selector = function_selector(f"{function_name}({','.join(input_types)})")

    try:
        encoded_args = encode(input_types, args) if args else b""
    except EncodingError as exc:
        raise ArgumentError(f"Cannot encode arguments for {function_name}: {exc}") from exc

    return "0x" + selector.hex() + encoded_args.hex()


def decode_function_result(abi: list, function_name: str, data: str) -> Any:
    """
    ABI-decode a function call result.

    Returns:
        Decoded result (single value or tuple), or None for no outputs
    """
    func = find_function(abi, function_name)

    output_types = [out["type"] for out in func.get("outputs", [])]
    if not output_types:
        return None

    try:
        raw = bytes.fromhex(data[2:] if data.startswith("0x") else data)
    except (TypeError, ValueError) as exc:
        raise NetworkError(f"Malformed {function_name} result from node: {data!r}") from exc
    try:
        decoded = decode(output_types, raw)
    except DecodingError as exc:
        raise ContractCallError(f"Cannot decode {function_name} result: {exc}") from exc

    if len(decoded) == 1:
        return decoded[0]
    return decoded


def hex_to_int(value: Optional[str]) -> int:
    if value is None:
        raise NetworkError("RPC returned an empty result")
    try:
        return int(value, 16)
    except (TypeError, ValueError) as exc:
        raise NetworkError(f"Malformed RPC result: {value!r}") from exc
