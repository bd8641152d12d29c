"""Shared fixtures: an isolated environment and an in-memory chain."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import pytest
from click.testing import CliRunner

TEST_PRIVATE_KEY = "0x" + "11" * 32

_CONFIG_VARS = (
    "PRIVATE_KEY",
    "CHAIN_ID",
    "T0KEN_ADDRESS",
    "BROKER_DEALER_REGISTRY_ADDRESS",
    "T0KEN_ARTIFACTS",
    "T0KEN_RPC_URL",
)


class FakeChain:
    """Stands in for ``Connection``: canned results, recorded requests."""

    def __init__(self) -> None:
        self.created = 0
        self.results: dict[str, Any] = {}
        self.pending_nonces: dict[str, int] = {}
        self.calls: list[tuple[str, str, list]] = []
        self.nonce_queries: list[str] = []
        self.sent: list[str] = []
        self.receipt_status = "0x1"
        self.closed = 0

    def __call__(self, rpc_url: str, client: Optional[Any] = None) -> "FakeChain":
        self.created += 1
        self.rpc_url = rpc_url
        return self

    def call(self, address: str, abi: list, function_name: str, args: list) -> Any:
        self.calls.append((address, function_name, list(args)))
        return self.results[function_name]

    def pending_nonce_at(self, address: str) -> int:
        self.nonce_queries.append(address)
        return self.pending_nonces.get(address.lower(), 0)

    def ensure_connected(self) -> None:
        pass

    def close(self) -> None:
        self.closed += 1

    def chain_id(self) -> int:
        return 1337

    def gas_price(self) -> int:
        return 1_000_000_000

    def send_raw_transaction(self, raw_tx: str) -> str:
        self.sent.append(raw_tx)
        return "0x" + "ab" * 32

    def wait_for_receipt(self, tx_hash: str, timeout: int = 120) -> dict:
        return {"transactionHash": tx_hash, "status": self.receipt_status}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep the user's ~/.t0ken and environment out of every test."""
    for var in _CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("T0KEN_ENV_FILE", str(tmp_path / "missing.env"))

    keystore_dir = tmp_path / "keystore"
    keystore_dir.mkdir()
    monkeypatch.setattr("t0ken.keys.KEYSTORE_DIR", keystore_dir)
    return keystore_dir


@pytest.fixture()
def keystore_dir(isolated_env: Path) -> Path:
    return isolated_env


@pytest.fixture()
def chain(monkeypatch: pytest.MonkeyPatch) -> FakeChain:
    fake = FakeChain()
    monkeypatch.setattr("t0ken.commands._context.Connection", fake)
    return fake


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()
