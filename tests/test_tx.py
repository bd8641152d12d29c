"""Tests for transaction building and submission."""

from __future__ import annotations

import pytest
from eth_account import Account

from t0ken.chain.abi import load_abi
from t0ken.chain.nonce import NonceAllocator
from t0ken.chain.tx import DEFAULT_GAS_LIMIT, Transactor
from t0ken.errors import ContractCallError

from conftest import TEST_PRIVATE_KEY, FakeChain

TOKEN = "0xabc0000000000000000000000000000000000abc"
HOLDER = "0xf01ff29dcbee147e9ca151a281bfdf136f66a45b"


@pytest.fixture()
def transactor() -> Transactor:
    chain = FakeChain()
    account = Account.from_key(TEST_PRIVATE_KEY)
    chain.pending_nonces[account.address.lower()] = 4
    return Transactor(chain, account, NonceAllocator(chain, account.address))


class TestBuild:
    def test_uses_pending_nonce(self, transactor: Transactor) -> None:
        tx = transactor.build(TOKEN, load_abi("T0ken"), "lock", [])
        assert tx["nonce"] == 4
        assert tx["gas"] == DEFAULT_GAS_LIMIT
        assert tx["chainId"] == 1337
        assert tx["data"].startswith("0x")

    def test_uses_override(self, transactor: Transactor) -> None:
        transactor.nonces.set_override(12)
        tx = transactor.build(TOKEN, load_abi("T0ken"), "transfer", [HOLDER, 1])
        assert tx["nonce"] == 12
        assert transactor.connection.nonce_queries == []

    def test_configured_chain_id(self) -> None:
        chain = FakeChain()
        account = Account.from_key(TEST_PRIVATE_KEY)
        transactor = Transactor(chain, account, NonceAllocator(chain, account.address), chain_id=5)
        tx = transactor.build(TOKEN, load_abi("T0ken"), "unlock", [], gas_limit=60_000)
        assert tx["chainId"] == 5
        assert tx["gas"] == 60_000


class TestSend:
    def test_success(self, transactor: Transactor) -> None:
        result = transactor.transact(TOKEN, load_abi("T0ken"), "lock", [])
        assert result["status"] == 1
        assert result["nonce"] == 4
        assert transactor.connection.sent[0].startswith("0x")

    def test_revert(self, transactor: Transactor) -> None:
        transactor.connection.receipt_status = "0x0"
        with pytest.raises(ContractCallError):
            transactor.transact(TOKEN, load_abi("T0ken"), "lock", [])

    def test_no_wait(self, transactor: Transactor) -> None:
        result = transactor.transact(TOKEN, load_abi("T0ken"), "lock", [], wait=False)
        assert "receipt" not in result
