"""Unit tests for the nonce allocator."""

from __future__ import annotations

import pytest

from t0ken.chain.nonce import NonceAllocator
from t0ken.errors import ArgumentError, NetworkError

ACCOUNT = "0x19E7E376E7C213B7E7e7e46cc70A5dD086DAff2A"


class StubSource:
    """Reports ``start``, ``start + 1``, ... on successive queries."""

    def __init__(self, start: int = 0, reachable: bool = True) -> None:
        self.next_value = start
        self.reachable = reachable
        self.queries: list[str] = []
        self.connect_checks = 0

    def pending_nonce_at(self, address: str) -> int:
        if not self.reachable:
            raise NetworkError("connection refused")
        self.queries.append(address)
        value = self.next_value
        self.next_value += 1
        return value

    def ensure_connected(self) -> None:
        self.connect_checks += 1
        if not self.reachable:
            raise NetworkError("connection refused")


class TestLiveNonce:
    """Without an override every read asks the chain."""

    def test_returns_pending_nonce(self) -> None:
        source = StubSource(start=7)
        allocator = NonceAllocator(source, ACCOUNT)
        assert allocator.next_nonce() == 7
        assert source.queries == [ACCOUNT]

    def test_no_caching_between_reads(self) -> None:
        source = StubSource(start=5)
        allocator = NonceAllocator(source, ACCOUNT)
        assert allocator.next_nonce() == 5
        assert allocator.next_nonce() == 6
        assert len(source.queries) == 2

    def test_query_failure_propagates(self) -> None:
        allocator = NonceAllocator(StubSource(reachable=False), ACCOUNT)
        with pytest.raises(NetworkError):
            allocator.next_nonce()


class TestOverride:
    """An explicit nonce bypasses the chain until cleared."""

    def test_override_is_returned_verbatim(self) -> None:
        source = StubSource(start=3)
        allocator = NonceAllocator(source, ACCOUNT)
        allocator.set_override(42)
        assert allocator.next_nonce() == 42
        assert allocator.next_nonce() == 42
        assert source.queries == []

    def test_setting_override_needs_no_connection(self) -> None:
        source = StubSource(reachable=False)
        allocator = NonceAllocator(source, ACCOUNT)
        allocator.set_override(9)
        assert allocator.next_nonce() == 9
        assert source.connect_checks == 0

    def test_clear_forces_fresh_query(self) -> None:
        source = StubSource(start=5)
        allocator = NonceAllocator(source, ACCOUNT)
        assert allocator.next_nonce() == 5
        allocator.set_override(0)
        assert allocator.next_nonce() == 6

    def test_clear_after_override(self) -> None:
        source = StubSource(start=5)
        allocator = NonceAllocator(source, ACCOUNT)
        allocator.set_override(100)
        assert allocator.next_nonce() == 100
        allocator.set_override(0)
        assert allocator.override == 0
        assert allocator.next_nonce() == 5

    def test_clear_checks_connection(self) -> None:
        source = StubSource(reachable=False)
        allocator = NonceAllocator(source, ACCOUNT)
        allocator.set_override(8)
        with pytest.raises(NetworkError):
            allocator.set_override(0)
        assert allocator.override == 0

    def test_negative_override_rejected(self) -> None:
        allocator = NonceAllocator(StubSource(), ACCOUNT)
        with pytest.raises(ArgumentError):
            allocator.set_override(-1)

    def test_instances_are_independent(self) -> None:
        first = NonceAllocator(StubSource(start=1), ACCOUNT)
        second = NonceAllocator(StubSource(start=1), ACCOUNT)
        first.set_override(50)
        assert first.next_nonce() == 50
        assert second.next_nonce() == 1
