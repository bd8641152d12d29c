"""Lockable capability - lock/pause commands shared by every Lockable contract."""

from __future__ import annotations

from ._base import CommandSpec, Contract, getter, setter


def getter_commands(contract: Contract) -> tuple[CommandSpec, ...]:
    return (
        getter(
            "locked",
            f"Checks if the {contract.label} contract is locked",
            f"t0ken {contract.name} locked",
        ),
    )


def setter_commands(contract: Contract) -> tuple[CommandSpec, ...]:
    return (
        setter(
            "lock",
            f"Locks the {contract.label} contract",
            f"t0ken {contract.name} lock",
        ),
        setter(
            "unlock",
            f"Unlocks the {contract.label} contract",
            f"t0ken {contract.name} unlock",
        ),
    )
