"""
Ownable capability - ownership commands shared by every Ownable contract.

The commands are built per contract so help text and examples name it; the
address they act on is resolved at run time from ``--address`` or the
contract's configuration key.
"""

from __future__ import annotations

from ._base import ADDRESS, Argument, CommandSpec, Contract, getter, setter


def getter_commands(contract: Contract) -> tuple[CommandSpec, ...]:
    return (
        getter(
            "owner",
            f"Gets the owner of the {contract.label} contract",
            f"t0ken {contract.name} owner",
        ),
    )


def setter_commands(contract: Contract) -> tuple[CommandSpec, ...]:
    return (
        setter(
            "transferOwnership",
            f"Transfers ownership of the {contract.label} contract to <newOwner>",
            f"t0ken {contract.name} transferOwnership 0xf01ff29dcbee147e9ca151a281bfdf136f66a45b",
            Argument("newOwner", ADDRESS),
        ),
    )
