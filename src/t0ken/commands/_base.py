"""Command descriptors and argument types shared by the contract registries.

A ``CommandSpec`` is a self-describing, immutable description of one
subcommand.  The ``address_override`` tag decides whether the command gets
the ``--address`` option; introspection commands are built untagged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import click
from eth_utils import is_hex_address, to_checksum_address


INTROSPECTION = "introspection"
GETTER = "getter"
SETTER = "setter"


@dataclass(frozen=True)
class Contract:
    """A deployed contract the CLI can talk to."""

    name: str  # CLI group name
    artifact: str  # artifact file stem (ABI / bytecode)
    config_key: str  # configuration key holding the default address
    label: str  # human-readable name used in help text


class AddressType(click.ParamType):
    """A 0x-prefixed hex address, normalized to its checksummed form."""

    name = "address"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> str:
        if isinstance(value, str) and is_hex_address(value):
            return to_checksum_address(value)
        self.fail(f"{value!r} is not a valid hex address", param, ctx)


class UintType(click.ParamType):
    """A non-negative base-10 integer."""

    name = "uint"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            number = value
        else:
            try:
                number = int(str(value), 10)
            except ValueError:
                self.fail(f"{value!r} is not a valid integer", param, ctx)
        if number < 0:
            self.fail(f"{value!r} must not be negative", param, ctx)
        return number


ADDRESS = AddressType()
UINT = UintType()


@dataclass(frozen=True)
class Argument:
    name: str
    type: click.ParamType


@dataclass(frozen=True)
class CommandSpec:
    """One subcommand of a contract registry.

    Getters and setters invoke ``function`` on the contract with the parsed
    positional arguments in order.  Introspection commands run ``body`` with
    the contract and print its text.
    """

    name: str
    short: str
    example: str
    kind: str = GETTER
    function: Optional[str] = None
    arguments: tuple[Argument, ...] = ()
    body: Optional[Callable[[Contract], str]] = None
    address_override: bool = True

    @property
    def usage(self) -> str:
        return " ".join([self.name, *(f"<{arg.name}>" for arg in self.arguments)])


def introspection(name: str, short: str, example: str, body: Callable[[Contract], str]) -> CommandSpec:
    return CommandSpec(
        name=name,
        short=short,
        example=example,
        kind=INTROSPECTION,
        body=body,
        address_override=False,
    )


def getter(
    name: str,
    short: str,
    example: str,
    *arguments: Argument,
    function: Optional[str] = None,
) -> CommandSpec:
    return CommandSpec(
        name=name,
        short=short,
        example=example,
        kind=GETTER,
        function=function or name,
        arguments=arguments,
    )


def setter(
    name: str,
    short: str,
    example: str,
    *arguments: Argument,
    function: Optional[str] = None,
) -> CommandSpec:
    return CommandSpec(
        name=name,
        short=short,
        example=example,
        kind=SETTER,
        function=function or name,
        arguments=arguments,
    )
