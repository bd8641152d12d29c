"""
Contract command registries.

A registry is the ordered tuple of command descriptors for one contract:

    [abi, bin] ++ contract-specific commands ++ capability command sets

``mount`` turns a registry into click commands under the contract's group
and attaches ``--address`` to every descriptor tagged ``address_override``.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

import click

from ..chain.abi import abi_text, load_abi, load_bytecode
from ..chain.session import CallSession
from ._base import INTROSPECTION, SETTER, UINT, CommandSpec, Contract, introspection
from ._context import AppContext


def introspection_commands(contract: Contract) -> tuple[CommandSpec, CommandSpec]:
    """The ``abi`` and ``bin`` commands; static output, no network access."""
    return (
        introspection(
            "abi",
            f"Outputs the {contract.label} ABI",
            f"t0ken {contract.name} abi",
            lambda c: abi_text(c.artifact),
        ),
        introspection(
            "bin",
            f"Outputs the {contract.label} Binary (read from T0KEN_ARTIFACTS when set)",
            f"t0ken {contract.name} bin",
            lambda c: load_bytecode(c.artifact),
        ),
    )


def assemble(
    introspection_set: Sequence[CommandSpec],
    specific: Sequence[CommandSpec],
    *capability_sets: Sequence[CommandSpec],
) -> tuple[CommandSpec, ...]:
    """Concatenate command sets into an immutable registry."""
    registry: list[CommandSpec] = [*introspection_set, *specific]
    for capability_set in capability_sets:
        registry.extend(capability_set)

    names = [spec.name for spec in registry]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Duplicate commands in registry: {', '.join(duplicates)}")

    return tuple(registry)


def address_help(contract: Contract) -> str:
    return (
        f'address of the {contract.label} contract '
        f'(default "[{contract.config_key}] value from config")'
    )


def attach_address_flags(
    commands: Sequence[click.Command],
    registry: Sequence[CommandSpec],
    contract: Contract,
) -> None:
    """Give every command whose descriptor is tagged ``address_override``
    a single ``--address`` option."""
    for spec, command in zip(registry, commands, strict=True):
        if not spec.address_override:
            continue
        if any(param.name == "address" for param in command.params):
            continue
        command.params.append(
            click.Option(["--address"], default="", help=address_help(contract))
        )


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return "\n".join(format_value(item) for item in value)
    return str(value)


def run(
    app: AppContext,
    spec: CommandSpec,
    contract: Contract,
    values: list,
    address: Optional[str] = None,
    nonce: int = 0,
    gas_limit: Optional[int] = None,
) -> None:
    """Execute a descriptor and print its result."""
    if spec.kind == INTROSPECTION:
        click.echo(spec.body(contract))
        return

    # Resolve before any network access
    target = app.contract_address(contract, address)
    abi = load_abi(contract.artifact)

    if spec.kind == SETTER:
        if nonce:
            app.nonces.set_override(nonce)
        result = app.transactor.transact(
            target, abi, spec.function, values, gas_limit=gas_limit
        )
        click.echo(result["tx_hash"])
        return

    session = CallSession(app.connection, target, abi)
    click.echo(format_value(session.call(spec.function, *values)))


def build_command(spec: CommandSpec, contract: Contract) -> click.Command:
    """Build the click command for one descriptor (without ``--address``)."""
    arguments = [click.Argument([arg.name], type=arg.type) for arg in spec.arguments]
    params: list[click.Parameter] = list(arguments)

    if spec.kind == SETTER:
        params.append(
            click.Option(
                ["--nonce"],
                type=UINT,
                default=0,
                show_default=True,
                help="manually set the nonce for the transaction (0 uses the pending nonce)",
            )
        )
        params.append(
            click.Option(["--gas-limit"], type=UINT, default=None, help="Gas limit")
        )

    def callback(**kwargs: Any) -> None:
        app = click.get_current_context().find_object(AppContext)
        if app is None:
            raise click.UsageError(f"'{spec.name}' must run under the t0ken command")
        values = [kwargs[argument.name] for argument in arguments]
        run(
            app,
            spec,
            contract,
            values,
            address=kwargs.get("address") or None,
            nonce=kwargs.get("nonce") or 0,
            gas_limit=kwargs.get("gas_limit"),
        )

    return click.Command(
        spec.name,
        callback=callback,
        params=params,
        help=spec.short,
        short_help=spec.short,
        epilog=f"Example: {spec.example}",
    )


def mount(
    group: click.Group,
    registry: Iterable[CommandSpec],
    contract: Contract,
) -> list[click.Command]:
    """Add a registry's commands to ``group``."""
    registry = tuple(registry)
    commands = [build_command(spec, contract) for spec in registry]
    attach_address_flags(commands, registry, contract)
    for command in commands:
        group.add_command(command)
    return commands
