"""
Command implementations for the t0ken CLI.

Each module corresponds to a top-level CLI command:
- token:  T0ken contract getters and transactions
- broker: BrokerDealer registry getters and transactions
- nonce:  nonce utilities

``ownable`` and ``lockable`` build the capability commands shared by both
contracts; ``registry`` assembles and mounts them.
"""

from __future__ import annotations

import click


def register_commands(cli: click.Group) -> None:
    """Attach every top-level command group to the root group."""
    from .broker import broker
    from .nonce import nonce
    from .token import token

    cli.add_command(token)
    cli.add_command(broker)
    cli.add_command(nonce)
