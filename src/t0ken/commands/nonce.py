"""
Nonce utilities.

``next`` prints the pending nonce the node reports for an address or a
local keystore alias.  Transaction commands take ``--nonce`` instead.
"""

from __future__ import annotations

import click

from ..keys import resolve_address
from ._context import AppContext


@click.group()
def nonce() -> None:
    """Nonce utilities."""


@nonce.command("next", epilog="Example: t0ken nonce next 0xf01ff29dcbee147e9ca151a281bfdf136f66a45b")
@click.argument("address")
@click.pass_obj
def next_nonce(app: AppContext, address: str) -> None:
    """Gets the next nonce for an <address> or keystore alias."""
    resolved = resolve_address(address)
    click.echo(app.connection.pending_nonce_at(resolved))
