"""
t0ken CLI

Command-line client for the T0ken tokenized-security contract and the
BrokerDealer registry contract.

Commands:
  token   - T0ken getters and transactions
  broker  - BrokerDealer registry getters and transactions
  nonce   - Nonce utilities
  whoami  - Show the signing address
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from . import __version__
from .commands import register_commands
from .commands._context import AppContext
from .config import Settings


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="t0ken")
@click.option(
    "--rpc-url",
    envvar="T0KEN_RPC_URL",
    default=None,
    help="JSON-RPC endpoint of the node",
)
@click.option(
    "--env-file",
    "env_path",
    envvar="T0KEN_ENV_FILE",
    default=None,
    help="Config .env file (default: ~/.t0ken/.env)",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    rpc_url: Optional[str],
    env_path: Optional[str],
    verbose: bool,
    log_json: bool,
) -> None:
    """t0ken — T0ken and BrokerDealer registry contract client."""
    settings = Settings.from_cli(
        rpc_url=rpc_url,
        env_path=env_path,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    ctx.call_on_close(ctx.obj.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


# ============ Identity ============


@cli.command()
@click.pass_obj
def whoami(app: AppContext) -> None:
    """Show the signing address."""
    click.echo(f"Address: {app.account.address}")


# ============ Entry Points ============


def main() -> None:
    """t0ken CLI entry point."""
    # Ensure UTF-8 output on Windows
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass  # Fallback: non-tty
    cli()


if __name__ == "__main__":
    main()
