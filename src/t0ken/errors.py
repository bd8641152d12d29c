"""
Error taxonomy for the t0ken CLI.

Every error is terminal for the current command.  Errors derive from
``click.ClickException`` so that click prints ``Error: <message>`` to
stderr and exits with the class' ``exit_code``.
"""

from __future__ import annotations

import click


class T0kenError(click.ClickException):
    exit_code: int = 1


class ArgumentError(T0kenError):
    """Malformed argument, detected before any network access."""

    exit_code = 2


class ResolutionError(T0kenError):
    """An alias or contract address could not be resolved."""

    exit_code = 3


class NetworkError(T0kenError):
    """The chain connection failed or returned a JSON-RPC error."""

    exit_code = 4


class ContractCallError(T0kenError):
    """The node rejected or reverted a contract call or transaction."""

    exit_code = 5


class ArtifactError(T0kenError):
    exit_code = 6
