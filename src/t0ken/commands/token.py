"""
T0ken - commands for the tokenized-security (ERC-20) contract.

Getters print the value returned by the contract; address-typed results are
printed as checksummed hex.  Setters sign and submit a transaction from the
PRIVATE_KEY account and print its hash.
"""

from __future__ import annotations

import click

from . import lockable, ownable
from ._base import ADDRESS, UINT, Argument, Contract, getter, setter
from .registry import assemble, introspection_commands, mount

CONTRACT = Contract(
    name="token",
    artifact="T0ken",
    config_key="T0KEN_ADDRESS",
    label="T0ken",
)

_EXAMPLE_ADDRESS = "0xf01ff29dcbee147e9ca151a281bfdf136f66a45b"

GETTERS = (
    getter(
        "allowance",
        "Gets the amount of tokens the <owner> has approved the <spender> to transfer",
        f"t0ken token allowance {_EXAMPLE_ADDRESS} 0xa01a0a93716633058d69a28fbd472fd40e7c6b79",
        Argument("owner", ADDRESS),
        Argument("spender", ADDRESS),
    ),
    getter(
        "balanceOf",
        "Gets the balance of the given <account>",
        f"t0ken token balanceOf {_EXAMPLE_ADDRESS}",
        Argument("account", ADDRESS),
    ),
    getter(
        "cancellations",
        "Gets the replacement address of the given <account>, or a zero-address when it has not been cancelled",
        f"t0ken token cancellations {_EXAMPLE_ADDRESS}",
        Argument("account", ADDRESS),
    ),
    getter(
        "compliance",
        "Gets the compliance contract address for the t0ken",
        "t0ken token compliance",
    ),
    getter(
        "decimals",
        "Gets the number of decimals the t0ken is set to",
        "t0ken token decimals",
    ),
    getter(
        "getSuperseded",
        "Gets the superseded address of the given <account>",
        f"t0ken token getSuperseded {_EXAMPLE_ADDRESS}",
        Argument("account", ADDRESS),
    ),
    getter(
        "holderAt",
        "Gets the holder address at the given <index>",
        "t0ken token holderAt 5",
        Argument("index", UINT),
    ),
    getter(
        "isHolder",
        "Checks if the given <account> is a current holder",
        f"t0ken token isHolder {_EXAMPLE_ADDRESS}",
        Argument("account", ADDRESS),
    ),
    getter(
        "isSuperseded",
        "Checks if the <account> is superseded by another",
        f"t0ken token isSuperseded {_EXAMPLE_ADDRESS}",
        Argument("account", ADDRESS),
    ),
    getter("issuer", "Gets the issuer of the t0ken", "t0ken token issuer"),
    getter(
        "issuingFinished",
        "Returns if issuing has been finished",
        "t0ken token issuingFinished",
    ),
    getter("name", "Gets the name of the t0ken", "t0ken token name"),
    getter(
        "shareholders",
        "Gets the total number of shareholders",
        "t0ken token shareholders",
    ),
    getter("symbol", "Gets the symbol of the t0ken", "t0ken token symbol"),
    getter("totalSupply", "Gets the total supply", "t0ken token totalSupply"),
)

SETTERS = (
    setter(
        "transfer",
        "Transfers <amount> tokens from the signing account to <to>",
        f"t0ken token transfer {_EXAMPLE_ADDRESS} 100",
        Argument("to", ADDRESS),
        Argument("amount", UINT),
    ),
    setter(
        "approve",
        "Approves <spender> to transfer up to <amount> tokens of the signing account",
        f"t0ken token approve {_EXAMPLE_ADDRESS} 100",
        Argument("spender", ADDRESS),
        Argument("amount", UINT),
    ),
)

REGISTRY = assemble(
    introspection_commands(CONTRACT),
    GETTERS,
    lockable.getter_commands(CONTRACT),
    ownable.getter_commands(CONTRACT),
)

SETTER_REGISTRY = assemble(
    (),
    SETTERS,
    lockable.setter_commands(CONTRACT),
    ownable.setter_commands(CONTRACT),
)


@click.group()
def token() -> None:
    """T0ken contract getters and transactions.

    \b
    Examples:
      t0ken token symbol
      t0ken token balanceOf 0xf01f... --address 0xAbC...
      t0ken token transfer 0xa01a... 100 --nonce 12
    """


mount(token, REGISTRY, CONTRACT)
mount(token, SETTER_REGISTRY, CONTRACT)
