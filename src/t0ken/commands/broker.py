"""BrokerDealer registry - commands for the broker-dealer registry contract."""

from __future__ import annotations

import click

from . import lockable, ownable
from ._base import Contract, getter
from .registry import assemble, introspection_commands, mount

CONTRACT = Contract(
    name="broker",
    artifact="BrokerDealerRegistry",
    config_key="BROKER_DEALER_REGISTRY_ADDRESS",
    label="BrokerDealer registry",
)

GETTERS = (
    getter(
        "storage",
        "Gets the Storage contract address",
        "t0ken broker storage",
        function="store",
    ),
)

REGISTRY = assemble(
    introspection_commands(CONTRACT),
    GETTERS,
    ownable.getter_commands(CONTRACT),
    lockable.getter_commands(CONTRACT),
)

SETTER_REGISTRY = assemble(
    (),
    (),
    ownable.setter_commands(CONTRACT),
    lockable.setter_commands(CONTRACT),
)


@click.group()
def broker() -> None:
    """BrokerDealer registry contract getters and transactions."""


mount(broker, REGISTRY, CONTRACT)
mount(broker, SETTER_REGISTRY, CONTRACT)
