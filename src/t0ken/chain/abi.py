"""
ABI Loader - Loads contract ABIs and bytecode from compiled artifacts.

Artifacts are JSON files named ``<Contract>.json`` with an ``abi`` list and a
``bytecode`` entry (either a hex string or ``{"object": "0x..."}``, as
written by Foundry).  They are read from T0KEN_ARTIFACTS when set, otherwise
from the ``contracts/`` directory shipped with the package.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from ..errors import ArtifactError


PACKAGED_ARTIFACTS = Path(__file__).resolve().parent.parent / "contracts"


def artifacts_dir() -> Path:
    override = os.environ.get("T0KEN_ARTIFACTS")
    if override:
        return Path(override).expanduser()
    return PACKAGED_ARTIFACTS


@lru_cache(maxsize=16)
def _read_artifact(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ArtifactError(f"Contract artifact not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            artifact = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ArtifactError(f"Cannot read contract artifact {path}: {exc}") from exc

    if not isinstance(artifact, dict) or not isinstance(artifact.get("abi"), list):
        raise ArtifactError(f"Contract artifact {path} has no ABI")
    return artifact


def load_artifact(contract_name: str) -> dict[str, Any]:
    """
    Load the artifact for a contract.

    Args:
        contract_name: Contract name (e.g., "T0ken", "BrokerDealerRegistry")

    Raises:
        ArtifactError: If the artifact is missing or malformed
    """
    return _read_artifact(artifacts_dir() / f"{contract_name}.json")


def load_abi(contract_name: str) -> list[dict[str, Any]]:
    """Load the ABI for a contract as a list of dicts."""
    return load_artifact(contract_name)["abi"]


def abi_text(contract_name: str) -> str:
    """ABI as compact JSON text, the form printed by the ``abi`` commands."""
    return json.dumps(load_abi(contract_name), separators=(",", ":"))


def load_bytecode(contract_name: str) -> str:
    """
    Load deployment bytecode for a contract.

    Returns:
        Hex-encoded bytecode string (0x-prefixed)

    Raises:
        ArtifactError: If the artifact carries no bytecode
    """
    bytecode = load_artifact(contract_name).get("bytecode", "")
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object", "")

    if not bytecode or bytecode == "0x":
        raise ArtifactError(
            f"No bytecode in artifact for {contract_name}. "
            "Point T0KEN_ARTIFACTS at the compiled contracts."
        )

    if not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode
    return bytecode
