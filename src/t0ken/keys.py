"""
Signing account and address alias resolution.

The signing account is loaded from PRIVATE_KEY (environment or ~/.t0ken/.env).

Aliases map to Ethereum keystore v3 files stored as
``~/.t0ken/keystore/<alias>.json``.  Only the public ``address`` field is
read for resolution; keystores are never decrypted here.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import is_hex_address, to_checksum_address

from .config import T0KEN_DIR, T0KEN_ENV
from .errors import ResolutionError


KEYSTORE_DIR = T0KEN_DIR / "keystore"


def load_private_key() -> str:
    """
    Load the signing private key from the environment.

    ``Settings.from_cli`` has already merged the ``.env`` file into the
    environment by the time commands run.

    Returns:
        0x-prefixed hex private key

    Raises:
        ResolutionError: If PRIVATE_KEY is not set
    """
    private_key = os.environ.get("PRIVATE_KEY", "").strip()
    if not private_key:
        raise ResolutionError(
            f"PRIVATE_KEY not found. Set PRIVATE_KEY in the environment or in {T0KEN_ENV}"
        )

    # Ensure 0x prefix
    if not private_key.startswith("0x"):
        private_key = "0x" + private_key

    return private_key


def get_account(private_key: Optional[str] = None) -> LocalAccount:
    """
    Get an eth-account LocalAccount from a private key.

    Args:
        private_key: 0x-prefixed hex private key.
                     If None, loads from the environment.
    """
    if private_key is None:
        private_key = load_private_key()
    try:
        return Account.from_key(private_key)
    except (ValueError, TypeError) as exc:
        raise ResolutionError(f"Invalid PRIVATE_KEY: {exc}") from exc


def address_for_keystore_alias(alias: str, keystore_dir: Optional[Path] = None) -> str:
    """
    Resolve a local keystore alias to its checksummed address.

    Raises:
        ResolutionError: If no keystore exists for the alias, or it has no
            valid address field
    """
    keystore_dir = keystore_dir or KEYSTORE_DIR
    path = keystore_dir / f"{alias}.json"
    if not path.is_file():
        raise ResolutionError(f"No keystore found for alias '{alias}' in {keystore_dir}")

    try:
        with path.open("r", encoding="utf-8") as f:
            keystore = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ResolutionError(f"Cannot read keystore {path}: {exc}") from exc

    address = keystore.get("address", "") if isinstance(keystore, dict) else ""
    if address and not address.startswith("0x"):
        address = "0x" + address
    if not is_hex_address(address):
        raise ResolutionError(f"Keystore {path} has no valid address")

    return to_checksum_address(address)


def resolve_address(token: str, keystore_dir: Optional[Path] = None) -> str:
    """Resolve a hex address or a keystore alias to a checksummed address."""
    if is_hex_address(token):
        return to_checksum_address(token)
    return address_for_keystore_alias(token, keystore_dir=keystore_dir)
