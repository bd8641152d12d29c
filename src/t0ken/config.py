"""
Runtime configuration for the t0ken CLI.

Values come from, in order of precedence:
1. Command-line options (``--rpc-url``, ``--env-file``, ...)
2. The process environment
3. The ``.env`` file (default: ~/.t0ken/.env)

The ``.env`` file never overrides variables already set in the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Default config directory
T0KEN_DIR = Path.home() / ".t0ken"
T0KEN_ENV = T0KEN_DIR / ".env"

DEFAULT_RPC_URL = "http://127.0.0.1:8545"


@dataclass(frozen=True)
class Settings:
    """Resolved settings for a single CLI invocation."""

    rpc_url: str = DEFAULT_RPC_URL
    env_path: Path = T0KEN_ENV
    chain_id: Optional[int] = None
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(
        cls,
        *,
        rpc_url: Optional[str] = None,
        env_path: Optional[str] = None,
        verbose: bool = False,
        log_json: bool = False,
    ) -> "Settings":
        """Load the ``.env`` file and merge it with command-line options."""
        path = Path(env_path).expanduser() if env_path else T0KEN_ENV
        if path.exists():
            load_dotenv(path, override=False)

        chain_id = os.environ.get("CHAIN_ID")
        return cls(
            rpc_url=rpc_url or os.environ.get("T0KEN_RPC_URL", DEFAULT_RPC_URL),
            env_path=path,
            chain_id=int(chain_id) if chain_id else None,
            verbose=verbose,
            log_json=log_json,
        )

    def get(self, key: str) -> Optional[str]:
        """Return a configuration value, or None when unset or empty."""
        value = os.environ.get(key, "").strip()
        return value or None
