"""
Configuration for the Oraculum RPC layer.

Settings come from environment variables, optionally seeded from
~/.oraculum/.env.  Nothing is cached: every getter reads the environment
at call time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Default config directory
ORACULUM_DIR = Path.home() / ".oraculum"
ORACULUM_ENV = ORACULUM_DIR / ".env"

DEFAULT_RPC_URL = "http://localhost:8545"
DEFAULT_RPC_TIMEOUT = 30.0


def load_env(env_path: Optional[Path] = None) -> bool:
    """
    Load settings from a .env file into the environment.

    Variables that are already set win over the file.

    Args:
        env_path: Path to .env file (default: ~/.oraculum/.env)

    Returns:
        True if a file was found and loaded
    """
    env_path = env_path or ORACULUM_ENV
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)


def get_rpc_url() -> str:
    """Get the RPC URL from environment or default."""
    return os.environ.get("ETH_URL", DEFAULT_RPC_URL)


def get_rpc_timeout() -> float:
    """Get the per-request RPC timeout (seconds) from environment or default."""
    raw = os.environ.get("ETH_RPC_TIMEOUT")
    if raw is None:
        return DEFAULT_RPC_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"ETH_RPC_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"ETH_RPC_TIMEOUT must be positive, got {raw!r}")
    return timeout
