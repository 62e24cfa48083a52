"""
Centralized configuration for envvault.

All settings come from environment variables with sensible defaults.

Usage:
    from envvault.config import get_config
    cfg = get_config()
    print(cfg.key_var)          # "DOTENV_KEY"
    print(cfg.vault_filename)   # ".env.vault"
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Top-level envvault configuration."""

    # Name of the variable holding the comma-separated credential URIs
    key_var: str = "DOTENV_KEY"

    # Files looked up in the working directory
    vault_filename: str = ".env.vault"
    env_filename: str = ".env"

    # Development mode silences the "no DOTENV_KEY" warning
    debug: bool = False

    log_level: str = "INFO"


# Singleton
_config: Config | None = None


def get_config() -> Config:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def _load_from_env() -> Config:
    """Load configuration from environment variables."""
    return Config(
        key_var=os.environ.get("ENVVAULT_KEY_VAR", "DOTENV_KEY"),
        vault_filename=os.environ.get("ENVVAULT_VAULT_FILE", ".env.vault"),
        env_filename=os.environ.get("ENVVAULT_ENV_FILE", ".env"),
        debug=os.environ.get("ENVVAULT_DEBUG", "").strip().lower() in _TRUTHY,
        log_level=os.environ.get("ENVVAULT_LOG_LEVEL", "INFO").upper(),
    )


def reset_config() -> None:
    """Reset the singleton config (for testing)."""
    global _config
    _config = None
