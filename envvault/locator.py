"""
Deciding whether a vault decryption should be attempted, and where the vault is.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from envvault.config import Config, get_config

logger = logging.getLogger(__name__)

MISSING_KEY_WARNING = (
    "You are using dotenv-vault in a production environment, but you haven't set "
    "DOTENV_KEY. Did you forget? Run 'npx dotenv-vault keys' to view your DOTENV_KEY."
)
MISSING_VAULT_WARNING = (
    "You set a DOTENV_KEY but you are missing a .env.vault file. Did you forget to "
    "build it? Run 'npx dotenv-vault build'."
)


@dataclass(frozen=True)
class VaultLocation:
    """Credential material and vault path found for this process."""

    dotenv_key: str | None
    vault_path: Path

    def should_decrypt(self, debug: bool = False) -> bool:
        """Check the vault exists and warn about misconfiguration.

        Returns False when the plaintext .env fallback should be used instead.
        """
        if self.dotenv_key is None:
            if not debug:
                logger.warning(MISSING_KEY_WARNING)
            return False

        if self.vault_path.exists():
            logger.info("Loading env from encrypted %s", self.vault_path.name)
            return True

        logger.warning(MISSING_VAULT_WARNING)
        return False


def locate(
    config: Config | None = None,
    cwd: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> VaultLocation:
    """Read DOTENV_KEY and compute the expected .env.vault path."""
    cfg = config or get_config()
    env = os.environ if environ is None else environ

    raw = env.get(cfg.key_var)
    dotenv_key = raw.strip() if raw is not None else None
    if not dotenv_key:
        dotenv_key = None

    base = Path(cwd) if cwd is not None else Path.cwd()
    return VaultLocation(dotenv_key=dotenv_key, vault_path=base / cfg.vault_filename)
