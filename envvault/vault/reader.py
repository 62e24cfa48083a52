"""
Reading .env.vault files.

The vault uses the regular .env syntax, so parsing is delegated to
python-dotenv. Entries are kept in file order; lookups return the first match.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from dotenv.parser import parse_stream

from envvault.errors import DotenvError, EnvironmentNotFoundError
from envvault.vault.models import VaultEntry

logger = logging.getLogger(__name__)


class VaultFile:
    """Parsed contents of a .env.vault file."""

    def __init__(self, entries: list[VaultEntry], path: Path | None = None) -> None:
        self.entries = entries
        self.path = path

    def extract(self, vault_key: str) -> str:
        """Return the base64 ciphertext stored under ``vault_key``."""
        for entry in self.entries:
            if entry.key == vault_key:
                return entry.value
        raise EnvironmentNotFoundError(vault_key)

    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]


def parse_bindings(text: str) -> list[tuple[str, str]]:
    """Ordered ``(key, raw value)`` pairs of a .env-format document.

    Duplicates are kept. Unparsable lines and bare ``KEY`` lines are skipped.
    """
    bindings: list[tuple[str, str]] = []
    for binding in parse_stream(io.StringIO(text)):
        if binding.error:
            logger.debug("Skipping unparsable line: %r", binding.original.string)
            continue
        if binding.key is None or binding.value is None:
            continue
        bindings.append((binding.key, binding.value))
    return bindings


def parse_vault(text: str, path: Path | None = None) -> VaultFile:
    """Parse vault text. Lines python-dotenv cannot parse are skipped."""
    entries = [VaultEntry(key=key, value=value) for key, value in parse_bindings(text)]
    return VaultFile(entries, path=path)


def read_vault(path: Path | str) -> VaultFile:
    """Read and parse a vault file. OSError propagates to the caller."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise DotenvError(f"{path} is not valid UTF-8") from e
    return parse_vault(text, path=path)


def extract_entry(path: Path | str, vault_key: str) -> str:
    """One-shot lookup: read ``path`` and return the entry for ``vault_key``."""
    return read_vault(path).extract(vault_key)
