"""
Multi-key vault resolution.

DOTENV_KEY may hold several credential URIs separated by commas. Each one is
tried left to right against the vault; the first that parses, finds its
environment and decrypts wins. Per-candidate failures are recorded and logged
but never surfaced: if every candidate fails the caller gets InvalidKeyError.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path

from envvault.errors import InvalidKeyError, KeyNotFoundError, VaultError, VaultNotFoundError
from envvault.vault.credentials import parse_credential, split_credentials
from envvault.vault.crypto import decrypt
from envvault.vault.reader import VaultFile, read_vault

logger = logging.getLogger(__name__)


class ResolverState(enum.Enum):
    NOT_ATTEMPTED = "not_attempted"
    TRYING = "trying"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Attempt:
    """Outcome of trying one candidate URI."""

    index: int
    error: VaultError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MultiKeyResolver:
    """Resolve the decrypted vault contents for a comma-separated DOTENV_KEY."""

    def __init__(self, dotenv_key: str | None, vault_path: Path | str) -> None:
        self.dotenv_key = dotenv_key
        self.vault_path = Path(vault_path)
        self.state = ResolverState.NOT_ATTEMPTED
        self.attempts: list[Attempt] = []
        self._vault: VaultFile | None = None

    @property
    def vault(self) -> VaultFile:
        """The parsed vault, read once and shared by all candidates."""
        if self._vault is None:
            if not self.vault_path.exists():
                raise VaultNotFoundError()
            self._vault = read_vault(self.vault_path)
        return self._vault

    def resolve(self) -> bytes:
        """Return the first successful decryption, or raise InvalidKeyError."""
        if not self.dotenv_key:
            raise KeyNotFoundError()
        vault = self.vault
        self.attempts = []

        for index, uri in enumerate(split_credentials(self.dotenv_key)):
            self.state = ResolverState.TRYING
            plaintext, attempt = self._try(index, uri, vault)
            self.attempts.append(attempt)
            if plaintext is not None:
                self.state = ResolverState.SUCCEEDED
                return plaintext
            logger.debug("DOTENV_KEY candidate %d rejected: %s", index, attempt.error)

        self.state = ResolverState.EXHAUSTED
        raise InvalidKeyError(attempts=list(self.attempts))

    def _try(self, index: int, uri: str, vault: VaultFile) -> tuple[bytes | None, Attempt]:
        try:
            credential = parse_credential(uri)
            ciphertext = vault.extract(credential.vault_key)
            plaintext = decrypt(ciphertext, credential.decryption_key)
        except VaultError as e:
            return None, Attempt(index, e)
        return plaintext, Attempt(index)


def resolve(dotenv_key: str | None, vault_path: Path | str) -> bytes:
    """Convenience wrapper around MultiKeyResolver."""
    return MultiKeyResolver(dotenv_key, vault_path).resolve()
