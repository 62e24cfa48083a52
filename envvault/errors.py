"""
Error taxonomy for envvault.

Every error renders with a stable uppercase prefix (``INVALID_DOTENV_KEY: ...``)
so failures can be grepped out of logs and CI output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envvault.vault.resolver import Attempt


class VaultError(Exception):
    """Base class for all envvault errors."""

    prefix = "DOTENV_VAULT_ERROR"
    message = "Unknown error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class KeyNotFoundError(VaultError):
    prefix = "NOT_FOUND_DOTENV_KEY"
    message = "Cannot find environment variable 'DOTENV_KEY'"


class VaultNotFoundError(VaultError):
    prefix = "NOT_FOUND_DOTENV_VAULT"
    message = "Cannot find vault file"


class DotenvError(VaultError):
    """The plaintext document could not be read or parsed."""

    prefix = "DOTENV_ERROR"
    message = "Failed to load env file"


class EnvFileNotFoundError(DotenvError):
    prefix = "NOT_FOUND_DOTENV_ENV"

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Cannot find env file at {path}")


class MalformedURIError(VaultError):
    prefix = "INVALID_DOTENV_KEY"
    message = "Failed to parse url"


class InvalidSchemeError(VaultError):
    prefix = "INVALID_DOTENV_KEY"
    message = "Invalid scheme"


class MissingKeyError(VaultError):
    prefix = "INVALID_DOTENV_KEY"
    message = "Missing key part"


class MissingEnvironmentError(VaultError):
    prefix = "INVALID_DOTENV_KEY"
    message = "Missing environment part"


class EnvironmentNotFoundError(VaultError):
    prefix = "NOT_FOUND_DOTENV_ENVIRONMENT"

    def __init__(self, environment: str) -> None:
        self.environment = environment
        super().__init__(
            f"Cannot locate environment {environment} in your .env.vault file. "
            "Run 'npx dotenv-vault build' to include it."
        )


class InvalidKeyError(VaultError):
    """Key material too short, or every candidate key in DOTENV_KEY failed."""

    prefix = "INVALID_DOTENV_KEY"
    message = "Key must be valid"

    def __init__(self, message: str | None = None, attempts: list[Attempt] | None = None) -> None:
        self.attempts = attempts or []
        super().__init__(message)


class HexError(VaultError):
    prefix = "INVALID_DOTENV_KEY"
    message = "Failed to decode hex string"


class DecodeError(VaultError):
    prefix = "DECRYPTION_FAILED"
    message = "Failed to decode base64 string"


class DecryptError(VaultError):
    prefix = "DECRYPTION_FAILED"
    message = "Please check your DOTENV_KEY"
