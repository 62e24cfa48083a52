"""Vault data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

VAULT_KEY_PREFIX = "DOTENV_VAULT_"
NONCE_SIZE = 12


class Credential(BaseModel):
    """Decryption key and target environment taken from one DOTENV_KEY URI."""

    model_config = ConfigDict(frozen=True)

    decryption_key: str
    environment: str

    @property
    def vault_key(self) -> str:
        """Name of the vault entry holding this environment's ciphertext."""
        return f"{VAULT_KEY_PREFIX}{self.environment.upper()}"


class VaultEntry(BaseModel):
    """One ``KEY=value`` line of a .env.vault file (value still base64)."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class EncryptedPayload(BaseModel):
    """Decoded vault value: 12-byte nonce followed by ciphertext + GCM tag."""

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    ciphertext: bytes

    @field_validator("nonce")
    @classmethod
    def validate_nonce(cls, v: bytes) -> bytes:
        if len(v) != NONCE_SIZE:
            raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(v)}")
        return v
