"""
Root-level shared test fixtures.

Inherited by the package-level vault tests and the integration tests in tests/.
"""

from __future__ import annotations

import base64
import os
import secrets
from pathlib import Path

import pytest
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from envvault.config import reset_config

# Known-good vault entry: decrypts to '# development@v6\nALPHA="zeta"'
KNOWN_KEY = "ddcaa26504cd70a6fef9801901c3981538563a1767c297cb8416e8a38c62fe00"
KNOWN_CIPHERTEXT = (
    "s7NYXa809k/bVSPwIAmJhPJmEGTtU0hG58hOZy7I0ix6y5HP8LsHBsZCYC/gw5DDFy5DgOcyd18R"
)
KNOWN_PLAINTEXT = b'# development@v6\nALPHA="zeta"'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove env vars that leak between tests and reset the config singleton."""
    for key in [
        "DOTENV_KEY",
        "ENVVAULT_KEY_VAR",
        "ENVVAULT_VAULT_FILE",
        "ENVVAULT_ENV_FILE",
        "ENVVAULT_DEBUG",
        "ENVVAULT_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def known_key() -> str:
    return KNOWN_KEY


@pytest.fixture
def known_ciphertext() -> str:
    return KNOWN_CIPHERTEXT


@pytest.fixture
def known_plaintext() -> bytes:
    return KNOWN_PLAINTEXT


@pytest.fixture
def dotenv_key():
    """Build a DOTENV_KEY credential URI."""

    def _build(key_hex: str = KNOWN_KEY, environment: str = "production") -> str:
        return (
            f"dotenv://:key_{key_hex}@dotenv.local/vault/.env.vault?environment={environment}"
        )

    return _build


@pytest.fixture
def seal():
    """Encrypt a .env document the way the vault builder does."""

    def _seal(plaintext: str | bytes, key_hex: str) -> str:
        if isinstance(plaintext, str):
            plaintext = plaintext.encode("utf-8")
        nonce = secrets.token_bytes(12)
        ciphertext = AESGCM(bytes.fromhex(key_hex)).encrypt(nonce, plaintext, None)
        return base64.b64encode(nonce + ciphertext).decode("ascii")

    return _seal


@pytest.fixture
def write_vault(tmp_path: Path):
    """Write a .env.vault into tmp_path from {ENVIRONMENT: ciphertext}."""

    def _write(entries: dict[str, str], directory: Path | None = None) -> Path:
        path = (directory or tmp_path) / ".env.vault"
        lines = [f'DOTENV_VAULT_{env.upper()}="{value}"' for env, value in entries.items()]
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture
def chdir_tmp(tmp_path: Path, monkeypatch):
    """Run the test from inside tmp_path."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def random_key_hex() -> str:
    return os.urandom(32).hex()
