"""
envvault.vault — .env.vault parsing and AES-256-GCM decryption.

Public API:
    parse_credential(uri)           → Credential
    read_vault(path)                → VaultFile (entries in file order)
    decrypt(ciphertext_b64, key)    → plaintext bytes
    resolve(dotenv_key, vault_path) → plaintext of the first working key
"""

from __future__ import annotations

from envvault.vault.credentials import parse_credential, split_credentials
from envvault.vault.crypto import decrypt
from envvault.vault.models import Credential, EncryptedPayload, VaultEntry
from envvault.vault.reader import VaultFile, extract_entry, read_vault
from envvault.vault.resolver import Attempt, MultiKeyResolver, ResolverState, resolve

__all__ = [
    "Attempt",
    "Credential",
    "EncryptedPayload",
    "MultiKeyResolver",
    "ResolverState",
    "VaultEntry",
    "VaultFile",
    "decrypt",
    "extract_entry",
    "parse_credential",
    "read_vault",
    "resolve",
    "split_credentials",
]
