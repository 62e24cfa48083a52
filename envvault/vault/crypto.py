"""
AES-256-GCM decryption for .env.vault entries.

Vault values are base64(nonce[12] + ciphertext + tag[16]). The key is the last
64 characters of the credential's password, hex-encoded (32 bytes).
"""

from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from envvault.errors import DecodeError, DecryptError, HexError, InvalidKeyError
from envvault.vault.models import NONCE_SIZE, EncryptedPayload

KEY_HEX_LENGTH = 64


def decode_key(key_material: str) -> bytes:
    """Turn credential key material into a 32-byte AES key."""
    if len(key_material) < KEY_HEX_LENGTH:
        raise InvalidKeyError()
    try:
        return binascii.unhexlify(key_material[-KEY_HEX_LENGTH:].encode("ascii"))
    except (UnicodeEncodeError, binascii.Error) as e:
        raise HexError() from e


def decode_payload(ciphertext_b64: str) -> bytes:
    """Strict standard-alphabet base64 decode (padding required)."""
    try:
        return base64.b64decode(ciphertext_b64, validate=True)
    except ValueError as e:
        raise DecodeError() from e


def split_payload(raw: bytes) -> EncryptedPayload:
    """Split decoded bytes into nonce and ciphertext + tag."""
    if len(raw) < NONCE_SIZE:
        raise DecryptError()
    return EncryptedPayload(nonce=raw[:NONCE_SIZE], ciphertext=raw[NONCE_SIZE:])


def decrypt(ciphertext_b64: str, key_material: str) -> bytes:
    """Decrypt a vault value. Returns the plaintext .env document as bytes."""
    key = decode_key(key_material)
    payload = split_payload(decode_payload(ciphertext_b64))

    aesgcm = AESGCM(key)
    try:
        return aesgcm.decrypt(payload.nonce, payload.ciphertext, None)
    except (InvalidTag, ValueError):
        raise DecryptError() from None
