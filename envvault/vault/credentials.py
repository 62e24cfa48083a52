"""
DOTENV_KEY credential URI parsing.

A credential looks like::

    dotenv://:key_<64 hex chars>@dotenv.org/vault/.env.vault?environment=production

The password is the decryption key; the ``environment`` query parameter picks
the vault entry (``DOTENV_VAULT_PRODUCTION``).
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit

from envvault.errors import (
    InvalidSchemeError,
    MalformedURIError,
    MissingEnvironmentError,
    MissingKeyError,
)
from envvault.vault.models import Credential

SCHEME = "dotenv"


def parse_credential(uri: str) -> Credential:
    """Parse a single credential URI into a Credential."""
    try:
        parts = urlsplit(uri.strip())
        password = parts.password
    except ValueError as e:
        raise MalformedURIError() from e

    if not parts.scheme or not parts.netloc:
        raise MalformedURIError()

    if parts.scheme != SCHEME:
        raise InvalidSchemeError()

    if not password:
        raise MissingKeyError()

    environment = next(
        (value for name, value in parse_qsl(parts.query, keep_blank_values=True) if name == "environment"),
        None,
    )
    if not environment:
        raise MissingEnvironmentError()

    return Credential(decryption_key=password, environment=environment)


def split_credentials(dotenv_key: str) -> list[str]:
    """Split raw DOTENV_KEY material into candidate URIs, in trial order."""
    return dotenv_key.split(",")
