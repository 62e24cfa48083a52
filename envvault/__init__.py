"""
envvault — load environment variables from an encrypted .env.vault file.

Usage:
    import envvault
    envvault.load()              # existing variables win
    envvault.load_override()     # vault values win

Set DOTENV_KEY to one or more ``dotenv://`` credential URIs. Without it (or
without a .env.vault in the working directory) a plaintext .env is loaded.
"""

from __future__ import annotations

__version__ = "0.1.0"

from envvault.errors import VaultError
from envvault.loader import dotenv, dotenv_override, load, load_override

__all__ = ["VaultError", "__version__", "dotenv", "dotenv_override", "load", "load_override"]
