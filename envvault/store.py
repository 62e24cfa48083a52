"""
Key/value stores that loaded variables are merged into.

The loader never touches ``os.environ`` directly; it goes through an
``EnvStore`` so resolution can run against an in-memory dict in tests.
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping


class EnvStore:
    """Mapping-backed environment store."""

    def __init__(self, data: MutableMapping[str, str]) -> None:
        self._data = data

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set_if_absent(self, key: str, value: str) -> bool:
        """Set ``key`` only if it is not already present. Returns True if written."""
        if key in self._data:
            return False
        self._data[key] = value
        return True

    def set_override(self, key: str, value: str) -> None:
        self._data[key] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._data)


class OsEnvironStore(EnvStore):
    """The real process environment."""

    def __init__(self) -> None:
        super().__init__(os.environ)


class MemoryStore(EnvStore):
    """Dict-backed store, isolated from the process environment."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(dict(initial or {}))
