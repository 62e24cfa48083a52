"""
Top-level loading: decrypt .env.vault when DOTENV_KEY is set, otherwise fall
back to a plaintext .env, then merge the variables into an environment store.
"""

from __future__ import annotations

import logging
from collections import ChainMap
from pathlib import Path

from dotenv.variables import parse_variables

from envvault.config import Config, get_config
from envvault.errors import DotenvError, EnvFileNotFoundError
from envvault.locator import locate
from envvault.store import EnvStore, OsEnvironStore
from envvault.vault.reader import parse_bindings
from envvault.vault.resolver import MultiKeyResolver

logger = logging.getLogger(__name__)


def load(
    *,
    override: bool = False,
    cwd: Path | str | None = None,
    store: EnvStore | None = None,
    config: Config | None = None,
) -> dict[str, str]:
    """Load the vault (or .env fallback) into ``store``.

    With ``override=False`` variables already present in the store win. Returns
    the variables parsed from whichever source was used.
    """
    cfg = config or get_config()
    store = store if store is not None else OsEnvironStore()
    base = Path(cwd) if cwd is not None else Path.cwd()

    location = locate(cfg, cwd=base, environ=store.as_dict())
    if location.should_decrypt(cfg.debug):
        plaintext = MultiKeyResolver(location.dotenv_key, location.vault_path).resolve()
        bindings = parse_plaintext(plaintext)
    else:
        bindings = read_env_file(base / cfg.env_filename)

    return apply(bindings, store, override=override)


def load_override(
    *,
    cwd: Path | str | None = None,
    store: EnvStore | None = None,
    config: Config | None = None,
) -> dict[str, str]:
    """Like :func:`load`, but loaded values replace existing ones."""
    return load(override=True, cwd=cwd, store=store, config=config)


def parse_plaintext(plaintext: bytes) -> list[tuple[str, str]]:
    """Parse a decrypted .env document into ordered bindings."""
    try:
        text = plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DotenvError("Decrypted vault is not valid UTF-8") from e
    return parse_bindings(text)


def read_env_file(path: Path) -> list[tuple[str, str]]:
    """Parse the plaintext .env fallback. Missing file is an error."""
    if not path.is_file():
        raise EnvFileNotFoundError(path)
    logger.debug("Loading env from %s", path)
    with open(path, encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise DotenvError(f"{path} is not valid UTF-8") from e
    return parse_bindings(text)


def apply(
    bindings: list[tuple[str, str]], store: EnvStore, *, override: bool = False
) -> dict[str, str]:
    """Merge bindings into ``store`` in document order.

    Without ``override`` the first declaration of a key wins and existing store
    values are kept; with it the last declaration wins. ``${VAR}`` references
    expand against the store and earlier bindings, with the same precedence.
    """
    existing = store.as_dict()
    loaded: dict[str, str] = {}
    scope = ChainMap(loaded, existing) if override else ChainMap(existing, loaded)

    for key, raw in bindings:
        value = "".join(atom.resolve(scope) for atom in parse_variables(raw))
        if override:
            store.set_override(key, value)
            loaded[key] = value
        else:
            store.set_if_absent(key, value)
            loaded.setdefault(key, value)
    return loaded


# Names matching the dotenv API
dotenv = load
dotenv_override = load_override
