"""Tests for envvault.config — centralized configuration."""

import pytest

from envvault.config import Config, get_config, reset_config


class TestConfig:
    def test_defaults(self):
        cfg = Config()
        assert cfg.key_var == "DOTENV_KEY"
        assert cfg.vault_filename == ".env.vault"
        assert cfg.env_filename == ".env"
        assert cfg.debug is False
        assert cfg.log_level == "INFO"

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]


class TestGetConfig:
    def test_from_env_defaults(self):
        cfg = get_config()
        assert cfg == Config()

    def test_from_env_custom(self, monkeypatch):
        monkeypatch.setenv("ENVVAULT_KEY_VAR", "APP_DOTENV_KEY")
        monkeypatch.setenv("ENVVAULT_VAULT_FILE", "app.vault")
        monkeypatch.setenv("ENVVAULT_ENV_FILE", ".env.local")
        monkeypatch.setenv("ENVVAULT_LOG_LEVEL", "debug")
        cfg = get_config()
        assert cfg.key_var == "APP_DOTENV_KEY"
        assert cfg.vault_filename == "app.vault"
        assert cfg.env_filename == ".env.local"
        assert cfg.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_debug_truthy(self, monkeypatch, value):
        monkeypatch.setenv("ENVVAULT_DEBUG", value)
        assert get_config().debug is True

    @pytest.mark.parametrize("value", ["", "0", "false", "no"])
    def test_debug_falsy(self, monkeypatch, value):
        monkeypatch.setenv("ENVVAULT_DEBUG", value)
        assert get_config().debug is False

    def test_singleton(self):
        assert get_config() is get_config()

    def test_reset(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("ENVVAULT_DEBUG", "1")
        assert get_config() is first
        reset_config()
        assert get_config().debug is True
