"""Tests for client configuration."""

import dataclasses

import pytest
import httpx

from curseforge_api.config import (
    API_KEY_ENV_VAR,
    DEFAULT_BASE_URL,
    CurseForgeConfig,
    load_api_key,
)
from curseforge_api.exceptions import InvalidApiKeyError


class TestCurseForgeConfig:
    """Test suite for CurseForgeConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = CurseForgeConfig(api_key="key")
        assert config.base_url == DEFAULT_BASE_URL == "https://api.curseforge.com/v1"
        assert config.timeout == 30.0
        assert config.user_agent == "curseforge-api/0.1.0"
        assert config.max_retries == 3
        assert config.retry_delay == 1.0
        assert config.headers == {}

    def test_trailing_slash_removed(self):
        """Test that trailing slashes are removed from base_url."""
        config = CurseForgeConfig(base_url="https://api.curseforge.com/v1/")
        assert config.base_url == "https://api.curseforge.com/v1"

    def test_config_is_immutable(self):
        """Test that fields cannot be assigned after creation."""
        config = CurseForgeConfig(api_key="key")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "other"

    @pytest.mark.parametrize(
        "kwargs",
        [{"base_url": ""}, {"max_retries": -1}, {"retry_delay": -0.5}],
    )
    def test_invalid_values(self, kwargs):
        """Test that invalid values are rejected."""
        with pytest.raises(ValueError):
            CurseForgeConfig(**kwargs)

    def test_to_httpx_timeout(self):
        """Test conversion to an httpx timeout."""
        timeout = CurseForgeConfig(timeout=12.5).to_httpx_timeout()
        assert isinstance(timeout, httpx.Timeout)
        assert timeout.read == 12.5
        assert timeout.connect == 12.5


class TestLoadApiKey:
    """Test suite for reading the API key from the environment."""

    def test_from_environment(self, monkeypatch, tmp_path):
        """Test reading the key from the process environment."""
        monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")
        assert load_api_key(dotenv_path=tmp_path / ".env") == "env-key"

    def test_surrounding_whitespace_is_stripped(self, monkeypatch, tmp_path):
        """Test that whitespace around the key is ignored."""
        monkeypatch.setenv(API_KEY_ENV_VAR, "  env-key\n")
        assert load_api_key(dotenv_path=tmp_path / ".env") == "env-key"

    def test_from_dotenv_file(self, monkeypatch, tmp_path):
        """Test reading the key from a .env file."""
        monkeypatch.setenv("CURSEFORGE_TEST_KEY", "placeholder")
        monkeypatch.delenv("CURSEFORGE_TEST_KEY")
        dotenv = tmp_path / ".env"
        dotenv.write_text("CURSEFORGE_TEST_KEY=file-key\n")

        assert load_api_key(env_var="CURSEFORGE_TEST_KEY", dotenv_path=dotenv) == "file-key"

    def test_environment_wins_over_dotenv(self, monkeypatch, tmp_path):
        """Test that an exported variable is not overridden by the file."""
        monkeypatch.setenv("CURSEFORGE_TEST_KEY", "env-key")
        dotenv = tmp_path / ".env"
        dotenv.write_text("CURSEFORGE_TEST_KEY=file-key\n")

        assert load_api_key(env_var="CURSEFORGE_TEST_KEY", dotenv_path=dotenv) == "env-key"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_key(self, monkeypatch, tmp_path, value):
        """Test that an unset or blank key raises InvalidApiKeyError."""
        if value is None:
            monkeypatch.setenv(API_KEY_ENV_VAR, "placeholder")
            monkeypatch.delenv(API_KEY_ENV_VAR)
        else:
            monkeypatch.setenv(API_KEY_ENV_VAR, value)

        with pytest.raises(InvalidApiKeyError) as exc_info:
            load_api_key(dotenv_path=tmp_path / ".env")

        assert API_KEY_ENV_VAR in str(exc_info.value)

    def test_from_env_overrides(self, monkeypatch, tmp_path):
        """Test building a configuration from the environment."""
        monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")
        config = CurseForgeConfig.from_env(dotenv_path=tmp_path / ".env", timeout=5.0)
        assert config.api_key == "env-key"
        assert config.timeout == 5.0
