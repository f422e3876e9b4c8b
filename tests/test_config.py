"""Tests for configuration loading."""

import os

from wishlist_client.config import (
    DEFAULT_HOST,
    PLACEHOLDER_TOKEN,
    Config,
    get_config,
    reset_config,
)


class TestConfigFromEnv:
    """Tests for Config.from_env."""

    def test_defaults(self):
        """Test defaults with no environment."""
        config = Config.from_env()

        assert config.host == DEFAULT_HOST
        assert config.port == 443
        assert config.version == "v1"
        assert config.user_id == 1
        assert config.timeout == 10.0
        assert config.access_token == PLACEHOLDER_TOKEN
        assert config.api_key is None

    def test_environment_overrides(self):
        """Test environment variables override defaults."""
        os.environ["WISHLIST_HOST"] = "http://localhost/"
        os.environ["WISHLIST_PORT"] = "8080"
        os.environ["WISHLIST_API_VERSION"] = "v2"
        os.environ["WISHLIST_API_KEY"] = "aqua"
        os.environ["WISHLIST_API_SECRET"] = "s3cr3t"
        os.environ["WISHLIST_ACCESS_TOKEN"] = "tok"

        config = Config.from_env()

        assert config.host == "http://localhost"
        assert config.port == 8080
        assert config.version == "v2"
        assert config.access_token == "tok"
        assert config.has_credentials()

    def test_partial_credentials(self):
        """Test a key without a secret is not enough."""
        os.environ["WISHLIST_API_KEY"] = "aqua"

        assert not Config.from_env().has_credentials()

    def test_base_url(self):
        """Test base URL pattern."""
        config = Config.from_env()

        assert config.base_url == "https://wishlist.mohsin.ninja:443/api/v1"


class TestConfigValidate:
    """Tests for Config.validate."""

    def _config(self, **overrides) -> Config:
        values = dict(
            host="http://localhost",
            port=8080,
            version="v1",
            api_key="k",
            api_secret="s",
            access_token="t",
            user_id=1,
            timeout=10.0,
        )
        values.update(overrides)
        return Config(**values)

    def test_valid(self):
        """Test a complete config has no errors."""
        assert self._config().validate() == []

    def test_missing_credentials(self):
        """Test missing key and secret are reported."""
        errors = self._config(api_key=None, api_secret=None).validate()

        assert len(errors) == 2

    def test_bad_port(self):
        """Test out of range port is reported."""
        errors = self._config(port=70000).validate()

        assert any("Port" in e for e in errors)

    def test_host_without_scheme(self):
        """Test scheme-less host is reported."""
        errors = self._config(host="localhost").validate()

        assert any("scheme" in e for e in errors)

    def test_non_positive_timeout(self):
        """Test zero timeout is reported."""
        errors = self._config(timeout=0).validate()

        assert any("Timeout" in e for e in errors)


class TestGlobalConfig:
    """Tests for the cached global config."""

    def test_get_config_cached(self):
        """Test get_config returns the same instance."""
        assert get_config() is get_config()

    def test_reset_config(self):
        """Test reset_config reloads from environment."""
        first = get_config()
        os.environ["WISHLIST_PORT"] = "8443"
        reset_config()

        second = get_config()

        assert second is not first
        assert second.port == 8443
