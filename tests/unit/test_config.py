# ABOUTME: Unit tests for configuration management
# ABOUTME: Tests client config validation and environment settings loading

import os
from unittest.mock import patch

import pytest
from pydantic import SecretStr, ValidationError

from argocd_sdk.config import ClientConfig, SdkSettings, load_settings


@pytest.mark.unit
class TestClientConfig:
    """Tests for ClientConfig."""

    def test_url_validation_adds_https(self):
        """Test that URL without scheme gets https added."""
        config = ClientConfig(url="argocd.example.com", token=SecretStr("test"))
        assert config.url == "https://argocd.example.com"

    def test_url_validation_preserves_http(self):
        """Test that explicit http scheme is preserved."""
        config = ClientConfig(url="http://argocd.local", token=SecretStr("test"))
        assert config.url == "http://argocd.local"

    def test_url_validation_removes_trailing_slash(self):
        """Test that trailing slash is removed from URL."""
        config = ClientConfig(url="https://argocd.example.com/", token=SecretStr("test"))
        assert config.url == "https://argocd.example.com"

    def test_empty_url_rejected(self):
        """Test that an empty URL is a validation error."""
        with pytest.raises(ValidationError):
            ClientConfig(url="", token=SecretStr("test"))

    def test_api_url(self):
        """Test api_url appends the v1 API prefix."""
        config = ClientConfig(url="https://argocd.example.com", token=SecretStr("test"))
        assert config.api_url == "https://argocd.example.com/api/v1"

    def test_defaults(self):
        """Test insecure and timeout defaults."""
        config = ClientConfig(url="https://argocd.example.com", token=SecretStr("test"))
        assert config.insecure is False
        assert config.timeout is None

    def test_token_accepts_plain_string(self):
        """Test a plain string token is wrapped in SecretStr."""
        config = ClientConfig(url="https://argocd.example.com", token="plain")
        assert isinstance(config.token, SecretStr)
        assert config.token.get_secret_value() == "plain"
        assert "plain" not in repr(config)

    def test_is_immutable(self):
        """Test config cannot be changed after construction."""
        config = ClientConfig(url="https://argocd.example.com", token=SecretStr("test"))
        with pytest.raises(ValidationError):
            config.url = "https://other.example.com"

    def test_timeout_must_be_positive(self):
        """Test a zero timeout is rejected."""
        with pytest.raises(ValidationError):
            ClientConfig(url="https://argocd.example.com", token=SecretStr("t"), timeout=0)


@pytest.mark.unit
class TestSdkSettings:
    """Tests for SdkSettings."""

    def test_client_config_none_when_no_url(self):
        """Test client_config is None when ARGOCD_URL is not set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = SdkSettings()
            assert settings.client_config is None

    def test_client_config_from_env(self):
        """Test client config is built from ARGOCD_* variables."""
        env = {
            "ARGOCD_URL": "argocd.internal",
            "ARGOCD_TOKEN": "env-token",
            "ARGOCD_INSECURE": "true",
            "ARGOCD_TIMEOUT": "15",
        }
        with patch.dict(os.environ, env, clear=True):
            config = SdkSettings().client_config

        assert config is not None
        assert config.url == "https://argocd.internal"
        assert config.token.get_secret_value() == "env-token"
        assert config.insecure is True
        assert config.timeout == 15.0

    def test_client_config_from_field_names(self):
        """Test settings can be built programmatically."""
        settings = SdkSettings(
            argocd_url="https://argocd.example.com",
            argocd_token=SecretStr("test-token"),
        )
        config = settings.client_config
        assert config is not None
        assert config.url == "https://argocd.example.com"

    def test_default_log_level(self):
        """Test default log level."""
        with patch.dict(os.environ, {}, clear=True):
            assert SdkSettings().log_level == "INFO"

    def test_log_level_env_prefix(self):
        """Test log level reads ARGOCD_SDK_LOG_LEVEL."""
        with patch.dict(os.environ, {"ARGOCD_SDK_LOG_LEVEL": "DEBUG"}, clear=True):
            assert SdkSettings().log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            SdkSettings(log_level="VERBOSE")

    def test_log_json(self):
        """Test JSON log output defaults off and reads ARGOCD_SDK_LOG_JSON."""
        with patch.dict(os.environ, {}, clear=True):
            assert SdkSettings().log_json is False
        with patch.dict(os.environ, {"ARGOCD_SDK_LOG_JSON": "true"}, clear=True):
            assert SdkSettings().log_json is True

    def test_load_settings_reads_env_file(self, tmp_path):
        """Test load_settings reads the file named by ARGOCD_SDK_ENV_FILE."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "ARGOCD_URL=https://argocd.from-file.example\nARGOCD_TOKEN=file-token\n"
        )

        with patch.dict(os.environ, {"ARGOCD_SDK_ENV_FILE": str(env_file)}, clear=True):
            settings = load_settings()

        assert settings.argocd_url == "https://argocd.from-file.example"
        assert settings.argocd_token.get_secret_value() == "file-token"
