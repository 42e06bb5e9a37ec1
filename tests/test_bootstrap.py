"""Tests for environment-driven client settings."""

from unittest.mock import Mock

import pytest
import requests

from rajaongkir.api.client import DEFAULT_BASE_URL
from rajaongkir.app.bootstrap import ClientSettings, ConfigError, build_client, load_settings


class TestLoadSettings:
    """Test cases for load_settings."""

    def test_defaults(self) -> None:
        settings = load_settings({"RAJAONGKIR_API_KEY": "abc123"})

        assert settings == ClientSettings(api_key="abc123")
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == 10.0
        assert settings.strict_status is False
        assert settings.log_level == "INFO"

    def test_missing_api_key(self) -> None:
        with pytest.raises(ConfigError, match="RAJAONGKIR_API_KEY"):
            load_settings({})

    def test_blank_api_key(self) -> None:
        with pytest.raises(ConfigError):
            load_settings({"RAJAONGKIR_API_KEY": "   "})

    def test_overrides(self) -> None:
        settings = load_settings(
            {
                "RAJAONGKIR_API_KEY": "abc123",
                "RAJAONGKIR_BASE_URL": "https://api.rajaongkir.com/starter",
                "RAJAONGKIR_TIMEOUT": "2.5",
                "RAJAONGKIR_STRICT_STATUS": "true",
                "RAJAONGKIR_LOG_LEVEL": "debug",
            }
        )

        assert settings.base_url == "https://api.rajaongkir.com/starter"
        assert settings.timeout == 2.5
        assert settings.strict_status is True
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["1", "yes", "ON", "True"])
    def test_strict_status_truthy(self, value: str) -> None:
        assert load_settings({"RAJAONGKIR_API_KEY": "k", "RAJAONGKIR_STRICT_STATUS": value}).strict_status is True

    @pytest.mark.parametrize("value", ["0", "no", "false", ""])
    def test_strict_status_falsy(self, value: str) -> None:
        assert load_settings({"RAJAONGKIR_API_KEY": "k", "RAJAONGKIR_STRICT_STATUS": value}).strict_status is False

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_timeout(self, value: str) -> None:
        with pytest.raises(ConfigError, match="RAJAONGKIR_TIMEOUT"):
            load_settings({"RAJAONGKIR_API_KEY": "k", "RAJAONGKIR_TIMEOUT": value})

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigError, match="RAJAONGKIR_LOG_LEVEL"):
            load_settings({"RAJAONGKIR_API_KEY": "k", "RAJAONGKIR_LOG_LEVEL": "LOUD"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RAJAONGKIR_API_KEY", "from-env")
        assert load_settings().api_key == "from-env"


def test_build_client() -> None:
    session = Mock(spec=requests.Session)
    settings = ClientSettings(api_key="k", base_url="https://api.example.test", timeout=3.0, strict_status=True)

    client = build_client(settings, session)

    assert client.api_key == "k"
    assert client.base_url == "https://api.example.test"
    assert client.strict_status is True
    assert client.http.timeout == 3.0
    assert client.http.session is session
