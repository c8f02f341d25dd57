"""
Unit tests for the application settings.
"""

import pytest
from pydantic import ValidationError
from cyber_mcp.core.config import Settings, get_settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("CYBER_API_BASE_URL", "CYBER_API_AUTH_KEY", "CYBER_API_TIMEOUT_MS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.CYBER_API_BASE_URL == "https://demo-api.cyber-i.com"
        assert settings.CYBER_API_AUTH_KEY == "19295064DEBE4954B259E16A49D2F15711540431"
        assert settings.CYBER_API_TIMEOUT_MS == 5000
        assert settings.SERVER_NAME == "cyber-mcp-demo"
        assert settings.SERVER_VERSION == "1.0.0"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CYBER_API_BASE_URL", "http://localhost:9000")
        monkeypatch.setenv("CYBER_API_AUTH_KEY", "")
        monkeypatch.setenv("CYBER_API_TIMEOUT_MS", "1500")
        settings = Settings(_env_file=None)
        assert settings.CYBER_API_BASE_URL == "http://localhost:9000"
        assert settings.CYBER_API_AUTH_KEY == ""
        assert settings.CYBER_API_TIMEOUT_MS == 1500
        assert settings.timeout_seconds == 1.5

    def test_settings_are_immutable(self, make_settings):
        settings = make_settings()
        with pytest.raises(ValidationError):
            settings.CYBER_API_TIMEOUT_MS = 1

    def test_timeout_must_be_positive(self, make_settings):
        with pytest.raises(ValidationError):
            make_settings(CYBER_API_TIMEOUT_MS=0)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
