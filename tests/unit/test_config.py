"""Tests for application configuration."""

from riskdesk.config import Settings


class TestSettings:
    def test_default_settings(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "riskdesk-core"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "test-app")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FORMAT", "json")
        settings = Settings(_env_file=None)
        assert settings.app_name == "test-app"
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_unrelated_env_ignored(self, monkeypatch):
        monkeypatch.setenv("CREDIT_WEIGHT_INCOME", "0.9")
        assert not hasattr(Settings(_env_file=None), "credit_weight_income")
