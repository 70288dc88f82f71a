"""Test environment-driven settings."""
import pytest
from pydantic import ValidationError
from rtl_direction.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RTL_DEFAULT_LOCALE", raising=False)
        settings = Settings()
        assert settings.default_locale == ""
        assert settings.locale_env_vars == ["LC_ALL", "LC_MESSAGES", "LANG"]

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("RTL_DEFAULT_LOCALE", "ar-EG")
        monkeypatch.setenv("RTL_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.default_locale == "ar-EG"
        assert settings.log_level == "DEBUG"

    def test_log_level_is_validated(self, monkeypatch):
        monkeypatch.setenv("RTL_LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            Settings()
