"""Shared test fixtures."""
import pytest
from rtl_direction.config import Settings


@pytest.fixture
def test_settings():
    """Settings with a known fallback locale and no CORS origins."""
    return Settings(
        log_level="WARNING",
        locale_env_vars=["RTL_TEST_LOCALE"],
        default_locale="he-IL",
        cors_origins=[],
    )


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove ambient locale signals so detection falls through to settings."""
    import locale
    for name in ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE", "RTL_TEST_LOCALE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(locale, "getlocale", lambda: (None, None))
    return monkeypatch
