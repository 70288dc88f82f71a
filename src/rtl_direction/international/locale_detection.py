"""Detect the ambient locale of the running process.

Sources are probed in a fixed priority order and the first non-empty value
wins. A failing source is logged and skipped; detection itself never raises.
"""
from __future__ import annotations
import locale
import os
from collections.abc import Callable, Sequence

import structlog

from ..config import Settings
from ..models.locale import TextDirection
from .locale_parsing import strip_locale_suffix
from .rtl_languages import get_text_direction

logger = structlog.get_logger(__name__)

LocaleSource = Callable[[], "str | None"]

# POSIX placeholders that carry no language
NEUTRAL_LOCALES = frozenset({'C', 'POSIX'})


def env_var_source(name: str) -> LocaleSource:
    """Read a single environment variable such as LANG or LC_ALL."""
    def probe() -> str | None:
        return os.environ.get(name)
    return probe


def language_list_source() -> str | None:
    """First entry of the GNU colon-separated LANGUAGE priority list."""
    value = os.environ.get('LANGUAGE', '')
    return value.split(':')[0]


def interpreter_locale_source() -> str | None:
    """Language part of the interpreter's current LC_CTYPE locale.

    ``locale.getlocale`` raises ValueError for locale names it cannot map.
    """
    language_code, _encoding = locale.getlocale()
    return language_code


def default_sources(settings: Settings | None = None) -> list[tuple[str, LocaleSource]]:
    """Build the standard probe chain, highest priority first."""
    if settings is None:
        settings = Settings()

    sources: list[tuple[str, LocaleSource]] = [
        (f'env:{name}', env_var_source(name)) for name in settings.locale_env_vars
    ]
    sources.append(('env:LANGUAGE', language_list_source))
    sources.append(('interpreter', interpreter_locale_source))
    sources.append(('settings:default_locale', lambda: settings.default_locale))
    return sources


def _is_neutral(value: str) -> bool:
    return strip_locale_suffix(value).upper() in NEUTRAL_LOCALES


def detect_locale(sources: Sequence[tuple[str, LocaleSource]] | None = None) -> str:
    """Return the first locale any source reports, or '' when none does."""
    if sources is None:
        sources = default_sources()

    for name, probe in sources:
        try:
            value = probe()
        except Exception as e:
            logger.warning("locale_source_failed", source=name, error=str(e))
            continue

        if not value:
            continue
        if not isinstance(value, str):
            logger.warning("locale_source_invalid", source=name, value_type=type(value).__name__)
            continue
        if _is_neutral(value):
            continue

        logger.debug("locale_detected", source=name, locale=value)
        return value

    logger.debug("locale_not_detected", sources=len(sources))
    return ''


def detect_text_direction(sources: Sequence[tuple[str, LocaleSource]] | None = None) -> TextDirection:
    """Text direction of the detected ambient locale (LTR when unknown)."""
    return get_text_direction(detect_locale(sources))
