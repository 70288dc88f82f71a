"""Tolerant locale string parsing.

Handles BCP-47 tags (``ar-EG``), POSIX locales (``en_US.UTF-8``), keyword
suffixes (``ar_EG@calendar=islamic``) and legacy strings with repeated
separators (``ar---SA``).
"""
from __future__ import annotations
import re

from ..models.locale import ParsedLocale

# Everything from the first '.' or '@' onward is an encoding or keyword suffix
SUFFIX_PATTERN = re.compile(r'[.@].*$', re.DOTALL)

# language(2-3 letters) [sep country(2-3 alnum) [sep variant]]
STRICT_LOCALE_PATTERN = re.compile(
    r'^([a-zA-Z]{2,3})(?:[-_]([a-zA-Z0-9]{2,3})(?:[-_]([a-zA-Z0-9]+))?)?$'
)

# Leading letters, then any run of separators and letters
PERMISSIVE_LOCALE_PATTERN = re.compile(r'^([a-zA-Z]*)([-_a-zA-Z]*)$')

SEPARATOR_PATTERN = re.compile(r'[-_]')


def strip_locale_suffix(locale: str) -> str:
    """Drop encoding/keyword suffixes: 'en_US.UTF-8' -> 'en_US'."""
    return SUFFIX_PATTERN.sub('', locale)


def match_locale(locale: str) -> re.Match[str] | None:
    """Match against the strict grammar first, then the permissive one."""
    return STRICT_LOCALE_PATTERN.fullmatch(locale) or PERMISSIVE_LOCALE_PATTERN.fullmatch(locale)


def normalize_country_code(raw: str | None) -> str | None:
    """Strip every separator and uppercase; empty results become None."""
    if not raw:
        return None
    return SEPARATOR_PATTERN.sub('', raw).upper() or None


def parse_locale(locale: str) -> ParsedLocale | None:
    """Parse a locale string into its language and country code.

    Returns None when no language subtag of at least two letters can be
    extracted. Never raises for string input.

    Examples:
    - "en-US" -> language="en", country_code="US"
    - "ar___SA" -> language="ar", country_code="SA"
    - "ar-" -> language="ar", country_code=None
    - "-US", "a", "123" -> None
    """
    if not locale or not isinstance(locale, str):
        return None

    match = match_locale(strip_locale_suffix(locale))
    if match is None or match.group(1) is None:
        return None

    language = match.group(1).lower()
    if len(language) < 2:
        return None

    return ParsedLocale(language=language, country_code=normalize_country_code(match.group(2)))
