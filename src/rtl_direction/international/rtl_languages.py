"""Right-to-left language classification.

References:
- https://help.smartling.com/hc/en-us/articles/1260802028830-Right-to-left-RTL-Languages
- https://en.wikipedia.org/wiki/Script_(Unicode)
- https://en.wikipedia.org/wiki/Writing_system#Directionality_and_orientation
"""
from __future__ import annotations

from ..models.locale import DirectionResult, TextDirection
from .locale_parsing import parse_locale

# Canonical order. Non-ISO codes ('kd', 'pk') are kept as-is.
RTL_LANGUAGE_CODES: tuple[str, ...] = (
    'ae',   # Avestan
    'ar',   # Arabic (generic)
    'arc',  # Aramaic
    'bcc',  # Southern Balochi
    'bqi',  # Bakhtiari
    'ckb',  # Sorani Kurdish
    'dv',   # Dhivehi
    'fa',   # Persian (generic)
    'glk',  # Gilaki
    'he',   # Hebrew
    'iw',   # Hebrew (legacy code)
    'kd',   # Kurdish (Sorani)
    'ku',   # Kurdish (generic)
    'mzn',  # Mazanderani
    'nqo',  # N'Ko
    'pk',   # Panjabi-Shahmukhi (Pakistan)
    'pnb',  # Western Punjabi
    'prs',  # Dari
    'ps',   # Pashto
    'sd',   # Sindhi
    'syr',  # Syriac
    'ug',   # Uyghur
    'ur',   # Urdu
    'yi',   # Yiddish
)

_RTL_LANGUAGE_SET: frozenset[str] = frozenset(RTL_LANGUAGE_CODES)


def get_rtl_language_codes() -> tuple[str, ...]:
    """Return all RTL language codes in canonical order."""
    return RTL_LANGUAGE_CODES


def is_rtl_language(locale: str) -> bool:
    """Check whether a locale or language code is written right-to-left.

    Case-insensitive; '-' and '_' separators (repeated or not) are equivalent.
    Unparseable input is never RTL.
    """
    parsed = parse_locale(locale)
    if parsed is None:
        return False
    return parsed.language in _RTL_LANGUAGE_SET


def get_text_direction(locale: str) -> TextDirection:
    """Return TextDirection.RTL for RTL locales, TextDirection.LTR otherwise."""
    return TextDirection.RTL if is_rtl_language(locale) else TextDirection.LTR


def describe_locale(locale: str) -> DirectionResult:
    """Parse and classify *locale* in one step."""
    parsed = parse_locale(locale)
    if parsed is None:
        return DirectionResult(locale=locale)

    is_rtl = parsed.language in _RTL_LANGUAGE_SET
    return DirectionResult(
        locale=locale,
        language=parsed.language,
        country_code=parsed.country_code,
        is_rtl=is_rtl,
        direction=TextDirection.RTL if is_rtl else TextDirection.LTR,
    )
