"""Locale value types shared by the parser, the classifier and the API.

``ParsedLocale`` is what the locale parser hands to the classifier;
``DirectionResult`` is the flattened view returned over HTTP and printed by
the command-line script.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class TextDirection(StrEnum):
    RTL = "rtl"
    LTR = "ltr"


class ParsedLocale(BaseModel):
    """Language and optional region subtag extracted from a locale string.

    ``language`` is lowercase and at least two characters long.
    ``country_code`` is uppercase with separators removed, or ``None``.
    """

    model_config = ConfigDict(frozen=True)

    language: str
    country_code: str | None = None


class DirectionResult(BaseModel):
    """Classification of a single locale string."""

    locale: str
    language: str | None = None
    country_code: str | None = None
    is_rtl: bool = False
    direction: TextDirection = TextDirection.LTR
