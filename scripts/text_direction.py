#!/usr/bin/env python3
"""Print the text direction for one or more locales."""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from rtl_direction.config import Settings
from rtl_direction.international.locale_detection import default_sources, detect_locale
from rtl_direction.international.rtl_languages import describe_locale
from rtl_direction.utils.logging import setup_logging


def main(locales: list[str]) -> None:
    """Classify each locale, or the ambient one when none are given."""
    settings = Settings()
    setup_logging(settings.log_level, json_logs=False)

    if not locales:
        detected = detect_locale(default_sources(settings))
        print(f"Detected locale: {detected or '(none)'}")
        locales = [detected]

    for locale in locales:
        result = describe_locale(locale)
        country = f" / {result.country_code}" if result.country_code else ""
        language = result.language or "?"
        print(f"{locale or '(empty)'} -> {result.direction} [{language}{country}]")


if __name__ == "__main__":
    main(sys.argv[1:])
