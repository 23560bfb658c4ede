"""
i18n (Internationalization) package

Provides locale parsing, Accept-Language header parsing and locale
detection for the language redirect.
"""

from .locale import (
    Locale,
    LocaleDetector,
    parse_accept_language_header,
    parse_weighted_accept_language,
)

__all__ = [
    "Locale",
    "LocaleDetector",
    "parse_accept_language_header",
    "parse_weighted_accept_language",
]
