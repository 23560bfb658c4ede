"""
Language Preset Resolver

Finds the language preset a visitor should be redirected to.

Resolution order, first match wins:
  1. Frontend language cookie (a single locale tag)
  2. Accept-Language header
  3. Default preset of the language dimension

Raises NoPresetAvailableError when none of them yields a preset, which
means the language dimension has no usable default configured.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Literal

from language_redirect.exceptions import NoPresetAvailableError
from language_redirect.i18n.locale import Locale, LocaleDetector, parse_weighted_accept_language
from language_redirect.presets import LANGUAGE_DIMENSION, LanguagePreset, PresetLookup

logger = logging.getLogger(__name__)

AcceptLanguageStrategy = Literal["sequential", "quality"]


class LanguagePresetResolver:
    """Resolve a LanguagePreset from cookie and header values.

    Holds only read-only collaborators, so one instance can serve any number
    of concurrent requests.
    """

    def __init__(
        self,
        detector: LocaleDetector,
        lookup: PresetLookup,
        language_code_overrides: Mapping[str, str] | None = None,
        strategy: AcceptLanguageStrategy = "sequential",
    ):
        if strategy not in ("sequential", "quality"):
            raise ValueError(f"Unknown Accept-Language strategy: {strategy!r}")
        self.detector = detector
        self.lookup = lookup
        self.language_code_overrides = dict(language_code_overrides or {})
        self.strategy = strategy

    def resolve(self, cookie_value: str | None, accept_language_header: str | None) -> LanguagePreset:
        if cookie_value:
            preset = self.find_by_fe_language_cookie(cookie_value)
            if preset is not None:
                logger.debug("Resolved language preset '%s' from cookie", preset.identifier)
                return preset

        if accept_language_header:
            if self.strategy == "quality":
                preset = self.find_by_weighted_accept_language(accept_language_header)
            else:
                preset = self.find_by_accept_language_header(accept_language_header)
            if preset is not None:
                logger.debug("Resolved language preset '%s' from Accept-Language", preset.identifier)
                return preset

        preset = self.lookup.find_default(LANGUAGE_DIMENSION)
        if preset is None:
            raise NoPresetAvailableError(LANGUAGE_DIMENSION)

        logger.debug("Falling back to default language preset '%s'", preset.identifier)
        return preset

    def find_by_fe_language_cookie(self, cookie_value: str) -> LanguagePreset | None:
        """Match the frontend language cookie, a single locale tag."""
        return self._find_preset_for_locale(self.detector.detect_from_tag(cookie_value))

    def find_by_accept_language_header(self, accept_language_header: str) -> LanguagePreset | None:
        """Match the header by re-detecting from what is left after each miss.

        Every attempt hands the whole remaining header to the detector. When
        that yields no locale, or a locale without a preset, the first
        comma-separated part is dropped and the rest is tried again.
        """
        parts = accept_language_header.split(",")
        remaining = accept_language_header
        while remaining != "":
            preset = self._find_preset_for_locale(self.detector.detect_from_http_header(remaining))
            if preset is not None:
                return preset

            parts.pop(0)
            remaining = ",".join(parts)
        return None

    def find_by_weighted_accept_language(self, accept_language_header: str) -> LanguagePreset | None:
        """Match the header tag by tag in descending quality order."""
        for tag, _ in parse_weighted_accept_language(accept_language_header):
            preset = self._find_preset_for_locale(self.detector.detect_from_tag(tag))
            if preset is not None:
                return preset
        return None

    def language_code_for(self, locale: Locale) -> str:
        return self.language_code_overrides.get(locale.language, locale.language)

    def _find_preset_for_locale(self, locale: Locale | None) -> LanguagePreset | None:
        if locale is None:
            return None
        return self.lookup.find_by_uri_segment(LANGUAGE_DIMENSION, self.language_code_for(locale))
