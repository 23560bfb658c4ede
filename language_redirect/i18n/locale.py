"""
Locale detection

Pure helpers for turning a cookie value or an Accept-Language header into a
Locale known to the site:
- Locale identifier parsing (language, script, region, variant)
- Accept-Language header parsing, in client order or quality-weighted
- LocaleDetector, which matches parsed locales against the available ones
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from language_redirect.exceptions import InvalidLocaleIdentifierError

logger = logging.getLogger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────

LOCALE_IDENTIFIER_PATTERN = re.compile(
    r"^(?P<language>[a-zA-Z]{2,3})"
    r"(?:[-_](?P<script>[a-zA-Z]{4}))?"
    r"(?:[-_](?P<region>[a-zA-Z]{2}|[0-9]{3}))?"
    r"(?:[-_](?P<variant>[a-zA-Z0-9]{5,8}|[0-9][a-zA-Z0-9]{3}))?$"
)

# One language range with an optional quality value, e.g. "en-US;q=0.8"
ACCEPT_LANGUAGE_PATTERN = re.compile(r"([a-z]{1,8}(?:-[a-z]{1,8})?|\*)(?:;q=(?:1|0(?:\.[0-9]+)?))?", re.IGNORECASE)


# ── Locale ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Locale:
    """A parsed locale such as ``de``, ``de_AT`` or ``zh_Hant_TW``."""

    language: str
    script: str | None = None
    region: str | None = None
    variant: str | None = None

    @classmethod
    def from_identifier(cls, identifier: str) -> Locale:
        """Parse a locale identifier; hyphens and underscores are both accepted.

        Raises:
            InvalidLocaleIdentifierError: if the identifier is malformed.
        """
        match = LOCALE_IDENTIFIER_PATTERN.match(identifier.strip())
        if match is None:
            raise InvalidLocaleIdentifierError(identifier)

        script = match.group("script")
        region = match.group("region")
        variant = match.group("variant")
        return cls(
            language=match.group("language").lower(),
            script=script.title() if script else None,
            region=region.upper() if region else None,
            variant=variant.lower() if variant else None,
        )

    @property
    def identifier(self) -> str:
        parts = [self.language, self.script, self.region, self.variant]
        return "_".join(part for part in parts if part)

    @property
    def parent(self) -> Locale | None:
        """The next less specific locale, or None for a bare language."""
        if self.variant:
            return Locale(self.language, self.script, self.region)
        if self.region:
            return Locale(self.language, self.script)
        if self.script:
            return Locale(self.language)
        return None

    def __str__(self) -> str:
        return self.identifier


# ── Header parsing ────────────────────────────────────────────────────────────


def parse_accept_language_header(header: str) -> list[str] | None:
    """Extract the language ranges of an Accept-Language header in client order.

    Quality values are recognised but not used for ordering; the first listed
    range comes first. Returns None when no language range can be found.
    """
    ranges = [match.group(1) for match in ACCEPT_LANGUAGE_PATTERN.finditer(header.replace(" ", ""))]
    return ranges or None


def parse_weighted_accept_language(header: str) -> list[tuple[str, float]]:
    """Parse an Accept-Language header into (tag, quality) pairs, best first.

    Tags with an unparsable or non-finite q-value default to q=1.0; tags
    with q=0 are dropped since the client explicitly refuses them. The sort
    is stable, so tags of equal quality keep their original order.
    """
    weighted: list[tuple[str, float]] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        if ";q=" in part:
            tag, q_str = part.split(";q=", 1)
            try:
                q = float(q_str.strip())
            except ValueError:
                q = 1.0
            if not math.isfinite(q):
                q = 1.0
        else:
            tag = part
            q = 1.0
        if q <= 0:
            continue
        weighted.append((tag.strip(), q))

    weighted.sort(key=lambda item: item[1], reverse=True)
    return weighted


# ── Detection ─────────────────────────────────────────────────────────────────


class LocaleDetector:
    """Detect a Locale from a single tag or from an Accept-Language header.

    A locale counts as detected when it, or one of its parents, is one of the
    available locales; the best matching available locale is returned. With
    no available locales configured every well-formed locale is accepted.
    """

    def __init__(self, available_locales: Iterable[str] = ()):
        self.available_locales: dict[str, Locale] = {}
        for identifier in available_locales:
            locale = Locale.from_identifier(identifier)
            self.available_locales[locale.identifier] = locale

    def find_best_matching_locale(self, locale: Locale) -> Locale | None:
        if not self.available_locales:
            return locale

        candidate: Locale | None = locale
        while candidate is not None:
            if candidate.identifier in self.available_locales:
                return self.available_locales[candidate.identifier]
            candidate = candidate.parent
        return None

    def detect_from_tag(self, tag: str) -> Locale | None:
        try:
            locale = Locale.from_identifier(tag)
        except InvalidLocaleIdentifierError:
            logger.debug("Ignoring malformed locale tag %r", tag)
            return None
        return self.find_best_matching_locale(locale)

    def detect_from_http_header(self, header: str) -> Locale | None:
        """Return the first range of the header that matches an available locale."""
        ranges = parse_accept_language_header(header)
        if ranges is None:
            return None

        for language_range in ranges:
            if language_range == "*":
                continue
            locale = self.detect_from_tag(language_range)
            if locale is not None:
                return locale
        return None
