"""
Tests for locale parsing and detection
"""

import pytest

from language_redirect.exceptions import InvalidLocaleIdentifierError
from language_redirect.i18n.locale import (
    Locale,
    LocaleDetector,
    parse_accept_language_header,
    parse_weighted_accept_language,
)


class TestLocale:
    def test_parse_language_only(self):
        locale = Locale.from_identifier("de")
        assert locale.language == "de"
        assert locale.region is None
        assert locale.identifier == "de"

    def test_parse_hyphenated_region_is_normalised(self):
        locale = Locale.from_identifier("de-at")
        assert locale.language == "de"
        assert locale.region == "AT"
        assert locale.identifier == "de_AT"

    def test_parse_script_and_region(self):
        locale = Locale.from_identifier("zh_hant_TW")
        assert locale.script == "Hant"
        assert locale.region == "TW"
        assert str(locale) == "zh_Hant_TW"

    def test_parse_three_letter_language(self):
        assert Locale.from_identifier("gsw").language == "gsw"

    def test_parse_numeric_region(self):
        assert Locale.from_identifier("es-419").region == "419"

    @pytest.mark.parametrize(
        ("identifier", "variant"),
        [("de-DE-1996", "1996"), ("sl-rozaj", "rozaj"), ("de_CH_1901", "1901"), ("ca-ES-2abc", "2abc"), ("en-US-abc12", "abc12")],
    )
    def test_parse_alphanumeric_variant(self, identifier, variant):
        assert Locale.from_identifier(identifier).variant == variant

    def test_variant_parent_drops_variant(self):
        assert Locale.from_identifier("de-DE-1996").parent == Locale("de", region="DE")

    @pytest.mark.parametrize("identifier", ["", "e", "english", "de-", "de_AT_x", "1de", "*"])
    def test_invalid_identifiers_raise(self, identifier):
        with pytest.raises(InvalidLocaleIdentifierError):
            Locale.from_identifier(identifier)

    def test_parent_chain(self):
        locale = Locale.from_identifier("zh_Hant_TW")
        assert locale.parent == Locale("zh", "Hant")
        assert locale.parent.parent == Locale("zh")
        assert locale.parent.parent.parent is None


class TestAcceptLanguageParsing:
    def test_ranges_keep_client_order(self):
        assert parse_accept_language_header("fr;q=0.5, de-AT;q=0.9, en") == ["fr", "de-AT", "en"]

    def test_wildcard_is_kept(self):
        assert parse_accept_language_header("*;q=0.1") == ["*"]

    def test_nothing_parsable_returns_none(self):
        assert parse_accept_language_header("") is None
        assert parse_accept_language_header(";;,,") is None

    def test_weighted_sorted_by_quality(self):
        result = parse_weighted_accept_language("en;q=0.5,de;q=0.9,fr")
        assert [tag for tag, _ in result] == ["fr", "de", "en"]

    def test_weighted_equal_quality_keeps_order(self):
        result = parse_weighted_accept_language("it,es,pt")
        assert [tag for tag, _ in result] == ["it", "es", "pt"]

    def test_weighted_invalid_quality_defaults_to_one(self):
        assert parse_weighted_accept_language("de;q=abc") == [("de", 1.0)]

    def test_weighted_drops_refused_languages(self):
        assert parse_weighted_accept_language("de;q=0,en") == [("en", 1.0)]

    @pytest.mark.parametrize("q_value", ["nan", "inf", "-inf"])
    def test_weighted_non_finite_quality_defaults_to_one(self, q_value):
        result = parse_weighted_accept_language(f"en;q=0.5,de;q={q_value},fr;q=0.8")
        assert result == [("de", 1.0), ("fr", 0.8), ("en", 0.5)]


class TestLocaleDetector:
    def test_detect_from_tag_exact(self, detector):
        assert detector.detect_from_tag("fr") == Locale("fr")

    def test_detect_from_tag_falls_back_to_parent(self, detector):
        """de_CH is not available itself, but its parent de is."""
        assert detector.detect_from_tag("de-CH") == Locale("de")

    def test_detect_from_tag_with_numeric_variant(self, detector):
        assert detector.detect_from_tag("de-DE-1996") == Locale("de")

    def test_detect_from_tag_unavailable(self, detector):
        assert detector.detect_from_tag("xx") is None

    def test_detect_from_tag_malformed(self, detector):
        assert detector.detect_from_tag("not a locale") is None

    def test_detect_prefers_most_specific_available(self):
        detector = LocaleDetector(["de", "de_AT"])
        assert detector.detect_from_tag("de-AT") == Locale("de", region="AT")

    def test_empty_collection_accepts_any_valid_locale(self):
        detector = LocaleDetector()
        assert detector.detect_from_tag("xx-YY") == Locale("xx", region="YY")
        assert detector.detect_from_tag("??") is None

    def test_detect_from_header_returns_first_available(self, detector):
        assert detector.detect_from_http_header("xx,ja;q=0.9,de;q=0.8,en;q=0.7") == Locale("de")

    def test_detect_from_header_skips_wildcard(self, detector):
        assert detector.detect_from_http_header("*,it") == Locale("it")

    def test_detect_from_header_nothing_available(self, detector):
        assert detector.detect_from_http_header("xx,ja") is None

    def test_detect_from_header_empty(self, detector):
        assert detector.detect_from_http_header("") is None

    def test_invalid_available_locale_rejected(self):
        with pytest.raises(InvalidLocaleIdentifierError):
            LocaleDetector(["english"])
