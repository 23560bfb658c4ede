"""
Tests for the content dimension preset source
"""

import logging

from conftest import make_preset_source

from language_redirect.config import ContentDimensionConfig, PresetConfig
from language_redirect.presets import ContentDimensionPresetSource, LanguagePreset


class TestContentDimensionPresetSource:
    def test_find_by_uri_segment(self, preset_source):
        preset = preset_source.find_by_uri_segment("language", "de")
        assert preset == LanguagePreset(identifier="de", uri_segment="de", values=("de",), label="de")

    def test_find_by_uri_segment_missing(self, preset_source):
        assert preset_source.find_by_uri_segment("language", "ja") is None

    def test_find_by_uri_segment_unknown_dimension(self, preset_source):
        assert preset_source.find_by_uri_segment("country", "de") is None

    def test_uri_segment_may_differ_from_identifier(self):
        source = ContentDimensionPresetSource(
            {
                "language": ContentDimensionConfig(
                    default_preset="en_US",
                    presets={
                        "en_US": PresetConfig(values=["en_US", "en"], uri_segment="en"),
                        "de_AT": PresetConfig(values=["de_AT", "de"], uri_segment="de-AT"),
                    },
                )
            }
        )
        assert source.find_by_uri_segment("language", "de-AT").identifier == "de_AT"
        assert source.find_by_uri_segment("language", "de_AT") is None
        assert source.find_default("language").uri_segment == "en"

    def test_find_default(self, preset_source):
        assert preset_source.find_default("language").identifier == "en"

    def test_find_default_not_configured(self):
        source = make_preset_source(["en"], default_preset=None)
        assert source.find_default("language") is None

    def test_find_default_unknown_dimension(self, preset_source):
        assert preset_source.find_default("country") is None

    def test_default_preset_not_among_presets_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="language_redirect.presets"):
            source = make_preset_source(["en"], default_preset="de")

        assert source.find_default("language") is None
        assert "not among its presets" in caplog.text

    def test_all_presets_keeps_configured_order(self, preset_source):
        assert [preset.uri_segment for preset in preset_source.all_presets("language")] == ["en", "de", "fr"]

    def test_all_presets_unknown_dimension(self, preset_source):
        assert preset_source.all_presets("country") == []
