"""
Pytest configuration and fixtures for the language redirect tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from language_redirect.config import ContentDimensionConfig, PresetConfig, Settings  # noqa: E402
from language_redirect.i18n.locale import LocaleDetector  # noqa: E402
from language_redirect.presets import ContentDimensionPresetSource  # noqa: E402
from language_redirect.resolver import LanguagePresetResolver  # noqa: E402


def make_language_dimension(segments, default_preset=None) -> dict[str, ContentDimensionConfig]:
    """Build a ``content_dimensions`` setting with one preset per URI segment."""
    return {
        "language": ContentDimensionConfig(
            default_preset=default_preset,
            presets={segment: PresetConfig(values=[segment], uri_segment=segment, label=segment) for segment in segments},
        )
    }


def make_preset_source(segments, default_preset=None) -> ContentDimensionPresetSource:
    return ContentDimensionPresetSource(make_language_dimension(segments, default_preset))


def make_settings(segments=("en", "de", "fr"), default_preset="en", **overrides) -> Settings:
    return Settings(content_dimensions=make_language_dimension(segments, default_preset), **overrides)


@pytest.fixture
def detector():
    return LocaleDetector(["en", "de", "fr", "it"])


@pytest.fixture
def preset_source():
    return make_preset_source(["en", "de", "fr"], default_preset="en")


@pytest.fixture
def resolver(detector, preset_source):
    return LanguagePresetResolver(detector=detector, lookup=preset_source)
