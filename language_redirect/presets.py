"""
Content Dimension Presets

Read-only, in-memory access to the presets of each content dimension. A
preset is one configured variant of the site along a dimension, e.g. the
German language variant reachable under the "/de" URI segment.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from language_redirect.config import ContentDimensionConfig

logger = logging.getLogger(__name__)

LANGUAGE_DIMENSION = "language"


@dataclass(frozen=True)
class LanguagePreset:
    """A configured variant of a content dimension."""

    identifier: str
    uri_segment: str
    values: tuple[str, ...] = field(default_factory=tuple)
    label: str = ""


class PresetLookup(Protocol):
    """What the language resolver needs from a preset store."""

    def find_default(self, dimension_name: str) -> LanguagePreset | None: ...

    def find_by_uri_segment(self, dimension_name: str, uri_segment: str) -> LanguagePreset | None: ...


class ContentDimensionPresetSource:
    """Preset store built once from the ``content_dimensions`` setting."""

    def __init__(self, dimensions: Mapping[str, ContentDimensionConfig]):
        self._presets: dict[str, dict[str, LanguagePreset]] = {}
        self._default_presets: dict[str, str | None] = {}

        for dimension_name, dimension in dimensions.items():
            self._presets[dimension_name] = {
                identifier: LanguagePreset(
                    identifier=identifier,
                    uri_segment=preset.uri_segment,
                    values=tuple(preset.values),
                    label=preset.label,
                )
                for identifier, preset in dimension.presets.items()
            }
            self._default_presets[dimension_name] = dimension.default_preset

            if dimension.default_preset and dimension.default_preset not in dimension.presets:
                logger.warning(
                    "Default preset '%s' of dimension '%s' is not among its presets",
                    dimension.default_preset,
                    dimension_name,
                )

    def all_presets(self, dimension_name: str) -> list[LanguagePreset]:
        return list(self._presets.get(dimension_name, {}).values())

    def find_default(self, dimension_name: str) -> LanguagePreset | None:
        default_identifier = self._default_presets.get(dimension_name)
        if not default_identifier:
            return None
        return self._presets[dimension_name].get(default_identifier)

    def find_by_uri_segment(self, dimension_name: str, uri_segment: str) -> LanguagePreset | None:
        for preset in self._presets.get(dimension_name, {}).values():
            if preset.uri_segment == uri_segment:
                return preset
        return None
