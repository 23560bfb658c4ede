"""
Dependency wiring

Builds the read-only collaborators of the language redirect. The cached
``get_*`` providers hold the process-wide instances for the configured
settings; ``create_app()`` with custom settings builds its own through the
``build_*`` factories. Route handlers reach the instances of their own
application through ``app.state``.
"""

from functools import lru_cache

from fastapi import Request

from language_redirect.config import Settings, get_settings
from language_redirect.i18n.locale import LocaleDetector
from language_redirect.presets import ContentDimensionPresetSource
from language_redirect.resolver import LanguagePresetResolver


def build_locale_detector(settings: Settings) -> LocaleDetector:
    return LocaleDetector(settings.available_locales)


def build_preset_source(settings: Settings) -> ContentDimensionPresetSource:
    return ContentDimensionPresetSource(settings.content_dimensions)


def build_language_preset_resolver(
    settings: Settings,
    detector: LocaleDetector | None = None,
    preset_source: ContentDimensionPresetSource | None = None,
) -> LanguagePresetResolver:
    """Create a resolver from settings, reusing collaborators when given."""
    return LanguagePresetResolver(
        detector=detector or build_locale_detector(settings),
        lookup=preset_source or build_preset_source(settings),
        language_code_overrides=settings.language_code_overrides,
        strategy=settings.accept_language_strategy,
    )


@lru_cache
def get_locale_detector() -> LocaleDetector:
    return build_locale_detector(get_settings())


@lru_cache
def get_preset_source() -> ContentDimensionPresetSource:
    return build_preset_source(get_settings())


@lru_cache
def get_language_preset_resolver() -> LanguagePresetResolver:
    return build_language_preset_resolver(
        get_settings(),
        detector=get_locale_detector(),
        preset_source=get_preset_source(),
    )


def get_app_preset_source(request: Request) -> ContentDimensionPresetSource:
    """FastAPI dependency returning the preset source of the serving application."""
    return request.app.state.preset_source
