"""
Language Routes

Health check and a read-only listing of the configured language presets.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from language_redirect.dependencies import get_app_preset_source
from language_redirect.presets import LANGUAGE_DIMENSION, ContentDimensionPresetSource

router = APIRouter()


class HealthStatus(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    version: str


class LanguagePresetOut(BaseModel):
    identifier: str
    uri_segment: str
    values: list[str]
    label: str


class LanguageList(BaseModel):
    default: str | None
    presets: list[LanguagePresetOut]


@router.get("/health", response_model=HealthStatus, tags=["Monitoring"])
async def health_check(request: Request) -> HealthStatus:
    """Liveness probe; does not touch the language configuration."""
    return HealthStatus(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=request.app.state.settings.app_version,
    )


@router.get("/api/v1/languages", response_model=LanguageList, tags=["Languages"])
async def list_languages(
    preset_source: ContentDimensionPresetSource = Depends(get_app_preset_source),
) -> LanguageList:
    default_preset = preset_source.find_default(LANGUAGE_DIMENSION)
    return LanguageList(
        default=default_preset.identifier if default_preset else None,
        presets=[
            LanguagePresetOut(
                identifier=preset.identifier,
                uri_segment=preset.uri_segment,
                values=list(preset.values),
                label=preset.label,
            )
            for preset in preset_source.all_presets(LANGUAGE_DIMENSION)
        ],
    )
