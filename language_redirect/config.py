from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class PresetConfig(BaseModel):
    """One preset of a content dimension, e.g. the "de" language variant."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    values: list[str] = Field(default_factory=list)
    uri_segment: str
    label: str = ""


class ContentDimensionConfig(BaseModel):
    """A content dimension (axis of site variation) and its presets."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    label: str = ""
    default_preset: Optional[str] = None
    presets: dict[str, PresetConfig] = Field(default_factory=dict)


def _default_content_dimensions() -> dict[str, ContentDimensionConfig]:
    return {
        "language": ContentDimensionConfig(
            label="Language",
            default_preset="en",
            presets={"en": PresetConfig(values=["en"], uri_segment="en", label="English")},
        )
    }


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Language Redirect"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Language detection settings
    language_code_overrides: dict[str, str] = Field(default_factory=dict)
    fe_language_cookie_name: str = ""
    available_locales: list[str] = Field(default_factory=list)
    accept_language_strategy: Literal["sequential", "quality"] = "sequential"

    # Content dimension settings
    content_dimensions: dict[str, ContentDimensionConfig] = Field(default_factory=_default_content_dimensions)

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = True
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings
