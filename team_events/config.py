"""Site configuration using pydantic-settings pattern."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from TEAM_EVENTS_* environment variables."""

    log_level: str = Field(default="INFO")
    default_locale: str = Field(default="en")

    # Content sources
    content_root: Path = Field(
        default=Path("site"),
        description="Directory holding <locale>/meet-the-team/events/**/*.md",
    )
    authors_path: Path = Field(
        default=Path("site/_data/authorsData.json"),
        description="Author directory keyed by handle",
    )
    i18n_path: Path = Field(
        default=Path("site/_data/i18n"),
        description="Directory of YAML translation catalogues",
    )

    # Image references
    default_avatar_img: str = Field(
        default="image/T4FyVKpzu4WKF1kBNvXepbi08t52/2ogrXmrxV5dFHNpjE12x.png",
        description="Avatar used when an author has no image",
    )
    multiple_participants_img: str = Field(
        default="image/T4FyVKpzu4WKF1kBNvXepbi08t52/ndXMMQ2IxjXbUh6KHYZc.svg",
        description="Session image for panels with several participants",
    )
    event_placeholder_img: str = Field(
        default="image/fuiz5I8Iv7bV8YbrK2PKiY3Vask2/5nwgD8ftJ8DREfN1QF7z.png",
        description="Cover image for events without one",
    )

    model_config = SettingsConfigDict(
        env_prefix="TEAM_EVENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
