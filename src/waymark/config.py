"""Configuration management for Waymark using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="WAYMARK_",
        extra="ignore",
    )

    # Layout geometry
    room_spacing: float = Field(
        default=2.0, gt=0, description="Distance between directly adjacent rooms per unit of distance"
    )
    passage_gap_ratio: float = Field(
        default=0.8,
        gt=0,
        le=1,
        description="Fraction of the room interval a passage spans, leaving a visible gap",
    )
    passage_width: float = Field(default=0.25, gt=0, description="Width and depth of a passage bar")
    room_size: float = Field(default=1.0, gt=0, description="Edge length of a room cube")

    # Map files
    maps_dir: Path = Field(
        default=Path("./data/maps"), description="Directory searched for relative map paths"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log format (console or json)")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
