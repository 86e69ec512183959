"""Configuration management for resume-flow."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from resume_flow.models.website_types import DEFAULT_WEBSITE_TYPES, WebsiteTypeTable
from resume_flow.pdf.writer import PageGeometry


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RESUME_FLOW_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Website labels
    website_types_path: Path | None = Field(
        default=None,
        description="JSON file overriding the built-in website type table",
    )

    # Page layout
    page_margin: float = Field(default=50.0, ge=0, le=200, description="Page margin in points")
    min_bottom_margin: float = Field(
        default=70.0,
        ge=0,
        le=300,
        description="Distance from the bottom edge that content never crosses",
    )
    skills_chunk_size: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Skills printed per line in a skills section",
    )

    # Input
    default_format: Literal["json", "yaml", "markdown", "plaintext"] | None = Field(
        default=None,
        description="Format used when it cannot be inferred from the file name",
    )

    @property
    def page_geometry(self) -> PageGeometry:
        """Page geometry with the configured margins."""
        return PageGeometry(
            margin=self.page_margin,
            min_bottom_margin=self.min_bottom_margin,
            skills_chunk_size=self.skills_chunk_size,
        )

    @property
    def website_types(self) -> WebsiteTypeTable:
        """Website type table, loaded from ``website_types_path`` when set."""
        if self.website_types_path is None:
            return DEFAULT_WEBSITE_TYPES
        return WebsiteTypeTable.from_json(self.website_types_path)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
