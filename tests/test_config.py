"""Tests for configuration and settings."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from resume_flow.config import Settings, get_settings
from resume_flow.models.website_types import DEFAULT_WEBSITE_TYPES
from resume_flow.pdf.writer import PageGeometry


class TestSettings:
    """Tests for Settings configuration class."""

    def test_default_values(self) -> None:
        """Test that defaults are set correctly when no env vars are set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)  # Disable env file loading
            assert settings.log_level == "INFO"
            assert settings.website_types_path is None
            assert settings.page_margin == 50.0
            assert settings.min_bottom_margin == 70.0
            assert settings.skills_chunk_size == 5
            assert settings.default_format is None

    def test_log_level_values(self) -> None:
        """Test valid log level values."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            with patch.dict(os.environ, {"RESUME_FLOW_LOG_LEVEL": level}, clear=True):
                settings = Settings(_env_file=None)
                assert settings.log_level == level

    def test_invalid_log_level(self) -> None:
        with patch.dict(os.environ, {"RESUME_FLOW_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValueError):
                Settings(_env_file=None)

    def test_skills_chunk_size_bounds(self) -> None:
        """Test skills_chunk_size stays within 1..20."""
        with patch.dict(os.environ, {"RESUME_FLOW_SKILLS_CHUNK_SIZE": "0"}, clear=True):
            with pytest.raises(ValueError):
                Settings(_env_file=None)

        with patch.dict(os.environ, {"RESUME_FLOW_SKILLS_CHUNK_SIZE": "21"}, clear=True):
            with pytest.raises(ValueError):
                Settings(_env_file=None)

        with patch.dict(os.environ, {"RESUME_FLOW_SKILLS_CHUNK_SIZE": "20"}, clear=True):
            assert Settings(_env_file=None).skills_chunk_size == 20

    def test_page_geometry(self) -> None:
        env = {"RESUME_FLOW_PAGE_MARGIN": "36", "RESUME_FLOW_SKILLS_CHUNK_SIZE": "3"}
        with patch.dict(os.environ, env, clear=True):
            geometry = Settings(_env_file=None).page_geometry
        assert geometry == PageGeometry(margin=36.0, skills_chunk_size=3)

    def test_default_format(self) -> None:
        with patch.dict(os.environ, {"RESUME_FLOW_DEFAULT_FORMAT": "markdown"}, clear=True):
            assert Settings(_env_file=None).default_format == "markdown"

    def test_default_website_types(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert Settings(_env_file=None).website_types is DEFAULT_WEBSITE_TYPES

    def test_website_types_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "types.json"
        path.write_text(json.dumps({"other": {"label": "Link", "icon": ""}}), encoding="utf-8")
        with patch.dict(os.environ, {"RESUME_FLOW_WEBSITE_TYPES_PATH": str(path)}, clear=True):
            table = Settings(_env_file=None).website_types
        assert table.lookup("personal").label == "Link"

    def test_website_types_file_without_other(self, tmp_path: Path) -> None:
        path = tmp_path / "types.json"
        path.write_text(json.dumps({"blog": {"label": "Blog"}}), encoding="utf-8")
        settings = Settings(_env_file=None, website_types_path=path)
        with pytest.raises(ValueError, match="other"):
            _ = settings.website_types


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_cached_instance(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self) -> None:
        with patch.dict(os.environ, {"RESUME_FLOW_LOG_LEVEL": "DEBUG"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().log_level == "DEBUG"
