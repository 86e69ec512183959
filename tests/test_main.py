"""Tests for the command line interface."""

import json
import os
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from resume_flow import __version__
from resume_flow.main import app

runner = CliRunner()


class TestParseCommand:
    """Tests for the parse command."""

    def test_infers_format_from_suffix(self, fixtures_dir: Path) -> None:
        result = runner.invoke(app, ["parse", str(fixtures_dir / "resume.md")])
        assert result.exit_code == 0
        assert '"name": "Jane Doe"' in result.output

    def test_output_is_normalized(self, fixtures_dir: Path) -> None:
        result = runner.invoke(app, ["parse", str(fixtures_dir / "resume.json")])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["sections"][1]["items"][0]["period"] == {"start": "Jan 2020", "end": "Jan 2020"}

    def test_raw_skips_normalization(self, fixtures_dir: Path) -> None:
        result = runner.invoke(app, ["parse", str(fixtures_dir / "resume.json"), "--raw"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["sections"][1]["items"][0]["period"] == {"start": "Jan 2020"}

    def test_explicit_format(self, tmp_path: Path) -> None:
        path = tmp_path / "resume.data"
        path.write_text("# Jane\n", encoding="utf-8")
        result = runner.invoke(app, ["parse", str(path), "--format", "md"])
        assert result.exit_code == 0
        assert '"name": "Jane"' in result.output

    def test_default_format_from_settings(self, tmp_path: Path) -> None:
        path = tmp_path / "resume"
        path.write_text("Jane\n", encoding="utf-8")
        with patch.dict(os.environ, {"RESUME_FLOW_DEFAULT_FORMAT": "plaintext"}):
            result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 0
        assert '"name": "Jane"' in result.output

    def test_unknown_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "resume.docx"
        path.write_text("x", encoding="utf-8")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 1
        assert "Unsupported format" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_malformed_input(self, tmp_path: Path) -> None:
        path = tmp_path / "resume.json"
        path.write_text('{"name": ', encoding="utf-8")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output


class TestPdfCommand:
    """Tests for the pdf command."""

    def test_writes_pdf(self, fixtures_dir: Path, tmp_path: Path) -> None:
        output = tmp_path / "out.pdf"
        result = runner.invoke(app, ["pdf", str(fixtures_dir / "resume.yaml"), "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_bytes().startswith(b"%PDF")

    def test_default_output_path(self, tmp_path: Path) -> None:
        source = tmp_path / "resume.txt"
        source.write_text("Jane Doe\n\nEXPERIENCE\n\nDeveloper\n2018 - 2020\n", encoding="utf-8")
        result = runner.invoke(app, ["pdf", str(source)])
        assert result.exit_code == 0
        assert (tmp_path / "resume.pdf").exists()

    def test_missing_name(self, tmp_path: Path) -> None:
        source = tmp_path / "resume.md"
        source.write_text("Just text\n", encoding="utf-8")
        result = runner.invoke(app, ["pdf", str(source)])
        assert result.exit_code == 1
        assert "Missing name field" in result.output


class TestVersionCommand:
    """Tests for the version command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output
