"""Tests for format dispatch and cross-format consistency."""

from pathlib import Path

import pytest

from resume_flow.exceptions import MissingNameError, ResumeParseError, UnsupportedFormatError
from resume_flow.parsers import ResumeFormat, parse
from resume_flow.processors import load_resume


class TestResumeFormat:
    """Tests for ResumeFormat label resolution."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("json", ResumeFormat.JSON),
            ("YAML", ResumeFormat.YAML),
            ("yml", ResumeFormat.YAML),
            ("md", ResumeFormat.MARKDOWN),
            ("markdown", ResumeFormat.MARKDOWN),
            ("txt", ResumeFormat.PLAINTEXT),
            ("text", ResumeFormat.PLAINTEXT),
            (ResumeFormat.JSON, ResumeFormat.JSON),
        ],
    )
    def test_from_label(self, label: str, expected: ResumeFormat) -> None:
        assert ResumeFormat.from_label(label) is expected

    def test_unknown_label(self) -> None:
        with pytest.raises(UnsupportedFormatError, match="Unsupported format: docx"):
            ResumeFormat.from_label("docx")

    def test_from_path(self) -> None:
        assert ResumeFormat.from_path(Path("cv.yml")) is ResumeFormat.YAML
        assert ResumeFormat.from_path(Path("resume.MD")) is ResumeFormat.MARKDOWN


class TestParse:
    """Tests for the parse dispatcher."""

    def test_unsupported_format(self) -> None:
        with pytest.raises(UnsupportedFormatError):
            parse("{}", "pdf")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse("", "markdown")

    def test_empty_markdown_raises(self) -> None:
        with pytest.raises(MissingNameError):
            parse("", ResumeFormat.MARKDOWN)

    def test_parse_does_not_normalize(self, sample_json_text: str) -> None:
        document = parse(sample_json_text, "json")
        assert document.sections[1].items[0].period is not None
        assert document.sections[1].items[0].period.end is None

    def test_parse_errors_share_a_base(self) -> None:
        with pytest.raises(ResumeParseError):
            parse("not: [valid", "yaml")


class TestCrossFormat:
    """The same resume written in every format loads to the same document."""

    def test_all_formats_agree(
        self,
        sample_json_text: str,
        sample_yaml_text: str,
        sample_markdown_text: str,
        sample_plaintext_text: str,
    ) -> None:
        documents = [
            load_resume(sample_json_text, "json"),
            load_resume(sample_yaml_text, "yaml"),
            load_resume(sample_markdown_text, "markdown"),
            load_resume(sample_plaintext_text, "plaintext"),
        ]
        expected = documents[0].to_dict()
        for document in documents[1:]:
            assert document.to_dict() == expected

    @pytest.mark.parametrize(
        ("fmt", "content"),
        [
            (
                "json",
                '{"name": "Ann Lee", "sections": [{"title": "Awards", '
                '"items": [{"title": "Best Paper", "period": {"start": "2019"}}]}]}',
            ),
            (
                "yaml",
                "name: Ann Lee\nsections:\n  - title: Awards\n    items:\n"
                "      - title: Best Paper\n        period:\n          start: '2019'\n",
            ),
            ("markdown", "# Ann Lee\n\n# Awards\n\n## Best Paper\n\n2019\n"),
            ("plaintext", "Ann Lee\n\nAWARDS\n\nBest Paper\n2019\n"),
        ],
    )
    def test_minimal_document(self, fmt: str, content: str) -> None:
        document = parse(content, fmt)
        assert document.name == "Ann Lee"
        section = document.sections[0]
        assert section.title.lower() == "awards"
        assert section.items[0].title == "Best Paper"
        assert section.items[0].period is not None
        assert section.items[0].period.start == "2019"
