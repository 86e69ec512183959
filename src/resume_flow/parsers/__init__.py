"""Format parsers turning resume text into a Document."""

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from resume_flow.exceptions import UnsupportedFormatError
from resume_flow.models.resume import Document
from resume_flow.models.website_types import DEFAULT_WEBSITE_TYPES, WebsiteTypeTable
from resume_flow.parsers.markdown import parse_markdown
from resume_flow.parsers.plaintext import parse_plaintext
from resume_flow.parsers.structured import parse_json, parse_yaml
from resume_flow.parsers.website import parse_website


class ResumeFormat(str, Enum):
    """Supported input formats."""

    JSON = "json"
    YAML = "yaml"
    MARKDOWN = "markdown"
    PLAINTEXT = "plaintext"

    @classmethod
    def from_label(cls, label: "ResumeFormat | str") -> "ResumeFormat":
        """Resolve a format label, accepting common aliases ("md", "yml", "txt")."""
        if isinstance(label, cls):
            return label
        key = str(label).strip().lower().lstrip(".")
        try:
            return _FORMAT_ALIASES[key]
        except KeyError:
            raise UnsupportedFormatError(label) from None

    @classmethod
    def from_path(cls, path: Path) -> "ResumeFormat":
        """Infer the format from a file suffix."""
        return cls.from_label(path.suffix or path.name)


_FORMAT_ALIASES: dict[str, ResumeFormat] = {
    "json": ResumeFormat.JSON,
    "yaml": ResumeFormat.YAML,
    "yml": ResumeFormat.YAML,
    "markdown": ResumeFormat.MARKDOWN,
    "md": ResumeFormat.MARKDOWN,
    "plaintext": ResumeFormat.PLAINTEXT,
    "txt": ResumeFormat.PLAINTEXT,
    "text": ResumeFormat.PLAINTEXT,
}

_PARSERS: dict[ResumeFormat, Callable[[str, WebsiteTypeTable], Document]] = {
    ResumeFormat.JSON: parse_json,
    ResumeFormat.YAML: parse_yaml,
    ResumeFormat.MARKDOWN: parse_markdown,
    ResumeFormat.PLAINTEXT: parse_plaintext,
}


def parse(
    content: str,
    fmt: ResumeFormat | str,
    table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES,
) -> Document:
    """Parse resume text of the given format into a Document.

    The result is not date-normalized; see
    ``resume_flow.processors.normalizer.load_resume`` for that.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known format.
        MalformedInputError: If JSON or YAML content has a syntax error.
        MissingNameError: If no name can be derived.
    """
    resume_format = ResumeFormat.from_label(fmt)
    return _PARSERS[resume_format](content, table)


__all__ = [
    "ResumeFormat",
    "parse",
    "parse_json",
    "parse_markdown",
    "parse_plaintext",
    "parse_website",
    "parse_yaml",
]
