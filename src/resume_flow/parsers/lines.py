"""Line classification for markup-free resume text.

Each predicate looks at one stripped line. ``classify_line`` runs them as an
ordered chain; the first match wins:

1. BLANK
2. CONTACT_HEADER   "Contact Information:"
3. CONTACT_FIELD    "Email:", "Phone:", "Location:", "Website:", "Portfolio:", "LinkedIn:"
4. SUMMARY_FIELD    "Summary: ..."
5. BULLET           "- ..."
6. DATE_SPAN        see ``is_date_line``
7. SECTION_HEADER   all-caps line without colon
8. SUBSECTION_HEADER  line ending with a colon
9. TEXT
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from resume_flow.utils.date_utils import is_date_line

CONTACT_SECTION_HEADER = "contact information:"
SUMMARY_FIELD_PREFIX = "summary:"
BULLET_PREFIX = "-"

CONTACT_FIELDS = ("email", "phone", "location")
WEBSITE_FIELDS = ("website", "portfolio", "linkedin")


class LineKind(str, Enum):
    """Structural role of a line."""

    BLANK = "blank"
    CONTACT_HEADER = "contact_header"
    CONTACT_FIELD = "contact_field"
    SUMMARY_FIELD = "summary_field"
    BULLET = "bullet"
    DATE_SPAN = "date_span"
    SECTION_HEADER = "section_header"
    SUBSECTION_HEADER = "subsection_header"
    TEXT = "text"


@dataclass(frozen=True)
class TaggedLine:
    """A stripped line with its kind.

    ``field`` names the contact field for CONTACT_FIELD lines and ``value``
    holds the text after a field prefix or bullet dash.
    """

    kind: LineKind
    text: str
    value: str = ""
    field: str | None = None


def contact_field_name(line: str) -> str | None:
    """Return the contact or website field a line is labeled with."""
    lowered = line.strip().lower()
    for field in CONTACT_FIELDS + WEBSITE_FIELDS:
        if lowered.startswith(field + ":"):
            return field
    return None


def is_contact_header(line: str) -> bool:
    return line.strip().lower() == CONTACT_SECTION_HEADER


def is_summary_field(line: str) -> bool:
    return line.strip().lower().startswith(SUMMARY_FIELD_PREFIX)


def is_bullet(line: str) -> bool:
    return line.strip().startswith(BULLET_PREFIX)


def is_main_section_header(line: str) -> bool:
    """All-caps standalone line such as "EXPERIENCE".

    Lines with a colon, bullets and date-like lines ("2020") are excluded.
    """
    stripped = line.strip()
    return (
        bool(stripped)
        and stripped == stripped.upper()
        and ":" not in stripped
        and not stripped.startswith(BULLET_PREFIX)
        and not is_date_line(stripped)
    )


def is_subsection_header(line: str) -> bool:
    """Line ending with a colon that is not a contact field, e.g. "Technical Skills:"."""
    stripped = line.strip()
    return stripped.endswith(":") and contact_field_name(stripped) is None


LINE_MATCHERS: tuple[tuple[LineKind, Callable[[str], bool]], ...] = (
    (LineKind.BLANK, lambda line: not line.strip()),
    (LineKind.CONTACT_HEADER, is_contact_header),
    (LineKind.CONTACT_FIELD, lambda line: contact_field_name(line) is not None),
    (LineKind.SUMMARY_FIELD, is_summary_field),
    (LineKind.BULLET, is_bullet),
    (LineKind.DATE_SPAN, is_date_line),
    (LineKind.SECTION_HEADER, is_main_section_header),
    (LineKind.SUBSECTION_HEADER, is_subsection_header),
)


def classify_line(line: str) -> TaggedLine:
    """Tag a line with the first matching kind."""
    stripped = line.strip()
    for kind, matches in LINE_MATCHERS:
        if matches(stripped):
            break
    else:
        kind = LineKind.TEXT

    if kind is LineKind.CONTACT_FIELD:
        field = contact_field_name(stripped)
        value = stripped.partition(":")[2].strip()
        return TaggedLine(kind=kind, text=stripped, value=value, field=field)
    if kind is LineKind.SUMMARY_FIELD:
        return TaggedLine(kind=kind, text=stripped, value=stripped[len(SUMMARY_FIELD_PREFIX) :].strip())
    if kind is LineKind.BULLET:
        return TaggedLine(kind=kind, text=stripped, value=stripped[len(BULLET_PREFIX) :].strip())
    return TaggedLine(kind=kind, text=stripped, value=stripped)
