"""Date recognition for resume text.

Dates stay opaque display strings. These helpers only decide whether a
fragment denotes a date or a date span and split it into its parts.
"""

import re

from resume_flow.models.resume import Period

# Literal end marker for ongoing spans, matched case-sensitively
PRESENT_MARKER = "Present"

# Pattern to match 4-digit years (1900-2099)
YEAR_PATTERN = re.compile(r"\b(19|20)\d{2}\b")

SHORT_YEAR_PATTERN = re.compile(r"\b\d{2}\b")

MONTH_NAMES = (
    r"January|February|March|April|May|June|July|August|September|October|"
    r"November|December|Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sept|Sep|Oct|Nov|Dec"
)

MONTH_PATTERN = re.compile(rf"\b(?:{MONTH_NAMES})\b\.?", re.IGNORECASE)

# MM/YYYY, MM-YYYY, MM/YY, MM-YY and YYYY/MM, YYYY-MM
NUMERIC_DATE_PATTERNS = (
    re.compile(r"\b\d{1,2}[-/]\d{2,4}\b"),
    re.compile(r"\b\d{4}[-/]\d{1,2}\b"),
)

# A single date token: "Jan 2020", "January. 2020", "01/2020", "2020-01", "01/20", "2020"
DATE_TOKEN = (
    rf"(?:(?i:{MONTH_NAMES})\.?[\s.]?\d{{4}}(?!\d)"
    r"|\d{1,2}[-/]\d{2,4}(?!\d)"
    r"|\d{4}[-/]\d{1,2}(?!\d)"
    r"|\d{1,2}/\d{2}(?!\d)"
    r"|\d{4}(?!\d))"
)

# The remainder may be empty ("Jan 2020 -") or run over several lines
DATE_SPAN_PATTERN = re.compile(rf"^\s*({DATE_TOKEN})\s*[-–]\s*(.*)$", re.DOTALL)
SINGLE_DATE_PATTERN = re.compile(rf"^\s*{DATE_TOKEN}\s*$")
LEADING_DATE_PATTERN = re.compile(rf"^\s*({DATE_TOKEN})")

RANGE_INDICATOR_PATTERN = re.compile(r"\s[-–]\s")

# Fragments without a separator are only taken whole when they are this short
MAX_SINGLE_DATE_LENGTH = 20


def looks_like_date(text: str) -> bool:
    """Cheap pre-filter deciding whether a fragment may hold a date.

    True when the text has a 4-digit year, a month name next to a full or
    2-digit year, or a numeric ``MM/YYYY``-style date.

    Examples:
        >>> looks_like_date("June 2021")
        True
        >>> looks_like_date("Led a team of engineers")
        False
    """
    has_year = YEAR_PATTERN.search(text) is not None
    if has_year:
        return True
    if MONTH_PATTERN.search(text) and SHORT_YEAR_PATTERN.search(text):
        return True
    return any(pattern.search(text) for pattern in NUMERIC_DATE_PATTERNS)


def parse_date_span(text: str) -> Period | None:
    """Recognize a single date or a start-end span.

    Args:
        text: A line or paragraph.

    Returns:
        A Period, or None when the text does not denote a date.

    Logic:
        - "Jan 2020 - Mar 2022" -> start and end
        - "Jan 2020 - Present" -> start only (open-ended)
        - "Jan 2020 - Acme Corp" -> start only, the dash was not a separator
        - "Jan 2020 -" -> start only
        - "June 2021" (short, no separator) -> the whole fragment as start
        - "June 2021 Amazon Web Services Certified" -> the leading token as start

        Only the first line of the remainder can close a span, so a date line
        followed by prose in the same paragraph still yields its period.
    """
    if not text or not looks_like_date(text):
        return None

    # "2020-01" is one date, not a span
    if SINGLE_DATE_PATTERN.match(text):
        return Period(start=text.strip())

    match = DATE_SPAN_PATTERN.match(text)
    if match:
        start = match.group(1).strip()
        end = match.group(2).strip().split("\n", 1)[0].strip()
        if end and end != PRESENT_MARKER and looks_like_date(end):
            return Period(start=start, end=end)
        return Period(start=start)

    stripped = text.strip()
    if len(stripped) < MAX_SINGLE_DATE_LENGTH and "\n" not in stripped:
        return Period(start=stripped)

    leading = LEADING_DATE_PATTERN.match(text)
    if leading:
        return Period(start=leading.group(1).strip())

    return None


def is_date_line(line: str) -> bool:
    """Broader check used to classify plain-text lines.

    Besides the patterns of ``looks_like_date`` this accepts short lines with
    any 4-digit number, lines with a spaced range dash, and digit-heavy
    lines such as "2019/20".
    """
    stripped = line.strip()
    if not stripped:
        return False

    has_year = re.search(r"\b\d{4}\b", stripped) is not None
    has_short_year = SHORT_YEAR_PATTERN.search(stripped) is not None and bool(
        re.search(r"[/\-]", stripped)
    )
    has_month = MONTH_PATTERN.search(stripped) is not None
    has_numeric_date = any(pattern.search(stripped) for pattern in NUMERIC_DATE_PATTERNS)
    has_range = RANGE_INDICATOR_PATTERN.search(stripped) is not None

    if (has_month and (has_year or has_short_year)) or has_numeric_date:
        return True
    if (has_year or has_short_year) and (len(stripped) < MAX_SINGLE_DATE_LENGTH or has_range):
        return True

    digits = sum(ch.isdigit() for ch in stripped)
    letters = sum(ch.isascii() and ch.isalpha() for ch in stripped)
    return digits > letters
