"""Website reference extraction from a single line of text."""

import re

from resume_flow.models.resume import Website
from resume_flow.models.website_types import DEFAULT_WEBSITE_TYPES, OTHER_TYPE, WebsiteTypeTable

# Labeled prefixes and the category they imply, matched case-insensitively
LABELED_PREFIXES: dict[str, str] = {
    "website:": "personal",
    "portfolio:": "portfolio",
    "linkedin:": "linkedin",
}

URL_PATTERN = re.compile(r"https?://\S+", re.IGNORECASE)
TYPE_ANNOTATION_PATTERN = re.compile(r"#\s*website:(\w+)", re.IGNORECASE)


def _is_placeholder(value: str) -> bool:
    return "[" in value or "]" in value


def has_website_prefix(line: str) -> bool:
    """Check whether a line starts with one of the labeled website prefixes."""
    lowered = line.strip().lower()
    return any(lowered.startswith(prefix) for prefix in LABELED_PREFIXES)


def parse_website(line: str, table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES) -> Website | None:
    """Extract a website reference from a line.

    Labeled lines ("Website: https://...", "Portfolio: ...", "LinkedIn: ...")
    take their category from the label. Template placeholders like
    "[your-site]" are rejected. Otherwise the first bare URL is used, typed by
    a trailing "# website:<type>" annotation or "other".

    Args:
        line: One line of text.
        table: Website type table used to resolve labels.

    Returns:
        The Website, or None when the line holds no usable URL.
    """
    stripped = line.strip()
    lowered = stripped.lower()

    for prefix, website_type in LABELED_PREFIXES.items():
        if lowered.startswith(prefix):
            url = stripped[len(prefix) :].strip()
            if url and not _is_placeholder(url):
                return Website(url=url, type=website_type, label=table.lookup(website_type).label)

    url_match = URL_PATTERN.search(stripped)
    if not url_match:
        return None

    annotation = TYPE_ANNOTATION_PATTERN.search(stripped)
    website_type = annotation.group(1).lower() if annotation else OTHER_TYPE
    return Website(
        url=url_match.group(0),
        type=website_type,
        label=table.lookup(website_type).label,
    )
