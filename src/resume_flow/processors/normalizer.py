"""Post-parse normalization shared by all formats."""

import logging

from resume_flow.models.resume import Document, Item
from resume_flow.models.website_types import DEFAULT_WEBSITE_TYPES, WebsiteTypeTable
from resume_flow.parsers import ResumeFormat, parse

logger = logging.getLogger(__name__)


def _normalize_item(item: Item) -> Item:
    """Collapse a start-only period into a degenerate start == end range."""
    updates: dict[str, object] = {}

    period = item.period
    if period is not None and period.start and not period.end:
        start = period.start.strip()
        updates["period"] = period.model_copy(update={"start": start, "end": start})

    if item.items:
        updates["items"] = [_normalize_item(sub_item) for sub_item in item.items]

    return item.model_copy(update=updates) if updates else item


def normalize_dates(document: Document) -> Document:
    """Return a copy of the document where every single-date period has end == start.

    Items without a period and periods with an explicit end are left as they
    are, so applying this twice gives the same result as applying it once.
    """
    normalized = document.model_copy(deep=True)
    normalized.sections = [
        section.model_copy(update={"items": [_normalize_item(item) for item in section.items]})
        for section in normalized.sections
    ]
    return normalized


def load_resume(
    content: str,
    fmt: ResumeFormat | str,
    table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES,
) -> Document:
    """Parse resume text and normalize its dates."""
    document = normalize_dates(parse(content, fmt, table))
    logger.info(
        f"Loaded {ResumeFormat.from_label(fmt).value} resume for {document.name!r} "
        f"({len(document.sections)} sections)"
    )
    return document
