"""JSON and YAML resume parsers.

Both formats arrive already structured, so parsing is schema coercion:
legacy fields (``date``, ``details``, scalar ``content``, sections listing
their entries under ``content``) are migrated to the current model here and
nowhere else.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

import yaml

from resume_flow.exceptions import EmptyDocumentError, MalformedInputError, MissingNameError
from resume_flow.models.resume import Contact, Document, Item, Period, Section, Website
from resume_flow.models.website_types import DEFAULT_WEBSITE_TYPES, WebsiteTypeTable
from resume_flow.parsers.website import parse_website
from resume_flow.utils.date_utils import PRESENT_MARKER, parse_date_span

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"


def _clean_str(value: Any) -> str | None:
    """Stringify and strip a scalar, mapping empty values to None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_to_list(v: Any) -> list[str]:
    """Coerce tag-like inputs to a list of strings.

    Strings are split on commas ("Python, Go" -> ["Python", "Go"]).
    """
    if v is None:
        return []
    if isinstance(v, list):
        return [str(item).strip() for item in v if _clean_str(item)]
    if isinstance(v, str):
        v = v.strip()
        if "," in v:
            return [item.strip() for item in v.split(",") if item.strip()]
        return [v] if v else []
    return [str(v)]


def _coerce_period(raw: Mapping[str, Any]) -> Period | None:
    """Build a period from ``period`` (mapping or string) or legacy ``date``."""
    period = raw.get("period")
    if isinstance(period, Mapping):
        start = _clean_str(period.get("start"))
        if not start:
            return None
        end = _clean_str(period.get("end"))
        if end == PRESENT_MARKER:
            end = None
        return Period(start=start, end=end)
    if period is not None:
        text = _clean_str(period)
        if text:
            return parse_date_span(text) or Period(start=text)
        return None

    date = _clean_str(raw.get("date"))
    if date:
        return Period(start=date)
    return None


def _coerce_content(raw: Mapping[str, Any]) -> tuple[list[str], list[Item]]:
    """Collect content strings, merging legacy ``details`` without duplicates.

    Mapping entries inside ``content`` are legacy sub-sections and come back
    as nested items.
    """
    content: list[str] = []
    nested: list[Item] = []

    value = raw.get("content")
    entries = value if isinstance(value, list) else [value]
    for entry in entries:
        if isinstance(entry, Mapping):
            item = _coerce_item(entry)
            if item is not None:
                nested.append(item)
            continue
        text = _clean_str(entry)
        if text:
            content.append(text)

    details = raw.get("details")
    for entry in details if isinstance(details, list) else [details]:
        text = _clean_str(entry)
        if text and text not in content:
            content.append(text)

    return content, nested


def _coerce_item(raw: Any) -> Item | None:
    """Coerce one raw entry into an Item, or None for empty entries."""
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        text = _clean_str(raw)
        return Item(title="", content=[text]) if text else None

    fields: dict[str, Any] = {"title": _clean_str(raw.get("title")) or ""}
    for key in ("subtitle", "description"):
        text = _clean_str(raw.get(key))
        if text:
            fields[key] = text

    period = _coerce_period(raw)
    if period is not None:
        fields["period"] = period

    content, nested = _coerce_content(raw)
    fields["content"] = content
    fields["tags"] = _coerce_to_list(raw.get("tags"))

    sub_items = raw.get("items")
    if isinstance(sub_items, list):
        nested = [item for item in map(_coerce_item, sub_items) if item is not None] + nested
    if nested:
        fields["items"] = nested

    return Item(**fields)


def collapse_paragraph_items(items: list[Item]) -> list[Item]:
    """Merge a section made only of untitled prose entries into one item.

    Applies when the section has items and every one is a paragraph
    (no title, period, subtitle, description, tags or nested items, but
    some content). The merged item holds the content joined by blank lines.
    """
    if not items or not all(item.is_paragraph for item in items):
        return items
    merged = PARAGRAPH_SEPARATOR.join(text for item in items for text in item.content)
    return [Item(title="", content=[merged])]


def _coerce_section(raw: Any) -> Section | None:
    if not isinstance(raw, Mapping):
        logger.debug(f"Skipping section that is not a mapping: {raw!r}")
        return None

    entries = raw.get("items")
    if entries is None:
        entries = raw.get("content")
    if entries is None:
        entries = []
    elif not isinstance(entries, list):
        entries = [entries]

    items = [item for item in map(_coerce_item, entries) if item is not None]
    return Section(title=_clean_str(raw.get("title")) or "", items=collapse_paragraph_items(items))


def _coerce_websites(raw: Any, table: WebsiteTypeTable) -> list[Website]:
    websites: list[Website] = []
    for entry in raw if isinstance(raw, list) else []:
        if isinstance(entry, Mapping):
            url = _clean_str(entry.get("url"))
            if not url:
                continue
            websites.append(
                Website(
                    url=url,
                    type=_clean_str(entry.get("type")) or "other",
                    label=_clean_str(entry.get("label")),
                )
            )
        elif isinstance(entry, str):
            website = parse_website(entry, table)
            if website:
                websites.append(website)
    return websites


def _coerce_contact(raw: Any, table: WebsiteTypeTable) -> Contact:
    if not isinstance(raw, Mapping):
        return Contact()
    return Contact(
        email=_clean_str(raw.get("email")),
        phone=_clean_str(raw.get("phone")),
        location=_clean_str(raw.get("location")),
        websites=_coerce_websites(raw.get("websites"), table),
    )


def build_document(data: Any, table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES) -> Document:
    """Coerce already-decoded data into a Document.

    Raises:
        EmptyDocumentError: If there is no data at all.
        MissingNameError: If the data has no usable ``name``.
    """
    if data is None or data == "" or data == {}:
        raise EmptyDocumentError()
    if not isinstance(data, Mapping):
        raise MissingNameError()

    name = _clean_str(data.get("name"))
    if not name:
        raise MissingNameError()

    raw_sections = data.get("sections")
    sections = [
        section
        for section in map(_coerce_section, raw_sections if isinstance(raw_sections, list) else [])
        if section is not None
    ]

    logger.debug(f"Built resume for {name!r} with {len(sections)} sections")
    return Document(
        name=name,
        title=_clean_str(data.get("title")),
        contact=_coerce_contact(data.get("contact"), table),
        sections=sections,
    )


def parse_json(content: str, table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES) -> Document:
    """Parse a JSON resume.

    Raises:
        MalformedInputError: If the content is not valid JSON.
        MissingNameError: If the document has no name.
    """
    if not content.strip():
        raise EmptyDocumentError()
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedInputError("json", str(e)) from e
    return build_document(data, table)


def parse_yaml(content: str, table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES) -> Document:
    """Parse a YAML resume.

    Raises:
        MalformedInputError: If the content is not valid YAML.
        MissingNameError: If the document has no name.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise MalformedInputError("yaml", str(e)) from e
    return build_document(data, table)
