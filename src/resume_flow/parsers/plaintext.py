"""Plain-text resume parser.

Structure is inferred from line shape alone:

    John Doe
    Software Engineer

    Contact Information:
    Email: john@example.com

    EXPERIENCE

    Senior Developer at Tech Company
    2020 - Present
    - Led development team
"""

import logging
from dataclasses import dataclass, field

from resume_flow.exceptions import MissingNameError
from resume_flow.models.resume import Contact, Document, Item, Period, Section, Website
from resume_flow.models.website_types import DEFAULT_WEBSITE_TYPES, WebsiteTypeTable
from resume_flow.parsers.lines import (
    CONTACT_FIELDS,
    LineKind,
    TaggedLine,
    classify_line,
    is_main_section_header,
)
from resume_flow.parsers.website import parse_website
from resume_flow.utils.date_utils import parse_date_span

logger = logging.getLogger(__name__)

SUMMARY_SECTION_TITLE = "SUMMARY"


@dataclass
class _SectionBlock:
    title: str
    lines: list[TaggedLine] = field(default_factory=list)


@dataclass
class _ItemDraft:
    """Lines collected for one item before it is built."""

    title: str = ""
    period: Period | None = None
    extra_lines: list[str] = field(default_factory=list)
    bullets: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.title or self.extra_lines or self.bullets)

    def build(self) -> Item | None:
        """Turn the draft into an Item.

        Non-bullet lines after the title fill subtitle, then description,
        then content ahead of the bullets.
        """
        extra = list(self.extra_lines)
        subtitle = extra.pop(0) if extra else None
        description = extra.pop(0) if extra else None
        content = extra + self.bullets
        if not self.title and not content and not subtitle:
            return None
        fields: dict[str, object] = {"title": self.title, "content": content}
        if subtitle:
            fields["subtitle"] = subtitle
        if description:
            fields["description"] = description
        if self.period:
            fields["period"] = self.period
        return Item(**fields)


def _line_period(line: str) -> Period:
    return parse_date_span(line) or Period(start=line.strip())


def _split_header_and_sections(
    tagged: list[TaggedLine],
) -> tuple[list[tuple[int, TaggedLine]], list[_SectionBlock], list[str]]:
    """Split lines into the header area, section blocks and summary lines.

    The first non-blank line is the name and never opens a section. A
    "Summary:" line before the first section collects itself and the
    following lines up to a blank line or section header.
    """
    header: list[tuple[int, TaggedLine]] = []
    blocks: list[_SectionBlock] = []
    summary: list[str] = []
    seen_name = False

    i = 0
    while i < len(tagged):
        line = tagged[i]

        if not blocks and line.kind is LineKind.SUMMARY_FIELD:
            if line.value:
                summary.append(line.value)
            i += 1
            while i < len(tagged):
                following = tagged[i]
                if (
                    following.kind in (LineKind.BLANK, LineKind.SUMMARY_FIELD)
                    or is_main_section_header(following.text)
                ):
                    break
                summary.append(following.text)
                i += 1
            continue

        if seen_name and line.kind is LineKind.SECTION_HEADER:
            blocks.append(_SectionBlock(title=line.text))
        elif blocks:
            blocks[-1].lines.append(line)
        else:
            header.append((i, line))
            if line.kind is not LineKind.BLANK:
                seen_name = True
        i += 1

    return header, blocks, summary


def _parse_header(
    header: list[tuple[int, TaggedLine]],
    tagged: list[TaggedLine],
    table: WebsiteTypeTable,
) -> tuple[str, str | None, Contact]:
    """Read name, headline and contact fields from the lines before the first section."""
    name = ""
    title: str | None = None
    contact_fields: dict[str, str] = {}
    websites: list[Website] = []
    in_contact = False
    skip_index = -1

    for index, line in header:
        if line.kind is LineKind.BLANK or index == skip_index:
            continue

        if not name:
            name = line.text
            if index + 1 < len(tagged):
                following = tagged[index + 1]
                if following.kind is LineKind.TEXT and ":" not in following.text:
                    title = following.text
                    skip_index = index + 1
            continue

        if line.kind is LineKind.CONTACT_HEADER:
            in_contact = True
            continue

        if in_contact and line.kind is LineKind.CONTACT_FIELD:
            if line.field in CONTACT_FIELDS:
                if line.value:
                    contact_fields[line.field] = line.value
            else:
                website = parse_website(line.text, table)
                if website:
                    websites.append(website)

    return name, title, Contact(**contact_fields, websites=websites)


def _parse_section(block: _SectionBlock) -> Section:
    """Group a section's lines into items."""
    items: list[Item] = []
    draft = _ItemDraft()

    def flush() -> None:
        nonlocal draft
        if not draft.is_empty:
            item = draft.build()
            if item:
                items.append(item)
        draft = _ItemDraft()

    lines = block.lines
    i = 0
    while i < len(lines):
        line = lines[i]
        kind = line.kind

        if kind is LineKind.BLANK:
            flush()
        elif kind is LineKind.SUBSECTION_HEADER:
            flush()
            draft.title = line.text
        elif kind is LineKind.BULLET:
            draft.bullets.append(line.value)
        elif kind is LineKind.DATE_SPAN and draft.title:
            draft.period = _line_period(line.text)
        elif not draft.title:
            draft.title = line.text
            if i + 1 < len(lines) and lines[i + 1].kind is LineKind.DATE_SPAN:
                draft.period = _line_period(lines[i + 1].text)
                i += 1
        else:
            draft.extra_lines.append(line.text)
        i += 1
    flush()

    return Section(title=block.title, items=_merge_continuations(items))


def _merge_continuations(items: list[Item]) -> list[Item]:
    """Fold untitled content-only items into the titled item before them."""
    merged: list[Item] = []
    for item in items:
        previous = merged[-1] if merged else None
        if previous is not None and previous.title and not item.title and item.content:
            merged[-1] = previous.model_copy(
                update={
                    "period": previous.period or item.period,
                    "content": previous.content + item.content,
                }
            )
        else:
            merged.append(item)
    return merged


def parse_plaintext(content: str, table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES) -> Document:
    """Parse a plain-text resume.

    Args:
        content: Raw resume text.
        table: Website type table used to label websites.

    Returns:
        The parsed, not yet normalized, Document.

    Raises:
        MissingNameError: If the text has no non-blank line.
    """
    tagged = [classify_line(line) for line in content.splitlines()]
    header, blocks, summary = _split_header_and_sections(tagged)
    name, title, contact = _parse_header(header, tagged, table)

    if not name:
        raise MissingNameError()

    sections: list[Section] = []
    if summary:
        sections.append(Section(title=SUMMARY_SECTION_TITLE, items=[Item(title="", content=summary)]))
    sections.extend(_parse_section(block) for block in blocks)

    logger.debug(f"Parsed plain text resume for {name!r} with {len(sections)} sections")
    return Document(name=name, title=title, contact=contact, sections=sections)
