"""Section rendering strategies."""

from collections.abc import Callable
from enum import Enum

from resume_flow.models.resume import Item, Section
from resume_flow.pdf.layout import ResumeLayout
from resume_flow.pdf.writer import MUTED_COLOR

BULLET = "•"

ITEM_TITLE_SIZE = 12
SUBTITLE_SIZE = 11
BODY_SIZE = 10
BULLET_INDENT = 10
SKILL_INDENT = 15
NESTED_INDENT = 20
ITEM_GAP = 10.0
PARAGRAPH_GAP = 5.0
SKILL_CATEGORY_GAP = 8.0

# Timeline sections with these words print "Title at Subtitle"
EXPERIENCE_KEYWORDS = ("experience", "work", "employment")


class SectionKind(str, Enum):
    """Rendering strategy of a section."""

    SUMMARY = "summary"
    SKILLS = "skills"
    TIMELINE = "timeline"
    LIST = "list"


def classify_section(section: Section) -> SectionKind:
    """Pick the rendering strategy from the title and the items' shape.

    Order: a "Summary" title, a "Skills" title, any dated item, the rest.
    """
    title = section.title.strip().lower()
    if title == "summary":
        return SectionKind.SUMMARY
    if title == "skills":
        return SectionKind.SKILLS
    if any(item.period is not None for item in section.items):
        return SectionKind.TIMELINE
    return SectionKind.LIST


def is_experience_section(section: Section) -> bool:
    title = section.title.lower()
    return any(keyword in title for keyword in EXPERIENCE_KEYWORDS)


def is_paragraph_section(section: Section) -> bool:
    """Untitled entries that read as prose rather than a list.

    True when no item has a title and either the section has exactly one
    item or every item holds exactly one content string.
    """
    items = section.items
    if not items or any(item.title for item in items):
        return False
    return len(items) == 1 or all(len(item.content) == 1 for item in items)


def _add_paragraph(layout: ResumeLayout, text: str, indent: float = 0) -> None:
    layout.add_text(text, font_size=BODY_SIZE, indent=indent)
    layout.skip(PARAGRAPH_GAP)


def _add_bullets(layout: ResumeLayout, lines: list[str], indent: float = BULLET_INDENT) -> None:
    for line in lines:
        layout.add_text(f"{BULLET} {line}", font_size=BODY_SIZE, indent=indent, keep_together=True)


def _add_tags(layout: ResumeLayout, item: Item, indent: float = 0) -> None:
    if item.tags:
        layout.add_text(
            "Technologies: " + ", ".join(str(tag) for tag in item.tags),
            font_size=BODY_SIZE,
            color=MUTED_COLOR,
            indent=indent,
        )


def _add_nested_items(layout: ResumeLayout, item: Item) -> None:
    for sub_item in item.items or []:
        if sub_item.title:
            layout.add_text(sub_item.title, font_size=BODY_SIZE, bold=True, indent=BULLET_INDENT)
        if sub_item.description:
            layout.add_text(sub_item.description, font_size=BODY_SIZE, indent=BULLET_INDENT)
        _add_bullets(layout, sub_item.content, indent=NESTED_INDENT)
        _add_tags(layout, sub_item, indent=BULLET_INDENT)


def render_summary(layout: ResumeLayout, section: Section) -> None:
    """First item's description and content as flowing text."""
    if not section.items:
        return
    item = section.items[0]
    if item.description:
        _add_paragraph(layout, item.description)
    for text in item.content:
        _add_paragraph(layout, text)


def _render_skill_category(layout: ResumeLayout, item: Item, indent: float = 0) -> None:
    geometry = layout.geometry
    values = item.content or [str(tag) for tag in item.tags]

    layout.skip(SKILL_CATEGORY_GAP)
    layout.ensure_space(2 * (BODY_SIZE + geometry.leading))
    if item.title:
        category = item.title.rstrip().rstrip(":")
        layout.add_text(f"{category}:", font_size=BODY_SIZE, bold=True, indent=indent)

    chunk_size = max(1, geometry.skills_chunk_size)
    for start in range(0, len(values), chunk_size):
        chunk = ", ".join(values[start : start + chunk_size])
        layout.ensure_space(BODY_SIZE + geometry.leading)
        layout.add_text(
            f"{BULLET} {chunk}",
            font_size=BODY_SIZE,
            indent=indent + SKILL_INDENT,
            keep_together=True,
        )

    for sub_item in item.items or []:
        _render_skill_category(layout, sub_item, indent=indent + SKILL_INDENT)


def render_skills(layout: ResumeLayout, section: Section) -> None:
    """Each category in bold, its skills in comma-joined chunks."""
    for item in section.items:
        _render_skill_category(layout, item)


def render_timeline(layout: ResumeLayout, section: Section) -> None:
    """Dated entries: heading, date line, description, bullets."""
    experience = is_experience_section(section)

    for index, item in enumerate(section.items):
        if index > 0:
            layout.skip(ITEM_GAP)
            layout.ensure_space(layout.geometry.item_min_space)

        heading = item.title
        if experience and item.subtitle:
            heading = f"{item.title} at {item.subtitle}" if item.title else item.subtitle
        if heading:
            layout.add_text(heading, font_size=ITEM_TITLE_SIZE, bold=True)
        if not experience and item.subtitle:
            layout.add_text(item.subtitle, font_size=SUBTITLE_SIZE)
        if item.period is not None:
            layout.add_text(item.period.display(), font_size=BODY_SIZE, color=MUTED_COLOR)
        if item.description:
            layout.add_text(item.description, font_size=BODY_SIZE)
        _add_bullets(layout, item.content)
        _add_tags(layout, item)
        _add_nested_items(layout, item)


def render_list(layout: ResumeLayout, section: Section) -> None:
    """Generic entries (projects and the like), or prose for untitled sections."""
    if is_paragraph_section(section):
        for item in section.items:
            if item.description:
                _add_paragraph(layout, item.description)
            for text in item.content:
                _add_paragraph(layout, text)
        return

    for index, item in enumerate(section.items):
        if index > 0:
            layout.skip(ITEM_GAP)
            layout.ensure_space(layout.geometry.item_min_space)

        if item.title:
            layout.add_text(item.title, font_size=ITEM_TITLE_SIZE, bold=True)
        if item.subtitle:
            layout.add_text(item.subtitle, font_size=SUBTITLE_SIZE, indent=BULLET_INDENT)
        if item.description:
            layout.add_text(item.description, font_size=BODY_SIZE)
        _add_bullets(layout, item.content)
        _add_tags(layout, item)
        _add_nested_items(layout, item)


SECTION_RENDERERS: dict[SectionKind, Callable[[ResumeLayout, Section], None]] = {
    SectionKind.SUMMARY: render_summary,
    SectionKind.SKILLS: render_skills,
    SectionKind.TIMELINE: render_timeline,
    SectionKind.LIST: render_list,
}


def render_section(layout: ResumeLayout, section: Section) -> SectionKind:
    """Draw a section title and its items; return the strategy used."""
    kind = classify_section(section)
    layout.add_section_title(section.title)
    SECTION_RENDERERS[kind](layout, section)
    return kind
