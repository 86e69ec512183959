"""Markdown resume parser.

Expected shape::

    # Jane Doe
    ## Software Engineer

    Email: jane@example.com

    # Experience
    ## Senior Developer
    Jan 2020 - Present

    Led the platform team.

    - Shipped the billing service

The document is lexed into heading, paragraph and list blocks, then folded
into a Document with ``step(state, block) -> state``.
"""

import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import Literal

from markdown_it import MarkdownIt

from resume_flow.exceptions import MissingNameError
from resume_flow.models.resume import Contact, Document, Item, Section, Website
from resume_flow.models.website_types import DEFAULT_WEBSITE_TYPES, WebsiteTypeTable
from resume_flow.parsers.lines import CONTACT_FIELDS, contact_field_name
from resume_flow.parsers.website import URL_PATTERN, has_website_prefix, parse_website
from resume_flow.utils.date_utils import parse_date_span

logger = logging.getLogger(__name__)

NAME_HEADING = 1
ITEM_HEADING = 2
SUB_ITEM_HEADING = 3

BlockKind = Literal["heading", "paragraph", "list"]

_LEXER = MarkdownIt("commonmark")


@dataclass(frozen=True)
class Block:
    """Block-level element of a Markdown document."""

    kind: BlockKind
    text: str = ""
    depth: int = 0
    items: tuple[str, ...] = ()


def lex_blocks(markdown: str) -> list[Block]:
    """Lex Markdown into headings, paragraphs and (flattened) lists.

    Inline text is kept as written in the source. Other block types are
    dropped.
    """
    tokens = _LEXER.parse(markdown)
    blocks: list[Block] = []
    list_depth = 0
    list_items: list[str] = []

    for index, token in enumerate(tokens):
        if token.type in ("bullet_list_open", "ordered_list_open"):
            list_depth += 1
        elif token.type in ("bullet_list_close", "ordered_list_close"):
            list_depth -= 1
            if list_depth == 0:
                blocks.append(Block(kind="list", items=tuple(list_items)))
                list_items = []
        elif token.type == "inline":
            parent = tokens[index - 1]
            text = token.content.strip()
            if list_depth > 0:
                if text:
                    list_items.append(text)
            elif parent.type == "heading_open":
                blocks.append(Block(kind="heading", text=text, depth=int(parent.tag[1:])))
            elif parent.type == "paragraph_open" and text:
                blocks.append(Block(kind="paragraph", text=text))

    return blocks


@dataclass(frozen=True)
class MarkdownState:
    """Parser state threaded through the block fold.

    Never mutated: every step returns a new state, and sections and items
    are replaced with copies rather than edited in place.
    """

    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    websites: tuple[Website, ...] = ()
    sections: tuple[Section, ...] = ()
    current_section: Section | None = None
    current_item: Item | None = None


def _close_item(state: MarkdownState) -> MarkdownState:
    if state.current_item is None or state.current_section is None:
        return state
    section = state.current_section.model_copy(
        update={"items": [*state.current_section.items, state.current_item]}
    )
    return replace(state, current_section=section, current_item=None)


def _close_section(state: MarkdownState) -> MarkdownState:
    if state.current_section is None:
        return state
    return replace(
        state,
        sections=(*state.sections, state.current_section),
        current_section=None,
    )


def _with_content(item: Item, *texts: str) -> Item:
    return item.model_copy(update={"content": [*item.content, *texts]})


def _on_heading(state: MarkdownState, block: Block) -> MarkdownState:
    if block.depth == NAME_HEADING:
        if not state.name:
            return replace(state, name=block.text)
        state = _close_section(_close_item(state))
        return replace(state, current_section=Section(title=block.text))

    if block.depth == ITEM_HEADING:
        if state.current_section is not None:
            state = _close_item(state)
            return replace(state, current_item=Item(title=block.text))
        if not state.title:
            return replace(state, title=block.text)
        return state

    if block.depth == SUB_ITEM_HEADING and state.current_item is not None:
        item = state.current_item
        sub_items = [*(item.items or []), Item(title=block.text)]
        return replace(state, current_item=item.model_copy(update={"items": sub_items}))

    return state


def _on_contact_paragraph(state: MarkdownState, text: str, table: WebsiteTypeTable) -> MarkdownState:
    """Pick contact fields and websites out of a paragraph before the first section."""
    updates: dict[str, str] = {}
    websites = list(state.websites)

    for line in text.split("\n"):
        line = line.strip()
        field = contact_field_name(line)
        if field in CONTACT_FIELDS:
            updates[field] = line.partition(":")[2].strip()
        elif has_website_prefix(line) or URL_PATTERN.search(line):
            website = parse_website(line, table)
            if website:
                websites.append(website)

    return replace(state, websites=tuple(websites), **updates)


def _add_item_text(item: Item, text: str) -> Item:
    """Fill description, then subtitle, then content."""
    if not item.description:
        return item.model_copy(update={"description": text})
    if not item.subtitle:
        return item.model_copy(update={"subtitle": text})
    return _with_content(item, text)


def _on_section_paragraph(state: MarkdownState, text: str) -> MarkdownState:
    section = state.current_section
    item = state.current_item
    if section is None:
        return state

    period = parse_date_span(text)
    untitled_index = next(
        (index for index, existing in enumerate(section.items) if existing.title == ""),
        None,
    )

    # Paragraph-style sections gather all prose into one untitled item
    first_paragraph = not section.items and item is None and period is None
    continue_untitled = item is not None and item.title == "" and period is None
    reuse_untitled = untitled_index is not None and item is None and period is None

    if first_paragraph or continue_untitled or reuse_untitled:
        if reuse_untitled and untitled_index is not None:
            item = section.items[untitled_index]
            remaining = section.items[:untitled_index] + section.items[untitled_index + 1 :]
            section = section.model_copy(update={"items": remaining})
        elif item is None or item.title != "":
            item = Item(title="")
        return replace(state, current_section=section, current_item=_with_content(item, text))

    if item is None:
        if period is not None:
            return replace(state, current_item=Item(title="", period=period))
        return replace(state, current_item=Item(title="", content=[text]))

    if period is not None:
        return replace(state, current_item=item.model_copy(update={"period": period}))
    return replace(state, current_item=_add_item_text(item, text))


def _on_list(state: MarkdownState, block: Block) -> MarkdownState:
    if state.current_section is None or not block.items:
        return state
    item = state.current_item if state.current_item is not None else Item(title="")
    return replace(state, current_item=_with_content(item, *block.items))


def step(
    state: MarkdownState,
    block: Block,
    table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES,
) -> MarkdownState:
    """Fold one block into the parser state."""
    if block.kind == "heading":
        return _on_heading(state, block)
    if block.kind == "paragraph":
        if state.current_section is None:
            return _on_contact_paragraph(state, block.text, table)
        return _on_section_paragraph(state, block.text)
    if block.kind == "list":
        return _on_list(state, block)
    return state


def parse_markdown(content: str, table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES) -> Document:
    """Parse a Markdown resume.

    The first H1 is the name, later H1s open sections, H2s open items (or set
    the headline before the first section) and H3s add nested items.

    Raises:
        MissingNameError: If no H1 heading provides a name.
    """
    blocks = lex_blocks(content)
    state = reduce(lambda acc, block: step(acc, block, table), blocks, MarkdownState())
    state = _close_section(_close_item(state))

    if not state.name:
        raise MissingNameError()

    contact = Contact(
        email=state.email or None,
        phone=state.phone or None,
        location=state.location or None,
        websites=list(state.websites),
    )
    logger.debug(
        f"Parsed markdown resume for {state.name!r}: "
        f"{len(blocks)} blocks, {len(state.sections)} sections"
    )
    return Document(
        name=state.name,
        title=state.title or None,
        contact=contact,
        sections=list(state.sections),
    )
