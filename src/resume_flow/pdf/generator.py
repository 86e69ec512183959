"""Render a Document to PDF bytes."""

import logging

from resume_flow.models.resume import Contact, Document
from resume_flow.models.website_types import DEFAULT_WEBSITE_TYPES, WebsiteTypeTable
from resume_flow.pdf.layout import ResumeLayout
from resume_flow.pdf.sections import render_section
from resume_flow.pdf.writer import MUTED_COLOR, FPDFPageWriter, PageGeometry, PageWriter

logger = logging.getLogger(__name__)

NAME_SIZE = 24
HEADLINE_SIZE = 14
CONTACT_SIZE = 10
HEADER_GAP = 6.0


def format_contact_line(contact: Contact) -> str:
    """``Email: x  Phone: y  Location: z`` with missing fields left out."""
    parts = []
    if contact.email:
        parts.append(f"Email: {contact.email}")
    if contact.phone:
        parts.append(f"Phone: {contact.phone}")
    if contact.location:
        parts.append(f"Location: {contact.location}")
    return "  ".join(parts)


def format_websites_line(contact: Contact, table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES) -> str:
    if not contact.websites:
        return ""
    refs = [f"{website.display_label(table)} ({website.url})" for website in contact.websites]
    return "Websites: " + ", ".join(refs)


def _render_header(layout: ResumeLayout, document: Document, table: WebsiteTypeTable) -> None:
    layout.add_text(document.name, font_size=NAME_SIZE, bold=True)
    if document.title:
        layout.add_text(document.title, font_size=HEADLINE_SIZE, color=MUTED_COLOR)

    contact_line = format_contact_line(document.contact)
    websites_line = format_websites_line(document.contact, table)
    if contact_line or websites_line:
        layout.skip(HEADER_GAP)
    if contact_line:
        layout.add_text(contact_line, font_size=CONTACT_SIZE)
    if websites_line:
        layout.add_text(websites_line, font_size=CONTACT_SIZE)


def render_document(
    document: Document,
    writer: PageWriter,
    geometry: PageGeometry | None = None,
    table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES,
    page_total: int | None = None,
) -> int:
    """Lay the whole document out on ``writer``.

    Returns:
        Number of pages used.
    """
    layout = ResumeLayout(writer, geometry, page_total=page_total)
    _render_header(layout, document, table)
    for section in document.sections:
        kind = render_section(layout, section)
        logger.debug(f"Rendered section {section.title!r} as {kind.value}")
    return layout.finish()


def generate_pdf(
    document: Document,
    geometry: PageGeometry | None = None,
    table: WebsiteTypeTable = DEFAULT_WEBSITE_TYPES,
    compress: bool = True,
) -> bytes:
    """Generate the PDF of a resume.

    The total page count is only known once the layout is done, so a
    multi-page document is laid out a second time with "i / total" page
    numbers. Pagination is deterministic, so both passes break identically.

    Args:
        document: Parsed (and usually date-normalized) resume.
        geometry: Page geometry, A4 with 50pt margins by default.
        table: Labels for website categories.
        compress: Compress page streams. Turned off mostly for inspection.

    Returns:
        The PDF file as bytes.
    """
    geometry = geometry or PageGeometry()

    writer = FPDFPageWriter(geometry, compress=compress)
    page_count = render_document(document, writer, geometry, table)

    if page_count > 1:
        writer = FPDFPageWriter(geometry, compress=compress)
        render_document(document, writer, geometry, table, page_total=page_count)

    writer.set_metadata(title=f"{document.name} | Resume", author=document.name)
    logger.info(f"Generated {page_count}-page PDF for {document.name!r}")
    return writer.output()
