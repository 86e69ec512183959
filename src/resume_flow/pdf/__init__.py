"""PDF output."""

from resume_flow.pdf.generator import generate_pdf, render_document
from resume_flow.pdf.layout import ResumeLayout
from resume_flow.pdf.sections import SectionKind, classify_section
from resume_flow.pdf.writer import FPDFPageWriter, PageGeometry, PageWriter

__all__ = [
    "FPDFPageWriter",
    "PageGeometry",
    "PageWriter",
    "ResumeLayout",
    "SectionKind",
    "classify_section",
    "generate_pdf",
    "render_document",
]
