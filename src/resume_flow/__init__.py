"""resume-flow - parse resumes from JSON, YAML, Markdown or plain text and render them to PDF."""

from resume_flow.exceptions import (
    EmptyDocumentError,
    MalformedInputError,
    MissingNameError,
    ResumeError,
    ResumeParseError,
    UnsupportedFormatError,
)
from resume_flow.models import Contact, Document, Item, Period, Section, Website
from resume_flow.parsers import ResumeFormat, parse
from resume_flow.pdf import generate_pdf
from resume_flow.processors import load_resume, normalize_dates

__version__ = "0.1.0"

__all__ = [
    "Contact",
    "Document",
    "EmptyDocumentError",
    "Item",
    "MalformedInputError",
    "MissingNameError",
    "Period",
    "ResumeError",
    "ResumeFormat",
    "ResumeParseError",
    "Section",
    "UnsupportedFormatError",
    "Website",
    "generate_pdf",
    "load_resume",
    "normalize_dates",
    "parse",
]
