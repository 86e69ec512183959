"""Data models for resume-flow."""

from resume_flow.models.resume import Contact, Document, Item, Period, Section, Website
from resume_flow.models.website_types import (
    DEFAULT_WEBSITE_TYPES,
    WebsiteType,
    WebsiteTypeTable,
)

__all__ = [
    "Contact",
    "Document",
    "Item",
    "Period",
    "Section",
    "Website",
    "DEFAULT_WEBSITE_TYPES",
    "WebsiteType",
    "WebsiteTypeTable",
]
