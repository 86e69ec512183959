"""Resume document models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from resume_flow.models.website_types import WebsiteTypeTable

PRESENT_LABEL = "Present"


class Period(BaseModel):
    """Date span of an entry. Dates are opaque display strings."""

    start: str
    end: str | None = None

    @property
    def is_single_date(self) -> bool:
        return self.end is not None and self.start == self.end

    def display(self) -> str:
        """Format the span for rendering.

        A degenerate range prints the start alone, an open range prints
        "start - Present".
        """
        if self.end is None:
            return f"{self.start} - {PRESENT_LABEL}"
        if self.start == self.end:
            return self.start
        return f"{self.start} - {self.end}"


class Website(BaseModel):
    """A URL with its semantic category."""

    url: str
    type: str = "other"
    label: str | None = None

    def display_label(self, table: WebsiteTypeTable) -> str:
        """Explicit label, else the label registered for the type."""
        if self.label:
            return self.label
        return table.lookup(self.type).label


class Contact(BaseModel):
    """Contact details of the candidate."""

    email: str | None = None
    phone: str | None = None
    location: str | None = None
    websites: list[Website] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.email or self.phone or self.location or self.websites)


class Item(BaseModel):
    """One entry of a section: a job, a degree, a skill category, a paragraph."""

    title: str = ""
    subtitle: str | None = None
    period: Period | None = None
    description: str | None = None
    content: list[str] = Field(default_factory=list)
    tags: list[Any] = Field(default_factory=list)
    items: list[Item] | None = None

    @property
    def is_paragraph(self) -> bool:
        """Untitled entry holding only prose."""
        return (
            not self.title
            and bool(self.content)
            and self.period is None
            and not self.subtitle
            and not self.description
            and not self.tags
            and not self.items
        )


class Section(BaseModel):
    """Titled, ordered group of items."""

    title: str
    items: list[Item] = Field(default_factory=list)


class Document(BaseModel):
    """Parsed resume."""

    name: str
    title: str | None = None
    contact: Contact = Field(default_factory=Contact)
    sections: list[Section] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Serialize without unset optional fields."""
        return self.model_dump(exclude_none=True)
