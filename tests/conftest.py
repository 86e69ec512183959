"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from resume_flow.config import get_settings
from resume_flow.models.resume import Contact, Document, Item, Period, Section, Website

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Drop cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sample_json_text() -> str:
    return (FIXTURES_DIR / "resume.json").read_text(encoding="utf-8")


@pytest.fixture
def sample_yaml_text() -> str:
    return (FIXTURES_DIR / "resume.yaml").read_text(encoding="utf-8")


@pytest.fixture
def sample_markdown_text() -> str:
    return (FIXTURES_DIR / "resume.md").read_text(encoding="utf-8")


@pytest.fixture
def sample_plaintext_text() -> str:
    return (FIXTURES_DIR / "resume.txt").read_text(encoding="utf-8")


@pytest.fixture
def sample_contact() -> Contact:
    """Create a sample Contact."""
    return Contact(
        email="jane@example.com",
        phone="+1 555 0100",
        location="Berlin, Germany",
        websites=[
            Website(url="https://jane.dev", type="personal"),
            Website(url="https://github.com/jane", type="github"),
        ],
    )


@pytest.fixture
def sample_document(sample_contact: Contact) -> Document:
    """Create a sample Document with one section of each rendering kind."""
    return Document(
        name="Jane Doe",
        title="Staff Engineer",
        contact=sample_contact,
        sections=[
            Section(
                title="Summary",
                items=[Item(title="", content=["Engineer focused on data platforms."])],
            ),
            Section(
                title="Work Experience",
                items=[
                    Item(
                        title="Staff Engineer",
                        subtitle="Acme Corp",
                        period=Period(start="Jan 2020"),
                        description="Platform team lead.",
                        content=["Cut build times by 40%", "Led a team of 6"],
                    ),
                    Item(
                        title="Engineer",
                        subtitle="Initech",
                        period=Period(start="2016", end="2019"),
                        content=["Built the billing service"],
                    ),
                ],
            ),
            Section(
                title="Skills",
                items=[
                    Item(
                        title="Languages",
                        content=["Python", "Go", "Rust", "SQL", "Bash", "TypeScript", "C"],
                    ),
                    Item(title="Tools:", tags=["Docker", "Kubernetes"]),
                ],
            ),
            Section(
                title="Projects",
                items=[
                    Item(
                        title="resume-flow",
                        description="Resume renderer.",
                        content=["Four input formats"],
                        tags=["Python", "fpdf2"],
                    )
                ],
            ),
        ],
    )
