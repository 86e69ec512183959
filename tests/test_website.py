"""Tests for website reference extraction and the website type table."""

import json
from pathlib import Path

import pytest

from resume_flow.models.resume import Website
from resume_flow.models.website_types import (
    DEFAULT_WEBSITE_TYPES,
    WebsiteType,
    WebsiteTypeTable,
)
from resume_flow.parsers.website import has_website_prefix, parse_website


class TestParseWebsite:
    """Tests for parse_website."""

    def test_labeled_personal_website(self) -> None:
        assert parse_website("Website: https://jane.dev") == Website(
            url="https://jane.dev", type="personal", label="Personal Website"
        )

    def test_labeled_prefix_is_case_insensitive(self) -> None:
        website = parse_website("LINKEDIN: https://linkedin.com/in/jane")
        assert website is not None
        assert website.type == "linkedin"
        assert website.label == "LinkedIn"

    def test_portfolio_prefix(self) -> None:
        website = parse_website("Portfolio: https://dribbble.com/jane")
        assert website is not None
        assert website.type == "portfolio"
        assert website.url == "https://dribbble.com/jane"

    def test_labeled_value_need_not_be_url(self) -> None:
        website = parse_website("Website: jane.dev")
        assert website is not None
        assert website.url == "jane.dev"

    def test_placeholder_is_rejected(self) -> None:
        assert parse_website("Website: [your-site]") is None

    def test_placeholder_falls_back_to_bare_url(self) -> None:
        website = parse_website("Website: [site] https://jane.dev")
        assert website is not None
        assert website.url == "https://jane.dev"
        assert website.type == "other"

    def test_bare_url_defaults_to_other(self) -> None:
        website = parse_website("Find me at https://jane.dev/blog")
        assert website == Website(url="https://jane.dev/blog", type="other", label="Website")

    def test_type_annotation(self) -> None:
        website = parse_website("https://github.com/jane # website:github")
        assert website is not None
        assert website.url == "https://github.com/jane"
        assert website.type == "github"
        assert website.label == "GitHub"

    def test_unknown_annotation_uses_other_label(self) -> None:
        website = parse_website("https://mastodon.social/@jane # website:mastodon")
        assert website is not None
        assert website.type == "mastodon"
        assert website.label == "Website"

    def test_no_url_returns_none(self) -> None:
        assert parse_website("Led the platform team") is None

    def test_custom_table_labels(self) -> None:
        table = WebsiteTypeTable(
            {
                "personal": WebsiteType(label="Homepage", icon=""),
                "other": WebsiteType(label="Link", icon=""),
            }
        )
        website = parse_website("Website: https://jane.dev", table)
        assert website is not None
        assert website.label == "Homepage"


class TestHasWebsitePrefix:
    """Tests for has_website_prefix."""

    def test_prefixes(self) -> None:
        assert has_website_prefix("Website: x")
        assert has_website_prefix("  portfolio: x")
        assert not has_website_prefix("Email: jane@example.com")


class TestWebsiteTypeTable:
    """Tests for WebsiteTypeTable."""

    def test_default_labels(self) -> None:
        assert DEFAULT_WEBSITE_TYPES["personal"].label == "Personal Website"
        assert DEFAULT_WEBSITE_TYPES["portfolio"].label == "Portfolio"
        assert DEFAULT_WEBSITE_TYPES["linkedin"].label == "LinkedIn"
        assert DEFAULT_WEBSITE_TYPES["github"].label == "GitHub"
        assert DEFAULT_WEBSITE_TYPES["other"].label == "Website"

    def test_lookup_falls_back_to_other(self) -> None:
        assert DEFAULT_WEBSITE_TYPES.lookup("unknown") == DEFAULT_WEBSITE_TYPES["other"]
        assert DEFAULT_WEBSITE_TYPES.lookup(None) == DEFAULT_WEBSITE_TYPES["other"]

    def test_other_entry_is_required(self) -> None:
        with pytest.raises(ValueError, match="other"):
            WebsiteTypeTable({"personal": WebsiteType(label="Site", icon="")})

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_WEBSITE_TYPES["new"] = WebsiteType(label="New", icon="")  # type: ignore[index]

    def test_from_json(self, tmp_path: Path) -> None:
        path = tmp_path / "types.json"
        path.write_text(
            json.dumps({"other": {"label": "Link"}, "blog": {"label": "Blog", "icon": "B"}}),
            encoding="utf-8",
        )
        table = WebsiteTypeTable.from_json(path)
        assert table.lookup("blog") == WebsiteType(label="Blog", icon="B")
        assert table.lookup("missing").label == "Link"

    def test_display_label_prefers_explicit_label(self) -> None:
        website = Website(url="https://x.dev", type="personal", label="My Site")
        assert website.display_label(DEFAULT_WEBSITE_TYPES) == "My Site"
        unlabeled = Website(url="https://x.dev", type="github")
        assert unlabeled.display_label(DEFAULT_WEBSITE_TYPES) == "GitHub"
