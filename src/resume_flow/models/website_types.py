"""Website type labels and icons."""

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

OTHER_TYPE = "other"


@dataclass(frozen=True)
class WebsiteType:
    """Display metadata for a website category."""

    label: str
    icon: str


class WebsiteTypeTable(Mapping[str, WebsiteType]):
    """Read-only lookup from website category to its label and icon.

    An ``other`` entry is mandatory: unknown categories resolve to it.
    """

    def __init__(self, entries: Mapping[str, WebsiteType]) -> None:
        if OTHER_TYPE not in entries:
            raise ValueError(f"Website type table requires an '{OTHER_TYPE}' entry")
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, key: str) -> WebsiteType:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, website_type: str | None) -> WebsiteType:
        """Return the entry for a category, falling back to ``other``."""
        if website_type and website_type in self._entries:
            return self._entries[website_type]
        return self._entries[OTHER_TYPE]

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, str]]) -> "WebsiteTypeTable":
        return cls(
            {
                key: WebsiteType(label=str(value["label"]), icon=str(value.get("icon", "")))
                for key, value in data.items()
            }
        )

    @classmethod
    def from_json(cls, path: Path) -> "WebsiteTypeTable":
        """Load a table from a JSON file shaped like ``{type: {label, icon}}``."""
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Website type table must be a JSON object: {path}")
        return cls.from_dict(data)


DEFAULT_WEBSITE_TYPES = WebsiteTypeTable.from_dict(
    {
        "personal": {"label": "Personal Website", "icon": "\U0001f310"},
        "portfolio": {"label": "Portfolio", "icon": "\U0001f4c2"},
        "linkedin": {"label": "LinkedIn", "icon": "\U0001f517"},
        "github": {"label": "GitHub", "icon": "\U0001f4bb"},
        OTHER_TYPE: {"label": "Website", "icon": "\U0001f517"},
    }
)
