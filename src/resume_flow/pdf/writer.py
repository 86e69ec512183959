"""Page writers: the drawing surface behind the layout engine.

Coordinates are PDF points measured from the top-left corner of the page.
``y`` passed to ``draw_text`` is the top of the text line.
"""

from dataclasses import dataclass
from typing import Protocol

from fpdf import FPDF  # type: ignore[import-untyped]

Color = tuple[int, int, int]

TEXT_COLOR: Color = (0, 0, 0)
HEADING_COLOR: Color = (51, 51, 51)
MUTED_COLOR: Color = (102, 102, 102)
RULE_COLOR: Color = (204, 204, 204)
PAGE_NUMBER_COLOR: Color = (153, 153, 153)

FONT_NAME = "Helvetica"


@dataclass(frozen=True)
class PageGeometry:
    """Fixed page geometry and spacing, in points."""

    # A4
    width: float = 595.28
    height: float = 841.89
    margin: float = 50.0
    # Content never goes below height - min_bottom_margin
    min_bottom_margin: float = 70.0
    # Added to the font size to get the advance after a line
    leading: float = 5.0
    # Added to the font size between wrapped lines of one text
    wrap_leading: float = 2.0
    # Sections start on a new page when less space than this remains
    section_break_threshold: float = 100.0
    # Space reserved for an entry heading plus its first lines
    item_min_space: float = 60.0
    skills_chunk_size: int = 5
    # Baseline of the page number, measured from the bottom edge
    page_number_offset: float = 30.0

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def content_bottom(self) -> float:
        return self.height - self.min_bottom_margin


class PageWriter(Protocol):
    """Drawing operations the layout engine needs."""

    @property
    def page_count(self) -> int: ...

    def new_page(self) -> None: ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        size: float,
        bold: bool = False,
        color: Color = TEXT_COLOR,
    ) -> None: ...

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        color: Color = RULE_COLOR,
        thickness: float = 1.0,
    ) -> None: ...

    def text_width(self, text: str, *, size: float, bold: bool = False) -> float: ...

    def set_metadata(self, title: str, author: str) -> None: ...

    def output(self) -> bytes: ...


def _sanitize_unsupported_chars(text: str) -> str:
    """Map text onto the Latin-1 range covered by the standard PDF fonts.

    Typographic quotes, dashes and bullets get ASCII-like stand-ins; anything
    else outside Latin-1 becomes "?".
    """
    replacements = {
        "\u2018": "'",  # Left single quote
        "\u2019": "'",  # Right single quote
        "\u201c": '"',  # Left double quote
        "\u201d": '"',  # Right double quote
        "\u2013": "-",  # En dash
        "\u2014": "-",  # Em dash
        "\u2022": "\u00b7",  # Bullet -> middle dot
        "\u2026": "...",  # Ellipsis
    }
    for char, replacement in replacements.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")


class FPDFPageWriter(FPDF):
    """fpdf2 document using the built-in Helvetica fonts.

    Pagination is driven by the layout engine, so automatic page breaks are
    off.
    """

    def __init__(self, geometry: PageGeometry | None = None, compress: bool = True) -> None:
        self.geometry = geometry or PageGeometry()
        super().__init__(unit="pt", format=(self.geometry.width, self.geometry.height))
        self.set_auto_page_break(auto=False)
        self.set_margins(
            left=self.geometry.margin,
            top=self.geometry.margin,
            right=self.geometry.margin,
        )
        self.set_compression(compress)
        self.set_creator("resume-flow")

    @property
    def page_count(self) -> int:
        return self.page_no()

    def new_page(self) -> None:
        self.add_page()

    def _use_font(self, size: float, bold: bool) -> None:
        self.set_font(FONT_NAME, "B" if bold else "", size)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        size: float,
        bold: bool = False,
        color: Color = TEXT_COLOR,
    ) -> None:
        if not text:
            return
        self._use_font(size, bold)
        self.set_text_color(*color)
        # fpdf places text by its baseline
        self.text(x, y + size, _sanitize_unsupported_chars(text))

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        color: Color = RULE_COLOR,
        thickness: float = 1.0,
    ) -> None:
        self.set_draw_color(*color)
        self.set_line_width(thickness)
        self.line(x1, y1, x2, y2)

    def text_width(self, text: str, *, size: float, bold: bool = False) -> float:
        self._use_font(size, bold)
        return self.get_string_width(_sanitize_unsupported_chars(text))

    def set_metadata(self, title: str, author: str) -> None:
        self.set_title(title)
        self.set_author(author)
        self.set_subject("Resume")

    def output(self) -> bytes:  # type: ignore[override]
        return bytes(super().output())
