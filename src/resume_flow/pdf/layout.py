"""Cursor-tracking layout engine.

There is no layout tree: text is measured, wrapped and placed as it is
added, and the engine keeps only the vertical cursor of the current page.
"""

import logging

from resume_flow.pdf.writer import (
    HEADING_COLOR,
    PAGE_NUMBER_COLOR,
    RULE_COLOR,
    TEXT_COLOR,
    Color,
    PageGeometry,
    PageWriter,
)

logger = logging.getLogger(__name__)

SECTION_TITLE_SIZE = 14
SECTION_TITLE_GAP = 20.0
SECTION_RULE_OFFSET = 3.0
SECTION_CONTENT_GAP = 10.0
PAGE_NUMBER_SIZE = 10


class ResumeLayout:
    """Places text on pages produced by a PageWriter.

    One layout per document. The first page is opened on construction and
    ``finish`` must be called once all content is placed.

    Args:
        writer: Drawing surface.
        geometry: Page size, margins and spacing.
        page_total: Total page count, when known. Page numbers "i / total"
            are stamped only when this is greater than one.
    """

    def __init__(
        self,
        writer: PageWriter,
        geometry: PageGeometry | None = None,
        page_total: int | None = None,
    ) -> None:
        self.writer = writer
        self.geometry = geometry or PageGeometry()
        self.page_total = page_total
        self.y = self.geometry.margin
        self._finished = False
        self.writer.new_page()

    @property
    def at_page_top(self) -> bool:
        return self.y <= self.geometry.margin

    @property
    def remaining_space(self) -> float:
        return self.geometry.content_bottom - self.y

    def new_page(self) -> None:
        """Close the current page and continue at the top margin of a new one."""
        self._stamp_page_number()
        self.writer.new_page()
        self.y = self.geometry.margin
        logger.debug(f"Started page {self.writer.page_count}")

    def ensure_space(self, required: float) -> bool:
        """Break the page unless ``required`` points fit below the cursor.

        Returns:
            True if a new page was started.
        """
        if self.at_page_top or self.y + required <= self.geometry.content_bottom:
            return False
        self.new_page()
        return True

    def skip(self, points: float) -> None:
        """Move the cursor down, except at the top of a page."""
        if not self.at_page_top:
            self.y += points

    def wrap_text(self, text: str, *, font_size: float, bold: bool = False, indent: float = 0) -> list[str]:
        """Greedily break text into lines that fit the content width.

        Explicit newlines are kept; blank source lines come back as "".
        Runs of spaces inside a line are kept, so "a  b" stays "a  b".
        Words wider than a whole line are split by characters.
        """
        max_width = self.geometry.content_width - indent
        lines: list[str] = []

        for paragraph in text.split("\n"):
            if not paragraph.strip():
                lines.append("")
                continue
            # Empty pieces between consecutive spaces rebuild the original gaps
            words = paragraph.replace("\t", " ").split(" ")
            line = ""
            for word in words:
                for piece in self._split_long_word(word, font_size, bold, max_width):
                    candidate = f"{line} {piece}" if line else piece
                    if line and self.writer.text_width(candidate, size=font_size, bold=bold) > max_width:
                        lines.append(line.rstrip())
                        line = piece
                    else:
                        line = candidate
            lines.append(line.rstrip())

        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()
        return lines

    def _split_long_word(self, word: str, font_size: float, bold: bool, max_width: float) -> list[str]:
        if self.writer.text_width(word, size=font_size, bold=bold) <= max_width:
            return [word]
        pieces: list[str] = []
        current = ""
        for char in word:
            if current and self.writer.text_width(current + char, size=font_size, bold=bold) > max_width:
                pieces.append(current)
                current = char
            else:
                current += char
        if current:
            pieces.append(current)
        return pieces

    def add_text(
        self,
        text: str,
        *,
        font_size: float = 12,
        bold: bool = False,
        color: Color = TEXT_COLOR,
        y: float | None = None,
        indent: float = 0,
        check_new_page: bool = True,
        keep_together: bool = False,
    ) -> float:
        """Place text at the cursor (or at ``y``) and return the new cursor.

        A line that would cross the bottom margin moves to a new page, also
        in the middle of a wrapped text. With ``keep_together`` a wrapped
        text that does not fit moves to the next page as a whole, as long as
        it fits on an empty page. With ``check_new_page`` off the text is
        drawn where the cursor is, whatever space is left.
        """
        if y is not None:
            self.y = y

        lines = self.wrap_text(text, font_size=font_size, bold=bold, indent=indent)
        if not lines:
            return self.y

        geometry = self.geometry
        line_height = font_size + geometry.leading
        wrapped_height = font_size + geometry.wrap_leading
        block_height = wrapped_height * (len(lines) - 1) + line_height
        usable_height = geometry.content_bottom - geometry.margin

        if check_new_page:
            if self.y + line_height > geometry.content_bottom:
                self.new_page()
            elif keep_together and block_height <= usable_height:
                self.ensure_space(block_height)

        for index, line in enumerate(lines):
            if index > 0:
                self.y += wrapped_height
                if check_new_page and self.y + line_height > geometry.content_bottom:
                    self.new_page()
            self.writer.draw_text(
                line,
                geometry.margin + indent,
                self.y,
                size=font_size,
                bold=bold,
                color=color,
            )

        self.y += line_height
        return self.y

    def add_section_title(self, title: str) -> float:
        """Heading with a rule underneath.

        When less than the section threshold remains, the section starts on
        a new page so the heading stays with its first lines.
        """
        geometry = self.geometry
        if self.remaining_space < geometry.section_break_threshold:
            logger.debug(f"Starting section {title!r} on a new page")
            self.new_page()
        else:
            self.skip(SECTION_TITLE_GAP)

        self.add_text(title, font_size=SECTION_TITLE_SIZE, bold=True, color=HEADING_COLOR)
        rule_y = self.y - SECTION_RULE_OFFSET
        self.writer.draw_line(
            geometry.margin,
            rule_y,
            geometry.width - geometry.margin,
            rule_y,
            color=RULE_COLOR,
        )
        self.y += SECTION_CONTENT_GAP
        return self.y

    def _stamp_page_number(self) -> None:
        if not self.page_total or self.page_total <= 1:
            return
        label = f"{self.writer.page_count} / {self.page_total}"
        width = self.writer.text_width(label, size=PAGE_NUMBER_SIZE)
        geometry = self.geometry
        self.writer.draw_text(
            label,
            (geometry.width - width) / 2,
            geometry.height - geometry.page_number_offset - PAGE_NUMBER_SIZE,
            size=PAGE_NUMBER_SIZE,
            color=PAGE_NUMBER_COLOR,
        )

    def finish(self) -> int:
        """Stamp the last page and return the page count."""
        if not self._finished:
            self._stamp_page_number()
            self._finished = True
        return self.writer.page_count
