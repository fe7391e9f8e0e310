"""Lays out a table over printable pages, row by row, with page breaks."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

Measure = Callable[[str, float], float]

_MARKERS = ("EINLAGERN", "AUSLAGERN")
_CHAR_WIDTH = 6.0
_LINE_HEIGHT = 12.0


class TablePrintError(ValueError):
    """Raised when a table cannot be laid out."""


@dataclass(frozen=True)
class CellLayout:
    """Placement of one cell: its box, its text box and how it is drawn."""

    row: int
    column: int
    text: str
    x: float
    y: float
    width: float
    height: float
    text_x: float
    text_y: float
    text_width: float
    text_height: float
    highlighted: bool = False
    header: bool = False

    @property
    def bold(self) -> bool:
        """Highlighted cells are printed in bold."""
        return self.highlighted


@dataclass
class PageLayout:
    """The cells placed on one page and where the table ends on it."""

    number: int
    cells: list[CellLayout] = field(default_factory=list)
    bottom: float = 0.0

    @property
    def rows(self) -> list[int]:
        """Row indices on this page in print order; -1 is the header row."""
        seen: list[int] = []
        for cell in self.cells:
            if not seen or seen[-1] != cell.row:
                seen.append(cell.row)
        return seen


def _estimate_height(text: str, width: float) -> float:
    """Height of text word-wrapped into the width, in a fixed-pitch font."""
    chars_per_line = max(1, int(width // _CHAR_WIDTH))
    lines = 0
    for paragraph in text.split("\n"):
        line_length = 0
        lines += 1
        for word in paragraph.split():
            needed = len(word) if line_length == 0 else line_length + 1 + len(word)
            if line_length and needed > chars_per_line:
                lines += 1
                line_length = len(word)
            else:
                line_length = needed
            while line_length > chars_per_line:
                lines += 1
                line_length -= chars_per_line
    return lines * _LINE_HEIGHT


class TablePrinter:
    """Distributes table rows over pages of a given size."""

    def __init__(
        self,
        page_width: float,
        page_height: float,
        measure: Measure | None = None,
    ) -> None:
        self.page_width = page_width
        self.page_height = page_height
        self.measure: Measure = measure or _estimate_height
        self.top_margin = 5
        self.bottom_margin = 5
        self.left_margin = 10
        self.right_margin = 5
        self.header_height = 0
        self.bottom_height = 0
        self.left_blank = 0
        self.right_blank = 0
        self.max_row_height = 1000

    def set_cell_margin(
        self, left: int = 10, right: int = 5, top: int = 5, bottom: int = 5
    ) -> None:
        """Set the space between a cell's border and its text."""
        self.left_margin = left
        self.right_margin = right
        self.top_margin = top
        self.bottom_margin = bottom

    def set_page_margin(
        self, left: int = 50, right: int = 20, top: int = 20, bottom: int = 20
    ) -> None:
        """Set the space kept free around the table on each page."""
        self.left_blank = left
        self.right_blank = right
        self.header_height = top
        self.bottom_height = bottom

    def set_max_row_height(self, height: int) -> None:
        """Limit the text height of a single row."""
        self.max_row_height = height

    def _column_widths(self, column_stretch: Sequence[int]) -> list[float]:
        table_width = self.page_width - self.left_blank - self.right_blank
        if table_width <= 0:
            raise TablePrintError("wrong table width")
        for column, stretch in enumerate(column_stretch):
            if stretch < 0:
                raise TablePrintError(
                    f"wrong column stretch, columnt: {column} stretch: {stretch}"
                )
        total = sum(column_stretch)
        if total <= 0:
            raise TablePrintError("wrong stretch")
        return [table_width / total * stretch for stretch in column_stretch]

    def _row_height(
        self,
        texts: Sequence[str],
        widths: Sequence[float],
        column_stretch: Sequence[int],
    ) -> float:
        height = 0.0
        for text, width, stretch in zip(texts, widths, column_stretch):
            if stretch == 0:
                continue
            text_width = width - self.right_margin - self.left_margin
            measured = self.measure(text, text_width)
            if measured > height:
                height = min(measured, self.max_row_height)
        return height

    def print_table(
        self,
        rows: Sequence[Sequence[object]],
        column_stretch: Sequence[int],
        headers: Sequence[str] = (),
    ) -> list[PageLayout]:
        """Lay the rows out over pages and return the pages."""
        column_count = len(column_stretch)
        table = [[str(value) for value in row] for row in rows]
        if any(len(row) != column_count for row in table):
            raise TablePrintError(
                "Different columns count in model and in columnStretch"
            )
        if headers and len(headers) != column_count:
            raise TablePrintError("Different columns count in model and in headers")
        if self.page_height <= 0:
            raise TablePrintError("wrong page height")
        widths = self._column_widths(column_stretch)

        entries: list[tuple[int, list[str]]] = []
        if headers:
            entries.append((-1, [str(header) for header in headers]))
        entries.extend(enumerate(table))

        pages = [PageLayout(number=1)]
        y = 0.0
        vertical_padding = self.top_margin + self.bottom_margin
        limit = self.page_height - self.bottom_height

        for index, texts in entries:
            height = self._row_height(texts, widths, column_stretch)
            if y + height + vertical_padding > limit:
                pages[-1].bottom = y
                pages.append(PageLayout(number=len(pages) + 1))
                y = float(self.header_height)

            highlighted = index == 0 or (
                index >= 0 and any(m in text for text in texts for m in _MARKERS)
            )
            x = float(self.left_blank)
            for column, (text, width) in enumerate(zip(texts, widths)):
                pages[-1].cells.append(
                    CellLayout(
                        row=index,
                        column=column,
                        text=text,
                        x=x,
                        y=y,
                        width=width,
                        height=height + vertical_padding,
                        text_x=x + self.left_margin,
                        text_y=y + self.top_margin,
                        text_width=width - self.right_margin - self.left_margin,
                        text_height=height,
                        highlighted=highlighted,
                        header=index < 0,
                    )
                )
                x += width
            y += height + vertical_padding

        pages[-1].bottom = y
        return pages