"""Table model behind the tool sheet: six columns of tool data."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Role(Enum):
    """Kinds of data a cell can supply."""

    DISPLAY = "display"
    FONT = "font"
    BACKGROUND = "background"


class Orientation(Enum):
    """Header orientation."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


HEADERS = ("Nr", "Tool ID", "GL", "AL", "FL", "Beschreibung")
BOLD_FONT = "bold"
HIGHLIGHT_BACKGROUND = "darkGray"
_MARKERS = ("EINLAGERN", "AUSLAGERN")


class ToolSheetModel:
    """Column data for the tool sheet table."""

    def __init__(self) -> None:
        self._ids: list[str] = []
        self._descriptions: list[str] = []
        self._gage_lengths: list[str] = []
        self._tool_lengths: list[str] = []
        self._tip_lengths: list[str] = []
        self._counters: list[str] = []

    def populate(
        self,
        ids: Sequence[str],
        descriptions: Sequence[str],
        gage_lengths: Sequence[str],
        tool_lengths: Sequence[str],
        tip_lengths: Sequence[str],
        counters: Sequence[str],
    ) -> None:
        """Replace all column data."""
        self._ids = list(ids)
        self._descriptions = list(descriptions)
        self._gage_lengths = list(gage_lengths)
        self._tool_lengths = list(tool_lengths)
        self._tip_lengths = list(tip_lengths)
        self._counters = list(counters)

    def row_count(self) -> int:
        """Number of rows, given by the tool id column."""
        return len(self._ids)

    def column_count(self) -> int:
        """Number of columns, always six."""
        return len(HEADERS)

    def is_highlighted(self, row: int) -> bool:
        """True for the first row and for store/remove heading rows."""
        if row == 0:
            return True
        description = self._descriptions[row]
        return any(marker in description for marker in _MARKERS)

    def data(self, row: int, column: int, role: Role = Role.DISPLAY) -> str | None:
        """Value of a cell for the given role, or None when there is none."""
        if not 0 <= row < self.row_count():
            raise IndexError(f"row {row} out of range")
        if not 0 <= column < self.column_count():
            raise IndexError(f"column {column} out of range")
        if role is Role.DISPLAY:
            columns = (
                self._counters,
                self._ids,
                self._gage_lengths,
                self._tool_lengths,
                self._tip_lengths,
                self._descriptions,
            )
            return columns[column][row]
        if role is Role.FONT:
            return BOLD_FONT if self.is_highlighted(row) else None
        if role is Role.BACKGROUND:
            return HIGHLIGHT_BACKGROUND if self.is_highlighted(row) else None
        return None

    def header_data(
        self,
        section: int,
        orientation: Orientation = Orientation.HORIZONTAL,
        role: Role = Role.DISPLAY,
    ) -> str | None:
        """Horizontal header title for a column, or None."""
        if role is Role.DISPLAY and orientation is Orientation.HORIZONTAL:
            if 0 <= section < len(HEADERS):
                return HEADERS[section]
        return None