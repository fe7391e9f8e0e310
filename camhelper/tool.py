"""A single cutting tool and its usage data."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class ToolState(Enum):
    """Where a tool currently is."""

    IN = "In"
    OUT = "Out"
    DISASSEMBLED = "Disassembled"

    def __str__(self) -> str:
        return self.value


_BLANK = " "


@dataclass
class Tool:
    """A tool with its number, lengths and usage counter."""

    number: str = _BLANK
    description: str = _BLANK
    gage_length: str = _BLANK
    tool_length: str = _BLANK
    tip_length: str = _BLANK
    cut_length: str = _BLANK
    counter: int = 0
    tool_life: bool = False
    parts: int = 0
    state: ToolState = ToolState.OUT

    def clear(self) -> None:
        """Reset the textual fields and the usage counter."""
        self.number = _BLANK
        self.description = _BLANK
        self.gage_length = _BLANK
        self.tool_length = _BLANK
        self.tip_length = _BLANK
        self.cut_length = _BLANK
        self.counter = 0

    def increment_counter(self) -> None:
        """Count one more use of the tool."""
        self.counter += 1

    def copy(self) -> Tool:
        """Return an independent copy of this tool."""
        return dataclasses.replace(self)