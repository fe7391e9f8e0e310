"""An ordered collection of tools keyed by tool number."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from camhelper.tool import Tool


class ToolList:
    """Ordered list of tools; membership is decided by tool number."""

    def __init__(self, tools: Iterable[Tool] | None = None) -> None:
        self._tools: list[Tool] = []
        for tool in tools or ():
            self.insert(tool)

    def __contains__(self, tool: object) -> bool:
        if not isinstance(tool, Tool):
            return False
        return any(own.number == tool.number for own in self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools)

    def __getitem__(self, index: int) -> Tool:
        return self._tools[index]

    def __repr__(self) -> str:
        return f"ToolList({self._tools!r})"

    def clear(self) -> None:
        """Remove every tool."""
        self._tools.clear()

    def delete_tool(self, row: int) -> None:
        """Remove the tool at the given row."""
        if not 0 <= row < len(self._tools):
            raise IndexError(f"no tool at row {row}")
        del self._tools[row]

    def insert(self, tool: Tool, check: bool = True) -> None:
        """Append a copy of the tool; with check, skip numbers already present."""
        if check and tool in self:
            return
        self._tools.append(tool.copy())

    def prepend(self, tool: Tool) -> None:
        """Put a copy of the tool's number, description and lengths at the front."""
        self._tools.insert(
            0,
            Tool(
                number=tool.number,
                description=tool.description,
                gage_length=tool.gage_length,
                tool_length=tool.tool_length,
                tip_length=tool.tip_length,
            ),
        )

    def update_descriptions(self, source: Iterable[Tool]) -> None:
        """Take descriptions from tools in source that share a number."""
        descriptions: dict[str, str] = {}
        for tool in source:
            descriptions[tool.number] = tool.description
        for tool in self._tools:
            if tool.number in descriptions:
                tool.description = descriptions[tool.number]

    def sort_by_number(self) -> None:
        """Sort by tool number, keeping the order of equal numbers."""
        self._tools.sort(key=lambda tool: tool.number)

    def sort_by_counter(self) -> None:
        """Sort by usage counter, keeping the order of equal counts."""
        self._tools.sort(key=lambda tool: tool.counter)