"""Tool sheet: which tools a project needs, what to store and what to remove."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from camhelper.tool import Tool, ToolState
from camhelper.toollist import ToolList
from camhelper.toolsheet_model import ToolSheetModel

_BLANK = " "


@dataclass
class SheetProject:
    """The parts of a project that the tool sheet shows."""

    name: str = ""
    state: str = ""
    tension: str = ""
    tools: ToolList = field(default_factory=ToolList)


@dataclass
class _Columns:
    counters: list[str] = field(default_factory=list)
    ids: list[str] = field(default_factory=list)
    descriptions: list[str] = field(default_factory=list)
    gage_lengths: list[str] = field(default_factory=list)
    tool_lengths: list[str] = field(default_factory=list)
    tip_lengths: list[str] = field(default_factory=list)

    def add(
        self,
        counter: str = _BLANK,
        number: str = _BLANK,
        description: str = _BLANK,
        gage_length: str = _BLANK,
        tool_length: str = _BLANK,
        tip_length: str = _BLANK,
    ) -> None:
        self.counters.append(counter)
        self.ids.append(number)
        self.descriptions.append(description)
        self.gage_lengths.append(gage_length)
        self.tool_lengths.append(tool_length)
        self.tip_lengths.append(tip_length)

    def to_model(self) -> ToolSheetModel:
        model = ToolSheetModel()
        model.populate(
            self.ids,
            self.descriptions,
            self.gage_lengths,
            self.tool_lengths,
            self.tip_lengths,
            self.counters,
        )
        return model


class ToolSheet:
    """Builds the set-up table for a project against the current magazine."""

    def __init__(
        self,
        magazine_tools: Iterable[Tool],
        top_tools: Iterable[Tool] = (),
        magazine_capacity: int = 0,
    ) -> None:
        self.magazine = ToolList(magazine_tools)
        self.top_tools = ToolList(top_tools)
        self.magazine_capacity = magazine_capacity
        self.print_project = True
        self.print_in = True
        self.print_out = True
        self.project: SheetProject | None = None
        self.model: ToolSheetModel | None = None
        self.tools_in = ToolList()
        self.tools_out = ToolList()
        self.tools_project = ToolList()

    def toggle_project(self) -> bool:
        """Switch the project section on or off; return the new setting."""
        self.print_project = not self.print_project
        return self.print_project

    def toggle_in(self) -> bool:
        """Switch the tools-to-store section on or off; return the new setting."""
        self.print_in = not self.print_in
        return self.print_in

    def toggle_out(self) -> bool:
        """Switch the tools-to-remove section on or off; return the new setting."""
        self.print_out = not self.print_out
        return self.print_out

    def show_table(self, project: SheetProject, for_print: bool = False) -> ToolSheetModel:
        """Build and return the table model for the project."""
        self.project = project
        project_size = len(project.tools)

        self.tools_project = ToolList(project.tools)
        self.tools_project.sort_by_number()

        self.tools_in = ToolList(
            tool for tool in self.tools_project if tool not in self.magazine
        )

        self.tools_out = ToolList(
            tool
            for tool in self.magazine
            if tool not in self.top_tools
            and tool not in self.tools_project
            and tool.state is ToolState.IN
        )
        self.tools_out.sort_by_counter()

        columns = _Columns()
        counter = 0

        if not for_print or self.print_project:
            columns.add(
                description=(
                    f"{project.name}_{project.state}_{project.tension}"
                    f"  {project_size} Werkzeuge"
                )
            )

        if self.print_project:
            for tool in self.tools_project:
                counter += 1
                columns.add(
                    str(counter),
                    tool.number,
                    tool.description,
                    tool.gage_length,
                    tool.tool_length,
                    tool.tip_length,
                )
            columns.add()

        if not for_print or self.print_in:
            free = self.magazine_capacity - len(self.magazine)
            columns.add(
                description=(
                    f"  {len(self.tools_in)} Werkzeuge EINLAGERN"
                    f"  -  {free} Frei Plätze im Magazin"
                )
            )

        if self.print_in:
            for tool in self.tools_in:
                counter += 1
                number = tool.number
                if tool.state is ToolState.DISASSEMBLED:
                    number += "_X"
                columns.add(
                    str(counter),
                    number,
                    tool.description,
                    tool.gage_length,
                    tool.tool_length,
                    tool.tip_length,
                )
            columns.add()

        if not for_print or self.print_out:
            columns.add(description=f"  {len(self.tools_out)} Werkzeuge AUSLAGERN ")

        if self.print_out:
            for tool in self.tools_out:
                counter += 1
                columns.add(
                    str(counter),
                    tool.number,
                    tool.description,
                    tool.gage_length,
                    tool.tool_length,
                    str(tool.counter),
                )

        self.model = columns.to_model()
        return self.model