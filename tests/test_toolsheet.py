import pytest

from camhelper.tool import Tool, ToolState
from camhelper.toollist import ToolList
from camhelper.toolsheet import SheetProject, ToolSheet

NUMBER, DESCRIPTION, TIP = 1, 5, 4
COUNTER_COL = 0


def _descriptions(model):
    return [model.data(row, DESCRIPTION) for row in range(model.row_count())]


def _numbers(model):
    return [model.data(row, NUMBER) for row in range(model.row_count())]


@pytest.fixture
def sheet():
    magazine = [
        Tool(number="10", state=ToolState.IN, counter=5),
        Tool(number="30", state=ToolState.IN, counter=7),
        Tool(number="40", state=ToolState.IN, counter=2),
        Tool(number="50", state=ToolState.OUT, counter=1),
        Tool(number="60", state=ToolState.IN, counter=3),
    ]
    return ToolSheet(magazine, [Tool(number="60")], 10)


@pytest.fixture
def project():
    tools = ToolList([Tool(number="20", description="drill"), Tool(number="10", description="mill")])
    return SheetProject(name="P", state="A", tension="Sp1", tools=tools)


def test_header_row(sheet, project):
    model = sheet.show_table(project)
    assert model.data(0, DESCRIPTION) == "P_A_Sp1  2 Werkzeuge"
    assert model.is_highlighted(0)


def test_project_tools_sorted_and_numbered(sheet, project):
    model = sheet.show_table(project)
    assert _numbers(model)[1:3] == ["10", "20"]
    assert [model.data(r, COUNTER_COL) for r in (1, 2)] == ["1", "2"]
    assert model.data(1, DESCRIPTION) == "mill"


def test_in_section(sheet, project):
    model = sheet.show_table(project)
    descriptions = _descriptions(model)
    heading = "  1 Werkzeuge EINLAGERN  -  5 Frei Plätze im Magazin"
    row = descriptions.index(heading)
    assert model.data(row + 1, NUMBER) == "20"
    assert [t.number for t in sheet.tools_in] == ["20"]


def test_out_section_sorted_by_counter(sheet, project):
    model = sheet.show_table(project)
    descriptions = _descriptions(model)
    row = descriptions.index("  2 Werkzeuge AUSLAGERN ")
    assert _numbers(model)[row + 1:] == ["40", "30"]
    assert model.data(row + 1, TIP) == "2"
    assert model.data(row + 2, TIP) == "7"
    assert model.row_count() == row + 3


def test_counters_run_through_sections(sheet, project):
    model = sheet.show_table(project)
    counters = [model.data(r, COUNTER_COL) for r in range(model.row_count())]
    numbered = [c for c in counters if c.strip()]
    assert numbered == [str(i) for i in range(1, len(numbered) + 1)]


def test_disassembled_tool_marked(project):
    sheet = ToolSheet([], [], 4)
    project.tools.insert(Tool(number="70", state=ToolState.DISASSEMBLED))
    model = sheet.show_table(project)
    assert "70_X" in _numbers(model)


def test_print_without_project(sheet, project):
    assert sheet.toggle_project() is False
    model = sheet.show_table(project, for_print=True)
    assert model.data(0, DESCRIPTION).startswith("  1 Werkzeuge EINLAGERN")
    assert "10" not in _numbers(model)
    assert model.data(1, COUNTER_COL) == "1"


def test_screen_keeps_headings_when_section_off(sheet, project):
    sheet.toggle_in()
    screen = _descriptions(sheet.show_table(project))
    printed = _descriptions(sheet.show_table(project, for_print=True))
    assert any("EINLAGERN" in d for d in screen)
    assert not any("EINLAGERN" in d for d in printed)


def test_toggles_flip_back(sheet):
    assert sheet.toggle_out() is False
    assert sheet.toggle_out() is True
    assert sheet.toggle_in() is False


def test_show_table_stores_model(sheet, project):
    model = sheet.show_table(project)
    assert sheet.model is model
    assert sheet.project is project