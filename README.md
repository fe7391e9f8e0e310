# camhelper

Helpers for preparing CNC machining jobs: keeping track of cutting tools,
working out which tools have to be loaded into or taken out of the machine
magazine for a project, and laying out the resulting set-up sheet as a
paginated table. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `camhelper.tool`

- `ToolState` — `IN`, `OUT` or `DISASSEMBLED`; `str()` gives `"In"`,
  `"Out"` or `"Disassembled"`.
- `Tool` — a dataclass with `number`, `description`, `gage_length`,
  `tool_length`, `tip_length`, `cut_length` (text fields, a single space by
  default), `counter`, `tool_life`, `parts` and `state` (`ToolState.OUT` by
  default).
  - `clear()` resets the text fields to a single space and `counter` to 0.
  - `increment_counter()` adds one to `counter`.
  - `copy()` returns an independent copy.

### `camhelper.toollist`

`ToolList` is an ordered collection of tools in which membership is decided
by tool number. It supports `in`, `len()`, iteration and indexing, and keeps
copies of the tools given to it.

- `ToolList(tools)` inserts the given tools, skipping repeated numbers.
- `insert(tool, check=True)` appends a copy; with `check`, a tool whose
  number is already present is ignored.
- `prepend(tool)` puts a new tool at the front carrying only the number,
  description and gage, tool and tip lengths.
- `delete_tool(row)` removes the tool at a row; `IndexError` if there is none.
- `clear()` removes every tool.
- `update_descriptions(source)` copies descriptions from tools in `source`
  that share a number.
- `sort_by_number()` and `sort_by_counter()` sort stably.

### `camhelper.toolsheet_model`

`ToolSheetModel` holds six columns, titled `Nr`, `Tool ID`, `GL`, `AL`, `FL`
and `Beschreibung` (see `header_data(section, Orientation.HORIZONTAL,
Role.DISPLAY)`).

- `populate(ids, descriptions, gage_lengths, tool_lengths, tip_lengths,
  counters)` replaces the data.
- `row_count()` and `column_count()` (always 6).
- `data(row, column, role=Role.DISPLAY)` returns the cell text for
  `Role.DISPLAY`, `"bold"` for `Role.FONT` and `"darkGray"` for
  `Role.BACKGROUND` on highlighted rows, and `None` otherwise. Out-of-range
  rows or columns raise `IndexError`.
- `is_highlighted(row)` is true for the first row and for rows whose
  description contains `EINLAGERN` or `AUSLAGERN`.

### `camhelper.toolsheet`

`ToolSheet(magazine_tools, top_tools=(), magazine_capacity=0)` builds the
set-up sheet for a `SheetProject` (`name`, `state`, `tension`, `tools`).
`show_table(project, for_print=False)` returns a `ToolSheetModel` with:

1. a heading `<name>_<state>_<tension>  <n> Werkzeuge` and the project's
   tools sorted by number, followed by a blank row;
2. a heading `  <n> Werkzeuge EINLAGERN  -  <free> Frei Plätze im Magazin`
   and the project's tools not in the magazine (disassembled tools get
   `_X` appended to their number), followed by a blank row;
3. a heading `  <n> Werkzeuge AUSLAGERN ` and the magazine tools that are in
   the magazine, not among the top tools and not needed by the project,
   sorted by usage counter; their `FL` column shows the counter.

Tool rows are numbered consecutively across sections. `toggle_project()`,
`toggle_in()` and `toggle_out()` switch the tool rows of a section off or on
and return the new setting; when `for_print` is true, the heading of a
switched-off section is left out as well. After a call, `tools_project`,
`tools_in`, `tools_out` and `model` hold the results.

### `camhelper.tableprinter`

`TablePrinter(page_width, page_height, measure=None)` lays a table out over
pages. `measure(text, width)` returns the height of word-wrapped text; if
none is given, a fixed-pitch estimate is used (6 units per character, 12 per
line).

- `set_cell_margin(left=10, right=5, top=5, bottom=5)`,
  `set_page_margin(left=50, right=20, top=20, bottom=20)` and
  `set_max_row_height(height)` adjust the layout (initially cell margins
  10/5/5/5, no page margins, maximum row height 1000).
- `print_table(rows, column_stretch, headers=())` shares the table width
  among columns by their stretch factors, starts a new page when a row no
  longer fits, and returns a list of `PageLayout`s, each with its `number`,
  its `cells` (`CellLayout`: position, size, text box, `highlighted`,
  `header`, `bold`), its `rows` and its `bottom`. Rows of index 0 and rows
  containing `EINLAGERN` or `AUSLAGERN` are highlighted; the header row has
  index -1. Mismatched column counts, a non-positive page height or table
  width, a negative stretch or a non-positive total stretch raise
  `TablePrintError`.

## Example

```python
from camhelper.tool import Tool, ToolState
from camhelper.toollist import ToolList
from camhelper.toolsheet import SheetProject, ToolSheet

drill = Tool(number="60_120_00", description="Drill 12 mm")
tools = ToolList([drill])
tools.insert(Tool(number="60_120_00"), check=True)  # duplicate, ignored
assert len(tools) == 1

sheet = ToolSheet([Tool(number="10_050_00", state=ToolState.IN)], magazine_capacity=40)
model = sheet.show_table(SheetProject(name="Bracket", state="A", tension="Sp1", tools=tools))
print(model.data(0, 5))  # Bracket_A_Sp1  1 Werkzeuge
```

## What it does not do

There is no user interface, no command, and no storage: tools, magazine
contents and the most used tools have to be supplied by the caller.
`TablePrinter` computes page layouts only; it does not draw or send
anything to a printer.