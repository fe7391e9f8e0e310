import pytest

from camhelper.toolsheet_model import (
    BOLD_FONT,
    HIGHLIGHT_BACKGROUND,
    Orientation,
    Role,
    ToolSheetModel,
)


@pytest.fixture
def model():
    m = ToolSheetModel()
    m.populate(
        ids=[" ", "T1", " ", "T2"],
        descriptions=["Project", "Mill", "  1 Werkzeuge EINLAGERN", "Drill"],
        gage_lengths=[" ", "g1", " ", "g2"],
        tool_lengths=[" ", "l1", " ", "l2"],
        tip_lengths=[" ", "f1", " ", "f2"],
        counters=[" ", "1", " ", "2"],
    )
    return m


def test_counts(model):
    assert model.row_count() == 4
    assert model.column_count() == 6


def test_empty_model_has_no_rows():
    assert ToolSheetModel().row_count() == 0


def test_display_column_order(model):
    row = [model.data(1, column) for column in range(model.column_count())]
    assert row == ["1", "T1", "g1", "l1", "f1", "Mill"]


def test_highlighting(model):
    assert model.is_highlighted(0)
    assert not model.is_highlighted(1)
    assert model.is_highlighted(2)
    assert not model.is_highlighted(3)


def test_font_and_background(model):
    assert model.data(0, 0, Role.FONT) == BOLD_FONT
    assert model.data(2, 5, Role.BACKGROUND) == HIGHLIGHT_BACKGROUND
    assert model.data(3, 1, Role.FONT) is None
    assert model.data(3, 1, Role.BACKGROUND) is None


def test_auslagern_row_is_highlighted():
    m = ToolSheetModel()
    m.populate([" ", " "], ["x", "  3 Werkzeuge AUSLAGERN "], [" "] * 2, [" "] * 2, [" "] * 2, [" "] * 2)
    assert m.data(1, 0, Role.BACKGROUND) == HIGHLIGHT_BACKGROUND


@pytest.mark.parametrize("row, column", [(4, 0), (-1, 0), (0, 6), (0, -1)])
def test_out_of_range(model, row, column):
    with pytest.raises(IndexError):
        model.data(row, column)


def test_header_data(model):
    headers = [model.header_data(section, Orientation.HORIZONTAL) for section in range(6)]
    assert headers == ["Nr", "Tool ID", "GL", "AL", "FL", "Beschreibung"]
    assert model.header_data(6, Orientation.HORIZONTAL) is None
    assert model.header_data(0, Orientation.VERTICAL) is None
    assert model.header_data(0, Orientation.HORIZONTAL, Role.FONT) is None


def test_populate_replaces_and_copies():
    m = ToolSheetModel()
    ids = ["A"]
    m.populate(ids, ["d"], ["g"], ["l"], ["t"], ["c"])
    ids.append("B")
    assert m.row_count() == 1
    m.populate(["X", "Y"], ["d1", "d2"], ["g", "g"], ["l", "l"], ["t", "t"], ["c", "c"])
    assert m.row_count() == 2
    assert m.data(1, 1) == "Y"