import pytest

from boxtable.layout import (
    Cell,
    LayoutSettings,
    Row,
    Section,
    build_layout,
    real_index,
    relative_index,
)
from boxtable.styles import Alignment


def _layout(headers=(), data=(), footers=(), **options):
    return build_layout(LayoutSettings(**options), list(headers), list(data), list(footers))


def _widths(row):
    return [cell.width for cell in row.cells]


def _text(row, col):
    return [str(line) for line in row.cells[col].lines]


def test_relative_col_indexes_simple():
    row = Row(cells=[Cell(span=1), Cell(span=1), Cell(span=1)])
    assert real_index(row, 0) == 0
    assert real_index(row, 1) == 1
    assert real_index(row, 2) == 2
    assert relative_index(row, 0) == 0
    assert relative_index(row, 1) == 1
    assert relative_index(row, 2) == 2


def test_relative_col_indexes_with_spans():
    row = Row(cells=[Cell(span=2), Cell(span=3), Cell(span=1)])
    assert real_index(row, 2) == 1
    assert real_index(row, 0) == 0
    assert real_index(row, 5) == 2
    assert relative_index(row, 0) == 0
    assert relative_index(row, 1) == 2
    assert relative_index(row, 2) == 5


def test_real_index_past_end_returns_length():
    row = Row(cells=[Cell(span=2), Cell(span=1)])
    assert real_index(row, 7) == 2


def test_colspan_defaults_and_minimum():
    settings = LayoutSettings(header_colspans={0: (1, 0, 3)})
    assert settings.colspan(Section.HEADER, 0, 0) == 1
    assert settings.colspan(Section.HEADER, 0, 1) == 1
    assert settings.colspan(Section.HEADER, 0, 2) == 3
    assert settings.colspan(Section.HEADER, 0, 5) == 1
    assert settings.colspan(Section.HEADER, 1, 2) == 1
    assert settings.colspan(Section.CONTENT, 0, 2) == 1


def test_alignment_defaults():
    settings = LayoutSettings(alignments=(Alignment.RIGHT,))
    assert settings.alignment(Section.HEADER, 0) == Alignment.CENTER
    assert settings.alignment(Section.FOOTER, 3) == Alignment.CENTER
    assert settings.alignment(Section.CONTENT, 0) == Alignment.RIGHT
    assert settings.alignment(Section.CONTENT, 1) == Alignment.LEFT


def test_empty_layout():
    assert _layout() == []


def test_basic_layout():
    rows = _layout([["A", "B", "C"]], [["1", "2", "3"], ["4", "5", "6"]])
    assert [row.section for row in rows] == [Section.HEADER, Section.CONTENT, Section.CONTENT]
    assert [row.first for row in rows] == [True, False, False]
    assert [row.last for row in rows] == [False, False, True]
    assert all(_widths(row) == [1, 1, 1] for row in rows)
    assert [c.first for c in rows[0].cells] == [True, False, False]
    assert [c.last for c in rows[0].cells] == [False, False, True]
    assert _text(rows[2], 1) == ["5"]


def test_varying_widths():
    rows = _layout(
        [["AAA", "BBBBB", "CCCCCCCCC"]],
        [["111111", "2", "3"], ["4", "5555555555", "6"]],
    )
    assert all(_widths(row) == [6, 10, 9] for row in rows)
    assert _text(rows[0], 0) == [" AAA  "]
    assert _text(rows[0], 1) == ["  BBBBB   "]
    assert _text(rows[1], 1) == ["2         "]


def test_wrapping():
    sentence = "This is a very, very, very, very, very, long sentence which will surely wrap?"
    rows = _layout([["ID", "Name", "Notes"]], [["1", "Jim", ""], ["2", "Bob", sentence]])
    assert _widths(rows[2]) == [2, 4, 59]
    assert rows[2].height == 2
    assert _text(rows[2], 2) == [
        "This is a very, very, very, very, very, long sentence which",
        "will surely wrap?" + " " * 42,
    ]
    assert _text(rows[2], 0) == ["2 ", "  "]


def test_only_wrap_when_needed():
    digits = "0123456789" * 8
    rows = _layout([["ID", "Fruit", "Stock"]], [["1", digits, "14"], ["2", "Banana", "88,041"]])
    assert _text(rows[1], 1) == [digits[:59] + "-", digits[59:] + " " * 39]
    assert rows[1].cells[1].width == 60


def test_multiple_lines_padding_none():
    rows = _layout(
        [["ID", "Name", "Notes"]],
        [["1", "Jim", ""], ["2", "Bob", "This is a sentence.\nThis is another sentence.\nAnd yet another one!"]],
        padding=0,
    )
    assert _widths(rows[0]) == [2, 4, 25]
    assert rows[2].height == 3
    assert _text(rows[2], 2)[1] == "This is another sentence."


def test_unequal_rows_are_padded():
    rows = _layout([["A", "B", "C"]], [["1"], [], ["7", "8", "9", "10"]])
    assert [len(row.cells) for row in rows] == [4, 4, 4, 4]
    assert all(_widths(row) == [1, 1, 1, 2] for row in rows)
    assert rows[2].cells[0].first is True
    assert all(row.cells[-1].last for row in rows)
    assert [c.last for c in rows[0].cells] == [False, False, False, True]


def test_footer_rows():
    rows = _layout(data=[["1", "2", "3"]], footers=[["A", "B", "C"]])
    assert rows[0].first is True
    assert rows[0].last is False
    assert rows[1].footer is True
    assert rows[1].last is True


def test_auto_merge_flags():
    rows = _layout(
        [["A", "B", "3"]],
        [["", "2", "3"], ["", "2", "6"], ["1", "2", "6"]],
        auto_merge=True,
    )
    assert [c.merge_above for c in rows[1].cells] == [False, False, False]
    assert [c.merge_above for c in rows[2].cells] == [False, True, False]
    assert [c.merge_above for c in rows[3].cells] == [False, True, True]
    assert [c.merge_below for c in rows[1].cells] == [False, True, False]
    assert [c.merge_below for c in rows[2].cells] == [False, True, True]


def test_no_merge_without_auto_merge():
    rows = _layout(data=[["x", "y"], ["x", "y"]])
    assert not any(c.merge_above or c.merge_below for row in rows for c in row.cells)


def test_header_colspan():
    rows = _layout(
        [["A", "B & C"]],
        [["1", "2", "3"], ["4", "5", "6"]],
        header_colspans={0: (1, 2)},
    )
    assert _widths(rows[0]) == [1, 5]
    assert _widths(rows[1]) == [1, 1, 1]


def test_header_colspan_larger_heading():
    rows = _layout(
        [["A", "This is a long heading"]],
        [["1", "2", "3"], ["4", "5", "6"]],
        header_colspans={0: (1, 2)},
    )
    assert _widths(rows[0]) == [1, 22]
    assert _widths(rows[1]) == [1, 9, 10]
    assert _text(rows[2], 1) == ["5        "]


def test_header_colspan_smaller_heading():
    rows = _layout(
        [["A", "B"]],
        [["1", "2", "This is some long data"], ["4", "5", "6"]],
        header_colspans={0: (1, 2)},
    )
    assert _widths(rows[0]) == [1, 28]
    assert _widths(rows[1]) == [1, 1, 22]
    assert _text(rows[0], 1) == [" " * 13 + "B" + " " * 14]


def test_header_colspan_with_merged_headers():
    rows = _layout(
        [
            ["Namespace", "Resource", "Vulnerabilities", "Misconfigurations"],
            ["Namespace", "Resource", "Critical", "High", "Critical", "High"],
        ],
        [["default", "Deployment/app", "2", "5", "0", "3"]],
        header_colspans={0: (1, 1, 2, 2)},
        auto_merge_headers=True,
    )
    assert _widths(rows[0]) == [9, 14, 15, 17]
    assert _widths(rows[1]) == [9, 14, 8, 4, 9, 5]
    assert _widths(rows[2]) == [9, 14, 8, 4, 9, 5]
    assert [c.merge_above for c in rows[1].cells] == [True, True, False, False, False, False]
    assert [c.merge_below for c in rows[0].cells] == [True, True, False, False]


def test_fill_width():
    rows = _layout(
        [["A", "B", "C"]],
        [["1", "2", "3"], ["4", "5", "6"]],
        available_width=19,
        fill_width=True,
    )
    assert all(_widths(row) == [3, 3, 3] for row in rows)
    assert _text(rows[0], 0) == [" A "]
    assert _text(rows[1], 2) == ["3  "]


def test_custom_alignment_applied():
    rows = _layout(
        [["ID", "Name", "Notes"]],
        [["Please", "be", "aligned"]],
        [["ID", "Name", "Notes"]],
        header_alignments=(Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT),
        alignments=(Alignment.CENTER, Alignment.RIGHT, Alignment.LEFT),
        footer_alignments=(Alignment.RIGHT, Alignment.LEFT, Alignment.CENTER),
    )
    assert _text(rows[0], 0) == ["ID    "]
    assert _text(rows[0], 2) == ["  Notes"]
    assert _text(rows[1], 1) == ["  be"]
    assert _text(rows[2], 0) == ["    ID"]
    assert _text(rows[2], 2) == [" Notes "]


def test_header_vertical_align_bottom_keeps_merge_flags():
    rows = _layout(
        [["Service", "Misc", "Last"], ["Service", "Crit", "High", "Last"]],
        [["ec2", "1", "2", "now"]],
        header_colspans={0: (1, 2, 1)},
        auto_merge_headers=True,
        header_vertical_align=Alignment.BOTTOM,
    )
    assert rows[1].cells[0].merge_above is True
    assert rows[0].cells[0].merge_below is True
    assert rows[1].cells[3].merge_above is True
    assert _text(rows[1], 0) == ["Service"]


def test_cell_max_width():
    rows = _layout(data=[["ab\nabcd"]])
    assert rows[0].cells[0].max_width() == 4
    assert Cell().max_width() == 0


@pytest.mark.parametrize("section", [Section.HEADER, Section.FOOTER])
def test_row_section_flags(section):
    row = Row(section=section)
    assert row.header is (section is Section.HEADER)
    assert row.footer is (section is Section.FOOTER)