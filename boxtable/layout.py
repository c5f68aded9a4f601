"""Cell sizing, wrapping, column spans and vertical merging for table layout."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from wcwidth import wcwidth

from .ansi import AnsiBlob, parse_ansi
from .styles import Alignment
from .text import align, wrap_text


def _string_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


class Section(Enum):
    """The part of a table a row belongs to."""

    HEADER = "header"
    CONTENT = "content"
    FOOTER = "footer"


@dataclass
class Cell:
    """One cell of a laid-out row."""

    original: str = ""
    span: int = 1
    lines: list[AnsiBlob] = field(default_factory=list)
    width: int = 0
    first: bool = False
    last: bool = False
    height: int = 0
    merge_above: bool = False
    merge_below: bool = False
    alignment: Alignment = Alignment.LEFT

    def max_width(self) -> int:
        """Return the widest of the cell's rendered lines."""
        return max((line.width() for line in self.lines), default=0)

    def realign(self) -> None:
        self.lines = [align(line, self.width, self.alignment) for line in self.lines]


@dataclass
class Row:
    """One laid-out row of header, content or footer cells."""

    section: Section = Section.CONTENT
    cells: list[Cell] = field(default_factory=list)
    first: bool = False
    last: bool = False
    height: int = 0

    @property
    def header(self) -> bool:
        return self.section is Section.HEADER

    @property
    def footer(self) -> bool:
        return self.section is Section.FOOTER


@dataclass
class LayoutSettings:
    """Options that control how table content is sized and merged."""

    alignments: Sequence[Alignment] = ()
    header_alignments: Sequence[Alignment] = ()
    footer_alignments: Sequence[Alignment] = ()
    padding: int = 1
    max_column_width: int = 60
    available_width: int = 80
    fill_width: bool = False
    auto_merge: bool = False
    auto_merge_headers: bool = False
    header_vertical_align: Alignment = Alignment.TOP
    header_colspans: Mapping[int, Sequence[int]] = field(default_factory=dict)
    content_colspans: Mapping[int, Sequence[int]] = field(default_factory=dict)
    footer_colspans: Mapping[int, Sequence[int]] = field(default_factory=dict)

    def colspan(self, section: Section, row: int, col: int) -> int:
        """Return the column span configured for a cell, at least 1."""
        spans = {
            Section.HEADER: self.header_colspans,
            Section.FOOTER: self.footer_colspans,
        }.get(section, self.content_colspans)
        row_spans = spans.get(row)
        if row_spans is None or col >= len(row_spans):
            return 1
        return max(row_spans[col], 1)

    def alignment(self, section: Section, col: int) -> Alignment:
        """Return the horizontal alignment for a column in a section."""
        if section is Section.HEADER:
            chosen, default = self.header_alignments, Alignment.CENTER
        elif section is Section.FOOTER:
            chosen, default = self.footer_alignments, Alignment.CENTER
        else:
            chosen, default = self.alignments, Alignment.LEFT
        return chosen[col] if col < len(chosen) else default


def real_index(row: Row, index: int) -> int:
    """Map a column position counted in spans to the index of the cell there."""
    relative = 0
    for actual, cell in enumerate(row.cells):
        if relative == index:
            return actual
        relative += cell.span
    return len(row.cells)


def relative_index(row: Row, index: int) -> int:
    """Return the column position, counted in spans, of the cell at ``index``."""
    return sum(cell.span for cell in row.cells[:index])


def _row_span(settings: LayoutSettings, index: int, row: Row) -> int:
    return sum(settings.colspan(row.section, index, c) for c in range(len(row.cells)))


def _max_columns(settings: LayoutSettings, sections) -> int:
    widest = 0
    for section, rows in sections:
        for i, values in enumerate(rows):
            total = sum(settings.colspan(section, i, c) for c in range(len(values)))
            widest = max(widest, total)
    return widest


def _build_rows(settings, headers, data, footers, max_cols) -> list[Row]:
    rows: list[Row] = []

    def make_cells(section: Section, index: int, values: Sequence[str]) -> list[Cell]:
        return [
            Cell(
                original=value,
                width=_string_width(value),
                first=j == 0,
                last=j == max_cols - 1,
                alignment=settings.alignment(section, j),
                span=settings.colspan(section, index, j),
            )
            for j, value in enumerate(values)
        ]

    for i, values in enumerate(headers):
        rows.append(
            Row(
                section=Section.HEADER,
                cells=make_cells(Section.HEADER, i, values),
                first=i == 0,
                last=i == len(headers) - 1 and len(data) + len(footers) == 0,
            )
        )
    for i, values in enumerate(data):
        rows.append(
            Row(
                section=Section.CONTENT,
                cells=make_cells(Section.CONTENT, i, values),
                first=i == 0 and not rows,
                last=i == len(data) - 1 and not footers,
            )
        )
    for i, values in enumerate(footers):
        rows.append(
            Row(
                section=Section.FOOTER,
                cells=make_cells(Section.FOOTER, i, values),
                first=not rows,
                last=i == len(footers) - 1,
            )
        )
    return rows


def _equalise(settings: LayoutSettings, rows: list[Row], max_cols: int) -> None:
    for i, row in enumerate(rows):
        if row.cells:
            row.cells[-1].last = False
        while _row_span(settings, i, row) < max_cols:
            row.cells.append(Cell(first=not row.cells, span=1))
        if row.cells:
            row.cells[-1].last = True


def _wrap_cells(settings: LayoutSettings, rows: list[Row]) -> None:
    widest_row = max(
        1 + sum(cell.width + settings.padding * 2 + 1 for cell in row.cells) for row in rows
    )
    wrapping = settings.available_width < widest_row
    for row in rows:
        for cell in row.cells:
            size = settings.max_column_width if wrapping else _string_width(cell.original)
            cell.lines = wrap_text(cell.original, size)
        height = max((len(cell.lines) for cell in row.cells), default=0)
        for cell in row.cells:
            cell.lines.extend(parse_ansi("") for _ in range(height - len(cell.lines)))
            cell.height = len(cell.lines)
        row.height = height


def _spare_widths(settings: LayoutSettings, rows: list[Row]) -> list[int]:
    spares = []
    for r, row in enumerate(rows):
        spare = settings.available_width - 1
        for c, cell in enumerate(row.cells):
            spare -= cell.max_width() + settings.colspan(row.section, r, c) * (
                settings.padding * 2 + 1
            )
        spares.append(max(spare, 0))
    return spares


def _size_columns(settings: LayoutSettings, rows: list[Row]) -> None:
    _wrap_cells(settings, rows)
    spares = _spare_widths(settings, rows)
    for c in range(_row_span(settings, 0, rows[0])):
        width = 0
        for r, row in enumerate(rows):
            if c >= len(row.cells) or row.cells[c].span > 1:
                continue
            extra = spares[r] // len(row.cells) if settings.fill_width else 0
            width = max(width, row.cells[c].max_width() + extra)
        for row in rows:
            if c >= len(row.cells):
                continue
            cell = row.cells[c]
            cell.width = width
            cell.realign()


def _cells_under(row: Row, start_col: int, span: int) -> list[Cell]:
    start = real_index(row, start_col)
    stop = real_index(row, start_col + span)
    return row.cells[start:stop]


def _apply_col_spans(settings: LayoutSettings, rows: list[Row]) -> None:
    jobs = [
        (r, relative_index(row, c), cell.span)
        for r, row in enumerate(rows)
        for c, cell in enumerate(row.cells)
        if cell.span > 1
    ]
    gap = 1 + 2 * settings.padding
    for job_row, start_col, span in jobs:
        target = rows[job_row].cells[real_index(rows[job_row], start_col)]
        target_width = target.max_width()
        others = [row for i, row in enumerate(rows) if i != job_row]

        children_width = max(
            (sum(cell.width for cell in _cells_under(row, start_col, span)) for row in others),
            default=0,
        )
        children_width += (span - 1) * gap

        if children_width >= target_width:
            target.width = children_width
            if children_width > target_width:
                target.realign()
            continue

        available = target_width - children_width
        share = available // span
        remainder = available - share * (span - 1)
        for row in others:
            children = _cells_under(row, start_col, span)
            for k, cell in enumerate(children):
                cell.width += remainder if k == len(children) - 1 else share
                cell.realign()
        target.width = target_width

    candidates = [
        row.cells[-1]
        for r, row in enumerate(rows)
        if settings.colspan(row.section, r, len(row.cells) - 1) <= 1
    ]
    last_width = max((cell.width for cell in candidates), default=0)
    for cell in candidates:
        if cell.width < last_width:
            cell.width = last_width
            cell.realign()


def _merge_cells(settings: LayoutSettings, rows: list[Row]) -> None:
    count = _row_span(settings, 0, rows[0])
    last_values = [""] * count
    last_indexes = [0] * count
    for c in range(count):
        prev_header = False
        for r, row in enumerate(rows):
            if settings.colspan(row.section, r, c) > 1 or c >= len(row.cells):
                continue
            rel = relative_index(row, c)
            allowed = (row.header and settings.auto_merge_headers) or (
                not row.header and not row.footer and not prev_header and settings.auto_merge
            )
            prev_header = row.header
            cell = row.cells[c]
            current = cell.original
            merge = current == last_values[rel] and current.strip() != ""
            cell.merge_above = merge and allowed
            if cell.merge_above:
                above = rows[r - 1].cells[last_indexes[rel]]
                above.merge_below = True
                if settings.header_vertical_align == Alignment.BOTTOM:
                    cell.lines, above.lines = above.lines, cell.lines
            last_values[rel] = current
            last_indexes[rel] = c


def build_layout(
    settings: LayoutSettings,
    headers: Sequence[Sequence[str]],
    data: Sequence[Sequence[str]],
    footers: Sequence[Sequence[str]],
) -> list[Row]:
    """Lay out header, content and footer rows into sized, aligned cells."""
    if not headers and not data and not footers:
        return []
    max_cols = _max_columns(
        settings,
        ((Section.HEADER, headers), (Section.CONTENT, data), (Section.FOOTER, footers)),
    )
    rows = _build_rows(settings, headers, data, footers, max_cols)
    _equalise(settings, rows, max_cols)
    _size_columns(settings, rows)
    _apply_col_spans(settings, rows)
    _merge_cells(settings, rows)
    return rows