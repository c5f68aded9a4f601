"""Drawing tables of text to a writable stream."""

from __future__ import annotations

import csv
import os
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from .layout import LayoutSettings, Row, build_layout, relative_index
from .styles import UNICODE_DIVIDERS, Alignment, Dividers, Style

_DEFAULT_WIDTH = 80


@dataclass
class Borders:
    """Which outer edges of the table have lines drawn along them."""

    left: bool = True
    top: bool = True
    right: bool = True
    bottom: bool = True


def _terminal_width(writer: Any) -> int:
    if writer is not sys.stdout:
        return _DEFAULT_WIDTH
    try:
        width = os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError, AttributeError):
        return _DEFAULT_WIDTH
    return width if width > 0 else _DEFAULT_WIDTH


class Table:
    """A table of headers, rows and footers rendered with box-drawing characters.

    Presentation is controlled through public attributes such as ``borders``,
    ``dividers``, ``padding``, ``row_lines``, ``alignments`` and ``line_style``.
    """

    def __init__(self, writer: TextIO | None = None) -> None:
        self.writer = writer
        self.alignments: list[Alignment] = []
        self.header_alignments: list[Alignment] = []
        self.footer_alignments: list[Alignment] = []
        self.borders = Borders()
        self.line_style = Style.NORMAL
        self.header_style = Style.NORMAL
        self.dividers: Dividers = UNICODE_DIVIDERS
        self.max_column_width = 60
        self.padding = 1
        self.row_lines = True
        self.auto_merge = False
        self.auto_merge_headers = False
        self.fill_width = False
        self.header_vertical_align = Alignment.TOP
        self.available_width = _terminal_width(writer)
        self._headers: list[list[str]] = []
        self._data: list[list[str]] = []
        self._footers: list[list[str]] = []
        self._header_colspans: dict[int, list[int]] = {}
        self._content_colspans: dict[int, list[int]] = {}
        self._footer_colspans: dict[int, list[int]] = {}
        self._cursor_style = Style.NORMAL

    def set_borders(self, enabled: bool) -> None:
        """Turn all four outer borders on or off."""
        self.borders = Borders(enabled, enabled, enabled, enabled)

    def set_headers(self, *args: str) -> None:
        """Replace all header rows with a single row."""
        self._headers = [list(args)]

    def add_headers(self, *args: str) -> None:
        """Append a header row."""
        self._headers.append(list(args))

    def set_footers(self, *args: str) -> None:
        """Replace all footer rows with a single row."""
        self._footers = [list(args)]

    def add_footers(self, *args: str) -> None:
        """Append a footer row."""
        self._footers.append(list(args))

    def add_row(self, *args: str) -> None:
        """Append a content row; each argument is one column value."""
        self._data.append(list(args))

    def add_rows(self, *args: Iterable[str]) -> None:
        """Append several content rows."""
        self._data.extend(list(row) for row in args)

    def set_header_col_spans(self, row_index: int, *args: int) -> None:
        """Set the column span of each cell in a header row."""
        self._header_colspans[row_index] = list(args)

    def set_col_spans(self, row_index: int, *args: int) -> None:
        """Set the column span of each cell in a content row."""
        self._content_colspans[row_index] = list(args)

    def set_footer_col_spans(self, row_index: int, *args: int) -> None:
        """Set the column span of each cell in a footer row."""
        self._footer_colspans[row_index] = list(args)

    def load_csv(self, stream: Iterable[str], has_headers: bool) -> None:
        """Add CSV records from ``stream``; the first becomes the headers if asked.

        Existing rows, headers and footers are kept. Raises ``ValueError`` when
        the header row is missing or records have differing field counts.
        """
        records = (record for record in csv.reader(stream) if record)
        expected: int | None = None

        def checked(record: Sequence[str], number: int) -> list[str]:
            nonlocal expected
            if expected is None:
                expected = len(record)
            elif len(record) != expected:
                raise ValueError(f"record {number}: wrong number of fields")
            return list(record)

        number = 1
        if has_headers:
            first = next(records, None)
            if first is None:
                raise ValueError("CSV input has no header row")
            self.set_headers(*checked(first, number))
            number += 1
        for record in records:
            self.add_row(*checked(record, number))
            number += 1

    def render(self) -> None:
        """Write the table to the writer; nothing is written for an empty table."""
        if not self._headers and not self._footers and not self._data:
            return
        rows = build_layout(self._settings(), self._headers, self._data, self._footers)
        previous = Row()
        for row in rows:
            self._render_row(row, previous)
            previous = row

    def is_empty(self) -> bool:
        """Return True when the table has no content rows."""
        return not self._data

    def row_count(self) -> int:
        """Return the number of content rows."""
        return len(self._data)

    def clear(self) -> None:
        """Remove all content rows, keeping headers and footers."""
        self._data = []

    def _settings(self) -> LayoutSettings:
        return LayoutSettings(
            alignments=list(self.alignments),
            header_alignments=list(self.header_alignments),
            footer_alignments=list(self.footer_alignments),
            padding=self.padding,
            max_column_width=self.max_column_width,
            available_width=self.available_width,
            fill_width=self.fill_width,
            auto_merge=self.auto_merge,
            auto_merge_headers=self.auto_merge_headers,
            header_vertical_align=self.header_vertical_align,
            header_colspans=self._header_colspans,
            content_colspans=self._content_colspans,
            footer_colspans=self._footer_colspans,
        )

    def _emit(self, text: str) -> None:
        if self.writer is None:
            raise ValueError("table has no writer to render to")
        self.writer.write(text)

    def _set_style(self, style: Style) -> None:
        if style != self._cursor_style:
            self._emit(Style(style).sequence())
        self._cursor_style = style

    def _reset_style(self) -> None:
        self._set_style(Style.NORMAL)

    def _line(self, text: str) -> None:
        self._set_style(self.line_style)
        self._emit(text)
        self._reset_style()

    def _render_row(self, row: Row, previous: Row) -> None:
        self._render_line_above(row, previous)
        pad = " " * self.padding
        blank_top = self.header_vertical_align == Alignment.TOP
        blank_bottom = self.header_vertical_align == Alignment.BOTTOM
        for y in range(row.height):
            if self.borders.left:
                self._line(self.dividers.ns)
            for cell in row.cells:
                self._emit(pad)
                if (cell.merge_above and blank_top) or (cell.merge_below and blank_bottom):
                    self._emit(" " * cell.width)
                else:
                    if row.header:
                        self._set_style(self.header_style)
                    self._emit(str(cell.lines[y]))
                    if row.header:
                        self._reset_style()
                self._emit(pad)
                if self.borders.right or not cell.last:
                    self._line(self.dividers.ns)
            self._emit("\n")
        self._render_line_below(row)

    @staticmethod
    def _above_is_spanned(previous: Row, column: int) -> bool:
        for j, cell in enumerate(previous.cells):
            start = relative_index(previous, j)
            if start >= column:
                return False
            if start + cell.span > column:
                return True
        return False

    def _left_joint(self, row: Row, i: int, above_spanned: bool) -> str | None:
        d = self.dividers
        cell = row.cells[i]
        prev_merged = i > 0 and row.cells[i - 1].merge_above
        if cell.first and not self.borders.left:
            return None
        if row.first:
            return d.es if cell.first else d.esw
        if cell.first:
            return d.ns if cell.merge_above else d.nes
        if cell.merge_above:
            if prev_merged:
                return d.ns
            return d.sw if above_spanned else d.nsw
        if prev_merged:
            return d.es if above_spanned else d.nes
        return d.esw if above_spanned else d.all

    def _render_line_above(self, row: Row, previous: Row) -> None:
        if row.first and not self.borders.top:
            return
        if not previous.header and not row.footer and not self.row_lines and not row.first:
            return
        d = self.dividers
        self._set_style(self.line_style)
        for i, cell in enumerate(row.cells):
            spanned = self._above_is_spanned(previous, relative_index(row, i))
            joint = self._left_joint(row, i, spanned)
            if joint is not None:
                self._emit(joint)
            fill = " " if cell.merge_above else d.ew
            self._emit(fill * (cell.width + self.padding * 2))
            if cell.last and self.borders.right:
                if row.first:
                    self._emit(d.sw)
                elif cell.merge_above:
                    self._emit(d.ns)
                else:
                    self._emit(d.nsw)
        self._reset_style()
        self._emit("\n")

    def _render_line_below(self, row: Row) -> None:
        if not row.last or not self.borders.bottom:
            return
        d = self.dividers
        self._set_style(self.line_style)
        for cell in row.cells:
            if not cell.first:
                self._emit(d.new)
            elif self.borders.left:
                self._emit(d.ne)
            self._emit(d.ew * (cell.width + self.padding * 2))
            if cell.last and self.borders.right:
                self._emit(d.nw)
        self._reset_style()
        self._emit("\n")