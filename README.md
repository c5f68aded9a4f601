# boxtable

Draw tables of text with box-drawing characters. Cells wrap when the table
would be wider than the available width, may span several columns, can be
merged vertically when neighbouring values repeat, and may carry ANSI colour
codes. Display width is measured with `wcwidth`, so double-width characters
such as emoji line up.

## Installation

```
pip install boxtable
```

## Usage

```python
import sys
from boxtable.table import Table

t = Table(sys.stdout)
t.set_headers("ID", "Fruit", "Stock")
t.add_row("1", "Apple", "14")
t.add_row("2", "Banana", "88,041")
t.add_row("3", "Cherry", "342")
t.add_row("4", "Dragonfruit", "1")
t.render()
```

```
┌────┬─────────────┬────────┐
│ ID │    Fruit    │ Stock  │
├────┼─────────────┼────────┤
│ 1  │ Apple       │ 14     │
├────┼─────────────┼────────┤
│ 2  │ Banana      │ 88,041 │
├────┼─────────────┼────────┤
│ 3  │ Cherry      │ 342    │
├────┼─────────────┼────────┤
│ 4  │ Dragonfruit │ 1      │
└────┴─────────────┴────────┘
```

The writer passed to `Table` is any object with a `write(str)` method; an
`io.StringIO` gives the rendered table as a string. Rendering a table that
was created without a writer raises `ValueError`. An empty table (no
headers, rows or footers) writes nothing.

When the writer is `sys.stdout`, the terminal's width is used as the
available width; otherwise, or when it cannot be read, it is 80 columns.

### Headers, footers and rows

- `set_headers(*values)` / `add_headers(*values)`: replace all header rows
  with one row, or append a header row.
- `set_footers(*values)` / `add_footers(*values)`: the same for footers.
- `add_row(*values)` / `add_rows(*rows)`: append one or several data rows.
  Rows shorter than the widest row are padded with empty cells.
- `load_csv(stream, has_headers)`: read records from a CSV text stream and
  add them as rows; with `has_headers` the first record replaces the
  headers. Existing content is kept, blank lines are skipped, and
  `ValueError` is raised when the header record is missing or records have
  differing numbers of fields.
- `is_empty()`, `row_count()` and `clear()` report on and remove the data
  rows; headers and footers are left alone.

### Column spans

```python
t.set_headers("A", "B & C")
t.set_header_col_spans(0, 1, 2)
t.add_row("1", "2", "3")
```

```
┌───┬───────┐
│ A │ B & C │
├───┼───┬───┤
│ 1 │ 2 │ 3 │
└───┴───┴───┘
```

The first argument is the row index; the rest give each cell's span (values
below 1 count as 1). `set_col_spans` and `set_footer_col_spans` do the same
for data and footer rows.

### Appearance

Presentation is set through attributes on the table:

| Attribute | Default | Meaning |
|---|---|---|
| `borders` | all on | a `Borders(left, top, right, bottom)`; `set_borders(enabled)` sets all four |
| `dividers` | `UNICODE_DIVIDERS` | characters used to draw lines |
| `line_style` | `Style.NORMAL` | ANSI style of the lines |
| `header_style` | `Style.NORMAL` | ANSI style of header text |
| `padding` | `1` | spaces either side of each cell's text |
| `row_lines` | `True` | draw lines between data rows |
| `alignments` | left | per-column `Alignment` of data cells |
| `header_alignments` | centre | per-column `Alignment` of header cells |
| `footer_alignments` | centre | per-column `Alignment` of footer cells |
| `max_column_width` | `60` | wrap width used when the table is too wide |
| `available_width` | terminal or 80 | width the table should fit in |
| `fill_width` | `False` | share spare width among the columns |
| `auto_merge` | `False` | merge repeated, non-blank data cells vertically |
| `auto_merge_headers` | `False` | the same for header cells |
| `header_vertical_align` | `Alignment.TOP` | `TOP` or `BOTTOM` placement of merged header text |

`boxtable.styles` holds `Alignment`, `Style` (SGR codes; `Style.sequence()`
gives the escape sequence), `Dividers`, and the ready-made divider sets
`UNICODE_DIVIDERS`, `UNICODE_ROUNDED_DIVIDERS`, `ASCII_DIVIDERS`,
`STAR_DIVIDERS`, `MARKDOWN_DIVIDERS` and `NO_DIVIDERS`.

```python
from boxtable.styles import MARKDOWN_DIVIDERS

t.dividers = MARKDOWN_DIVIDERS
t.borders.top = False
t.borders.bottom = False
t.row_lines = False
```

### Lower-level helpers

- `boxtable.ansi`: `parse_ansi(text)` splits text into an `AnsiBlob` of
  `Segment`s (visible text and the escape sequences before it). An
  `AnsiBlob` offers `strip()`, `trim_space()`, `width()`, `ansi()`,
  `cut(index)` and `words()`; `simplify_ansi(text)` keeps only what follows
  the last reset sequence.
- `boxtable.text`: `wrap_text(text, wrap_size)` wraps into lines no wider
  than `wrap_size`, hyphenating words that do not fit (raising `ValueError`
  if `wrap_size` is below 2 and a word must be split); `align(blob, width,
  alignment)` pads a blob to a width.
- `boxtable.layout`: `build_layout(settings, headers, data, footers)` turns
  raw rows and a `LayoutSettings` into sized, aligned `Row`s of `Cell`s,
  which `Table` then draws.

## What it does not do

boxtable is a library only: it has no command-line program, and it reads
nothing but CSV text streams handed to `load_csv`.