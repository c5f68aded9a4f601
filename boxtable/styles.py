"""Alignment options, ANSI styles and the character sets used to draw tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Alignment(IntEnum):
    """Horizontal or vertical placement of text within a cell."""

    LEFT = 0
    RIGHT = 1
    CENTER = 2
    BOTTOM = 3
    TOP = 4


class Style(IntEnum):
    """SGR codes used to style table lines and headers."""

    NORMAL = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    def sequence(self) -> str:
        """Return the escape sequence that switches the terminal to this style."""
        return f"\x1b[{self.value}m"


@dataclass(frozen=True)
class Dividers:
    """Characters used to draw a table.

    Each field is named after the compass directions its line runs towards:
    ``nes`` joins north, east and south, ``ew`` is a horizontal line, and so on.
    Values longer than one character give undefined results.
    """

    all: str = ""
    nes: str = ""
    nsw: str = ""
    new: str = ""
    esw: str = ""
    ne: str = ""
    nw: str = ""
    sw: str = ""
    es: str = ""
    ew: str = ""
    ns: str = ""


NO_DIVIDERS = Dividers()

UNICODE_DIVIDERS = Dividers(
    all="┼",
    nes="├",
    nsw="┤",
    new="┴",
    esw="┬",
    ne="└",
    nw="┘",
    sw="┐",
    es="┌",
    ew="─",
    ns="│",
)

UNICODE_ROUNDED_DIVIDERS = Dividers(
    all="┼",
    nes="├",
    nsw="┤",
    new="┴",
    esw="┬",
    ne="╰",
    nw="╯",
    sw="╮",
    es="╭",
    ew="─",
    ns="│",
)

ASCII_DIVIDERS = Dividers(
    all="+",
    nes="+",
    nsw="+",
    new="+",
    esw="+",
    ne="+",
    nw="+",
    sw="+",
    es="+",
    ew="-",
    ns="|",
)

STAR_DIVIDERS = Dividers(
    all="*",
    nes="*",
    nsw="*",
    new="*",
    esw="*",
    ne="*",
    nw="*",
    sw="*",
    es="*",
    ew="*",
    ns="*",
)

MARKDOWN_DIVIDERS = Dividers(
    all="|",
    nes="|",
    nsw="|",
    ne="|",
    nw="|",
    sw="|",
    es="|",
    ew="-",
    ns="|",
)