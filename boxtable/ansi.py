"""Text split into runs of visible characters and the ANSI styles before them."""

from __future__ import annotations

from dataclasses import dataclass

from wcwidth import wcwidth

_RESET = "\x1b[0m"
_ESC = "\x1b"


def _display_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


@dataclass(frozen=True)
class Segment:
    """Visible text together with the escape sequences that precede it."""

    value: str = ""
    style: str = ""


@dataclass(frozen=True)
class AnsiBlob:
    """A string parsed into styled segments."""

    segments: tuple[Segment, ...] = ()

    def __str__(self) -> str:
        return "".join(seg.style + seg.value for seg in self.segments)

    def strip(self) -> str:
        """Return the visible text with all escape sequences removed."""
        return "".join(seg.value for seg in self.segments)

    def trim_space(self) -> AnsiBlob:
        """Return a copy without leading or trailing whitespace."""
        return parse_ansi(str(self).strip())

    def width(self) -> int:
        """Return the number of terminal columns the visible text occupies."""
        return sum(_display_width(seg.value) for seg in self.segments)

    def ansi(self) -> str:
        """Return the escape sequences still in effect at the end of the text."""
        return simplify_ansi("".join(seg.style for seg in self.segments))

    def cut(self, index: int) -> tuple[AnsiBlob, AnsiBlob]:
        """Split the visible text at character ``index``."""
        before: list[str] = []
        after: list[str] = []
        current = 0
        found = False
        for seg in self.segments:
            if found:
                after.append(seg.style + seg.value)
                continue
            if index < current + len(seg.value):
                local = index - current
                before.append(seg.value[:local])
                after.append(seg.style + seg.value[local:])
                found = True
                continue
            before.append(seg.style + seg.value)
            current += len(seg.value)
        return parse_ansi("".join(before)), parse_ansi("".join(after))

    def words(self) -> list[AnsiBlob]:
        """Split on spaces, dropping words with no visible width."""
        result = []
        for word in str(self).split(" "):
            blob = parse_ansi(word).trim_space()
            if blob.width() > 0:
                result.append(blob)
        return result


def simplify_ansi(text: str) -> str:
    """Drop every sequence that comes before the last reset."""
    return text.split(_RESET)[-1]


def parse_ansi(text: str) -> AnsiBlob:
    """Parse a string that may contain CSI escape sequences."""
    segments: list[Segment] = []
    value = ""
    style = ""
    in_csi = False
    prev = ""
    for ch in text:
        if in_csi:
            style += ch
            if "\x40" <= ch <= "\x7e":
                in_csi = False
        elif ch == "[" and prev == _ESC:
            value = value[:-1]
            if value:
                segments.append(Segment(value, style))
                value, style = "", ""
            in_csi = True
            style += "\x1b["
        else:
            value += ch
        prev = ch
    if value or style:
        segments.append(Segment(value, style))
    return AnsiBlob(tuple(segments))