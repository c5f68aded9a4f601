"""Padding and word wrapping for styled text."""

from __future__ import annotations

from .ansi import AnsiBlob, parse_ansi
from .styles import Alignment

_LINE_BREAK = AnsiBlob()


def align(blob: AnsiBlob, width: int, alignment: Alignment) -> AnsiBlob:
    """Pad ``blob`` with spaces to ``width`` columns."""
    pad = width - blob.width()
    if pad <= 0:
        return blob
    if alignment == Alignment.RIGHT:
        return parse_ansi(" " * pad + str(blob))
    if alignment == Alignment.CENTER:
        left = pad // 2
        right = pad - left
        if left > 0:
            blob = parse_ansi(" " * left + str(blob))
        if right > 0:
            blob = parse_ansi(str(blob) + " " * right)
        return blob
    return parse_ansi(str(blob) + " " * pad)


def _split_words(text: str, wrap_size: int) -> list[AnsiBlob]:
    words: list[AnsiBlob] = []
    for line in text.split("\n"):
        if words:
            words.append(_LINE_BREAK)
        for word in parse_ansi(line.strip()).words():
            while word.width() > wrap_size:
                if wrap_size < 2:
                    raise ValueError(f"wrap size {wrap_size} is too small to split words")
                before, word = word.cut(wrap_size - 1)
                words.append(parse_ansi(str(before) + "-"))
            if word.width() > 0:
                words.append(word)
    return words


def wrap_text(text: str, wrap_size: int) -> list[AnsiBlob]:
    """Wrap ``text`` into lines no wider than ``wrap_size``, hyphenating long words."""
    output: list[AnsiBlob] = []
    current = parse_ansi("")

    def start_line(word: AnsiBlob) -> AnsiBlob:
        if word.width() < wrap_size:
            return parse_ansi(str(word) + " ")
        return word

    for word in _split_words(text, wrap_size):
        if word is _LINE_BREAK:
            output.append(current.trim_space())
            current = parse_ansi("")
            continue
        used = current.width()
        if wrap_size - used == 0:
            output.append(current.trim_space())
            current = start_line(word)
        elif used + word.width() == wrap_size:
            current = parse_ansi(str(current) + str(word))
        elif used + word.width() < wrap_size:
            current = parse_ansi(str(current) + str(word) + " ")
        else:
            output.append(current.trim_space())
            current = start_line(word)

    if current.width() > 0:
        output.append(current.trim_space())
    if not output:
        output.append(parse_ansi(""))
    return output