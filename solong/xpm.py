"""Reading of XPM pixmaps into plain pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from solong.colors import parse_color

TRANSPARENT = 0xFF000000
"""Pixel value stored for the XPM colour ``None``."""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be understood."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: rows of 0xRRGGBB values, ``TRANSPARENT`` for none."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """The pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return self.rows[y][x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_unquoted(text: str, token: str) -> int:
    """Index of the first ``token`` that does not start inside double quotes, or -1."""
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the text's length."""
    for opener, closer, keep in (("/*", "*/", True), ("//", "\n", False)):
        while (start := _find_unquoted(text, opener)) != -1:
            end = text.find(closer, start + len(opener))
            if end == -1:
                stop = len(text)
            else:
                stop = end + len(closer)
            text = text[:start] + " " * (stop - start) + text[stop:]
            del keep
            keep = True
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``, in order."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM from its strings: header, colour lines, then pixel rows."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header values: {' '.join(header[:4])}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line has no 'c' entry: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line has no colour after 'c': {line!r}")
        qualifier = words[index + 2] if index + 2 < len(words) else None
        value = parse_color(words[index + 1], qualifier)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel rows")
        row = []
        for x in range(width):
            value = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            row.append(TRANSPARENT if value == -1 else value)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm(quoted_lines(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    return parse_xpm_text(Path(path).read_text(encoding="latin-1"))