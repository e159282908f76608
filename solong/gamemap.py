"""Reading and validating game maps made of wall, floor, item, exit and player tiles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
TILES = frozenset({FLOOR, WALL, COLLECTIBLE, EXIT, PLAYER})

_BLANK = " \t\r"


class MapError(ValueError):
    """Raised when a map cannot be read or is not a playable map."""


@dataclass(frozen=True)
class GameMap:
    """A validated map with the player's start and the number of collectibles."""

    rows: tuple[str, ...]
    player: tuple[int, int]
    collectibles: int

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def tile(self, x: int, y: int) -> str:
        """The tile character at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.rows[y][x]


def read_map(path: str | Path) -> str:
    """Return the text of the map file at ``path``."""
    try:
        return Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise MapError(f"Error opening the file: {exc.strerror or exc}") from exc


def has_blank_line(rows: Sequence[str]) -> bool:
    """Whether some row is empty or holds only spaces, tabs and carriage returns."""
    return any(not row.strip(_BLANK) for row in rows)


def parse_map(text: str) -> list[str]:
    """Split map text into rows, dropping empty lines; blank-only rows are an error."""
    rows = [line for line in text.split("\n") if line]
    if has_blank_line(rows):
        raise MapError("Map Invalid")
    return rows


def validate_rectangle(rows: Sequence[str]) -> None:
    """Require a non-empty map whose rows all have the first row's length."""
    if not rows:
        raise MapError("Map is empty or invalid")
    if has_blank_line(rows):
        raise MapError("Map contains an empty line or only spaces")
    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise MapError("Map is not rectangular")


def validate_tiles(rows: Sequence[str]) -> int:
    """Check tile characters and counts; return the number of collectibles."""
    counts = {PLAYER: 0, EXIT: 0, COLLECTIBLE: 0}
    for row in rows:
        for char in row:
            if char not in TILES:
                raise MapError(f"Invalid character '{char}'")
            if char in counts:
                counts[char] += 1
    if counts[PLAYER] != 1 or counts[EXIT] != 1 or counts[COLLECTIBLE] < 1:
        raise MapError("Map must have 1 P, 1 E and at least 1 C")
    return counts[COLLECTIBLE]


def validate_walls(rows: Sequence[str]) -> None:
    """Require the map's border to be made of walls."""
    if any(char != WALL for char in rows[0] + rows[-1]):
        raise MapError("Map is not closed (top/bottom)")
    if any(row[0] != WALL or row[-1] != WALL for row in rows):
        raise MapError("Map is not closed (sides)")


def find_player(rows: Sequence[str]) -> tuple[int, int]:
    """The (x, y) position of the first player tile."""
    for y, row in enumerate(rows):
        x = row.find(PLAYER)
        if x != -1:
            return x, y
    raise MapError("Map has no player")


def count_collectibles(rows: Sequence[str]) -> int:
    """How many collectible tiles the map holds."""
    return sum(row.count(COLLECTIBLE) for row in rows)


def flood_fill(rows: Sequence[str], start: tuple[int, int]) -> set[tuple[int, int]]:
    """Every non-wall position reachable from ``start`` by orthogonal steps."""
    reached: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in reached or not (0 <= y < len(rows) and 0 <= x < len(rows[y])):
            continue
        if rows[y][x] == WALL:
            continue
        reached.add((x, y))
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return reached


def validate_path(rows: Sequence[str], start: tuple[int, int]) -> None:
    """Require every collectible and the exit to be reachable from ``start``."""
    reached = flood_fill(rows, start)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in (COLLECTIBLE, EXIT) and (x, y) not in reached:
                raise MapError("C or E is inaccessible")


def validate_map(rows: Sequence[str]) -> GameMap:
    """Run every check on ``rows`` and return the playable map."""
    validate_rectangle(rows)
    collectibles = validate_tiles(rows)
    validate_walls(rows)
    player = find_player(rows)
    validate_path(rows, player)
    return GameMap(tuple(rows), player, collectibles)


def load_map(path: str | Path) -> GameMap:
    """Read, parse and validate the map file at ``path``."""
    return validate_map(parse_map(read_map(path)))