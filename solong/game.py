"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from solong.gamemap import COLLECTIBLE, EXIT, FLOOR, count_collectibles, find_player

KEY_ESCAPE = 65307
KEY_UP = ord("w")
KEY_DOWN = ord("s")
KEY_LEFT = ord("a")
KEY_RIGHT = ord("d")

_DIRECTIONS = {
    KEY_UP: (0, -1),
    KEY_DOWN: (0, 1),
    KEY_LEFT: (-1, 0),
    KEY_RIGHT: (1, 0),
}

_WALKABLE = frozenset({FLOOR, COLLECTIBLE, EXIT})


class MoveResult(Enum):
    """What a key press or move did to the game."""

    IGNORED = auto()
    BLOCKED = auto()
    MOVED = auto()
    COLLECTED = auto()
    EXIT_LOCKED = auto()
    VICTORY = auto()
    QUIT = auto()

    @property
    def counted(self) -> bool:
        """Whether the player took a step that adds to the move count."""
        return self in (MoveResult.MOVED, MoveResult.COLLECTED, MoveResult.EXIT_LOCKED)


def key_direction(keycode: int) -> tuple[int, int] | None:
    """The (dx, dy) step bound to ``keycode``, or None for other keys."""
    return _DIRECTIONS.get(keycode)


@dataclass
class Game:
    """A map being played: the tiles, the player's place and the counters."""

    grid: list[list[str]]
    player_x: int
    player_y: int
    collect_total: int
    collected: int = 0
    moves: int = field(default=0)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Game:
        """Start a game on ``rows`` with the player at its start tile."""
        x, y = find_player(rows)
        return cls([list(row) for row in rows], x, y, count_collectibles(rows))

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def player(self) -> tuple[int, int]:
        return self.player_x, self.player_y

    @property
    def rows(self) -> tuple[str, ...]:
        """The current tiles, one string per row."""
        return tuple("".join(row) for row in self.grid)

    def tile(self, x: int, y: int) -> str:
        """The tile character at column ``x`` of row ``y``."""
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def is_valid_move(self, x: int, y: int) -> bool:
        """Whether the player may step onto ``(x, y)``."""
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            return False
        return self.grid[y][x] in _WALKABLE

    def move(self, dx: int, dy: int) -> MoveResult:
        """Try to step the player by ``(dx, dy)`` and report what happened."""
        new_x, new_y = self.player_x + dx, self.player_y + dy
        if not self.is_valid_move(new_x, new_y):
            return MoveResult.BLOCKED
        target = self.grid[new_y][new_x]
        result = MoveResult.MOVED
        if target == COLLECTIBLE:
            self.collected += 1
            self.grid[new_y][new_x] = FLOOR
            result = MoveResult.COLLECTED
        elif target == EXIT:
            if self.collected == self.collect_total:
                return MoveResult.VICTORY
            result = MoveResult.EXIT_LOCKED
        if self.grid[self.player_y][self.player_x] != EXIT:
            self.grid[self.player_y][self.player_x] = FLOOR
        self.player_x, self.player_y = new_x, new_y
        self.moves += 1
        return result

    def handle_key(self, keycode: int) -> MoveResult:
        """React to a released key: escape quits, w/a/s/d move."""
        if keycode == KEY_ESCAPE:
            return MoveResult.QUIT
        step = key_direction(keycode)
        if step is None:
            return MoveResult.IGNORED
        return self.move(*step)