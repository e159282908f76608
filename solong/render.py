"""Drawing the game with pygame, and the command that plays a map."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

import pygame

from solong.game import KEY_ESCAPE, Game, MoveResult
from solong.gamemap import MapError, parse_map, read_map, validate_map
from solong.xpm import TRANSPARENT, XpmImage, load_xpm

TILE_SIZE = 50
TEXTURE_NAMES = ("wall", "floor", "player", "collectible", "exit")
TEXTURE_DIRECTORY = "textures"

_TILE_TEXTURES = {"1": "wall", "0": "floor", "C": "collectible", "E": "exit"}


def image_to_surface(image: XpmImage) -> pygame.Surface:
    """Turn a decoded pixmap into a surface; ``None`` pixels become transparent."""
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.rows):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                surface.set_at((x, y), (0, 0, 0, 0))
            else:
                surface.set_at((x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255))
    return surface


def load_textures(directory: str | Path) -> dict[str, XpmImage]:
    """Load every tile texture ``<name>.xpm`` from ``directory``."""
    base = Path(directory)
    return {name: load_xpm(base / f"{name}.xpm") for name in TEXTURE_NAMES}


def window_size(game: Game) -> tuple[int, int]:
    """Pixel size of a window that shows the whole map."""
    return TILE_SIZE * game.width, TILE_SIZE * game.height


class Renderer:
    """Draws a game's tiles and player onto a target surface."""

    def __init__(self, target: pygame.Surface, textures: Mapping[str, XpmImage]) -> None:
        self.target = target
        self.textures = {name: image_to_surface(textures[name]) for name in TEXTURE_NAMES}

    def draw(self, game: Game) -> None:
        """Draw every tile, then the player on top of its tile."""
        for y, row in enumerate(game.grid):
            for x, tile in enumerate(row):
                position = (x * TILE_SIZE, y * TILE_SIZE)
                name = _TILE_TEXTURES.get(tile)
                if name is not None:
                    self.target.blit(self.textures[name], position)
                if (x, y) == game.player:
                    self.target.blit(self.textures["player"], position)


def _load_game(path: str) -> Game | None:
    try:
        text = read_map(path)
    except MapError as exc:
        print(exc, file=sys.stderr)
        print("Error\nMap Invalid")
        return None
    try:
        rows = parse_map(text)
    except MapError:
        print("Error\nMap Invalid")
        return None
    try:
        game_map = validate_map(rows)
    except MapError as exc:
        print(f"Error\n{exc}")
        return None
    return Game.from_rows(game_map.rows)


def _keycode(key: int) -> int:
    return KEY_ESCAPE if key == pygame.K_ESCAPE else key


def _play(game: Game) -> int:
    screen = pygame.display.set_mode(window_size(game))
    pygame.display.set_caption("so_long")
    renderer = Renderer(screen, load_textures(TEXTURE_DIRECTORY))
    renderer.draw(game)
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            print("Closing the game...")
            return 0
        if event.type != pygame.KEYUP:
            continue
        result = game.handle_key(_keycode(event.key))
        if result is MoveResult.QUIT:
            print("Closing the game...")
            return 0
        if result is MoveResult.VICTORY:
            print("Victory!")
            return 0
        if result is MoveResult.EXIT_LOCKED:
            print("Collectibles are missing!")
        if result.counted:
            print(f"Moves: {game.moves}")
            renderer.draw(game)
            pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: ./so_long maps/map.ber")
        return 1
    game = _load_game(args[0])
    if game is None:
        return 1
    pygame.init()
    try:
        return _play(game)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())