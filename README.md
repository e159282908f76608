# solong

A small top-down puzzle game. You walk a player around a walled map, pick
up every collectible, and then step onto the exit to win. The game window
is drawn with pygame.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
solong maps/map.ber
```

The command takes exactly one argument, the map file; otherwise it prints
`Usage: ./so_long maps/map.ber` and exits with status 1.

The map file is plain text. Each line is one row of tiles:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

Empty lines in the file are skipped. A map is accepted only if it:

- has no rows made only of spaces, tabs or carriage returns,
- is rectangular,
- uses only the characters above,
- has exactly one `P`, exactly one `E` and at least one `C`,
- is closed by walls on all four sides,
- lets the player reach every `C` and the `E`.

If the file cannot be read or holds a whitespace-only row, the game prints
`Error` and `Map Invalid`; if a check above fails it prints `Error`
followed by the reason. In both cases it exits with status 1.

Controls (acted on when the key is released): `W` `A` `S` `D` move, `Esc`
or closing the window prints `Closing the game...` and quits. Every step
is counted and printed as `Moves: N`. Stepping onto the exit before all
collectibles are gathered prints `Collectibles are missing!` (the step
still counts); with all of them gathered it prints `Victory!` and the game
ends.

Tile images are XPM files read from a `textures/` directory under the
current working directory: `wall.xpm`, `floor.xpm`, `player.xpm`,
`collectible.xpm` and `exit.xpm`. Tiles are laid out on a 50-pixel grid,
so the window is 50 pixels per map column wide and 50 pixels per map row
high. Pixels with the XPM colour `None` are drawn transparent.

## What is not included

No map files and no texture images come with the package; you supply
both. A missing or unreadable texture stops the game with the error raised
while loading it.

## Using it as a library

```python
from solong.gamemap import load_map, MapError
from solong.game import Game, MoveResult

try:
    game_map = load_map("maps/map.ber")
except MapError as err:
    print(err)
else:
    game = Game.from_rows(game_map.rows)
    result = game.move(1, 0)
    if result is MoveResult.VICTORY:
        print("won")
```

- `solong.gamemap` reads and validates maps: `read_map`, `parse_map`,
  `validate_map`, `load_map`, the individual checks (`validate_rectangle`,
  `validate_tiles`, `validate_walls`, `validate_path`), and helpers such as
  `flood_fill`, `find_player` and `count_collectibles`. Problems raise
  `MapError`; a valid map is returned as a `GameMap`.
- `solong.game` holds the game state and move rules: `Game.from_rows`,
  `Game.move`, `Game.handle_key`, `Game.is_valid_move`, the `MoveResult`
  enum and `key_direction`.
- `solong.xpm` decodes XPM images into `XpmImage` pixel grids
  (`parse_xpm`, `parse_xpm_text`, `load_xpm`); bad data raises `XpmError`.
- `solong.colors` resolves X11 colour names and `#RRGGBB` values
  (`parse_color`, `color_names`) and converts colours to a display's pixel
  layout (`PixelFormat.from_masks`, `PixelFormat.convert`).
- `solong.render` draws a game with pygame (`Renderer`, `image_to_surface`,
  `load_textures`, `window_size`) and provides `main`, the entry point of
  the `solong` command.