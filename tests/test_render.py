import pygame
import pytest

from solong.game import Game
from solong.render import (
    TEXTURE_NAMES,
    TILE_SIZE,
    Renderer,
    image_to_surface,
    load_textures,
    main,
    window_size,
)
from solong.xpm import TRANSPARENT, XpmImage

COLORS = {
    "wall": 0xFF0000,
    "floor": 0x00FF00,
    "player": 0x0000FF,
    "collectible": 0xFFFF00,
    "exit": 0xFFFFFF,
}


def _solid(color):
    return XpmImage(1, 1, ((color,),))


def _rgba(color):
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, 255)


@pytest.fixture
def textures():
    return {name: _solid(color) for name, color in COLORS.items()}


def test_tile_size_from_source():
    game = Game.from_rows(["11111", "1PCE1", "11111"])
    assert window_size(game) == (250, 150)
    assert TILE_SIZE == 50


def test_image_to_surface_colors_and_transparency():
    image = XpmImage(2, 1, ((0xFF0000, TRANSPARENT),))
    surface = image_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert surface.get_at((1, 0)).a == 0


def test_load_textures(tmp_path):
    for name in TEXTURE_NAMES:
        (tmp_path / f"{name}.xpm").write_text(
            'static char *x[] = {\n"2 1 1 1",\n"a c #102030",\n"aa"\n};\n'
        )
    textures = load_textures(tmp_path)
    assert set(textures) == set(TEXTURE_NAMES)
    assert textures["wall"].width == 2
    assert textures["exit"].pixel(1, 0) == 0x102030


def test_load_textures_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_textures(tmp_path)


def test_draw_places_each_tile(textures):
    game = Game.from_rows(["10CEP"])
    target = pygame.Surface((5 * TILE_SIZE, TILE_SIZE))
    Renderer(target, textures).draw(game)
    for index, name in enumerate(["wall", "floor", "collectible", "exit", "player"]):
        assert tuple(target.get_at((index * TILE_SIZE, 0))) == _rgba(COLORS[name])
    assert tuple(target.get_at((1, 1)))[:3] == (0, 0, 0)


def test_draw_after_move_shows_floor_behind(textures):
    game = Game.from_rows(["1PC01"])
    target = pygame.Surface((5 * TILE_SIZE, TILE_SIZE))
    renderer = Renderer(target, textures)
    game.move(1, 0)
    renderer.draw(game)
    assert tuple(target.get_at((TILE_SIZE, 0))) == _rgba(COLORS["floor"])
    assert tuple(target.get_at((2 * TILE_SIZE, 0))) == _rgba(COLORS["player"])


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage: ./so_long maps/map.ber" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert "Error\nMap Invalid" in capsys.readouterr().out


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("11111\n1PCE1\n1111\n")
    assert main([str(path)]) == 1
    assert "Error\nMap is not rectangular" in capsys.readouterr().out


def test_main_blank_line_map(tmp_path, capsys):
    path = tmp_path / "blank.ber"
    path.write_text("11111\n   \n1PCE1\n11111\n")
    assert main([str(path)]) == 1
    assert "Error\nMap Invalid" in capsys.readouterr().out