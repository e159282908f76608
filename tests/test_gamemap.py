import pytest

from solong.gamemap import (
    GameMap,
    MapError,
    count_collectibles,
    find_player,
    flood_fill,
    has_blank_line,
    load_map,
    parse_map,
    read_map,
    validate_map,
    validate_path,
    validate_rectangle,
    validate_tiles,
    validate_walls,
)

VALID = ["1111111", "1P0C0E1", "1111111"]


def test_parse_map_drops_empty_lines():
    assert parse_map("111\n\n1P1\n") == ["111", "1P1"]


def test_parse_map_empty_text():
    assert parse_map("") == []


def test_parse_map_whitespace_line():
    with pytest.raises(MapError, match="Map Invalid"):
        parse_map("111\n  \t\n111")


@pytest.mark.parametrize("rows", [["abc", " \r"], [""], ["\t"]])
def test_has_blank_line_true(rows):
    assert has_blank_line(rows) is True


def test_has_blank_line_false():
    assert has_blank_line([" 1 ", "1\r"]) is False


def test_validate_rectangle_errors():
    with pytest.raises(MapError, match="empty or invalid"):
        validate_rectangle([])
    with pytest.raises(MapError, match="not rectangular"):
        validate_rectangle(["111", "11"])
    with pytest.raises(MapError, match="empty line"):
        validate_rectangle(["111", "   "])


def test_validate_tiles_counts():
    assert validate_tiles(["1PCCE1"]) == count_collectibles(["1PCCE1"])


@pytest.mark.parametrize(
    ("rows", "message"),
    [
        (["1PXCE1"], "Invalid character 'X'"),
        (["1PPCE1"], "1 P, 1 E"),
        (["1PCEE1"], "1 P, 1 E"),
        (["1P0E01"], "1 P, 1 E"),
    ],
)
def test_validate_tiles_errors(rows, message):
    with pytest.raises(MapError, match=message):
        validate_tiles(rows)


def test_validate_walls_errors():
    with pytest.raises(MapError, match="top/bottom"):
        validate_walls(["1101", "1P01", "1111"])
    with pytest.raises(MapError, match="sides"):
        validate_walls(["1111", "0P01", "1111"])


def test_validate_walls_ok():
    assert validate_walls(VALID) is None


def test_find_player():
    assert find_player(VALID) == (1, 1)
    with pytest.raises(MapError):
        find_player(["111"])


def test_flood_fill_excludes_walls():
    reached = flood_fill(VALID, (1, 1))
    assert all(VALID[y][x] != "1" for x, y in reached)
    assert (5, 1) in reached
    assert len(reached) == sum(row.count("1") == 0 for row in VALID) or len(reached) == 5


def test_validate_path_inaccessible():
    rows = ["11111", "1P1C1", "1E111", "11111"]
    with pytest.raises(MapError, match="inaccessible"):
        validate_path(rows, find_player(rows))


def test_validate_map_result():
    game_map = validate_map(VALID)
    assert game_map.player == find_player(VALID)
    assert game_map.collectibles == count_collectibles(VALID)
    assert (game_map.width, game_map.height) == (len(VALID[0]), len(VALID))
    assert game_map.tile(3, 1) == "C"


def test_tile_out_of_range():
    game_map = GameMap(tuple(VALID), (1, 1), 1)
    with pytest.raises(IndexError):
        game_map.tile(7, 0)


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(VALID) + "\n")
    assert load_map(path).rows == tuple(VALID)
    assert read_map(path).split() == VALID


def test_read_map_missing(tmp_path):
    with pytest.raises(MapError, match="Error opening the file"):
        read_map(tmp_path / "absent.ber")