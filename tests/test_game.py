import pytest

from solong.game import Game, MoveResult, key_direction
from solong.gamemap import MapError


def test_from_rows_finds_player_and_counts():
    game = Game.from_rows(["11111", "1PCC1", "1E001", "11111"])
    assert game.player == (1, 1)
    assert game.collect_total == 2
    assert game.collected == 0
    assert game.moves == 0
    assert game.width == 5
    assert game.height == 4


def test_from_rows_without_player_raises():
    with pytest.raises(MapError):
        Game.from_rows(["111", "1C1", "111"])


def test_collect_then_win():
    game = Game.from_rows(["11111", "1PCE1", "11111"])
    assert game.move(1, 0) is MoveResult.COLLECTED
    assert game.collected == 1
    assert game.moves == 1
    assert game.player == (2, 1)
    assert game.rows[1] == "100E1"
    assert game.move(1, 0) is MoveResult.VICTORY
    assert game.player == (2, 1)
    assert game.moves == 1


def test_exit_locked_lets_player_stand_on_exit():
    game = Game.from_rows(["11111", "1PEC1", "11111"])
    assert game.move(1, 0) is MoveResult.EXIT_LOCKED
    assert game.player == (2, 1)
    assert game.moves == 1
    assert game.move(1, 0) is MoveResult.COLLECTED
    assert game.tile(2, 1) == "E"
    assert game.move(-1, 0) is MoveResult.VICTORY
    assert game.moves == 2


def test_wall_blocks_movement():
    game = Game.from_rows(["11111", "1PCE1", "11111"])
    assert game.move(0, -1) is MoveResult.BLOCKED
    assert game.player == (1, 1)
    assert game.moves == 0
    assert game.tile(1, 1) == "P"


def test_is_valid_move():
    game = Game.from_rows(["11111", "1PCE1", "10001", "11111"])
    assert game.is_valid_move(2, 1)
    assert game.is_valid_move(3, 1)
    assert game.is_valid_move(1, 2)
    assert not game.is_valid_move(0, 0)
    assert not game.is_valid_move(1, 1)
    assert not game.is_valid_move(-1, 1)
    assert not game.is_valid_move(9, 9)


@pytest.mark.parametrize(
    "keycode, step",
    [(119, (0, -1)), (115, (0, 1)), (97, (-1, 0)), (100, (1, 0))],
)
def test_key_direction(keycode, step):
    assert key_direction(keycode) == step


def test_key_direction_unknown_key():
    assert key_direction(65307) is None
    assert key_direction(ord("x")) is None


def test_handle_key():
    game = Game.from_rows(["11111", "1PCE1", "11111"])
    assert game.handle_key(65307) is MoveResult.QUIT
    assert game.handle_key(ord("x")) is MoveResult.IGNORED
    assert game.handle_key(ord("w")) is MoveResult.BLOCKED
    assert game.handle_key(ord("d")) is MoveResult.COLLECTED
    assert game.moves == 1


def test_counted_results_match_move_counter():
    game = Game.from_rows(["111111", "1P0EC1", "111111"])
    steps = [(0, -1), (1, 0), (1, 0), (1, 0), (-1, 0)]
    results = []
    for dx, dy in steps:
        before = game.moves
        result = game.move(dx, dy)
        results.append(result)
        assert game.moves - before == (1 if result.counted else 0)
    assert results == [
        MoveResult.BLOCKED,
        MoveResult.MOVED,
        MoveResult.EXIT_LOCKED,
        MoveResult.COLLECTED,
        MoveResult.VICTORY,
    ]
    assert game.moves == 3


def test_tile_out_of_range():
    game = Game.from_rows(["11111", "1PCE1", "11111"])
    with pytest.raises(IndexError):
        game.tile(5, 0)