import pytest

from solong.game import Game, Outcome, WallAnimation, inner_walls
from solong.mapfile import GameMap, MapError
from solong.pathfinding import Direction, Position
from solong.validation import parse_map


def make_game(text, bonus=False):
    return Game(parse_map(text, bonus), bonus)


def test_step_onto_floor_moves_and_counts():
    game = make_game("1111111\n1P0C0E1\n1111111")
    assert game.move(Direction.RIGHT) is Outcome.PLAYING
    assert game.player == Position(2, 1)
    assert game.movements == 1


def test_wall_blocks_movement():
    game = make_game("1111111\n1P0C0E1\n1111111")
    game.move(Direction.UP)
    game.move(Direction.LEFT)
    assert game.player == Position(1, 1)
    assert game.movements == 0


def test_collecting_opens_exit():
    game = make_game("1111111\n1PC0E01\n1111111")
    game.move(Direction.RIGHT)
    assert game.collected == game.total_collectibles
    assert game.grid[1][2] == "0"
    assert game.exit_open


def test_closed_exit_is_walkable_and_open_exit_wins():
    game = make_game("111111\n1PEC01\n111111")
    game.move(Direction.RIGHT)
    assert game.player == game.exit
    assert not game.exit_open
    game.move(Direction.RIGHT)
    assert game.exit_open
    assert game.movements == 2
    assert game.move(Direction.LEFT) is Outcome.WON
    assert game.ended


def test_leaving_closed_exit_counts_twice():
    game = make_game("111111\n1CPE01\n111111")
    game.move(Direction.RIGHT)
    before = game.movements
    game.move(Direction.RIGHT)
    assert game.player == Position(4, 1)
    assert game.movements == before + 2


def test_mob_ends_bonus_game():
    game = make_game("1111111\n1PMC0E1\n1111111", bonus=True)
    assert game.move(Direction.RIGHT) is Outcome.LOST
    assert game.player == Position(1, 1)


def test_keys_ignored_after_end():
    game = make_game("1111111\n1PMC0E1\n1111111", bonus=True)
    game.handle_key(100)
    moves = game.movements
    assert game.handle_key(115) is Outcome.LOST
    assert game.movements == moves


def test_escape_quits():
    game = make_game("1111111\n1P0C0E1\n1111111")
    assert game.handle_key(65307) is Outcome.QUIT


@pytest.mark.parametrize("letter, arrow", [(100, 65363), (97, 65361)])
def test_letter_and_arrow_keys_agree(letter, arrow):
    text = "1111111\n10P0CE1\n1111111"
    first, second = make_game(text), make_game(text)
    first.handle_key(letter)
    second.handle_key(arrow)
    assert first.player == second.player
    assert first.movements == second.movements == 1


def test_unknown_key_changes_nothing():
    game = make_game("1111111\n1P0C0E1\n1111111")
    assert game.handle_key(42) is Outcome.PLAYING
    assert game.movements == 0


def test_game_needs_player():
    with pytest.raises(MapError):
        Game(GameMap(grid=[list("111"), list("111")]))


def test_wall_animation_cycle():
    anim = WallAnimation(0.5, 0.0)
    assert anim.tick(0.4) is None
    assert anim.tick(0.6) == 1
    assert anim.tick(0.7) is None
    assert anim.tick(1.2) == 3
    assert anim.tick(1.8) == 0


def test_wall_animation_stops_when_ended():
    anim = WallAnimation(0.5, 0.0)
    assert anim.tick(10.0, ended=True) is None
    assert anim.frame == 0


def test_inner_walls_skip_border():
    grid = [list(row) for row in ["11111", "10101", "11011", "11111"]]
    assert inner_walls(grid) == [Position(2, 1), Position(1, 2), Position(3, 2)]
    assert all(0 < p.x < 4 and 0 < p.y < 3 for p in inner_walls(grid))