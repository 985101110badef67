import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    check_closed,
    check_file_format,
    collect_map,
    read_map_text,
    split_rectangle,
)

VALID_TEXT = "11111\n1PCE1\n11111\n"


def test_check_file_format_accepts_ber():
    assert check_file_format("maps/level.ber") == "maps/level.ber"


@pytest.mark.parametrize(
    "path",
    ["level.txt", "./maps/level.ber", "level.ber.txt", "nodot", "ber", "a.bert.ber"],
)
def test_check_file_format_rejects(path):
    with pytest.raises(MapError) as info:
        check_file_format(path)
    assert info.value.messages == ["Wrong file format, file format must be '.ber'"]


def test_collect_map_joins_lines():
    lines = ["11111\n", "1PCE1\n", "11111\n"]
    assert collect_map(lines) == "".join(lines)


def test_collect_map_rejects_blank_line():
    with pytest.raises(MapError, match="Empty line in file"):
        collect_map(["111\n", "\n", "111\n"])


def test_collect_map_rejects_trailing_blank_line():
    with pytest.raises(MapError, match="Empty line in file"):
        collect_map(["111\n", "111\n", "\n"])


def test_collect_map_leading_blank_line_is_kept():
    assert collect_map(["\n", "111\n"]) == "\n111\n"


def test_collect_map_empty():
    with pytest.raises(MapError, match="Empty file"):
        collect_map([])


def test_read_map_text_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID_TEXT)
    assert read_map_text(str(path)) == VALID_TEXT


def test_read_map_text_missing_file(tmp_path):
    with pytest.raises(MapError, match="Failing opening the file"):
        read_map_text(str(tmp_path / "missing.ber"))


def test_read_map_text_checks_name_first(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(VALID_TEXT)
    with pytest.raises(MapError, match="Wrong file format"):
        read_map_text(str(path))


def test_read_map_text_blank_line(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("11111\n\n11111\n")
    with pytest.raises(MapError, match="Empty line in file"):
        read_map_text(str(path))


def test_split_rectangle_shape():
    game_map = split_rectangle(VALID_TEXT)
    assert game_map.height == 3
    assert game_map.width == 5
    assert ["".join(row) for row in game_map.grid] == VALID_TEXT.split()


def test_split_rectangle_ignores_empty_pieces():
    game_map = split_rectangle("\n\n11111\n1PCE1\n11111\n\n")
    assert game_map.height == 3
    assert game_map.tile(1, 1) == "P"
    assert game_map.tile(3, 1) == "E"


@pytest.mark.parametrize("text", ["111\n11\n111\n", "11111\n", "\n\n"])
def test_split_rectangle_rejects(text):
    with pytest.raises(MapError) as info:
        split_rectangle(text)
    assert info.value.messages == ["Map must be rectangular"]


def test_tile_out_of_range():
    game_map = split_rectangle(VALID_TEXT)
    with pytest.raises(IndexError):
        game_map.tile(5, 0)
    with pytest.raises(IndexError):
        game_map.tile(-1, 0)


def test_game_map_defaults():
    game_map = GameMap(grid=[list("11"), list("11")])
    assert game_map.player is None
    assert game_map.collectibles == []
    assert game_map.mobs == []


def test_check_closed_reports_every_side():
    grid = split_rectangle("10111\n0PCE0\n11101\n").grid
    with pytest.raises(MapError) as info:
        check_closed(grid)
    assert info.value.messages == [
        "Map is not closed on the upperside",
        "Map is not closed on the leftside",
        "Map is not closed on the rightside",
        "Map is not closed on the downside",
    ]


def test_check_closed_right_side_only():
    grid = split_rectangle("11111\n1PCE1\n1C000\n11111\n").grid
    with pytest.raises(MapError) as info:
        check_closed(grid)
    assert info.value.messages == ["Map is not closed on the rightside"]


def test_map_error_str_joins_messages():
    error = MapError("first", "second")
    assert str(error) == "first\nsecond"