"""Checking map contents: allowed symbols, piece counts and piece positions."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from solong.mapfile import GameMap, MapError, check_closed, read_map_text, split_rectangle

PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
MOB = "M"

_BASE_SYMBOLS = frozenset("10EPC\n")
_BONUS_SYMBOLS = _BASE_SYMBOLS | {MOB}


@dataclass(frozen=True)
class PieceCounts:
    """How many of each piece a map holds."""

    players: int
    exits: int
    collectibles: int
    mobs: int


def check_symbols(text: str, bonus: bool = False) -> None:
    """Refuse any character that is not a known map symbol or a newline."""
    allowed = _BONUS_SYMBOLS if bonus else _BASE_SYMBOLS
    if any(char not in allowed for char in text):
        listing = "'0, 1, C, P, E, M'" if bonus else "'0, 1, C, P, E'"
        raise MapError("Invalid symbol in the file only accept :", listing)


def count_pieces(text: str) -> PieceCounts:
    """Count the pieces and require one player, one exit and a collectible."""
    counts = PieceCounts(
        players=text.count(PLAYER),
        exits=text.count(EXIT),
        collectibles=text.count(COLLECTIBLE),
        mobs=text.count(MOB),
    )
    errors: list[str] = []
    if counts.players > 1:
        errors.append("Map must contains only 1 player")
    elif counts.players < 1:
        errors.append("Map must contains at least 1 player")
    if counts.exits > 1:
        errors.append("Map must contains only 1 exit")
    elif counts.exits < 1:
        errors.append("Map must contains at least 1 exit")
    if counts.collectibles < 1:
        errors.append("Map must contains at least 1 collectible")
    if errors:
        raise MapError(*errors)
    return counts


def locate_pieces(grid: Sequence[Sequence[str]]) -> GameMap:
    """Build a map from the grid, recording where every piece stands."""
    game_map = GameMap(grid=[list(row) for row in grid])
    for y, row in enumerate(game_map.grid):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                game_map.player = (x, y)
            elif tile == EXIT:
                game_map.exit = (x, y)
            elif tile == COLLECTIBLE:
                game_map.collectibles.append((x, y))
            elif tile == MOB:
                game_map.mobs.append((x, y))
    return game_map


def parse_map(text: str, bonus: bool = False) -> GameMap:
    """Run every layout check on map text, reporting all failures together."""
    errors: list[str] = []
    try:
        check_symbols(text, bonus)
    except MapError as exc:
        errors.extend(exc.messages)
    try:
        count_pieces(text)
    except MapError as exc:
        errors.extend(exc.messages)
    game_map: GameMap | None = None
    try:
        game_map = split_rectangle(text)
        check_closed(game_map.grid)
    except MapError as exc:
        errors.extend(exc.messages)
    if errors or game_map is None:
        raise MapError(*errors)
    return locate_pieces(game_map.grid)


def load_map(path: str | os.PathLike[str], bonus: bool = False) -> GameMap:
    """Read a ``.ber`` file and return its checked, located map."""
    return parse_map(read_map_text(path), bonus)