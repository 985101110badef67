"""Checking that the player can reach every collectible and the exit."""

from __future__ import annotations

import enum
from typing import NamedTuple

from solong.mapfile import GameMap, MapError

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
MOB = "M"


class Direction(enum.IntFlag):
    """A step on the grid; the values combine into a set of possible moves."""

    LEFT = 1
    RIGHT = 2
    UP = 4
    DOWN = 8


class Position(NamedTuple):
    """A tile position: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


_STEPS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


def move_position(position: tuple[int, int], direction: Direction) -> Position:
    """Return the position one step away from ``position`` in ``direction``."""
    x, y = position
    dx, dy = _STEPS.get(Direction(direction), (0, 0))
    return Position(x + dx, y + dy)


def first_direction(possible: int) -> Direction:
    """Pick the first direction set in ``possible``: left, right, up, then down."""
    for direction in (Direction.LEFT, Direction.RIGHT, Direction.UP):
        if possible & direction:
            return direction
    return Direction.DOWN


def count_bits(number: int) -> int:
    """Count the set bits among the lowest eight bits of ``number``."""
    return sum(1 for bit in range(8) if number & (1 << bit))


def count_space(game_map: GameMap) -> int:
    """Count the floor tiles of the map."""
    return sum(row.count(FLOOR) for row in game_map.grid)


def _blocked(tile: str, bonus: bool) -> bool:
    return tile == WALL or (bonus and tile == MOB)


def _possible_directions(
    game_map: GameMap, current: Position, visited: set[Position], bonus: bool
) -> int:
    edges = {
        Direction.LEFT: current.x == 1,
        Direction.RIGHT: current.x == game_map.width - 2,
        Direction.UP: current.y == 1,
        Direction.DOWN: current.y == game_map.height - 2,
    }
    possible = 0
    for direction, at_edge in edges.items():
        if at_edge:
            continue
        target = move_position(current, direction)
        if _blocked(game_map.grid[target.y][target.x], bonus) or target in visited:
            continue
        possible |= direction
    return possible


def explore(game_map: GameMap, bonus: bool = False) -> list[Position]:
    """Walk every reachable tile from the player, returning the tiles in visit order."""
    if game_map.player is None:
        raise MapError("Map must contains at least 1 player")
    current = Position(*game_map.player)
    path: list[Position] = []
    visited: set[Position] = set()
    branches: list[Position] = []
    while True:
        possible = _possible_directions(game_map, current, visited, bonus)
        if count_bits(possible) == 0:
            if not branches:
                return path
            current = branches.pop()
            continue
        if count_bits(possible) > 1:
            branches.append(current)
        current = move_position(current, first_direction(possible))
        path.append(current)
        visited.add(current)


def check_path(game_map: GameMap, bonus: bool = False) -> None:
    """Require a walk from the player that reaches all collectibles and the exit."""
    path = explore(game_map, bonus)
    tiles = [game_map.grid[pos.y][pos.x] for pos in path]
    wanted = sum(row.count(COLLECTIBLE) for row in game_map.grid)
    errors: list[str] = []
    if tiles.count(COLLECTIBLE) != wanted:
        errors.append("Map must contains a valid path to all the collectibles.")
    if EXIT not in tiles:
        errors.append("Map must contains a valid path to the exit.")
    if errors:
        raise MapError(*errors)