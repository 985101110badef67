"""Game state: moving the player, collecting, opening the exit, wall animation."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from solong.mapfile import GameMap, MapError
from solong.pathfinding import Direction, Position, move_position

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
MOB = "M"

KEY_ESCAPE = 65307

_KEY_DIRECTIONS = {
    65362: Direction.UP,
    119: Direction.UP,
    65361: Direction.LEFT,
    97: Direction.LEFT,
    65363: Direction.RIGHT,
    100: Direction.RIGHT,
    65364: Direction.DOWN,
    115: Direction.DOWN,
}


class Outcome(enum.Enum):
    """Where a game stands."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class Game:
    """A running game on one map."""

    def __init__(self, game_map: GameMap, bonus: bool = False) -> None:
        if game_map.player is None:
            raise MapError("Map must contains at least 1 player")
        if game_map.exit is None:
            raise MapError("Map must contains at least 1 exit")
        self.bonus = bonus
        self.grid = [list(row) for row in game_map.grid]
        self.player = Position(*game_map.player)
        self.exit = Position(*game_map.exit)
        self.total_collectibles = sum(row.count(COLLECTIBLE) for row in self.grid)
        self.collected = 0
        self.exit_open = False
        self.movements = 0
        self.facing = Direction.DOWN
        self.outcome = Outcome.PLAYING

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def ended(self) -> bool:
        return self.outcome is not Outcome.PLAYING

    def _step_to(self, target: Position, direction: Direction) -> None:
        self.player = target
        self.facing = direction
        if self.grid[target.y][target.x] == COLLECTIBLE:
            self.collected += 1
            self.grid[target.y][target.x] = FLOOR
        if self.collected == self.total_collectibles:
            self.exit_open = True
        self.movements += 1

    def move(self, direction: Direction) -> Outcome:
        """Try to move the player one tile; return the outcome afterwards."""
        direction = Direction(direction)
        start = self.player
        target = move_position(start, direction)
        tile = self.grid[target.y][target.x]
        if tile in (FLOOR, COLLECTIBLE, PLAYER) or (tile == EXIT and not self.exit_open):
            self._step_to(target, direction)
        elif tile == EXIT and self.exit_open:
            self.outcome = Outcome.WON
        elif self.bonus and tile == MOB:
            self.outcome = Outcome.LOST
        # Leaving a closed exit takes a second, separately counted step.
        if (
            self.grid[start.y][start.x] == EXIT
            and not self.exit_open
            and self.grid[target.y][target.x] != WALL
        ):
            self._step_to(target, direction)
        return self.outcome

    def handle_key(self, keycode: int) -> Outcome:
        """React to a key press: Escape quits, WASD and arrows move."""
        if keycode == KEY_ESCAPE:
            self.outcome = Outcome.QUIT
            return self.outcome
        direction = _KEY_DIRECTIONS.get(keycode)
        if direction is not None and not self.ended:
            self.move(direction)
        return self.outcome


class WallAnimation:
    """Cycles the wall frames 0, 1, 2, 3 after each interval has passed."""

    def __init__(self, interval: float = 0.5, start: float = 0.0) -> None:
        self.interval = interval
        self.start = start
        self.frame = 0

    def tick(self, now: float, ended: bool = False) -> int | None:
        """Advance the animation; return the frame to show, or None if unchanged."""
        if ended:
            return None
        elapsed = now - self.start
        if elapsed <= self.interval:
            return None
        if self.frame == 0:
            self.frame = 1
        elif self.frame == 1:
            # The second and third frames are passed in the same tick.
            self.frame = 3
        elif self.frame == 2:
            self.frame = 3
        else:
            self.frame = 0
        self.start = now
        return self.frame


def inner_walls(grid: Sequence[Sequence[str]]) -> list[Position]:
    """Return the wall tiles inside the border, row by row."""
    return [
        Position(x, y)
        for y in range(1, len(grid) - 1)
        for x in range(1, len(grid[y]) - 1)
        if grid[y][x] == WALL
    ]