"""Reading ``.ber`` map files and checking their basic shape."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

MAP_SUFFIX = ".ber"

WALL = "1"


class MapError(Exception):
    """A map file or map layout was rejected; carries every reason found."""

    def __init__(self, *messages: str) -> None:
        super().__init__(*messages)
        self.messages = list(messages)

    def __str__(self) -> str:
        return "\n".join(self.messages)


@dataclass
class GameMap:
    """A rectangular grid of tiles and the positions of the pieces on it."""

    grid: list[list[str]]
    player: tuple[int, int] | None = None
    exit: tuple[int, int] | None = None
    collectibles: list[tuple[int, int]] = field(default_factory=list)
    mobs: list[tuple[int, int]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def tile(self, x: int, y: int) -> str:
        """Return the symbol at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.grid[y][x]


def check_file_format(path: str | os.PathLike[str]) -> str | os.PathLike[str]:
    """Accept a path whose first dot starts ``.ber`` and which ends in ``.ber``."""
    name = os.fspath(path)
    dot = name.find(".")
    if dot < 0 or not name.endswith(MAP_SUFFIX) or not name.startswith(MAP_SUFFIX, dot):
        raise MapError("Wrong file format, file format must be '.ber'")
    return path


def collect_map(lines: Iterable[str]) -> str:
    """Join the lines of a map file, refusing blank lines after the first."""
    remaining = iter(lines)
    first = next(remaining, None)
    if first is None:
        raise MapError("Empty file")
    parts = [first]
    blank_line = False
    for line in remaining:
        if line.startswith("\n"):
            blank_line = True
        parts.append(line)
    if blank_line:
        raise MapError("Empty line in file")
    text = "".join(parts)
    if not text:
        raise MapError("Empty file")
    return text


def read_map_text(path: str | os.PathLike[str]) -> str:
    """Check the file name, then read the whole map file as text."""
    check_file_format(path)
    try:
        with open(path, encoding="latin-1", newline="\n") as handle:
            return collect_map(handle)
    except OSError as exc:
        raise MapError("Failing opening the file") from exc


def split_rectangle(text: str) -> GameMap:
    """Split map text into rows and require at least two rows of equal length."""
    rows = [row for row in text.split("\n") if row]
    if len(rows) < 2 or any(len(row) != len(rows[0]) for row in rows):
        raise MapError("Map must be rectangular")
    return GameMap(grid=[list(row) for row in rows])


def check_closed(grid: Sequence[Sequence[str]]) -> None:
    """Require the outer border of the grid to be walls."""
    if not grid:
        raise MapError("Map must be rectangular")
    errors: list[str] = []
    width = len(grid[0])
    if any(tile != WALL for tile in grid[0]):
        errors.append("Map is not closed on the upperside")
    for row in grid[1:-1]:
        if row[0] != WALL:
            errors.append("Map is not closed on the leftside")
        if row[width - 1] != WALL:
            errors.append("Map is not closed on the rightside")
    if any(tile != WALL for tile in grid[-1]):
        errors.append("Map is not closed on the downside")
    if errors:
        raise MapError(*errors)