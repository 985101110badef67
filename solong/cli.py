"""Command line entry point: check a ``.ber`` map and play it."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable, Sequence

from solong.display import TextureError, run
from solong.game import Game
from solong.mapfile import GameMap, MapError
from solong.pathfinding import check_path
from solong.validation import load_map


def _report(messages: Iterable[str]) -> None:
    for message in messages:
        print("Error")
        print(message)


def validate_input(path: str | os.PathLike[str], bonus: bool = False) -> GameMap:
    """Load the map at ``path`` and check that it can be completed."""
    game_map = load_map(path, bonus)
    check_path(game_map, bonus)
    return game_map


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named on the command line."""
    parser = argparse.ArgumentParser(prog="solong", description="Play a .ber map.")
    parser.add_argument("maps", nargs="*", help="the .ber map file")
    parser.add_argument("--bonus", action="store_true", help="enable mobs and animations")
    parser.add_argument("--textures", default="TEXTURES", help="texture directory")
    args = parser.parse_args(argv)
    if len(args.maps) != 1:
        _report(["This program works with 1 argument '.ber'"])
        return 1
    try:
        game_map = validate_input(args.maps[0], args.bonus)
    except MapError as exc:
        _report(exc.messages)
        return 1
    try:
        run(Game(game_map, args.bonus), args.textures)
    except TextureError as exc:
        _report([str(exc)])
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())