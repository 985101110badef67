"""A tile-map collect-and-escape game: .ber map loading and checks, game state, and a pygame window."""

__version__ = "1.0.0"
__all__ = ["cli", "display", "game", "mapfile", "pathfinding", "validation"]