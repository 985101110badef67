"""Drawing the game with pygame and running its window loop."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import (  # noqa: E402
    COLLECTIBLE,
    KEY_ESCAPE,
    MOB,
    WALL,
    Game,
    Outcome,
    WallAnimation,
    inner_walls,
)
from solong.pathfinding import Direction  # noqa: E402

TILE = 48
STEP_COLOUR = (255, 0, 0)

_BASE_FILES = {
    "exit_closed": "exitportal_close.xpm",
    "exit_open": "exitportal_open.xpm",
    "collectible": "Flint.xpm",
    "floor": "floor.xpm",
    "win": "win.xpm",
}
_WALL_FILES = ("wall.xpm", "wall2.xpm")
_BONUS_WALL_FILES = ("wall3.xpm", "wall4.xpm")
_BONUS_FILES = {
    "mob": "mob.xpm",
    "game_over": "gameover.xpm",
}
_PLAYER_FILES = {
    Direction.RIGHT: "player_right.xpm",
    Direction.LEFT: "player_left.xpm",
    Direction.DOWN: "player_front.xpm",
    Direction.UP: "player_back.xpm",
}

_KEYCODES = {
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_UP: 65362,
    pygame.K_LEFT: 65361,
    pygame.K_RIGHT: 65363,
    pygame.K_DOWN: 65364,
    pygame.K_w: 119,
    pygame.K_a: 97,
    pygame.K_d: 100,
    pygame.K_s: 115,
}


class TextureError(Exception):
    """One or more texture files could not be loaded."""


@dataclass
class Textures:
    """Every image the game draws."""

    floor: pygame.Surface
    walls: list[pygame.Surface]
    collectible: pygame.Surface
    exit_closed: pygame.Surface
    exit_open: pygame.Surface
    player: dict[Direction, pygame.Surface]
    win: pygame.Surface
    game_over: pygame.Surface | None = None
    mob: pygame.Surface | None = None
    extra: dict[str, pygame.Surface] = field(default_factory=dict)

    @classmethod
    def load(cls, directory: str | os.PathLike[str], bonus: bool = False) -> Textures:
        """Load the textures from ``directory``; raise if any file is missing."""
        root = Path(directory)
        missing: list[str] = []

        def fetch(name: str) -> pygame.Surface | None:
            try:
                return pygame.image.load(str(root / name))
            except (pygame.error, OSError):
                missing.append(name)
                return None

        named = {key: fetch(name) for key, name in _BASE_FILES.items()}
        wall_names = _WALL_FILES + (_BONUS_WALL_FILES if bonus else ())
        walls = [fetch(name) for name in wall_names]
        if bonus:
            named.update({key: fetch(name) for key, name in _BONUS_FILES.items()})
        player = {direction: fetch(name) for direction, name in _PLAYER_FILES.items()}
        if missing:
            raise TextureError("Failed loading textures: " + ", ".join(missing))
        return cls(
            floor=named["floor"],
            walls=walls,
            collectible=named["collectible"],
            exit_closed=named["exit_closed"],
            exit_open=named["exit_open"],
            player=player,
            win=named["win"],
            game_over=named.get("game_over"),
            mob=named.get("mob"),
        )


class Renderer:
    """Draws a game's current state onto a surface."""

    def __init__(self, game: Game, textures: Textures) -> None:
        self.game = game
        self.textures = textures
        self.animation = WallAnimation(start=time.monotonic()) if game.bonus else None
        self._inner = set(inner_walls(game.grid))
        self._font: pygame.font.Font | None = None

    def _end_image(self) -> pygame.Surface:
        if self.game.outcome is Outcome.LOST and self.textures.game_over is not None:
            return self.textures.game_over
        return self.textures.win

    def _wall_image(self, x: int, y: int) -> pygame.Surface:
        frame = 0
        if self.animation is not None and (x, y) in self._inner:
            frame = self.animation.frame
        walls = self.textures.walls
        return walls[frame] if frame < len(walls) else walls[0]

    def _tile_image(self, tile: str, x: int, y: int) -> pygame.Surface:
        if tile == WALL:
            return self._wall_image(x, y)
        if tile == COLLECTIBLE:
            return self.textures.collectible
        if tile == MOB and self.textures.mob is not None:
            return self.textures.mob
        return self.textures.floor

    def draw_map(self, surface: pygame.Surface) -> None:
        """Draw the map, the exit, the player and, in bonus mode, the step count."""
        game = self.game
        if game.outcome in (Outcome.WON, Outcome.LOST):
            surface.blit(self._end_image(), (0, 0))
            return
        for y, row in enumerate(game.grid):
            for x, tile in enumerate(row):
                surface.blit(self._tile_image(tile, x, y), (x * TILE, y * TILE))
        exit_image = self.textures.exit_open if game.exit_open else self.textures.exit_closed
        surface.blit(exit_image, (game.exit.x * TILE, game.exit.y * TILE))
        sprite = self.textures.player.get(game.facing, self.textures.player[Direction.DOWN])
        surface.blit(sprite, (game.player.x * TILE, game.player.y * TILE))
        if game.bonus and pygame.font.get_init():
            if self._font is None:
                self._font = pygame.font.Font(None, 20)
            label = self._font.render(self.step_label(), True, STEP_COLOUR)
            surface.blit(label, (4, 14))

    def step_label(self) -> str:
        """The step counter text shown in bonus mode."""
        return f"step {self.game.movements}"


def run(game: Game, texture_dir: str | os.PathLike[str] = "TEXTURES") -> Outcome:
    """Open the game window and play until the player quits."""
    textures = Textures.load(texture_dir, game.bonus)
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width * TILE, game.height * TILE))
        pygame.display.set_caption("SO LONG")
        renderer = Renderer(game, textures)
        clock = pygame.time.Clock()
        last_movements = game.movements
        showing_end = False
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.handle_key(KEY_ESCAPE)
                elif event.type == pygame.KEYDOWN:
                    keycode = _KEYCODES.get(event.key)
                    if keycode is not None:
                        game.handle_key(keycode)
            if game.outcome is Outcome.QUIT:
                break
            if game.movements != last_movements:
                last_movements = game.movements
                print(f"\r {game.movements}", end="", flush=True)
            if game.ended and not showing_end:
                showing_end = True
                screen = pygame.display.set_mode(renderer._end_image().get_size())
                pygame.display.set_caption("END")
            if renderer.animation is not None:
                renderer.animation.tick(time.monotonic(), game.ended)
            renderer.draw_map(screen)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return game.outcome