"""Drawing a game onto a pygame surface with tile sprites."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

import pygame

from solong.game import Facing, Game, Key
from solong.maps import COLLECTIBLE, EXIT, PLAYER, WALL

TILE_SIZE = 32

SPRITE_FILES = {
    "win_message": "win_mess.xpm",
    "wall": "wall.xpm",
    "player_right": "vader_right.xpm",
    "player_left": "vader_left.xpm",
    "collectible": "grogu.xpm",
    "exit": "deathstar.xpm",
    "floor": "floor.xpm",
}

_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def tile_sprite_name(tile: str, facing: Facing) -> str:
    """The name of the sprite that shows a tile; unknown tiles show floor."""
    if tile == WALL:
        return "wall"
    if tile == PLAYER:
        return "player_right" if facing is Facing.RIGHT else "player_left"
    if tile == COLLECTIBLE:
        return "collectible"
    if tile == EXIT:
        return "exit"
    return "floor"


def win_message_position(cols: int, rows: int, width: int, height: int) -> tuple[int, int]:
    """Top-left corner that centres a width x height image on the map."""
    return (cols * TILE_SIZE) // 2 - width // 2, (rows * TILE_SIZE) // 2 - height // 2


def translate_key(pygame_key: int) -> int:
    """The game key code for a pygame key; other keys pass through unchanged."""
    return _KEYS.get(pygame_key, pygame_key)


@dataclass(frozen=True)
class Sprites:
    """The full set of images used to draw the map and the win message."""

    images: Mapping[str, pygame.Surface]

    def __post_init__(self) -> None:
        missing = sorted(set(SPRITE_FILES) - set(self.images))
        if missing:
            raise ValueError(f"missing sprites: {', '.join(missing)}")

    def __getitem__(self, name: str) -> pygame.Surface:
        return self.images[name]

    @property
    def win_size(self) -> tuple[int, int]:
        return self.images["win_message"].get_size()

    @classmethod
    def load(cls, directory: Union[str, PathLike] = "sprites") -> "Sprites":
        """Load every sprite file from directory, raising OSError if one fails."""
        images: dict[str, pygame.Surface] = {}
        for name, filename in SPRITE_FILES.items():
            path = Path(directory) / filename
            try:
                images[name] = pygame.image.load(str(path))
            except pygame.error as exc:
                raise OSError(f"Could not load sprite {path}") from exc
        return cls(images)


class Renderer:
    """Draws a game onto a surface, one sprite per tile."""

    def __init__(self, surface: pygame.Surface, sprites: Sprites) -> None:
        self.surface = surface
        self.sprites = sprites

    def draw(self, game: Game) -> None:
        """Draw every tile, then the win message once the game is won."""
        for y, row in enumerate(game.grid):
            for x, tile in enumerate(row):
                image = self.sprites[tile_sprite_name(tile, game.facing)]
                self.surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))
        if game.won:
            width, height = self.sprites.win_size
            position = win_message_position(game.cols, game.rows, width, height)
            self.surface.blit(self.sprites["win_message"], position)