"""Game state and the player's moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, TextIO

from solong.maps import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap
from solong.output import put_nbr, put_str


class Key(IntEnum):
    """X11 key codes the game responds to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363


class Facing(Enum):
    """Which way the player sprite looks."""

    RIGHT = 0
    LEFT = 1


_DELTAS = {
    Key.W: (0, -1),
    Key.UP: (0, -1),
    Key.S: (0, 1),
    Key.DOWN: (0, 1),
    Key.A: (-1, 0),
    Key.LEFT: (-1, 0),
    Key.D: (1, 0),
    Key.RIGHT: (1, 0),
}


def key_delta(keycode: int) -> tuple[int, int]:
    """The (dx, dy) step for a key code; (0, 0) for any other key."""
    return _DELTAS.get(keycode, (0, 0))


@dataclass
class Game:
    """A game in progress on a mutable grid of tiles."""

    grid: list[list[str]]
    player_x: int
    player_y: int
    collectibles: int
    facing: Facing = Facing.RIGHT
    won: bool = False
    moves: int = 0
    quit_requested: bool = False
    output: Optional[TextIO] = field(default=None, repr=False)

    @classmethod
    def from_map(cls, game_map: GameMap) -> "Game":
        """Start a game on a validated map."""
        x, y = game_map.player
        return cls(
            grid=[list(row) for row in game_map.grid],
            player_x=x,
            player_y=y,
            collectibles=game_map.collectibles,
        )

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def tile(self, x: int, y: int) -> str:
        """The tile at column x, row y."""
        if not self._inside(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def move(self, dx: int, dy: int) -> bool:
        """Step the player by (dx, dy); return whether the move counted.

        Walls block. The exit blocks while collectibles remain and wins the
        game otherwise. A step of (0, 0) still counts as a move.
        """
        new_x, new_y = self.player_x + dx, self.player_y + dy
        if not self._inside(new_x, new_y) or self.grid[new_y][new_x] == WALL:
            return False
        if new_x > self.player_x:
            self.facing = Facing.RIGHT
        elif new_x < self.player_x:
            self.facing = Facing.LEFT
        target = self.grid[new_y][new_x]
        if target == EXIT:
            if self.collectibles > 0:
                return False
            self.grid[self.player_y][self.player_x] = FLOOR
            self.player_x, self.player_y = new_x, new_y
            self.moves += 1
            self.won = True
            return True
        if target == COLLECTIBLE:
            self.collectibles -= 1
        self.grid[self.player_y][self.player_x] = FLOOR
        self.player_x, self.player_y = new_x, new_y
        self.grid[new_y][new_x] = PLAYER
        self.moves += 1
        return True

    def handle_key(self, keycode: int) -> bool:
        """React to a key press; report the move count when a move counted.

        Once the game is won every key is ignored. Escape sets quit_requested.
        """
        if self.won:
            return False
        if keycode == Key.ESC:
            self.quit_requested = True
            return False
        moved = self.move(*key_delta(keycode))
        if moved:
            put_str("Moves: ", self.output)
            put_nbr(self.moves, self.output)
            put_str("\n", self.output)
        return moved