"""Loading, checking and solving the tile maps the game is played on."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike
from typing import Optional, Union

from solong.reader import read_lines

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
MAP_CHARS = "01CEP"

Grid = Sequence[Sequence[str]]
Position = tuple[int, int]


class MapError(Exception):
    """Raised when a map file cannot be read or is not a playable map."""


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows, the player's start and the collectible count."""

    grid: tuple[str, ...]
    player: Position
    collectibles: int

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0])


def parse_lines(lines: Iterable[str]) -> list[str]:
    """Strip line endings and check the rows form a non-empty rectangle."""
    rows: list[str] = []
    for line in lines:
        text = line[:-1] if line.endswith("\n") else line
        if not text:
            raise MapError("Empty line found")
        if rows and len(text) != len(rows[0]):
            raise MapError("Non-rectangular line found")
        rows.append(text)
    if not rows:
        raise MapError("Map file empty")
    return rows


def read_map(path: Union[str, PathLike]) -> list[str]:
    """Read the rows of a map file, one character per byte."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            return parse_lines(read_lines(stream))
    except OSError as exc:
        raise MapError("Could not open map file") from exc


def _cells(grid: Grid) -> Iterable[tuple[int, int, str]]:
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            yield x, y, ch


def has_valid_chars(grid: Grid) -> bool:
    """True when every tile is one of the known map characters."""
    return all(ch in MAP_CHARS for _, _, ch in _cells(grid))


def is_enclosed_by_walls(grid: Grid) -> bool:
    """True when the first and last rows and columns are all walls."""
    if not grid:
        return False
    top, bottom = grid[0], grid[-1]
    if any(ch != WALL for ch in top) or any(ch != WALL for ch in bottom):
        return False
    return all(row[0] == WALL and row[-1] == WALL for row in grid[1:-1])


def has_required_elements(grid: Grid) -> bool:
    """True for exactly one exit, exactly one player and at least one collectible."""
    tiles = [ch for _, _, ch in _cells(grid)]
    return (
        tiles.count(EXIT) == 1
        and tiles.count(PLAYER) == 1
        and tiles.count(COLLECTIBLE) >= 1
    )


def find_player(grid: Grid) -> Optional[Position]:
    """The (x, y) of the first player tile, or None."""
    return next(((x, y) for x, y, ch in _cells(grid) if ch == PLAYER), None)


def count_collectibles(grid: Grid) -> int:
    """Number of collectible tiles."""
    return sum(1 for _, _, ch in _cells(grid) if ch == COLLECTIBLE)


def is_solvable(grid: Grid, start: Position) -> bool:
    """True when every collectible and the exit can be reached from start."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    reached: set[Position] = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= x < cols and 0 <= y < rows):
            continue
        if (x, y) in reached or grid[y][x] == WALL:
            continue
        reached.add((x, y))
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return all(
        (x, y) in reached
        for x, y, ch in _cells(grid)
        if ch in (COLLECTIBLE, EXIT)
    )


def validate_map(path: Union[str, PathLike]) -> GameMap:
    """Read a map file and check it is playable, raising MapError if not."""
    grid = read_map(path)
    if not has_valid_chars(grid):
        raise MapError("invalid character in map")
    if not is_enclosed_by_walls(grid):
        raise MapError("walls check failed")
    if not has_required_elements(grid):
        raise MapError("element check failed")
    player = find_player(grid)
    if player is None:
        raise MapError("element check failed")
    if not is_solvable(grid, player):
        raise MapError("map is not solvable")
    return GameMap(tuple(grid), player, count_collectibles(grid))