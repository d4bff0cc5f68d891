"""Command-line entry point: check the map argument, then play."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike
from typing import Optional, Union

import pygame

from solong.display import TILE_SIZE, Renderer, Sprites, translate_key
from solong.game import Game
from solong.maps import MapError, validate_map

MAP_EXTENSION = ".ber"


def check_map_argument(args: Sequence[str]) -> str:
    """Return the single map path in args, raising MapError if it is unusable."""
    if len(args) != 1:
        raise MapError("Wrong number of arguments")
    path = args[0]
    filename = path.rsplit("/", 1)[-1]
    if len(filename) < 5:
        raise MapError("The map file must have a valid name")
    if not filename.endswith(MAP_EXTENSION):
        raise MapError("The map file must have a .ber extension")
    return path


def run(path: Union[str, PathLike], sprites_dir: Union[str, PathLike] = "sprites") -> int:
    """Validate the map at path and play it in a window until it is closed."""
    game_map = validate_map(path)
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game_map.cols * TILE_SIZE, game_map.rows * TILE_SIZE)
        )
        pygame.display.set_caption("so_long")
        sprites = Sprites.load(sprites_dir)
        game = Game.from_map(game_map)
        renderer = Renderer(screen, sprites)
        renderer.draw(game)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYDOWN:
                game.handle_key(translate_key(event.key))
                if game.quit_requested:
                    break
            elif event.type != pygame.VIDEOEXPOSE:
                continue
            renderer.draw(game)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = check_map_argument(args)
        return run(path)
    except MapError as exc:
        sys.stdout.write(f"Error\n{exc}\n")
        return 1
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())