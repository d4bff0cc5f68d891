import pygame
import pytest

from solong.display import (
    SPRITE_FILES,
    TILE_SIZE,
    Renderer,
    Sprites,
    tile_sprite_name,
    translate_key,
    win_message_position,
)
from solong.game import Facing, Game, Key, key_delta
from solong.maps import GameMap

COLORS = {
    "win_message": (250, 250, 0),
    "wall": (10, 10, 10),
    "player_right": (200, 0, 0),
    "player_left": (0, 200, 0),
    "collectible": (0, 0, 200),
    "exit": (120, 0, 120),
    "floor": (90, 90, 90),
}


def _sprites(win_size=(20, 10)):
    images = {}
    for name, color in COLORS.items():
        size = win_size if name == "win_message" else (TILE_SIZE, TILE_SIZE)
        surface = pygame.Surface(size)
        surface.fill(color)
        images[name] = surface
    return Sprites(images)


def _game():
    game_map = GameMap(("11111", "1PCE1", "10001", "11111"), (1, 1), 1)
    return Game.from_map(game_map)


def _color_at(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.mark.parametrize(
    "tile,facing,filename",
    [
        ("1", Facing.RIGHT, "wall.xpm"),
        ("P", Facing.RIGHT, "vader_right.xpm"),
        ("P", Facing.LEFT, "vader_left.xpm"),
        ("C", Facing.LEFT, "grogu.xpm"),
        ("E", Facing.RIGHT, "deathstar.xpm"),
        ("0", Facing.RIGHT, "floor.xpm"),
    ],
)
def test_tile_sprite_name(tile, facing, filename):
    assert SPRITE_FILES[tile_sprite_name(tile, facing)] == filename


@pytest.mark.parametrize("cols,rows,width,height", [(5, 3, 20, 10), (8, 8, 64, 32), (3, 7, 96, 224)])
def test_win_message_is_centred(cols, rows, width, height):
    x, y = win_message_position(cols, rows, width, height)
    assert 2 * x + width == cols * TILE_SIZE
    assert 2 * y + height == rows * TILE_SIZE


@pytest.mark.parametrize(
    "pygame_key,key",
    [
        (pygame.K_ESCAPE, Key.ESC),
        (pygame.K_w, Key.W),
        (pygame.K_a, Key.A),
        (pygame.K_s, Key.S),
        (pygame.K_d, Key.D),
        (pygame.K_UP, Key.UP),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_RIGHT, Key.RIGHT),
    ],
)
def test_translate_key(pygame_key, key):
    assert translate_key(pygame_key) == key


def test_unknown_key_passes_through():
    code = translate_key(pygame.K_q)
    assert code == pygame.K_q
    assert key_delta(code) == (0, 0)


def test_sprites_require_every_image():
    with pytest.raises(ValueError):
        Sprites({"wall": pygame.Surface((TILE_SIZE, TILE_SIZE))})


def test_sprites_load_missing_directory(tmp_path):
    with pytest.raises(OSError):
        Sprites.load(tmp_path / "absent")


def test_sprites_load_xpm_files(tmp_path):
    for filename in SPRITE_FILES.values():
        (tmp_path / filename).write_text(
            '/* XPM */\nstatic char *sprite[] = {\n"2 2 1 1",\n'
            '"a c #FF0000",\n"aa",\n"aa"\n};\n'
        )
    sprites = Sprites.load(tmp_path)
    assert sprites["wall"].get_size() == (2, 2)
    assert sprites.win_size == (2, 2)
    assert _color_at(sprites["floor"], 1, 1) == (255, 0, 0)


def test_draw_tiles():
    game = _game()
    surface = pygame.Surface((game.cols * TILE_SIZE, game.rows * TILE_SIZE))
    Renderer(surface, _sprites()).draw(game)
    assert _color_at(surface, 5, 5) == COLORS["wall"]
    assert _color_at(surface, TILE_SIZE + 5, TILE_SIZE + 5) == COLORS["player_right"]
    assert _color_at(surface, 2 * TILE_SIZE + 5, TILE_SIZE + 5) == COLORS["collectible"]
    assert _color_at(surface, 3 * TILE_SIZE + 5, TILE_SIZE + 5) == COLORS["exit"]
    assert _color_at(surface, TILE_SIZE + 5, 2 * TILE_SIZE + 5) == COLORS["floor"]


def test_draw_player_facing_left_after_move():
    game = _game()
    game.move(0, 1)
    game.move(-0, 0)
    game.move(1, 0)
    game.move(-1, 0)
    surface = pygame.Surface((game.cols * TILE_SIZE, game.rows * TILE_SIZE))
    Renderer(surface, _sprites()).draw(game)
    px, py = game.player_x * TILE_SIZE + 5, game.player_y * TILE_SIZE + 5
    assert game.facing is Facing.LEFT
    assert _color_at(surface, px, py) == COLORS["player_left"]


def test_draw_win_message_only_when_won():
    game = _game()
    sprites = _sprites()
    surface = pygame.Surface((game.cols * TILE_SIZE, game.rows * TILE_SIZE))
    renderer = Renderer(surface, sprites)
    centre = (game.cols * TILE_SIZE // 2, game.rows * TILE_SIZE // 2)
    renderer.draw(game)
    assert _color_at(surface, *centre) != COLORS["win_message"]
    assert game.move(1, 0)
    assert game.move(1, 0)
    assert game.won
    renderer.draw(game)
    assert _color_at(surface, *centre) == COLORS["win_message"]