# solong

A small top-down puzzle game. You steer the player around a walled map,
pick up every collectible, and then walk into the exit. Each move that
counts prints `Moves: N` to standard output.

## Installing

```
pip install .
```

This also installs `pygame`, which opens the window and draws the map.

## Playing

```
solong path/to/level.ber
```

The same entry point can be started with `python -m solong.cli`.

Before the map is read, the argument is checked. There must be exactly
one. Its file name is the part after the last `/`, and that name must be
at least five characters long and end in `.ber`.

Controls:

| Key               | Action     |
|-------------------|------------|
| `W` / Up arrow    | move up    |
| `S` / Down arrow  | move down  |
| `A` / Left arrow  | move left  |
| `D` / Right arrow | move right |
| `Esc`             | quit       |

Closing the window also quits. Walls block the player. The exit blocks
the player until every collectible has been picked up. Stepping onto the
exit wins the game and shows the win message. After that every key is
ignored, `Esc` included, so close the window to leave.

Any key not in the table counts as a move that stays in place, and the
move counter goes up by one.

### Sprites

The package ships no images. The game loads them from a `sprites/`
directory relative to the current working directory. It needs these
files, in a format `pygame.image.load` can read:

| File              | Shows                 |
|-------------------|-----------------------|
| `wall.xpm`        | wall tile             |
| `floor.xpm`       | floor tile            |
| `vader_right.xpm` | player facing right   |
| `vader_left.xpm`  | player facing left    |
| `grogu.xpm`       | collectible           |
| `deathstar.xpm`   | exit                  |
| `win_mess.xpm`    | win message (centred) |

Each tile is drawn as a 32×32 cell. If a sprite cannot be loaded, the
game prints the reason to standard error and exits with status 1.

## Map files

A map is a text file. Each line is one row of tiles:

| Character | Meaning      |
|-----------|--------------|
| `1`       | wall         |
| `0`       | floor        |
| `P`       | player start |
| `C`       | collectible  |
| `E`       | exit         |

Example:

```
1111111
1P0C0E1
1111111
```

The last line may end with or without a newline. Lines must end in `\n`.
If a line ends in `\r\n`, the `\r` is kept and counts as an invalid
character.

When a map is rejected, the game prints `Error` on one line and the
reason on the next, both to standard output, and exits with status 1.
The reasons are:

- `Could not open map file`
- `Map file empty`
- `Empty line found`
- `Non-rectangular line found`
- `invalid character in map`
- `walls check failed`: the first and last rows and columns are not all walls
- `element check failed`: the map does not have exactly one `P`, exactly
  one `E` and at least one `C`
- `map is not solvable`: the player cannot reach some collectible or the exit

## Using it from Python

Map checks and the game rules work without a window:

```python
from solong.maps import validate_map
from solong.game import Game

game = Game.from_map(validate_map("level.ber"))
game.move(1, 0)          # True if the move counted
game.tile(0, 0)          # '1'
print(game.moves, game.collectibles, game.won)
```

### `solong.maps`

- `validate_map(path)` runs every check and returns a frozen `GameMap`
  with `grid`, `player` (an `(x, y)` pair), `collectibles`, `rows` and
  `cols`. It raises `MapError` when the map is invalid.
- The individual steps are also available:
  - `read_map`
  - `parse_lines`
  - `has_valid_chars`
  - `is_enclosed_by_walls`
  - `has_required_elements`
  - `find_player`
  - `count_collectibles`
  - `is_solvable(grid, start)`

### `solong.game`

- `Game` holds the mutable grid and the player's state: `player_x`,
  `player_y`, `collectibles`, `facing`, `won`, `moves` and
  `quit_requested`.
- `Game.move(dx, dy)` applies one step.
- `Game.handle_key(keycode)` takes an X11 key code from `Key`. It moves
  the player and writes the move count to `Game.output`, or to standard
  output when `output` is `None`. `Esc` sets `quit_requested`.
- `key_delta(keycode)` gives the step for a key.
- `Facing` is `RIGHT` or `LEFT`.

### `solong.display`

- `Sprites.load(directory)` loads the images.
- `Renderer(surface, sprites).draw(game)` draws a game onto a pygame
  surface.
- Helpers:
  - `tile_sprite_name`
  - `win_message_position`
  - `translate_key`, which maps pygame keys to `Key` codes

### `solong.cli`

- `check_map_argument(args)` checks the map argument.
- `run(path, sprites_dir)` plays one map in a window.
- `main(argv)` is the command-line entry point and returns the exit status.

### Small helper modules

- `solong.chars`: ASCII classification and case conversion, plus
  `atoi` and `itoa`.
- `solong.memory`: `bytearray` helpers such as `memset`, `memcpy`,
  `memmove`, `memchr`, `memcmp` and `calloc`.
- `solong.strutil`: string helpers such as `strchr`, `strncmp`,
  `substr`, `strtrim`, `split`, `strlcpy` and `strlcat`.
- `solong.linked`: a singly linked list (`LinkedList`, `Node`).
- `solong.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`,
  which write to a text stream.
- `solong.reader`: `LineReader` and `read_lines`, which read a stream
  line by line through a fixed-size buffer (42 by default).

## Running the tests

```
pip install ".[test]"
pytest
```