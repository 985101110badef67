# solong

A small top-down tile game. You walk around a walled map and pick up every
collectible. When the last one is taken, the exit portal opens. Step into
the open portal to win.

In bonus mode the map may also hold enemies. Walking into one ends the
game. The inner walls are animated, and the step count is shown in the
window.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window.

## Playing

```
solong path/to/level.ber
solong --bonus path/to/level.ber
solong --textures path/to/images path/to/level.ber
```

Options:

- `--bonus`: allow enemies (`M`), animate the walls and show the step count.
- `--textures DIR`: the folder that holds the images. The default is
  `TEXTURES`, relative to the current directory.

Controls:

- `W` / Up arrow: move up
- `A` / Left arrow: move left
- `S` / Down arrow: move down
- `D` / Right arrow: move right
- `Esc` or closing the window: quit

Each step prints the running step count to the terminal. When you win or
lose, the window shows the end image. Press `Esc` or close the window to
leave.

The command exits with status 0 after a game. It exits with status 1 if
it was not given exactly one map, if the map is rejected, or if a texture
file cannot be loaded.

## Map files

A map is a plain text file. Its name must end in `.ber`, and the first dot
in the path must begin that `.ber`. Each line is a row of tiles:

| Symbol | Meaning                          |
|--------|----------------------------------|
| `1`    | wall                             |
| `0`    | floor                            |
| `P`    | player start (exactly one)       |
| `E`    | exit (exactly one)               |
| `C`    | collectible (at least one)       |
| `M`    | enemy (allowed only in bonus mode) |

A map must:

- be rectangular, with at least two rows;
- be closed, with walls all the way around;
- have no empty line after its first line;
- let the player reach every collectible and the exit, without going
  through walls or, in bonus mode, enemies.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

If a map breaks a rule, the game prints `Error` and then the message for
that rule. It does this for every rule the map breaks, and no window opens.

## Textures

The texture folder must contain these images:

- `floor.xpm`, `wall.xpm`, `wall2.xpm`, `Flint.xpm` (the collectible)
- `exitportal_close.xpm`, `exitportal_open.xpm`, `win.xpm`
- `player_front.xpm`, `player_back.xpm`, `player_left.xpm`, `player_right.xpm`
- in bonus mode also `wall3.xpm`, `wall4.xpm`, `mob.xpm` and `gameover.xpm`

Each tile is drawn 48 by 48 pixels.

## Using it as a library

The parts that load, check and play maps are plain Python and need no
display:

- `solong.mapfile`: `MapError` (its `messages` lists every reason found),
  `GameMap` (`grid`, `width`, `height`, `tile(x, y)`, and the `player`,
  `exit`, `collectibles` and `mobs` positions), `check_file_format`,
  `collect_map`, `read_map_text`, `split_rectangle` and `check_closed`.
- `solong.validation`: `load_map(path, bonus)` reads and checks a `.ber`
  file and returns a `GameMap`. `parse_map(text, bonus)` does the same from
  text. Also here are `check_symbols`, `count_pieces` and `locate_pieces`.
- `solong.pathfinding`: `check_path(game_map, bonus)` raises `MapError`
  when a collectible or the exit cannot be reached. `explore` returns the
  tiles the walk visits. Also here are `Direction`, `Position`,
  `move_position`, `first_direction`, `count_bits` and `count_space`.
- `solong.game`: `Game(game_map, bonus)` holds the game state. It has
  `player`, `collected`, `exit_open`, `movements`, `facing` and `outcome`.
  `Game.move(direction)` and `Game.handle_key(keycode)` return an `Outcome`
  (`PLAYING`, `WON`, `LOST` or `QUIT`). Key codes are X11 keysyms: 65307
  for Escape, the arrow keys 65361 to 65364, and `w`, `a`, `s`, `d` as
  119, 97, 115, 100. `WallAnimation` and `inner_walls` drive the bonus
  wall animation.
- `solong.display`: `Textures.load(directory, bonus)` loads the images,
  and raises `TextureError` if any is missing. `Renderer` draws a game onto
  a pygame surface. `run(game, texture_dir)` opens the window and plays the
  game.
- `solong.cli`: `validate_input(path, bonus)` loads a map and checks its
  paths. `main(argv)` is the `solong` command.

## What is not included

The package ships no image files. You have to supply a texture folder
with the files listed above before a game window can open.

## Running the tests

```
pip install .[test]
pytest
```