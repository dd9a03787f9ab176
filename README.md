# raycub

A small first-person raycasting engine. It reads a `.cub` scene file,
validates it, and renders a walkable 3D view of the maze in a window together
with a minimap that follows the player.

## Installing

```
pip install .
```

The window and input handling use `pygame`, which is installed as a
dependency. For the tests, install the `test` extra: `pip install .[test]`.

## Running

```
raycub path/to/level.cub
```

The command prints a usage line and exits with status 1 if no file is given
or the name does not end in `.cub`. If the file cannot be read, is empty, or
the scene is invalid, it prints `Error: ...` with the reason and exits with
status 1.

### Controls

| Input              | Action              |
|--------------------|---------------------|
| `W` / Up arrow     | Move forward        |
| `S` / Down arrow   | Move backward       |
| `A` / `D`          | Strafe left / right |
| Left / Right arrow | Turn                |
| Mouse (horizontal) | Turn                |
| `Escape`           | Quit                |

The mouse cursor is hidden and kept at the window centre; mouse movement is
ignored for the first two frames. Movement slides along walls.

## The `.cub` format

A scene file holds six element lines, followed by the map grid:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE`, `EA` each name one path; every file must be openable for
  reading.
- `F` and `C` give the floor and ceiling colours as three comma-separated
  components from 0 to 255 (whitespace around them is ignored).
- The grid starts at the first line whose first visible character is `1`.
  In it, `1` is a wall, `0` is open floor, spaces are outside the map, and
  exactly one of `N`, `S`, `E`, `W` marks the spawn point.
- The map must be closed: the first row holds only walls and spaces, every
  row starts and ends with a wall, and no floor cell touches a space or the
  edge of the grid.

Invalid scenes raise `raycub.config.MapError`, a subclass of `ValueError`.

## Using it as a library

The pieces can be driven without a window:

```python
from raycub.mapfile import parse_map_file
from raycub.app import init_game
from raycub.player import InputState

map_data = parse_map_file("level.cub")
game = init_game(map_data)
game.frame(InputState(forward=True))
print(game.walls[0].distance)
```

- `raycub.mapfile.parse_map_text` parses scene text already in memory.
- `raycub.config.default_map()` returns a built-in demonstration map.
- `raycub.raycaster.cast_rays` casts one ray per screen column (1600), and
  `raycub.raycaster.rays_to_walls` turns them into fisheye-corrected
  `WallHit` slices with a wall orientation (`texture_id`: 0 north, 1 east,
  2 south, 3 west).
- `raycub.render` draws the scene and minimap into a `raycub.image.Image`, a
  plain RGBA byte buffer with `put_pixel`, `get_pixel` and `fill`.
- `raycub.app.run(game)` opens the pygame window and runs the frame loop.

## What it does not do

- Walls are drawn in flat colours chosen by their orientation; the texture
  files named in the scene are checked for existence but never loaded or
  drawn.
- The floor and ceiling are painted in fixed colours; the `F` and `C` colours
  are parsed and stored on `MapData` but not used for drawing.
- There are no sprites, doors, sound or game objectives: the player can only
  walk around the maze.