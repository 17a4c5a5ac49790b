# cubparse

Reads and checks `.cub` scene files, the small text format that describes a
grid-based raycaster level: four wall textures, a floor and a ceiling colour,
and a map made of walls, open floor and one player start.

## A scene file

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

111111
100001
1000N1
111111
```

- `NO`, `SO`, `WE`, `EA` name PNG images used for the walls facing each way.
  The key must be followed by at least one space or tab. Each may appear only
  once.
- `F` and `C` give the floor and ceiling colours as three `0`–`255` values
  separated by commas. Each may appear only once.
- The map starts at the first line made only of digits and `N`, `S`, `E`,
  `W`, and runs to the end of the file. It uses `1` for walls, `0` for open
  floor, spaces, and exactly one of `N`, `S`, `E`, `W` for the player's start
  and facing. The open area reachable from the player must be closed in by
  walls.

## Installing

```
pip install .
```

Loading the wall textures uses Pillow, which is installed as a dependency.

## Checking a file from the command line

```
cubparse level.cub
```

The command takes exactly one file, whose name must end in `.cub`. It reads
the texture and colour definitions, loads the four PNG textures, parses the
colours and prints a summary of the configuration. It then reads the map,
finds the player and flood-fills the map from the player's position to make
sure it is closed, and prints the map rows with the map's size and the
player's position and facing.

With no file, or more than one, it prints a usage hint and exits with
status 1. Any other problem is written to standard error (as `ERROR`
followed by the message, for each error in the chain) and the exit status
is 1. On success the exit status is 0.

## Using it from Python

```python
from cubparse.config import parse_file
from cubparse.errors import ConfigError
from cubparse.mapcheck import validate_game_config
from cubparse.textures import parse_texture_and_color

try:
    config = parse_file("level.cub")
    parse_texture_and_color(config)
    grid = validate_game_config("level.cub", config)
except ConfigError as exc:
    print(exc.report(), end="")
else:
    print(grid.width, grid.height, grid.player_x, grid.player_y, grid.player_facing_to)
    print(hex(config.textures.floor), hex(config.textures.ceiling))
```

The pieces:

- `cubparse.config` holds the data classes `GameConfig`, `Textures` and
  `MapGrid`, and the first pass over a file: `parse_file(path)` returns a
  `GameConfig` with the texture paths, the raw colour lines, and a `MapGrid`
  (in `config.grid`) recording where the map starts and how many lines it
  has. `check_file_extension(path)` raises `ConfigError` unless the path ends
  in `.cub`. `fill_information`, `parse_map_line`, `skip_space` and
  `is_player_dir` are the line-level helpers it uses.
- `cubparse.textures`: `load_png(path)` opens a PNG as an RGBA Pillow image;
  `parse_texture_and_color(config)` loads the four textures and both colours
  into a `Textures` object, stores it on `config.textures` and returns it.
- `cubparse.colors`: `parse_color("F 220,100,0")` returns the identifier and
  the colour packed as a 32-bit RGBA value with full opacity, here
  `("F", 0xDC6400FF)`; `pack_rgba(r, g, b, a)` does the packing.
- `cubparse.mapcheck`: `is_config_full(config)` tells whether both colours
  and all four texture paths are set; `store_map2d(path, config)` reads the
  map rows into `config.grid.rows`; `parse_player(config)` finds the single
  player and measures the map's width; `flood_fill(grid, y, x)` checks that
  the region reachable from a cell is enclosed by walls, marking visited
  floor cells `2`; `validate_game_config(path, config)` runs all of these and
  returns the `MapGrid`.
- `cubparse.cli`: `describe_config(config)` and `describe_map(grid)` return
  the summaries the command prints; `main(argv)` is the command itself.
- `cubparse.textutils` holds the small string helpers the parser relies on:
  `atoi`, `atol`, `split`, `trim` and `read_lines`.

Every problem with a scene is reported by raising
`cubparse.errors.ConfigError`; its `report()` method, like
`format_error(message)`, gives the `ERROR` header and the message.

## What it does not do

The package only reads and validates scene files. It does not open a
window, render the level, or run a game loop; the loaded textures and packed
colours are handed back for other code to use.

## Running the tests

```
pip install ".[test]"
pytest
```