"""Second pass over a scene file: storing the map grid and validating it."""

from __future__ import annotations

from dataclasses import replace
from os import PathLike

from .config import GameConfig, MapGrid, is_player_dir
from .errors import ConfigError
from .textutils import read_lines, trim

_VALID_MAP_CHARS = frozenset("01NSEW\n ")

# Checked in this order; the first one missing is reported.
_REQUIRED_ELEMENTS = (
    ("ceiling_color", "missing ceiling color\n"),
    ("floor_color", "missing floor color\n"),
    ("ea", "missing east texture\n"),
    ("we", "missing west texture\n"),
    ("so", "missing south texture\n"),
    ("no", "missing north texture\n"),
)


def _missing_element(config: GameConfig) -> str | None:
    """Return the message for the first unset element of *config*, if any."""
    for attr, message in _REQUIRED_ELEMENTS:
        if not getattr(config, attr):
            return message
    return None


def is_config_full(config: GameConfig) -> bool:
    """Tell whether both colours and all four texture paths are set."""
    return _missing_element(config) is None


def store_map2d(path: str | PathLike[str], config: GameConfig) -> list[str]:
    """Read the map section of the file at *path* into ``config.grid.rows``.

    Lines before the recorded map start are skipped; each remaining line has
    its newlines trimmed. Raises ConfigError if the file cannot be read, no
    map was found earlier, or a map line holds a character other than
    ``0``, ``1``, ``N``, ``S``, ``E``, ``W`` or a space.
    """
    grid = config.grid
    if grid is None:
        raise ConfigError("no map found in file")
    try:
        lines = list(read_lines(path))
    except OSError as exc:
        raise ConfigError("cannot open file") from exc
    rows = []
    for line in lines[grid.pre_start_line_num:]:
        if any(c not in _VALID_MAP_CHARS for c in line):
            raise ConfigError("invalid character in map")
        rows.append(trim(line, "\n"))
    grid.rows = rows
    return rows


def parse_player(config: GameConfig) -> MapGrid:
    """Find the single player on the map and measure the map's width.

    The first row is not searched. Raises ConfigError unless exactly one
    player direction (N, S, E or W) is found.
    """
    grid = config.grid
    if grid is None:
        raise ConfigError("Player not found")
    config.height_keeper = 0
    player_count = 0
    for row_index, row in enumerate(grid.rows[1:], start=1):
        for column, char in enumerate(row):
            if config.height_keeper == 0:
                config.height_keeper = grid.height
            direction = is_player_dir(char)
            if direction is not None:
                player_count += 1
                if player_count != 1:
                    raise ConfigError("Player not found")
                grid.player_x = column
                grid.player_y = row_index
                grid.player_facing_to = direction
        grid.width = max(grid.width, len(row))
        grid.height += 1
    if player_count != 1:
        raise ConfigError("Player not found")
    grid.height = config.height_keeper
    return grid


def flood_fill(grid: MapGrid, y: int, x: int) -> None:
    """Check that the area reachable from (*y*, *x*) is closed by walls.

    Visited floor cells are marked ``2`` in ``grid.rows``. Raises
    ConfigError at the first open edge, empty row or unexpected character.
    """
    rows = grid.rows
    if rows and "0" in rows[0]:
        raise ConfigError("broken wall at top")
    bottom = grid.height - 1
    if 0 <= bottom < len(rows) and "0" in rows[bottom]:
        raise ConfigError("broken wall at bottom")
    cells = [list(row) for row in rows]
    try:
        stack = [(y, x)]
        while stack:
            cy, cx = stack.pop()
            if cy < 0:
                raise ConfigError("out of bounds or broken wall\n")
            if cy >= len(cells) or not cells[cy]:
                raise ConfigError("empty row encountered")
            row = cells[cy]
            inside = 0 <= cx < len(row)
            if inside and row[cx] in ("1", "2"):
                continue
            if not inside:
                raise ConfigError("out of bounds or broken wall\n")
            if row[cx] != "0":
                raise ConfigError("unexpected value encountered\n")
            row[cx] = "2"
            # Pushed in reverse so that right, left, down, up are visited in turn.
            stack.extend(((cy - 1, cx), (cy + 1, cx), (cy, cx - 1), (cy, cx + 1)))
    finally:
        grid.rows = ["".join(row) for row in cells]


def validate_game_config(path: str | PathLike[str], config: GameConfig) -> MapGrid:
    """Validate the configuration and map of the scene file at *path*.

    Returns the stored map grid. Raises ConfigError if an element is
    missing, the map holds an invalid character, the player is not unique,
    or the map is not closed.
    """
    missing = _missing_element(config)
    if missing is not None:
        raise ConfigError(missing)
    store_map2d(path, config)
    grid = parse_player(config)
    trial = replace(grid, rows=list(grid.rows))
    row = trial.rows[trial.player_y]
    trial.rows[trial.player_y] = row[: trial.player_x] + "0" + row[trial.player_x + 1:]
    try:
        flood_fill(trial, trial.player_y, trial.player_x)
    except ConfigError as exc:
        raise ConfigError("Invalid map") from exc
    return grid