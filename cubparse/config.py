"""Scene configuration model and the first pass over a ``.cub`` file."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import TYPE_CHECKING

from .errors import ConfigError
from .textutils import read_lines, trim

if TYPE_CHECKING:
    from PIL.Image import Image

_PLAYER_DIRECTIONS = frozenset("NSEW")
_DIGITS = frozenset("0123456789")

# Checked in this order; each prefix names one wall texture.
_TEXTURE_KEYS = (
    ("NO", "no", "North"),
    ("WE", "we", "West"),
    ("SO", "so", "South"),
    ("EA", "ea", "East"),
)


@dataclass
class MapGrid:
    """The map section of a scene: its rows and what is known about them."""

    rows: list[str] = field(default_factory=list)
    player_facing_to: str = ""
    pre_start_line_num: int = 0
    player_x: int = 0
    player_y: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Textures:
    """Loaded wall images and packed RGBA floor and ceiling colours."""

    no: Image | None = None
    so: Image | None = None
    ea: Image | None = None
    we: Image | None = None
    ceiling: int = 0
    floor: int = 0


@dataclass
class GameConfig:
    """Everything read from a scene file."""

    no: str | None = None
    so: str | None = None
    we: str | None = None
    ea: str | None = None
    floor_color: str | None = None
    ceiling_color: str | None = None
    height_keeper: int = 0
    textures: Textures | None = None
    grid: MapGrid | None = None


def check_file_extension(path: str) -> None:
    """Raise ConfigError unless *path* ends in ``.cub``."""
    if not path.endswith(".cub"):
        raise ConfigError("wrong file extension. Please use file.cub")


def is_player_dir(c: str) -> str | None:
    """Return *c* if it is a player direction (N, S, E or W), else None."""
    return c if c in _PLAYER_DIRECTIONS else None


def skip_space(line: str | None) -> str | None:
    """Return the value after a two-letter texture key.

    The key must be followed by at least one space or tab; otherwise None is
    returned. The final character of the value (normally the newline) is
    dropped.
    """
    if line is None:
        return None
    if len(line) < 3 or line[2] not in " \t":
        return None
    rest = line[2:].lstrip(" \t")
    return rest[:-1]


def _fill_texture(config: GameConfig, line: str) -> None:
    for prefix, attr, name in _TEXTURE_KEYS:
        if line.startswith(prefix):
            if getattr(config, attr) is not None:
                raise ConfigError(f"Duplicate texture definition: {name}")
            setattr(config, attr, skip_space(line))
            return


def _fill_color(config: GameConfig, line: str) -> None:
    if line.startswith("F"):
        if config.floor_color is not None:
            raise ConfigError("Duplicate color definition: floor\n")
        config.floor_color = line
    elif line.startswith("C"):
        if config.ceiling_color is not None:
            raise ConfigError("Duplicate color definition: ceiling\n")
        config.ceiling_color = line


def fill_information(config: GameConfig, line: str) -> None:
    """Record a texture or colour definition found on *line*.

    Raises ConfigError if the same element is defined twice.
    """
    _fill_texture(config, line)
    _fill_color(config, line)


def parse_map_line(line: str, line_num: int, config: GameConfig) -> bool:
    """Tell whether *line* is a map line, creating the map on the first one.

    A map line, once trimmed of newlines, tabs and spaces, is non-empty and
    holds only digits and player directions. The first such line fixes the
    line number at which the map starts.
    """
    trimmed = trim(line, "\n\t ")
    if not trimmed or any(
        c not in _DIGITS and is_player_dir(c) is None for c in trimmed
    ):
        return False
    if config.grid is None:
        config.grid = MapGrid(pre_start_line_num=line_num)
    return True


def parse_file(path: str | PathLike[str]) -> GameConfig:
    """Read the scene file at *path* into a new GameConfig.

    Texture and colour definitions are collected, and the start line and
    height of the map section are recorded. Raises ConfigError if the file
    cannot be read, is empty, or defines an element twice.
    """
    try:
        lines = list(read_lines(path))
    except OSError as exc:
        raise ConfigError("cannot open file\n") from exc
    if not lines:
        raise ConfigError("nothing to read in file\n")
    config = GameConfig()
    for line_num, line in enumerate(lines):
        fill_information(config, line)
        parse_map_line(line, line_num, config)
    if config.grid is not None:
        config.grid.height = len(lines) - config.grid.pre_start_line_num
    return config