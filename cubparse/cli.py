"""Command-line entry point: parse and validate one scene file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .config import GameConfig, MapGrid, Textures, check_file_extension, parse_file
from .errors import ConfigError, format_error
from .mapcheck import validate_game_config
from .textures import parse_texture_and_color


def _text(value: str | None) -> str:
    return "(null)" if value is None else value


def _alt_hex(value: int) -> str:
    """Format *value* as upper-case hexadecimal with a ``0X`` prefix."""
    return "0" if value == 0 else f"0X{value:X}"


def describe_config(config: GameConfig) -> str:
    """Return a readable summary of the scene's elements and colours."""
    grid = config.grid if config.grid is not None else MapGrid()
    textures = config.textures if config.textures is not None else Textures()
    return "".join(
        (
            f"ceiling_color: {_text(config.ceiling_color)}\n",
            f"floor_color: {_text(config.floor_color)}\n",
            f"east texture: {_text(config.ea)}\n",
            f"north texture: {_text(config.no)}\n",
            f"south texture: {_text(config.so)}\n",
            f"west texture: {_text(config.we)}\n",
            f"pre_start_line_num: {grid.pre_start_line_num}\n",
            f"map_height: {grid.height}\n",
            f"Floor color as decimal: {textures.floor}\n",
            f"Floor color as hexadecimal: {_alt_hex(textures.floor)}\n",
            f"Ceiling color as decimal: {textures.ceiling}\n",
            f"Ceiling color as hexadecimal: {_alt_hex(textures.ceiling)}\n",
            f"map width: {grid.width}\n",
        )
    )


def describe_map(grid: MapGrid) -> str:
    """Return the map rows followed by its size and player placement."""
    lines = [f"map2d[{i}]: {row}" for i, row in enumerate(grid.rows[: grid.height])]
    lines += [
        f"map_height: {grid.height}",
        f"width: {grid.width}",
        f"player's x: {grid.player_x}",
        f"player's y: {grid.player_y}",
        f"player's direction: {grid.player_facing_to}",
    ]
    return "\n".join(lines) + "\n"


def _report(exc: ConfigError, trailer: str | None = None) -> None:
    """Write *exc* and the errors that caused it to stderr, innermost first."""
    chain = []
    current: BaseException | None = exc
    while isinstance(current, ConfigError):
        chain.append(current)
        current = current.__cause__
    for error in reversed(chain):
        sys.stderr.write(error.report())
    if trailer is not None:
        sys.stderr.write(format_error(trailer))


def main(argv: Sequence[str] | None = None) -> int:
    """Parse and validate the single scene file named in *argv*."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please input one gaming map")
        return 1
    if len(args) > 1:
        print("Please input one file at a time")
        return 1
    path = args[0]
    try:
        check_file_extension(path)
    except ConfigError as exc:
        sys.stderr.write(f"Error: {exc.message}\n")
        return 1
    try:
        config = parse_file(path)
    except ConfigError as exc:
        _report(exc, "returned from parse_file\n")
        return 1
    try:
        parse_texture_and_color(config)
    except ConfigError as exc:
        _report(exc, "parse texture false\n")
        return 1
    sys.stdout.write(describe_config(config))
    try:
        grid = validate_game_config(path, config)
    except ConfigError as exc:
        _report(exc)
        return 1
    sys.stdout.write(describe_map(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())