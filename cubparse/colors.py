"""Parsing of floor and ceiling colour lines."""

from __future__ import annotations

from .errors import ConfigError
from .textutils import atoi, split


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four channel values into one unsigned 32-bit RGBA integer."""
    return ((r << 24) | (g << 16) | (b << 8) | a) & 0xFFFFFFFF


def parse_color(line: str | None) -> tuple[str, int]:
    """Parse a colour line such as ``"F 220,100,0"``.

    Returns the identifier (the first word) and the packed RGBA value with
    full opacity. Raises ConfigError for a malformed line or a channel
    outside 0-255.
    """
    if line is None:
        raise ConfigError("missing color string")
    stripped = line.lstrip("\t")
    line = " " * (len(line) - len(stripped)) + stripped
    elements = split(line, " ")
    if len(elements) != 2:
        raise ConfigError("Invalid color format\n")
    numbers = split(elements[1], ",")
    if len(numbers) != 3:
        raise ConfigError("Invalid color numbers\n")
    channels = []
    for text in numbers:
        value = atoi(text)
        if not 0 <= value <= 255:
            raise ConfigError("RGB values must be 0-255.")
        channels.append(value)
    red, green, blue = channels
    return elements[0], pack_rgba(red, green, blue, 255)