"""Loading of wall textures and resolution of floor and ceiling colours."""

from __future__ import annotations

from os import PathLike

from PIL import Image

from .colors import parse_color
from .config import GameConfig, Textures
from .errors import ConfigError

_LOAD_ORDER = (
    ("no", "north"),
    ("so", "south"),
    ("we", "west"),
    ("ea", "east"),
)


def load_png(path: str | PathLike[str]) -> Image.Image:
    """Load the PNG file at *path* as an RGBA image.

    Raises ConfigError if the file cannot be read or is not a PNG.
    """
    try:
        with Image.open(path) as image:
            if image.format != "PNG":
                raise ConfigError(f"not a PNG file: {path}")
            image.load()
            return image.convert("RGBA")
    except OSError as exc:
        raise ConfigError(f"cannot load PNG file: {path}") from exc


def parse_texture_and_color(config: GameConfig) -> Textures:
    """Load the four wall textures and the two colours of *config*.

    The result is stored on ``config.textures`` and returned. Raises
    ConfigError if a texture path is missing or unloadable, or a colour line
    is missing or malformed.
    """
    if any(path is None for path in (config.no, config.so, config.ea, config.we)):
        raise ConfigError("invalid texture")
    textures = Textures()
    config.textures = textures
    for attr, name in _LOAD_ORDER:
        try:
            setattr(textures, attr, load_png(getattr(config, attr)))
        except ConfigError as exc:
            raise ConfigError(f"texture loading failed: {name}") from exc
    for line in (config.ceiling_color, config.floor_color):
        identifier, rgba = parse_color(line)
        if identifier == "F":
            textures.floor = rgba
        elif identifier == "C":
            textures.ceiling = rgba
    return textures