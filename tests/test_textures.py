import pytest
from PIL import Image

from cubparse.colors import pack_rgba
from cubparse.config import GameConfig
from cubparse.errors import ConfigError
from cubparse.textures import load_png, parse_texture_and_color


def _png(tmp_path, name, color=(1, 2, 3), size=(4, 2)):
    path = tmp_path / name
    Image.new("RGB", size, color).save(path, format="PNG")
    return path


def _config(tmp_path, floor="F 220,100,0\n", ceiling="C 225,30,0\n"):
    return GameConfig(
        no=str(_png(tmp_path, "north.png", (10, 0, 0))),
        so=str(_png(tmp_path, "south.png", (0, 20, 0))),
        we=str(_png(tmp_path, "west.png", (0, 0, 30))),
        ea=str(_png(tmp_path, "east.png", (40, 40, 40))),
        floor_color=floor,
        ceiling_color=ceiling,
    )


def test_load_png_returns_rgba_image(tmp_path):
    image = load_png(_png(tmp_path, "wall.png", (1, 2, 3), (4, 2)))
    assert image.mode == "RGBA"
    assert image.size == (4, 2)
    assert image.getpixel((0, 0)) == (1, 2, 3, 255)


def test_load_png_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_png(tmp_path / "absent.png")


def test_load_png_rejects_other_formats(tmp_path):
    path = tmp_path / "wall.png"
    Image.new("RGB", (2, 2)).save(path, format="BMP")
    with pytest.raises(ConfigError, match="not a PNG"):
        load_png(path)


def test_load_png_rejects_text(tmp_path):
    path = tmp_path / "wall.png"
    path.write_text("not an image")
    with pytest.raises(ConfigError):
        load_png(path)


def test_parse_texture_and_color_loads_everything(tmp_path):
    config = _config(tmp_path)
    textures = parse_texture_and_color(config)
    assert config.textures is textures
    assert textures.no.getpixel((0, 0)) == (10, 0, 0, 255)
    assert textures.so.getpixel((0, 0)) == (0, 20, 0, 255)
    assert textures.we.getpixel((0, 0)) == (0, 0, 30, 255)
    assert textures.ea.getpixel((0, 0)) == (40, 40, 40, 255)
    assert textures.floor == pack_rgba(220, 100, 0, 255)
    assert textures.ceiling == pack_rgba(225, 30, 0, 255)


def test_parse_texture_and_color_floor_value(tmp_path):
    textures = parse_texture_and_color(_config(tmp_path))
    assert textures.floor == 0xDC6400FF


@pytest.mark.parametrize("missing", ["no", "so", "we", "ea"])
def test_parse_texture_and_color_missing_path(tmp_path, missing):
    config = _config(tmp_path)
    setattr(config, missing, None)
    with pytest.raises(ConfigError, match="invalid texture"):
        parse_texture_and_color(config)
    assert config.textures is None


@pytest.mark.parametrize(
    "attr, name", [("no", "north"), ("so", "south"), ("we", "west"), ("ea", "east")]
)
def test_parse_texture_and_color_unloadable(tmp_path, attr, name):
    config = _config(tmp_path)
    setattr(config, attr, str(tmp_path / "absent.png"))
    with pytest.raises(ConfigError, match=f"texture loading failed: {name}"):
        parse_texture_and_color(config)


def test_parse_texture_and_color_missing_color(tmp_path):
    config = _config(tmp_path, floor=None)
    with pytest.raises(ConfigError, match="missing color string"):
        parse_texture_and_color(config)


def test_parse_texture_and_color_out_of_range(tmp_path):
    config = _config(tmp_path, ceiling="C 256,0,0\n")
    with pytest.raises(ConfigError, match="RGB values must be 0-255"):
        parse_texture_and_color(config)


def test_parse_texture_and_color_bad_format(tmp_path):
    config = _config(tmp_path, floor="F 1,2\n")
    with pytest.raises(ConfigError, match="Invalid color numbers"):
        parse_texture_and_color(config)