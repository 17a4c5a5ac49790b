"""Small text helpers used by the scene-file parser."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce *value* to a two's-complement integer of *bits* width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_leading_int(text: str) -> int:
    """Parse optional whitespace, an optional sign and leading decimal digits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    magnitude = int("".join(digits)) if digits else 0
    return sign * magnitude


def atoi(text: str) -> int:
    """Read a leading integer from *text* as a 32-bit signed value.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0.
    """
    return _wrap_signed(_parse_leading_int(text), 32)


def atol(text: str) -> int:
    """Read a leading integer from *text* as a 64-bit signed value."""
    return _wrap_signed(_parse_leading_int(text), 64)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, charset: str) -> str:
    """Remove any characters of *charset* from both ends of *text*."""
    return text.strip(charset)


def read_lines(path: str | PathLike[str]) -> Iterator[str]:
    """Yield the lines of the file at *path*, each keeping its trailing newline.

    Lines are split on ``\\n`` only; the last line may lack a newline.
    """
    with open(path, "rb") as handle:
        for raw in handle:
            yield raw.decode("utf-8", errors="replace")