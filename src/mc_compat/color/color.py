"""Immutable 8-bit RGB color value.

Channels are clamped into ``0..255`` at construction, so every
:class:`Color` packs into 24 bits and reads back unchanged.  Packed ints
are decoded from their low 24 bits only; the sign and high byte of a
32-bit tag value are ignored.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from mc_compat.errors import InvalidColorError


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """An RGB color with 8 bits per channel.

    Attributes:
        red:   0–255.
        green: 0–255.
        blue:  0–255.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", _clamp_channel(self.red))
        object.__setattr__(self, "green", _clamp_channel(self.green))
        object.__setattr__(self, "blue", _clamp_channel(self.blue))

    @classmethod
    def of_rgb(cls, red: int, green: int, blue: int) -> Color:
        return cls(red, green, blue)

    @classmethod
    def of_packed(cls, rgb: int) -> Color:
        """Decode a packed ``0xRRGGBB`` int (only the low 24 bits are read)."""
        return cls((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)

    @classmethod
    def of_hex(cls, text: str) -> Color:
        """Parse ``"#RRGGBB"`` or ``"RRGGBB"``.

        Raises:
            ValueError: If *text* is not six hex digits.
        """
        digits = text.strip().removeprefix("#")
        if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
            raise ValueError(f"expected #RRGGBB, got {text!r}")
        return cls.of_packed(int(digits, 16))

    def to_packed(self) -> int:
        return (((self.red << 8) + self.green) << 8) + self.blue

    def to_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def as_tuple(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue


def pack_color(color: Color) -> int:
    """Pack *color* into the engine's ``(((R << 8) + G) << 8) + B`` int.

    Raises:
        InvalidColorError: If *color* is ``None`` or not a :class:`Color`.
    """
    if not isinstance(color, Color):
        raise InvalidColorError(f"expected Color, got {color!r}")
    return color.to_packed()
