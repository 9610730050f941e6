"""RGB colors with named presets and HSV construction."""

from __future__ import annotations

import math
import random as _random
from functools import total_ordering


@total_ordering
class Color:
    """An immutable 24-bit RGB color. Defaults to black."""

    __slots__ = ("_color",)

    def __init__(self, red=0, green=0, blue=0):
        if not all(0 <= c < 256 for c in (red, green, blue)):
            raise ValueError("Color values out of range.")
        self._color = (red << 16) + (green << 8) + blue

    def red(self):
        return (self._color >> 16) & 0xFF

    def green(self):
        return (self._color >> 8) & 0xFF

    def blue(self):
        return self._color & 0xFF

    def to_rgb(self):
        """The color packed as 0xRRGGBB."""
        return self._color

    def to_html(self):
        """The color as an HTML string such as '#1e3a5f'."""
        return f"#{self.red():02x}{self.green():02x}{self.blue():02x}"

    @classmethod
    def from_hex(cls, hex_value):
        if hex_value < 0 or hex_value > 0xFFFFFF:
            raise ValueError("Color.from_hex(): Value out of range.")
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF)

    @classmethod
    def from_hsv(cls, h, s, v):
        """Builds a color from hue, saturation and value, each in [0, 1]."""
        if not (0 <= h <= 1 and 0 <= s <= 1 and 0 <= v <= 1):
            raise ValueError("Color.from_hsv(): Values out of range.")

        def channel(n):
            k = math.fmod(n + h * 6, 6)
            return v - v * s * max(0.0, min(k, 4 - k, 1.0))

        return cls(int(255 * channel(5)), int(255 * channel(3)), int(255 * channel(1)))

    @classmethod
    def random(cls):
        return cls(_random.randint(0, 255), _random.randint(0, 255), _random.randint(0, 255))

    @classmethod
    def white(cls):
        return cls.from_hex(0xFFFFFF)

    @classmethod
    def black(cls):
        return cls.from_hex(0x000000)

    @classmethod
    def red_color(cls):
        return cls.from_hex(0xFF0000)

    @classmethod
    def green_color(cls):
        return cls.from_hex(0x00FF00)

    @classmethod
    def blue_color(cls):
        return cls.from_hex(0x0000FF)

    @classmethod
    def yellow(cls):
        return cls.from_hex(0xFFFF00)

    @classmethod
    def cyan(cls):
        return cls.from_hex(0x00FFFF)

    @classmethod
    def magenta(cls):
        return cls.from_hex(0xFF00FF)

    @classmethod
    def gray(cls):
        return cls.from_hex(0x808080)

    def __str__(self):
        for name in (
            "black",
            "blue_color",
            "cyan",
            "gray",
            "green_color",
            "magenta",
            "red_color",
            "white",
            "yellow",
        ):
            if self == getattr(Color, name)():
                return f"Color.{name}()"
        return self.to_html()

    def __repr__(self):
        return f"Color({self.red()}, {self.green()}, {self.blue()})"

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_rgb() == other.to_rgb()

    def __lt__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_rgb() < other.to_rgb()

    def __hash__(self):
        return hash(self._color)