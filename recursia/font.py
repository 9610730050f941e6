"""Styled fonts: family, style, size and color."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from enum import Enum

from recursia.color import Color


class FontFamily(Enum):
    SERIF = "serif"
    SANS_SERIF = "sans_serif"
    MONOSPACE = "monospace"
    UNICODE_SERIF = "unicode_serif"
    UNICODE_SANS_SERIF = "unicode_sans_serif"
    UNICODE_MONOSPACE = "unicode_monospace"


class FontStyle(Enum):
    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


_FAMILY_NAMES = {
    # family: (macOS, Windows, other)
    FontFamily.SERIF: ("Didot", "Serif", "Serif"),
    FontFamily.SANS_SERIF: ("Helvetica", "Sans Serif", "Sans Serif"),
    FontFamily.MONOSPACE: ("Monaco", "Monospace", "Monospace"),
    FontFamily.UNICODE_SERIF: ("Times", "Times New Roman", "Serif"),
    FontFamily.UNICODE_SANS_SERIF: ("Lucida Grande", "Lucida Sans Unicode", "Sans Serif"),
    FontFamily.UNICODE_MONOSPACE: ("Lucida Grande", "Lucida Sans Unicode", "Monospace"),
}

_STYLE_NAMES = {
    FontStyle.BOLD: "BOLD",
    FontStyle.BOLD_ITALIC: "BOLDITALIC",
    FontStyle.ITALIC: "ITALIC",
    FontStyle.NORMAL: "<normal>",
}


def family_name(family):
    """The platform font name used for a font family."""
    try:
        mac, windows, other = _FAMILY_NAMES[family]
    except KeyError:
        raise ValueError("Unknown font family.") from None
    if sys.platform == "darwin":
        return mac
    if sys.platform == "win32":
        return windows
    return other


def style_name(style):
    """The graphics-library name of a font style."""
    try:
        return _STYLE_NAMES[style]
    except KeyError:
        raise ValueError("Unknown font style.") from None


@dataclass(frozen=True)
class Font:
    """An immutable styled font."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = field(default_factory=Color.black)

    def with_family(self, family):
        return replace(self, family=family)

    def with_style(self, style):
        return replace(self, style=style)

    def with_size(self, size):
        return replace(self, size=size)

    def with_color(self, color):
        return replace(self, color=color)

    def library_font_string(self):
        """The font description string, e.g. 'Serif-ITALIC-24'."""
        result = family_name(self.family)
        if self.style is not FontStyle.NORMAL:
            result += "-" + style_name(self.style)
        return f"{result}-{self.size}"