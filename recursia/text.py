"""Laying out wrapped text and chart legends inside rectangular bounds."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from enum import Enum

from recursia.color import Color
from recursia.font import Font

# Multiplier of the line height used between natural line breaks.
LINE_SPACING = 1.1

# Multiplier of the line height used between paragraph breaks.
PARAGRAPH_SPACING = LINE_SPACING + 0.35

BULLET_SIZE = 10.0
BULLET_PADDING = 10.0
ITEM_PADDING = 5.0

_WHITESPACE = frozenset(" \t\n\v\f\r")


@dataclass(frozen=True)
class Box:
    """A rectangle with real-valued position and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class LineBreak(Enum):
    """Whether text wraps at spaces or keeps every token on one line."""

    BREAK_SPACES = "break_spaces"
    NO_BREAK_SPACES = "no_break_spaces"


@dataclass(frozen=True)
class TextMetrics:
    """Measures text proportionally to the font size."""

    ascent_ratio: float = 0.8
    descent_ratio: float = 0.2
    advance_ratio: float = 0.6

    def ascent(self, font):
        return font.size * self.ascent_ratio

    def descent(self, font):
        return font.size * self.descent_ratio

    def width(self, text, font):
        return len(text) * font.size * self.advance_ratio


@dataclass
class TextLine:
    """A single laid-out line: its text, baseline start and rendered width."""

    text: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0


def _is_space(char):
    return char in _WHITESPACE


def tokenize(text):
    """Splits text into words and single whitespace characters."""
    tokens = []
    current = ""
    for char in text:
        if _is_space(char):
            if current:
                tokens.append(current)
            current = char
        else:
            if current and _is_space(current[0]):
                tokens.append(current)
                current = ""
            current += char
    if current:
        tokens.append(current)
    return tokens


def reduce_font(font):
    """The font one size smaller, or None if it cannot shrink below size one."""
    if font.size <= 1:
        return None
    return font.with_size(font.size - 1)


class TextRender:
    """Text laid out to fit within a bounding box, shrinking the font if needed."""

    def __init__(self, bounds, font, metrics):
        self.bounds = bounds
        self.font = font
        self.computed_font = font
        self.computed_bounds = Box(bounds.x, bounds.y, 0.0, 0.0)
        self.lines = []
        self._metrics = metrics

    @classmethod
    def construct(cls, text, bounds, font, metrics=None, break_mode=LineBreak.BREAK_SPACES):
        """Lays out ``text`` inside ``bounds``, reducing the font size until it fits."""
        metrics = metrics if metrics is not None else TextMetrics()
        tokens = tokenize(text)
        result = cls(bounds, font, metrics)
        while not result._fit_text(tokens, break_mode):
            smaller = reduce_font(result.computed_font)
            if smaller is None:
                result.computed_bounds = Box(bounds.x, bounds.y, 0.0, 0.0)
                break
            result.computed_font = smaller
        return result

    def _fit_text(self, tokens, break_mode):
        metrics = self._metrics
        font = self.computed_font
        bounds = self.bounds
        breaking = break_mode is LineBreak.BREAK_SPACES

        ascent = metrics.ascent(font)
        descent = metrics.descent(font)
        line_height = ascent + descent

        rendered_width = 0.0
        rendered_height = 0.0
        x = bounds.x
        y = bounds.y + ascent

        lines = []
        current = TextLine("", x, y, 0.0)

        for token in tokens:
            if breaking and token == "\n":
                lines.append(current)
                x = bounds.x
                y += line_height * PARAGRAPH_SPACING
                current = TextLine("", x, y, 0.0)
            elif breaking and _is_space(token[0]):
                if int(x - bounds.x) != 0:
                    width = metrics.width(token, font)
                    current.text += token
                    current.width += width
                    x += width
            else:
                width = metrics.width(token, font)
                if breaking and x + width > bounds.x + bounds.width:
                    lines.append(current)
                    x = bounds.x
                    y += line_height * LINE_SPACING
                    current = TextLine("", x, y, 0.0)

                current.text += token
                x += width
                current.width += width

                rendered_width = max(rendered_width, x - bounds.x)
                rendered_height = max(y + descent - bounds.y, rendered_height)
                if rendered_width > bounds.width or rendered_height > bounds.height:
                    return False

        if current.text:
            lines.append(current)

        self.lines = lines
        self.computed_bounds = Box(bounds.x, bounds.y, rendered_width, rendered_height)
        return True

    def align_left(self):
        for line in self.lines:
            line.x = self.bounds.x

    def align_center_horizontally(self):
        for line in self.lines:
            line.x = self.bounds.x + (self.bounds.width - line.width) / 2.0

    def align_top(self):
        for line in self.lines:
            line.y = self.bounds.y + (line.y - self.computed_bounds.y)
        self.computed_bounds = replace(self.computed_bounds, y=self.bounds.y)

    def align_bottom(self):
        delta = (self.bounds.y + self.bounds.height) - (
            self.computed_bounds.y + self.computed_bounds.height
        )
        for line in self.lines:
            line.y += delta
        self.computed_bounds = replace(self.computed_bounds, y=self.computed_bounds.y + delta)

    def align_center_vertically(self):
        new_y = self.bounds.y + (self.bounds.height - self.computed_bounds.height) / 2.0
        for line in self.lines:
            line.y = new_y + (line.y - self.computed_bounds.y)
        self.computed_bounds = replace(self.computed_bounds, y=new_y)


@dataclass
class LegendRender:
    """A chart legend: one bulleted text entry per item, within given bounds."""

    bounds: Box
    border_color: Color
    bullet_colors: list
    computed_bounds: Box = field(default_factory=Box)
    lines: list = field(default_factory=list)

    @classmethod
    def construct(
        cls,
        strings,
        colors,
        bounds,
        font,
        border_color,
        metrics=None,
        text_colors=None,
        break_mode=LineBreak.BREAK_SPACES,
    ):
        """Lays out a legend, shrinking the font until all entries fit.

        ``text_colors`` defaults to the font's color for every entry.
        """
        strings = list(strings)
        colors = list(colors)
        if len(strings) > len(colors):
            raise ValueError("Not enough colors to draw legend.")
        if text_colors is None:
            text_colors = [font.color] * len(strings)
        text_colors = list(text_colors)
        metrics = metrics if metrics is not None else TextMetrics()

        result = cls(bounds=bounds, border_color=border_color, bullet_colors=colors)
        bullet_spacing = BULLET_SIZE + 2 * BULLET_PADDING
        current_font = font

        while True:
            y = bounds.y + ITEM_PADDING
            entries = []
            for text, text_color in zip(strings, text_colors):
                render = TextRender.construct(
                    text,
                    Box(
                        bounds.x + bullet_spacing,
                        y,
                        bounds.width - bullet_spacing - ITEM_PADDING,
                        sys.float_info.max,
                    ),
                    current_font.with_color(text_color),
                    metrics,
                    break_mode,
                )
                y = render.computed_bounds.y + render.computed_bounds.height + ITEM_PADDING
                entries.append(render)

            computed = Box(bounds.x, bounds.y, bounds.width, y - bounds.y)
            if computed.height <= bounds.height and computed.width <= bounds.width:
                result.computed_bounds = computed
                result.lines = entries
                return result

            smaller = reduce_font(current_font)
            if smaller is None:
                result.computed_bounds = Box(bounds.x, bounds.y, 0.0, 0.0)
                return result
            current_font = smaller