"""Line-graph layout and assorted geometry helpers for chart displays."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field

from recursia.color import Color
from recursia.text import Box, TextMetrics

AXIS_LINE_WIDTH = 2.0
SMALL_TICK_SIZE = 8.0
LARGE_TICK_SIZE = 16.0
TICK_PADDING = 2.0
PLOTTED_LINE_WIDTH = 5.0

_MOLLWEIDE_ITERATIONS = 100


def label_dimensions_for(labels, font, metrics=None):
    """The (width, height) of a box big enough to hold any of ``labels``."""
    metrics = metrics if metrics is not None else TextMetrics()
    max_width = 0.0
    max_height = 0.0
    for label in labels:
        max_height = max(max_height, metrics.ascent(font) + metrics.descent(font))
        max_width = max(max_width, metrics.width(label, font))
    return max_width, max_height


def axes_for(bounds, x_labels, y_labels, x_label_font, y_label_font, metrics=None):
    """The origin, x-axis end and y-axis end points of a graph inside ``bounds``.

    Each point is an ``(x, y)`` tuple.
    """
    origin_x = bounds.x
    origin_y = bounds.y + bounds.height
    x_end = bounds.x + bounds.width
    y_end = bounds.y

    # Labels are centred on the ticks, so half of one hangs past each axis end.
    x_width, x_height = label_dimensions_for(x_labels, x_label_font, metrics)
    y_width, y_height = label_dimensions_for(y_labels, y_label_font, metrics)
    x_end -= x_width / 2
    y_end += y_height / 2

    # Room for the y labels to the left and the x labels underneath.
    origin_x += max(y_width, x_width / 2.0)
    origin_y -= max(x_height, y_height / 2.0)

    origin_x += TICK_PADDING
    origin_y -= TICK_PADDING

    # Ticks overdraw the axis lines by half their size.
    origin_x += LARGE_TICK_SIZE / 2.0
    origin_y -= LARGE_TICK_SIZE / 2.0

    return (origin_x, origin_y), (x_end, origin_y), (origin_x, y_end)


@dataclass
class LineGraphRender:
    """A laid-out line graph: axes, labels and lines in screen coordinates."""

    bounds: Box
    origin: tuple
    x_end: tuple
    y_end: tuple
    x_labels: list
    y_labels: list
    x_label_font: object
    y_label_font: object
    line_colors: list
    axis_color: Color
    x_minor_ticks: int = 0
    y_minor_ticks: int = 0
    lines: list = field(default_factory=list)

    @classmethod
    def construct(
        cls,
        lines,
        x_labels,
        y_labels,
        x_minor_ticks,
        y_minor_ticks,
        bounds,
        x_label_font,
        y_label_font,
        line_colors,
        axis_color,
        metrics=None,
    ):
        """Lays out a graph whose ``lines`` are given in the unit square [0, 1] x [0, 1]."""
        x_labels = list(x_labels)
        y_labels = list(y_labels)
        line_colors = list(line_colors)
        lines = [list(line) for line in lines]

        if len(x_labels) < 2 or len(y_labels) < 2:
            raise ValueError("Insufficiently many ticks.")
        if len(line_colors) < len(lines):
            raise ValueError(
                f"Too few line colors (have {len(line_colors)}, need {len(lines)})."
            )

        origin, x_end, y_end = axes_for(
            bounds, x_labels, y_labels, x_label_font, y_label_font, metrics
        )

        base_x, base_y = origin
        width = x_end[0] - origin[0]
        height = origin[1] - y_end[1]
        physical = [
            [(base_x + width * px, base_y - height * py) for px, py in line] for line in lines
        ]

        return cls(
            bounds=bounds,
            origin=origin,
            x_end=x_end,
            y_end=y_end,
            x_labels=x_labels,
            y_labels=y_labels,
            x_label_font=x_label_font,
            y_label_font=y_label_font,
            line_colors=line_colors,
            axis_color=axis_color,
            x_minor_ticks=x_minor_ticks,
            y_minor_ticks=y_minor_ticks,
            lines=physical,
        )


def fit_to_bounds(bounds, aspect_ratio):
    """The largest box with ``aspect_ratio`` that fits centred inside ``bounds``."""
    if bounds.width <= 0 or bounds.height <= 0:
        return Box(bounds.x, bounds.y, 0.0, 0.0)

    if bounds.width / bounds.height <= aspect_ratio:
        width = bounds.width
        height = width / aspect_ratio
    else:
        height = bounds.height
        width = height * aspect_ratio

    return Box(
        bounds.x + (bounds.width - width) / 2.0,
        bounds.y + (bounds.height - height) / 2.0,
        width,
        height,
    )


def mollweide_projection_of(latitude, longitude, longitude_offset=0.0, latitude_offset=0.0):
    """Projects a coordinate in degrees to Mollweide space [-2, 2] x [-1, 1]."""
    longitude -= longitude_offset
    if longitude < -180:
        longitude += 360
    if longitude > 180:
        longitude -= 360

    latitude -= latitude_offset
    if latitude < -90:
        latitude += 180
    if latitude > 90:
        latitude -= 180

    longitude *= math.pi / 180
    latitude *= math.pi / 180

    # No closed form exists; use Newton's method.
    theta = latitude
    for _ in range(_MOLLWEIDE_ITERATIONS):
        denominator = 2 + 2 * math.cos(2 * theta)
        if denominator == 0:
            break
        theta -= (2 * theta + math.sin(2 * theta) - math.pi * math.sin(latitude)) / denominator

    return 2 * math.cos(theta) * longitude / math.pi, math.sin(theta)


def trim_extension_from(filename):
    """The filename without its final suffix."""
    index = filename.rfind(".")
    return filename if index == -1 else filename[:index]


def list_matching_files(base_dir, predicate):
    """Names of files in ``base_dir`` accepted by ``predicate``, ordered by name
    without extension, ties kept in name order."""
    files = [name for name in sorted(os.listdir(base_dir)) if predicate(name)]
    return sorted(files, key=trim_extension_from)