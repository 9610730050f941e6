"""The Flag of Recursia: a decagon of recursively subdivided triangles."""

from __future__ import annotations

import math

from recursia.color import Color
from recursia.geometry import Point

CARDINAL = Color(196, 30, 58)
SANDSTONE = Color(245, 242, 225)

# The golden ratio, used to subdivide the triangles.
PHI = (1 + math.sqrt(5.0)) / 2

_U32 = 0xFFFFFFFF


def draw_acute_triangle(apex, base1, base2, order, draw):
    """Draws an acute triangle of the given order and returns how many
    literal triangles were drawn.

    ``draw`` is called as ``draw(p0, p1, p2, color)`` for each one.
    """
    if order == 0:
        draw(apex, base1, base2, CARDINAL)
        return 1

    side_mid = apex + (base1 - apex) / PHI
    return draw_acute_triangle(base2, side_mid, base1, order - 1, draw) + draw_obtuse_triangle(
        side_mid, base2, apex, order - 1, draw
    )


def draw_obtuse_triangle(apex, base1, base2, order, draw):
    """Draws an obtuse triangle of the given order and returns how many
    literal triangles were drawn.
    """
    if order == 0:
        draw(apex, base1, base2, SANDSTONE)
        return 1

    base_mid = base1 + (base2 - base1) / PHI
    side_mid = base1 + (apex - base1) / PHI
    return (
        draw_obtuse_triangle(side_mid, base_mid, base1, order - 1, draw)
        + draw_obtuse_triangle(base_mid, base2, apex, order - 1, draw)
        + draw_acute_triangle(base_mid, side_mid, apex, order - 1, draw)
    )


def _half(value):
    """Integer halving that truncates toward zero."""
    return int(value / 2)


def place_decagon_in(bounds):
    """The ten corners of a regular decagon centred in ``bounds``."""
    if bounds.width >= bounds.height:
        side = bounds.height
        square_x = bounds.x + _half(bounds.width - bounds.height)
        square_y = bounds.y
    else:
        side = bounds.width
        square_x = bounds.x
        square_y = bounds.y + _half(bounds.height - bounds.width)

    center_x = square_x + _half(side)
    center_y = square_y + _half(side)
    radius = int(side * 0.4)

    return [
        Point(
            int(center_x - radius * math.cos(i * math.pi / 5 + math.pi / 10)),
            int(center_y + radius * math.sin(i * math.pi / 5 + math.pi / 10)),
        )
        for i in range(10)
    ]


def draw_flag_of_recursia(bounds, draw):
    """Draws the flag within ``bounds`` and returns the number of triangles drawn."""
    corners = place_decagon_in(bounds)
    center = Point(bounds.x + _half(bounds.width), bounds.y + _half(bounds.height))

    return sum(
        draw_acute_triangle(center, p0, p1, order, draw)
        for order, (p0, p1) in enumerate(zip(corners, corners[1:] + corners[:1]))
    )


def scramble(value):
    """Scrambles an integer with one xorshift step, yielding a non-negative 31-bit value."""
    u = value & _U32
    u ^= (u << 13) & _U32
    u ^= u >> 17
    u ^= (u << 5) & _U32
    return u & 0x7FFFFFFF