"""Draw the mapped grid, the mapped polylines and the reference rectangle."""

from typing import Optional, Sequence

from .connectivity import Connection
from .mapping import MappingFn, inversion, map_point
from .projection import Point, complex_to_point
from .surface import GREEN, RED, WHITE

GRID_COLOR = RED
LINE_COLOR = GREEN
RECT_COLOR = WHITE

# domain corners spanning the reference rectangle
CORNER_A = complex(-1.0, -1.0)
CORNER_B = complex(1.0, 1.0)


def draw_if_both(a: Optional[Point], b: Optional[Point], surface) -> bool:
    """Draw the line if both points were computed successfully."""
    if a is None or b is None:
        return False
    surface.draw_line(a, b)
    return True


def draw_grid(connections: Sequence[Connection], mapped_grid, scale: float,
              window_size: int, surface):
    points = [complex_to_point(c, scale, window_size) for c in mapped_grid]
    for conn in connections:
        point = points[conn.pos]
        if point is None:
            continue
        for other in conn.neighbours:
            if other is not None:
                draw_if_both(point, points[other], surface)


def draw_polyline(line, scale: float, window_size: int, surface):
    """Draw consecutive sample pairs; undefined samples break the path."""
    points = [complex_to_point(c, scale, window_size) for c in line]
    for a, b in zip(points, points[1:]):
        draw_if_both(a, b, surface)


def reference_rect(scale: float, window_size: int,
                   mapping: MappingFn = inversion):
    """Return ``(origin, width, height)`` of the reference rectangle or None.

    The rectangle spans the projected images of the domain corners (-1, -1)
    and (1, 1), normalised so width and height are never negative.
    """
    a = complex_to_point(map_point(mapping, CORNER_A), scale, window_size)
    b = complex_to_point(map_point(mapping, CORNER_B), scale, window_size)
    if a is None or b is None:
        return None
    origin = (min(a[0], b[0]), min(a[1], b[1]))
    return origin, abs(b[0] - a[0]), abs(b[1] - a[1])


def draw_mapped_grid(connections: Sequence[Connection], mapped_grid,
                     mapped_lines, scale: float, window_size: int, surface,
                     mapping: MappingFn = inversion):
    """Draw the whole mapped grid, and lines.

    Grid edges are drawn in ``GRID_COLOR``, the polylines in ``LINE_COLOR``
    and the reference rectangle in ``RECT_COLOR``. Any edge with an undefined
    endpoint is skipped. Errors from the surface propagate unchanged.
    """
    surface.set_color(GRID_COLOR)
    draw_grid(connections, mapped_grid, scale, window_size, surface)

    surface.set_color(LINE_COLOR)
    for line in mapped_lines:
        draw_polyline(line, scale, window_size, surface)

    surface.set_color(RECT_COLOR)
    rect = reference_rect(scale, window_size, mapping)
    if rect is not None:
        origin, width, height = rect
        surface.draw_rect(origin, width, height)
