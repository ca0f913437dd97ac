"""Conversion from mapped complex values to pixel coordinates."""

from typing import Optional, Tuple

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

Point = Tuple[int, int]


def _to_pixel(value: float) -> int:
    # truncate toward zero, saturating like a C cast to a 32-bit int
    if value >= INT32_MAX:
        return INT32_MAX
    if value <= INT32_MIN:
        return INT32_MIN
    return int(value)


def complex_to_point(c: Optional[complex], scale: float,
                     pixel_side: int) -> Optional[Point]:
    """Convert a complex value to a pixel coordinate on the screen.

    The square ``[-scale, scale]`` in both axes fills ``pixel_side`` pixels.
    Returns ``None`` when ``c`` is undefined.
    """
    if c is None:
        return None
    pixel_scale = pixel_side / (2.0 * scale)
    x = _to_pixel((c.real + scale) * pixel_scale)
    y = _to_pixel((c.imag + scale) * pixel_scale)
    return (x, y)
