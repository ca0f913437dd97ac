"""Drawing surfaces: a pygame window and a headless Pillow image.

Both expose the same small set of primitives used by ``render``:
``set_color``, ``clear``, ``draw_line``, ``draw_rect`` and ``present``.
"""

from typing import Optional, Tuple

import pygame
from PIL import Image, ImageDraw

from .errors import DrawFailure, InvalidConfiguration

Color = Tuple[int, int, int]

BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
WHITE = (255, 255, 255)
CYAN = (0, 255, 255)


def _check_size(width: int, height: int):
    if width <= 0 or height <= 0:
        raise InvalidConfiguration(
            f"surface size must be positive, got {width}x{height}"
        )


def _check_point(point, what: str):
    if point is None:
        raise DrawFailure(f"{what} called with an undefined point")


class Surface:
    """Interface shared by drawing surfaces.

    Holds the current colour and size; subclasses implement the primitives.
    """

    def __init__(self, width: int, height: int):
        _check_size(width, height)
        self.width = width
        self.height = height
        self.color: Color = WHITE

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def set_color(self, color: Color):
        self.color = color

    def clear(self, color: Optional[Color] = None):
        raise NotImplementedError

    def draw_line(self, a, b):
        raise NotImplementedError

    def draw_rect(self, origin, width: int, height: int):
        raise NotImplementedError

    def present(self):
        pass


class PygameSurface(Surface):
    """A window opened with ``pygame.display``.

    pygame must already be initialised by the caller.
    """

    def __init__(self, title: str, width: int, height: int):
        super().__init__(width, height)
        try:
            self.screen = pygame.display.set_mode((width, height))
        except pygame.error as e:
            raise DrawFailure(f"Could not open window: {e}") from e
        pygame.display.set_caption(title)

    def clear(self, color: Optional[Color] = None):
        if color is not None:
            self.color = color
        self.screen.fill(self.color)

    def draw_line(self, a, b):
        _check_point(a, "draw_line")
        _check_point(b, "draw_line")
        try:
            pygame.draw.line(self.screen, self.color, a, b)
        except (pygame.error, OverflowError) as e:
            raise DrawFailure(f"draw_line {a} -> {b} failed: {e}") from e

    def draw_rect(self, origin, width: int, height: int):
        _check_point(origin, "draw_rect")
        try:
            rect = pygame.Rect(origin[0], origin[1], width, height)
            pygame.draw.rect(self.screen, self.color, rect, 1)
        except (pygame.error, OverflowError) as e:
            raise DrawFailure(f"draw_rect at {origin} failed: {e}") from e

    def present(self):
        try:
            pygame.display.flip()
        except pygame.error as e:
            raise DrawFailure(f"present failed: {e}") from e


class ImageSurface(Surface):
    """An off-screen RGB canvas backed by a Pillow image."""

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.image = Image.new("RGB", (width, height), BLACK)
        self._draw = ImageDraw.Draw(self.image)

    def clear(self, color: Optional[Color] = None):
        if color is not None:
            self.color = color
        self._draw.rectangle([0, 0, self.width - 1, self.height - 1], fill=self.color)

    def draw_line(self, a, b):
        _check_point(a, "draw_line")
        _check_point(b, "draw_line")
        try:
            self._draw.line([tuple(a), tuple(b)], fill=self.color)
        except (ValueError, TypeError, OverflowError) as e:
            raise DrawFailure(f"draw_line {a} -> {b} failed: {e}") from e

    def draw_rect(self, origin, width: int, height: int):
        _check_point(origin, "draw_rect")
        x0, y0 = origin
        x1 = x0 + max(width - 1, 0)
        y1 = y0 + max(height - 1, 0)
        try:
            self._draw.rectangle([x0, y0, x1, y1], outline=self.color)
        except (ValueError, TypeError, OverflowError) as e:
            raise DrawFailure(f"draw_rect at {origin} failed: {e}") from e

    def save(self, path: str):
        try:
            self.image.save(path)
        except (OSError, ValueError) as e:
            raise DrawFailure(f"Could not write {path}: {e}") from e
