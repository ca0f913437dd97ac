import os
from types import SimpleNamespace

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from pyconformal.errors import DrawFailure
from pyconformal.surface import Surface


class RecordingSurface(Surface):
    """Records every drawing call and rejects undefined coordinates."""

    def __init__(self, width=100, height=100, fail_on_line=False):
        super().__init__(width, height)
        self.calls = []
        self.fail_on_line = fail_on_line

    def clear(self, color=None):
        if color is not None:
            self.color = color
        self.calls.append(("clear", self.color))

    def draw_line(self, a, b):
        assert a is not None and b is not None
        assert all(isinstance(v, int) for v in (*a, *b))
        if self.fail_on_line:
            raise DrawFailure("line refused")
        self.calls.append(("line", a, b, self.color))

    def draw_rect(self, origin, width, height):
        assert origin is not None
        self.calls.append(("rect", origin, width, height, self.color))

    def present(self):
        self.calls.append(("present",))

    def lines(self, color=None):
        return [c for c in self.calls
                if c[0] == "line" and (color is None or c[3] == color)]

    def rects(self):
        return [c for c in self.calls if c[0] == "rect"]


def key(k):
    return SimpleNamespace(type=pygame.KEYDOWN, key=k)


def quit_event():
    return SimpleNamespace(type=pygame.QUIT)


@pytest.fixture
def surface():
    return RecordingSurface()
