import pytest
import pygame
from PIL import Image

from pyconformal import DrawFailure, InvalidConfiguration
from pyconformal.surface import BLACK, GREEN, RED, WHITE, ImageSurface, PygameSurface, Surface


def test_image_surface_draws_lines_and_rects():
    surface = ImageSurface(10, 10)
    surface.clear(BLACK)
    surface.set_color(RED)
    surface.draw_line((0, 0), (9, 0))
    assert surface.image.getpixel((5, 0)) == RED
    surface.set_color(GREEN)
    surface.draw_rect((2, 2), 4, 4)
    assert surface.image.getpixel((2, 5)) == GREEN
    assert surface.image.getpixel((5, 5)) == GREEN
    assert surface.image.getpixel((3, 3)) == BLACK


def test_image_surface_clear_fills_canvas():
    surface = ImageSurface(4, 3)
    surface.clear(WHITE)
    assert surface.image.getcolors() == [(12, WHITE)]


def test_undefined_point_rejected():
    surface = ImageSurface(10, 10)
    with pytest.raises(DrawFailure):
        surface.draw_line(None, (1, 1))
    with pytest.raises(DrawFailure):
        surface.draw_rect(None, 2, 2)


def test_invalid_size_rejected():
    with pytest.raises(InvalidConfiguration):
        ImageSurface(0, 10)


def test_save(tmp_path):
    path = tmp_path / "frame.png"
    surface = ImageSurface(8, 8)
    surface.clear(BLACK)
    surface.save(str(path))
    with Image.open(path) as image:
        assert image.size == (8, 8)


def test_save_failure_is_draw_failure(tmp_path):
    surface = ImageSurface(8, 8)
    with pytest.raises(DrawFailure):
        surface.save(str(tmp_path / "missing" / "frame.png"))


def test_image_surface_wraps_pillow_errors():
    surface = ImageSurface(10, 10)
    with pytest.raises(DrawFailure):
        surface.draw_line(("a", "b"), (1, 1))
    with pytest.raises(DrawFailure):
        surface.draw_rect(("a", "b"), 2, 2)


@pytest.fixture
def window():
    pygame.init()
    yield PygameSurface("test", 20, 10)
    pygame.quit()


def test_pygame_surface_draws(window):
    assert window.screen.get_size() == (20, 10)
    window.clear(BLACK)
    assert tuple(window.screen.get_at((5, 5)))[:3] == BLACK
    window.set_color(RED)
    window.draw_line((0, 0), (19, 0))
    assert tuple(window.screen.get_at((10, 0)))[:3] == RED
    window.set_color(GREEN)
    window.draw_rect((2, 2), 5, 5)
    assert tuple(window.screen.get_at((2, 4)))[:3] == GREEN
    assert tuple(window.screen.get_at((4, 4)))[:3] == BLACK
    window.present()


def test_pygame_surface_rejects_undefined_points(window):
    with pytest.raises(DrawFailure):
        window.draw_line((0, 0), None)
    with pytest.raises(DrawFailure):
        window.draw_rect(None, 2, 2)


def test_pygame_errors_become_draw_failures(window):
    pygame.display.quit()
    with pytest.raises(DrawFailure):
        window.present()


def test_pygame_surface_invalid_size():
    with pytest.raises(InvalidConfiguration):
        PygameSurface("test", 0, 10)


def test_base_surface_leaves_primitives_to_subclasses():
    surface = Surface(4, 4)
    assert surface.size == (4, 4)
    with pytest.raises(NotImplementedError):
        surface.draw_line((0, 0), (1, 1))
    with pytest.raises(NotImplementedError):
        surface.clear(BLACK)
