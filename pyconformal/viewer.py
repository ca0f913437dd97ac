"""Conformal mapping interactive viewer - pygame frontend."""

from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple
import time

import pygame

from .config import MAX_SCALE, MIN_SCALE, ZOOM_FACTOR, ViewerConfig
from .connectivity import grid_connections
from .mapping import MappedSets, PointMapper, get_mapping
from .render import draw_mapped_grid
from .sampler import sample_sets
from .surface import BLACK, CYAN, ImageSurface, PygameSurface


# =============================================================================
# Zoom
# =============================================================================

def zoom_in(scale: float) -> Tuple[float, bool]:
    """Shrink the visible square unless that would cross ``MIN_SCALE``."""
    zoomed = scale * ZOOM_FACTOR
    if zoomed > MIN_SCALE:
        return zoomed, True
    return scale, False


def zoom_out(scale: float) -> Tuple[float, bool]:
    """Grow the visible square unless that would cross ``MAX_SCALE``."""
    zoomed = scale * (1.0 / ZOOM_FACTOR)
    if zoomed < MAX_SCALE:
        return zoomed, True
    return scale, False


# =============================================================================
# State
# =============================================================================

@dataclass(frozen=True)
class ViewState:
    """Current scale and the mapped sets drawn at that scale.

    Replaced as a whole; never mutated in place.
    """
    scale: float
    mapped: MappedSets


# =============================================================================
# Main Viewer Class
# =============================================================================

class ConformalViewer:
    """Interactive viewer showing the image of a grid under a mapping.

    ``surface``, ``poll_events`` and ``sleep`` default to a pygame window,
    ``pygame.event.get`` and ``time.sleep``; tests pass their own.
    """

    def __init__(self, config: Optional[ViewerConfig] = None, surface=None,
                 poll_events: Optional[Callable] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.config = (config or ViewerConfig()).validate()
        self.surface = surface
        self.poll_events = poll_events or pygame.event.get
        self.sleep = sleep

        self.mapping = get_mapping(self.config.mapping)
        self.samples = sample_sets(self.config.grid_length)
        self.connections = grid_connections(self.config.grid_length)
        self.mapper = PointMapper(
            self.mapping, workers=self.config.workers, kind=self.config.executor
        )
        self.state: Optional[ViewState] = None

        self.running = True
        self.frame_times = []

    def run(self):
        """Main entry point - open the window and run the event loop."""
        owns_pygame = self.surface is None
        if owns_pygame:
            pygame.init()
            self.surface = PygameSurface(
                self.config.title, self.config.window_size, self.config.window_size
            )
        try:
            self.state = ViewState(self.config.scale, self.mapper.map_sets(self.samples))
            self.surface.clear(CYAN)
            self.surface.present()

            while self.running:
                self.step()
                if self.running:
                    self.sleep(self.config.frame_period)
        finally:
            self.mapper.close()
            if owns_pygame:
                pygame.quit()

        self._print_stats()

    def step(self):
        """Run a single frame: clear, handle events, draw and present."""
        t0 = time.perf_counter()
        self.surface.clear(BLACK)
        self._handle_events()
        if not self.running:
            return

        draw_mapped_grid(
            self.connections,
            self.state.mapped.grid,
            self.state.mapped.lines,
            self.state.scale,
            self.config.window_size,
            self.surface,
            self.mapping,
        )
        self.surface.present()
        self.frame_times.append((time.perf_counter() - t0) * 1000)

    def _print_stats(self):
        """Print rendering statistics on exit."""
        if self.frame_times:
            avg_ms = sum(self.frame_times) / len(self.frame_times)
            print(f"\nRendered {len(self.frame_times)} frames")
            print(f"Average frame time: {avg_ms:.1f}ms")

    # =========================================================================
    # Event Handling
    # =========================================================================

    def _handle_events(self):
        """Process all pending events."""
        for event in self.poll_events():
            handler = self._event_handlers.get(event.type)
            if handler:
                handler(self, event)
            if not self.running:
                break

    @property
    def _event_handlers(self) -> dict:
        """Map event types to handler methods."""
        return {
            pygame.QUIT: lambda self, e: self.stop(),
            pygame.KEYDOWN: ConformalViewer._on_keydown,
        }

    @property
    def _key_handlers(self) -> dict:
        """Map keys to handler methods."""
        return {
            pygame.K_ESCAPE: lambda s, e: s.stop(),
            pygame.K_UP: lambda s, e: s._zoom(zoom_in),
            pygame.K_DOWN: lambda s, e: s._zoom(zoom_out),
        }

    def _on_keydown(self, event):
        handler = self._key_handlers.get(event.key)
        if handler:
            handler(self, event)

    def stop(self):
        self.running = False

    def _zoom(self, zoom: Callable[[float], Tuple[float, bool]]):
        scale, changed = zoom(self.state.scale)
        if not changed:
            return
        if self.config.remap_on_zoom:
            self.state = ViewState(scale, self.mapper.map_sets(self.samples))
        else:
            self.state = replace(self.state, scale=scale)
        print(f"Scale: {scale:.4f}")


# =============================================================================
# Headless rendering
# =============================================================================

def render_to_image(config: ViewerConfig, out_file: Optional[str] = None) -> ImageSurface:
    """Render one frame at ``config.scale`` with Pillow, saving it if asked."""
    config.validate()
    mapping = get_mapping(config.mapping)
    samples = sample_sets(config.grid_length)
    with PointMapper(mapping, workers=config.workers, kind=config.executor) as mapper:
        mapped = mapper.map_sets(samples)

    surface = ImageSurface(config.window_size, config.window_size)
    surface.clear(BLACK)
    draw_mapped_grid(
        grid_connections(config.grid_length),
        mapped.grid,
        mapped.lines,
        config.scale,
        config.window_size,
        surface,
        mapping,
    )
    if out_file:
        surface.save(out_file)
    return surface
