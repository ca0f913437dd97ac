"""Viewer settings and their validation."""

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidConfiguration
from .mapping import EXECUTORS, MAPPINGS

# Zoom constants
ZOOM_FACTOR = 0.9
MIN_SCALE = 0.1
MAX_SCALE = 10.0

# Display constants
WINDOW_SIZE = 800
GRID_LENGTH = 101
FPS = 60
TITLE = "Conformal Mappings"


@dataclass
class ViewerConfig:
    """Settings for one viewer session."""
    grid_length: int = GRID_LENGTH
    window_size: int = WINDOW_SIZE
    scale: float = 1.0
    mapping: str = "inversion"
    workers: Optional[int] = None
    executor: str = "process"
    remap_on_zoom: bool = True
    title: str = TITLE
    fps: int = FPS

    @property
    def frame_period(self) -> float:
        """Seconds to sleep at the end of each frame."""
        return 1.0 / self.fps

    def validate(self) -> "ViewerConfig":
        """Raise InvalidConfiguration for unusable settings, else return self."""
        if self.grid_length < 1:
            raise InvalidConfiguration(
                f"grid length must be at least 1, got {self.grid_length}"
            )
        if self.window_size < 1:
            raise InvalidConfiguration(
                f"window size must be positive, got {self.window_size}"
            )
        if not MIN_SCALE <= self.scale <= MAX_SCALE:
            raise InvalidConfiguration(
                f"scale must be within [{MIN_SCALE}, {MAX_SCALE}], got {self.scale}"
            )
        if self.fps < 1:
            raise InvalidConfiguration(f"fps must be positive, got {self.fps}")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfiguration(
                f"workers must be positive, got {self.workers}"
            )
        if self.mapping not in MAPPINGS:
            raise InvalidConfiguration(f"Unknown mapping: {self.mapping!r}")
        if self.executor not in EXECUTORS:
            raise InvalidConfiguration(f"Unknown executor: {self.executor!r}")
        return self
