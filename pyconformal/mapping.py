"""Pointwise complex mappings and the parallel engine that applies them.

A mapping is a plain function ``f(z) -> Optional[complex]``. Returning
``None`` marks a point where the mapping has no value (a pole), and that
``None`` is carried through projection and rendering instead of a NaN.
"""

from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional, Sequence
import cmath
import os

import numpy as np

from .errors import InvalidConfiguration


MappingFn = Callable[[complex], Optional[complex]]

EXECUTORS = {
    "process": ProcessPoolExecutor,
    "thread": ThreadPoolExecutor,
}


# =============================================================================
# Mappings
# =============================================================================

def inversion(c: complex) -> Optional[complex]:
    """The mapping z -> 1/z, undefined at the origin."""
    if c != 0:
        return 1.0 / c
    return None


def square(c: complex) -> Optional[complex]:
    return c * c


def exponential(c: complex) -> Optional[complex]:
    return cmath.exp(c)


def logarithm(c: complex) -> Optional[complex]:
    """Principal branch of log z, undefined at the origin."""
    if c != 0:
        return cmath.log(c)
    return None


def joukowski(c: complex) -> Optional[complex]:
    """The Joukowski transform z + 1/z, undefined at the origin."""
    if c != 0:
        return c + 1.0 / c
    return None


MAPPINGS = {
    "inversion": inversion,
    "square": square,
    "exp": exponential,
    "log": logarithm,
    "joukowski": joukowski,
}


def get_mapping(name: str) -> MappingFn:
    try:
        return MAPPINGS[name]
    except KeyError:
        raise InvalidConfiguration(
            f"Unknown mapping: {name!r} (choose from {', '.join(MAPPINGS)})"
        ) from None


# =============================================================================
# Engine
# =============================================================================

def map_point(mapping: MappingFn, c) -> Optional[complex]:
    """Apply ``mapping`` to one point; non-finite results become ``None``."""
    result = mapping(complex(c))
    if result is None:
        return None
    result = complex(result)
    # an overflowing mapping is treated as undefined rather than passed on
    if not cmath.isfinite(result):
        return None
    return result


def _map_chunk(mapping: MappingFn, chunk) -> list:
    return [map_point(mapping, c) for c in chunk]


def _chunks(points, count: int) -> list:
    count = max(1, min(count, len(points)))
    return np.array_split(np.asarray(points, dtype=np.complex128), count)


def remap(points: Sequence[complex], mapping: MappingFn = inversion,
          workers: Optional[int] = None, kind: str = "thread") -> list:
    """Map every point independently, preserving length and index order.

    With ``workers=1`` the points are mapped in the calling thread. Otherwise
    they are split into contiguous chunks, one per worker, and evaluated on a
    short-lived pool of ``kind`` (``"thread"`` or ``"process"``) that is
    joined before returning. A thread pool is serialised by the GIL for pure
    Python mappings; use ``kind="process"`` with a module level mapping for
    real parallelism.
    """
    with PointMapper(mapping, workers=workers, kind=kind) as mapper:
        return mapper.map(points)


@dataclass(frozen=True)
class MappedSets:
    """Mapped grid, axes and unit circle, always computed together."""
    grid: tuple
    x_axis: tuple
    y_axis: tuple
    unit_circle: tuple

    @property
    def lines(self):
        return (self.x_axis, self.y_axis, self.unit_circle)


class PointMapper:
    """Applies a mapping over a persistent worker pool.

    The pool is created lazily on the first parallel map and reused until
    ``close()``. Process pools need a picklable (module level) mapping.
    """

    def __init__(self, mapping: MappingFn = inversion,
                 workers: Optional[int] = None, kind: str = "process"):
        if kind not in EXECUTORS:
            raise InvalidConfiguration(
                f"Unknown executor: {kind!r} (choose from {', '.join(EXECUTORS)})"
            )
        if workers is None:
            workers = os.cpu_count() or 1
        if workers < 1:
            raise InvalidConfiguration(f"workers must be positive, got {workers}")
        self.mapping = mapping
        self.workers = workers
        self.kind = kind
        self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def map(self, points: Sequence[complex]) -> list:
        """Map ``points`` across the pool; same result as ``remap``."""
        if self.workers == 1 or len(points) < 2:
            return _map_chunk(self.mapping, points)
        if self._executor is None:
            self._executor = EXECUTORS[self.kind](max_workers=self.workers)
        parts = self._executor.map(
            partial(_map_chunk, self.mapping), _chunks(points, self.workers)
        )
        return [result for part in parts for result in part]

    def map_sets(self, samples) -> MappedSets:
        """Map all four sample sets into one consistent snapshot."""
        return MappedSets(
            grid=tuple(self.map(samples.grid)),
            x_axis=tuple(self.map(samples.x_axis)),
            y_axis=tuple(self.map(samples.y_axis)),
            unit_circle=tuple(self.map(samples.unit_circle)),
        )
