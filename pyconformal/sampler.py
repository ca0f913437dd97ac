"""Sample point sets in the unit square of the complex plane.

Every set is a read-only ``complex128`` array so a sample keeps its index for
the lifetime of the process. The grid is flattened row-major with
``index = x + y * n``, where ``x`` steps along the real axis and ``y`` along
the imaginary axis, matching ``connectivity.grid_connections``.
"""

from dataclasses import dataclass

import numpy as np

from .errors import InvalidConfiguration


@dataclass(frozen=True, eq=False)
class SampleSets:
    """The four fixed input sets: grid, both axes and the unit circle."""
    grid_length: int
    grid: np.ndarray
    x_axis: np.ndarray
    y_axis: np.ndarray
    unit_circle: np.ndarray

    @property
    def lines(self):
        """The polyline sets, in drawing order."""
        return (self.x_axis, self.y_axis, self.unit_circle)


def _frozen(values: np.ndarray) -> np.ndarray:
    values = np.ascontiguousarray(values, dtype=np.complex128)
    values.flags.writeable = False
    return values


def axis_values(grid_length: int) -> np.ndarray:
    """Return the ``grid_length`` real samples ``k / L`` for k in [-L, n - L).

    ``L`` is ``grid_length // 2``, so an odd length covers [-1, 1] exactly.
    A single sample sits at the origin.
    """
    if grid_length < 1:
        raise InvalidConfiguration(
            f"grid length must be at least 1, got {grid_length}"
        )
    half_width = grid_length // 2
    steps = np.arange(-half_width, grid_length - half_width, dtype=np.float64)
    return steps / max(half_width, 1)


def sample_sets(grid_length: int) -> SampleSets:
    """Build the grid, axis and unit circle samples for ``grid_length``."""
    values = axis_values(grid_length)

    # outer loop over the imaginary part keeps the real index fastest varying
    re, im = np.meshgrid(values, values, indexing="xy")
    grid = (re + 1j * im).ravel()

    x_axis = values + 0j
    y_axis = 1j * values
    # NOTE: reuses the axis parameterisation scaled by 2*pi, so theta runs
    # over [-2pi, 2pi] and the circle is traced twice.
    unit_circle = np.exp(1j * 2.0 * np.pi * values)

    return SampleSets(
        grid_length=grid_length,
        grid=_frozen(grid),
        x_axis=_frozen(x_axis),
        y_axis=_frozen(y_axis),
        unit_circle=_frozen(unit_circle),
    )
