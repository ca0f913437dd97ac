"""Visualise how a grid in the complex plane distorts under a mapping."""

from .connectivity import Connection, edge_count, grid_connections
from .errors import ConformalError, DrawFailure, InvalidConfiguration
from .mapping import MAPPINGS, MappedSets, PointMapper, inversion, remap
from .projection import complex_to_point
from .sampler import SampleSets, axis_values, sample_sets

__all__ = [
    "Connection",
    "ConformalError",
    "DrawFailure",
    "InvalidConfiguration",
    "MAPPINGS",
    "MappedSets",
    "PointMapper",
    "SampleSets",
    "axis_values",
    "complex_to_point",
    "edge_count",
    "grid_connections",
    "inversion",
    "remap",
    "sample_sets",
]
