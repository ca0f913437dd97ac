"""Neighbour links between grid samples, used to rebuild the mesh edges."""

from typing import NamedTuple, Optional, Sequence

from .errors import InvalidConfiguration


class Connection(NamedTuple):
    """A grid index and the indices of its four neighbours, if any."""
    pos: int
    left: Optional[int]
    right: Optional[int]
    up: Optional[int]
    down: Optional[int]

    @property
    def neighbours(self):
        return (self.left, self.right, self.up, self.down)


def grid_connections(grid_length: int) -> tuple:
    """Return the connection of every index of a ``grid_length`` square grid.

    Indices are row-major, ``index(x, y) = x + y * grid_length``.
    """
    if grid_length < 1:
        raise InvalidConfiguration(
            f"grid length must be at least 1, got {grid_length}"
        )
    n = grid_length

    def map_to_index(x: int, y: int) -> int:
        return x + y * n

    connections = []
    for pos in range(n * n):
        x = pos % n
        y = pos // n
        connections.append(Connection(
            pos=pos,
            left=map_to_index(x - 1, y) if x > 0 else None,
            right=map_to_index(x + 1, y) if x < n - 1 else None,
            up=map_to_index(x, y - 1) if y > 0 else None,
            down=map_to_index(x, y + 1) if y < n - 1 else None,
        ))
    return tuple(connections)


def edge_count(connections: Sequence[Connection]) -> int:
    """Count undirected edges, each neighbouring pair once."""
    edges = set()
    for conn in connections:
        for other in conn.neighbours:
            if other is not None:
                edges.add((min(conn.pos, other), max(conn.pos, other)))
    return len(edges)
