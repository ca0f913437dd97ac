import pytest

from pyconformal import InvalidConfiguration, edge_count, grid_connections


def test_corner_has_right_and_down_only():
    conn = grid_connections(3)[0]
    assert conn.pos == 0
    assert conn.left is None and conn.up is None
    assert conn.right == 1
    assert conn.down == 3


def test_centre_has_all_four_neighbours():
    conn = grid_connections(3)[4]
    assert (conn.left, conn.right, conn.up, conn.down) == (3, 5, 1, 7)


def test_opposite_corner():
    conn = grid_connections(4)[15]
    assert (conn.left, conn.right, conn.up, conn.down) == (14, None, 11, None)


def test_single_point_grid_has_no_neighbours():
    (conn,) = grid_connections(1)
    assert conn.neighbours == (None, None, None, None)


@pytest.mark.parametrize("n", [1, 2, 3, 10, 101])
def test_edge_count(n):
    connections = grid_connections(n)
    assert len(connections) == n * n
    assert edge_count(connections) == 2 * n * (n - 1)


def test_neighbour_links_are_symmetric():
    connections = grid_connections(6)
    for conn in connections:
        if conn.right is not None:
            assert connections[conn.right].left == conn.pos
        if conn.down is not None:
            assert connections[conn.down].up == conn.pos


def test_degenerate_grid_length_rejected():
    with pytest.raises(InvalidConfiguration):
        grid_connections(0)
