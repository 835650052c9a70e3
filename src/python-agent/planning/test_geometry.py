import pytest

from constants import Action
from planning.geometry import (
    InvalidPathRequest,
    calculate_move_direction,
    canonical_box,
    distance,
    nodes_in_box,
)
from planning.models import Box, Point


def test_distance_is_manhattan():
    assert distance(Point(0, 0), Point(3, 4)) == 7
    assert distance(Point(5, 1), Point(2, 3)) == 5


@pytest.mark.parametrize("p", [Point(0, 0), Point(3, 7), Point(9, 2)])
def test_coincident_points_rejected(p):
    """A box around a single cell is not a path request."""
    with pytest.raises(InvalidPathRequest):
        canonical_box(p, p)


def test_same_column_ordered_by_row():
    assert canonical_box(Point(2, 4), Point(2, 1)) == Box(Point(2, 1), Point(2, 4))
    assert canonical_box(Point(2, 1), Point(2, 4)) == Box(Point(2, 1), Point(2, 4))


def test_same_row_ordered_by_column():
    assert canonical_box(Point(5, 3), Point(1, 3)) == Box(Point(1, 3), Point(5, 3))


def test_diagonal_pair_uses_endpoints():
    assert canonical_box(Point(3, 3), Point(1, 1)) == Box(Point(1, 1), Point(3, 3))


def test_anti_diagonal_pair_uses_synthetic_corners():
    """Moving east while moving north: neither endpoint is the top-left corner."""
    box = canonical_box(Point(0, 4), Point(3, 1))
    assert box == Box(Point(0, 1), Point(3, 4))
    assert canonical_box(Point(3, 1), Point(0, 4)) == box
    assert box.contains(Point(0, 4))
    assert box.contains(Point(3, 1))
    assert box.contains(Point(1, 2))


def test_nodes_in_box_inclusive_edges():
    box = Box(Point(1, 1), Point(3, 3))
    nodes = [Point(1, 1), Point(3, 3), Point(1, 3), Point(0, 2), Point(2, 4), Point(2, 2)]

    # (0,2) is outside on columns only, (2,4) on rows only
    assert nodes_in_box(box, nodes) == [Point(1, 1), Point(3, 3), Point(1, 3), Point(2, 2)]


def test_nodes_in_box_predicate_excludes_owner():
    box = canonical_box(Point(1, 1), Point(3, 3))
    nodes = [Point(1, 1), Point(2, 2), Point(3, 3)]
    assert nodes_in_box(box, nodes, lambda p: p != Point(1, 1)) == [Point(2, 2), Point(3, 3)]


def test_move_direction_columns_first():
    assert calculate_move_direction(Point(3, 0), Point(0, 2)) == Action.EAST
    assert calculate_move_direction(Point(0, 5), Point(2, 2)) == Action.WEST
    assert calculate_move_direction(Point(2, 5), Point(2, 2)) == Action.SOUTH
    assert calculate_move_direction(Point(2, 0), Point(2, 2)) == Action.NORTH


def test_move_direction_none_on_arrival():
    assert calculate_move_direction(Point(4, 4), Point(4, 4)) is None
