"""
Grid geometry - Manhattan metric and canonical bounding boxes.

Usage:
    from planning.geometry import canonical_box, nodes_in_box

    box = canonical_box(Point(0, 4), Point(3, 1))
    inside = nodes_in_box(box, fruit_points, lambda p: p != me)
"""

from typing import Callable, Iterable, List, Optional

from constants import Action

from .models import Box, Point


class InvalidPathRequest(ValueError):
    """A box or path was requested between two coincident points."""


def _always(_point: Point) -> bool:
    return True


def distance(a: Point, b: Point) -> int:
    """Manhattan distance."""
    return abs(a.col - b.col) + abs(a.row - b.row)


def canonical_box(a: Point, b: Point) -> Box:
    """
    Smallest rectangle holding every monotone walk between a and b.

    Pairs on a shared row or column are ordered along the axis that changes.
    Diagonal pairs (column and row change with the same sign) use a and b
    themselves as corners, ordered by column. Anti-diagonal pairs (east while
    north, or west while south) have no endpoint at the top-left corner, so
    the corners are synthetic: each takes the column of one endpoint and the
    row of the other. Synthetic corners are only meaningful for membership
    tests and must never be used as path endpoints.

    Raises:
        InvalidPathRequest: a and b are the same cell
    """
    if a == b:
        raise InvalidPathRequest(f"degenerate box request at {a}")

    if a.col == b.col:
        return Box(a, b) if a.row <= b.row else Box(b, a)
    if a.row == b.row:
        return Box(a, b) if a.col <= b.col else Box(b, a)

    left, right = (a, b) if a.col < b.col else (b, a)
    if left.row < right.row:
        return Box(left, right)

    # Anti-diagonal: swap the rows so left becomes the top-left corner
    return Box(Point(left.col, right.row), Point(right.col, left.row))


def nodes_in_box(
    box: Box,
    nodes: Iterable[Point],
    predicate: Callable[[Point], bool] = _always,
) -> List[Point]:
    """Nodes inside box (edges inclusive) that satisfy predicate, order preserved."""
    return [node for node in nodes if box.contains(node) and predicate(node)]


def calculate_move_direction(target: Point, origin: Point) -> Optional[Action]:
    """
    One cardinal step from origin toward target.

    Columns are resolved before rows. Returns None when origin already is
    the target; callers treat that as arrival.
    """
    if target.col > origin.col:
        return Action.EAST
    if target.col < origin.col:
        return Action.WEST
    if target.row > origin.row:
        return Action.SOUTH
    if target.row < origin.row:
        return Action.NORTH
    return None
