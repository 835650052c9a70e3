"""
Data models for the waypoint route planner.

Coordinates follow the host board: columns grow to the east, rows grow to
the south. A Box is the rectangle every monotone walk between two points
stays inside; chains are waypoint sequences handed from the planner to the
route executor.
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Tuple


class Point(NamedTuple):
    """A board cell (column, row)."""
    col: int
    row: int

    def __str__(self) -> str:
        return f"({self.col},{self.row})"


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle with left.col <= right.col and left.row <= right.row."""
    left: Point
    right: Point

    def contains(self, point: Point) -> bool:
        """Inclusive on every edge."""
        low_row = min(self.left.row, self.right.row)
        high_row = max(self.left.row, self.right.row)
        return (self.left.col <= point.col <= self.right.col and
                low_row <= point.row <= high_row)


FruitType = int
NodeFruitMap = Dict[Point, FruitType]        # only cells known to hold fruit
DominanceGraph = Dict[Point, Tuple[Point, ...]]  # node -> admissible next waypoints
Chain = Tuple[Point, ...]
Plan = List[Point]


def as_point(value) -> Point:
    """Coerce an (x, y) pair or {"x", "y"} mapping into a Point."""
    if isinstance(value, Point):
        return value
    if isinstance(value, dict):
        return Point(int(value.get("x", 0)), int(value.get("y", 0)))
    col, row = value
    return Point(int(col), int(row))
