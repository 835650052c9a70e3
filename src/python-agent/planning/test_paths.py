from planning.models import Point
from planning.paths import PathEnumerator, extend_partial_path, extract_paths


def _is_monotone(chain, start, end):
    """Every step moves toward end on both axes, never back."""
    col_sign = (end.col > start.col) - (end.col < start.col)
    row_sign = (end.row > start.row) - (end.row < start.row)
    for a, b in zip(chain, chain[1:]):
        d_col, d_row = b.col - a.col, b.row - a.row
        if d_col * col_sign < 0 or d_row * row_sign < 0:
            return False
        if col_sign == 0 and d_col != 0 or row_sign == 0 and d_row != 0:
            return False
        if (d_col, d_row) == (0, 0):
            return False
    return True


def test_extend_terminal_path_unchanged():
    path = (Point(0, 0), Point(1, 1))
    assert extend_partial_path(path, {Point(0, 0): (Point(1, 1),)}) == [path]


def test_extend_one_per_successor():
    graph = {Point(0, 0): (Point(1, 0), Point(0, 1))}
    assert extend_partial_path((Point(0, 0),), graph) == [
        (Point(0, 0), Point(1, 0)),
        (Point(0, 0), Point(0, 1)),
    ]


def test_extract_paths_collects_all_maximal_chains():
    s, a, b, e = Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1)
    graph = {s: (a, b), a: (e,), b: (e,)}
    assert extract_paths([(s,)], graph) == [(s, a, e), (s, b, e)]


def test_single_waypoint_scenario():
    """5x5 grid, corner to corner through the centre."""
    paths = PathEnumerator().possible_paths(Point(0, 0), Point(4, 4), [Point(2, 2)])
    assert paths == [(Point(0, 0), Point(2, 2), Point(4, 4))]


def test_diamond_yields_both_orders():
    nodes = [Point(1, 1), Point(1, 2), Point(2, 1), Point(2, 2)]
    paths = PathEnumerator().possible_paths(Point(0, 0), Point(3, 3), nodes)
    assert sorted(paths) == [
        (Point(0, 0), Point(1, 1), Point(1, 2), Point(2, 2), Point(3, 3)),
        (Point(0, 0), Point(1, 1), Point(2, 1), Point(2, 2), Point(3, 3)),
    ]


def test_chains_are_monotone_south_east():
    start, end = Point(0, 0), Point(5, 5)
    nodes = [Point(1, 4), Point(2, 2), Point(3, 1), Point(4, 4), Point(0, 3), Point(5, 2), Point(2, 5)]
    paths = PathEnumerator().possible_paths(start, end, nodes)

    assert paths
    for chain in paths:
        assert chain[0] == start
        assert chain[-1] == end
        assert _is_monotone(chain, start, end)


def test_chains_are_monotone_north_east():
    start, end = Point(0, 5), Point(5, 0)
    nodes = [Point(1, 4), Point(2, 2), Point(3, 3), Point(4, 1), Point(5, 3), Point(0, 1)]
    paths = PathEnumerator().possible_paths(start, end, nodes)

    assert paths
    for chain in paths:
        assert chain[0] == start
        assert chain[-1] == end
        assert _is_monotone(chain, start, end)


def test_straight_line_keeps_every_waypoint():
    start, end = Point(0, 2), Point(0, 6)
    paths = PathEnumerator().possible_paths(start, end, [Point(0, 5), Point(0, 3)])
    assert paths == [(start, Point(0, 3), Point(0, 5), end)]
