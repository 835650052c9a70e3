from host_client import BoardSnapshot
from planning.fruit_stash import FruitStash
from planning.models import Point


def make_snapshot(fruit, width=5, height=5, me=(0, 0), **kwargs):
    board = [[0] * height for _ in range(width)]
    for (col, row), fruit_type in fruit.items():
        board[col][row] = fruit_type
    return BoardSnapshot(board=board, me=Point(*me), opponent=Point(width - 1, height - 1), **kwargs)


def test_scan_groups_by_type_column_major():
    snapshot = make_snapshot({(0, 3): 1, (1, 0): 2, (0, 1): 1, (3, 3): 2, (2, 2): 2})
    stash = FruitStash.from_snapshot(snapshot)

    assert stash.locations[1] == [Point(0, 1), Point(0, 3)]
    assert stash.locations[2] == [Point(1, 0), Point(2, 2), Point(3, 3)]


def test_rarest_type_first():
    snapshot = make_snapshot({(0, 1): 3, (0, 2): 3, (1, 1): 1, (2, 2): 1, (3, 3): 1, (4, 4): 2})
    stash = FruitStash.from_snapshot(snapshot)
    assert stash.types == [2, 3, 1]
    assert stash.win_counts == {3: 1.0, 1: 1.5, 2: 0.5}


def test_win_counts_use_host_totals():
    snapshot = make_snapshot({(1, 1): 1, (2, 2): 2}, total_counts={1: 5, 2: 3})
    stash = FruitStash.from_snapshot(snapshot)
    assert stash.win_counts == {1: 2.5, 2: 1.5}
    assert stash.types == [2, 1]


def test_equal_rarity_keeps_scan_order():
    snapshot = make_snapshot({(0, 4): 7, (3, 0): 4})
    assert FruitStash.from_snapshot(snapshot).types == [7, 4]


def test_update_drops_taken_fruit():
    stash = FruitStash.from_snapshot(make_snapshot({(1, 1): 1, (2, 2): 1, (3, 3): 2}))
    stash.update(make_snapshot({(2, 2): 1, (3, 3): 2}))

    assert stash.locations[1] == [Point(2, 2)]
    assert stash.all_locations() == [Point(3, 3), Point(2, 2)]


def test_update_drops_exhausted_type():
    stash = FruitStash.from_snapshot(make_snapshot({(1, 1): 1, (2, 2): 2, (3, 3): 2}))
    stash.update(make_snapshot({(2, 2): 2, (3, 3): 2}))

    assert stash.types == [2]
    assert 1 not in stash.locations


def test_decided_category_dropped():
    fruit = {(1, 1): 1, (2, 2): 1, (3, 3): 1, (4, 4): 2}
    stash = FruitStash.from_snapshot(make_snapshot(fruit, total_counts={1: 5, 2: 1}))
    assert stash.types == [2, 1]

    stash.update(make_snapshot(fruit, opponent_counts={1: 3}))
    assert stash.types == [2]


def test_closest_location_tie_goes_to_earlier():
    stash = FruitStash.from_snapshot(make_snapshot({(0, 2): 1, (2, 0): 1, (4, 4): 1}))
    assert stash.closest_location(1, Point(0, 0)) == Point(0, 2)
    assert stash.closest_location(1, Point(4, 3)) == Point(4, 4)


def test_closest_location_unknown_type():
    stash = FruitStash.from_snapshot(make_snapshot({(1, 1): 1}))
    assert stash.closest_location(9, Point(0, 0)) is None
    assert FruitStash().closest_any(Point(0, 0)) is None


def test_node_fruit_map():
    stash = FruitStash.from_snapshot(make_snapshot({(1, 1): 1, (2, 2): 2}))
    assert stash.node_fruit_map() == {Point(1, 1): 1, Point(2, 2): 2}
