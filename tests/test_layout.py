import pytest

from burrow_search.burrow.config import canonical_config, config_registry
from burrow_search.burrow.layout import (
    Layout,
    can_accept,
    hallway_is_clear,
    is_goal,
    is_settled,
    token_count,
)


def test_can_accept_only_without_foreign_tokens():
    assert can_accept("", "A")
    assert can_accept("AA", "A")
    assert not can_accept("AB", "A")
    assert not can_accept("B", "A")


@pytest.mark.parametrize("room_depth", [1, 2, 3, 4])
def test_goal_iff_rooms_hold_home_kind_at_full_depth(room_depth):
    config = canonical_config()
    solved = Layout.solved(config, room_depth)
    assert is_goal(solved, config, room_depth)

    short = Layout(solved.hallway, ("A" * (room_depth - 1),) + solved.rooms[1:])
    assert not is_goal(short, config, room_depth)

    swapped_rooms = list(solved.rooms)
    swapped_rooms[0] = "A" * (room_depth - 1) + "B"
    swapped_rooms[1] = "B" * (room_depth - 1) + "A"
    assert not is_goal(Layout(solved.hallway, tuple(swapped_rooms)), config, room_depth)


def test_goal_predicate_ignores_hallway():
    config = canonical_config()
    layout = Layout("A" + "." * 10, ("AA", "BB", "CC", "DD"))
    assert is_goal(layout, config, 2)
    assert not hallway_is_clear(layout)


def test_layouts_compare_structurally():
    a = Layout("." * 11, ("AB", "DC", "CB", "AD"))
    b = Layout("".join(["."] * 11), tuple(["AB", "DC", "CB", "AD"]))
    assert a == b
    assert hash(a) == hash(b)
    assert {a: 1}[b] == 1
    assert a != Layout("." * 11, ("BA", "DC", "CB", "AD"))


def test_token_count_covers_hallway_and_rooms():
    layout = Layout("...B.......", ("BA", "DC", "C", "AD"))
    assert token_count(layout) == 8
    assert token_count(Layout.empty(config_registry()["twin"])) == 0


def test_settled_means_nothing_foreign_below():
    # innermost-first: B at the wall, then A, then A
    room = "BAA"
    assert not is_settled(room, "A", 0)
    assert not is_settled(room, "A", 1)
    assert not is_settled(room, "A", 2)
    room = "AAB"
    assert is_settled(room, "A", 0)
    assert is_settled(room, "A", 1)
    assert not is_settled(room, "A", 2)
