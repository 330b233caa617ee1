from collections import deque

import pytest

from burrow_search.benchmarks.puzzles import scrambled_puzzle
from burrow_search.burrow.config import canonical_config, config_registry
from burrow_search.burrow.layout import Layout
from burrow_search.search.astar import solve
from burrow_search.search.heuristic import estimate, zero_heuristic
from burrow_search.search.moves import generate_moves


def _reachable(layout, config, room_depth, limit):
    seen = {layout}
    order = [layout]
    queue = deque([layout])
    while queue and len(seen) < limit:
        current = queue.popleft()
        for nxt, _ in generate_moves(current, config, room_depth):
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                queue.append(nxt)
    return order


@pytest.mark.parametrize("room_depth", [1, 2, 4])
def test_goal_estimate_is_zero(room_depth):
    config = canonical_config()
    assert estimate(Layout.solved(config, room_depth), config, room_depth) == 0


def test_hallway_tokens_pay_distance_to_home_doorway():
    config = canonical_config()
    layout = Layout("A.........D", ("A", "BB", "CC", "D"))
    assert estimate(layout, config, 2) == 2 * 1 + 2 * 1000


def test_unsettled_home_token_still_counts():
    config = canonical_config()
    # room 0 holds B at the wall and A on top; both must leave
    layout = Layout("." * 11, ("BA", "AB", "CC", "DD"))
    room0 = (2 - 1) * 1 + (2 - 0 + 2) * 10
    room1 = (2 - 1 + 0) * 10 + (2 - 0 + 2) * 1
    assert estimate(layout, config, 2) == room0 + room1


def test_settled_tokens_contribute_nothing():
    config = canonical_config()
    layout = Layout("." * 11, ("AB", "BA", "CC", "DD"))
    # A at the wall of room 0 is settled; only the B above it pays
    assert estimate(layout, config, 2) == (2 - 1 + 2) * 10 + (2 - 1 + 2) * 1


@pytest.mark.parametrize("config_id,room_depth,seed", [("twin", 1, 0), ("twin", 2, 3)])
def test_estimate_is_admissible_against_brute_force(config_id, room_depth, seed):
    config = config_registry()[config_id]
    start = scrambled_puzzle(config, room_depth, seed).layout
    for layout in _reachable(start, config, room_depth, limit=60):
        exact = solve(layout, config, room_depth, heuristic=zero_heuristic)
        if exact.cost is None:
            continue
        assert estimate(layout, config, room_depth) <= exact.cost


def test_estimate_is_consistent_along_moves():
    config = canonical_config()
    start = scrambled_puzzle(config, 2, seed=9).layout
    for layout in _reachable(start, config, 2, limit=200):
        here = estimate(layout, config, 2)
        for nxt, cost in generate_moves(layout, config, 2):
            assert here <= cost + estimate(nxt, config, 2)
