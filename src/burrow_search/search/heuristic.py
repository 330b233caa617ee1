"""Admissible lower bound on the energy still needed to sort a layout."""

from __future__ import annotations

from burrow_search.burrow.config import EMPTY, BurrowConfig
from burrow_search.burrow.layout import Layout, is_settled


def estimate(layout: Layout, config: BurrowConfig, room_depth: int) -> int:
    """Sum of per-token straight-line costs, ignoring congestion and final descent.

    Hallway tokens pay their distance to the home doorway. Unsettled room
    tokens pay the climb to hallway level plus the doorway-to-doorway distance.
    Settled tokens never move again and contribute nothing.
    """
    total = 0
    for pos, kind in enumerate(layout.hallway):
        if kind == EMPTY:
            continue
        total += abs(pos - config.home_entry(kind)) * config.unit_cost(kind)

    for room_idx, room in enumerate(layout.rooms):
        home_kind = config.kinds[room_idx]
        entry = config.entry(room_idx)
        for depth, kind in enumerate(room):
            if is_settled(room, home_kind, depth):
                continue
            steps = room_depth - depth + abs(entry - config.home_entry(kind))
            total += steps * config.unit_cost(kind)
    return total


def zero_heuristic(layout: Layout, config: BurrowConfig, room_depth: int) -> int:
    """Uninformed estimate; turns A* into Dijkstra."""
    return 0


__all__ = ["estimate", "zero_heuristic"]
