"""Legal single-token moves between the hallway and the rooms."""

from __future__ import annotations

from typing import Iterator, Tuple

from burrow_search.burrow.config import EMPTY, BurrowConfig
from burrow_search.burrow.layout import Layout, can_accept

Successor = Tuple[Layout, int]


def generate_moves(layout: Layout, config: BurrowConfig, room_depth: int) -> Iterator[Successor]:
    """Yield ``(next_layout, energy)`` for every legal move out of ``layout``."""

    yield from _hallway_to_room(layout, config, room_depth)
    yield from _room_to_hallway(layout, config, room_depth)


# --------------------------------------------------------------- families --
def _hallway_to_room(layout: Layout, config: BurrowConfig, room_depth: int) -> Iterator[Successor]:
    hallway = layout.hallway
    for pos, kind in enumerate(hallway):
        if kind == EMPTY:
            continue
        room_idx = config.home_room(kind)
        room = layout.rooms[room_idx]
        if not can_accept(room, kind):
            continue
        entry = config.entry(room_idx)
        if not _span_clear(hallway, pos, entry, include_end=False):
            continue

        steps = abs(pos - entry) + room_depth - len(room)
        rooms = list(layout.rooms)
        rooms[room_idx] = room + kind
        next_layout = Layout(_put(hallway, pos, EMPTY), tuple(rooms))
        yield next_layout, steps * config.unit_cost(kind)


def _room_to_hallway(layout: Layout, config: BurrowConfig, room_depth: int) -> Iterator[Successor]:
    hallway = layout.hallway
    for room_idx, room in enumerate(layout.rooms):
        if not room or can_accept(room, config.kinds[room_idx]):
            continue
        kind = room[-1]
        entry = config.entry(room_idx)
        climb = room_depth - (len(room) - 1)
        unit = config.unit_cost(kind)
        rooms = list(layout.rooms)
        rooms[room_idx] = room[:-1]
        rooms_after = tuple(rooms)
        for stop in config.stops:
            if not _span_clear(hallway, entry, stop, include_end=True):
                continue
            steps = abs(stop - entry) + climb
            yield Layout(_put(hallway, stop, kind), rooms_after), steps * unit


# --------------------------------------------------------------------------- #
# Helpers


def _span_clear(hallway: str, start: int, end: int, *, include_end: bool) -> bool:
    """True if cells strictly after ``start`` up to ``end`` are empty.

    ``start`` is the walker's own cell. ``end`` is checked only when
    ``include_end`` is set (a hallway stop must itself be free; a doorway is
    never occupied).
    """
    if start == end:
        return True
    step = 1 if end > start else -1
    stop = end + step if include_end else end
    return all(hallway[i] == EMPTY for i in range(start + step, stop, step))


def _put(hallway: str, pos: int, value: str) -> str:
    return hallway[:pos] + value + hallway[pos + 1 :]


__all__ = ["Successor", "generate_moves"]
