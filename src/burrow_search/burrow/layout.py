"""Immutable search state: hallway contents plus one stack per room."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from burrow_search.burrow.config import EMPTY, BurrowConfig


@dataclass(frozen=True)
class Layout:
    """Hashable snapshot of every token position.

    ``rooms[r]`` is ordered innermost-first; its last character is the token
    next to the hallway. Room depth is instance configuration and is passed
    alongside the layout rather than stored here.
    """

    hallway: str
    rooms: Tuple[str, ...]

    @classmethod
    def empty(cls, config: BurrowConfig) -> "Layout":
        return cls(config.empty_hallway, ("",) * config.num_rooms)

    @classmethod
    def solved(cls, config: BurrowConfig, room_depth: int) -> "Layout":
        """The unique goal layout for ``config`` at ``room_depth``."""
        return cls(config.empty_hallway, tuple(kind * room_depth for kind in config.kinds))


def can_accept(room: str, kind: str) -> bool:
    """True once ``room`` holds no token other than ``kind``."""
    return all(token == kind for token in room)


def is_goal(layout: Layout, config: BurrowConfig, room_depth: int) -> bool:
    """Every room full and holding only its home kind; the hallway is not checked."""
    for kind, room in zip(config.kinds, layout.rooms):
        if len(room) != room_depth or not can_accept(room, kind):
            return False
    return True


def hallway_is_clear(layout: Layout) -> bool:
    return all(cell == EMPTY for cell in layout.hallway)


def token_count(layout: Layout) -> int:
    hallway = sum(1 for cell in layout.hallway if cell != EMPTY)
    return hallway + sum(len(room) for room in layout.rooms)


def is_settled(room: str, home_kind: str, depth: int) -> bool:
    """Token at ``depth`` is home and nothing deeper than it is foreign."""
    return can_accept(room[: depth + 1], home_kind)


__all__ = ["Layout", "can_accept", "hallway_is_clear", "is_goal", "is_settled", "token_count"]
