"""A* search for the minimum sorting energy of a burrow layout."""

from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict

from burrow_search.burrow.config import BurrowConfig
from burrow_search.burrow.diagram import Puzzle
from burrow_search.burrow.layout import Layout, hallway_is_clear, is_goal
from burrow_search.search.heuristic import estimate
from burrow_search.search.moves import generate_moves

Heuristic = Callable[[Layout, BurrowConfig, int], int]

UNREACHABLE_CODE = -1


class LayoutInvariantError(RuntimeError):
    """Raised when a layout violates an invariant the move rules should guarantee."""


class SearchBudgetExceeded(RuntimeError):
    """Raised when ``max_expansions`` is hit before the search settles."""


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search run; ``cost`` is ``None`` when no goal is reachable."""

    cost: int | None
    expanded: int
    generated: int
    pushed: int
    runtime_s: float

    @property
    def reachable(self) -> bool:
        return self.cost is not None

    @property
    def cost_or_code(self) -> int:
        """Integer answer with unreachable mapped to ``-1``."""
        return UNREACHABLE_CODE if self.cost is None else self.cost

    def as_record(self) -> dict[str, Any]:
        """Flatten into a dictionary suitable for CSV/JSON output."""
        return {
            "cost": self.cost_or_code,
            "reachable": self.reachable,
            "expanded": self.expanded,
            "generated": self.generated,
            "pushed": self.pushed,
            "runtime_s": self.runtime_s,
        }


def solve(
    initial: Layout,
    config: BurrowConfig,
    room_depth: int,
    *,
    heuristic: Heuristic = estimate,
    max_expansions: int | None = None,
) -> SearchResult:
    """Return the minimum total energy needed to sort ``initial``.

    Frontier entries are ``(priority, seq, cost, layout)``; ``seq`` breaks
    priority ties first-in-first-out. Stale entries are skipped on pop instead
    of being decreased in place.
    """

    start = time.perf_counter()
    counter = itertools.count()
    best: Dict[Layout, int] = {initial: 0}
    frontier: list[tuple[int, int, int, Layout]] = [
        (heuristic(initial, config, room_depth), next(counter), 0, initial)
    ]
    expanded = generated = 0
    pushed = 1

    while frontier:
        _, _, cost, layout = heapq.heappop(frontier)
        if cost > best[layout]:
            continue
        expanded += 1

        if is_goal(layout, config, room_depth):
            if not hallway_is_clear(layout):
                msg = f"Goal rooms reached with tokens left in hallway {layout.hallway!r}."
                raise LayoutInvariantError(msg)
            return SearchResult(cost, expanded, generated, pushed, time.perf_counter() - start)

        if max_expansions is not None and expanded > max_expansions:
            msg = f"Search exceeded expansion budget {max_expansions}"
            raise SearchBudgetExceeded(msg)

        for next_layout, move_cost in generate_moves(layout, config, room_depth):
            generated += 1
            new_cost = cost + move_cost
            known = best.get(next_layout)
            if known is not None and new_cost >= known:
                continue
            best[next_layout] = new_cost
            priority = new_cost + heuristic(next_layout, config, room_depth)
            heapq.heappush(frontier, (priority, next(counter), new_cost, next_layout))
            pushed += 1

    return SearchResult(None, expanded, generated, pushed, time.perf_counter() - start)


def solve_puzzle(puzzle: Puzzle, **kwargs: Any) -> SearchResult:
    """Run :func:`solve` on a parsed puzzle."""
    return solve(puzzle.layout, puzzle.config, puzzle.room_depth, **kwargs)


__all__ = [
    "Heuristic",
    "LayoutInvariantError",
    "SearchBudgetExceeded",
    "SearchResult",
    "UNREACHABLE_CODE",
    "solve",
    "solve_puzzle",
]
