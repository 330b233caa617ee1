"""Search utilities."""

from burrow_search.search.astar import (
    LayoutInvariantError,
    SearchBudgetExceeded,
    SearchResult,
    solve,
    solve_puzzle,
)
from burrow_search.search.heuristic import estimate, zero_heuristic
from burrow_search.search.moves import generate_moves

__all__ = [
    "LayoutInvariantError",
    "SearchBudgetExceeded",
    "SearchResult",
    "estimate",
    "generate_moves",
    "solve",
    "solve_puzzle",
    "zero_heuristic",
]
