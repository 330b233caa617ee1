"""burrow-search package."""

from burrow_search.benchmarks.puzzles import puzzle_registry, scramble_suite, scrambled_puzzle
from burrow_search.burrow.config import BurrowConfig, canonical_config, config_registry
from burrow_search.burrow.diagram import DiagramError, Puzzle, load_diagram, parse_diagram
from burrow_search.burrow.layout import Layout, can_accept, is_goal
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
    "BurrowConfig",
    "DiagramError",
    "Layout",
    "LayoutInvariantError",
    "Puzzle",
    "SearchBudgetExceeded",
    "SearchResult",
    "can_accept",
    "canonical_config",
    "config_registry",
    "estimate",
    "generate_moves",
    "is_goal",
    "load_diagram",
    "parse_diagram",
    "puzzle_registry",
    "scramble_suite",
    "scrambled_puzzle",
    "solve",
    "solve_puzzle",
    "zero_heuristic",
    "solve_text",
]


def solve_text(text: str, *, config: BurrowConfig | None = None) -> int | None:
    """Helper: parse a diagram and return its minimum energy (``None`` if unreachable)."""
    return solve_puzzle(parse_diagram(text, config)).cost
