"""Minimal example: solve the folded and unfolded example burrow."""

from __future__ import annotations

from burrow_search import parse_diagram, solve_puzzle, zero_heuristic
from burrow_search.benchmarks.puzzles import EXAMPLE_DIAGRAM
from burrow_search.burrow.diagram import unfold_diagram


def _report(label: str, text: str) -> None:
    puzzle = parse_diagram(text)
    informed = solve_puzzle(puzzle)
    print(f"{label} (room_depth={puzzle.room_depth})")
    print(f"  min_energy: {informed.cost_or_code}")
    print(f"  expanded: {informed.expanded}")
    print(f"  runtime_s: {informed.runtime_s:.3f}")
    if puzzle.room_depth <= 2:
        dijkstra = solve_puzzle(puzzle, heuristic=zero_heuristic)
        print(f"  expanded_without_heuristic: {dijkstra.expanded}")


def main() -> None:
    print(EXAMPLE_DIAGRAM)
    _report("Example burrow", EXAMPLE_DIAGRAM)
    _report("Unfolded example burrow", unfold_diagram(EXAMPLE_DIAGRAM))


if __name__ == "__main__":
    main()
