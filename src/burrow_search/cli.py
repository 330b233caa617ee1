"""Solve a burrow diagram and print the minimum sorting energy (-1 if unreachable)."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from burrow_search.burrow.config import config_registry
from burrow_search.burrow.diagram import parse_diagram, unfold_diagram
from burrow_search.search.astar import SearchBudgetExceeded, solve_puzzle


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "diagram",
        type=Path,
        nargs="?",
        help="Path to the puzzle diagram (reads stdin when omitted).",
    )
    parser.add_argument(
        "--config",
        default="canonical",
        choices=sorted(config_registry()),
        help="Burrow configuration id.",
    )
    parser.add_argument(
        "--unfold",
        action="store_true",
        help="Insert the two folded rows below the first room row before solving.",
    )
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Abort after this many expanded layouts.",
    )
    parser.add_argument("--json", action="store_true", help="Print the full search record as JSON.")
    return parser.parse_args(argv)


def _read_text(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.expanduser().read_text()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    text = _read_text(args.diagram)
    try:
        if args.unfold:
            text = unfold_diagram(text)
        puzzle = parse_diagram(text, config_registry()[args.config])
        result = solve_puzzle(puzzle, max_expansions=args.max_expansions)
    except ValueError as exc:
        # DiagramError plus configuration/topology rejections
        print(f"[solve] invalid diagram: {exc}", file=sys.stderr)
        return 2
    except SearchBudgetExceeded as exc:
        print(f"[solve] {exc}", file=sys.stderr)
        return 1

    if args.json:
        record = {"room_depth": puzzle.room_depth, "config": args.config}
        record.update(result.as_record())
        print(json.dumps(record, indent=2))
    else:
        print(result.cost_or_code)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
