"""Evaluation harness: solve registry puzzles and scrambles, write results/summary CSVs."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

import pandas as pd

from burrow_search.benchmarks.puzzles import (
    NamedPuzzle,
    puzzles_for,
    scramble_suite,
)
from burrow_search.search.astar import Heuristic, solve_puzzle
from burrow_search.search.heuristic import estimate, zero_heuristic

HEURISTICS: dict[str, Heuristic] = {"estimate": estimate, "zero": zero_heuristic}

DEFAULT_PUZZLES = ("example", "solved", "cramped_swap")

RESULT_COLUMNS = [
    "puzzle_id",
    "config_id",
    "room_depth",
    "heuristic",
    "repeat",
    "cost",
    "reachable",
    "expanded",
    "generated",
    "pushed",
    "runtime_s",
]

SUMMARY_METRICS = ["cost", "expanded", "generated", "pushed", "runtime_s"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--suite",
        default="registry",
        choices=["registry", "scramble", "all"],
        help="Which puzzle set to run.",
    )
    parser.add_argument(
        "--puzzles",
        nargs="+",
        help=f"Registry ids to run (defaults to {', '.join(DEFAULT_PUZZLES)}).",
    )
    parser.add_argument("--scramble-seed", type=int, default=0, help="Seed for the scramble suite.")
    parser.add_argument(
        "--heuristics",
        nargs="+",
        default=["estimate"],
        choices=sorted(HEURISTICS),
        help="Heuristics to run each puzzle with.",
    )
    parser.add_argument("--repeats", type=int, default=2, help="Runs per puzzle and heuristic.")
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Per-run expansion budget (unlimited by default).",
    )
    parser.add_argument("--out", type=Path, required=True, help="Output directory for artifacts.")
    parser.add_argument(
        "--results-name",
        type=str,
        default="results.csv",
        help="Filename for the results CSV written inside --out.",
    )
    parser.add_argument(
        "--summary-name",
        type=str,
        default="summary.csv",
        help="Filename for the per-puzzle mean summary.",
    )
    return parser.parse_args(argv)


def _select_puzzles(args: argparse.Namespace) -> list[NamedPuzzle]:
    selected: list[NamedPuzzle] = []
    if args.suite in {"registry", "all"}:
        names = args.puzzles or list(DEFAULT_PUZZLES)
        selected.extend(puzzles_for(names))
    if args.suite in {"scramble", "all"}:
        selected.extend(scramble_suite(seed=args.scramble_seed))
    return selected


def run_puzzles(
    puzzles: Iterable[NamedPuzzle],
    *,
    heuristics: Iterable[str] = ("estimate",),
    repeats: int = 1,
    max_expansions: int | None = None,
) -> pd.DataFrame:
    """Solve every puzzle ``repeats`` times per heuristic and collect one row per run."""
    rows: list[dict] = []
    heuristic_names = list(heuristics)
    for entry in puzzles:
        for name in heuristic_names:
            for repeat in range(max(1, repeats)):
                result = solve_puzzle(
                    entry.puzzle,
                    heuristic=HEURISTICS[name],
                    max_expansions=max_expansions,
                )
                row = {
                    "puzzle_id": entry.name,
                    "config_id": entry.config_id,
                    "room_depth": entry.puzzle.room_depth,
                    "heuristic": name,
                    "repeat": repeat,
                }
                row.update(result.as_record())
                rows.append(row)
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def _write_summary(df: pd.DataFrame, mean_path: Path, std_path: Path | None = None) -> None:
    agg = df.groupby(["puzzle_id", "heuristic"]).agg({m: ["mean", "std"] for m in SUMMARY_METRICS})

    def _stat_df(stat: str) -> pd.DataFrame:
        sub = agg.xs(stat, level=1, axis=1)
        sub.columns = [f"{col}_{stat}" for col in sub.columns]
        return sub.reset_index()

    mean_path.parent.mkdir(parents=True, exist_ok=True)
    _stat_df("mean").to_csv(mean_path, index=False)
    if std_path is not None:
        std_path.parent.mkdir(parents=True, exist_ok=True)
        _stat_df("std").to_csv(std_path, index=False)


# ----------------------------------------------------------------------- Main
def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    out_dir = args.out.expanduser()
    out_dir.mkdir(parents=True, exist_ok=True)

    puzzles = _select_puzzles(args)
    if not puzzles:
        print("[eval] no puzzles selected")
        return 1

    df = run_puzzles(
        puzzles,
        heuristics=args.heuristics,
        repeats=args.repeats,
        max_expansions=args.max_expansions,
    )
    results_path = out_dir / args.results_name
    df.to_csv(results_path, index=False)
    summary_path = out_dir / args.summary_name
    std_path = summary_path.with_name(summary_path.stem + "_std" + summary_path.suffix)
    _write_summary(df, summary_path, std_path)

    print(f"[eval] solved {len(df)} runs over {len(puzzles)} puzzles")
    print(f"[eval] wrote results to {results_path}")
    print(f"[eval] wrote summary to {summary_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
