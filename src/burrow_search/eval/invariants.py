"""Invariant checks on evaluation results (determinism, heuristic agreement, sanity)."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable

import pandas as pd

from burrow_search.eval.run_eval import RESULT_COLUMNS


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--results", type=Path, required=True, help="Path to results.csv.")
    parser.add_argument(
        "--out",
        type=Path,
        help="Output directory (defaults to results parent / invariants).",
    )
    return parser.parse_args(argv)


def _schema(df: pd.DataFrame) -> list[dict]:
    missing = sorted(set(RESULT_COLUMNS) - set(df.columns))
    if missing:
        return [{"type": "schema", "detail": f"missing columns {missing}"}]
    return []


def _determinism(df: pd.DataFrame) -> list[dict]:
    issues = []
    for key, group in df.groupby(["puzzle_id", "heuristic"]):
        if group["cost"].nunique() > 1:
            issues.append({"type": "determinism", "key": key, "metric": "cost"})
    return issues


def _heuristic_agreement(df: pd.DataFrame) -> list[dict]:
    """Every heuristic must report the same optimum for a puzzle."""
    issues = []
    for puzzle_id, group in df.groupby("puzzle_id"):
        costs = group.groupby("heuristic")["cost"].first()
        if costs.nunique() > 1:
            issues.append(
                {
                    "type": "heuristic_agreement",
                    "puzzle_id": puzzle_id,
                    "costs": {str(k): int(v) for k, v in costs.items()},
                }
            )
    return issues


def _metric_sanity(df: pd.DataFrame) -> list[dict]:
    issues = []
    unreachable_mismatch = df[(df["cost"] < 0) != (df["reachable"] == False)]  # noqa: E712
    for _, row in unreachable_mismatch.iterrows():
        issues.append(
            {
                "type": "metric_sanity",
                "puzzle_id": row["puzzle_id"],
                "heuristic": row["heuristic"],
                "detail": "cost sign disagrees with reachable flag",
            }
        )
    idle = df[df["expanded"] < 1]
    for _, row in idle.iterrows():
        issues.append(
            {
                "type": "metric_sanity",
                "puzzle_id": row["puzzle_id"],
                "heuristic": row["heuristic"],
                "detail": "no layout expanded",
            }
        )
    return issues


def _summarize(issues: Iterable[dict]) -> dict:
    issues_list = list(issues)
    grouped: dict[str, int] = {}
    for item in issues_list:
        grouped[item["type"]] = grouped.get(item["type"], 0) + 1
    return {"issues": issues_list, "counts": grouped, "passed": len(issues_list) == 0}


def _write_report(out_dir: Path, summary: dict) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    report_lines = ["# Invariants Report", ""]
    if summary["passed"]:
        report_lines.append("- All invariants passed.")
    else:
        report_lines.append(f"- Issues found: {summary['counts']}")
        for issue in summary["issues"]:
            parts = [issue["type"]]
            for key, val in issue.items():
                if key == "type":
                    continue
                parts.append(f"{key}={val}")
            report_lines.append(f"  - {'; '.join(parts)}")
    (out_dir / "report.md").write_text("\n".join(report_lines))
    (out_dir / "summary.json").write_text(json.dumps(summary, indent=2, default=str))


def check_results(df: pd.DataFrame) -> dict:
    """Run every check on a results frame and return the summary dict."""
    issues = _schema(df)
    if not issues:
        issues.extend(_determinism(df))
        issues.extend(_heuristic_agreement(df))
        issues.extend(_metric_sanity(df))
    return _summarize(issues)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    results_path = args.results.expanduser()
    out_dir = args.out or results_path.parent / "invariants"
    df = pd.read_csv(results_path)
    summary = check_results(df)
    _write_report(out_dir, summary)
    print(f"[invariants] wrote report to {out_dir}")
    return 0 if summary["passed"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
