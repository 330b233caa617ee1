"""Cross-platform task runner for burrow-search.

All commands use the currently active Python interpreter (sys.executable) so they work
on POSIX and Windows without Make.
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path

ARTIFACTS_ENV = "ARTIFACTS"
DEFAULT_ARTIFACTS = "artifacts"


class RunError(Exception):
    """Raised when an invoked command fails."""


def _log(msg: str) -> None:
    print(f"[run] {msg}")


def _run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    _log("$ " + " ".join(cmd))
    result = subprocess.run(cmd, env=env)
    if result.returncode != 0:
        raise RunError(f"Command failed with exit code {result.returncode}: {' '.join(cmd)}")


def _artifacts_root() -> Path:
    return Path(os.environ.get(ARTIFACTS_ENV, DEFAULT_ARTIFACTS))


def _latest_eval_run(root: Path | None = None) -> Path | None:
    base = root or (_artifacts_root() / "eval")
    if not base.exists():
        return None
    runs = [p for p in base.iterdir() if p.is_dir()]
    if not runs:
        return None
    return max(runs, key=lambda p: p.stat().st_mtime)


def cmd_lint(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "check", "."])
    _run([sys.executable, "-m", "ruff", "format", "--check", "."])


def cmd_format(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "format", "."])
    _run([sys.executable, "-m", "ruff", "check", "--fix", "."])


def cmd_test(args: argparse.Namespace) -> None:
    pytest_cmd = [sys.executable, "-m", "pytest"]
    if args.quiet:
        pytest_cmd.append("-q")
    _run(pytest_cmd)


def cmd_solve(args: argparse.Namespace) -> None:
    cmd = [sys.executable, "-m", "burrow_search.cli", str(args.diagram)]
    if args.unfold:
        cmd.append("--unfold")
    _run(cmd)


def cmd_eval(args: argparse.Namespace) -> None:
    out_root = args.out or (_artifacts_root() / "eval")
    out_dir = out_root / datetime.now().strftime("%Y%m%d_%H%M%S")
    cmd = [
        sys.executable,
        "-m",
        "burrow_search.eval.run_eval",
        "--suite",
        args.suite,
        "--repeats",
        str(args.repeats),
        "--heuristics",
        *args.heuristics,
        "--out",
        str(out_dir),
    ]
    _run(cmd)
    _log(f"latest eval run: {out_dir}")


def cmd_invariants(args: argparse.Namespace) -> None:
    results = args.results
    if results is None:
        latest_run = _latest_eval_run()
        if not latest_run:
            raise RunError("No eval runs found; provide --results explicitly")
        results = latest_run / "results.csv"
    if not results.exists():
        raise RunError("Could not locate eval results CSV; provide --results")
    out_dir = args.out or (results.parent / "invariants")
    _run(
        [
            sys.executable,
            "-m",
            "burrow_search.eval.invariants",
            "--results",
            str(results),
            "--out",
            str(out_dir),
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    lint_p = sub.add_parser("lint", help="Run ruff checks")
    lint_p.set_defaults(func=cmd_lint)

    fmt_p = sub.add_parser("format", help="Apply ruff format and fixes")
    fmt_p.set_defaults(func=cmd_format)

    test_p = sub.add_parser("test", help="Run pytest")
    test_p.add_argument("--quiet", action="store_true", help="Quiet pytest output")
    test_p.set_defaults(func=cmd_test)

    solve_p = sub.add_parser("solve", help="Solve one diagram file")
    solve_p.add_argument("diagram", type=Path)
    solve_p.add_argument("--unfold", action="store_true")
    solve_p.set_defaults(func=cmd_solve)

    ev = sub.add_parser("eval", help="Run the evaluation harness")
    ev.add_argument("--suite", default="all", choices=["registry", "scramble", "all"])
    ev.add_argument("--repeats", type=int, default=2)
    ev.add_argument("--heuristics", nargs="+", default=["estimate", "zero"])
    ev.add_argument("--out", type=Path, help="Base output directory (timestamp is appended)")
    ev.set_defaults(func=cmd_eval)

    inv = sub.add_parser("invariants", help="Run invariant checks on results CSV")
    inv.add_argument(
        "--results", type=Path, help="Path to results CSV (defaults to latest eval results)"
    )
    inv.add_argument("--out", type=Path, help="Output directory for report")
    inv.set_defaults(func=cmd_invariants)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except RunError as exc:  # pragma: no cover - simple CLI error
        _log(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
