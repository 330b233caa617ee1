import pandas as pd
import pytest

from burrow_search.benchmarks.puzzles import puzzles_for, scramble_suite
from burrow_search.eval import invariants
from burrow_search.eval.run_eval import RESULT_COLUMNS, _write_summary, main, run_puzzles


def test_run_puzzles_one_row_per_run():
    puzzles = puzzles_for(["solved", "cramped_swap"])
    df = run_puzzles(puzzles, heuristics=["estimate", "zero"], repeats=2)

    assert list(df.columns) == RESULT_COLUMNS
    assert len(df) == 2 * 2 * 2
    solved = df[df["puzzle_id"] == "solved"]
    assert set(solved["cost"]) == {0}
    cramped = df[df["puzzle_id"] == "cramped_swap"]
    assert set(cramped["cost"]) == {-1}
    assert not cramped["reachable"].any()


def test_scramble_runs_pass_invariants():
    df = run_puzzles(scramble_suite(seed=0)[:2], heuristics=["estimate", "zero"], repeats=2)
    summary = invariants.check_results(df)
    assert summary["passed"] is True, summary["issues"]


def test_write_summary_splits_mean_and_std(tmp_path):
    data = [
        {
            "puzzle_id": "p",
            "heuristic": "estimate",
            "cost": 10,
            "expanded": 4,
            "generated": 8,
            "pushed": 6,
            "runtime_s": 0.1,
        },
        {
            "puzzle_id": "p",
            "heuristic": "estimate",
            "cost": 10,
            "expanded": 6,
            "generated": 8,
            "pushed": 6,
            "runtime_s": 0.3,
        },
    ]
    df = pd.DataFrame(data)
    mean_path = tmp_path / "summary.csv"
    std_path = tmp_path / "summary_std.csv"

    _write_summary(df, mean_path, std_path)

    mean_df = pd.read_csv(mean_path)
    std_df = pd.read_csv(std_path)
    assert {"puzzle_id", "heuristic", "expanded_mean"}.issubset(mean_df.columns)
    assert mean_df.loc[0, "expanded_mean"] == pytest.approx(5.0)
    assert std_df.loc[0, "expanded_std"] == pytest.approx(1.41421356, rel=1e-6)


def test_main_writes_results_and_summary(tmp_path, capsys):
    out_dir = tmp_path / "eval"
    exit_code = main(
        ["--suite", "registry", "--puzzles", "solved", "--repeats", "1", "--out", str(out_dir)]
    )

    assert exit_code == 0
    results = pd.read_csv(out_dir / "results.csv")
    assert results.loc[0, "puzzle_id"] == "solved"
    assert (out_dir / "summary.csv").exists()
    assert (out_dir / "summary_std.csv").exists()
    assert "[eval] wrote results" in capsys.readouterr().out
