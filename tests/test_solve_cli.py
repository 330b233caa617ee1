import io
import json

from burrow_search import cli as solve_cli
from burrow_search.benchmarks.puzzles import CRAMPED_SWAP_DIAGRAM, EXAMPLE_DIAGRAM


def test_solve_prints_minimum_energy(tmp_path, capsys):
    path = tmp_path / "burrow.txt"
    path.write_text(EXAMPLE_DIAGRAM)

    exit_code = solve_cli.main([str(path)])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "12521"


def test_solve_reads_stdin_and_reports_json(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE_DIAGRAM))

    exit_code = solve_cli.main(["--json"])

    assert exit_code == 0
    record = json.loads(capsys.readouterr().out)
    assert record["cost"] == 12521
    assert record["room_depth"] == 2
    assert record["reachable"] is True


def test_unreachable_prints_minus_one(tmp_path, capsys):
    path = tmp_path / "cramped.txt"
    path.write_text(CRAMPED_SWAP_DIAGRAM)

    exit_code = solve_cli.main([str(path), "--config", "cramped"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "-1"


def test_invalid_diagram_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text(EXAMPLE_DIAGRAM.replace("###B#C", "###Z#C"))

    exit_code = solve_cli.main([str(path)])

    assert exit_code == 2
    assert "[solve]" in capsys.readouterr().err


def test_budget_exit_code(tmp_path, capsys):
    path = tmp_path / "burrow.txt"
    path.write_text(EXAMPLE_DIAGRAM)

    assert solve_cli.main([str(path), "--max-expansions", "3"]) == 1
