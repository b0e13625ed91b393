import csv

import pandas as pd

from eightpuzzle.domains.puzzle8 import GOAL, scramble
from eightpuzzle.experiments import plot, runner, solve, summarize, visualize_path
from eightpuzzle.search.engine import a_star


def test_solve_cli_prints_path_and_stats(capsys):
    assert solve.main(["123456708", "--algo", "uc"]) == 0
    out = capsys.readouterr().out
    assert "path: R" in out
    assert "length=1 expanded=3 max_queue=5" in out


def test_solve_cli_show_steps(capsys):
    assert solve.main(["123405786", "--heuristic", "misplaced", "--show"]) == 0
    out = capsys.readouterr().out
    assert "path: RD" in out
    assert "1. Right" in out and "2. Down" in out
    assert out.rstrip().endswith("1 2 3\n4 5 6\n7 8 .")


def test_solve_cli_rejects_bad_state(capsys):
    assert solve.main(["12345"]) == 2
    assert "error:" in capsys.readouterr().err


def test_runner_writes_csv(tmp_path):
    out = tmp_path / "run.csv"
    runner.main(["--depths", "2", "6", "--per_depth", "2", "--out", str(out)])
    with out.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2 * 2 * 3
    assert set(rows[0]) == set(runner.HEADER)
    assert {r["algorithm"] for r in rows} == {"UCS", "A*"}
    assert all(r["termination"] == "ok" and r["solvable"] == "1" for r in rows)
    for r in rows:
        assert int(r["path_length"]) <= int(r["depth"])


def test_make_instances_are_reproducible():
    a = runner.make_instances([4, 8], 3, start_seed=10)
    b = runner.make_instances([4, 8], 3, start_seed=10)
    assert [i.state for i in a] == [i.state for i in b]
    assert [i.seed for i in a] == list(range(10, 16))
    assert a[0].state == scramble(4, 10)


def _write_run(tmp_path):
    out = tmp_path / "run.csv"
    runner.main(["--depths", "4", "8", "--per_depth", "2", "--out", str(out)])
    return out


def test_summarize(tmp_path, capsys):
    out = _write_run(tmp_path)
    df = summarize.load_many([str(out)])
    assert set(df["label"]) == {"UCS", "A* (misplaced)", "A* (manhattan)"}
    assert df["state"].str.len().eq(9).all()

    table = summarize.summarize(df)
    assert len(table) == 2 * 3
    assert "expanded_mean" in table.columns

    bad = summarize.dominance_violations(df)
    assert list(bad.columns) == ["state", "informed", "weaker", "informed_expanded", "weaker_expanded"]

    summary = tmp_path / "summary.csv"
    summarize.main([str(out), "--out", str(summary)])
    assert summary.exists()
    assert "Saved:" in capsys.readouterr().out


def test_dominance_violation_detected():
    df = pd.DataFrame({
        "state": ["s", "s", "s"],
        "label": ["UCS", "A* (misplaced)", "A* (manhattan)"],
        "expanded": [10, 5, 7],
    })
    bad = summarize.dominance_violations(df)
    assert len(bad) == 1
    assert bad.iloc[0]["informed"] == "A* (manhattan)"
    assert bad.iloc[0]["weaker"] == "A* (misplaced)"


def test_plot_saves_png(tmp_path):
    out = _write_run(tmp_path)
    plot.main([str(out), "--save", str(tmp_path / "plots")])
    assert (tmp_path / "plots" / "run_combined.png").exists()


def test_visualize_frames(tmp_path):
    start = scramble(3, seed=2)
    res = a_star(start, GOAL, "manhattan")
    frames = visualize_path.save_frames(start, res.path, tmp_path)
    assert len(frames) == len(res.path) + 1
    assert all(p.exists() for p in frames)


def test_visualize_reports_unsolvable(tmp_path, capsys, monkeypatch):
    class Exhausted:
        solved = False
        path = ""
    monkeypatch.setattr(visualize_path, "a_star", lambda *a, **k: Exhausted())
    assert visualize_path.main(["213456780", "--outdir", str(tmp_path)]) == 1
    assert "No path" in capsys.readouterr().out
