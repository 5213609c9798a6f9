from __future__ import annotations

import random

import pytest

from arcade_connect4.ai.minimax_agent import MinimaxAgent
from arcade_connect4.ai.random_agent import RandomAgent
from arcade_connect4.scripts import benchmark
from arcade_connect4.scripts.bench_scoring import add_result, avg_ms_per_move, ppg, wilson_lcb
from arcade_connect4.scripts.bench_types import Agg, Entrant
from arcade_connect4_analysis.io.benchmark_csv import read_benchmark
from arcade_connect4_analysis.metrics.depth_profile import depth_profile


def _small_roster(max_depth=1):
    return [
        Entrant(
            "Minimax (d1)",
            lambda seed: MinimaxAgent(name="Minimax (d1)", depth=1, rng=random.Random(seed)),
            depth=1,
        ),
        Entrant("Random A", lambda seed: RandomAgent(name="Random A", rng=random.Random(seed))),
        Entrant("Random B", lambda seed: RandomAgent(name="Random B", rng=random.Random(seed))),
    ]


class TestScoring:
    def test_add_result_points(self):
        a, b = Agg(), Agg()
        add_result(a, b, "first")
        add_result(a, b, "draw")
        add_result(a, b, "second")

        assert (a.games, a.wins, a.draws, a.losses) == (3, 1, 1, 1)
        assert (b.games, b.wins, b.draws, b.losses) == (3, 1, 1, 1)
        assert a.points == b.points == 1.5
        assert ppg(a) == 0.5

    def test_empty_agg(self):
        assert ppg(Agg()) == 0.0
        assert avg_ms_per_move(Agg()) == 0.0
        assert wilson_lcb(0.5, 0, 1.28) == 0.0

    def test_wilson_lcb_is_below_rate(self):
        lcb = wilson_lcb(0.75, 20, 1.28)
        assert 0.0 < lcb < 0.75
        # more games, tighter bound
        assert wilson_lcb(0.75, 200, 1.28) > lcb


def test_run_benchmark_round_robin():
    table = benchmark.run_benchmark(_small_roster(), games_per_pair=2, seed=7)

    # 3 pairs, 2 games each, every entrant in 2 pairs
    assert all(a.games == 4 for a in table.values())
    assert sum(a.wins for a in table.values()) == sum(a.losses for a in table.values())
    assert sum(a.points for a in table.values()) == pytest.approx(6.0)
    assert table["Minimax (d1)"].nodes > 0
    assert table["Random A"].nodes == 0


def test_run_benchmark_is_repeatable():
    first = benchmark.run_benchmark(_small_roster(), games_per_pair=2, seed=11)
    second = benchmark.run_benchmark(_small_roster(), games_per_pair=2, seed=11)
    assert {k: (v.wins, v.draws) for k, v in first.items()} == {k: (v.wins, v.draws) for k, v in second.items()}


def test_export_and_reload(tmp_path):
    table = benchmark.run_benchmark(_small_roster(), games_per_pair=2, seed=3)
    rows = benchmark.result_rows(table)
    path = benchmark.export_csv(rows, tmp_path / "results")

    assert path.name.startswith("benchmark_results_")
    df = read_benchmark(path)
    assert list(df.columns) == benchmark.CSV_COLUMNS
    assert dict(zip(df["name"], df["depth"])) == {"Minimax (d1)": 1, "Random A": 0, "Random B": 0}
    assert depth_profile(df).index.tolist() == [1]
    assert set(df["name"]) == {"Minimax (d1)", "Random A", "Random B"}
    assert df["games"].tolist() == [4, 4, 4]


def test_result_rows_sorted_by_strength():
    table = {
        "weak": Agg(games=10, points=2.0, wins=2, losses=8),
        "strong": Agg(games=10, points=9.0, wins=9, losses=1),
    }
    rows = benchmark.result_rows(table)
    assert [r["name"] for r in rows] == ["strong", "weak"]
    assert rows[0]["ppg"] == 0.9


def test_main_writes_csv(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(benchmark, "build_roster", _small_roster)

    code = benchmark.main(["--games", "1", "--results-dir", str(tmp_path)])

    assert code == 0
    assert len(list(tmp_path.glob("benchmark_results_*.csv"))) == 1
    assert "Minimax (d1)" in capsys.readouterr().out


def test_roster_has_one_entrant_per_depth():
    roster = benchmark.build_roster(3)
    assert [e.depth for e in roster] == [3, 2, 1, 0]
    assert [e.name for e in roster] == ["Minimax (d3)", "Minimax (d2)", "Minimax (d1)", "Random AI"]
    assert benchmark.build_roster()[0].name == "Arcade AI (d4)"
    assert roster[0].make(1).depth == 3


def test_main_passes_max_depth(monkeypatch, capsys):
    seen = []

    def roster(max_depth):
        seen.append(max_depth)
        return _small_roster()

    monkeypatch.setattr(benchmark, "build_roster", roster)
    benchmark.main(["--games", "1", "--max-depth", "2", "--no-csv"])

    assert seen == [2]
    assert "Saved results" not in capsys.readouterr().out
