from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from datetime import datetime
from itertools import combinations
from pathlib import Path
from typing import Dict, List, Sequence

from arcade_connect4.ai.minimax_agent import MinimaxAgent
from arcade_connect4.ai.random_agent import RandomAgent
from arcade_connect4.config import RESULTS_DIR, SEARCH_DEPTH
from arcade_connect4.game.controller import play_headless
from arcade_connect4.game.state import Outcome
from arcade_connect4.types import COMPUTER, HUMAN

from .bench_scoring import add_result, avg_ms_per_move, avg_nodes_per_move, ppg, strength_score
from .bench_types import Agg, Entrant

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name", "depth",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "moves", "time_ms", "nodes",
    "avg_ms_per_move", "avg_nodes_per_move",
]


def _minimax_entrant(depth: int) -> Entrant:
    name = f"Arcade AI (d{depth})" if depth == SEARCH_DEPTH else f"Minimax (d{depth})"
    return Entrant(name, lambda seed: MinimaxAgent(name=name, depth=depth, rng=random.Random(seed)), depth=depth)


def build_roster(max_depth: int = SEARCH_DEPTH) -> List[Entrant]:
    """One minimax entrant per depth 1..max_depth plus the random baseline."""
    roster = [_minimax_entrant(d) for d in range(max_depth, 0, -1)]
    roster.append(Entrant("Random AI", lambda seed: RandomAgent(rng=random.Random(seed))))
    return roster


def _winner_key(outcome: Outcome) -> str:
    if outcome is Outcome.HUMAN_WON:
        return "first"
    if outcome is Outcome.COMPUTER_WON:
        return "second"
    return "draw"


def run_benchmark(
    roster: Sequence[Entrant],
    games_per_pair: int = 4,
    seed: int = 1234,
    opening_moves: int = 2,
) -> Dict[str, Agg]:
    """
    Round robin: every pair plays ``games_per_pair`` games, swapping who moves
    first each game. Each game gets its own seed so runs are repeatable.
    """
    table: Dict[str, Agg] = {e.name: Agg(depth=e.depth) for e in roster}

    for pair_idx, (a, b) in enumerate(combinations(roster, 2)):
        for g in range(games_per_pair):
            game_seed = seed + 1000 * pair_idx + g
            first, second = (a, b) if g % 2 == 0 else (b, a)

            outcome, stats = play_headless(
                first.make(game_seed + 101),
                second.make(game_seed + 202),
                rng=random.Random(game_seed),
                opening_moves=opening_moves,
            )

            add_result(table[first.name], table[second.name], _winner_key(outcome))
            for entrant, side in ((first, HUMAN), (second, COMPUTER)):
                agg = table[entrant.name]
                agg.moves += stats[side]["moves"]
                agg.time_ms += stats[side]["time_ms"]
                agg.nodes += stats[side]["nodes"]

            logger.info("%s vs %s (game %d): %s", first.name, second.name, g + 1, outcome.value)

    return table


def result_rows(table: Dict[str, Agg], z: float = 1.28) -> List[dict]:
    rows = []
    for name, a in table.items():
        rows.append({
            "name": name,
            "depth": a.depth,
            "games": a.games,
            "wins": a.wins,
            "draws": a.draws,
            "losses": a.losses,
            "points": a.points,
            "ppg": round(ppg(a), 4),
            "strength_wilson_lcb": round(strength_score(a, z), 4),
            "moves": a.moves,
            "time_ms": a.time_ms,
            "nodes": a.nodes,
            "avg_ms_per_move": round(avg_ms_per_move(a), 3),
            "avg_nodes_per_move": round(avg_nodes_per_move(a), 1),
        })
    rows.sort(key=lambda r: (-r["strength_wilson_lcb"], -r["ppg"]))
    return rows


def export_csv(rows: List[dict], results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = results_dir / f"benchmark_results_{stamp}.csv"
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        writer.writerows(rows)
    return path


def print_table(rows: List[dict]) -> None:
    print(f"{'rk':>2}  {'name':<20} {'G':>4} {'W':>4} {'D':>4} {'L':>4} {'ppg':>6} {'lcb':>6} {'ms/mv':>8} {'nodes/mv':>9}")
    for i, r in enumerate(rows, start=1):
        print(
            f"{i:>2}  {r['name']:<20} {r['games']:>4} {r['wins']:>4} {r['draws']:>4} {r['losses']:>4} "
            f"{r['ppg']:>6.3f} {r['strength_wilson_lcb']:>6.3f} {r['avg_ms_per_move']:>8.2f} {r['avg_nodes_per_move']:>9.1f}"
        )


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play the arcade Connect Four AI against baseline agents.")
    ap.add_argument("--games", type=int, default=4, help="Games per pairing (first move alternates)")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed for openings and agents")
    ap.add_argument("--opening-moves", type=int, default=2, help="Random discs played before the agents take over")
    ap.add_argument("--max-depth", type=int, default=SEARCH_DEPTH, help="Deepest minimax entrant (one entrant per depth 1..N)")
    ap.add_argument("--z", type=float, default=1.28, help="Z for the Wilson lower confidence bound")
    ap.add_argument("--results-dir", type=str, default=RESULTS_DIR, help="Where to write benchmark_results_*.csv")
    ap.add_argument("--no-csv", action="store_true", help="Skip CSV export")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    start = time.perf_counter()
    table = run_benchmark(
        build_roster(args.max_depth),
        games_per_pair=args.games,
        seed=args.seed,
        opening_moves=args.opening_moves,
    )
    rows = result_rows(table, z=args.z)

    print_table(rows)
    print(f"\nTotal runtime: {time.perf_counter() - start:.2f}s")

    if not args.no_csv:
        path = export_csv(rows, Path(args.results_dir))
        print(f"Saved results to: {path.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
