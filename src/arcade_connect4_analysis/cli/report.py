from __future__ import annotations

import argparse
from pathlib import Path

from arcade_connect4.config import RESULTS_DIR

from ..io.benchmark_csv import newest_results, read_benchmark
from ..metrics.depth_profile import depth_profile, ranking
from ..plots import plot_depth_profile, plot_ranking


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Report on a benchmark_results_*.csv written by arcade-connect4-bench.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--csv", type=Path, help="Benchmark export to read")
    src.add_argument("--results-dir", type=Path, default=Path(RESULTS_DIR), help="Read the newest export in this directory")
    ap.add_argument("--outdir", type=Path, default=Path("figures"), help="Where figures are written")
    ap.add_argument("--show", action="store_true", help="Open figures in a window instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print the tables only")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    path = args.csv or newest_results(args.results_dir)
    df = read_benchmark(path)
    ranked = ranking(df)
    profile = depth_profile(df)

    print(f"Benchmark: {path} ({len(df)} entrants, {int(df['games'].sum()) // 2} games)")
    print("\nStandings")
    print(ranked.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    if not profile.empty:
        print("\nCost and strength by depth")
        print(profile.to_string(float_format=lambda v: f"{v:.2f}"))

    if args.no_plots:
        return 0

    saved = [
        plot_depth_profile(profile, args.outdir, show=args.show),
        plot_ranking(ranked, args.outdir, show=args.show),
    ]
    for p in saved:
        if p is not None:
            print(f"wrote {p}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
