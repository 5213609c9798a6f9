from __future__ import annotations

from pathlib import Path

import pandas as pd

# Raw totals written by arcade_connect4.scripts.benchmark; every rate is
# recomputed from these rather than trusted from the file.
TOTALS = ["games", "wins", "draws", "losses", "points", "moves", "time_ms", "nodes"]
REQUIRED = ["name", "depth", "games", "points", "moves", "time_ms", "nodes"]

RESULTS_GLOB = "benchmark_results_*.csv"


def read_benchmark(path: Path) -> pd.DataFrame:
    if not path.is_file():
        raise FileNotFoundError(f"No benchmark results at {path}")

    df = pd.read_csv(path, skipinitialspace=True)

    missing = [c for c in REQUIRED if c not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is not a benchmark export, missing: {', '.join(missing)}")

    df = df.dropna(subset=["name"]).copy()
    present = [c for c in TOTALS if c in df.columns]
    df[present] = df[present].apply(pd.to_numeric, errors="coerce").fillna(0)
    df["depth"] = pd.to_numeric(df["depth"], errors="coerce").fillna(0).astype(int)

    return df.reset_index(drop=True)


def newest_results(results_dir: Path) -> Path:
    """Latest export in ``results_dir``; the timestamp in the name sorts."""
    newest = max(results_dir.glob(RESULTS_GLOB), default=None, key=lambda p: p.name)
    if newest is None:
        raise FileNotFoundError(f"No {RESULTS_GLOB} files in {results_dir}")
    return newest
