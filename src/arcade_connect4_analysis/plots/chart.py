from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd


def _save_or_show(fig, outdir: Path, filename: str, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / filename
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_depth_profile(profile: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Search cost (log scale) and score rate against depth, side by side."""
    if profile.empty:
        return None

    depths = profile.index.to_numpy()
    fig, (cost, strength) = plt.subplots(1, 2, figsize=(10, 4))

    cost.semilogy(depths, profile["nodes_per_move"], marker="o")
    cost.set_title("nodes searched per move")
    cost.set_xlabel("depth (plies)")
    cost.set_xticks(depths)

    strength.plot(depths, profile["score_rate"], marker="o", color="tab:orange")
    strength.set_ylim(0, 1)
    strength.set_title("score rate (1 win, 0.5 draw)")
    strength.set_xlabel("depth (plies)")
    strength.set_xticks(depths)

    return _save_or_show(fig, outdir, "depth_profile.png", show)


def plot_ranking(ranked: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if ranked.empty:
        return None

    ordered = ranked.iloc[::-1]
    fig, ax = plt.subplots(figsize=(7, 0.5 * len(ordered) + 1.5))
    ax.barh(ordered["name"].astype(str), ordered["score_rate"])
    ax.set_xlim(0, 1)
    ax.set_xlabel("score rate")
    ax.set_title("benchmark standings")

    return _save_or_show(fig, outdir, "ranking.png", show)
