from __future__ import annotations

import pandas as pd


def _safe_div(num: pd.Series, den: pd.Series) -> pd.Series:
    return (num / den.where(den > 0)).fillna(0.0)


def with_rates(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    out["score_rate"] = _safe_div(out["points"], out["games"])
    out["nodes_per_move"] = _safe_div(out["nodes"], out["moves"])
    out["ms_per_move"] = _safe_div(out["time_ms"], out["moves"])
    return out


def ranking(df: pd.DataFrame) -> pd.DataFrame:
    """Best score rate first; cheaper search wins ties."""
    out = with_rates(df).sort_values(["score_rate", "nodes_per_move"], ascending=[False, True])
    out = out[["name", "depth", "games", "score_rate", "nodes_per_move", "ms_per_move"]].reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def depth_profile(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per search depth (depth 0 entrants don't search and are left out).

    ``growth`` is how many times more nodes a move costs than one ply
    shallower: the effective branching factor the pruning leaves.
    """
    searching = df[df["depth"] > 0]
    totals = searching.groupby("depth")[["games", "points", "moves", "time_ms", "nodes"]].sum().sort_index()

    profile = with_rates(totals)[["games", "score_rate", "nodes_per_move", "ms_per_move"]].copy()
    profile["growth"] = profile["nodes_per_move"] / profile["nodes_per_move"].shift(1)
    return profile
