from .chart import plot_depth_profile, plot_ranking

__all__ = ["plot_depth_profile", "plot_ranking"]
