from hud.stats_hud import StatsHud

__all__ = ["StatsHud"]
