from event_analytics.handlers.views import EventStatsView, OverviewStatsView, OwnerAnalyticsView

__all__ = ["EventStatsView", "OverviewStatsView", "OwnerAnalyticsView"]
