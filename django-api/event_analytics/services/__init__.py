from event_analytics.services.event_stats import EventStatsCalculator
from event_analytics.services.owner_analytics import OwnerAnalyticsService
from event_analytics.services.scheduler import SchedulerState, StatsUpdateScheduler

__all__ = [
    "EventStatsCalculator",
    "OwnerAnalyticsService",
    "SchedulerState",
    "StatsUpdateScheduler",
]
