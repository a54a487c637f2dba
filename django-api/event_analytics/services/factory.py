"""Wiring of calculators and schedulers onto the Django-backed stores."""

from django.conf import settings

from event_analytics.domain import Actor
from event_analytics.services.event_stats import EventStatsCalculator
from event_analytics.services.owner_analytics import OwnerAnalyticsService
from event_analytics.services.scheduler import StatsUpdateScheduler
from event_analytics.stores.django_store import DjangoEventStore, DjangoNotificationFeed


def build_calculator() -> EventStatsCalculator:
    return EventStatsCalculator(DjangoEventStore(), DjangoNotificationFeed())


def build_stats_scheduler(actor: Actor | None) -> StatsUpdateScheduler:
    return StatsUpdateScheduler(
        build_calculator(),
        actor=actor,
        debounce_seconds=settings.STATS_DEBOUNCE_SECONDS,
    )


def build_owner_analytics(actor: Actor | None) -> OwnerAnalyticsService:
    return OwnerAnalyticsService(
        build_calculator(),
        actor=actor,
        poll_interval=settings.OWNER_ANALYTICS_POLL_SECONDS,
    )
