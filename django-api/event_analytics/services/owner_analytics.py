"""Summary-card analytics for an actor's dashboard.

Unlike StatsUpdateScheduler this service recomputes immediately on every
input change and additionally re-polls on a fixed interval while started,
so it reflects upstream state it does not own.
"""

import asyncio
import contextlib
import logging
from datetime import datetime

from event_analytics.domain import (
    ActivityType,
    Actor,
    Event,
    EventStatus,
    MonthlyGrowth,
    OwnerAnalytics,
)
from event_analytics.services.event_stats import EventStatsCalculator, as_utc

logger = logging.getLogger(__name__)

DEFAULT_POLL_SECONDS = 60.0


class OwnerAnalyticsService:
    """Polling view-model over the aggregate statistics of one actor."""

    def __init__(
        self,
        calculator: EventStatsCalculator,
        actor: Actor | None = None,
        poll_interval: float = DEFAULT_POLL_SECONDS,
    ) -> None:
        self._calculator = calculator
        self._actor = actor
        self._poll_interval = poll_interval
        self._analytics = OwnerAnalytics(last_updated=calculator.now())
        self._is_loading = True
        self._task: asyncio.Task | None = None

    @property
    def analytics(self) -> OwnerAnalytics:
        return self._analytics

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_polling(self) -> bool:
        return self._task is not None and not self._task.done()

    def set_actor(self, actor: Actor | None) -> OwnerAnalytics:
        self._actor = actor
        return self.refresh_analytics()

    def inputs_changed(self) -> OwnerAnalytics:
        return self.refresh_analytics()

    def refresh_analytics(self) -> OwnerAnalytics:
        """Recompute now, outside the polling cadence."""
        self._is_loading = True
        try:
            self._analytics = self.compute()
        finally:
            self._is_loading = False
        return self._analytics

    def compute(self) -> OwnerAnalytics:
        now = as_utc(self._calculator.now())
        if self._actor is None:
            return OwnerAnalytics(last_updated=now)

        overall = self._calculator.calculate_overall_stats(self._actor)
        events = self._calculator.owned_events(self._actor)
        today_views, today_registrations = self._count_today(events, now)

        return OwnerAnalytics(
            total_events=overall.total_events,
            total_views=overall.total_views,
            total_registrations=overall.total_registrations,
            total_revenue=round(overall.total_revenue),
            conversion_rate=round(overall.conversion_rate, 1),
            average_rating=overall.average_rating,
            recent_activity=overall.recent_activity,
            upcoming_events_count=sum(
                1
                for event in events
                if event.date is not None
                and as_utc(event.date) >= now
                and event.status != EventStatus.CANCELLED
            ),
            active_events_count=sum(1 for event in events if event.status == EventStatus.ACTIVE),
            today_views=today_views,
            today_registrations=today_registrations,
            monthly_growth=MonthlyGrowth(),
            last_updated=now,
        )

    def _count_today(self, events: list[Event], now: datetime) -> tuple[int, int]:
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        views = registrations = 0
        for event in events:
            for notification in self._calculator.feed.get_event_notifications(event.id):
                if as_utc(notification.created_at) < midnight:
                    continue
                if notification.type == ActivityType.VIEW.value:
                    views += 1
                elif notification.type == ActivityType.REGISTRATION.value:
                    registrations += 1
        return views, registrations

    def start(self) -> None:
        """Compute once and begin polling on the running loop."""
        if self.is_polling:
            return
        self.refresh_analytics()
        self._task = asyncio.get_running_loop().create_task(self._poll())

    async def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _poll(self) -> None:
        while True:
            await asyncio.sleep(self._poll_interval)
            logger.debug("Polling owner analytics for actor %s", getattr(self._actor, "id", None))
            self.refresh_analytics()
