"""Tests for OwnerAnalyticsService.

Run with: pytest tests/test_owner_analytics.py -v
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from event_analytics.domain import Actor, EventStatus, MonthlyGrowth, Notification
from event_analytics.services import EventStatsCalculator, OwnerAnalyticsService
from factories import BASE_TIME, activity, make_event, registration


@pytest.fixture
def service(calculator, actor) -> OwnerAnalyticsService:
    return OwnerAnalyticsService(calculator, actor=actor, poll_interval=60)


class TestCompute:
    """Tests for the summary figures."""

    def test_starts_loading_with_zeroed_analytics(self, service):
        assert service.is_loading is True
        assert service.analytics.total_events == 0

    def test_refresh_folds_aggregate(self, service, event_a, event_b):
        analytics = service.refresh_analytics()

        assert service.is_loading is False
        assert analytics.total_events == 2
        assert analytics.total_views == 100
        assert analytics.total_registrations == 5
        assert analytics.total_revenue == 50
        assert analytics.conversion_rate == 5.0

    def test_conversion_rounded_to_one_decimal(self, service, store, feed):
        store.add_event(make_event("E", views=3))
        feed.add_notification(registration("E", 1))

        assert service.refresh_analytics().conversion_rate == 33.3

    def test_monthly_growth_is_zero(self, service, event_a):
        assert service.refresh_analytics().monthly_growth == MonthlyGrowth()

    def test_status_counts(self, service, store):
        store.add_event(make_event("past", date=BASE_TIME - timedelta(days=1)))
        store.add_event(make_event("soon", date=BASE_TIME + timedelta(days=3)))
        store.add_event(
            make_event("off", date=BASE_TIME + timedelta(days=3), status=EventStatus.CANCELLED)
        )
        store.add_event(make_event("undated", status=EventStatus.COMPLETED))

        analytics = service.refresh_analytics()

        assert analytics.upcoming_events_count == 1
        assert analytics.active_events_count == 2

    def test_naive_event_dates_are_treated_as_utc(self, service, store):
        naive = (BASE_TIME + timedelta(hours=1)).replace(tzinfo=None)
        store.add_event(make_event("naive", date=naive))

        assert service.refresh_analytics().upcoming_events_count == 1

    def test_today_counts_use_feed_records_since_midnight(self, service, store, feed):
        store.add_event(make_event("E"))
        feed.add_notification(activity("E", -13 * 60, "view"))  # previous day
        feed.add_notification(activity("E", -30, "view"))
        feed.add_notification(activity("E", -20, "view"))
        feed.add_notification(registration("E", -10))

        analytics = service.refresh_analytics()

        assert analytics.today_views == 2
        assert analytics.today_registrations == 1

    def test_no_actor_is_zeroed(self, calculator, event_a):
        service = OwnerAnalyticsService(calculator)

        analytics = service.refresh_analytics()

        assert analytics.total_events == 0
        assert analytics.recent_activity == ()
        assert analytics.last_updated == BASE_TIME

    def test_set_actor_recomputes(self, service, store):
        store.add_event(make_event("theirs", owner="owner-2", views=11))

        analytics = service.set_actor(Actor(id="owner-2"))

        assert analytics.total_views == 11

    def test_inputs_changed_recomputes_immediately(self, service, store):
        service.refresh_analytics()
        store.add_event(make_event("new", views=8))

        assert service.inputs_changed().total_views == 8


class TestPolling:
    """Tests for the fixed-interval refresh."""

    @pytest.mark.asyncio
    async def test_polls_on_interval_until_stopped(self, calculator, actor, store):
        service = OwnerAnalyticsService(calculator, actor=actor, poll_interval=0.01)
        service.start()
        assert service.is_polling
        assert service.analytics.total_views == 0

        store.add_event(make_event("E", views=42))
        await asyncio.sleep(0.1)
        assert service.analytics.total_views == 42

        await service.stop()
        assert not service.is_polling

        store.add_event(make_event("F", views=1))
        await asyncio.sleep(0.05)
        assert service.analytics.total_views == 42

    @pytest.mark.asyncio
    async def test_start_twice_keeps_one_task(self, service):
        service.start()
        task = service._task
        service.start()

        assert service._task is task
        await service.stop()

    @pytest.mark.asyncio
    async def test_stop_without_start_is_noop(self, service):
        await service.stop()
        assert not service.is_polling


def test_midnight_boundary_uses_clock(store, feed, actor):
    """The day boundary follows the injected clock, not the wall clock."""
    late = datetime(2024, 9, 29, 23, 59, tzinfo=timezone.utc)
    calculator = EventStatsCalculator(store, feed, clock=lambda: late)
    store.add_event(make_event("E"))
    feed.add_notification(
        Notification(
            id="n1",
            type="view",
            created_at=datetime(2024, 9, 29, 0, 1, tzinfo=timezone.utc),
            event_id="E",
        )
    )

    analytics = OwnerAnalyticsService(calculator, actor=actor).refresh_analytics()

    assert analytics.today_views == 1
