"""Event statistics service - derives snapshots from loaded records.

Calculators:
- Depend only on interfaces (stores and feeds)
- Recompute every figure from scratch, nothing is cached
- Never raise for missing optional data, which defaults to zero or empty
"""

from datetime import datetime, timezone
from typing import Callable

from event_analytics.domain import (
    ActivityEntry,
    ActivityType,
    Actor,
    Event,
    EventStats,
    PaymentStats,
    PaymentStatus,
    RealTimeStats,
    TicketStats,
)
from event_analytics.stores.interfaces import EventStore, NotificationFeed

EVENT_ACTIVITY_LIMIT = 10
OVERALL_ACTIVITY_LIMIT = 20


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so mixed feeds stay comparable."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def conversion_rate(registrations: int, views: int) -> float:
    """Registrations per hundred views, zero when there are no views."""
    if views <= 0:
        return 0
    return registrations / views * 100


class EventStatsCalculator:
    """Computes per-event and per-actor statistics snapshots."""

    def __init__(
        self,
        store: EventStore,
        feed: NotificationFeed,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._store = store
        self._feed = feed
        self._clock = clock

    @property
    def store(self) -> EventStore:
        return self._store

    @property
    def feed(self) -> NotificationFeed:
        return self._feed

    def now(self) -> datetime:
        return self._clock()

    def owned_events(self, actor: Actor | None) -> list[Event]:
        """Return the events created by ``actor``."""
        if actor is None:
            return []
        return self._store.list_events_for(actor)

    def calculate_event_stats(self, event_id: str) -> EventStats | None:
        """Return the statistics snapshot for one event, or None if it is unknown."""
        event = self._store.get_event(event_id)
        if event is None:
            return None

        notifications = self._feed.get_event_notifications(event_id)
        registrations = [
            n.registration_data
            for n in notifications
            if n.type == ActivityType.REGISTRATION.value and n.registration_data is not None
        ]
        registration_count = sum(
            1 for n in notifications if n.type == ActivityType.REGISTRATION.value
        )

        statuses = [r.payment_status for r in registrations]
        ticket_stats = []
        total_revenue = 0
        for ticket in event.ticket_types:
            sold = sum(
                1
                for r in registrations
                if r.ticket_type == ticket.name and r.payment_status == PaymentStatus.PAID
            )
            revenue = sold * (ticket.price or 0)
            total_revenue += revenue
            ticket_stats.append(
                TicketStats(
                    ticket_type=ticket.name,
                    sold=sold,
                    available=max(0, (ticket.available or 0) - sold),
                    revenue=revenue,
                )
            )

        ratings = [r.rating for r in event.ratings]
        average_rating = sum(ratings) / len(ratings) if ratings else 0

        recent_activity = tuple(
            ActivityEntry(
                timestamp=n.created_at,
                type=n.type,
                data=n.registration_data or n,
            )
            for n in notifications[:EVENT_ACTIVITY_LIMIT]
        )

        return EventStats(
            event_id=event_id,
            total_views=event.views or 0,
            total_registrations=registration_count,
            conversion_rate=conversion_rate(registration_count, event.views or 0),
            average_rating=average_rating,
            recent_activity=recent_activity,
            payment_stats=PaymentStats(
                paid=statuses.count(PaymentStatus.PAID),
                pending=statuses.count(PaymentStatus.PENDING),
                refunded=statuses.count(PaymentStatus.REFUNDED),
                total_revenue=total_revenue,
            ),
            ticket_stats=tuple(ticket_stats),
        )

    def calculate_overall_stats(self, actor: Actor | None) -> RealTimeStats:
        """Fold the statistics of every event owned by ``actor`` into one snapshot.

        Conversion rate is recomputed from the summed totals and the average
        rating is weighted by the number of ratings on each event.
        """
        now = self._clock()
        if actor is None:
            return RealTimeStats.empty(now=now)

        events = self.owned_events(actor)
        event_stats: dict[str, EventStats] = {}
        total_views = 0
        total_registrations = 0
        total_revenue = 0
        rating_count = 0
        rating_sum = 0
        activity: list[ActivityEntry] = []

        for event in events:
            stats = self.calculate_event_stats(event.id)
            if stats is None:
                continue
            event_stats[event.id] = stats
            total_views += stats.total_views
            total_registrations += stats.total_registrations
            total_revenue += stats.payment_stats.total_revenue
            rating_count += len(event.ratings)
            rating_sum += sum(r.rating for r in event.ratings)
            activity.extend(stats.recent_activity)

        activity.sort(key=lambda entry: as_utc(entry.timestamp), reverse=True)

        return RealTimeStats(
            total_events=len(events),
            total_views=total_views,
            total_registrations=total_registrations,
            total_revenue=total_revenue,
            conversion_rate=conversion_rate(total_registrations, total_views),
            average_rating=rating_sum / rating_count if rating_count else 0,
            recent_activity=tuple(activity[:OVERALL_ACTIVITY_LIMIT]),
            event_stats=event_stats,
            is_loading=False,
            last_updated=now,
        )
