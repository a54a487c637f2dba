"""Derived, non-persisted statistics snapshots.

Snapshots are recomputed from scratch on every evaluation; nothing here is
ever mutated in place.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class ActivityEntry:
    timestamp: datetime
    type: str
    data: Any = None


@dataclass(frozen=True)
class PaymentStats:
    paid: int = 0
    pending: int = 0
    refunded: int = 0
    total_revenue: float = 0


@dataclass(frozen=True)
class TicketStats:
    ticket_type: str
    sold: int
    available: int
    revenue: float


@dataclass(frozen=True)
class EventStats:
    """Statistics for a single event."""

    event_id: str
    total_views: int
    total_registrations: int
    conversion_rate: float
    average_rating: float
    recent_activity: tuple[ActivityEntry, ...]
    payment_stats: PaymentStats
    ticket_stats: tuple[TicketStats, ...]


@dataclass(frozen=True)
class RealTimeStats:
    """Aggregate statistics across every event owned by the current actor."""

    total_events: int = 0
    total_views: int = 0
    total_registrations: int = 0
    total_revenue: float = 0
    conversion_rate: float = 0
    average_rating: float = 0
    recent_activity: tuple[ActivityEntry, ...] = ()
    event_stats: dict[str, EventStats] = field(default_factory=dict)
    is_loading: bool = False
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def empty(cls, is_loading: bool = False, now: datetime | None = None) -> "RealTimeStats":
        """Zeroed snapshot, used before the first computation and for anonymous actors."""
        return cls(is_loading=is_loading, last_updated=now or datetime.now(timezone.utc))

    def with_loading(self, is_loading: bool) -> "RealTimeStats":
        return replace(self, is_loading=is_loading)

    def for_event(self, event_id: str) -> "ScopedStats":
        """Narrow the snapshot to one event, exposing it as ``current_event_stats``."""
        current = self.event_stats.get(event_id)
        return ScopedStats(
            stats=replace(self, event_stats={event_id: current} if current else {}),
            current_event_stats=current,
        )


@dataclass(frozen=True)
class ScopedStats:
    stats: RealTimeStats
    current_event_stats: EventStats | None


@dataclass(frozen=True)
class MonthlyGrowth:
    """Month-over-month deltas. Only real data is reported, so these stay zero."""

    views: float = 0
    registrations: float = 0
    conversion_rate: float = 0
    rating: float = 0


@dataclass(frozen=True)
class OwnerAnalytics:
    """Summary-card analytics for one actor's events."""

    total_events: int = 0
    total_views: int = 0
    total_registrations: int = 0
    total_revenue: float = 0
    conversion_rate: float = 0
    average_rating: float = 0
    recent_activity: tuple[ActivityEntry, ...] = ()
    upcoming_events_count: int = 0
    active_events_count: int = 0
    today_views: int = 0
    today_registrations: int = 0
    monthly_growth: MonthlyGrowth = field(default_factory=MonthlyGrowth)
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
