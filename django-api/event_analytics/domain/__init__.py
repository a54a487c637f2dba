from event_analytics.domain.models import (
    Actor,
    Creator,
    Event,
    Notification,
    Rating,
    RegisteredUser,
    RegistrationData,
    TicketType,
)
from event_analytics.domain.ownership import owns_event
from event_analytics.domain.snapshots import (
    ActivityEntry,
    EventStats,
    MonthlyGrowth,
    OwnerAnalytics,
    PaymentStats,
    RealTimeStats,
    ScopedStats,
    TicketStats,
)
from event_analytics.domain.value_objects import ActivityType, EventStatus, PaymentStatus

__all__ = [
    "Actor",
    "Creator",
    "Event",
    "Notification",
    "Rating",
    "RegisteredUser",
    "RegistrationData",
    "TicketType",
    "owns_event",
    "ActivityEntry",
    "EventStats",
    "MonthlyGrowth",
    "OwnerAnalytics",
    "PaymentStats",
    "RealTimeStats",
    "ScopedStats",
    "TicketStats",
    "ActivityType",
    "EventStatus",
    "PaymentStatus",
]
