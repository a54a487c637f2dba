"""Enumerated domain values shared by records and snapshots."""

from enum import Enum


class EventStatus(str, Enum):
    """Lifecycle flag of an event."""

    ACTIVE = "active"
    UPCOMING = "upcoming"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    """Payment state attached to a registration."""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


class ActivityType(str, Enum):
    """Type tags of notification feed records the analytics layer understands."""

    VIEW = "view"
    REGISTRATION = "registration"
    RATING = "rating"
