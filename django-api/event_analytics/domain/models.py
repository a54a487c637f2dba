"""Domain models for the records the analytics layer reads.

These are pure domain objects. Django ORM models live in
event_analytics/models.py (persistence layer) and are mapped onto these by
the stores.
"""

from dataclasses import dataclass
from datetime import datetime

from event_analytics.domain.value_objects import EventStatus, PaymentStatus


@dataclass(frozen=True)
class TicketType:
    """A ticket tier configured on an event."""

    name: str
    price: float | None = None
    available: int = 0
    sold: int | None = None
    description: str | None = None


@dataclass(frozen=True)
class Rating:
    """A 1-5 review left on an event."""

    rating: float
    comment: str | None = None
    created_at: datetime | None = None
    user_name: str | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.rating <= 5:
            raise ValueError("Rating must be between 1 and 5")


@dataclass(frozen=True)
class Creator:
    """Reference to the user that created an event."""

    id: str
    name: str | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: str
    title: str
    creator: Creator | None
    capacity: int = 0
    views: int = 0
    ticket_types: tuple[TicketType, ...] = ()
    ratings: tuple[Rating, ...] = ()
    status: EventStatus = EventStatus.ACTIVE
    date: datetime | None = None


@dataclass(frozen=True)
class RegistrationData:
    """Registration payload attached to a registration notification."""

    ticket_type: str
    payment_status: PaymentStatus
    user_name: str | None = None
    user_email: str | None = None
    payment_method: str | None = None
    registration_date: datetime | None = None


@dataclass(frozen=True)
class Notification:
    """Immutable activity record produced by the notification feed.

    ``type`` is usually one of ActivityType's values, but the feed may carry
    other tags (payment, event_update, info); those are passed through as-is.
    """

    id: str
    type: str
    created_at: datetime
    event_id: str | None = None
    title: str = ""
    message: str = ""
    registration_data: RegistrationData | None = None


@dataclass(frozen=True)
class RegisteredUser:
    """An attendee registered for an event."""

    id: str
    name: str
    email: str
    ticket_type: str
    payment_status: PaymentStatus
    registration_date: datetime | None = None


@dataclass(frozen=True)
class Actor:
    """The authenticated user viewing their own dashboard."""

    id: str
    name: str | None = None
