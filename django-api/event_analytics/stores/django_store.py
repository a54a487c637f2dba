"""Django ORM implementation of the EventStore and NotificationFeed."""

import logging
from typing import Any

from django.core.exceptions import ValidationError
from django.db.models import Q

from event_analytics import models
from event_analytics.domain import (
    Actor,
    Creator,
    Event,
    EventStatus,
    Notification,
    PaymentStatus,
    Rating,
    RegisteredUser,
    RegistrationData,
    TicketType,
    owns_event,
)
from event_analytics.domain.errors import EventNotFoundError
from event_analytics.stores.interfaces import EventStore, NotificationFeed

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"title", "capacity", "views", "status", "date"}


def _to_domain_ratings(row: models.Event) -> tuple[Rating, ...]:
    ratings = []
    for rating in row.ratings.all():
        try:
            ratings.append(
                Rating(
                    rating=rating.rating,
                    comment=rating.comment or None,
                    created_at=rating.created_at,
                    user_name=rating.user_name or None,
                )
            )
        except ValueError:
            logger.warning(
                "Skipping rating %s on event %s: value %s out of range",
                rating.pk,
                row.id,
                rating.rating,
            )
    return tuple(ratings)


def _to_domain_event(row: models.Event) -> Event:
    return Event(
        id=str(row.id),
        title=row.title,
        creator=Creator(id=row.creator_id, name=row.creator_name or None),
        capacity=row.capacity,
        views=row.views,
        ticket_types=tuple(
            TicketType(
                name=ticket.name,
                price=float(ticket.price),
                available=ticket.available,
                sold=ticket.sold,
                description=ticket.description or None,
            )
            for ticket in row.ticket_types.all()
        ),
        ratings=_to_domain_ratings(row),
        status=EventStatus(row.status),
        date=row.date,
    )


def _to_registration_data(row: models.Registration) -> RegistrationData:
    return RegistrationData(
        ticket_type=row.ticket_type,
        payment_status=PaymentStatus(row.payment_status),
        user_name=row.user_name,
        user_email=row.user_email,
        payment_method=row.payment_method or None,
        registration_date=row.registration_date,
    )


class DjangoEventStore(EventStore):
    """Relational event store using the Django ORM."""

    def _queryset(self):
        return models.Event.objects.prefetch_related("ticket_types", "ratings")

    def _get_row(self, event_id: str) -> models.Event | None:
        try:
            return self._queryset().get(pk=event_id)
        except (models.Event.DoesNotExist, ValidationError):
            return None

    def list_events(self) -> list[Event]:
        return [_to_domain_event(row) for row in self._queryset()]

    def list_events_for(self, actor: Actor) -> list[Event]:
        # name matches are loaded too so owns_event can report them
        query = Q(creator_id=str(actor.id))
        if actor.name:
            query |= Q(creator_name=actor.name)
        rows = self._queryset().filter(query)
        return [event for event in map(_to_domain_event, rows) if owns_event(actor, event)]

    def get_event(self, event_id: str) -> Event | None:
        row = self._get_row(event_id)
        return _to_domain_event(row) if row is not None else None

    def get_registered_users(self, event_id: str) -> list[RegisteredUser]:
        if self._get_row(event_id) is None:
            return []
        return [
            RegisteredUser(
                id=str(row.id),
                name=row.user_name,
                email=row.user_email,
                ticket_type=row.ticket_type,
                payment_status=PaymentStatus(row.payment_status),
                registration_date=row.registration_date,
            )
            for row in models.Registration.objects.filter(event_id=event_id)
        ]

    def update_event(self, event_id: str, **changes: Any) -> Event:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        row = self._get_row(event_id)
        if row is None:
            raise EventNotFoundError(event_id)
        for name, value in changes.items():
            setattr(row, name, value.value if isinstance(value, EventStatus) else value)
        row.save(update_fields=[*changes, "updated_at"])
        return _to_domain_event(row)

    def cancel_event(self, event_id: str) -> Event:
        return self.update_event(event_id, status=EventStatus.CANCELLED)


class DjangoNotificationFeed(NotificationFeed):
    """Notification feed read from the ORM, newest first."""

    def get_event_notifications(self, event_id: str) -> list[Notification]:
        try:
            rows = list(
                models.Notification.objects.filter(event_id=event_id)
                .select_related("registration")
                .order_by("-created_at")
            )
        except ValidationError:
            return []
        return [
            Notification(
                id=str(row.id),
                type=row.type,
                created_at=row.created_at,
                event_id=str(row.event_id),
                title=row.title,
                message=row.message,
                registration_data=(
                    _to_registration_data(row.registration) if row.registration else None
                ),
            )
            for row in rows
        ]
