"""In-memory stores for already-loaded event collections."""

from dataclasses import replace
from typing import Any, Iterable

from event_analytics.domain import Event, EventStatus, Notification, RegisteredUser
from event_analytics.domain.errors import EventNotFoundError
from event_analytics.stores.interfaces import EventStore, NotificationFeed


class InMemoryEventStore(EventStore):
    """Dictionary-backed event store preserving insertion order."""

    def __init__(
        self,
        events: Iterable[Event] = (),
        registrations: dict[str, list[RegisteredUser]] | None = None,
    ) -> None:
        self._events: dict[str, Event] = {event.id: event for event in events}
        self._registrations = {k: list(v) for k, v in (registrations or {}).items()}

    def add_event(self, event: Event) -> None:
        self._events[event.id] = event

    def add_registration(self, event_id: str, user: RegisteredUser) -> None:
        self._registrations.setdefault(event_id, []).append(user)

    def list_events(self) -> list[Event]:
        return list(self._events.values())

    def get_event(self, event_id: str) -> Event | None:
        return self._events.get(event_id)

    def get_registered_users(self, event_id: str) -> list[RegisteredUser]:
        return list(self._registrations.get(event_id, []))

    def update_event(self, event_id: str, **changes: Any) -> Event:
        event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        updated = replace(event, **changes)
        self._events[event_id] = updated
        return updated

    def cancel_event(self, event_id: str) -> Event:
        return self.update_event(event_id, status=EventStatus.CANCELLED)


class InMemoryNotificationFeed(NotificationFeed):
    """Notification feed that keeps the newest record first."""

    def __init__(self, notifications: Iterable[Notification] = ()) -> None:
        self._notifications: list[Notification] = []
        for notification in notifications:
            self.add_notification(notification)

    def add_notification(self, notification: Notification) -> None:
        self._notifications.insert(0, notification)

    def get_event_notifications(self, event_id: str) -> list[Notification]:
        return [n for n in self._notifications if n.event_id == event_id]
