"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. The analytics layer only
reads through them; mutations exist for the owner actions (edit, cancel).
"""

from abc import ABC, abstractmethod
from typing import Any

from event_analytics.domain import Actor, Event, Notification, RegisteredUser, owns_event


class EventStore(ABC):
    """Interface for event and registration persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return every loaded event."""
        ...

    def list_events_for(self, actor: Actor) -> list[Event]:
        """Return the events created by ``actor``.

        Stores that can filter by creator should override this.
        """
        return [event for event in self.list_events() if owns_event(actor, event)]

    @abstractmethod
    def get_event(self, event_id: str) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_registered_users(self, event_id: str) -> list[RegisteredUser]:
        """Return the users registered for an event, empty when unknown."""
        ...

    @abstractmethod
    def update_event(self, event_id: str, **changes: Any) -> Event:
        """Apply field changes to an event and return the updated record.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        ...

    @abstractmethod
    def cancel_event(self, event_id: str) -> Event:
        """Mark an event as cancelled.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        ...


class NotificationFeed(ABC):
    """Interface for the per-event activity feed."""

    @abstractmethod
    def get_event_notifications(self, event_id: str) -> list[Notification]:
        """Return the notifications for an event, most recent first."""
        ...
