from event_analytics.stores.interfaces import EventStore, NotificationFeed
from event_analytics.stores.memory_store import InMemoryEventStore, InMemoryNotificationFeed

__all__ = [
    "EventStore",
    "NotificationFeed",
    "InMemoryEventStore",
    "InMemoryNotificationFeed",
]
