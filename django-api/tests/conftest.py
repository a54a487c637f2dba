"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from event_analytics.domain import Actor, Event, TicketType
from event_analytics.services import EventStatsCalculator
from event_analytics.stores import InMemoryEventStore, InMemoryNotificationFeed
from factories import BASE_TIME, make_event, registration


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def actor() -> Actor:
    return Actor(id="owner-1", name="Olivia")


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def feed() -> InMemoryNotificationFeed:
    return InMemoryNotificationFeed()


@pytest.fixture
def calculator(store, feed) -> EventStatsCalculator:
    return EventStatsCalculator(store, feed, clock=lambda: BASE_TIME)


@pytest.fixture
def event_a(store, feed) -> Event:
    """100 views and five paid General registrations at 10 each."""
    event = make_event(
        "A",
        views=100,
        ticket_types=(TicketType(name="General", price=10, available=50),),
    )
    store.add_event(event)
    for minute in range(5):
        feed.add_notification(registration("A", minute))
    return event


@pytest.fixture
def event_b(store) -> Event:
    """No views and no registrations."""
    event = make_event("B", views=0)
    store.add_event(event)
    return event
