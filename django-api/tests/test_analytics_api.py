"""Integration tests for the analytics REST endpoints.

Run with: pytest tests/test_analytics_api.py -v
"""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth.models import User
from django.utils import timezone
from rest_framework.test import APIClient

from event_analytics import models


@pytest.fixture
def owner(db) -> User:
    return User.objects.create_user(username="olivia", password="pass12345", first_name="Olivia")


@pytest.fixture
def owner_client(api_client: APIClient, owner: User) -> APIClient:
    api_client.force_authenticate(user=owner)
    return api_client


@pytest.fixture
def owned_event(owner) -> models.Event:
    """100 views and five paid General registrations at 10 each."""
    event = models.Event.objects.create(
        title="Meetup",
        creator_id=str(owner.pk),
        creator_name="Olivia",
        views=100,
        date=timezone.now() + timedelta(days=7),
    )
    models.TicketType.objects.create(event=event, name="General", price=Decimal("10"), available=50)
    now = timezone.now()
    for i in range(5):
        reg = models.Registration.objects.create(
            event=event,
            user_id=f"u{i}",
            user_name=f"User {i}",
            user_email=f"u{i}@example.com",
            ticket_type="General",
            ticket_price=Decimal("10"),
            payment_status="paid",
        )
        models.Notification.objects.create(
            event=event, type="registration", registration=reg, created_at=now - timedelta(minutes=i)
        )
    return event


@pytest.fixture
def foreign_event(db) -> models.Event:
    return models.Event.objects.create(title="Theirs", creator_id="999", creator_name="Olivia", views=5)


@pytest.mark.django_db
class TestOverview:
    """Tests for GET /api/analytics/overview"""

    def test_anonymous_gets_zeroed_snapshot(self, api_client, owned_event):
        response = api_client.get("/api/analytics/overview")

        assert response.status_code == 200
        data = response.json()
        assert data["total_events"] == 0
        assert data["recent_activity"] == []
        assert data["event_stats"] == {}
        assert data["is_loading"] is False

    def test_owner_gets_aggregate(self, owner_client, owned_event, foreign_event):
        response = owner_client.get("/api/analytics/overview")

        assert response.status_code == 200
        data = response.json()
        assert data["total_events"] == 1
        assert data["total_views"] == 100
        assert data["total_registrations"] == 5
        assert data["conversion_rate"] == 5.0
        assert data["total_revenue"] == 50
        assert list(data["event_stats"]) == [str(owned_event.id)]
        assert len(data["recent_activity"]) == 5
        assert data["recent_activity"][0]["data"]["payment_status"] == "paid"


@pytest.mark.django_db
class TestEventStats:
    """Tests for GET /api/analytics/events/{id}"""

    def test_returns_event_stats(self, owner_client, owned_event):
        response = owner_client.get(f"/api/analytics/events/{owned_event.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["conversion_rate"] == 5.0
        assert data["payment_stats"]["total_revenue"] == 50
        assert data["ticket_stats"] == [
            {"ticket_type": "General", "sold": 5, "available": 45, "revenue": 50.0}
        ]

    def test_unknown_event_is_404(self, owner_client):
        response = owner_client.get(f"/api/analytics/events/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_malformed_id_is_404(self, owner_client):
        assert owner_client.get("/api/analytics/events/not-a-uuid").status_code == 404

    def test_other_owners_event_is_404(self, owner_client, foreign_event):
        response = owner_client.get(f"/api/analytics/events/{foreign_event.id}")

        assert response.status_code == 404


@pytest.mark.django_db
class TestSummary:
    """Tests for GET /api/analytics/summary"""

    def test_summary_cards(self, owner_client, owned_event):
        response = owner_client.get("/api/analytics/summary")

        assert response.status_code == 200
        data = response.json()
        assert data["total_events"] == 1
        assert data["upcoming_events_count"] == 1
        assert data["active_events_count"] == 1
        assert data["today_registrations"] >= 1
        assert data["monthly_growth"] == {
            "views": 0.0,
            "registrations": 0.0,
            "conversion_rate": 0.0,
            "rating": 0.0,
        }

    def test_anonymous_summary_is_zeroed(self, api_client, owned_event):
        data = api_client.get("/api/analytics/summary").json()

        assert data["total_events"] == 0
        assert data["today_views"] == 0
