"""Serializers for transforming statistics snapshots to API responses."""

from dataclasses import asdict, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from rest_framework import serializers


def _plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return _plain(asdict(value))
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class ActivityEntrySerializer(serializers.Serializer):
    timestamp = serializers.DateTimeField()
    type = serializers.CharField()
    data = serializers.SerializerMethodField()

    def get_data(self, obj) -> Any:
        return _plain(obj.data)


class PaymentStatsSerializer(serializers.Serializer):
    paid = serializers.IntegerField()
    pending = serializers.IntegerField()
    refunded = serializers.IntegerField()
    total_revenue = serializers.FloatField()


class TicketStatsSerializer(serializers.Serializer):
    ticket_type = serializers.CharField()
    sold = serializers.IntegerField()
    available = serializers.IntegerField()
    revenue = serializers.FloatField()


class EventStatsSerializer(serializers.Serializer):
    """Serializer for a single event's statistics."""

    event_id = serializers.CharField()
    total_views = serializers.IntegerField()
    total_registrations = serializers.IntegerField()
    conversion_rate = serializers.FloatField()
    average_rating = serializers.FloatField()
    recent_activity = ActivityEntrySerializer(many=True)
    payment_stats = PaymentStatsSerializer()
    ticket_stats = TicketStatsSerializer(many=True)


class RealTimeStatsSerializer(serializers.Serializer):
    """Serializer for the aggregate statistics of an actor's events."""

    total_events = serializers.IntegerField()
    total_views = serializers.IntegerField()
    total_registrations = serializers.IntegerField()
    total_revenue = serializers.FloatField()
    conversion_rate = serializers.FloatField()
    average_rating = serializers.FloatField()
    recent_activity = ActivityEntrySerializer(many=True)
    event_stats = serializers.SerializerMethodField()
    is_loading = serializers.BooleanField()
    last_updated = serializers.DateTimeField()

    def get_event_stats(self, obj) -> dict[str, Any]:
        return {
            event_id: EventStatsSerializer(stats).data
            for event_id, stats in obj.event_stats.items()
        }


class MonthlyGrowthSerializer(serializers.Serializer):
    views = serializers.FloatField()
    registrations = serializers.FloatField()
    conversion_rate = serializers.FloatField()
    rating = serializers.FloatField()


class OwnerAnalyticsSerializer(serializers.Serializer):
    """Serializer for the dashboard summary cards."""

    total_events = serializers.IntegerField()
    total_views = serializers.IntegerField()
    total_registrations = serializers.IntegerField()
    total_revenue = serializers.FloatField()
    conversion_rate = serializers.FloatField()
    average_rating = serializers.FloatField()
    recent_activity = ActivityEntrySerializer(many=True)
    upcoming_events_count = serializers.IntegerField()
    active_events_count = serializers.IntegerField()
    today_views = serializers.IntegerField()
    today_registrations = serializers.IntegerField()
    monthly_growth = MonthlyGrowthSerializer()
    last_updated = serializers.DateTimeField()
