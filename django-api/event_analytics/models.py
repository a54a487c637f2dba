"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone


class Event(models.Model):
    """Persistence model for events."""

    class Status(models.TextChoices):
        ACTIVE = "active"
        UPCOMING = "upcoming"
        CANCELLED = "cancelled"
        COMPLETED = "completed"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=100)
    creator_id = models.CharField(max_length=64, db_index=True)
    creator_name = models.CharField(max_length=255, blank=True)
    capacity = models.PositiveIntegerField(default=0)
    views = models.PositiveIntegerField(default=0)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.ACTIVE)
    date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["creator_id", "-created_at"], name="ea_event_creator_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class TicketType(models.Model):
    """Persistence model for ticket types."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="ticket_types")
    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    available = models.PositiveIntegerField(default=0)
    sold = models.PositiveIntegerField(default=0)
    description = models.CharField(max_length=255, blank=True)

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class EventRating(models.Model):
    """Persistence model for event reviews."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="ratings")
    user_name = models.CharField(max_length=255, blank=True)
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["created_at"]


class Registration(models.Model):
    """Persistence model for event registrations."""

    class PaymentStatus(models.TextChoices):
        PENDING = "pending"
        PAID = "paid"
        REFUNDED = "refunded"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="registrations")
    user_id = models.CharField(max_length=64)
    user_name = models.CharField(max_length=255)
    user_email = models.EmailField()
    ticket_type = models.CharField(max_length=100)
    ticket_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    payment_method = models.CharField(max_length=32, blank=True)
    payment_status = models.CharField(
        max_length=16, choices=PaymentStatus.choices, default=PaymentStatus.PENDING
    )
    registration_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-registration_date"]
        constraints = [
            models.UniqueConstraint(fields=["event", "user_id"], name="unique_event_registration"),
        ]


class Notification(models.Model):
    """Persistence model for the per-event activity feed."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="notifications")
    type = models.CharField(max_length=32)
    title = models.CharField(max_length=255, blank=True)
    message = models.TextField(blank=True)
    registration = models.ForeignKey(
        Registration, on_delete=models.SET_NULL, null=True, blank=True, related_name="notifications"
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event", "-created_at"], name="ea_notification_event_idx"),
        ]
