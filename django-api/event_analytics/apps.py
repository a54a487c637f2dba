from django.apps import AppConfig


class EventAnalyticsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "event_analytics"
    verbose_name = "Event analytics"
