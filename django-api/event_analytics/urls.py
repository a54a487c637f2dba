from django.urls import path

from event_analytics.handlers import EventStatsView, OverviewStatsView, OwnerAnalyticsView

urlpatterns = [
    path("analytics/overview", OverviewStatsView.as_view(), name="analytics-overview"),
    path("analytics/summary", OwnerAnalyticsView.as_view(), name="analytics-summary"),
    path(
        "analytics/events/<str:event_id>",
        EventStatsView.as_view(),
        name="analytics-event-stats",
    ),
]
