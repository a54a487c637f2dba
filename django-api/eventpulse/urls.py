from django.urls import include, path

urlpatterns = [
    path("api/", include("event_analytics.urls")),
]
