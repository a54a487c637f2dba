from event_analytics.clients.analytics_api import (
    AnalyticsApiClient,
    ApiResult,
    ResultSource,
    build_client,
)

__all__ = ["AnalyticsApiClient", "ApiResult", "ResultSource", "build_client"]
