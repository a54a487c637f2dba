"""HTTP client for the server-side event analytics endpoints.

Every operation returns an ApiResult. A 404 means the backend has not
implemented the endpoint yet: the client logs a warning and answers with
placeholder data (reads, exports) or a simulated success (writes), marked
as ResultSource.FALLBACK. Any other failure raises AnalyticsApiError.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import requests
from django.conf import settings

from event_analytics.clients import mock_data
from event_analytics.domain.errors import AnalyticsApiError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
METRIC_PERIODS = ("7d", "30d", "90d")
EXPORT_KINDS = ("registrations", "analytics")


class ResultSource(str, Enum):
    LIVE = "live"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ApiResult:
    """Payload of one client call and where it came from."""

    data: Any
    source: ResultSource
    operation: str
    event_id: str
    sequence: int

    @property
    def is_fallback(self) -> bool:
        return self.source is ResultSource.FALLBACK


class AnalyticsApiClient:
    """Client for the /events/{id}/... analytics endpoints."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()
        self._sequences: dict[tuple[str, str], int] = {}

    def fetch_event_analytics(self, event_id: str) -> ApiResult:
        return self._send(
            "fetch analytics data",
            "GET",
            f"/events/{event_id}/analytics",
            event_id,
            fallback=lambda: mock_data.mock_analytics(event_id),
        )

    def fetch_registered_users(self, event_id: str) -> ApiResult:
        return self._send(
            "fetch registered users",
            "GET",
            f"/events/{event_id}/registrations",
            event_id,
            fallback=lambda: mock_data.mock_registrations(event_id),
        )

    def fetch_event_financials(self, event_id: str) -> ApiResult:
        return self._send(
            "fetch financial data",
            "GET",
            f"/events/{event_id}/financials",
            event_id,
            fallback=lambda: mock_data.mock_financials(event_id),
        )

    def fetch_event_metrics(self, event_id: str, period: str = "30d") -> ApiResult:
        if period not in METRIC_PERIODS:
            raise ValueError(f"period must be one of {', '.join(METRIC_PERIODS)}")
        return self._send(
            "fetch metrics",
            "GET",
            f"/events/{event_id}/metrics",
            event_id,
            fallback=lambda: mock_data.mock_analytics(event_id),
            params={"period": period},
        )

    def export_event_data(self, event_id: str, kind: str) -> ApiResult:
        """Download a CSV export; ``data`` holds the raw bytes."""
        if kind not in EXPORT_KINDS:
            raise ValueError(f"kind must be one of {', '.join(EXPORT_KINDS)}")
        return self._send(
            "export data",
            "GET",
            f"/events/{event_id}/export/{kind}",
            event_id,
            fallback=lambda: mock_data.mock_csv(event_id, kind),
            raw=True,
        )

    def send_event_update(self, event_id: str, message: str, subject: str) -> ApiResult:
        return self._send(
            "send update",
            "POST",
            f"/events/{event_id}/send-update",
            event_id,
            fallback=lambda: None,
            json={"message": message, "subject": subject},
            expect_body=False,
        )

    def check_in_attendee(self, event_id: str, registration_id: str) -> ApiResult:
        return self._send(
            "check in attendee",
            "POST",
            f"/events/{event_id}/check-in/{registration_id}",
            event_id,
            fallback=lambda: None,
            expect_body=False,
        )

    def is_latest(self, result: ApiResult) -> bool:
        """True unless a newer request for the same operation and event was issued."""
        return self._sequences.get((result.operation, result.event_id)) == result.sequence

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _next_sequence(self, operation: str, event_id: str) -> int:
        key = (operation, event_id)
        self._sequences[key] = self._sequences.get(key, 0) + 1
        return self._sequences[key]

    def _send(
        self,
        operation: str,
        method: str,
        path: str,
        event_id: str,
        fallback: Callable[[], Any],
        raw: bool = False,
        expect_body: bool = True,
        **kwargs: Any,
    ) -> ApiResult:
        sequence = self._next_sequence(operation, event_id)
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method, url, headers=self._headers(), timeout=self.timeout, **kwargs
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            if status == 404:
                logger.warning(
                    "Analytics endpoint %s %s not implemented, using fallback for %s",
                    method,
                    path,
                    operation,
                )
                return ApiResult(fallback(), ResultSource.FALLBACK, operation, event_id, sequence)
            logger.error("Error trying to %s for event %s: status=%s", operation, event_id, status)
            raise AnalyticsApiError(operation, status) from exc
        except requests.RequestException as exc:
            logger.error("Error trying to %s for event %s: %s", operation, event_id, exc)
            raise AnalyticsApiError(operation) from exc

        if raw:
            data = response.content
        elif expect_body:
            # a 2xx body that is not a JSON object is a server failure
            try:
                data = response.json().get("data")
            except (ValueError, AttributeError) as exc:
                logger.error(
                    "Unreadable response trying to %s for event %s: %s", operation, event_id, exc
                )
                raise AnalyticsApiError(operation, response.status_code) from exc
        else:
            data = None
        return ApiResult(data, ResultSource.LIVE, operation, event_id, sequence)


def build_client(token: str | None = None) -> AnalyticsApiClient:
    """Construct a client from the ANALYTICS_API_* settings."""
    return AnalyticsApiClient(
        base_url=settings.ANALYTICS_API_BASE_URL,
        token=token,
        timeout=settings.ANALYTICS_API_TIMEOUT,
    )
