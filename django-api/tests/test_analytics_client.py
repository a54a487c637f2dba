"""Tests for AnalyticsApiClient fallback and failure handling.

The HTTP session is replaced by a mock returning canned responses.
Run with: pytest tests/test_analytics_client.py -v
"""

import json
import logging
from unittest import mock

import pytest
import requests

from event_analytics.clients import AnalyticsApiClient, ResultSource, build_client
from event_analytics.clients import mock_data
from event_analytics.domain.errors import AnalyticsApiError, ErrorCode

BASE_URL = "http://analytics.test/api"


def make_response(status: int, payload=None, content: bytes | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = BASE_URL
    if content is not None:
        response._content = content
    else:
        response._content = json.dumps(payload if payload is not None else {}).encode()
    return response


@pytest.fixture
def session() -> mock.MagicMock:
    return mock.MagicMock(spec=requests.Session)


@pytest.fixture
def client(session) -> AnalyticsApiClient:
    return AnalyticsApiClient(BASE_URL + "/", token="secret-token", session=session)


class TestRequests:
    """Tests for request construction."""

    def test_bearer_token_attached(self, client, session):
        session.request.return_value = make_response(200, {"data": {}})

        client.fetch_event_analytics("E1")

        method, url = session.request.call_args.args
        assert (method, url) == ("GET", f"{BASE_URL}/events/E1/analytics")
        assert session.request.call_args.kwargs["headers"]["Authorization"] == "Bearer secret-token"
        assert session.request.call_args.kwargs["timeout"] == 10

    def test_no_token_no_authorization_header(self, session):
        session.request.return_value = make_response(200, {"data": {}})

        AnalyticsApiClient(BASE_URL, session=session).fetch_event_financials("E1")

        assert "Authorization" not in session.request.call_args.kwargs["headers"]

    def test_metrics_period_sent_as_query(self, client, session):
        session.request.return_value = make_response(200, {"data": {"views": 3}})

        result = client.fetch_event_metrics("E1", "7d")

        assert session.request.call_args.kwargs["params"] == {"period": "7d"}
        assert result.data == {"views": 3}

    def test_metrics_rejects_unknown_period(self, client, session):
        with pytest.raises(ValueError):
            client.fetch_event_metrics("E1", "1y")
        session.request.assert_not_called()

    def test_export_rejects_unknown_kind(self, client):
        with pytest.raises(ValueError):
            client.export_event_data("E1", "ratings")

    def test_send_update_posts_message_and_subject(self, client, session):
        session.request.return_value = make_response(204, content=b"")

        result = client.send_event_update("E1", "Doors open at 6", "Schedule")

        assert session.request.call_args.args == ("POST", f"{BASE_URL}/events/E1/send-update")
        assert session.request.call_args.kwargs["json"] == {
            "message": "Doors open at 6",
            "subject": "Schedule",
        }
        assert result.source is ResultSource.LIVE
        assert result.data is None


class TestLiveResponses:
    """Tests for successful responses."""

    def test_payload_returned_verbatim(self, client, session):
        payload = {"totalRevenue": 10, "extra": [1, 2]}
        session.request.return_value = make_response(200, {"data": payload})

        result = client.fetch_event_financials("E1")

        assert result.data == payload
        assert result.source is ResultSource.LIVE
        assert not result.is_fallback

    def test_export_returns_raw_bytes(self, client, session):
        session.request.return_value = make_response(200, content=b"a,b\n1,2")

        assert client.export_event_data("E1", "analytics").data == b"a,b\n1,2"


class TestNotFoundFallback:
    """Tests for the 404 fallback path."""

    def test_financials_404_returns_mock(self, client, session, caplog):
        session.request.return_value = make_response(404)

        with caplog.at_level(logging.WARNING, logger="event_analytics.clients.analytics_api"):
            result = client.fetch_event_financials("E1")

        assert result.is_fallback
        assert result.data == mock_data.mock_financials("E1")
        assert result.data["totalRevenue"] == 2250
        assert len(result.data["revenueByTicketType"]) == 3
        assert "not implemented" in caplog.text

    @pytest.mark.parametrize(
        "call, expected",
        [
            (lambda c: c.fetch_event_analytics("E1"), mock_data.mock_analytics("E1")),
            (lambda c: c.fetch_event_metrics("E1"), mock_data.mock_analytics("E1")),
            (lambda c: c.fetch_registered_users("E1"), mock_data.mock_registrations("E1")),
        ],
    )
    def test_reads_fall_back_to_mock(self, client, session, call, expected):
        session.request.return_value = make_response(404)

        result = call(client)

        assert result.source is ResultSource.FALLBACK
        assert result.data == expected

    def test_fallback_is_deterministic(self, client, session):
        session.request.return_value = make_response(404)

        assert client.fetch_event_analytics("E1").data == client.fetch_event_analytics("E2").data

    def test_write_operations_simulate_success(self, client, session):
        session.request.return_value = make_response(404)

        update = client.send_event_update("E1", "msg", "subj")
        check_in = client.check_in_attendee("E1", "reg-001")

        assert update.is_fallback and update.data is None
        assert check_in.is_fallback and check_in.data is None
        assert session.request.call_args.args == ("POST", f"{BASE_URL}/events/E1/check-in/reg-001")

    def test_registrations_export_synthesised(self, client, session):
        session.request.return_value = make_response(404)

        csv = client.export_event_data("E1", "registrations").data.decode()

        rows = csv.split("\\n")
        assert "\n" not in csv
        assert rows[0].startswith("ID,Name,Email,Phone")
        assert len(rows) == 5
        assert rows[3].startswith("reg-003,Bob Johnson,bob.johnson@email.com,N/A,")
        assert rows[2].endswith(",true,2024-09-29T08:00:00Z")

    def test_analytics_export_synthesised(self, client, session):
        session.request.return_value = make_response(404)

        rows = client.export_event_data("E1", "analytics").data.decode().split("\\n")

        assert rows[0] == "Date,Views,Registrations"
        assert rows[1] == "2024-09-23,45,3"
        assert len(rows) == 8


class TestFailures:
    """Tests for non-404 failures."""

    def test_server_error_raises(self, client, session, caplog):
        session.request.return_value = make_response(500)

        with caplog.at_level(logging.ERROR, logger="event_analytics.clients.analytics_api"):
            with pytest.raises(AnalyticsApiError) as exc_info:
                client.fetch_event_financials("E1")

        assert exc_info.value.code is ErrorCode.ANALYTICS_API_FAILURE
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Failed to fetch financial data"
        assert "status=500" in caplog.text

    def test_write_server_error_raises(self, client, session):
        session.request.return_value = make_response(403)

        with pytest.raises(AnalyticsApiError) as exc_info:
            client.check_in_attendee("E1", "reg-1")

        assert exc_info.value.message == "Failed to check in attendee"

    def test_network_error_raises(self, client, session):
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(AnalyticsApiError) as exc_info:
            client.export_event_data("E1", "analytics")

        assert exc_info.value.status_code is None
        assert exc_info.value.message == "Failed to export data"

    def test_non_json_body_raises(self, client, session):
        session.request.return_value = make_response(200, content=b"<html>gateway</html>")

        with pytest.raises(AnalyticsApiError) as exc_info:
            client.fetch_event_financials("E1")

        assert exc_info.value.status_code == 200
        assert exc_info.value.message == "Failed to fetch financial data"

    def test_non_object_body_raises(self, client, session):
        session.request.return_value = make_response(200, [1, 2, 3])

        with pytest.raises(AnalyticsApiError):
            client.fetch_event_metrics("E1", "7d")


class TestSequencing:
    """Tests for stale-response detection."""

    def test_newer_request_supersedes_older(self, client, session):
        session.request.return_value = make_response(200, {"data": {}})

        first = client.fetch_event_analytics("E1")
        second = client.fetch_event_analytics("E1")

        assert not client.is_latest(first)
        assert client.is_latest(second)

    def test_sequences_are_per_event_and_operation(self, client, session):
        session.request.return_value = make_response(200, {"data": {}})

        first = client.fetch_event_analytics("E1")
        client.fetch_event_analytics("E2")
        client.fetch_event_financials("E1")

        assert client.is_latest(first)


def test_build_client_reads_settings(settings):
    settings.ANALYTICS_API_BASE_URL = "http://remote.test/api/"
    settings.ANALYTICS_API_TIMEOUT = 3

    client = build_client(token="t")

    assert client.base_url == "http://remote.test/api"
    assert client.timeout == 3
    assert client.token == "t"
