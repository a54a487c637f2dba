"""Domain error codes for the analytics module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    ANALYTICS_API_FAILURE = "ANALYTICS_API_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is missing from the store or not visible to the requester.

    The message never says which, so statistics for other owners' events
    cannot be probed by id.
    """

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="No analytics available for this event",
        )
        self.event_id = event_id


class AnalyticsApiError(DomainError):
    """Raised when the remote analytics API fails for a reason other than 404."""

    def __init__(self, operation: str, status_code: int | None = None) -> None:
        super().__init__(
            code=ErrorCode.ANALYTICS_API_FAILURE,
            message=f"Failed to {operation}",
        )
        self.operation = operation
        self.status_code = status_code
