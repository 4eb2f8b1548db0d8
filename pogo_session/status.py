"""Classification of response envelope status codes."""

from __future__ import annotations

from enum import Enum
from typing import Final

from .errors import (
    PogoClientError,
    PogoInvalidAuthError,
    PogoServiceUnavailable,
    PogoUnknownStatusError,
)


class StatusOutcome(Enum):
    """Semantic outcome of a response status code."""

    SUCCESS = "success"
    INVALID_AUTH = "invalid_auth"
    SERVER_UNAVAILABLE = "server_unavailable"
    UNKNOWN = "unknown"


STATUS_OUTCOMES: Final[dict[int, StatusOutcome]] = {
    1: StatusOutcome.SUCCESS,
    # OK, the dedicated rpc url is carried in api_url
    2: StatusOutcome.SUCCESS,
    # Server busy or throttling this client
    52: StatusOutcome.SERVER_UNAVAILABLE,
    102: StatusOutcome.INVALID_AUTH,
}


def classify_status(status_code: int) -> StatusOutcome:
    """Map a response status code to its outcome."""
    return STATUS_OUTCOMES.get(status_code, StatusOutcome.UNKNOWN)


def error_from_status(status_code: int) -> PogoClientError | None:
    """Return the error matching a response status code.

    Args:
        status_code: ``status_code`` field of a response envelope

    Returns:
        None for successful codes, otherwise an unraised error instance
    """
    outcome = classify_status(status_code)
    if outcome is StatusOutcome.SUCCESS:
        return None
    if outcome is StatusOutcome.INVALID_AUTH:
        return PogoInvalidAuthError("Invalid or expired auth token")
    if outcome is StatusOutcome.SERVER_UNAVAILABLE:
        return PogoServiceUnavailable("Server unavailable")
    return PogoUnknownStatusError(status_code)
