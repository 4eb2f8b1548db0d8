"""Test response status classification."""

from __future__ import annotations

import pytest

from pogo_session import (
    PogoInvalidAuthError,
    PogoServiceUnavailable,
    PogoUnknownStatusError,
    StatusOutcome,
    classify_status,
    error_from_status,
)


@pytest.mark.parametrize(
    ("status_code", "outcome"),
    [
        (1, StatusOutcome.SUCCESS),
        (2, StatusOutcome.SUCCESS),
        (52, StatusOutcome.SERVER_UNAVAILABLE),
        (102, StatusOutcome.INVALID_AUTH),
        (0, StatusOutcome.UNKNOWN),
        (3, StatusOutcome.UNKNOWN),
        (53, StatusOutcome.UNKNOWN),
        (-1, StatusOutcome.UNKNOWN),
    ],
)
def test_classify_status(status_code: int, outcome: StatusOutcome) -> None:
    assert classify_status(status_code) is outcome


@pytest.mark.parametrize("status_code", [1, 2])
def test_success_has_no_error(status_code: int) -> None:
    assert error_from_status(status_code) is None


def test_invalid_auth_error() -> None:
    assert isinstance(error_from_status(102), PogoInvalidAuthError)


def test_server_unavailable_error() -> None:
    assert isinstance(error_from_status(52), PogoServiceUnavailable)


def test_unknown_error_keeps_code() -> None:
    """Test unclassified codes carry the original status code."""
    error = error_from_status(999)

    assert isinstance(error, PogoUnknownStatusError)
    assert error.status_code == 999
    assert "999" in str(error)
