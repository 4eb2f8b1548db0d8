"""Pytest configuration and fixtures for pogo_session tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from pogo_session import Location, protos


class FakeAuthProvider:
    """In-memory auth provider."""

    def __init__(
        self,
        provider: str = "ptc",
        token: str | bytes = "access-token",
        login_error: Exception | None = None,
    ) -> None:
        self.provider = provider
        self.token = token
        self.login_error = login_error
        self.login_calls = 0

    async def login(self) -> None:
        self.login_calls += 1
        if self.login_error is not None:
            raise self.login_error

    def get_provider_string(self) -> str:
        return self.provider

    def get_access_token(self) -> str | bytes:
        return self.token


@pytest.fixture
def location() -> Location:
    """Location in central San Francisco."""
    return Location(lon=-122.4194, lat=37.7749, alt=16.0)


@pytest.fixture
def provider() -> FakeAuthProvider:
    return FakeAuthProvider()


@pytest.fixture
def transport() -> MagicMock:
    """Create a mock RPC transport returning an empty success envelope."""
    transport = MagicMock()
    transport.request = AsyncMock(return_value=build_response(status_code=1))
    return transport


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


def build_response(
    *,
    status_code: int = 1,
    api_url: str = "",
    returns: list[bytes] | None = None,
) -> Any:
    """Build a response envelope.

    Args:
        status_code: Envelope status code
        api_url: Assigned endpoint fragment
        returns: Ordered result payloads

    Returns:
        Protobuf ResponseEnvelope
    """
    response = protos.ResponseEnvelope(status_code=status_code, api_url=api_url)
    response.returns.extend(returns or [])
    return response


def create_mock_response(
    status: int = 200,
    read_data: bytes | None = None,
) -> AsyncMock:
    """Create a configured mock aiohttp response.

    Args:
        status: HTTP status code
        read_data: Data to return from read() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if read_data is not None:
        response.read.return_value = read_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
