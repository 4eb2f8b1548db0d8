"""Client error types for game RPC interactions."""

from __future__ import annotations


class PogoClientError(Exception):
    """Base error for game RPC client failures."""


class PogoTimeout(PogoClientError):
    """Timeout while communicating with the RPC endpoint."""


class PogoConnectionError(PogoClientError):
    """Network connection to the RPC endpoint failed."""


class PogoResponseError(PogoClientError):
    """HTTP response error from the RPC endpoint."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class PogoFormatError(PogoClientError):
    """Envelope or result payload could not be decoded."""


class PogoRequestError(PogoClientError):
    """The remote server could not be reached or returned an error."""


class PogoServiceUnavailable(PogoClientError):
    """The service is down or refused to assign an endpoint."""


class PogoInvalidAuthError(PogoClientError):
    """The access token was rejected or has expired."""


class PogoUnknownStatusError(PogoClientError):
    """The response carried a status code with no known meaning."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected response status code {status_code}")
        self.status_code = status_code
