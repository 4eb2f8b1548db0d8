"""Auth provider contract consumed by the session.

Concrete login flows live outside this package. Anything that can log in and
hand back a provider name and access token can drive a session.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AuthProvider(Protocol):
    """Capabilities the session needs from an auth provider."""

    async def login(self) -> None:
        """Authenticate with the provider, raising on failure."""

    def get_provider_string(self) -> str:
        """Return the provider identity sent in AuthInfo (e.g. "ptc")."""

    def get_access_token(self) -> str | bytes:
        """Return the access token obtained by the last login."""
