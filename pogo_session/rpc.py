"""HTTP transport for the game RPC endpoint."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import aiohttp

from .const import DEFAULT_TIMEOUT, USER_AGENT
from .errors import (
    PogoConnectionError,
    PogoResponseError,
    PogoTimeout,
)
from .protobuf_util import deserialize_response, serialize_message

_LOGGER = logging.getLogger(__name__)


class RpcTransport(Protocol):
    """Performs one round trip for a request envelope."""

    async def request(self, url: str, envelope: Any) -> Any:
        """Send the envelope to url and return the decoded response envelope."""


class PogoRpcClient:
    """aiohttp client posting protobuf envelopes to the RPC endpoint.

    The caller owns the aiohttp session and is responsible for closing it.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
    ) -> None:
        self._session = session
        self._timeout = timeout
        self._user_agent = user_agent

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self._user_agent}

    async def request(self, url: str, envelope: Any) -> Any:
        """Post a request envelope and decode the response envelope.

        Raises:
            PogoResponseError: If the endpoint returns a non-200 status
            PogoTimeout: If the request times out
            PogoConnectionError: If the network request fails
            PogoFormatError: If the body is not a response envelope
        """
        data = serialize_message(envelope)
        try:
            async with self._session.post(
                url,
                data=data,
                headers=self._headers(),
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                if resp.status != 200:
                    raise PogoResponseError(
                        resp.status, "RPC request failed with non-200 response"
                    )
                body = await resp.read()
        except TimeoutError as err:
            raise PogoTimeout("RPC request timed out") from err
        except aiohttp.ClientError as err:
            raise PogoConnectionError("RPC request failed") from err

        _LOGGER.debug("Received %d byte response from %s", len(body), url)
        return deserialize_response(body)
