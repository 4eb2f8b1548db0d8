"""Session manager for the game RPC service.

A session starts bound to the shared bootstrap endpoint. ``init()`` logs in
through the auth provider and learns the dedicated endpoint assigned by the
server; every later call targets that endpoint for the lifetime of the
session.

Usage:
    async with aiohttp.ClientSession() as http:
        session = PogoSession(provider, Location(lon, lat), PogoRpcClient(http))
        await session.init()
        result = await session.announce()
        player = await session.get_player()

Operations are not safe to run concurrently on one session.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from . import protos
from .auth import AuthProvider
from .cells import get_cell_ids
from .const import DEFAULT_URL, DOWNLOAD_SETTINGS_HASH, RPC_URL_TEMPLATE
from .errors import (
    PogoClientError,
    PogoFormatError,
    PogoRequestError,
    PogoServiceUnavailable,
)
from .location import Location
from .protobuf_util import (
    build_auth_info,
    build_request,
    build_request_envelope,
    decode_return,
    message_to_text,
)
from .protos import RequestType
from .rpc import RpcTransport
from .status import StatusOutcome, classify_status, error_from_status

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnnounceResult:
    """Map objects returned by ``announce()`` with the envelope status."""

    map_objects: Any
    status_code: int
    outcome: StatusOutcome

    @property
    def ok(self) -> bool:
        """Return True when the envelope status is successful."""
        return self.outcome is StatusOutcome.SUCCESS

    @property
    def error(self) -> PogoClientError | None:
        """Error matching the envelope status, None when successful."""
        return error_from_status(self.status_code)

    def raise_for_status(self) -> None:
        """Raise the classified error when the status is not successful."""
        error = self.error
        if error is not None:
            raise error


def _download_settings_request() -> Any:
    return build_request(
        RequestType.DOWNLOAD_SETTINGS,
        protos.DownloadSettingsMessage(hash=DOWNLOAD_SETTINGS_HASH),
    )


class PogoSession:
    """Client session for the game RPC service."""

    def __init__(
        self,
        provider: AuthProvider,
        location: Location,
        transport: RpcTransport,
        *,
        debug: bool = False,
        default_url: str = DEFAULT_URL,
    ) -> None:
        """Initialize session.

        Args:
            provider: Auth provider used to log in and sign requests
            location: Location reported with every request
            transport: Transport performing the RPC round trip
            debug: Log request and response envelopes
            default_url: Bootstrap endpoint used until init() succeeds
        """
        self.provider = provider
        self.location = location
        self.debug = debug

        self._transport = transport
        self._default_url = default_url
        self._url: str | None = None

    @property
    def is_bound(self) -> bool:
        """Return True once the server has assigned a dedicated endpoint."""
        return self._url is not None

    def _set_url(self, url_token: str) -> None:
        self._url = RPC_URL_TEMPLATE.format(url_token)
        _LOGGER.debug("Session bound to %s", self._url)

    def get_url(self) -> str:
        """Return the endpoint the next call will target."""
        if self._url is not None:
            return self._url
        return self._default_url

    async def call(self, requests: Sequence[Any]) -> Any:
        """Send a batch of sub-requests in one envelope.

        Transport errors propagate unchanged.

        Args:
            requests: Ordered sub-requests

        Returns:
            ResponseEnvelope whose results match the order of requests
        """
        return await self._send(self._build_envelope(requests))

    def _build_envelope(self, requests: Sequence[Any]) -> Any:
        auth_info = build_auth_info(self.provider)
        return build_request_envelope(auth_info, self.location, requests)

    async def _send(self, envelope: Any) -> Any:
        if self.debug:
            _LOGGER.debug("Request envelope:\n%s", message_to_text(envelope))

        response = await self._transport.request(self.get_url(), envelope)

        if self.debug:
            _LOGGER.debug("Response envelope:\n%s", message_to_text(response))

        return response

    async def init(self) -> None:
        """Log in and bind the session to its dedicated endpoint.

        Raises:
            PogoServiceUnavailable: If the server did not assign an endpoint
        """
        await self.provider.login()

        requests = [
            build_request(RequestType.GET_PLAYER),
            build_request(RequestType.GET_HATCHED_EGGS),
            build_request(RequestType.GET_INVENTORY),
            build_request(RequestType.CHECK_AWARDED_BADGES),
            _download_settings_request(),
        ]

        response = await self.call(requests)

        if not response.api_url:
            _LOGGER.warning(
                "No endpoint assigned by %s (status %s)",
                self.get_url(),
                response.status_code,
            )
            raise PogoServiceUnavailable(
                "Could not initialize session, the service might be down"
            )

        self._set_url(response.api_url)

    async def announce(self) -> AnnounceResult:
        """Publish the player's presence and return the map around it.

        Raises:
            PogoRequestError: If the round trip failed
        """
        cell_ids = get_cell_ids(self.location)
        last_timestamp = int(time.time()) * 1000

        # Cells traversed since the last announce, with a zeroed timestamp each
        map_objects_message = protos.GetMapObjectsMessage(
            cell_id=cell_ids,
            since_timestamp_ms=[0] * len(cell_ids),
            longitude=self.location.lon,
            latitude=self.location.lat,
        )

        requests = [
            build_request(RequestType.GET_MAP_OBJECTS, map_objects_message),
            build_request(RequestType.GET_HATCHED_EGGS),
            build_request(
                RequestType.GET_INVENTORY,
                protos.GetInventoryMessage(last_timestamp_ms=last_timestamp),
            ),
            build_request(RequestType.CHECK_AWARDED_BADGES),
            _download_settings_request(),
        ]

        envelope = self._build_envelope(requests)
        try:
            response = await self._send(envelope)
        except Exception:  # noqa: BLE001
            raise PogoRequestError(
                "The remote server could not be reached or returned an error"
            ) from None

        outcome = classify_status(response.status_code)
        if outcome is StatusOutcome.SUCCESS:
            map_objects = decode_return(response, 0, protos.GetMapObjectsResponse)
        else:
            _LOGGER.debug(
                "Announce returned status %s (%s)", response.status_code, outcome.value
            )
            # Rejected envelopes carry no results or unusable ones
            try:
                map_objects = decode_return(
                    response, 0, protos.GetMapObjectsResponse
                )
            except PogoFormatError:
                map_objects = protos.GetMapObjectsResponse()

        return AnnounceResult(
            map_objects=map_objects,
            status_code=response.status_code,
            outcome=outcome,
        )

    async def get_player(self) -> Any:
        """Return the current player profile."""
        response = await self.call([build_request(RequestType.GET_PLAYER)])
        return decode_return(response, 0, protos.GetPlayerResponse)

    async def get_inventory(self) -> Any:
        """Return the player's items."""
        response = await self.call([build_request(RequestType.GET_INVENTORY)])
        return decode_return(response, 0, protos.GetInventoryResponse)
