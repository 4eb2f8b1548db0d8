"""Protocol Buffer serialization for game RPC envelopes.

This module builds request envelopes around a batch of sub-requests and
decodes response envelopes. Decoding is structural only: result payloads stay
opaque bytes until a caller decodes the one it expects at a known index.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from google.protobuf import text_format
from google.protobuf.message import DecodeError, Message

from . import protos
from .auth import AuthProvider
from .const import (
    AUTH_TOKEN_UNKNOWN2,
    REQUEST_ID,
    REQUEST_STATUS_CODE,
    REQUEST_UNKNOWN12,
)
from .errors import PogoFormatError
from .location import Location
from .protos import RequestType


def build_request(request_type: RequestType, message: Message | None = None) -> Any:
    """Build a single sub-request.

    Args:
        request_type: Sub-request method
        message: Optional sub-message, serialized into ``request_message``

    Returns:
        Protobuf Request
    """
    request = protos.Request(request_type=request_type)
    if message is not None:
        request.request_message = message.SerializeToString()
    return request


def build_auth_info(provider: AuthProvider) -> Any:
    """Build AuthInfo from the provider's current credentials.

    Args:
        provider: Logged-in auth provider

    Returns:
        Protobuf AuthInfo

    Raises:
        PogoFormatError: If a bytes token is not valid UTF-8
    """
    token = provider.get_access_token()
    if isinstance(token, bytes):
        try:
            token = token.decode("utf-8")
        except UnicodeDecodeError as err:
            raise PogoFormatError("Access token is not valid UTF-8") from err

    return protos.AuthInfo(
        provider=provider.get_provider_string(),
        token=protos.AuthToken(contents=token, unknown2=AUTH_TOKEN_UNKNOWN2),
    )


def build_request_envelope(
    auth_info: Any,
    location: Location,
    requests: Sequence[Any],
) -> Any:
    """Build a request envelope carrying a batch of sub-requests.

    Sub-request contents are not validated.

    Args:
        auth_info: AuthInfo for the current provider
        location: Device-reported location
        requests: Ordered sub-requests, answered positionally by the server

    Returns:
        Protobuf RequestEnvelope
    """
    envelope = protos.RequestEnvelope(
        request_id=REQUEST_ID,
        status_code=REQUEST_STATUS_CODE,
        unknown12=REQUEST_UNKNOWN12,
        longitude=location.lon,
        latitude=location.lat,
        altitude=location.alt,
    )
    envelope.auth_info.CopyFrom(auth_info)
    envelope.requests.extend(requests)
    return envelope


def serialize_message(message: Message) -> bytes:
    """Serialize protobuf message to binary."""
    return message.SerializeToString()


def deserialize_response(data: bytes) -> Any:
    """Deserialize binary data to a response envelope.

    Args:
        data: Binary envelope data

    Returns:
        Parsed ResponseEnvelope

    Raises:
        PogoFormatError: If data is not a valid envelope
    """
    envelope = protos.ResponseEnvelope()
    try:
        envelope.ParseFromString(data)
    except DecodeError as err:
        raise PogoFormatError("Malformed response envelope") from err
    return envelope


def decode_return(response: Any, index: int, message_cls: type[Message]) -> Any:
    """Decode the result payload at ``index`` into ``message_cls``.

    Raises:
        PogoFormatError: If the payload is missing or malformed
    """
    if index >= len(response.returns):
        raise PogoFormatError(
            f"Response carries {len(response.returns)} results, expected index {index}"
        )

    message = message_cls()
    try:
        message.ParseFromString(response.returns[index])
    except DecodeError as err:
        raise PogoFormatError(
            f"Malformed {message_cls.DESCRIPTOR.name} at index {index}"
        ) from err
    return message


def message_to_text(message: Message | None) -> str:
    """Render a message in protobuf text format for debug output."""
    if message is None:
        return "<none>"
    return text_format.MessageToString(message)
