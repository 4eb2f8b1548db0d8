"""Client session layer for the game RPC service."""

__version__ = "0.1.0"

from .auth import AuthProvider
from .cells import get_cell_ids
from .errors import (
    PogoClientError,
    PogoConnectionError,
    PogoFormatError,
    PogoInvalidAuthError,
    PogoRequestError,
    PogoResponseError,
    PogoServiceUnavailable,
    PogoTimeout,
    PogoUnknownStatusError,
)
from .location import Location
from .protos import RequestType
from .rpc import PogoRpcClient, RpcTransport
from .session import AnnounceResult, PogoSession
from .status import StatusOutcome, classify_status, error_from_status

__all__ = [
    "AnnounceResult",
    "AuthProvider",
    "Location",
    "PogoClientError",
    "PogoConnectionError",
    "PogoFormatError",
    "PogoInvalidAuthError",
    "PogoRequestError",
    "PogoResponseError",
    "PogoRpcClient",
    "PogoServiceUnavailable",
    "PogoSession",
    "PogoTimeout",
    "PogoUnknownStatusError",
    "RequestType",
    "RpcTransport",
    "StatusOutcome",
    "__version__",
    "classify_status",
    "error_from_status",
    "get_cell_ids",
]
