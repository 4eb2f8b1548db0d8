"""Protocol Buffer schema for the game RPC envelope.

Only the messages the session sends or decodes are declared here. Fields whose
upstream type is a nested message the session never inspects are declared as
``bytes``, which is wire compatible and keeps their contents opaque.

The schema is assembled as a ``FileDescriptorProto`` and loaded into a private
descriptor pool, so no generated ``_pb2`` module is needed.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_PACKAGE = "pogo"

_Field = descriptor_pb2.FieldDescriptorProto


class RequestType(IntEnum):
    """Sub-request method identifiers."""

    METHOD_UNSET = 0
    PLAYER_UPDATE = 1
    GET_PLAYER = 2
    GET_INVENTORY = 4
    DOWNLOAD_SETTINGS = 5
    DOWNLOAD_ITEM_TEMPLATES = 6
    DOWNLOAD_REMOTE_CONFIG_VERSION = 7
    FORT_SEARCH = 101
    ENCOUNTER = 102
    CATCH_POKEMON = 103
    FORT_DETAILS = 104
    GET_MAP_OBJECTS = 106
    GET_HATCHED_EGGS = 126
    CHECK_AWARDED_BADGES = 129


class MapObjectsStatus(IntEnum):
    """Status reported inside a GET_MAP_OBJECTS result."""

    UNSET_STATUS = 0
    SUCCESS = 1
    LOCATION_UNSET = 2


def _field(
    name: str,
    number: int,
    field_type: int,
    *,
    repeated: bool = False,
    type_name: str | None = None,
) -> _Field:
    field = _Field(
        name=name,
        number=number,
        type=field_type,
        label=_Field.LABEL_REPEATED if repeated else _Field.LABEL_OPTIONAL,
    )
    if type_name is not None:
        field.type_name = f".{_PACKAGE}.{type_name}"
    return field


def _message(name: str, *fields: _Field) -> descriptor_pb2.DescriptorProto:
    message = descriptor_pb2.DescriptorProto(name=name)
    message.field.extend(fields)
    return message


def _enum(enum_cls: type[IntEnum]) -> descriptor_pb2.EnumDescriptorProto:
    enum = descriptor_pb2.EnumDescriptorProto(name=enum_cls.__name__)
    for member in enum_cls:
        enum.value.add(name=member.name, number=member.value)
    return enum


_STRING = _Field.TYPE_STRING
_BYTES = _Field.TYPE_BYTES
_BOOL = _Field.TYPE_BOOL
_DOUBLE = _Field.TYPE_DOUBLE
_INT32 = _Field.TYPE_INT32
_INT64 = _Field.TYPE_INT64
_UINT64 = _Field.TYPE_UINT64
_ENUM = _Field.TYPE_ENUM
_MESSAGE = _Field.TYPE_MESSAGE

_MESSAGES: tuple[descriptor_pb2.DescriptorProto, ...] = (
    # Envelope
    _message(
        "Request",
        _field("request_type", 1, _ENUM, type_name="RequestType"),
        _field("request_message", 2, _BYTES),
    ),
    _message(
        "AuthToken",
        _field("contents", 1, _STRING),
        _field("unknown2", 2, _INT32),
    ),
    _message(
        "AuthInfo",
        _field("provider", 1, _STRING),
        _field("token", 2, _MESSAGE, type_name="AuthToken"),
    ),
    _message(
        "RequestEnvelope",
        _field("status_code", 1, _INT32),
        _field("request_id", 3, _UINT64),
        _field("requests", 4, _MESSAGE, repeated=True, type_name="Request"),
        _field("latitude", 7, _DOUBLE),
        _field("longitude", 8, _DOUBLE),
        _field("altitude", 9, _DOUBLE),
        _field("auth_info", 10, _MESSAGE, type_name="AuthInfo"),
        _field("unknown12", 12, _INT64),
    ),
    _message(
        "ResponseEnvelope",
        _field("status_code", 1, _INT32),
        _field("request_id", 2, _UINT64),
        _field("api_url", 3, _STRING),
        _field("returns", 100, _BYTES, repeated=True),
        _field("error", 101, _STRING),
    ),
    # Sub-request messages
    _message(
        "GetMapObjectsMessage",
        _field("cell_id", 1, _UINT64, repeated=True),
        _field("since_timestamp_ms", 2, _INT64, repeated=True),
        _field("latitude", 3, _DOUBLE),
        _field("longitude", 4, _DOUBLE),
    ),
    _message(
        "GetInventoryMessage",
        _field("last_timestamp_ms", 1, _INT64),
        _field("item_been_seen", 2, _INT32),
    ),
    _message(
        "DownloadSettingsMessage",
        _field("hash", 1, _STRING),
    ),
    # Sub-request results
    _message(
        "Currency",
        _field("name", 1, _STRING),
        _field("amount", 2, _INT32),
    ),
    _message(
        "PlayerData",
        _field("creation_timestamp_ms", 1, _INT64),
        _field("username", 2, _STRING),
        _field("team", 5, _INT32),
        _field("max_pokemon_storage", 9, _INT32),
        _field("max_item_storage", 10, _INT32),
        _field("currencies", 14, _MESSAGE, repeated=True, type_name="Currency"),
    ),
    _message(
        "GetPlayerResponse",
        _field("success", 1, _BOOL),
        _field("player_data", 2, _MESSAGE, type_name="PlayerData"),
    ),
    _message(
        "InventoryItem",
        _field("modified_timestamp_ms", 1, _INT64),
        _field("deleted_item_key", 2, _INT64),
        _field("inventory_item_data", 3, _BYTES),
    ),
    _message(
        "InventoryDelta",
        _field("original_timestamp_ms", 1, _INT64),
        _field("new_timestamp_ms", 2, _INT64),
        _field(
            "inventory_items", 3, _MESSAGE, repeated=True, type_name="InventoryItem"
        ),
    ),
    _message(
        "GetInventoryResponse",
        _field("success", 1, _BOOL),
        _field("inventory_delta", 2, _MESSAGE, type_name="InventoryDelta"),
    ),
    _message(
        "MapCell",
        _field("s2_cell_id", 1, _UINT64),
        _field("current_timestamp_ms", 2, _INT64),
        _field("forts", 3, _BYTES, repeated=True),
        _field("spawn_points", 4, _BYTES, repeated=True),
        _field("wild_pokemons", 5, _BYTES, repeated=True),
        _field("deleted_objects", 6, _STRING, repeated=True),
        _field("is_truncated_list", 7, _BOOL),
        _field("fort_summaries", 8, _BYTES, repeated=True),
        _field("decimated_spawn_points", 9, _BYTES, repeated=True),
        _field("catchable_pokemons", 10, _BYTES, repeated=True),
        _field("nearby_pokemons", 11, _BYTES, repeated=True),
    ),
    _message(
        "GetMapObjectsResponse",
        _field("map_cells", 1, _MESSAGE, repeated=True, type_name="MapCell"),
        _field("status", 2, _ENUM, type_name="MapObjectsStatus"),
    ),
)


def _build_pool() -> descriptor_pool.DescriptorPool:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="pogo_session/envelope.proto",
        package=_PACKAGE,
        syntax="proto3",
    )
    file_proto.enum_type.extend([_enum(RequestType), _enum(MapObjectsStatus)])
    file_proto.message_type.extend(_MESSAGES)

    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(file_proto.SerializeToString())
    return pool


_POOL = _build_pool()


def _message_class(name: str) -> Any:
    return message_factory.GetMessageClass(
        _POOL.FindMessageTypeByName(f"{_PACKAGE}.{name}")
    )


Request = _message_class("Request")
AuthToken = _message_class("AuthToken")
AuthInfo = _message_class("AuthInfo")
RequestEnvelope = _message_class("RequestEnvelope")
ResponseEnvelope = _message_class("ResponseEnvelope")

GetMapObjectsMessage = _message_class("GetMapObjectsMessage")
GetInventoryMessage = _message_class("GetInventoryMessage")
DownloadSettingsMessage = _message_class("DownloadSettingsMessage")

Currency = _message_class("Currency")
PlayerData = _message_class("PlayerData")
GetPlayerResponse = _message_class("GetPlayerResponse")
InventoryItem = _message_class("InventoryItem")
InventoryDelta = _message_class("InventoryDelta")
GetInventoryResponse = _message_class("GetInventoryResponse")
MapCell = _message_class("MapCell")
GetMapObjectsResponse = _message_class("GetMapObjectsResponse")
