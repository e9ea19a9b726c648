"""Descriptions of the editor's RPC channels, as returned by nvim_list_chans."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from nvgrid.values import ParseError, parse_map, parse_string, parse_u64

logger = logging.getLogger(__name__)


class ChannelStreamType(Enum):
    STDIO = "stdio"
    STDERR = "stderr"
    SOCKET = "socket"
    JOB = "job"


class ChannelMode(Enum):
    BYTES = "bytes"
    TERMINAL = "terminal"
    RPC = "rpc"


class ClientType(Enum):
    REMOTE = "remote"
    UI = "ui"
    EMBEDDER = "embedder"
    HOST = "host"
    PLUGIN = "plugin"


@dataclass
class ClientVersion:
    major: int = 0
    minor: int | None = None
    patch: int | None = None
    prerelease: str | None = None
    commit: str | None = None


@dataclass
class ClientInfo:
    name: str = ""
    version: ClientVersion = field(default_factory=ClientVersion)
    client_type: ClientType = ClientType.REMOTE


@dataclass
class ChannelInfo:
    id: int = 0
    stream: ChannelStreamType = ChannelStreamType.STDIO
    mode: ChannelMode = ChannelMode.BYTES
    pty: str | None = None
    buffer: str | None = None
    client: ClientInfo | None = None


def _parse_enum(enum_type: type[Enum], value: Any) -> Any:
    name = parse_string(value)
    try:
        return enum_type(name)
    except ValueError:
        raise ParseError("event", name) from None


def _string_keyed(value: Any, what: str) -> Iterable[tuple[str, Any]]:
    for key, item in parse_map(value):
        if isinstance(key, str):
            yield key, item
        else:
            logger.debug("Invalid %s format", what)


def parse_channel_stream_type(value: Any) -> ChannelStreamType:
    """The stream a channel is attached to."""
    return _parse_enum(ChannelStreamType, value)


def parse_channel_mode(value: Any) -> ChannelMode:
    """The mode a channel runs in."""
    return _parse_enum(ChannelMode, value)


def parse_client_type(value: Any) -> ClientType:
    """The kind of client on the other end of a channel."""
    return _parse_enum(ClientType, value)


def parse_client_version(value: Any) -> ClientVersion:
    """A client version map; unknown properties are ignored."""
    version = ClientVersion()
    for name, item in _string_keyed(value, "client version"):
        if name == "major":
            version.major = parse_u64(item)
        elif name == "minor":
            version.minor = parse_u64(item)
        elif name == "patch":
            version.patch = parse_u64(item)
        elif name == "prerelease":
            version.prerelease = parse_string(item)
        elif name == "commit":
            version.commit = parse_string(item)
        else:
            logger.debug("Ignored client version property: %s", name)
    return version


def parse_client_info(value: Any) -> ClientInfo:
    """A client info map; unknown properties are ignored."""
    info = ClientInfo()
    for name, item in _string_keyed(value, "client info"):
        if name == "name":
            info.name = parse_string(item)
        elif name == "version":
            info.version = parse_client_version(item)
        elif name == "type":
            info.client_type = parse_client_type(item)
        else:
            logger.debug("Ignored client type property: %s", name)
    return info


def parse_channel_info(value: Any) -> ChannelInfo:
    """A channel info map; unknown properties are ignored."""
    info = ChannelInfo()
    for name, item in _string_keyed(value, "channel info"):
        if name == "id":
            info.id = parse_u64(item)
        elif name == "stream":
            info.stream = parse_channel_stream_type(item)
        elif name == "mode":
            info.mode = parse_channel_mode(item)
        elif name == "pty":
            info.pty = parse_string(item)
        elif name == "buffer":
            info.buffer = parse_string(item)
        elif name == "client":
            info.client = parse_client_info(item)
        else:
            logger.debug("Ignored channel info property: %s", name)
    return info


def parse_channel_list(channel_infos: Iterable[Any]) -> list[ChannelInfo]:
    """Every channel of a channel list, failing on the first malformed one."""
    return [parse_channel_info(item) for item in channel_infos]