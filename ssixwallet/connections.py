"""Table of peer-to-peer connections reported by the node."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class ConnectionState(IntEnum):
    """State of a peer connection."""

    BEFORE_HANDSHAKE = 0
    SYNCHRONIZING = 1
    IDLE = 2
    NORMAL = 3
    SYNC_REQUIRED = 4
    POOL_SYNC_REQUIRED = 5
    SHUTDOWN = 6


_STATE_LABELS = {
    ConnectionState.BEFORE_HANDSHAKE: "before handshake",
    ConnectionState.SYNCHRONIZING: "synchronizing",
    ConnectionState.IDLE: "idle",
    ConnectionState.NORMAL: "normal",
    ConnectionState.SYNC_REQUIRED: "sync required",
    ConnectionState.POOL_SYNC_REQUIRED: "pool sync required",
    ConnectionState.SHUTDOWN: "shutdown",
}


def state_label(state: int) -> str:
    """Human readable connection state; ``"unknown"`` for unexpected values."""
    try:
        return _STATE_LABELS[ConnectionState(state)]
    except ValueError:
        return "unknown"


class Column(IntEnum):
    """Columns of the connections table."""

    START = 0
    STATE = 1
    ID = 2
    HOST = 3
    PORT = 4
    IS_INCOMING = 5
    HEIGHT = 6
    LAST_RESPONSE_HEIGHT = 7
    VERSION = 8


_HEADERS = {
    Column.STATE: "State",
    Column.ID: "Id",
    Column.HOST: "Host",
    Column.PORT: "Port",
    Column.START: "Start",
    Column.VERSION: "Version",
    Column.IS_INCOMING: "Type",
    Column.HEIGHT: "Height",
    Column.LAST_RESPONSE_HEIGHT: "Last resp. height",
}


def header(column: int) -> str | None:
    """Header text of a column, or None for an unknown column."""
    try:
        return _HEADERS[Column(column)]
    except ValueError:
        return None


def format_start(timestamp: int | None) -> str:
    """Local time a connection started, as ``dd.MM.yy HH:mm``; ``-`` if unknown."""
    if timestamp is None:
        return "-"
    try:
        moment = datetime.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError):
        return "-"
    return moment.strftime("%d.%m.%y %H:%M")


def _ip_to_string(ip: int) -> str:
    """Dotted form of an IPv4 address stored with its first octet lowest."""
    return ".".join(str(octet) for octet in (ip & 0xFFFFFFFF).to_bytes(4, "little"))


@dataclass(frozen=True)
class P2PConnection:
    """One connection to a peer."""

    connection_id: uuid.UUID
    remote_ip: int
    remote_port: int
    state: int = ConnectionState.BEFORE_HANDSHAKE
    started: int | None = None
    version: int = 0
    is_incoming: bool = False
    remote_blockchain_height: int = 0
    last_response_height: int = 0

    @property
    def host(self) -> str:
        return _ip_to_string(self.remote_ip)


class ConnectionsTable:
    """Rows of the connections view, replaced whole on every refresh."""

    def __init__(self, connections: Iterable[P2PConnection] = ()) -> None:
        self._connections = list(connections)

    def __len__(self) -> int:
        return len(self._connections)

    def __getitem__(self, row: int) -> P2PConnection:
        return self._connections[row]

    def refresh(self, connections: Iterable[P2PConnection]) -> None:
        """Replace the rows with the node's current connections."""
        self._connections = list(connections)

    def display(self, row: int, column: int) -> str | int | None:
        """Value shown for a cell, or None for an unknown column."""
        connection = self._connections[row]
        try:
            column = Column(column)
        except ValueError:
            return None
        if column is Column.STATE:
            return state_label(connection.state)
        if column is Column.ID:
            return str(connection.connection_id)
        if column is Column.HOST:
            return connection.host
        if column is Column.PORT:
            return connection.remote_port
        if column is Column.START:
            return format_start(connection.started)
        if column is Column.VERSION:
            return connection.version
        if column is Column.IS_INCOMING:
            return "Incoming" if connection.is_incoming else "Outgoing"
        if column is Column.HEIGHT:
            return connection.remote_blockchain_height
        return connection.last_response_height