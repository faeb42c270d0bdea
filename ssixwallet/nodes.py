"""Remote node list, node validation and connection settings helpers."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

DEFAULT_RPC_PORT = 32348
"""Daemon RPC port used when no local port has been configured."""

SSL_PORT_OFFSET = 100
MAX_PORT = 65535

_HOST_PATTERN = re.compile(
    r"([a-z|A-Z|0-9]|[a-z|A-Z|0-9]-[a-z|A-Z|0-9]|[a-z|A-Z|0-9]\.)+"
)
_PATH_PATTERN = re.compile(r"/([\w|-]+/)+|/")


@dataclass(frozen=True)
class NodeSetting:
    """Address of a remote daemon."""

    host: str
    port: int
    path: str = "/"
    ssl: bool = False


class ConnectionMode(str, Enum):
    """How the wallet reaches a daemon."""

    AUTO = "auto"
    EMBEDDED = "embedded"
    LOCAL = "local"
    REMOTE = "remote"


class NodeList:
    """Ordered list of remote nodes with one of them marked as current.

    Every change to the list is passed to ``on_change`` so that it can be
    persisted.
    """

    def __init__(
        self,
        nodes: Iterable[NodeSetting] = (),
        on_change: Callable[[list[NodeSetting]], None] | None = None,
    ) -> None:
        self._nodes = list(nodes)
        self._on_change = on_change
        self._current = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> NodeSetting:
        return self._nodes[index]

    def __iter__(self) -> Iterator[NodeSetting]:
        return iter(self._nodes)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(list(self._nodes))

    def add(self, node: NodeSetting) -> None:
        """Append a node and report the new list."""
        self._nodes.append(node)
        self._changed()

    def remove(self, index: int) -> None:
        """Remove the node at ``index`` and report the new list."""
        del self._nodes[index]
        self._changed()

    def index_of(self, node: NodeSetting) -> int:
        """Position of the first node equal to ``node``; ValueError if absent."""
        for position, candidate in enumerate(self._nodes):
            if candidate == node:
                return position
        raise ValueError(f"node {node.host}:{node.port} is not in the list")

    def set_current(self, index: int) -> None:
        self._current = index

    def is_checked(self, row: int) -> bool:
        """Whether ``row`` is the currently selected node."""
        return row == self._current

    def display(self, row: int, column: int) -> str | int | None:
        """Text shown for a cell: column 1 host, 2 port, 3 path."""
        node = self._nodes[row]
        if column == 1:
            return node.host
        if column == 2:
            return node.port
        if column == 3:
            return node.path
        return None


def is_valid_node(node: NodeSetting) -> bool:
    """Check host, port and path of a node entered by the user."""
    return (
        _HOST_PATTERN.fullmatch(node.host) is not None
        and 0 < node.port < MAX_PORT
        and _PATH_PATTERN.fullmatch(node.path) is not None
    )


def toggle_ssl_port(port: int, ssl: bool) -> int:
    """Shift a port by the SSL offset when SSL is switched on or off."""
    if not ssl and port > SSL_PORT_OFFSET:
        return port - SSL_PORT_OFFSET
    if ssl and port <= MAX_PORT - SSL_PORT_OFFSET:
        return port + SSL_PORT_OFFSET
    return port


def effective_local_port(port: int) -> int:
    """The configured local daemon port, or the default one when unset."""
    return port if port != 0 else DEFAULT_RPC_PORT