"""Nodes: named units of computation that own parameters and topics."""

from __future__ import annotations

import time
from typing import Optional

from auracore.bus import MessageBus, default_bus, log
from auracore.comm import Publisher, Subscriber
from auracore.errors import NodeError
from auracore.params import ParameterManager


def _clean_namespace(namespace: str) -> str:
    """Normalise a namespace to '' (global) or '/a/b' without a trailing slash."""
    if not namespace or namespace == "/":
        return ""
    if namespace.startswith("/"):
        return namespace.rstrip("/")
    return "/" + namespace.rstrip("/")


class Node:
    """A named participant in the framework with its own parameter scope."""

    def __init__(
        self,
        name: str,
        namespace: str = "",
        bus: Optional[MessageBus] = None,
    ) -> None:
        if not name:
            raise NodeError("Node name cannot be empty.")
        self._name = name
        self._namespace = _clean_namespace(namespace)
        self._bus = bus if bus is not None else default_bus()
        fully_qualified = self.fully_qualified_name
        log("info", f"Creating node: '{fully_qualified}'")
        self._unique_id = f"{fully_qualified}-{time.time_ns()}"
        self._params = ParameterManager(fully_qualified)
        self._closed = False
        self._spin_count = 0

    @property
    def name(self) -> str:
        """The base name of the node."""
        return self._name

    @property
    def namespace(self) -> str:
        """The normalised namespace; empty for the global namespace."""
        return self._namespace

    @property
    def fully_qualified_name(self) -> str:
        """The name including its namespace, e.g. '/namespace/name'."""
        if not self._namespace:
            return f"/{self._name}"
        return f"{self._namespace}/{self._name}"

    @property
    def unique_id(self) -> str:
        """An identifier for this node instance."""
        return self._unique_id

    @property
    def params(self) -> ParameterManager:
        """The node's parameter manager."""
        return self._params

    def spin_once(self) -> None:
        """Run one processing cycle; a closed node cannot spin."""
        if self._closed:
            raise NodeError(f"Node '{self.fully_qualified_name}' has been closed.")
        self._spin_count += 1

    def resolve_topic_name(self, topic_name: str) -> str:
        """Resolve ``topic_name`` against the node's namespace."""
        if topic_name.startswith("/"):
            return topic_name
        if not self._namespace:
            return f"/{topic_name}"
        return f"{self._namespace}/{topic_name}"

    def create_publisher(self, topic_name: str) -> Publisher:
        """Create a publisher on ``topic_name`` resolved in this node's namespace."""
        resolved = self.resolve_topic_name(topic_name)
        log("info", f"[{self.fully_qualified_name}] Creating publisher for topic '{resolved}'")
        return Publisher(resolved, self._bus)

    def create_subscriber(self, topic_name: str) -> Subscriber:
        """Create a subscriber on ``topic_name`` resolved in this node's namespace."""
        resolved = self.resolve_topic_name(topic_name)
        log("info", f"[{self.fully_qualified_name}] Creating subscriber for topic '{resolved}'")
        return Subscriber(resolved, self._bus)

    def close(self) -> None:
        """Release the node; calling it again has no effect."""
        if self._closed:
            return
        self._closed = True
        log(
            "info",
            f"Node '{self.fully_qualified_name}' (ID: {self._unique_id}) "
            "is being dropped. Performing cleanup.",
        )

    def __enter__(self) -> Node:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Node(name={self._name!r}, namespace={self._namespace!r})"