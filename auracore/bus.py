"""In-process message bus, environment set-up and core logging."""

from __future__ import annotations

import inspect
import os
import queue
import threading
from dataclasses import dataclass

VERSION = "0.0.1"


@dataclass(frozen=True)
class AuraMessage:
    """A message carried on a topic."""

    topic: str
    data: str


class MessageBus:
    """Thread-safe registry mapping topic names to subscriber inboxes."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._topics: dict[str, list[queue.Queue[AuraMessage]]] = {}

    def register(self, topic_name: str) -> queue.Queue[AuraMessage]:
        """Create and register a new inbox for ``topic_name``."""
        inbox: queue.Queue[AuraMessage] = queue.Queue()
        with self._lock:
            self._topics.setdefault(topic_name, []).append(inbox)
        return inbox

    def queues(self, topic_name: str) -> list[queue.Queue[AuraMessage]]:
        """Return a snapshot of the inboxes registered for ``topic_name``."""
        with self._lock:
            return list(self._topics.get(topic_name, ()))

    def unregister(self, topic_name: str, inbox: queue.Queue[AuraMessage]) -> None:
        """Remove ``inbox`` from ``topic_name``; unknown inboxes are ignored."""
        with self._lock:
            inboxes = self._topics.get(topic_name)
            if inboxes is None:
                return
            self._topics[topic_name] = [q for q in inboxes if q is not inbox]
            if not self._topics[topic_name]:
                del self._topics[topic_name]

    def clear(self) -> None:
        """Forget every registered inbox."""
        with self._lock:
            self._topics.clear()


_DEFAULT_BUS = MessageBus()
_ENVIRONMENT_RUNNING = threading.Event()


def default_bus() -> MessageBus:
    """Return the process-wide message bus."""
    return _DEFAULT_BUS


def _is_running() -> bool:
    """Whether the core environment has been initialised and not shut down."""
    return _ENVIRONMENT_RUNNING.is_set()


def init() -> None:
    """Initialise the core environment and mark it as running."""
    print(f"[AuraCore] Initializing AuraOS environment (v{VERSION})...")
    _ENVIRONMENT_RUNNING.set()


def shutdown() -> None:
    """Shut the core environment down and mark it as stopped."""
    print("[AuraCore] Shutting down AuraOS environment...")
    _ENVIRONMENT_RUNNING.clear()


def log(level: str, message: str) -> None:
    """Print ``message`` tagged with ``level`` and the caller's location."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        location = f"{os.path.basename(caller.f_code.co_filename)}:{caller.f_lineno}"
    else:
        location = "?:0"
    del frame, caller
    print(f"[AuraCore::{level.upper()}] [{location}] {message}")