"""Topic-based publish/subscribe on top of the in-process message bus."""

from __future__ import annotations

import queue
from datetime import timedelta
from typing import Optional, Union

from auracore.bus import AuraMessage, MessageBus, default_bus, log
from auracore.errors import CommunicationError

DEFAULT_MESSAGE_QUEUE_SIZE = 10
"""Nominal queue depth for publishers and subscribers."""

_TIMED_OUT = "Receive timed out"
_DISCONNECTED = "Channel disconnected"


def _seconds(timeout: Union[float, int, timedelta]) -> float:
    if isinstance(timeout, timedelta):
        seconds = timeout.total_seconds()
    else:
        seconds = float(timeout)
    return max(seconds, 0.0)


class Publisher:
    """Sends string messages to every subscriber of one topic."""

    def __init__(self, topic_name: str, bus: Optional[MessageBus] = None) -> None:
        if not topic_name or not topic_name.startswith("/"):
            raise CommunicationError(
                f"Invalid topic name '{topic_name}': "
                "Must be absolute (start with '/') and non-empty."
            )
        log("info", f"Creating publisher for topic: '{topic_name}'")
        self._topic_name = topic_name
        self._bus = bus if bus is not None else default_bus()

    @property
    def topic_name(self) -> str:
        return self._topic_name

    def publish(self, data: str) -> None:
        """Deliver ``data`` to every subscriber currently on the topic."""
        if not isinstance(data, str):
            raise TypeError(f"expected str, got {type(data).__name__}")
        log("trace", f"Attempting to publish to topic '{self._topic_name}': \"{data}\"")
        message = AuraMessage(topic=self._topic_name, data=data)

        inboxes = self._bus.queues(self._topic_name)
        if not inboxes:
            log("trace", f"No active subscribers for topic '{self._topic_name}' at the moment.")
            return

        for inbox in inboxes:
            inbox.put(message)
            log("trace", f"Successfully sent message to a subscriber for topic '{self._topic_name}'")

    def __repr__(self) -> str:
        return f"Publisher(topic_name={self._topic_name!r})"


class Subscriber:
    """Receives the messages published on one topic."""

    def __init__(self, topic_name: str, bus: Optional[MessageBus] = None) -> None:
        log("info", f"Creating subscriber for topic: '{topic_name}'")
        self._topic_name = topic_name
        self._bus = bus if bus is not None else default_bus()
        self._inbox: queue.Queue[AuraMessage] = self._bus.register(topic_name)
        self._closed = False

    @property
    def topic_name(self) -> str:
        return self._topic_name

    def recv_timeout(self, timeout: Union[float, int, timedelta]) -> AuraMessage:
        """Wait up to ``timeout`` (seconds or timedelta) for the next message.

        Raises CommunicationError when nothing arrives in time, or when the
        subscriber is closed and every buffered message has been taken.
        """
        if self._closed:
            try:
                return self._inbox.get_nowait()
            except queue.Empty:
                raise CommunicationError(_DISCONNECTED) from None
        try:
            return self._inbox.get(timeout=_seconds(timeout))
        except queue.Empty:
            raise CommunicationError(_TIMED_OUT) from None

    def close(self) -> None:
        """Stop receiving new messages; buffered ones can still be read."""
        if self._closed:
            return
        self._closed = True
        self._bus.unregister(self._topic_name, self._inbox)

    def __enter__(self) -> Subscriber:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Subscriber(topic_name={self._topic_name!r})"