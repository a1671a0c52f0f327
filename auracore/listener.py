"""Example node that prints the messages arriving on a topic."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Optional, Sequence

from auracore.bus import AuraMessage, init, log, shutdown
from auracore.errors import AuraError, CommunicationError
from auracore.node import Node
from auracore.talker import _stop_on_interrupt

_PREFIX = "[AuraListenerExample]"
_TIMED_OUT = "Receive timed out"


def run_listener(
    node: Node,
    stop_event: Optional[threading.Event] = None,
    max_messages: Optional[int] = None,
    poll_interval: float = 0.1,
) -> list[AuraMessage]:
    """Receive messages on ``chatter`` until stopped; return those received."""
    stop = stop_event if stop_event is not None else threading.Event()
    received: list[AuraMessage] = []
    with node.create_subscriber("chatter") as subscriber:
        print(
            f"{_PREFIX} Subscriber created for topic: "
            f"'{subscriber.topic_name}'. Waiting for messages..."
        )
        while not stop.is_set() and (max_messages is None or len(received) < max_messages):
            node.spin_once()
            try:
                message = subscriber.recv_timeout(poll_interval)
            except CommunicationError as exc:
                if exc.detail == _TIMED_OUT:
                    continue
                log(
                    "warn",
                    f"[{node.fully_qualified_name}] Subscription channel for topic "
                    f"'{subscriber.topic_name}' disconnected. Assuming no more messages.",
                )
                break
            log(
                "info",
                f"[{node.fully_qualified_name}] Received on topic "
                f"'{message.topic}': \"{message.data}\"",
            )
            received.append(message)
    return received


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="aura-listener",
        description="Print the messages published on /examples/chatter.",
    )
    parser.add_argument(
        "--max-messages",
        type=_non_negative,
        default=None,
        help="stop after receiving this many messages",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the listener example; returns the process exit status."""
    args = _parse_args(argv)
    print(f"{_PREFIX} Starting up...")
    init()
    stop = threading.Event()
    try:
        with Node("listener_node", "/examples") as node:
            print(
                f"{_PREFIX} Node '{node.fully_qualified_name}' "
                f"created with ID '{node.unique_id}'."
            )
            with _stop_on_interrupt(stop, _PREFIX):
                run_listener(node, stop, args.max_messages)
    except AuraError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"{_PREFIX} Loop finished. Shutting down AuraOS...")
    shutdown()
    print(f"{_PREFIX} Exited cleanly.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())