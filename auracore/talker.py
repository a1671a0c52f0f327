"""Example node that periodically publishes greetings on a topic."""

from __future__ import annotations

import argparse
import contextlib
import signal
import sys
import threading
from collections.abc import Iterator
from typing import Optional, Sequence

from auracore.bus import init, log, shutdown
from auracore.errors import AuraError
from auracore.node import Node
from auracore.params import ParameterManager, ParamValue

DEFAULT_RATE_HZ = 1.0
DEFAULT_GREETING = "Hello from AuraOS Talker!"
FALLBACK_GREETING = "Default Greeting (param error)"

_PREFIX = "[AuraTalkerExample]"
_COUNT_MODULUS = 2**32


def publish_interval(rate_hz: float) -> float:
    """Return the pause in seconds between messages for ``rate_hz``."""
    if rate_hz > 0.0:
        return 1.0 / rate_hz
    return 1.0


def _read_rate(params: ParameterManager) -> float:
    rate = params.get_parameter("publish_rate_hz").as_float()
    if rate is None:
        log("warn", "publish_rate_hz parameter is not a float, using default 1.0")
        return DEFAULT_RATE_HZ
    return rate


def _read_greeting(params: ParameterManager) -> str:
    greeting = params.get_parameter("greeting_message").as_string()
    if greeting is None:
        log("warn", "greeting_message parameter is not a string, using default.")
        return FALLBACK_GREETING
    return greeting


@contextlib.contextmanager
def _stop_on_interrupt(stop_event: threading.Event, prefix: str) -> Iterator[None]:
    """Set ``stop_event`` on Ctrl-C while the block runs."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handler(signum: int, frame: object) -> None:
        print(f"\n{prefix} CTRL-C received, signaling shutdown...")
        stop_event.set()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def run_talker(
    node: Node,
    stop_event: Optional[threading.Event] = None,
    max_messages: Optional[int] = None,
) -> int:
    """Publish numbered greetings on ``chatter`` until stopped.

    Returns the number of messages sent.
    """
    stop = stop_event if stop_event is not None else threading.Event()
    params = node.params
    params.declare_parameter("publish_rate_hz", ParamValue.float(DEFAULT_RATE_HZ))
    params.declare_parameter("greeting_message", ParamValue.string(DEFAULT_GREETING))

    rate_hz = _read_rate(params)
    greeting = _read_greeting(params)
    print(
        f"{_PREFIX} Configured to publish at {rate_hz:.2f} Hz "
        f"with message prefix: '{greeting}'"
    )
    interval = publish_interval(rate_hz)

    publisher = node.create_publisher("chatter")
    print(f"{_PREFIX} Publisher created for topic: '{publisher.topic_name}'")
    print(f"{_PREFIX} Starting to publish messages...")

    count = 0
    sent = 0
    while not stop.is_set() and (max_messages is None or sent < max_messages):
        node.spin_once()
        data = f"{greeting} Count: {count}"
        log("info", f"[{node.fully_qualified_name}] Publishing: '{data}'")
        try:
            publisher.publish(data)
        except AuraError as exc:
            log("error", f"[{node.fully_qualified_name}] Failed to publish: {exc}")
        count = (count + 1) % _COUNT_MODULUS
        sent += 1
        if max_messages is not None and sent >= max_messages:
            break
        stop.wait(interval)
    return sent


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="aura-talker",
        description="Publish greetings on /examples/chatter until interrupted.",
    )
    parser.add_argument(
        "--max-messages",
        type=_non_negative,
        default=None,
        help="stop after sending this many messages",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the talker example; returns the process exit status."""
    args = _parse_args(argv)
    print(f"{_PREFIX} Starting up...")
    init()
    stop = threading.Event()
    try:
        with Node("talker_node", "/examples") as node:
            print(
                f"{_PREFIX} Node '{node.fully_qualified_name}' "
                f"created with ID '{node.unique_id}'."
            )
            with _stop_on_interrupt(stop, _PREFIX):
                run_talker(node, stop, args.max_messages)
    except AuraError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"{_PREFIX} Loop finished. Shutting down AuraOS...")
    shutdown()
    print(f"{_PREFIX} Exited cleanly.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())