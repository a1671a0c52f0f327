import threading
import time

import pytest

from auracore.bus import MessageBus
from auracore.comm import Subscriber
from auracore.errors import CommunicationError
from auracore.node import Node
from auracore.params import ParamValue
from auracore.talker import (
    DEFAULT_GREETING,
    FALLBACK_GREETING,
    main,
    publish_interval,
    run_talker,
)


@pytest.fixture
def bus():
    return MessageBus()


@pytest.fixture
def node(bus):
    talker = Node("talker_node", "/examples", bus)
    yield talker
    talker.close()


def _fast(node):
    node.params.set_parameter("publish_rate_hz", ParamValue.float(1000.0))


def _drain(subscriber, count):
    return [subscriber.recv_timeout(1.0).data for _ in range(count)]


def test_publish_interval_for_positive_rate():
    assert publish_interval(2.0) == pytest.approx(0.5)
    assert publish_interval(1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("rate", [0.0, -3.0])
def test_publish_interval_falls_back_for_invalid_rate(rate):
    assert publish_interval(rate) == 1.0


def test_publishes_numbered_default_greetings(bus, node):
    _fast(node)
    with Subscriber("/examples/chatter", bus) as sub:
        sent = run_talker(node, max_messages=3)
        assert sent == 3
        assert _drain(sub, 3) == [f"{DEFAULT_GREETING} Count: {i}" for i in range(3)]
        with pytest.raises(CommunicationError):
            sub.recv_timeout(0.01)


def test_messages_carry_resolved_topic(bus, node):
    _fast(node)
    with Subscriber("/examples/chatter", bus) as sub:
        run_talker(node, max_messages=1)
        message = sub.recv_timeout(1.0)
    assert message.topic == "/examples/chatter"


def test_declares_default_parameters(node):
    assert run_talker(node, max_messages=0) == 0
    assert node.params.get_parameter("publish_rate_hz") == ParamValue.float(1.0)
    assert node.params.get_parameter("greeting_message") == ParamValue.string(DEFAULT_GREETING)


def test_preset_parameters_are_kept(bus, node):
    _fast(node)
    node.params.set_parameter("greeting_message", ParamValue.string("Hi"))
    with Subscriber("/examples/chatter", bus) as sub:
        run_talker(node, max_messages=2)
        assert _drain(sub, 2) == ["Hi Count: 0", "Hi Count: 1"]
    assert node.params.get_parameter("publish_rate_hz") == ParamValue.float(1000.0)


def test_wrong_rate_type_falls_back(node, capsys):
    node.params.set_parameter("publish_rate_hz", ParamValue.int(5))
    assert run_talker(node, max_messages=1) == 1
    assert "Configured to publish at 1.00 Hz" in capsys.readouterr().out


def test_wrong_greeting_type_falls_back(bus, node):
    _fast(node)
    node.params.set_parameter("greeting_message", ParamValue.bool(True))
    with Subscriber("/examples/chatter", bus) as sub:
        run_talker(node, max_messages=1)
        assert sub.recv_timeout(1.0).data == f"{FALLBACK_GREETING} Count: 0"


def test_preset_stop_event_sends_nothing(bus, node):
    stop = threading.Event()
    stop.set()
    with Subscriber("/examples/chatter", bus) as sub:
        assert run_talker(node, stop) == 0
        with pytest.raises(CommunicationError):
            sub.recv_timeout(0.01)


def test_stop_event_interrupts_wait(node):
    stop = threading.Event()
    timer = threading.Timer(0.05, stop.set)
    started = time.monotonic()
    timer.start()
    try:
        sent = run_talker(node, stop)
    finally:
        timer.cancel()
    assert sent >= 1
    assert time.monotonic() - started < 0.9


def test_publishing_without_subscribers_still_counts(node):
    _fast(node)
    assert run_talker(node, max_messages=4) == 4


def test_main_runs_and_exits_cleanly(capsys):
    assert main(["--max-messages", "1"]) == 0
    out = capsys.readouterr().out
    assert f"{DEFAULT_GREETING} Count: 0" in out
    assert "[AuraTalkerExample] Exited cleanly." in out


def test_main_rejects_negative_limit():
    with pytest.raises(SystemExit):
        main(["--max-messages", "-1"])