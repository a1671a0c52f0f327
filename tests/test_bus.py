import threading

import pytest

from auracore.bus import (
    VERSION,
    AuraMessage,
    MessageBus,
    default_bus,
    init,
    log,
    shutdown,
)


def test_register_returns_inbox_listed_for_topic():
    bus = MessageBus()
    inbox = bus.register("/chatter")
    assert bus.queues("/chatter") == [inbox]
    assert bus.queues("/other") == []


def test_register_twice_gives_distinct_inboxes():
    bus = MessageBus()
    first = bus.register("/chatter")
    second = bus.register("/chatter")
    listed = bus.queues("/chatter")
    assert len(listed) == 2
    assert listed[0] is first
    assert listed[1] is second


def test_queues_returns_snapshot():
    bus = MessageBus()
    bus.register("/chatter")
    snapshot = bus.queues("/chatter")
    snapshot.clear()
    assert len(bus.queues("/chatter")) == 1


def test_unregister_removes_only_that_inbox():
    bus = MessageBus()
    first = bus.register("/chatter")
    second = bus.register("/chatter")
    bus.unregister("/chatter", first)
    assert bus.queues("/chatter") == [second]
    bus.unregister("/chatter", second)
    assert bus.queues("/chatter") == []


def test_unregister_unknown_is_ignored():
    bus = MessageBus()
    inbox = bus.register("/a")
    bus.unregister("/b", inbox)
    assert bus.queues("/a") == [inbox]


def test_clear_forgets_everything():
    bus = MessageBus()
    bus.register("/a")
    bus.register("/b")
    bus.clear()
    assert bus.queues("/a") == []
    assert bus.queues("/b") == []


def test_inbox_carries_messages():
    bus = MessageBus()
    inbox = bus.register("/chatter")
    message = AuraMessage(topic="/chatter", data="hello")
    for q in bus.queues("/chatter"):
        q.put(message)
    assert inbox.get_nowait() == message


def test_message_is_frozen():
    message = AuraMessage(topic="/t", data="x")
    with pytest.raises(AttributeError):
        message.data = "y"
    assert message.data == "x"
    assert message.topic == "/t"


def test_concurrent_registration():
    bus = MessageBus()
    threads = [threading.Thread(target=bus.register, args=("/t",)) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(bus.queues("/t")) == 20


def test_default_bus_is_shared():
    topic = "/auracore_test_shared_bus"
    bus = default_bus()
    inbox = bus.register(topic)
    try:
        assert default_bus().queues(topic) == [inbox]
    finally:
        bus.unregister(topic, inbox)
    assert default_bus().queues(topic) == []


def test_init_and_shutdown_print(capsys):
    init()
    shutdown()
    out = capsys.readouterr().out
    assert f"[AuraCore] Initializing AuraOS environment (v{VERSION})..." in out
    assert "[AuraCore] Shutting down AuraOS environment..." in out


def test_log_format(capsys):
    log("warn", "something odd")
    out = capsys.readouterr().out.strip()
    assert out.startswith("[AuraCore::WARN] [test_bus.py:")
    assert out.endswith("] something odd")