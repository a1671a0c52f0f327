# auracore

Core building blocks for a small robotics application framework:

- **Nodes** (`auracore.node.Node`): named units of computation that live in a
  namespace. Each node has its own parameter store and creates publishers and
  subscribers for topics.
- **Parameters** (`auracore.params.ParameterManager`, `ParamValue`, `ParamKind`):
  typed string, integer, float and boolean settings with declare, set and get
  operations.
- **Publish/subscribe** (`auracore.comm.Publisher`, `Subscriber`): text
  messages (`auracore.bus.AuraMessage`) carried over an in-process,
  thread-safe message bus (`auracore.bus.MessageBus`).
- **Errors** (`auracore.errors`): one exception hierarchy rooted at `AuraError`.

## Installation

```
pip install .
```

## Usage

```python
from auracore.bus import init, shutdown
from auracore.node import Node
from auracore.params import ParamValue

init()
with Node("talker_node", "/examples") as talker, Node("listener_node", "/examples") as listener:
    talker.params.declare_parameter("publish_rate_hz", ParamValue.float(1.0))
    rate = talker.params.get_parameter("publish_rate_hz").as_float()

    with listener.create_subscriber("chatter") as sub:
        pub = talker.create_publisher("chatter")   # resolves to /examples/chatter
        pub.publish("Hello!")
        message = sub.recv_timeout(0.1)
        print(message.topic, message.data)
shutdown()
```

### Nodes

`Node(name, namespace="", bus=None)` raises `NodeError` for an empty name.
The namespace is normalised: `""` and `"/"` mean the global namespace, a
missing leading slash is added and trailing slashes are removed. `name`,
`namespace`, `fully_qualified_name`, `unique_id` and `params` are read-only
properties. `resolve_topic_name` leaves names that start with `/` unchanged
and places other names inside the node's namespace. A node is a context
manager; after `close()`, `spin_once()` raises `NodeError`.

### Parameters

Build values with `ParamValue.string`, `ParamValue.int` (64-bit range),
`ParamValue.float` and `ParamValue.bool`; read them back with `as_string`,
`as_int`, `as_float` and `as_bool`, which return `None` on a kind mismatch,
or with `get_string`, which raises `ParameterConfigurationError`.
`ParameterManager.declare_parameter` only sets a value that is not already
present, `set_parameter` always overwrites, `has_parameter` tests for a name,
and `get_parameter` raises `ParameterNotFoundError` for an unknown name.

### Publish/subscribe

`Publisher` requires an absolute, non-empty topic name and raises
`CommunicationError` otherwise; `publish` delivers a string to every
subscriber registered on the topic at that moment. `Subscriber.recv_timeout`
accepts seconds or a `datetime.timedelta` and raises `CommunicationError`
with the detail `"Receive timed out"` when nothing arrives in time, or
`"Channel disconnected"` once the subscriber is closed and its buffered
messages have been read. Both take an optional `bus`; by default they share
the process-wide bus returned by `auracore.bus.default_bus()`.

## Example programs

Two commands run a talker and a listener:

```
aura-talker [--max-messages N]
aura-listener [--max-messages N]
```

The talker publishes `"<greeting> Count: <n>"` on `/examples/chatter` at the
rate given by its `publish_rate_hz` parameter (default 1.0 Hz); the listener
logs every message it receives on that topic. Both run until Ctrl-C, or until
`--max-messages` messages have been sent or received. The loops are also
available as functions: `auracore.talker.run_talker` and
`auracore.listener.run_listener`.

## What this package does not do

The message bus lives inside one Python process. There is no network or
inter-process transport, so `aura-talker` and `aura-listener` started as two
separate commands do not see each other's messages; to connect them, run
`run_talker` and `run_listener` in threads of the same process. There are no
services, actions, quality-of-service settings, executors or parameter files.

## Running the tests

```
pip install .[test]
pytest
```