# qniokit

Small, dependency-free building blocks for network I/O code.

| Module | What it gives you |
| --- | --- |
| `qniokit.base64codec` | `encode(data)` and `decode(text)`: standard-alphabet base64 with `=` padding. `decode` ignores leading and trailing whitespace, stops at the first padding and raises `ValueError` on any other character or a truncated group. |
| `qniokit.fifo` | `Fifo`: a first-in, first-out queue with `enqueue`, `dequeue`, `first`, `len()` and iteration. `dequeue` and `first` raise `IndexError` when it is empty. |
| `qniokit.iovector` | `IoVector`: an ordered list of buffers that keeps their combined byte size (`total_size()`), with `insert`, `remove`, `push_front`, `push_back`, `pop_front`, `pop_back`, `copy_from`, indexing and iteration. `clear(destructor)` and `destroy()` pass each buffer to a destructor before emptying. |
| `qniokit.backoff` | `ExponentialBackoff`: a spin-wait whose iteration count (`value()`) doubles after each `wait()` while below its ceiling. |
| `qniokit.endpoints` | `SocketEndpoint`: `read`, `write`, `readv`, `writev` and `close` over a connected socket, usable as a context manager. `NullEndpoint`: an endpoint whose reads return `b""` and whose writes report zero bytes. |
| `qniokit.jsontree` | `JsonNode` and `JsonType`: a mutable JSON tree. Numbers are unsigned 64-bit integers; object keys keep their order and are looked up ignoring ASCII case. Nodes can be added by value or as references sharing another node's contents, detached, deleted and replaced, and turned into plain Python values with `to_python()`. |
| `qniokit.jsoncodec` | `parse(text)` reads the first JSON value in the text (numbers must be unsigned integers) and raises `JsonParseError`, with a `position`, on malformed input. `dumps(node, formatted=True)` writes tab-indented or compact text. |
| `qniokit.rwlock` | `RWLock`: a reader-writer lock in which a waiting writer keeps new readers out, with try-locks, `write_downgrade()` and the context managers `reading()` and `writing()`. `RecursiveRWLock`: a writer named by a non-zero id may take the write lock again. |
| `qniokit.ring` | `Ring`: a bounded ring with a power-of-two size holding at most `size - 1` items, for one producer and any number of consumers. It raises `RingFull` and `RingEmpty`. |
| `qniokit.brlock` | `BRLock` and `BRReader`: a big-reader lock. Each reader registers once with `register()` and may nest read locks; a writer waits for every registered reader to leave. |

## Install

```
pip install qniokit
```

The `test` extra installs pytest for running the test suite.

## Examples

```python
from qniokit.base64codec import encode, decode

assert encode(b"hello") == "aGVsbG8="
assert decode("  aGVsbG8=\n") == b"hello"
```

```python
from qniokit.fifo import Fifo

q = Fifo()
q.enqueue("a")
q.enqueue("b")
assert q.first() == "a"
assert q.dequeue() == "a"
assert len(q) == 1
```

```python
from qniokit.iovector import IoVector

vec = IoVector()
vec.push_back(b"abc")
vec.push_front(b"xy")
assert vec.total_size() == 5
assert vec.pop_front() == b"xy"
```

```python
from qniokit.jsoncodec import parse, dumps
from qniokit.jsontree import JsonNode

node = parse('{"Name": "disk0", "size": 1024}')
assert node.get("name").to_python() == "disk0"
assert dumps(node, False) == '{"Name":"disk0","size":1024}'

node.add("ready", JsonNode.true())
assert node.to_python() == {"Name": "disk0", "size": 1024, "ready": True}
```

```python
from qniokit.ring import Ring, RingEmpty

ring = Ring(4)            # holds up to 3 items
ring.enqueue("x")
assert ring.dequeue() == "x"
try:
    ring.dequeue()
except RingEmpty:
    pass
```

```python
from qniokit.rwlock import RWLock

lock = RWLock()
with lock.reading():
    ...
with lock.writing():
    ...
```

```python
from qniokit.brlock import BRLock

lock = BRLock()
reader = lock.register()
reader.read_lock()
assert not lock.write_trylock(3)
reader.read_unlock()
lock.write_lock()
lock.write_unlock()
lock.unregister(reader)
```

## What it does not do

qniokit is a set of separate pieces. It does not open or manage connections,
define a message format or run a server or client, and it has no command-line
program. JSON numbers are limited to unsigned integers; fractions, signs and
exponents are not read or written.