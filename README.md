# acidkit

Building blocks for network services in plain Python:

- `acidkit.byte_array.ByteArray`: a growable binary buffer stored in
  fixed-size blocks. It offers fixed-width integers (big-endian unless
  `little_endian` is set), zigzag varints, floats and doubles,
  length-prefixed strings, a settable `position`, `to_bytes()`,
  `to_hex_string()`, `write_to_file()` / `read_from_file()`, and
  `get_read_buffers()` / `get_write_buffers()` that hand out
  `memoryview`s over the blocks. Reading past the end raises `IndexError`.
- `acidkit.varint`: `encode_zigzag`, `decode_zigzag`, `encode_varint` and
  `decode_varint` for 32- and 64-bit widths.
- `acidkit.endian`: `byte_swap` and `endian_cast` (host to network order)
  for 1, 2, 4 and 8-byte integers.
- `acidkit.config`: `Config`, a registry of `ConfigVar`s named in dotted
  lower-case form. Values are converted to the type of their default when
  loaded from YAML (`load_from_yaml`, `load_from_file`), and listeners
  registered with `add_listener` are called with the old and new value on
  every change.
- `acidkit.http`: the `HttpMethod`, `HttpStatus` and `HttpContentType`
  enums with their string conversions, `CaseInsensitiveDict`, `get_as`,
  and the `HttpRequest` and `HttpResponse` dataclasses with
  case-insensitive headers (and parameters and cookies on requests).
- `acidkit.lru_map.LRUMap`: a fixed-capacity map that evicts the least
  recently used key.
- `acidkit.safe_queue.SafeQueue`: a thread-safe FIFO queue with
  `try_pop()` and a blocking `wait_and_pop(timeout)` that raises
  `TimeoutError`.
- `acidkit.time_measure.TimeMeasure`: a stopwatch; used as a context
  manager it prints its report (milliseconds, microseconds and
  nanoseconds) on exit. `group_thousands` formats numbers with commas.
- `acidkit.fd_manager`: `FdManager` keeps an `FdCtx` per descriptor,
  detects sockets, switches them to non-blocking mode and stores receive
  and send timeouts (`TimeoutKind.RECV`, `TimeoutKind.SEND`).
- `acidkit.coroutine.Task`: wraps a generator that starts on the first
  `resume()`; `get()` returns the last yielded or returned value.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Examples

Binary buffer:

```python
from acidkit.byte_array import ByteArray

buf = ByteArray(base_size=16)
buf.write_fuint32(0xDEADBEEF)
buf.write_int64(-42)
buf.write_string_vint(b"hello")

buf.position = 0
assert buf.read_fuint32() == 0xDEADBEEF
assert buf.read_int64() == -42
assert buf.read_string_vint() == b"hello"
```

Configuration:

```python
from acidkit.config import Config

config = Config()
port = config.lookup("server.port", 8080, "listen port")
port.add_listener(lambda old, new: print(f"port {old} -> {new}"))
config.load_from_yaml({"server": {"port": 9090}})
assert port.value == 9090
```

HTTP messages:

```python
from acidkit.http import HttpRequest, HttpMethod, HttpContentType

request = HttpRequest()
request.method = HttpMethod.POST
request.set_header("content-type", "application/json")
assert request.get_header("Content-Type") == "application/json"
assert request.content_type() is HttpContentType.APPLICATION_JSON
```

LRU map:

```python
from acidkit.lru_map import LRUMap

cache = LRUMap(2)
cache.set("a", 1)
cache.set("b", 2)
cache.get("a")
cache.set("c", 3)          # evicts "b"
assert cache.get("b") is None
assert len(cache) == 2
```

Task:

```python
from acidkit.coroutine import Task

def steps():
    yield 1
    return 2

task = Task(steps())
task.resume()
assert task.get() == 1
task.resume()
assert task.done() and task.get() == 2
```

Stopwatch:

```python
from acidkit.time_measure import TimeMeasure

with TimeMeasure() as timer:
    sum(range(1_000_000))
print(timer.elapsed_micro())
```

## What it does not do

acidkit is a set of parts, not a server. It has no event loop, scheduler
or socket layer, no TCP or HTTP server, no HTTP client, and no parser
that turns bytes on the wire into `HttpRequest` or `HttpResponse`
objects, nor code that writes them back out. `FdManager` only records
per-descriptor state; it does not wait on or perform any I/O. There is
no command-line program.