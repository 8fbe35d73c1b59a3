# groundwork

A collection of small building blocks for Python services.

## Modules

- **groundwork.errorz** – `ApiError` (code, message, HTTP status and an
  optional cause), `FieldError` for a single invalid field, and
  `ErrorHolder`, which keeps only the first error it is given. Constructors
  such as `new_not_found()`, `new_unhandled(cause)`,
  `new_field_api_error(field_error)`, `new_invalid_filter(cause)` and
  `new_invalid_sort(err)` build ready-made `ApiError`s.
- **groundwork.genext** – list helpers for any values: `equal_slices`,
  `contains`, `contains_all`, `contains_any`, `remove`, `first_index_of`
  (returns `None` when absent), `difference`, `or_default`, `set_to_slice`
  and `slice_to_set`.
- **groundwork.stringz** – the same helpers for strings, plus
  `to_string_slice` (decode byte strings), `or_empty` and the generators
  `permutations(v)` and `permutation_with(base, v)`.
- **groundwork.mathz** – `max_int64`, `min_int64`, `min_int` and `min_of`.
- **groundwork.uuidz** – `to_string(uuid_bytes)` formats 16 bytes as a
  hyphenated UUID, or returns `invalid-uuid-size-of-N-bytes`.
- **groundwork.info** – `byte_count(size)` with decimal prefixes,
  `now_in_milliseconds()` and `MAX_UDP_PACKET_SIZE`.
- **groundwork.atomic** – `AtomicValue` (`store`, `load`,
  `compare_and_swap`, `swap`) and `RefCount`, a wrapping 32-bit counter with
  `incr` and `decr`.
- **groundwork.copy_on_write** – `CopyOnWriteMap`, `CopyOnWriteSlice` and
  `CowSlice`. Readers get snapshots without taking a lock; every write
  replaces the whole collection.
- **groundwork.semaphore** – `Semaphore(size)`, starting full, with
  `acquire`, `acquire_with_timeout`, `try_acquire` and a `release` that
  returns `False` when the semaphore is already full.
- **groundwork.wait_group** – `WaitGroup` waits on any number of notifiers
  (objects with `wait(timeout)`, such as `threading.Event`) up to a timeout.
- **groundwork.iomonad** – `wrap(writer)` returns an `ErrorWriter` with
  `write`, `print`, `println` and `printf` (`%`-style formatting); after the
  first write error every further write is skipped.
- **groundwork.pool** – a worker thread `Pool` configured by `PoolConfig`.
  It grows while queued work waits, retires idle workers above the minimum,
  and raises `QueueFullError`, `QueueTimeoutError` or `PoolStoppedError`
  (all `PoolError`s) when work cannot be submitted.
- **groundwork.sequencer** – `SingleWriterSequencer` releases items in
  sequence order starting at 1 with no gaps; `NoopSequencer` passes items
  through as they arrive. Closed sequencers raise `SequencerClosedError`;
  deadlines (`time.monotonic()` values) raise `SequencerTimeoutError`.
- **groundwork.versions** – `parse_sem_ver`, `SemVer`, `VersionInfo`, the
  pipe-separated `VersionEncDec` (`STD_VERSION_ENC_DEC`) and
  `new_default_version_provider()`.
- **groundwork.pem** – `decode_all` into `PemBlock`s, certificate parsing,
  `encode_to_bytes`/`encode_to_string`, SHA-1 fingerprints and
  `marshal_to_pem(certs, writer)`.
- **groundwork.mempool** – reusable byte buffers: `BufferPool` allocates when
  empty, `StrictBufferPool` blocks until a buffer is released. A
  `PooledBuffer` can be used as a context manager.
- **groundwork.rate** – rate limiter protocols and their pass-through
  implementations `NoOpRateLimiter`, `NoOpAdaptiveRateLimiter`,
  `NoOpAdaptiveRateLimitTracker` and `NoOpRateLimitControl`.
- **groundwork.debugz** – `generate_stack`, `generate_local_stack`,
  `dump_stack`, `dump_local_stack`, `dump_stack_to_file`,
  `dump_stack_on_tick` and `add_stack_dump_handler` (prints all stacks on
  SIGQUIT).
- **groundwork.term** – `prompt(text)` and `prompt_password(text, allow_empty)`.
- **groundwork.netz** – `wait_for_port_active(address, duration)` and
  `wait_for_port_gone(address, duration)`.
- **groundwork.halfclose** – the `half-close-test` command described below.

## Installation

```
pip install groundwork
```

## Examples

```python
from groundwork.versions import parse_sem_ver, VersionInfo

v = parse_sem_ver("v0.18.4")
print(str(v))                                   # 0.18.4
print(v.compare_to(parse_sem_ver("0.18.5")))    # -1
print(VersionInfo(version="v0.19.0").has_minimum_version("0.18.5"))  # True
```

```python
from groundwork.sequencer import SingleWriterSequencer

seq = SingleWriterSequencer(10)
seq.put_sequenced(2, "b")
seq.put_sequenced(1, "a")
print(seq.get_next(), seq.get_next())   # a b
seq.close()
```

```python
from groundwork.pool import Pool, PoolConfig

pool = Pool(PoolConfig(queue_size=100, min_workers=2, max_workers=10, idle_time=0.1))
pool.queue(lambda: print("working"))
pool.shutdown()
```

```python
from groundwork.info import byte_count

print(byte_count(1500))   # 1.5 kB
```

## Half-close test

The package installs a small tool that checks TCP half-close behaviour
between two endpoints. Start a server in one terminal:

```
half-close-test server 127.0.0.1:9000
```

and a client in another:

```
half-close-test client 127.0.0.1:9000
```

The client sends `hello` and closes its write side; the server prints what
it received, answers `goodbye` and closes its own write side.

## What it does not do

- `groundwork.rate` has no working rate limiter: its implementations run
  every operation at once and never limit anything.
- There is no helper for initialising object fields by name.

## Running the tests

```
pip install "groundwork[test]"
pytest
```