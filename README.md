# gopherlab

A small collection of thread-based concurrency patterns. Each can be used as a
library piece and run as a short demonstration that prints what it does.

- **communication**: `producer` feeds a bounded queue (size 5) that several
  `consumer` threads drain; `run_communicate_task(count, consumers)` returns a
  map from consumer id to the items it processed.
- **customcache**: `SimpleCache` (no locking) and `ConcurrentCache`
  (lock-protected), both with `set`, `get(key, default)`, `delete`, `in` and
  `len`.
- **sharedresource**: `SafeCounter` (`inc`, `value`) and `SharedMap`
  (`store`, `load`), both safe to use from many threads.
- **processing**: `run_process_items` handles each item on its own thread;
  `TaskProcessor` is a fixed worker pool with `submit`, `stop` and
  context-manager support. Exceptions raised by tasks are collected in its
  `errors` list instead of stopping the worker.
- **hungrygophers**: dining gophers that share forks, with a
  `threading.Semaphore` limiting how many sit at the table at once
  (`Gopher.eat`, `run_gopher_semaphore(num_gophers, seats, meals)`).
- **ratelimiter**: a fixed-window `RateLimiter` whose counts are wiped once per
  window by a background thread, and a `SlidingWindowRateLimiter` with
  `allow`, `remaining`, `retry_after` and `cleanup`. Both take a frozen config
  dataclass (`RateLimiterConfig`, `SlidingWindowConfig`) and have `close` to
  stop their background thread.

## Installation

```
pip install .
```

## Command line

Run a demonstration by name:

```
gopherlab gophersemaphore
gopherlab taskprocessor
gopherlab slidingwindowratelimiter
```

The program names are `communicate`, `process`, `sharedresource`,
`sharedresourcemap`, `simplecache`, `concurrentcache`, `ratelimiter`,
`slidingwindowratelimiter`, `taskprocessor` and `gophersemaphore`. With no
name, `gophersemaphore` runs. An unknown name prints a message and exits with
status 1.

The demonstrations sleep to simulate work; the rate limiter ones take several
seconds to finish.

## Library use

```python
from gopherlab.customcache import ConcurrentCache
from gopherlab.processing import TaskProcessor
from gopherlab.ratelimiter import SlidingWindowConfig, SlidingWindowRateLimiter

cache = ConcurrentCache()
cache.set("user:1", {"name": "Alice"})
print(cache.get("user:1", None))

with TaskProcessor(3) as pool:
    for n in range(5):
        pool.submit(lambda n=n: print("task", n))

limiter = SlidingWindowRateLimiter(SlidingWindowConfig(limit=5, window=10.0, cleanup_period=5.0))
if limiter.allow("alice"):
    print("remaining:", limiter.remaining("alice"))
else:
    print("retry after:", limiter.retry_after("alice"))
limiter.close()
```

`SlidingWindowRateLimiter` also accepts a `clock` callable (default
`time.monotonic`), which makes its timing easy to control in tests.

## What it does not do

Everything is in memory and within one process: the caches and rate limiters
do not persist anything or share state between processes, and the caches have
no expiry or size limit.

## Tests

```
pip install ".[test]"
pytest
```