"""Shared state guarded for concurrent access: a counter and a map."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any


class SafeCounter:
    """A counter that many threads may increment."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def inc(self) -> None:
        """Increment the counter, holding the lock for a short while."""
        with self._lock:
            self._count += 1
            print(f"Incremented count to {self._count}")
            time.sleep(0.01)

    def value(self) -> int:
        """Return the current count."""
        with self._lock:
            return self._count


class SharedMap:
    """A map whose store and load are safe from any thread."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, Any] = {}

    def store(self, key: str, value: Any) -> None:
        """Add or replace the value under key."""
        with self._lock:
            self._data[key] = value
        print(f"Stored key: {key}")

    def load(self, key: str) -> Any:
        """Return the value under key, or None when it is absent."""
        with self._lock:
            found = key in self._data
            value = self._data.get(key)
        print(f"Loaded key: {key}, found: {str(found).lower()}")
        return value


def run_shared_resource(workers: int = 100) -> int:
    """Increment one counter from many threads; return the final value."""
    counter = SafeCounter()
    threads = [threading.Thread(target=counter.inc) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    final = counter.value()
    print(f"Final counter value: {final}")
    return final


def run_shared_resource_map() -> dict[str, Any]:
    """Store keys, then load keys concurrently; return what each load found."""
    shared = SharedMap()
    keys_to_store = ["user:1", "product:10", "order:abc"]
    with ThreadPoolExecutor(max_workers=len(keys_to_store)) as pool:
        for future in [pool.submit(shared.store, key, f"value_for_{key}") for key in keys_to_store]:
            future.result()
    print("Finished storing data.")

    keys_to_load = ["user:1", "product:20", "order:abc", "nonexistent"]
    with ThreadPoolExecutor(max_workers=len(keys_to_load)) as pool:
        futures = {key: pool.submit(shared.load, key) for key in keys_to_load}
        loaded = {key: future.result() for key, future in futures.items()}
    print("Finished loading data.")
    return loaded