"""In-memory key-value caches, plain and thread-safe."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any


class SimpleCache:
    """A key-value cache without any locking."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        """Add or replace the value under key."""
        self._data[key] = value
        print(f"Cache: Set key '{key}'")

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value under key, or default when it is absent."""
        found = key in self._data
        print(f"Cache: Get key '{key}' - Found: {str(found).lower()}")
        return self._data.get(key, default)

    def delete(self, key: str) -> None:
        """Remove key; a missing key is ignored."""
        self._data.pop(key, None)
        print(f"Cache: Deleted key '{key}'")

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class ConcurrentCache:
    """A key-value cache safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        """Add or replace the value under key."""
        with self._lock:
            self._data[key] = value
            print(f"Cache: Set key '{key}'")

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value under key, or default when it is absent."""
        with self._lock:
            found = key in self._data
            print(f"Cache: Get key '{key}' - Found: {str(found).lower()}")
            return self._data.get(key, default)

    def delete(self, key: str) -> None:
        """Remove key; a missing key is ignored."""
        with self._lock:
            self._data.pop(key, None)
            print(f"Cache: Deleted key '{key}'")

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


def run_simple_cache() -> SimpleCache:
    """Store, read back and delete one entry."""
    cache = SimpleCache()
    cache.set("user:123", {"name": "Alice"})
    user = cache.get("user:123")
    if "user:123" in cache:
        print(f"Retrieved from cache: {user}")
    cache.delete("user:123")
    cache.get("user:123")
    return cache


def run_concurrent_cache() -> ConcurrentCache:
    """Set and read keys from several threads at once."""
    cache = ConcurrentCache()
    keys = ["user:1", "product:10", "order:abc", "user:1", "product:10"]

    def touch(key: str) -> None:
        cache.set(key, f"value_for_{key}_{time.time_ns()}")
        cache.get(key)

    with ThreadPoolExecutor(max_workers=len(keys)) as pool:
        for future in [pool.submit(touch, key) for key in keys]:
            future.result()

    print("Concurrent access simulation finished.")
    print(f"Final cache size: {len(cache)}")
    return cache