import threading

import pytest

from gopherlab.customcache import (
    ConcurrentCache,
    SimpleCache,
    run_concurrent_cache,
    run_simple_cache,
)


def _caches():
    return (SimpleCache(), ConcurrentCache())


def test_set_then_get():
    for cache in (SimpleCache(), ConcurrentCache()):
        cache.set("user:1", {"name": "Alice"})
        assert cache.get("user:1") == {"name": "Alice"}


def test_get_missing_returns_default():
    for cache in (SimpleCache(), ConcurrentCache()):
        assert cache.get("nope") is None
        assert cache.get("nope", 42) == 42


def test_overwrite_keeps_one_entry():
    for cache in (SimpleCache(), ConcurrentCache()):
        cache.set("k", 1)
        cache.set("k", 2)
        assert cache.get("k") == 2
        assert len(cache) == 1


def test_delete_removes():
    for cache in (SimpleCache(), ConcurrentCache()):
        cache.set("k", "v")
        cache.delete("k")
        assert "k" not in cache
        assert len(cache) == 0


def test_delete_missing_is_ignored():
    for cache in (SimpleCache(), ConcurrentCache()):
        cache.set("a", 1)
        cache.delete("b")
        assert len(cache) == 1
        assert "a" in cache


@pytest.mark.parametrize("use_concurrent", [False, True])
def test_get_output(use_concurrent, capsys):
    cache = ConcurrentCache() if use_concurrent else SimpleCache()
    cache.set("a", 1)
    cache.get("a")
    cache.get("b")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Cache: Set key 'a'",
        "Cache: Get key 'a' - Found: true",
        "Cache: Get key 'b' - Found: false",
    ]


def test_concurrent_cache_many_threads():
    cache = ConcurrentCache()
    threads = [
        threading.Thread(target=cache.set, args=(f"key{n}", n)) for n in range(50)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(cache) == 50
    assert all(cache.get(f"key{n}") == n for n in range(50))


def test_run_simple_cache(capsys):
    cache = run_simple_cache()
    out = capsys.readouterr().out
    assert "Retrieved from cache: {'name': 'Alice'}" in out
    assert "user:123" not in cache


def test_run_concurrent_cache(capsys):
    cache = run_concurrent_cache()
    assert len(cache) == 3
    assert cache.get("order:abc").startswith("value_for_order:abc_")
    assert "Final cache size: 3" in capsys.readouterr().out