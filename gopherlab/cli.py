"""Command line entry point that runs one of the concurrency demos."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from gopherlab.communication import run_communicate_task
from gopherlab.customcache import run_concurrent_cache, run_simple_cache
from gopherlab.hungrygophers import run_gopher_semaphore
from gopherlab.processing import run_process_items, run_task_processor
from gopherlab.ratelimiter import run_rate_limiter, run_sliding_window_rate_limiter
from gopherlab.sharedresource import run_shared_resource, run_shared_resource_map

DEFAULT_PROGRAM = "gophersemaphore"

PROGRAMS: dict[str, tuple[str, Callable[[], object]]] = {
    "communicate": ("Communicate Task", run_communicate_task),
    "process": ("Process Items", run_process_items),
    "sharedresource": ("Shared Resource", run_shared_resource),
    "sharedresourcemap": ("Shared Resource Map", run_shared_resource_map),
    "simplecache": ("Simple Cache", run_simple_cache),
    "concurrentcache": ("Concurrent Cache", run_concurrent_cache),
    "ratelimiter": ("Rate Limiter", run_rate_limiter),
    "slidingwindowratelimiter": ("Sliding Window Rate Limiter", run_sliding_window_rate_limiter),
    "taskprocessor": ("Task Processor", run_task_processor),
    "gophersemaphore": ("Gopher Semaphore", run_gopher_semaphore),
}


def main(argv: list[str] | None = None) -> int:
    """Run the chosen demo; return 0 on success and 1 for an unknown choice."""
    parser = argparse.ArgumentParser(
        prog="gopherlab",
        description="Run a concurrency demo. Choices: " + ", ".join(PROGRAMS),
    )
    parser.add_argument("program", nargs="?", default=DEFAULT_PROGRAM)
    args = parser.parse_args(argv)

    entry = PROGRAMS.get(args.program)
    if entry is None:
        print("Invalid program choice. Please choose a valid program")
        return 1
    label, run = entry
    print(f"Running {label} Program...")
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())