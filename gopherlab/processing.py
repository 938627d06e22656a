"""Concurrent batch processing and a worker-pool task processor."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed

Task = Callable[[], object]

_STOP = object()


def process_data_item(item_id: int, base_delay: float = 0.5, step_delay: float = 0.05) -> int:
    """Simulate work on one item; the wait grows with its id."""
    print(f"Processing item {item_id}...")
    time.sleep(base_delay + item_id * step_delay)
    print(f"Finished processing item {item_id}.")
    return item_id


def run_process_items(items: Iterable[int] | None = None) -> list[int]:
    """Process every item on its own thread; return ids in finishing order."""
    batch = list(range(1, 11) if items is None else items)
    print("Starting concurrent processing...")
    finished: list[int] = []
    if batch:
        with ThreadPoolExecutor(max_workers=len(batch)) as pool:
            futures = [pool.submit(process_data_item, item) for item in batch]
            finished = [future.result() for future in as_completed(futures)]
    print("All items processed.")
    return finished


class TaskProcessor:
    """A fixed pool of worker threads fed from one task queue."""

    def __init__(self, workers: int = 3) -> None:
        if workers < 1:
            raise ValueError("at least one worker is required")
        self._tasks: queue.Queue = queue.Queue(maxsize=1)
        self._stopped = False
        self._guard = threading.Lock()
        self.errors: list[BaseException] = []
        self._threads = [
            threading.Thread(target=self._worker, args=(worker_id,), daemon=True)
            for worker_id in range(workers)
        ]
        for thread in self._threads:
            thread.start()

    def _worker(self, worker_id: int) -> None:
        print(f"Worker {worker_id} started.")
        while True:
            task = self._tasks.get()
            if task is _STOP:
                break
            print(f"Worker {worker_id} processing task...")
            try:
                task()
            except Exception as error:  # keep the worker alive for later tasks
                self.errors.append(error)
            print(f"Worker {worker_id} finished task.")
        print(f"Worker {worker_id} shutting down.")

    def submit(self, task: Task) -> None:
        """Queue a task; blocks while the queue is full."""
        with self._guard:
            if self._stopped:
                raise RuntimeError("task processor is stopped")
        self._tasks.put(task)

    def stop(self) -> None:
        """Let queued tasks finish, then shut every worker down."""
        with self._guard:
            if self._stopped:
                raise RuntimeError("task processor is already stopped")
            self._stopped = True
        for _ in self._threads:
            self._tasks.put(_STOP)
        for thread in self._threads:
            thread.join()
        print("Task processor stopped.")

    def __enter__(self) -> TaskProcessor:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._stopped:
            self.stop()


def run_task_processor(workers: int = 3, tasks: int = 10) -> list[int]:
    """Submit numbered tasks to a pool; return the ids in execution order."""
    executed: list[int] = []

    def make_task(task_id: int) -> Task:
        def task() -> None:
            print(f"Executing task {task_id}")
            executed.append(task_id)
            time.sleep(0.5)

        return task

    with TaskProcessor(workers) as processor:
        for task_id in range(1, tasks + 1):
            processor.submit(make_task(task_id))
    return executed