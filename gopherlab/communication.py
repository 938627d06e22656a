"""Producer/consumer pipeline over a bounded queue."""

from __future__ import annotations

import queue
import time
from concurrent.futures import ThreadPoolExecutor

BUFFER_SIZE = 5

_CLOSED = object()


def producer(channel: queue.Queue, count: int = 10, delay: float = 0.1) -> None:
    """Put the numbers 0..count-1 on the channel, then mark it closed."""
    for item in range(count):
        print(f"Producing {item}")
        channel.put(item)
        time.sleep(delay)
    channel.put(_CLOSED)
    print("Producer finished")


def consumer(channel: queue.Queue, consumer_id: int, delay: float = 0.3) -> list[int]:
    """Take items from the channel until it is closed; return what was processed."""
    print(f"Consumer {consumer_id} started")
    processed: list[int] = []
    while True:
        item = channel.get()
        if item is _CLOSED:
            # Leave the close marker for the other consumers.
            channel.put(_CLOSED)
            break
        print(f"Consumer {consumer_id} processing {item}")
        time.sleep(delay)
        processed.append(item)
    print(f"Consumer {consumer_id} finished")
    return processed


def run_communicate_task(count: int = 10, consumers: int = 2) -> dict[int, list[int]]:
    """Run one producer and several consumers; map each consumer id to its items."""
    if consumers < 1:
        raise ValueError("at least one consumer is required")
    channel: queue.Queue = queue.Queue(maxsize=BUFFER_SIZE)
    with ThreadPoolExecutor(max_workers=consumers + 1) as pool:
        producing = pool.submit(producer, channel, count)
        futures = {
            consumer_id: pool.submit(consumer, channel, consumer_id)
            for consumer_id in range(1, consumers + 1)
        }
        results = {consumer_id: future.result() for consumer_id, future in futures.items()}
        producing.result()
    print("Producer and consumers finished.")
    return results