"""Dining philosophers where a table semaphore prevents deadlock."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


@dataclass
class Gopher:
    """A diner holding references to the forks on either side."""

    id: int
    left_fork: threading.Lock = field(repr=False)
    right_fork: threading.Lock = field(repr=False)
    eat_count: int = 0

    def eat(self, table: threading.Semaphore, meals: int = 3) -> int:
        """Think, sit down, take both forks and eat, meals times over."""
        for _ in range(meals):
            print(f"Gopher {self.id} is thinking.")
            time.sleep(0.1 + self.id * 0.05)

            print(f"Gopher {self.id} is hungry and wants to sit at the table.")
            with table:
                print(f"Gopher {self.id} sat at the table.")
                with self.left_fork:
                    print(f"Gopher {self.id} picked up left fork.")
                    with self.right_fork:
                        print(f"Gopher {self.id} picked up right fork.")
                        print(f"Gopher {self.id} is eating.")
                        self.eat_count += 1
                        time.sleep(0.1)
                print(f"Gopher {self.id} put down forks and is leaving the table.")
        return self.eat_count


def run_gopher_semaphore(num_gophers: int = 5, seats: int = 4, meals: int = 3) -> list[Gopher]:
    """Seat gophers round a table of forks and let them all dine."""
    if num_gophers < 2:
        raise ValueError("at least two gophers are needed to share forks")
    if seats < 1:
        raise ValueError("the table needs at least one seat")

    forks = [threading.Lock() for _ in range(num_gophers)]
    gophers = [
        Gopher(id=n, left_fork=forks[n], right_fork=forks[(n + 1) % num_gophers])
        for n in range(num_gophers)
    ]
    table = threading.Semaphore(seats)

    print("Dinner is starting!")
    start = time.monotonic()
    with ThreadPoolExecutor(max_workers=num_gophers) as pool:
        for future in [pool.submit(gopher.eat, table, meals) for gopher in gophers]:
            future.result()
    elapsed = time.monotonic() - start

    print(f"\nDinner is over after {elapsed:.3f}s.")
    for gopher in gophers:
        print(f"Gopher {gopher.id} ate {gopher.eat_count} times.")
    return gophers