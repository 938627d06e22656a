"""In-memory per-user rate limiters: fixed window and sliding window."""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimiterConfig:
    """Allow at most ``limit`` requests per user in every ``window`` seconds."""

    limit: int
    window: float

    def __post_init__(self) -> None:
        if self.window <= 0:
            raise ValueError("window must be positive")


class RateLimiter:
    """Counts requests per user and wipes every count once per window."""

    def __init__(self, config: RateLimiterConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._counts: dict[str, int] = {}
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._reset_loop, daemon=True)
        self._thread.start()

    def _reset_loop(self) -> None:
        while not self._stopped.wait(self.config.window):
            self.reset()

    def allow(self, user_id: str) -> bool:
        """Count one request for user_id; return whether it is within the limit."""
        with self._lock:
            count = self._counts.get(user_id, 0) + 1
            self._counts[user_id] = count
            return count <= self.config.limit

    def reset(self) -> None:
        """Forget every count."""
        with self._lock:
            self._counts = {}
            print("Rate limiter counts reset.")

    def close(self) -> None:
        """Stop the background reset thread."""
        self._stopped.set()
        if self._thread is not threading.current_thread():
            self._thread.join()


@dataclass(frozen=True)
class SlidingWindowConfig:
    """Allow ``limit`` requests in any ``window`` seconds; prune every ``cleanup_period``."""

    limit: int
    window: float
    cleanup_period: float

    def __post_init__(self) -> None:
        if self.window <= 0:
            raise ValueError("window must be positive")
        if self.cleanup_period <= 0:
            raise ValueError("cleanup_period must be positive")


class SlidingWindowRateLimiter:
    """Keeps request times per user and counts those inside the window."""

    def __init__(
        self,
        config: SlidingWindowConfig,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self._clock = clock
        self._lock = threading.Lock()
        self._timestamps: dict[str, deque[float]] = {}
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._cleanup_loop, daemon=True)
        self._thread.start()

    def _cleanup_loop(self) -> None:
        while not self._stopped.wait(self.config.cleanup_period):
            self.cleanup()

    def _recent(self, user_id: str, now: float) -> list[float]:
        window_start = now - self.config.window
        return [ts for ts in self._timestamps.get(user_id, ()) if ts > window_start]

    def allow(self, user_id: str) -> bool:
        """Record a request for user_id if the window has room for it."""
        now = self._clock()
        window_start = now - self.config.window
        with self._lock:
            stamps = self._timestamps.setdefault(user_id, deque())
            while stamps and stamps[0] <= window_start:
                stamps.popleft()
            if len(stamps) >= self.config.limit:
                return False
            stamps.append(now)
            return True

    def remaining(self, user_id: str) -> int:
        """Return how many more requests user_id may make right now."""
        now = self._clock()
        with self._lock:
            count = len(self._recent(user_id, now))
        return max(self.config.limit - count, 0)

    def retry_after(self, user_id: str) -> float:
        """Return seconds until user_id may make another request; 0 if it may now."""
        now = self._clock()
        with self._lock:
            if len(self._timestamps.get(user_id, ())) < self.config.limit:
                return 0.0
            recent = self._recent(user_id, now)
        if len(recent) < self.config.limit:
            return 0.0
        return max(recent[0] + self.config.window - now, 0.0)

    def cleanup(self) -> int:
        """Drop expired request times and idle users; return how many users were dropped."""
        with self._lock:
            now = self._clock()
            dropped = 0
            for user_id in list(self._timestamps):
                recent = self._recent(user_id, now)
                if recent:
                    self._timestamps[user_id] = deque(recent)
                else:
                    del self._timestamps[user_id]
                    dropped += 1
        print("[Cleanup] Completed pruning old entries")
        return dropped

    def close(self) -> None:
        """Stop the background cleanup thread."""
        self._stopped.set()
        if self._thread is not threading.current_thread():
            self._thread.join()


def run_rate_limiter() -> list[tuple[str, bool]]:
    """Send a short series of requests through a fixed-window limiter."""
    limiter = RateLimiter(RateLimiterConfig(limit=3, window=5.0))
    requests = ["userA", "userB", "userA", "userA", "userB", "userA", "userC"]
    outcomes: list[tuple[str, bool]] = []
    try:
        for user in requests:
            allowed = limiter.allow(user)
            outcomes.append((user, allowed))
            if allowed:
                print(f"Request for {user} allowed.")
            else:
                print(f"Request for {user} denied (rate limited).")
            time.sleep(0.5)
        time.sleep(7)
    finally:
        limiter.close()
    return outcomes


def run_sliding_window_rate_limiter() -> tuple[dict[str, list[bool]], bool]:
    """Simulate bursty users against a sliding-window limiter.

    Returns each user's request outcomes and the outcome of one late request.
    """
    config = SlidingWindowConfig(limit=5, window=10.0, cleanup_period=5.0)
    limiter = SlidingWindowRateLimiter(config)
    users = ["alice", "bob", "charlie"]
    results: dict[str, list[bool]] = {user: [] for user in users}
    late: list[bool] = []

    def burst(user: str) -> None:
        for number in range(1, 13):
            allowed = limiter.allow(user)
            results[user].append(allowed)
            if allowed:
                print(
                    f"[{user}] Request {number:2d}: \u2705 allowed "
                    f"(remaining={limiter.remaining(user)})"
                )
            else:
                retry = limiter.retry_after(user)
                print(
                    f"[{user}] Request {number:2d}: \U0001f6ab rate limited "
                    f"(retry after {retry:.3f}s)"
                )
            time.sleep(random.randrange(2000) / 1000)

    def late_request() -> None:
        time.sleep(12)
        user = "alice"
        allowed = limiter.allow(user)
        late.append(allowed)
        print(
            f"[Late] {user} after 12s: allowed={str(allowed).lower()} "
            "(should be allowed because older entries are expired)"
        )

    threads = [threading.Thread(target=burst, args=(user,)) for user in users]
    threads.append(threading.Thread(target=late_request))
    try:
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        time.sleep(6)
    finally:
        limiter.close()
    print("Done.")
    return results, late[0]