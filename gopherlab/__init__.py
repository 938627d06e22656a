"""Thread-based concurrency patterns: queues, caches, worker pools, semaphores and rate limiters."""

__version__ = "0.1.0"
__all__ = [
    "communication",
    "customcache",
    "sharedresource",
    "processing",
    "hungrygophers",
    "ratelimiter",
    "cli",
]