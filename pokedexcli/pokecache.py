"""A thread-safe in-memory cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: bytes


class Cache:
    """Byte cache keyed by string; a background thread drops stale entries.

    Every ``interval`` seconds, entries that are at least ``interval`` seconds
    old are removed.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self._interval = float(interval)
        self._lock = threading.Lock()
        self._entries: dict[str, _Entry] = {}
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._reap_loop, name="pokecache-reaper", daemon=True
        )
        self._thread.start()

    @property
    def interval(self) -> float:
        return self._interval

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any previous entry."""
        with self._lock:
            self._entries[key] = _Entry(time.monotonic(), bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the cached value for ``key``, or None if absent."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.val

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def close(self) -> None:
        """Stop the background reaper; stored entries stay readable."""
        self._stop.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            now = time.monotonic()
            with self._lock:
                expired = [
                    key
                    for key, entry in self._entries.items()
                    if now - entry.created_at >= self._interval
                ]
                for key in expired:
                    del self._entries[key]