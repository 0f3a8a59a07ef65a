"""In-memory cache whose entries are reaped after an interval."""

from __future__ import annotations

import threading
import time
from datetime import timedelta


class Cache:
    """Thread-safe store whose entries expire after ``interval`` (seconds or timedelta)."""

    def __init__(self, interval: float | timedelta) -> None:
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self._interval = float(interval)
        self._table: dict[str, tuple[float, bytes]] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(target=self._reap_loop, daemon=True)
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        with self._lock:
            self._table[key] = (time.monotonic(), val)

    def get(self, key: str) -> bytes | None:
        """Return the value under ``key``, or None."""
        with self._lock:
            entry = self._table.get(key)
        return None if entry is None else entry[1]

    def close(self) -> None:
        """Stop the reaper thread."""
        self._stop.set()
        self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            now = time.monotonic()
            with self._lock:
                self._table = {
                    k: e for k, e in self._table.items() if now - e[0] <= self._interval
                }