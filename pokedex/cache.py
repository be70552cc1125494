"""A thread-safe byte cache whose entries are dropped by a background reaper."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    value: bytes


class Cache:
    """Key/value store of raw response bodies.

    Every ``interval`` seconds a background thread removes every entry that
    was added before that tick.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError(f"cache interval must be positive, got {interval!r}")
        self._interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier value."""
        entry = _Entry(created_at=time.monotonic(), value=bytes(val))
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or ``None`` if absent."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    def close(self) -> None:
        """Stop the background reaper. Safe to call more than once."""
        self._stop.set()
        if self._reaper.is_alive() and threading.current_thread() is not self._reaper:
            self._reaper.join()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            tick = time.monotonic()
            with self._lock:
                self._entries = {
                    key: entry
                    for key, entry in self._entries.items()
                    if not entry.created_at < tick
                }