#!/usr/bin/env python3
"""Timestamp-gated limiter: let through at most one event per time window."""
from __future__ import annotations
import time
from threading import Lock
from typing import Callable, Optional

DEFAULT_INTERVAL_MS = 500


class EveryMs:
    """Allow one event every `interval_ms` milliseconds.

    Calls that land inside the current window are counted, and the count is
    handed back (and reset) by the next call that gets through.
    """

    def __init__(self, interval_ms: float = DEFAULT_INTERVAL_MS, clock: Callable[[], float] = time.monotonic):
        if interval_ms < 0:
            raise ValueError(f"interval_ms must be >= 0, got {interval_ms!r}")
        self.interval_ms = interval_ms
        self._clock = clock
        self._last: Optional[float] = None
        self._suppressed = 0
        self._lock = Lock()

    @property
    def suppressed(self) -> int:
        with self._lock:
            return self._suppressed

    def ready(self) -> bool:
        return self.take() is not None

    def take(self) -> Optional[int]:
        """Return the number of events dropped since the last one, or None if inside the window."""
        now = self._clock()
        with self._lock:
            if self._last is not None and (now - self._last) * 1000.0 < self.interval_ms:
                self._suppressed += 1
                return None
            self._last = now
            dropped = self._suppressed
            self._suppressed = 0
            return dropped
