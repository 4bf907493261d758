"""Completion counter shared by probe tasks.

Counts finished probes (success or failure) for progress reporting only.
The join barrier in orchestrator.py never relies on it.
"""

import threading


class CompletionCounter:
    """Lock-guarded count of finished probes."""

    def __init__(self) -> None:
        self._count = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        """Record one finished probe."""
        with self._lock:
            self._count += 1

    def snapshot(self) -> int:
        """Current number of finished probes."""
        with self._lock:
            return self._count
