"""Background progress polling.

Turns the completion counter into a 0..1 fraction for the presentation
layer. Advisory only: the orchestrator's join barrier never waits on it.
"""

import threading
from typing import Callable

import config
from counter import CompletionCounter
from logging_config import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[float], None]


def compute_fraction(completed: int, total: int) -> float:
    """Fraction of finished probes, clamped to [0, 1].

    A run with nothing to do is complete.
    """
    if total <= 0:
        return 1.0
    return min(completed / total, 1.0)


class ProgressReporter:
    """Poll counter on a thread and publish fractions until 1.0.

    Usage:
        reporter = ProgressReporter(counter, total, on_progress)
        reporter.start()
        ...
        reporter.join()
    """

    def __init__(
        self,
        counter: CompletionCounter,
        total: int,
        callback: ProgressCallback,
        interval: float = config.PROGRESS_INTERVAL_SECONDS,
    ) -> None:
        self._counter = counter
        self._total = total
        self._callback = callback
        self._interval = interval
        self._stopped = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            name="progress-reporter",
            daemon=True,
        )

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        """End the loop early (e.g. run aborted)."""
        self._stopped.set()

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)

    def _run(self) -> None:
        while True:
            fraction = compute_fraction(self._counter.snapshot(), self._total)
            self._callback(fraction)
            if fraction >= 1.0:
                logger.debug("Progress reporter finished")
                return
            # wait() returns True when stop() was called
            if self._stopped.wait(self._interval):
                logger.debug("Progress reporter stopped at %.0f%%", fraction * 100)
                return
