"""Duration measurement and a background frames-per-second reporter."""

from __future__ import annotations

import logging
import threading
import time

logger = logging.getLogger(__name__)


class Timer:
    """Measures the wall-clock time between start() and calc(), in milliseconds."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()
        self._duration_ms = 0

    def start(self) -> None:
        """Mark the beginning of a measurement."""
        self._start = time.perf_counter_ns()

    def calc(self, duration_name: str = "") -> int:
        """Return and log the whole milliseconds elapsed since start()."""
        self._duration_ms = (time.perf_counter_ns() - self._start) // 1_000_000
        logger.info("Duration of %s : %dms", duration_name, self._duration_ms)
        return self._duration_ms

    def count(self) -> int:
        """The duration measured by the last calc(), in milliseconds."""
        return self._duration_ms


class Recorder:
    """Counts events and reports the count once per interval from a thread.

    The thread ends on close(), or by itself after more than ten intervals
    with no events.
    """

    IDLE_LIMIT = 10

    def __init__(
        self, name: str = "RecordThread", fps: int = 0, interval: float = 1.0
    ) -> None:
        self.name = name
        self.interval = interval
        self.reports: list[int] = []
        self._fps = fps
        self._idle = 0
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._print, name=name, daemon=True)
        self._thread.start()

    def _print(self) -> None:
        while self._idle <= self.IDLE_LIMIT:
            if self._stop.wait(self.interval):
                return
            with self._lock:
                fps, self._fps = self._fps, 0
            if fps == 0:
                self._idle += 1
            logger.critical("[%s] FPS : %d", self.name, fps)
            self.reports.append(fps)

    @property
    def running(self) -> bool:
        """Whether the reporting thread is still alive."""
        return self._thread.is_alive()

    def record(self) -> None:
        """Count one event."""
        with self._lock:
            self._fps += 1

    def close(self) -> None:
        """Stop the reporting thread and wait for it."""
        self._stop.set()
        self._thread.join()

    def __enter__(self) -> Recorder:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()