"""A counting semaphore that can be reset."""

from __future__ import annotations

import threading


class Semaphore:
    """Counting semaphore whose count may be reset with init()."""

    def __init__(self, count: int = 0) -> None:
        self._count = count
        self._condition = threading.Condition()

    def init(self, count: int = 0) -> None:
        """Reset the count."""
        with self._condition:
            self._count = count
            if count > 0:
                self._condition.notify(count)

    def signal(self) -> None:
        """Increment the count and wake one waiter."""
        with self._condition:
            self._count += 1
            self._condition.notify()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the count is positive, then take one.

        Returns False if the timeout ran out first.
        """
        with self._condition:
            if not self._condition.wait_for(lambda: self._count > 0, timeout):
                return False
            self._count -= 1
            return True