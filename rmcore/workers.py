"""Base class for a pool of worker threads fed from a shared source queue."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Generic, TypeVar

from rmcore.semaphore import Semaphore

logger = logging.getLogger(__name__)

SourceT = TypeVar("SourceT")
ResultT = TypeVar("ResultT")


class AsyncWorker(ABC, Generic[SourceT, ResultT]):
    """Runs work(index) on thread_count threads.

    Producers append to ``source`` under ``source_lock`` and call
    ``source_signal.signal()``; workers append to ``results`` under
    ``result_lock``. A worker loop should run while ``running`` is true and
    re-check it after every wait on ``source_signal``, because stop() wakes
    each worker once.
    """

    def __init__(self, thread_count: int = 1) -> None:
        if thread_count < 1:
            raise ValueError("thread_count must be at least 1")
        self.thread_count = thread_count
        self.threads: list[threading.Thread] = []
        self.running = False

        self.source: deque[SourceT] = deque()
        self.source_signal = Semaphore()
        self.source_lock = threading.Lock()

        self.results: deque[ResultT] = deque()
        self.result_lock = threading.Lock()

        self.methods: list[Any] = []

    @abstractmethod
    def work(self, index: int) -> None:
        """The loop run by worker thread number index."""

    def start(self) -> None:
        """Start thread_count worker threads."""
        self.methods.clear()
        self.running = True
        for index in range(self.thread_count):
            thread = threading.Thread(
                target=self.work,
                args=(index,),
                name=f"{type(self).__name__}-{index}",
                daemon=True,
            )
            self.threads.append(thread)
            thread.start()
            logger.warning("start thread id : %d", index)

    def stop(self) -> None:
        """Ask the workers to finish and wake any that are waiting."""
        self.running = False
        for _ in self.threads:
            self.source_signal.signal()

    def join(self) -> None:
        """Wait for every worker thread to finish and forget them."""
        for thread in self.threads:
            thread.join()
        self.threads = [thread for thread in self.threads if thread.is_alive()]