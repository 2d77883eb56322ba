import time

import pytest

from rmcore.workers import AsyncWorker


class _Echo(AsyncWorker):
    def work(self, index):
        while self.running:
            self.source_signal.wait()
            with self.source_lock:
                if not self.source:
                    continue
                item = self.source.popleft()
            with self.result_lock:
                self.results.append((index, item))


def _feed(worker, items):
    for item in items:
        with worker.source_lock:
            worker.source.append(item)
        worker.source_signal.signal()


def _wait_for(worker, count, deadline=5.0):
    end = time.monotonic() + deadline
    while len(worker.results) < count and time.monotonic() < end:
        time.sleep(0.01)


def test_abstract_worker_cannot_be_created():
    with pytest.raises(TypeError):
        AsyncWorker(2)


def test_invalid_thread_count():
    worker = _Echo.__new__(_Echo)
    with pytest.raises(ValueError):
        AsyncWorker.__init__(worker, 0)


def test_start_creates_thread_count_threads():
    worker = _Echo(3)
    AsyncWorker.start(worker)
    try:
        assert len(worker.threads) == worker.thread_count
        assert all(thread.is_alive() for thread in worker.threads)
        assert worker.running
    finally:
        AsyncWorker.stop(worker)
        AsyncWorker.join(worker)
    assert worker.threads == []
    assert not worker.running


def test_every_item_processed_once():
    items = ["a", "b", "c", "d", "e"]
    worker = _Echo(2)
    AsyncWorker.start(worker)
    _feed(worker, items)
    _wait_for(worker, len(items))
    AsyncWorker.stop(worker)
    AsyncWorker.join(worker)
    processed = sorted(item for _, item in worker.results)
    assert processed == sorted(items)
    assert {index for index, _ in worker.results} <= set(range(worker.thread_count))


def test_stop_wakes_idle_workers():
    worker = _Echo(4)
    AsyncWorker.start(worker)
    AsyncWorker.stop(worker)
    AsyncWorker.join(worker)
    assert worker.threads == []
    assert len(worker.results) == 0