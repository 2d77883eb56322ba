import threading

from rmcore.semaphore import Semaphore


def test_signal_then_wait():
    sem = Semaphore()
    sem.signal()
    assert sem.wait(timeout=0) is True
    assert sem.wait(timeout=0.01) is False


def test_initial_count():
    sem = Semaphore(2)
    assert sem.wait(timeout=0)
    assert sem.wait(timeout=0)
    assert not sem.wait(timeout=0.01)


def test_init_resets_count():
    sem = Semaphore(5)
    sem.init()
    assert not sem.wait(timeout=0.01)
    sem.init(1)
    assert sem.wait(timeout=0)
    assert not sem.wait(timeout=0)


def test_wait_across_threads():
    sem = Semaphore()
    signaller = threading.Timer(0.05, sem.signal)
    signaller.start()
    try:
        assert sem.wait(timeout=5) is True
    finally:
        signaller.join(timeout=5)
    assert sem.wait(timeout=0) is False