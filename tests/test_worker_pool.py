import threading

import pytest

from spritepack.worker_pool import WorkerPool


def test_results_follow_submission_order():
    with WorkerPool(max_workers=4) as pool:
        assert pool.run(lambda n: n * n, range(20)) == [n * n for n in range(20)]


def test_empty_input_returns_empty_list():
    with WorkerPool(max_workers=2) as pool:
        assert pool.run(lambda n: n, []) == []


def test_concurrency_is_bounded():
    lock = threading.Lock()
    active = 0
    peak = 0
    release = threading.Event()

    def task(_):
        nonlocal active, peak
        with lock:
            active += 1
            peak = max(peak, active)
        release.wait(timeout=0.05)
        with lock:
            active -= 1

    with WorkerPool(max_workers=3) as pool:
        pool.run(task, range(12))

    assert peak <= 3


def test_first_failure_is_raised():
    def task(n):
        if n == 5:
            raise ValueError("bad item 5")
        return n

    with WorkerPool(max_workers=2) as pool:
        with pytest.raises(ValueError, match="bad item 5"):
            pool.run(task, range(10))
