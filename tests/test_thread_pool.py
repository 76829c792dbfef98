import pytest

from rtengine.thread_pool import ThreadPool


def test_runs_all_jobs():
    results = [0] * 100
    pool = ThreadPool(4)
    pool.start()
    for i in range(100):
        pool.submit_job(lambda i=i: results.__setitem__(i, i * i))
    pool.finish()
    assert results == [i * i for i in range(100)]


def test_restartable():
    results = [None] * 30
    pool = ThreadPool(3)
    for rnd in range(3):
        pool.start()
        for k in range(10):
            pool.submit_job(lambda n=rnd * 10 + k: results.__setitem__(n, n + 1))
        pool.finish()
    assert results == list(range(1, 31))


def test_context_manager_waits():
    results = [None] * 20
    with ThreadPool(2) as pool:
        for n in range(20):
            pool.submit_job(lambda n=n: results.__setitem__(n, -n))
    assert results == [-n for n in range(20)]


def test_jobs_submitted_before_start_still_run():
    done = []
    pool = ThreadPool(2)
    pool.submit_job(lambda: done.append("ran"))
    pool.finish()
    assert done == ["ran"]


def test_finish_without_jobs_returns():
    pool = ThreadPool(2)
    pool.start()
    pool.finish()
    done = []
    pool.start()
    pool.submit_job(lambda: done.append(True))
    pool.finish()
    assert done == [True]


def test_job_exception_raised_from_finish():
    pool = ThreadPool(2)
    pool.start()
    pool.submit_job(lambda: 1 / 0)
    with pytest.raises(ZeroDivisionError):
        pool.finish()


def test_invalid_thread_count():
    with pytest.raises(ValueError):
        ThreadPool(0)