"""A small restartable pool of worker threads."""

from __future__ import annotations

import os
import threading
from collections import deque
from collections.abc import Callable
from types import TracebackType


class ThreadPool:
    """Runs submitted jobs on worker threads; ``finish`` waits for them all.

    The first exception raised by a job is re-raised from ``finish``.
    """

    def __init__(self, thread_count: int | None = None) -> None:
        if thread_count is None:
            thread_count = os.cpu_count() or 1
        if thread_count < 1:
            raise ValueError("thread_count must be at least 1")
        self._thread_count = thread_count
        self._jobs: deque[Callable[[], object]] = deque()
        self._cond = threading.Condition()
        self._workers: list[threading.Thread] = []
        self._stop = True
        self._running = 0
        self._errors: list[BaseException] = []

    def start(self) -> None:
        """Start the workers; does nothing if they are already running."""
        with self._cond:
            if not self._stop:
                return
            self._stop = False
            self._workers = [
                threading.Thread(target=self._work, daemon=True) for _ in range(self._thread_count)
            ]
        for worker in self._workers:
            worker.start()

    def submit_job(self, job: Callable[[], object]) -> None:
        with self._cond:
            self._jobs.append(job)
            self._cond.notify_all()

    def finish(self) -> None:
        """Wait until every job has run, then stop and join the workers."""
        with self._cond:
            idle_with_work = self._stop and bool(self._jobs)
        if idle_with_work:
            self.start()

        with self._cond:
            self._cond.wait_for(lambda: not self._jobs and self._running == 0)
            self._stop = True
            self._cond.notify_all()

        for worker in self._workers:
            worker.join()
        self._workers = []

        errors, self._errors = self._errors, []
        if errors:
            raise errors[0]

    def __enter__(self) -> ThreadPool:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.finish()
        return False

    def _work(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stop or bool(self._jobs))
                if self._stop and not self._jobs:
                    return
                job = self._jobs.popleft()
                self._running += 1
            try:
                job()
            except BaseException as error:
                with self._cond:
                    self._errors.append(error)
            finally:
                with self._cond:
                    self._running -= 1
                    if not self._jobs and self._running == 0:
                        self._cond.notify_all()