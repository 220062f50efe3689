"""Bounded Worker Pool

Runs a batch of jobs on a fixed number of worker threads and blocks until
every job has executed exactly once. Per-job failures stay on the job
objects; the pool itself never reports them.

Lifecycle:
    pool = WorkerPool(len(jobs), jobs)
    pool.run()          # spawn workers, enqueue, close, wait
    for job in jobs:    # results are read in submission order
        ...

Pools are single-use.
"""
from __future__ import annotations

import queue
import threading
import time
from typing import Any, Sequence

from fieldrules.core.config import get_settings
from fieldrules.core.errors import (
    invalid_job_collection,
    invalid_worker_count,
    pool_already_run,
    raise_error,
)
from fieldrules.core.logging import pool_logger

from .jobs import JOB_TYPES, Job

log = pool_logger()

MIN_WORKERS = get_settings().MIN_WORKERS
MAX_WORKERS = get_settings().MAX_WORKERS

# Sent once per worker to close the queue
_CLOSED = object()


class CompletionBarrier:
    """Counting barrier: ``add`` raises the count, ``done`` lowers it,
    ``wait`` blocks until it reaches zero."""

    __slots__ = ("_count", "_cond")

    def __init__(self):
        self._count = 0
        self._cond = threading.Condition()

    @property
    def count(self) -> int:
        with self._cond:
            return self._count

    def add(self, n: int) -> None:
        with self._cond:
            self._count += n
            if self._count < 0:
                raise ValueError("CompletionBarrier count went negative")
            if self._count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        self.add(-1)

    def wait(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._count == 0)


def _check_worker_count(num_workers: Any) -> None:
    if isinstance(num_workers, bool) or not isinstance(num_workers, int):
        raise_error(invalid_worker_count(num_workers, origin="worker_pool").error)


def clamp_workers(num_workers: int, lower: int | None = None, upper: int | None = None) -> int:
    """Clamp a requested worker count into the configured bounds."""
    settings = get_settings()
    lower = settings.MIN_WORKERS if lower is None else lower
    upper = settings.MAX_WORKERS if upper is None else upper
    return max(lower, min(num_workers, upper))


class WorkerPool:
    """Fixed-size set of worker threads draining a shared job queue.

    The queue holds a single item, so enqueueing blocks while every worker
    is busy. After the last job is enqueued the queue is closed and ``run``
    waits on a barrier counted down once per finished job.
    """

    __slots__ = ("_num_workers", "_jobs", "_queue", "_barrier", "_has_run")

    def __init__(self, num_workers: int, jobs: Sequence[Job] | None = None):
        _check_worker_count(num_workers)

        if jobs is None:
            jobs = []
        if not isinstance(jobs, (list, tuple)) or not all(isinstance(j, JOB_TYPES) for j in jobs):
            raise_error(invalid_job_collection(jobs, origin="worker_pool").error)

        self._num_workers = clamp_workers(num_workers)
        self._jobs: list[Job] = list(jobs)
        self._queue: queue.Queue = queue.Queue(maxsize=1)
        self._barrier = CompletionBarrier()
        self._has_run = False

    @property
    def num_workers(self) -> int:
        return self._num_workers

    @num_workers.setter
    def num_workers(self, value: int) -> None:
        _check_worker_count(value)
        self._num_workers = clamp_workers(value)

    @property
    def jobs(self) -> tuple[Job, ...]:
        return tuple(self._jobs)

    def _work(self) -> None:
        while True:
            job = self._queue.get()
            if job is _CLOSED:
                return
            job.run(self._barrier)

    def run(self) -> None:
        """Run every job and return once all of them have completed."""
        if self._has_run:
            raise_error(pool_already_run(origin="worker_pool").error)
        self._has_run = True

        start = time.perf_counter()
        log.debug("pool_started", workers=self._num_workers, jobs=len(self._jobs))

        workers = [
            threading.Thread(target=self._work, name=f"fieldrules-worker-{i}", daemon=True)
            for i in range(self._num_workers)
        ]
        for worker in workers:
            worker.start()

        self._barrier.add(len(self._jobs))
        for job in self._jobs:
            self._queue.put(job)

        for _ in workers:
            self._queue.put(_CLOSED)

        self._barrier.wait()
        for worker in workers:
            worker.join()

        log.debug(
            "pool_finished",
            workers=self._num_workers,
            jobs=len(self._jobs),
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
