"""
Tests for the bounded worker pool and its completion barrier.

Key scenarios tested:
1. Worker count clamping into [MIN_WORKERS, MAX_WORKERS]
2. Construction errors for bad worker counts and job batches
3. Every job runs exactly once and run() blocks until all finish
4. Pools are single-use
"""
import threading
import time

import pytest

from fieldrules.core.errors import AppErrorException, ErrorCode
from fieldrules.engine.jobs import FuncJob, RuleJob
from fieldrules.engine.pool import MAX_WORKERS, MIN_WORKERS, CompletionBarrier, WorkerPool, clamp_workers
from fieldrules.engine.rule import Rule

from conftest import CallCounter, hard_error, passing, sleeping


class TestWorkerCount:

    def test_requested_count_is_kept_inside_bounds(self):
        pool = WorkerPool(20, [])
        assert pool.num_workers == 20

    def test_count_above_ceiling_is_capped(self):
        pool = WorkerPool(20, [])
        pool.num_workers = 100000000
        assert pool.num_workers == MAX_WORKERS == 20000

    def test_count_below_floor_is_raised(self):
        pool = WorkerPool(20, [])
        pool.num_workers = -1
        assert pool.num_workers == MIN_WORKERS == 2

    def test_constructor_clamps(self):
        assert WorkerPool(0, []).num_workers == MIN_WORKERS
        assert WorkerPool(100000000, []).num_workers == MAX_WORKERS

    def test_clamp_with_explicit_bounds(self):
        assert clamp_workers(50, lower=1, upper=10) == 10
        assert clamp_workers(-5, lower=1, upper=10) == 1
        assert clamp_workers(5, lower=1, upper=10) == 5

    @pytest.mark.parametrize("bad", ["4", 2.5, None, True])
    def test_non_int_worker_count_is_rejected(self, bad):
        with pytest.raises(AppErrorException) as exc_info:
            WorkerPool(bad, [])
        assert exc_info.value.code == ErrorCode.E9004_INVALID_WORKER_COUNT

    @pytest.mark.parametrize("bad", ["7", 2.5, None, True])
    def test_setter_rejects_non_int_worker_count(self, bad):
        pool = WorkerPool(20, [])
        with pytest.raises(AppErrorException) as exc_info:
            pool.num_workers = bad
        assert exc_info.value.code == ErrorCode.E9004_INVALID_WORKER_COUNT
        assert pool.num_workers == 20


class TestJobCollection:

    def test_none_is_an_empty_batch(self):
        pool = WorkerPool(20, None)
        assert pool.num_workers == 20
        assert pool.jobs == ()

    @pytest.mark.parametrize("bad", ["jobs", {"a": 1}, 42, [object()], [passing]])
    def test_invalid_collection_is_rejected(self, bad):
        with pytest.raises(AppErrorException) as exc_info:
            WorkerPool(2, bad)
        assert exc_info.value.code == ErrorCode.E9005_INVALID_JOB_COLLECTION

    def test_mixed_job_kinds_are_accepted(self):
        jobs = [FuncJob(1, passing), RuleJob(1, Rule("k", (passing,)))]
        WorkerPool(2, tuple(jobs)).run()
        assert all(job.has_run for job in jobs)


class TestRun:

    def test_every_job_runs_exactly_once(self):
        counter = CallCounter()
        jobs = [FuncJob(i, counter) for i in range(200)]

        WorkerPool(8, jobs).run()

        assert counter.calls == 200
        assert all(job.has_run and job.result is not None for job in jobs)

    def test_run_blocks_until_slowest_job_finishes(self):
        jobs = [FuncJob(1, sleeping(0.05)), FuncJob(1, sleeping(0.2))]

        start = time.perf_counter()
        WorkerPool(len(jobs), jobs).run()
        elapsed = time.perf_counter() - start

        assert elapsed >= 0.2
        assert all(job.has_run for job in jobs)

    def test_jobs_run_concurrently(self):
        jobs = [FuncJob(1, sleeping(0.2)) for _ in range(4)]

        start = time.perf_counter()
        WorkerPool(len(jobs), jobs).run()
        elapsed = time.perf_counter() - start

        assert elapsed < 0.6, f"4 jobs on 4 workers took {elapsed:.2f}s"

    def test_fewer_workers_than_jobs_still_completes(self):
        jobs = [FuncJob(1, sleeping(0.01)) for _ in range(10)]
        WorkerPool(2, jobs).run()
        assert all(job.has_run for job in jobs)

    def test_job_errors_stay_on_jobs(self):
        jobs = [FuncJob(1, passing), FuncJob(1, hard_error("boom")), FuncJob(1, passing)]

        WorkerPool(3, jobs).run()

        assert jobs[0].error is None
        assert jobs[1].error is not None and jobs[1].error.message == "boom"
        assert jobs[2].error is None

    def test_raising_predicate_does_not_hang_pool(self):
        def explode(value):
            raise RuntimeError("unexpected")

        jobs = [FuncJob(1, explode), FuncJob(1, passing)]
        WorkerPool(2, jobs).run()

        assert jobs[0].error.code == ErrorCode.E9001_UNEXPECTED_ERROR
        assert isinstance(jobs[0].error.cause, RuntimeError)
        assert jobs[1].result.valid

    def test_workers_are_joined_after_run(self):
        before = threading.active_count()
        WorkerPool(6, [FuncJob(1, passing) for _ in range(3)]).run()
        assert threading.active_count() == before

    def test_pool_is_single_use(self):
        pool = WorkerPool(2, [FuncJob(1, passing)])
        pool.run()
        with pytest.raises(AppErrorException) as exc_info:
            pool.run()
        assert exc_info.value.code == ErrorCode.E9006_POOL_ALREADY_RUN


class TestCompletionBarrier:

    def test_wait_returns_immediately_at_zero(self):
        CompletionBarrier().wait()

    def test_wait_blocks_until_all_done(self):
        barrier = CompletionBarrier()
        barrier.add(3)

        def finish():
            for _ in range(3):
                time.sleep(0.01)
                barrier.done()

        thread = threading.Thread(target=finish)
        thread.start()
        barrier.wait()
        thread.join()

        assert barrier.count == 0

    def test_negative_count_is_an_error(self):
        with pytest.raises(ValueError):
            CompletionBarrier().done()
