"""
Summary: Fixed-size pool of hashing threads fed by a shared job queue.
Why: Hash many files in parallel while bounding disk and CPU pressure.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import partial
from types import TracebackType
from typing import Final, final

from copy_confirmer.config.settings import WORKER_THREAD_PREFIX

from ..domain.errors import ConfigError, ConfirmerError, ReadError
from ..domain.models import HashJob, HashPhase, HashResult
from .events import ConfirmationEvent, log_event
from .hasher import hash_file
from .ports import FileHasher, ProgressListener


@final
class _Stop:
    """Sentinel telling a worker to exit."""


_STOP: Final[_Stop] = _Stop()


@dataclass(slots=True, frozen=True)
class _WorkerFailure:
    """An unexpected exception raised while a worker handled ``job``."""

    job: HashJob
    error: Exception


@final
class HashJobPool:
    """Run hashing jobs on ``worker_count`` threads, one phase at a time.

    Jobs go into a single unbounded queue; each worker takes one job, hashes
    it and publishes exactly one result before taking the next. Results come
    back in completion order, not submission order. Use the pool as a context
    manager so the workers are stopped when the run ends.
    """

    def __init__(
        self,
        worker_count: int,
        *,
        hasher: FileHasher | None = None,
        chunk_size: int | None = None,
        thread_name_prefix: str = WORKER_THREAD_PREFIX,
    ) -> None:
        if worker_count < 1:
            raise ConfigError(f"Worker count must be at least 1; received {worker_count}")
        self._worker_count: int = worker_count
        self._hasher: FileHasher = hasher or partial(hash_file, chunk_size=chunk_size)
        self._thread_name_prefix: str = thread_name_prefix
        self._jobs: queue.Queue[HashJob | _Stop] = queue.Queue()
        self._results: queue.Queue[HashResult | _WorkerFailure] = queue.Queue()
        self._workers: list[threading.Thread] = []
        self._outstanding: int = 0
        self._closed: bool = False

    @property
    def worker_count(self) -> int:
        return self._worker_count

    def __enter__(self) -> HashJobPool:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def start(self) -> None:
        """Spawn the worker threads if they are not running yet."""

        if self._closed:
            raise RuntimeError("HashJobPool has been closed")
        if self._workers:
            return
        for index in range(self._worker_count):
            worker = threading.Thread(
                target=self._work,
                name=f"{self._thread_name_prefix}-{index}",
                daemon=True,
            )
            worker.start()
            self._workers.append(worker)

    def close(self) -> None:
        """Drop jobs nobody will wait for, stop the workers and wait for them."""

        if self._closed:
            return
        self._closed = True
        self._discard_pending_jobs()
        for _ in self._workers:
            self._jobs.put(_STOP)
        for worker in self._workers:
            worker.join()
        self._workers.clear()

    def run_phase(
        self,
        phase: HashPhase,
        jobs: Iterable[HashJob],
        progress: ProgressListener | None = None,
    ) -> Iterator[HashResult]:
        """Submit ``jobs`` and yield one result per job as workers finish them.

        The phase is drained once the iterator is exhausted: every submitted
        job has produced exactly one result. A new phase cannot start before
        the previous one is drained.

        Raises:
            ConfirmerError: If hashing a job failed with anything but a read error.
        """

        if self._outstanding:
            raise RuntimeError("Previous hashing phase has not been drained")
        self.start()

        submitted = list(jobs)
        total = len(submitted)
        started = time.perf_counter()
        log_event(
            logging.INFO,
            ConfirmationEvent.PHASE_START,
            "Hashing %d %s files",
            total,
            phase.value,
            phase=phase.value,
            total_files=total,
        )
        if progress is not None:
            progress.phase_started(phase, total)

        self._outstanding = total
        for job in submitted:
            self._jobs.put(job)

        failed = 0
        while self._outstanding:
            item = self._results.get()
            self._outstanding -= 1
            if isinstance(item, _WorkerFailure):
                raise ConfirmerError(
                    f"A failure occurred while hashing {item.job.absolute_path}"
                ) from item.error
            if item.error is not None:
                failed += 1
            if progress is not None:
                progress.job_completed(phase, item)
            yield item

        if progress is not None:
            progress.phase_finished(phase)
        log_event(
            logging.INFO,
            ConfirmationEvent.PHASE_COMPLETE,
            "Finished %s files [hashed=%d, failed=%d]",
            phase.value,
            total - failed,
            failed,
            phase=phase.value,
            hashed=total - failed,
            failed=failed,
            duration_seconds=round(time.perf_counter() - started, 4),
        )

    def _work(self) -> None:
        while True:
            job = self._jobs.get()
            if isinstance(job, _Stop):
                return
            self._results.put(self._hash_job(job))

    def _hash_job(self, job: HashJob) -> HashResult | _WorkerFailure:
        try:
            digest = self._hasher(job.absolute_path)
        except ReadError as exc:
            return HashResult(job.tree_id, job.relative_path, error=exc)
        except Exception as exc:
            return _WorkerFailure(job=job, error=exc)
        return HashResult(job.tree_id, job.relative_path, digest=digest)

    def _discard_pending_jobs(self) -> None:
        while True:
            try:
                _ = self._jobs.get_nowait()
            except queue.Empty:
                return


__all__ = ["HashJobPool"]
