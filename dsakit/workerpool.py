"""A worker pool that grows while its queue outpaces its workers."""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_QUEUE_CAPACITY = 10
_STOP = object()


@dataclass(frozen=True)
class Task:
    """A unit of work identified by its id."""

    id: int


class DynamicWorkerPool:
    """Thread pool that adds a worker whenever queued tasks exceed the worker count."""

    def __init__(self, initial_workers: int, max_workers: int, work_time: float = 2.0) -> None:
        self.worker_count = initial_workers
        self.max_workers = max_workers
        self.work_time = work_time
        self._tasks: queue.Queue = queue.Queue(maxsize=_QUEUE_CAPACITY)
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []
        self._completed: list[int] = []
        self._closed = False

    @property
    def completed(self) -> list[int]:
        """Ids of finished tasks, in completion order."""
        with self._lock:
            return list(self._completed)

    def start(self) -> None:
        """Start the initial workers."""
        with self._lock:
            for worker_id in range(self.worker_count):
                self._spawn(worker_id)

    def submit(self, task: Task) -> None:
        """Queue a task, then grow the pool if needed."""
        with self._lock:
            if self._closed:
                raise RuntimeError("cannot submit to a pool that has been shut down")
        self._tasks.put(task)
        self._resize()

    def shutdown(self) -> None:
        """Let workers drain the queue, then wait for all of them to stop."""
        with self._lock:
            if self._closed:
                raise RuntimeError("pool is already shut down")
            self._closed = True
            threads = list(self._threads)
        for _ in threads:
            self._tasks.put(_STOP)
        for thread in threads:
            thread.join()
        logger.info("All workers shut down.")

    def __enter__(self) -> DynamicWorkerPool:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def _spawn(self, worker_id: int) -> None:
        thread = threading.Thread(target=self._work, args=(worker_id,), daemon=True)
        self._threads.append(thread)
        thread.start()

    def _resize(self) -> None:
        with self._lock:
            if self._closed:
                return
            if self._tasks.qsize() > self.worker_count and self.worker_count < self.max_workers:
                logger.info("Increasing worker count...")
                self.worker_count += 1
                self._spawn(self.worker_count)

    def _work(self, worker_id: int) -> None:
        logger.info("Worker %d started.", worker_id)
        while (task := self._tasks.get()) is not _STOP:
            logger.info("Worker %d processing task %d", worker_id, task.id)
            time.sleep(self.work_time)
            logger.info("Worker %d finished task %d", worker_id, task.id)
            with self._lock:
                self._completed.append(task.id)
        logger.info("Worker %d shutting down.", worker_id)