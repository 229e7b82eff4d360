"""Concurrency patterns: pipeline, fan-in/fan-out, worker pool, semaphore, barrier."""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

_ITEM = "item"
_ERROR = "error"
_DONE = "done"
_STOP = object()


def _threaded_stage(source: Iterable[Any], transform: Callable[[Any], Any]) -> Iterator[Any]:
    """Apply *transform* to *source* in a producer thread, one item at a time."""
    channel: queue.Queue = queue.Queue(maxsize=1)
    stop = threading.Event()

    def send(message: tuple[str, Any]) -> bool:
        while not stop.is_set():
            try:
                channel.put(message, timeout=0.05)
                return True
            except queue.Full:
                continue
        return False

    def produce() -> None:
        try:
            for item in source:
                if not send((_ITEM, transform(item))):
                    return
        except Exception as exc:  # handed over to the consuming thread
            send((_ERROR, exc))
            return
        send((_DONE, None))

    threading.Thread(target=produce, daemon=True).start()
    try:
        while True:
            kind, payload = channel.get()
            if kind == _DONE:
                return
            if kind == _ERROR:
                raise payload
            yield payload
    finally:
        stop.set()


def double_stage(source: Iterable[int]) -> Iterator[int]:
    """Pipeline stage that doubles every value."""
    return _threaded_stage(source, lambda n: n * 2)


def increment_stage(source: Iterable[int]) -> Iterator[int]:
    """Pipeline stage that adds one to every value."""
    return _threaded_stage(source, lambda n: n + 1)


def pipeline(values: Iterable[int]) -> list[int]:
    """Run *values* through the doubling and incrementing stages, in order."""
    return list(increment_stage(double_stage(values)))


def _double_into(task: int, results: queue.Queue) -> None:
    logger.info("Processed task: %d", task)
    results.put(task * 2)


def fan_in_fan_out(tasks: Iterable[int]) -> list[int]:
    """Double each task in its own thread and collect results in completion order."""
    results: queue.Queue = queue.Queue()
    threads = [
        threading.Thread(target=_double_into, args=(task, results)) for task in tasks
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    collected = []
    while not results.empty():
        result = results.get()
        logger.info("Collected result: %d", result)
        collected.append(result)
    return collected


def run_worker_pool(jobs: Iterable[int], num_workers: int = 3) -> list[int]:
    """Square every job with a fixed pool of worker threads."""
    if num_workers < 1:
        raise ValueError(f"num_workers must be at least 1, got {num_workers}")
    job_queue: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()

    def work(worker_id: int) -> None:
        while (job := job_queue.get()) is not _STOP:
            result = job * job
            logger.info("Worker %d processed job %d; result = %d", worker_id, job, result)
            results.put(result)

    workers = [
        threading.Thread(target=work, args=(worker_id,))
        for worker_id in range(1, num_workers + 1)
    ]
    for worker in workers:
        worker.start()
    for job in jobs:
        job_queue.put(job)
    for _ in workers:
        job_queue.put(_STOP)
    for worker in workers:
        worker.join()

    collected = []
    while not results.empty():
        result = results.get()
        logger.info("Collected result: %d", result)
        collected.append(result)
    return collected


@dataclass
class DownloadReport:
    """Outcome of :func:`download_files`."""

    completed: list[int] = field(default_factory=list)
    peak: int = 0


def download_files(file_ids: Iterable[int], limit: int = 3, duration: float = 2.0) -> DownloadReport:
    """Simulate downloads with at most *limit* running at the same time."""
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    semaphore = threading.BoundedSemaphore(limit)
    lock = threading.Lock()
    report = DownloadReport()
    active = 0

    def download(file_id: int) -> None:
        nonlocal active
        with semaphore:
            with lock:
                active += 1
                report.peak = max(report.peak, active)
            logger.info("Downloading file %d...", file_id)
            time.sleep(duration)
            logger.info("Finished downloading file %d.", file_id)
            with lock:
                active -= 1
                report.completed.append(file_id)

    threads = [threading.Thread(target=download, args=(file_id,)) for file_id in file_ids]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    logger.info("Finished downloading!")
    return report


def barrier(num_workers: int = 3, stage_delay: float = 1.0) -> list[str]:
    """Run workers through fetch, transform and write stages with a barrier between stages.

    Returns the log of events in the order they happened.
    """
    if num_workers < 1:
        raise ValueError(f"num_workers must be at least 1, got {num_workers}")
    events: list[str] = []
    lock = threading.Lock()

    def record(message: str) -> None:
        with lock:
            events.append(message)
        logger.info(message)

    after_fetch = threading.Barrier(
        num_workers,
        action=lambda: record("All workers finished fetching data. Moving to the next stage."),
    )
    after_transform = threading.Barrier(
        num_workers,
        action=lambda: record(
            "All workers finished transforming data. Proceeding to the final stage."
        ),
    )

    def process(worker_id: int) -> None:
        record(f"Worker {worker_id} is fetching data...")
        time.sleep(2 * stage_delay)
        record(f"Worker {worker_id} finished fetching data.")
        record(f"Worker {worker_id} waiting at the barrier after fetching.")
        after_fetch.wait()

        record(f"Worker {worker_id} is transforming data...")
        time.sleep(stage_delay)
        record(f"Worker {worker_id} finished transforming data.")
        record(f"Worker {worker_id} waiting at the barrier after transforming.")
        after_transform.wait()

        record(f"Worker {worker_id} is writing data to the database...")
        time.sleep(stage_delay)
        record(f"Worker {worker_id} finished writing data.")

    threads = [
        threading.Thread(target=process, args=(worker_id,))
        for worker_id in range(1, num_workers + 1)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    record("All workers finished writing data. Processing completed.")
    return events