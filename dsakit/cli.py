"""Command line entry point running the demonstration programs."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable

from dsakit.concurrency import (
    barrier,
    download_files,
    fan_in_fan_out,
    pipeline,
    run_worker_pool,
)
from dsakit.sorting import merge_sort, merge_sort_concurrent, quick_sort, radix_sort, random_array
from dsakit.workerpool import DynamicWorkerPool, Task

QUICK_SAMPLE = [50, -8, -96, -63, -73, 95, -69, 16, -38, 53, 72, -71, -92, 25, 59]
RADIX_SAMPLE = [6151, 4256, 4485, 3634, 4378, 5075, 3407, 7189, 4211, 7561, 5854, 2610, 6476, 3491, 7645]


def _format_list(values: Iterable[object]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def _demo_pipeline(delay: float) -> None:
    for result in pipeline(range(10)):
        print(result)


def _demo_fan_in_fan_out(delay: float) -> None:
    for result in fan_in_fan_out([1, 2, 3, 4, 5]):
        print(f"Collected result: {result}")


def _demo_worker_pool(delay: float) -> None:
    for result in run_worker_pool(range(1, 11), 3):
        print(f"Collected result: {result}")


def _demo_semaphore(delay: float) -> None:
    report = download_files(range(1, 11), 3, 2 * delay)
    for file_id in report.completed:
        print(f"Finished downloading file {file_id}.")
    print("Finished downloading!")


def _demo_barrier(delay: float) -> None:
    for event in barrier(3, delay):
        print(event)


def _demo_dynamic_pool(delay: float) -> None:
    with DynamicWorkerPool(2, 5, 2 * delay) as pool:
        for i in range(1, 11):
            pool.submit(Task(i))
            time.sleep(0.5 * delay)
        time.sleep(5 * delay)
    for task_id in pool.completed:
        print(f"Finished task {task_id}")
    print("All workers shut down.")


def _demo_merge_sort(delay: float) -> None:
    data = random_array(-100, 100, 200)
    started = time.perf_counter_ns()
    merge_sort(data)
    print(f"Took {time.perf_counter_ns() - started} nanoseconds")
    started = time.perf_counter_ns()
    merge_sort_concurrent(data)
    print(f"Took {time.perf_counter_ns() - started} nanoseconds")
    print("Done")


def _demo_quick_sort(delay: float) -> None:
    print(f"Before:\t{_format_list(QUICK_SAMPLE)}")
    print(f"After:\t{_format_list(quick_sort(QUICK_SAMPLE))}")


def _demo_radix(delay: float) -> None:
    print("Before:")
    print(_format_list(RADIX_SAMPLE))
    print("After:")
    print(_format_list(radix_sort(RADIX_SAMPLE, 4, 10)))


DEMOS = {
    "pipeline": _demo_pipeline,
    "fan-in-fan-out": _demo_fan_in_fan_out,
    "worker-pool": _demo_worker_pool,
    "semaphore": _demo_semaphore,
    "barrier": _demo_barrier,
    "dynamic-worker-pool": _demo_dynamic_pool,
    "merge-sort": _demo_merge_sort,
    "quick-sort": _demo_quick_sort,
    "radix": _demo_radix,
}


def main(argv: list[str] | None = None) -> int:
    """Print the banner and run the chosen demonstration."""
    parser = argparse.ArgumentParser(prog="dsakit", description="Data structure and algorithm demos.")
    parser.add_argument("demo", nargs="?", default="pipeline", choices=sorted(DEMOS))
    parser.add_argument(
        "--delay", type=float, default=1.0, help="scale factor for simulated work time in seconds"
    )
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")
    print("Data Structures and Algorithms")
    DEMOS[args.demo](args.delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())