import itertools
import math

import pytest

from dsakit.concurrency import (
    barrier,
    double_stage,
    download_files,
    fan_in_fan_out,
    increment_stage,
    pipeline,
    run_worker_pool,
)


def _broken_source():
    yield 1
    raise KeyError("boom")


def test_pipeline_matches_source_demo():
    assert pipeline(range(10)) == [1, 3, 5, 7, 9, 11, 13, 15, 17, 19]


def test_pipeline_empty():
    assert pipeline([]) == []


def test_double_stage():
    assert list(double_stage([1, 2, 3])) == [2, 4, 6]


def test_increment_stage():
    assert list(increment_stage([1, 2, 3])) == [2, 3, 4]


def test_pipeline_is_composition_of_stages():
    values = [5, -3, 0, 12]
    assert pipeline(values) == list(increment_stage(double_stage(values)))


def test_source_error_propagates():
    with pytest.raises(KeyError):
        list(double_stage(_broken_source()))


def test_transform_error_propagates():
    with pytest.raises(TypeError):
        list(increment_stage(["a"]))


def test_stage_can_be_closed_early():
    gen = double_stage(itertools.count())
    assert next(gen) == 0
    gen.close()
    with pytest.raises(StopIteration):
        next(gen)


def test_fan_in_fan_out_collects_every_result():
    tasks = [1, 2, 3, 4, 5]
    results = fan_in_fan_out(tasks)
    assert len(results) == len(tasks)
    assert sorted(r // 2 for r in results) == tasks
    assert all(r % 2 == 0 for r in results)


def test_fan_in_fan_out_empty():
    assert fan_in_fan_out([]) == []


def test_worker_pool_squares_jobs():
    jobs = list(range(1, 11))
    results = run_worker_pool(jobs, 3)
    assert sorted(math.isqrt(r) for r in results) == jobs
    assert all(math.isqrt(r) ** 2 == r for r in results)


def test_worker_pool_rejects_zero_workers():
    with pytest.raises(ValueError):
        run_worker_pool([1, 2], 0)


def test_download_respects_limit():
    ids = list(range(1, 11))
    report = download_files(ids, 3, 0.02)
    assert sorted(report.completed) == ids
    assert 1 <= report.peak <= 3


def test_download_single_slot():
    report = download_files([1, 2, 3, 4], 1, 0.01)
    assert report.peak == 1
    assert sorted(report.completed) == [1, 2, 3, 4]


def test_download_rejects_bad_limit():
    with pytest.raises(ValueError):
        download_files([1], 0, 0.0)


def test_barrier_orders_stages():
    events = barrier(3, 0.01)
    fetched = events.index("All workers finished fetching data. Moving to the next stage.")
    transformed = events.index(
        "All workers finished transforming data. Proceeding to the final stage."
    )
    finished_fetch = [
        i for i, e in enumerate(events)
        if e.endswith("finished fetching data.") and e.startswith("Worker")
    ]
    start_transform = [i for i, e in enumerate(events) if e.endswith("is transforming data...")]
    start_write = [i for i, e in enumerate(events) if e.endswith("writing data to the database...")]
    assert len(finished_fetch) == 3
    assert max(finished_fetch) < fetched < min(start_transform)
    assert max(start_transform) < transformed < min(start_write)
    assert events[-1] == "All workers finished writing data. Processing completed."


def test_barrier_rejects_no_workers():
    with pytest.raises(ValueError):
        barrier(0, 0.0)