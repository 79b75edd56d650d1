import threading
import time

import pytest
from loguru import logger

from tourguide.exceptions import PartialBatchFailure
from tourguide.modules.scheduling.scheduler import BatchScheduler, PoolSizing, REWARDS_POOL, TRACKING_POOL


def test_empty_batch_creates_no_pool(monkeypatch):
    scheduler = BatchScheduler(PoolSizing(1, 2))
    monkeypatch.setattr("tourguide.modules.scheduling.scheduler.ThreadPoolExecutor",
                        lambda *a, **k: pytest.fail("pool created for empty batch"))
    assert scheduler.run([], lambda x: x) == []


def test_single_item_runs_on_calling_thread():
    scheduler = BatchScheduler(PoolSizing(1, 2))
    caller = threading.current_thread()
    seen = []

    def work(x):
        seen.append(threading.current_thread())
        return x * 2

    assert scheduler.run([21], work) == [42]
    assert seen == [caller]


def test_single_item_error_propagates_unwrapped():
    scheduler = BatchScheduler(PoolSizing(1, 2))

    def work(x):
        raise KeyError(x)

    with pytest.raises(KeyError):
        scheduler.run(["a"], work)


def test_results_keep_input_order_despite_completion_order():
    scheduler = BatchScheduler(PoolSizing(1, 8))
    delays = [0.2, 0.05, 0.15, 0.0, 0.1]
    completed = []
    lock = threading.Lock()

    def work(i):
        time.sleep(delays[i])
        with lock:
            completed.append(i)
        return f"item-{i}"

    result = scheduler.run(range(len(delays)), work)

    assert result == [f"item-{i}" for i in range(len(delays))]
    assert completed != sorted(completed)


def test_multiple_items_run_on_worker_threads():
    scheduler = BatchScheduler(PoolSizing(1, 4), name="fanout")
    names = scheduler.run(range(4), lambda _: threading.current_thread().name)
    assert all(n.startswith("fanout") for n in names)


def test_first_failure_in_input_order_after_all_settle():
    scheduler = BatchScheduler(PoolSizing(1, 8))
    finished = []
    lock = threading.Lock()

    def work(i):
        if i == 3:
            raise ValueError("three")
        if i == 1:
            time.sleep(0.1)
            raise RuntimeError("one")
        time.sleep(0.05)
        with lock:
            finished.append(i)
        return i

    warnings = []
    sink_id = logger.add(lambda message: warnings.append(message.record), level="WARNING")
    try:
        with pytest.raises(PartialBatchFailure) as exc_info:
            scheduler.run(range(6), work)
    finally:
        logger.remove(sink_id)

    err = exc_info.value
    assert err.index == 1
    assert err.item == 1
    assert isinstance(err.__cause__, RuntimeError)
    assert [i for i, _ in err.failures] == [1, 3]
    assert err.total == 6
    # every successful task still ran to completion
    assert sorted(finished) == [0, 2, 4, 5]
    assert [r["level"].name for r in warnings] == ["WARNING", "WARNING"]
    assert "task 1 failed" in warnings[0]["message"]
    assert "task 3 failed" in warnings[1]["message"]


def test_pool_threads_are_released():
    scheduler = BatchScheduler(PoolSizing(1, 16), name="leakcheck")

    def work(i):
        if i % 2:
            raise RuntimeError(i)
        return i

    scheduler.run(range(10), lambda i: i)
    with pytest.raises(PartialBatchFailure):
        scheduler.run(range(10), work)

    leaked = [t for t in threading.enumerate() if t.name.startswith("leakcheck")]
    assert leaked == []


def test_pool_sizing():
    sizing = PoolSizing(multiplier=8, floor=100)
    assert sizing.pool_size(1000, cpu_count=4) == 100
    assert sizing.pool_size(1000, cpu_count=32) == 256
    assert sizing.pool_size(10, cpu_count=4) == 10

    assert PoolSizing(1, 2).pool_size(50, cpu_count=1) == 2


def test_pool_sizing_rejects_nonsense():
    with pytest.raises(ValueError):
        PoolSizing(multiplier=0)
    with pytest.raises(ValueError):
        PoolSizing(floor=0)


def test_default_pools():
    assert TRACKING_POOL.floor > REWARDS_POOL.floor
    assert TRACKING_POOL.multiplier > REWARDS_POOL.multiplier
