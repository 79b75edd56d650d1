import os
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TypeVar

from loguru import logger

from tourguide.exceptions import PartialBatchFailure

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class PoolSizing:
    """
    Worker pool size = max(cpu_count * multiplier, floor), capped by the
    number of items in the batch.
    """
    multiplier: int = 1
    floor: int = 2

    def __post_init__(self):
        if self.multiplier < 1:
            raise ValueError(f"multiplier must be >= 1, got {self.multiplier}")
        if self.floor < 1:
            raise ValueError(f"floor must be >= 1, got {self.floor}")

    def pool_size(self, n_items: int, cpu_count: Optional[int] = None) -> int:
        cpus = cpu_count if cpu_count is not None else (os.cpu_count() or 1)
        return max(1, min(n_items, max(cpus * self.multiplier, self.floor)))


# I/O-bound: workers mostly wait on the GPS feed
TRACKING_POOL = PoolSizing(multiplier=8, floor=100)
# CPU-bound: distance checks over history x catalog
REWARDS_POOL = PoolSizing(multiplier=1, floor=2)


class BatchScheduler:
    """
    Runs one unit of work per item and returns results in input order.

    - 0 items: returns [] without creating a pool.
    - 1 item: runs inline on the calling thread; exceptions propagate as-is.
    - 2+ items: fans out over a ThreadPoolExecutor, waits for every task to
      settle, then either returns all results or raises PartialBatchFailure
      for the first failure in input order. The pool is always shut down
      before returning.
    """

    def __init__(self, sizing: PoolSizing = REWARDS_POOL, name: str = "batch"):
        self.sizing = sizing
        self.name = name

    def run(self, items: Sequence[T], work: Callable[[T], R]) -> List[R]:
        items = list(items)
        if not items:
            return []

        if len(items) == 1:
            return [work(items[0])]

        pool_size = self.sizing.pool_size(len(items))
        logger.debug(f"[{self.name}] dispatching {len(items)} tasks on {pool_size} workers")

        with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix=self.name) as executor:
            futures = [executor.submit(work, item) for item in items]
            wait(futures)

        failures = []
        for index, future in enumerate(futures):
            error = future.exception()
            if error is not None:
                logger.warning(f"[{self.name}] task {index} failed: {error!r}")
                failures.append((index, error))

        if failures:
            index, first = failures[0]
            raise PartialBatchFailure(index, items[index], failures, len(items)) from first

        return [future.result() for future in futures]
