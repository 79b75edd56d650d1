from .scheduler import BatchScheduler, PoolSizing, REWARDS_POOL, TRACKING_POOL

__all__ = ["BatchScheduler", "PoolSizing", "REWARDS_POOL", "TRACKING_POOL"]
