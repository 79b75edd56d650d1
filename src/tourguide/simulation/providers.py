import time
from threading import Lock
from typing import Optional
from uuid import UUID

import numpy as np

from tourguide.core.location import Location
from tourguide.providers.base import LocationProvider, RewardPointsOracle

MAX_LATITUDE = 85.05112878
MAX_LONGITUDE = 180.0


class SimulatedGpsProvider(LocationProvider):
    """
    Stands in for a live GPS feed: returns a random position anywhere on the
    Web Mercator-safe band, after an optional artificial latency.
    """

    def __init__(self, latency: float = 0.0, seed: Optional[int] = None):
        """
        Args:
            latency: Seconds to sleep before answering, to mimic a network call.
            seed: Seed for the random generator. None draws fresh entropy.
        """
        self._latency = latency
        self._rng = np.random.default_rng(seed)
        # numpy Generators are not thread-safe
        self._lock = Lock()

    def get_user_location(self, user_id: UUID) -> Location:
        if self._latency > 0:
            time.sleep(self._latency)
        with self._lock:
            lat = float(self._rng.uniform(-MAX_LATITUDE, MAX_LATITUDE))
            lon = float(self._rng.uniform(-MAX_LONGITUDE, MAX_LONGITUDE))
        return Location(latitude=lat, longitude=lon)


class SimulatedRewardCentral(RewardPointsOracle):
    """Random reward points in [1, 1000], after an optional artificial latency."""

    def __init__(self, latency: float = 0.0, seed: Optional[int] = None):
        self._latency = latency
        self._rng = np.random.default_rng(seed)
        self._lock = Lock()

    def get_attraction_reward_points(self, attraction_id: UUID, user_id: UUID) -> int:
        if self._latency > 0:
            time.sleep(self._latency)
        with self._lock:
            return int(self._rng.integers(1, 1000, endpoint=True))
