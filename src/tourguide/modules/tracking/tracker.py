from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from loguru import logger

from tourguide.core.location import VisitedLocation
from tourguide.core.user import User
from tourguide.exceptions import ProviderUnavailable, TourGuideError
from tourguide.modules.catalog.catalog import AttractionCatalog
from tourguide.modules.rewards.matcher import RewardMatcher
from tourguide.modules.scheduling.scheduler import BatchScheduler, TRACKING_POOL
from tourguide.providers.base import LocationProvider


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LocationTracker:
    """
    Resolves users' current positions, appends them to their history and
    re-runs reward matching for them.
    """

    def __init__(
        self,
        location_provider: LocationProvider,
        reward_matcher: RewardMatcher,
        scheduler: Optional[BatchScheduler] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.location_provider = location_provider
        self.reward_matcher = reward_matcher
        self.scheduler = scheduler or BatchScheduler(TRACKING_POOL, name="tracking")
        self.clock = clock

    def _locate(self, user: User) -> VisitedLocation:
        try:
            location = self.location_provider.get_user_location(user.user_id)
        except TourGuideError:
            raise
        except Exception as e:
            raise ProviderUnavailable("gps", str(e)) from e
        return VisitedLocation(user_id=user.user_id, location=location, timestamp=self.clock())

    def _record(self, user: User) -> VisitedLocation:
        visited_location = self._locate(user)
        user.add_visited_location(visited_location)
        return visited_location

    def _track_with(self, user: User, catalog: AttractionCatalog) -> VisitedLocation:
        visited_location = self._record(user)
        self.reward_matcher.apply_rewards(user, catalog)
        return visited_location

    def track(self, user: User) -> VisitedLocation:
        """
        Fetches a fix for `user`, appends it to the history, then applies
        rewards against a freshly loaded catalog. The fix is kept even if the
        catalog or reward lookup fails afterwards.
        """
        visited_location = self._record(user)
        self.reward_matcher.apply_rewards(user, self.reward_matcher.load_catalog())
        return visited_location

    def track_batch(self, users: Sequence[User]) -> List[VisitedLocation]:
        """
        Tracks every user against one shared catalog snapshot.

        Returns:
            The new visited locations, in the same order as `users`.
        """
        users = list(users)
        if not users:
            return []

        catalog = self.reward_matcher.load_catalog()
        results = self.scheduler.run(users, lambda user: self._track_with(user, catalog))
        logger.debug(f"Tracked {len(results)} users")
        return results

    def current_location(self, user: User) -> VisitedLocation:
        """Last known location, or a fresh fix if the user has never been tracked."""
        last = user.last_visited_location
        if last is not None:
            return last
        return self.track(user)
