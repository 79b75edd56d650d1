from typing import Iterable, List, Optional, Sequence

from loguru import logger

from tourguide.core.attraction import Attraction
from tourguide.core.geo import distance
from tourguide.core.location import Location, VisitedLocation
from tourguide.core.user import User, UserReward
from tourguide.exceptions import ProviderUnavailable, TourGuideError
from tourguide.modules.catalog.catalog import AttractionCatalog
from tourguide.modules.scheduling.scheduler import BatchScheduler, REWARDS_POOL
from tourguide.providers.base import AttractionProvider, RewardPointsOracle

DEFAULT_PROXIMITY_BUFFER = 10.0
ATTRACTION_PROXIMITY_RANGE = 200.0


class RewardMatcher:
    """
    Awards points for attractions a user has passed near.

    A user earns at most one reward per attraction name. The first visited
    location (history order) that falls within `proximity_buffer` miles of an
    attraction (catalog order) wins; later, closer visits never replace it.
    """

    def __init__(
        self,
        attraction_provider: AttractionProvider,
        reward_oracle: RewardPointsOracle,
        proximity_buffer: float = DEFAULT_PROXIMITY_BUFFER,
        attraction_proximity_range: float = ATTRACTION_PROXIMITY_RANGE,
        scheduler: Optional[BatchScheduler] = None,
    ):
        """
        Args:
            attraction_provider: Source of the catalog for batch runs.
            reward_oracle: Supplies the point value of each new reward.
            proximity_buffer: Max distance in miles for a visit to count.
            attraction_proximity_range: Looser radius used by is_within_attraction_proximity.
            scheduler: Fan-out used by apply_rewards_batch.
        """
        self.attraction_provider = attraction_provider
        self.reward_oracle = reward_oracle
        self.default_proximity_buffer = proximity_buffer
        self.proximity_buffer = proximity_buffer
        self.attraction_proximity_range = attraction_proximity_range
        self.scheduler = scheduler or BatchScheduler(REWARDS_POOL, name="rewards")

    def reset_proximity_buffer(self) -> None:
        self.proximity_buffer = self.default_proximity_buffer

    def load_catalog(self) -> AttractionCatalog:
        return AttractionCatalog.load(self.attraction_provider)

    def is_within_attraction_proximity(self, attraction: Attraction, location: Location) -> bool:
        return distance(attraction.location, location) <= self.attraction_proximity_range

    def near_attraction(self, visited_location: VisitedLocation, attraction: Attraction) -> bool:
        return distance(attraction.location, visited_location.location) <= self.proximity_buffer

    def reward_points(self, attraction: Attraction, user: User) -> int:
        """
        Asks the oracle how many points `user` earns at `attraction`.

        Raises:
            ProviderUnavailable: if the oracle call fails.
        """
        try:
            points = self.reward_oracle.get_attraction_reward_points(attraction.attraction_id, user.user_id)
        except TourGuideError:
            raise
        except Exception as e:
            raise ProviderUnavailable("rewards", str(e)) from e
        return int(points)

    def apply_rewards(self, user: User, attractions: Iterable[Attraction]) -> List[UserReward]:
        """
        Appends a reward to `user` for every attraction newly within range.

        Args:
            user: The user to reward. Mutated in place (rewards list only).
            attractions: Catalog snapshot to match against.

        Returns:
            The rewards added by this call, in award order.
        """
        # Snapshot so appends elsewhere during the pass don't affect iteration
        visited_locations = list(user.visited_locations)
        existing_rewards = list(user.user_rewards)
        attractions = list(attractions)

        if not visited_locations or not attractions:
            return []

        rewarded = {r.attraction.name for r in existing_rewards}
        added = []

        for visited_location in visited_locations:
            for attraction in attractions:
                if attraction.name in rewarded:
                    continue
                if not self.near_attraction(visited_location, attraction):
                    continue

                reward = UserReward(
                    visited_location=visited_location,
                    attraction=attraction,
                    reward_points=self.reward_points(attraction, user),
                )
                user.add_user_reward(reward)
                rewarded.add(attraction.name)
                added.append(reward)

        if added:
            logger.debug(f"User {user.user_name}: {len(added)} new rewards")
        return added

    def calculate_rewards(self, user: User) -> List[UserReward]:
        """Single-user pass against a freshly loaded catalog."""
        return self.apply_rewards(user, self.load_catalog())

    def apply_rewards_batch(self, users: Sequence[User]) -> List[List[UserReward]]:
        """
        Loads the catalog once and runs apply_rewards for every user.

        Returns:
            Per-user lists of newly added rewards, in input order.
        """
        users = list(users)
        if not users:
            return []

        catalog = self.load_catalog()
        return self.scheduler.run(users, lambda user: self.apply_rewards(user, catalog))
