from dataclasses import dataclass
from typing import Any, List, Optional

from loguru import logger

from tourguide.config import Settings, get_settings
from tourguide.core.attraction import Attraction
from tourguide.core.geo import distance
from tourguide.core.location import VisitedLocation
from tourguide.core.user import User, UserReward
from tourguide.exceptions import ProviderUnavailable, TourGuideError, UnknownUser
from tourguide.modules.rewards.matcher import RewardMatcher
from tourguide.modules.scheduling.scheduler import BatchScheduler, PoolSizing
from tourguide.modules.tracking.background import BackgroundTracker
from tourguide.modules.tracking.tracker import LocationTracker
from tourguide.providers.base import AttractionProvider, LocationProvider, PricingOracle, RewardPointsOracle
from tourguide.simulation.users import generate_internal_users

from .registry import UserRegistry


@dataclass(frozen=True)
class NearbyAttraction:
    attraction_name: str
    attraction_latitude: float
    attraction_longitude: float
    user_latitude: float
    user_longitude: float
    distance: float
    reward_points: int


class TourGuideService:
    """
    Entry point for a request-handling layer: wires the providers, the
    tracker and the reward matcher around a shared user registry.
    """

    def __init__(
        self,
        location_provider: LocationProvider,
        attraction_provider: AttractionProvider,
        reward_oracle: RewardPointsOracle,
        pricing_oracle: Optional[PricingOracle] = None,
        settings: Optional[Settings] = None,
        registry: Optional[UserRegistry] = None,
        seed: Optional[int] = None,
    ):
        """
        Args:
            location_provider: GPS feed.
            attraction_provider: Attraction catalog feed.
            reward_oracle: Reward-points oracle.
            pricing_oracle: Trip pricing oracle; trip_deals is unavailable without it.
            settings: Overrides the environment-derived settings.
            registry: Shared user store. A new empty one is created if omitted.
            seed: Seed for internal test-user generation.
        """
        self.settings = settings or get_settings()
        self.registry = registry or UserRegistry()
        self.pricing_oracle = pricing_oracle

        s = self.settings
        self.reward_matcher = RewardMatcher(
            attraction_provider,
            reward_oracle,
            proximity_buffer=s.proximity_buffer_miles,
            attraction_proximity_range=s.attraction_proximity_range_miles,
            scheduler=BatchScheduler(PoolSizing(s.rewards_pool_multiplier, s.rewards_pool_floor), name="rewards"),
        )
        self.tracker = LocationTracker(
            location_provider,
            self.reward_matcher,
            scheduler=BatchScheduler(PoolSizing(s.tracking_pool_multiplier, s.tracking_pool_floor), name="tracking"),
        )
        self.background_tracker = BackgroundTracker(
            self.tracker,
            self.registry.all,
            interval_seconds=s.tracking_interval_seconds,
        )

        if s.test_mode:
            logger.info("TestMode enabled")
            logger.debug("Initializing users")
            for user in generate_internal_users(s.internal_user_count, s.internal_user_history_size, seed=seed):
                self.registry.add(user)
            logger.debug(f"Created {s.internal_user_count} internal test users.")

    def __enter__(self) -> "TourGuideService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def start_tracking(self) -> None:
        self.background_tracker.start()

    def close(self) -> None:
        self.background_tracker.stop()

    # Users

    def get_user(self, user_name: str) -> User:
        user = self.registry.get(user_name)
        if user is None:
            raise UnknownUser(user_name)
        return user

    def get_all_users(self) -> List[User]:
        return self.registry.all()

    def add_user(self, user: User) -> User:
        return self.registry.add(user)

    # Tracking and rewards

    def get_user_location(self, user_name: str) -> VisitedLocation:
        return self.tracker.current_location(self.get_user(user_name))

    def track_user_location(self, user: User) -> VisitedLocation:
        return self.tracker.track(user)

    def track_users_locations(self, users: List[User]) -> List[VisitedLocation]:
        return self.tracker.track_batch(users)

    def calculate_rewards(self, users: List[User]) -> List[List[UserReward]]:
        return self.reward_matcher.apply_rewards_batch(users)

    def get_user_rewards(self, user_name: str) -> List[UserReward]:
        return list(self.get_user(user_name).user_rewards)

    def nearby_attractions(self, user_name: str, limit: Optional[int] = None) -> List[NearbyAttraction]:
        """
        The `limit` closest attractions to the user's current location,
        nearest first, regardless of actual proximity.
        """
        limit = limit if limit is not None else self.settings.nearby_attractions_limit
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        user = self.get_user(user_name)
        visited_location = self.tracker.current_location(user)
        catalog = self.reward_matcher.load_catalog()

        ranked = sorted(
            ((distance(a.location, visited_location.location), a) for a in catalog),
            key=lambda pair: pair[0],
        )[:limit]

        def describe(pair) -> NearbyAttraction:
            miles, attraction = pair
            return NearbyAttraction(
                attraction_name=attraction.name,
                attraction_latitude=attraction.latitude,
                attraction_longitude=attraction.longitude,
                user_latitude=visited_location.latitude,
                user_longitude=visited_location.longitude,
                distance=miles,
                reward_points=self.reward_matcher.reward_points(attraction, user),
            )

        result = self.reward_matcher.scheduler.run(ranked, describe)
        logger.info(f"Attractions found: {len(result)}")
        return result

    def attraction_reward_points(self, attraction: Attraction, user_name: str) -> int:
        return self.reward_matcher.reward_points(attraction, self.get_user(user_name))

    # Trip deals

    def trip_deals(self, user_name: str) -> List[Any]:
        """
        Quotes trips for the user, padded or truncated to exactly the number
        of tickets in their preferences.
        """
        if self.pricing_oracle is None:
            raise ProviderUnavailable("pricing", "no pricing oracle configured")

        user = self.get_user(user_name)
        prefs = user.preferences
        try:
            providers = list(self.pricing_oracle.get_price(
                self.settings.trip_pricer_api_key,
                user.user_id,
                prefs.number_of_adults,
                prefs.number_of_children,
                prefs.trip_duration,
                user.total_reward_points,
            ))
        except TourGuideError:
            raise
        except Exception as e:
            raise ProviderUnavailable("pricing", str(e)) from e

        wanted = prefs.ticket_quantity
        if providers and len(providers) < wanted:
            providers = [providers[i % len(providers)] for i in range(wanted)]
        else:
            providers = providers[:wanted]

        user.trip_deals = providers
        return providers
