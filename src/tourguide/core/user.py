from dataclasses import dataclass, field
from typing import Any, List, Optional
from uuid import UUID

import pandas as pd

from .attraction import Attraction
from .location import VisitedLocation


@dataclass(frozen=True)
class UserReward:
    """
    Points earned the first time a user came within range of an attraction.
    """
    visited_location: VisitedLocation
    attraction: Attraction
    reward_points: int = 0

    def __post_init__(self):
        if self.reward_points < 0:
            raise ValueError(f"Reward points must be >= 0, got {self.reward_points}")


@dataclass
class UserPreferences:
    attraction_proximity: int = 2 ** 31 - 1
    currency: str = "USD"
    lower_price_point: float = 0.0
    high_price_point: float = float("inf")
    trip_duration: int = 1
    ticket_quantity: int = 1
    number_of_adults: int = 1
    number_of_children: int = 0


@dataclass(eq=False)
class User:
    """
    A tracked user. Owns two append-only sequences: visited locations and
    rewards. Identity-compared, since the registry hands out the canonical
    instance by reference.
    """
    user_id: UUID
    user_name: str
    phone_number: str = ""
    email_address: str = ""
    preferences: UserPreferences = field(default_factory=UserPreferences)
    visited_locations: List[VisitedLocation] = field(default_factory=list)
    user_rewards: List[UserReward] = field(default_factory=list)
    trip_deals: List[Any] = field(default_factory=list)

    def add_visited_location(self, visited_location: VisitedLocation) -> None:
        self.visited_locations.append(visited_location)

    def add_user_reward(self, reward: UserReward) -> None:
        self.user_rewards.append(reward)

    @property
    def last_visited_location(self) -> Optional[VisitedLocation]:
        if not self.visited_locations:
            return None
        return self.visited_locations[-1]

    @property
    def total_reward_points(self) -> int:
        return sum(r.reward_points for r in self.user_rewards)

    def history_frame(self) -> pd.DataFrame:
        """
        Returns the visited-location history as a DataFrame, one row per fix,
        in insertion order.
        """
        rows = [
            {
                "user_id": str(v.user_id),
                "latitude": v.latitude,
                "longitude": v.longitude,
                "timestamp": v.timestamp,
            }
            for v in list(self.visited_locations)
        ]
        return pd.DataFrame(rows, columns=["user_id", "latitude", "longitude", "timestamp"])
