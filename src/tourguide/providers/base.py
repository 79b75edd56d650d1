import abc
from typing import Any, List, Sequence
from uuid import UUID

from tourguide.core.attraction import Attraction
from tourguide.core.location import Location


class LocationProvider(abc.ABC):
    """Resolves where a user is right now."""

    @abc.abstractmethod
    def get_user_location(self, user_id: UUID) -> Location:
        """Returns the user's current position. May block on the network."""
        pass


class AttractionProvider(abc.ABC):
    """Source of the attraction catalog."""

    @abc.abstractmethod
    def list_attractions(self) -> Sequence[Attraction]:
        pass


class RewardPointsOracle(abc.ABC):
    """Decides how many points a given user earns at a given attraction."""

    @abc.abstractmethod
    def get_attraction_reward_points(self, attraction_id: UUID, user_id: UUID) -> int:
        pass


class PricingOracle(abc.ABC):
    """
    Quotes trip offers. The pricing formula lives entirely behind this
    interface; providers returned are opaque to the engine.
    """

    @abc.abstractmethod
    def get_price(
        self,
        api_key: str,
        user_id: UUID,
        adults: int,
        children: int,
        nights_stay: int,
        reward_points: int,
    ) -> List[Any]:
        pass
