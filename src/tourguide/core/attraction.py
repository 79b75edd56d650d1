from dataclasses import dataclass
from uuid import UUID

from .location import Location


@dataclass(frozen=True)
class Attraction:
    """
    A point of interest that pays reward points when a user passes close by.
    Attractions are shared read-only across workers, hence frozen.
    """
    attraction_id: UUID
    name: str
    location: Location
    city: str = ""
    state: str = ""

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude
