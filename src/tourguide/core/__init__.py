from .location import Location, VisitedLocation
from .attraction import Attraction
from .user import User, UserPreferences, UserReward
from .geo import distance, STATUTE_MILES_PER_NAUTICAL_MILE

__all__ = [
    "Location",
    "VisitedLocation",
    "Attraction",
    "User",
    "UserPreferences",
    "UserReward",
    "distance",
    "STATUTE_MILES_PER_NAUTICAL_MILE",
]
