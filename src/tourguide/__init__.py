from .core import Attraction, Location, User, UserPreferences, UserReward, VisitedLocation, distance
from .exceptions import InvalidCoordinate, PartialBatchFailure, ProviderUnavailable, TourGuideError, UnknownUser

__version__ = "0.1.0"
