from .registry import UserRegistry
from .tour_guide import NearbyAttraction, TourGuideService

__all__ = ["UserRegistry", "NearbyAttraction", "TourGuideService"]
