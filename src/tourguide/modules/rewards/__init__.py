from .matcher import ATTRACTION_PROXIMITY_RANGE, DEFAULT_PROXIMITY_BUFFER, RewardMatcher

__all__ = ["ATTRACTION_PROXIMITY_RANGE", "DEFAULT_PROXIMITY_BUFFER", "RewardMatcher"]
