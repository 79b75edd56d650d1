from .tracker import LocationTracker
from .background import BackgroundTracker

__all__ = ["LocationTracker", "BackgroundTracker"]
