from .base import AttractionProvider, LocationProvider, PricingOracle, RewardPointsOracle
from .attractions import CsvAttractionProvider, StaticAttractionProvider

__all__ = [
    "AttractionProvider",
    "LocationProvider",
    "PricingOracle",
    "RewardPointsOracle",
    "CsvAttractionProvider",
    "StaticAttractionProvider",
]
