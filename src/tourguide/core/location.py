import math
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from tourguide.exceptions import InvalidCoordinate


def _coerce(value, label: str) -> float:
    if isinstance(value, bool):
        raise InvalidCoordinate(f"{label} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinate(f"{label} must be a number, got {value!r}") from e


@dataclass(frozen=True)
class Location:
    """
    A WGS84 coordinate in decimal degrees.
    Validated on construction so distance math never sees out-of-range values.
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        lat = _coerce(self.latitude, "Latitude")
        lon = _coerce(self.longitude, "Longitude")
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidCoordinate(f"Coordinates must be finite, got ({lat}, {lon})")
        if not -90.0 <= lat <= 90.0:
            raise InvalidCoordinate(f"Latitude {lat} outside [-90, 90]")
        if not -180.0 <= lon <= 180.0:
            raise InvalidCoordinate(f"Longitude {lon} outside [-180, 180]")
        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)

    @property
    def tuple(self):
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class VisitedLocation:
    """
    A single GPS fix for a user (who, where, when).
    """
    user_id: UUID
    location: Location
    timestamp: datetime

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude
