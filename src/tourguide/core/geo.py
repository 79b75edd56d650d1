import math

from .location import Location

STATUTE_MILES_PER_NAUTICAL_MILE = 1.15077945


def distance(a: Location, b: Location) -> float:
    """
    Great-circle distance in statute miles using the spherical law of cosines.

    Args:
        a: First coordinate.
        b: Second coordinate.

    Returns:
        Distance in statute miles. Exactly 0.0 for identical coordinates.
    """
    if a.latitude == b.latitude and a.longitude == b.longitude:
        return 0.0

    lat1 = math.radians(a.latitude)
    lon1 = math.radians(a.longitude)
    lat2 = math.radians(b.latitude)
    lon2 = math.radians(b.longitude)

    cos_angle = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(lon1 - lon2)
    # rounding can push the argument just past +/-1
    cos_angle = max(-1.0, min(1.0, cos_angle))
    angle = math.acos(cos_angle)

    nautical_miles = 60.0 * math.degrees(angle)
    return STATUTE_MILES_PER_NAUTICAL_MILE * nautical_miles
