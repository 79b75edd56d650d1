import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import numpy as np

from tourguide.core.location import Location, VisitedLocation
from tourguide.core.user import User

from .providers import MAX_LATITUDE, MAX_LONGITUDE


def generate_internal_users(
    count: int,
    history_size: int = 3,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[User]:
    """
    Builds synthetic users for local runs and load tests.

    Each user is named internalUser{i}, has phone "000", email
    internalUser{i}@tourGuide.com and `history_size` random visited locations
    stamped at some day within the last 30 days.

    Args:
        count: Number of users to create.
        history_size: Visited locations generated per user.
        seed: Seed for reproducible output.
        now: Reference time for the generated timestamps. Defaults to now (UTC).
    """
    rng = np.random.default_rng(seed)
    now = now or datetime.now(timezone.utc)

    users = []
    for i in range(count):
        user_name = f"internalUser{i}"
        user = User(
            user_id=uuid.UUID(int=int(rng.integers(0, 2 ** 63)) << 64 | int(rng.integers(0, 2 ** 63)), version=4),
            user_name=user_name,
            phone_number="000",
            email_address=f"{user_name}@tourGuide.com",
        )

        lats = rng.uniform(-MAX_LATITUDE, MAX_LATITUDE, size=history_size)
        lons = rng.uniform(-MAX_LONGITUDE, MAX_LONGITUDE, size=history_size)
        days_ago = rng.integers(0, 30, size=history_size)
        for lat, lon, days in zip(lats, lons, days_ago):
            user.add_visited_location(VisitedLocation(
                user_id=user.user_id,
                location=Location(latitude=float(lat), longitude=float(lon)),
                timestamp=now - timedelta(days=int(days)),
            ))

        users.append(user)

    return users
