import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from tourguide.simulation import SimulatedGpsProvider, SimulatedRewardCentral, generate_internal_users
from tourguide.simulation.providers import MAX_LATITUDE


def test_gps_returns_valid_locations():
    gps = SimulatedGpsProvider(seed=7)
    for _ in range(200):
        loc = gps.get_user_location(uuid.uuid4())
        assert -MAX_LATITUDE <= loc.latitude <= MAX_LATITUDE
        assert -180.0 <= loc.longitude <= 180.0


def test_gps_seed_is_reproducible():
    user_id = uuid.uuid4()
    a = SimulatedGpsProvider(seed=3)
    b = SimulatedGpsProvider(seed=3)
    assert [a.get_user_location(user_id) for _ in range(5)] == [b.get_user_location(user_id) for _ in range(5)]


def test_gps_latency_sleeps():
    gps = SimulatedGpsProvider(latency=0.5, seed=1)
    with patch("time.sleep") as mock_sleep:
        gps.get_user_location(uuid.uuid4())
    mock_sleep.assert_called_once_with(0.5)


def test_reward_points_in_range():
    oracle = SimulatedRewardCentral(seed=11)
    points = [oracle.get_attraction_reward_points(uuid.uuid4(), uuid.uuid4()) for _ in range(500)]
    assert all(1 <= p <= 1000 for p in points)
    assert all(isinstance(p, int) for p in points)


def test_internal_users():
    now = datetime(2024, 6, 1, tzinfo=timezone.utc)
    users = generate_internal_users(10, history_size=3, seed=5, now=now)

    assert [u.user_name for u in users] == [f"internalUser{i}" for i in range(10)]
    assert users[4].email_address == "internalUser4@tourGuide.com"
    assert users[4].phone_number == "000"
    assert len({u.user_id for u in users}) == 10
    for user in users:
        assert len(user.visited_locations) == 3
        for v in user.visited_locations:
            assert v.user_id == user.user_id
            assert now - timedelta(days=30) < v.timestamp <= now
            assert abs(v.latitude) <= MAX_LATITUDE


def test_internal_users_seeded():
    now = datetime(2024, 6, 1, tzinfo=timezone.utc)
    a = generate_internal_users(3, seed=9, now=now)
    b = generate_internal_users(3, seed=9, now=now)
    assert [u.user_id for u in a] == [u.user_id for u in b]
    assert [u.visited_locations for u in a] == [u.visited_locations for u in b]
