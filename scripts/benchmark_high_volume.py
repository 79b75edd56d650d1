import argparse
import os
import sys
import time

# Add project root to sys.path to find src
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from tourguide.config import Settings
from tourguide.providers.attractions import CsvAttractionProvider
from tourguide.services.tour_guide import TourGuideService
from tourguide.simulation.providers import SimulatedGpsProvider, SimulatedRewardCentral
from tourguide.utils.logging import setup_logger


def main():
    parser = argparse.ArgumentParser(description="Time tracking and rewards over many simulated users.")
    parser.add_argument("--users", type=int, default=1000)
    parser.add_argument("--gps-latency", type=float, default=0.05, help="Simulated GPS call latency (s)")
    parser.add_argument("--reward-latency", type=float, default=0.0, help="Simulated reward oracle latency (s)")
    args = parser.parse_args()

    setup_logger("WARNING")

    settings = Settings(internal_user_count=args.users)
    service = TourGuideService(
        SimulatedGpsProvider(latency=args.gps_latency),
        CsvAttractionProvider(os.path.join(project_root, "data", "attractions.csv")),
        SimulatedRewardCentral(latency=args.reward_latency),
        settings=settings,
    )
    users = service.get_all_users()

    start = time.perf_counter()
    service.track_users_locations(users)
    elapsed_tracking = time.perf_counter() - start
    print(f"trackLocation: {len(users)} users in {elapsed_tracking:.2f} seconds.")

    # Force every user into range of the first attraction
    attraction = service.reward_matcher.load_catalog().attractions[0]
    for user in users:
        user.user_rewards.clear()
    service.reward_matcher.proximity_buffer = 2 ** 31 - 1

    start = time.perf_counter()
    service.calculate_rewards(users)
    elapsed_rewards = time.perf_counter() - start
    service.reward_matcher.reset_proximity_buffer()

    rewarded = sum(1 for u in users if any(r.attraction.name == attraction.name for r in u.user_rewards))
    print(f"getRewards: {len(users)} users in {elapsed_rewards:.2f} seconds ({rewarded} rewarded at {attraction.name}).")


if __name__ == "__main__":
    main()
