import os
import sys
from typing import List

import matplotlib.pyplot as plt

# Add project root to sys.path to find src
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from tourguide.config import Settings
from tourguide.core.user import User
from tourguide.providers.attractions import CsvAttractionProvider
from tourguide.services.tour_guide import TourGuideService
from tourguide.simulation.providers import SimulatedGpsProvider, SimulatedRewardCentral
from tourguide.utils.logging import setup_logger


def plot_users(users: List[User], attractions, output_img: str):
    fig, ax = plt.subplots(figsize=(16, 9))

    lats = [v.latitude for u in users for v in u.visited_locations]
    lons = [v.longitude for u in users for v in u.visited_locations]
    ax.scatter(lons, lats, s=4, color='blue', alpha=0.4, label='Visited locations')

    rewarded = [r.visited_location for u in users for r in u.user_rewards]
    if rewarded:
        ax.scatter([v.longitude for v in rewarded], [v.latitude for v in rewarded],
                   s=20, color='green', marker='x', label='Rewarded visits')

    ax.scatter([a.longitude for a in attractions], [a.latitude for a in attractions],
               s=80, color='red', marker='*', zorder=5, label='Attractions')

    ax.set_xlim(-180, 180)
    ax.set_ylim(-90, 90)
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.set_title(f"Tracked users ({len(users)}) and attractions ({len(attractions)})")
    ax.legend()

    plt.tight_layout()
    plt.savefig(output_img)
    print(f"Saved plot to {output_img}")


def main():
    settings = Settings(internal_user_count=1000, proximity_buffer_miles=300.0)
    setup_logger(settings.log_level, settings.log_file)

    # 1. Wire service with simulated feeds
    data_path = os.path.join(project_root, "data", "attractions.csv")
    attraction_provider = CsvAttractionProvider(data_path)

    print(f"Seeding {settings.internal_user_count} internal users...")
    service = TourGuideService(
        SimulatedGpsProvider(seed=42),
        attraction_provider,
        SimulatedRewardCentral(seed=42),
        settings=settings,
        seed=42,
    )

    # 2. Track everyone once
    users = service.get_all_users()
    print(f"Tracking {len(users)} users...")
    service.track_users_locations(users)

    # 3. Rewards over the full history
    print("Calculating rewards...")
    service.calculate_rewards(users)
    rewarded = sum(1 for u in users if u.user_rewards)
    total_points = sum(u.total_reward_points for u in users)
    print(f" - Users with at least one reward: {rewarded}")
    print(f" - Total points awarded: {total_points}")

    # 4. Nearby attractions for the first user
    name = users[0].user_name
    print(f"Closest attractions to {name}:")
    for nearby in service.nearby_attractions(name):
        print(f" - {nearby.attraction_name}: {nearby.distance:.1f} mi, {nearby.reward_points} pts")

    # 5. Visualize
    output_dir = os.path.join(project_root, "data", "processed")
    os.makedirs(output_dir, exist_ok=True)
    plot_users(users, attraction_provider.list_attractions(), os.path.join(output_dir, "track_and_reward_demo.png"))


if __name__ == "__main__":
    main()
