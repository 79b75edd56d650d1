from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Rewards
    proximity_buffer_miles: float = 10.0
    attraction_proximity_range_miles: float = 200.0

    # Worker pools: size = max(cpu_count * multiplier, floor)
    tracking_pool_multiplier: int = 8
    tracking_pool_floor: int = 100
    rewards_pool_multiplier: int = 1
    rewards_pool_floor: int = 2

    # Service
    nearby_attractions_limit: int = 5
    test_mode: bool = True
    internal_user_count: int = 100
    internal_user_history_size: int = 3
    tracking_interval_seconds: float = 300.0
    trip_pricer_api_key: str = "test-server-api-key"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="TOURGUIDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
