"""Library configuration."""
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Simulated latency (seconds)
    load_delay_seconds: float = 1.0
    refresh_delay_seconds: float = 0.5

    # Seed for the conditions generator (None = fresh entropy)
    random_seed: Optional[int] = None

    log_level: str = "INFO"

    class Config:
        env_prefix = "SURFSPOTS_"


settings = Settings()
