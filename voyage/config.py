"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Persistence
    redis_url: str | None = None
    trips_storage_key: str = "savedTrips"
    days_storage_prefix: str = "tripDays"

    # Place lookup (Google Places)
    places_api_key: str = ""
    places_base_url: str = "https://maps.googleapis.com/maps/api/place"
    places_timeout_s: float = 10.0

    # Enrichment before inserting an activity (milliseconds)
    enrichment_timeout_ms: int = 4000

    # Seed sample trips when storage is empty
    seed_sample_data: bool = True

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
