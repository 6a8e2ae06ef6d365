"""Application configuration."""

from functools import lru_cache
import os

from pydantic import BaseModel


class Settings(BaseModel):
    """Application settings (env 값이 있으면 사용, 없으면 기본값)."""

    project_name: str = os.getenv("PROJECT_NAME", "Foodie Footprints Statistics API")
    api_v1_prefix: str = os.getenv("API_V1_PREFIX", "/api/v1")

    # 읽기 전용 스냅샷 export (JSONL, 한 줄에 식당 하나)
    snapshot_path: str = os.getenv("SNAPSHOT_PATH", "restaurants.jsonl")
    leaderboard_size: int = int(os.getenv("LEADERBOARD_SIZE", "5"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()
