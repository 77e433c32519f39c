"""Configuration settings for Playlist Watch Time."""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    app_name: str = "Playlist Watch Time"
    debug: bool = False
    log_level: str = "INFO"

    # YouTube Data API
    youtube_api_key: Optional[str] = None
    youtube_api_base_url: str = "https://www.googleapis.com/youtube/v3"
    page_size: int = 50  # Max allowed by the API for both listing and lookup
    request_timeout_seconds: float = 30.0

    # Presentation
    playback_speeds: List[float] = [1.25, 1.5, 1.75, 2.0]
    binge_hours_per_day: float = 2.0

    class Config:
        env_file = ".env"


settings = Settings()
