"""Data models for Playlist Watch Time — request and summary types."""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialised with camelCase keys; accepts either spelling on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PlaylistInfoRequest(CamelModel):
    """Body of POST /api/playlist-info."""
    playlist_url: Optional[str] = None
    hours_per_day: Optional[float] = Field(default=None, gt=0, le=24)


class PlaylistDetails(CamelModel):
    """Descriptive metadata from the playlist snippet."""
    title: Optional[str] = None
    description: Optional[str] = None
    channel_title: Optional[str] = None
    published_at: Optional[str] = None


class SpeedAdjustedDuration(CamelModel):
    """Total watch time at a faster playback speed."""
    speed: float
    total_seconds: int
    total_watch_time: str


class PlaylistSummary(PlaylistDetails):
    """Aggregate statistics for one playlist, plus presentation figures."""
    video_count: int
    total_seconds: int
    average_seconds: float
    total_watch_time: str
    average_duration: str
    speed_adjusted: List[SpeedAdjustedDuration] = Field(default_factory=list)
    hours_per_day: Optional[float] = None
    binge_days: Optional[int] = None
    time_phrase: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
