"""Presentation figures derived from a playlist's total watch time."""

import math
from typing import Iterable, List

from app.models import SpeedAdjustedDuration
from app.services.durations import format_duration

HOUR = 3600
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY


def speed_adjusted(total_seconds: int, speed: float) -> int:
    """Seconds needed to watch everything at the given playback speed."""
    if speed <= 0:
        raise ValueError(f"Playback speed must be positive, got {speed}")
    return math.floor(total_seconds / speed)


def speed_table(total_seconds: int, speeds: Iterable[float]) -> List[SpeedAdjustedDuration]:
    table = []
    for speed in speeds:
        seconds = speed_adjusted(total_seconds, speed)
        table.append(SpeedAdjustedDuration(
            speed=speed,
            total_seconds=seconds,
            total_watch_time=format_duration(seconds),
        ))
    return table


def binge_days(total_seconds: int, hours_per_day: float) -> int:
    """Days to finish the playlist watching `hours_per_day` hours a day (rounded up)."""
    if hours_per_day <= 0:
        raise ValueError(f"Hours per day must be positive, got {hours_per_day}")
    if total_seconds <= 0:
        return 0
    return math.ceil(total_seconds / (hours_per_day * HOUR))


def _about(count: float, unit: str) -> str:
    n = max(1, round(count))
    return f"about {n} {unit}{'' if n == 1 else 's'}"


def describe_watch_time(total_seconds: int) -> str:
    """Coarse human-readable bucket, e.g. "less than an hour" or "about 3 weeks"."""
    if total_seconds <= 0:
        return "no watch time"
    if total_seconds < HOUR:
        return "less than an hour"
    if total_seconds < DAY:
        return _about(total_seconds / HOUR, "hour")
    if total_seconds < WEEK:
        return _about(total_seconds / DAY, "day")
    if total_seconds < MONTH:
        return _about(total_seconds / WEEK, "week")
    return _about(total_seconds / MONTH, "month")
