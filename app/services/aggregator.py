"""Playlist aggregation: membership, durations and summary statistics."""

import asyncio
import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple
from urllib.parse import urlsplit, parse_qs

from app.config import settings
from app.models import PlaylistDetails, PlaylistSummary
from app.services.durations import format_duration, parse_iso8601_duration
from app.services.watchtime import binge_days, describe_watch_time, speed_table
from app.services.youtube import YouTubeAPIError, YouTubeClient

logger = logging.getLogger(__name__)

_PLAYLIST_ID_RE = re.compile(r"[A-Za-z0-9_-]+")

PLAYLIST_NOT_FOUND = "playlistNotFound"


def extract_playlist_id(url: str) -> Optional[str]:
    """Extract the `list` query parameter from a playlist URL, or None if invalid."""
    try:
        parts = urlsplit(url)
    except (TypeError, ValueError) as e:
        logger.debug(f"Could not parse URL {url!r}: {e}")
        return None

    if not parts.scheme or not parts.netloc:
        return None

    values = parse_qs(parts.query, keep_blank_values=True).get("list")
    if not values:
        return None

    playlist_id = values[0]
    if _PLAYLIST_ID_RE.fullmatch(playlist_id):
        return playlist_id
    return None


def summarize_durations(durations: Sequence[int]) -> Tuple[int, int, float]:
    """Return (count, total, average) for a list of durations in seconds."""
    count = len(durations)
    total = sum(durations)
    average = total / count if count > 0 else 0
    return count, total, average


def _batches(items: List[str], size: int) -> List[List[str]]:
    return [items[i:i + size] for i in range(0, len(items), size)]


async def fetch_durations(client: YouTubeClient, video_ids: List[str], batch_size: int) -> List[int]:
    """
    Look up durations for all videos, one videos.list call per batch.

    Batches run concurrently. If any batch fails, the others are cancelled
    and the error propagates.
    """
    tasks = [
        asyncio.ensure_future(client.list_video_durations(batch))
        for batch in _batches(video_ids, batch_size)
    ]
    try:
        responses = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise

    by_id: Dict[str, Optional[str]] = {}
    for batch_durations in responses:
        by_id.update(batch_durations)

    # Repeated ids are looked up once but counted every time they appear.
    return [parse_iso8601_duration(by_id.get(video_id)) for video_id in video_ids]


async def fetch_playlist_details(client: YouTubeClient, playlist_id: str) -> PlaylistDetails:
    """
    Fetch descriptive metadata. Failures are logged and ignored unless the
    API says the playlist does not exist.
    """
    try:
        snippet = await client.get_playlist_details(playlist_id)
    except YouTubeAPIError as e:
        logger.error(f"Error fetching playlist details for {playlist_id}: {e.message}")
        if e.reason == PLAYLIST_NOT_FOUND:
            raise
        return PlaylistDetails()

    if snippet is None:
        logger.warning(f"Could not fetch details for playlist ID: {playlist_id}")
        return PlaylistDetails()

    return PlaylistDetails(
        title=snippet.get("title"),
        description=snippet.get("description"),
        channel_title=snippet.get("channelTitle"),
        published_at=snippet.get("publishedAt"),
    )


def build_summary(
    details: PlaylistDetails,
    durations: Sequence[int],
    hours_per_day: Optional[float] = None,
) -> PlaylistSummary:
    """Reduce durations to the summary statistics and presentation figures."""
    count, total, average = summarize_durations(durations)
    hours_per_day = hours_per_day or settings.binge_hours_per_day

    return PlaylistSummary(
        **details.model_dump(),
        video_count=count,
        total_seconds=total,
        average_seconds=average,
        total_watch_time=format_duration(total),
        average_duration=format_duration(average),
        speed_adjusted=speed_table(total, settings.playback_speeds),
        hours_per_day=hours_per_day,
        binge_days=binge_days(total, hours_per_day),
        time_phrase=describe_watch_time(total),
    )


async def aggregate_playlist(
    client: YouTubeClient,
    playlist_id: str,
    hours_per_day: Optional[float] = None,
) -> PlaylistSummary:
    """
    Run the full pipeline for one playlist.

    Steps:
    1. Playlist metadata (best effort, except "not found")
    2. All video ids, page by page
    3. Durations in concurrent batches
    4. Count, total, average and derived figures
    """
    details = await fetch_playlist_details(client, playlist_id)

    video_ids = await client.list_playlist_video_ids(playlist_id)
    if not video_ids:
        return build_summary(details, [], hours_per_day)

    durations = await fetch_durations(client, video_ids, client.page_size)

    summary = build_summary(details, durations, hours_per_day)
    logger.info(
        f"Playlist {playlist_id}: {summary.video_count} videos, "
        f"total {summary.total_watch_time}, average {summary.average_duration}"
    )
    return summary
