"""Playlist watch-time endpoint."""

import json
import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends

from app.config import settings
from app.errors import ErrorKind, PlaylistInfoError
from app.models import ErrorResponse, PlaylistInfoRequest, PlaylistSummary
from app.services.aggregator import aggregate_playlist, extract_playlist_id
from app.services.youtube import YouTubeAPIError, YouTubeClient, create_http_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["playlist-info"])

RATE_LIMIT_REASONS = {"quotaExceeded", "rateLimitExceeded", "userRateLimitExceeded"}


async def get_youtube_client() -> AsyncIterator[YouTubeClient]:
    """Per-request YouTube client; fails before any call if no API key is configured."""
    if not settings.youtube_api_key:
        logger.error("YouTube API key is not set.")
        raise PlaylistInfoError(ErrorKind.SERVER_ERROR, "Server configuration error: API key missing.")

    async with create_http_client() as http:
        yield YouTubeClient(http, settings.youtube_api_key, page_size=settings.page_size)


def classify_upstream_error(error: YouTubeAPIError) -> PlaylistInfoError:
    """Map a YouTube API error onto the error the caller sees."""
    if error.status_code is None:
        return PlaylistInfoError(
            ErrorKind.SERVER_ERROR,
            "Failed to fetch playlist information due to an unexpected server error.",
        )

    reason = error.reason
    if reason == "playlistNotFound":
        return PlaylistInfoError(
            ErrorKind.NOT_FOUND,
            "Playlist not found. Check the URL or playlist privacy settings.",
        )
    if reason == "forbidden":
        return PlaylistInfoError(
            ErrorKind.FORBIDDEN,
            "Access forbidden. The playlist might be private or deleted.",
        )
    if reason == "keyInvalid":
        return PlaylistInfoError(
            ErrorKind.INVALID_CREDENTIAL,
            "Invalid API Key. Please check server configuration.",
        )
    if reason in RATE_LIMIT_REASONS:
        return PlaylistInfoError(
            ErrorKind.RATE_LIMITED,
            "API Quota Exceeded. Please try again later.",
        )

    if reason:
        message = f"YouTube API Error ({reason}): {error.detail or error.message}"
    else:
        message = f"YouTube API Error: {error.message}"
    return PlaylistInfoError(ErrorKind.SERVER_ERROR, message, status_code=error.status_code)


@router.post(
    "/playlist-info",
    response_model=PlaylistSummary,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_playlist_info(
    request: PlaylistInfoRequest,
    client: YouTubeClient = Depends(get_youtube_client),
):
    """
    Total and average watch time of a public YouTube playlist.

    - **playlistUrl**: e.g. https://www.youtube.com/playlist?list=PL...
    - **hoursPerDay**: viewing hours per day for the binge estimate (optional)
    """
    if not request.playlist_url:
        raise PlaylistInfoError(ErrorKind.INVALID_INPUT, "Playlist URL is required.")

    playlist_id = extract_playlist_id(request.playlist_url)
    if not playlist_id:
        raise PlaylistInfoError(ErrorKind.INVALID_INPUT, "Invalid YouTube Playlist URL format.")

    try:
        return await aggregate_playlist(client, playlist_id, request.hours_per_day)
    except YouTubeAPIError as e:
        details = {"status": e.status_code, "reason": e.reason, "message": e.message}
        logger.error(f"YouTube API Error Details: {json.dumps(details)}")
        raise classify_upstream_error(e)
    except Exception as e:
        logger.exception(f"Error fetching playlist info for {playlist_id}: {type(e).__name__}: {e}")
        raise PlaylistInfoError(
            ErrorKind.SERVER_ERROR,
            "Failed to fetch playlist information due to an unexpected server error.",
        )
