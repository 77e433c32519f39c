"""YouTube Data API v3 client (playlists, playlist items, video details)."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class YouTubeAPIError(Exception):
    """An error reported by the YouTube Data API or the transport under it."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.reason = reason
        self.detail = detail

    @classmethod
    def from_response(cls, response: httpx.Response) -> "YouTubeAPIError":
        """
        Build an error from the API's error envelope:

            {"error": {"code": 404, "message": "...",
                       "errors": [{"reason": "playlistNotFound", "message": "..."}]}}
        """
        try:
            payload = response.json()
        except ValueError:
            payload = {}

        error = payload.get("error") if isinstance(payload, dict) else None
        if not isinstance(error, dict):
            return cls(f"HTTP {response.status_code}", status_code=response.status_code)

        message = error.get("message") or "Unknown error"
        reason = None
        detail = None
        errors = error.get("errors") or []
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            reason = errors[0].get("reason")
            detail = errors[0].get("message")

        return cls(message, status_code=response.status_code, reason=reason, detail=detail)


class YouTubeClient:
    """
    Thin async wrapper over the three Data API listings the aggregator needs.

    The underlying httpx.AsyncClient is injected so callers control its
    lifetime (and tests can swap in a mock transport).
    """

    def __init__(self, http: httpx.AsyncClient, api_key: str, page_size: int = 50):
        self._http = http
        self._api_key = api_key
        self.page_size = page_size

    async def _get(self, resource: str, params: Dict[str, Any]) -> Dict[str, Any]:
        query = {k: v for k, v in params.items() if v is not None}
        query["key"] = self._api_key

        try:
            response = await self._http.get(f"/{resource}", params=query)
        except httpx.RequestError as e:
            raise YouTubeAPIError(f"Request to YouTube API failed: {type(e).__name__}: {e}")

        if response.is_error:
            raise YouTubeAPIError.from_response(response)

        try:
            data = response.json()
        except ValueError:
            raise YouTubeAPIError(f"Unreadable response from YouTube API {resource}")
        if not isinstance(data, dict):
            raise YouTubeAPIError(f"Unexpected response from YouTube API {resource}")
        return data

    async def get_playlist_details(self, playlist_id: str) -> Optional[Dict[str, Any]]:
        """Return the playlist's snippet, or None if the API returned no item."""
        data = await self._get("playlists", {
            "part": "snippet",
            "id": playlist_id,
            "maxResults": 1,
        })
        items = data.get("items") or []
        if not items:
            return None
        return items[0].get("snippet") or {}

    async def list_playlist_items(self, playlist_id: str, page_token: Optional[str] = None) -> Dict[str, Any]:
        """Low-level call to playlistItems.list for one page."""
        return await self._get("playlistItems", {
            "part": "contentDetails",
            "playlistId": playlist_id,
            "maxResults": self.page_size,
            "pageToken": page_token,
        })

    async def list_playlist_video_ids(self, playlist_id: str) -> List[str]:
        """Fetch every video id in the playlist, following nextPageToken."""
        video_ids: List[str] = []
        page_token = None
        pages = 0

        while True:
            page = await self.list_playlist_items(playlist_id, page_token)
            pages += 1
            for item in page.get("items") or []:
                video_id = (item.get("contentDetails") or {}).get("videoId")
                if video_id:
                    video_ids.append(video_id)

            page_token = page.get("nextPageToken")
            if not page_token:
                break

        logger.info(f"Playlist {playlist_id}: {len(video_ids)} videos across {pages} page(s)")
        return video_ids

    async def list_video_durations(self, video_ids: List[str]) -> Dict[str, Optional[str]]:
        """Low-level call to videos.list; maps each returned video id to its raw duration."""
        data = await self._get("videos", {
            "part": "contentDetails",
            "id": ",".join(video_ids),
            "maxResults": self.page_size,
        })
        return {
            item["id"]: (item.get("contentDetails") or {}).get("duration")
            for item in data.get("items") or []
            if item.get("id")
        }


def create_http_client() -> httpx.AsyncClient:
    """HTTP client pointed at the configured Data API base URL."""
    return httpx.AsyncClient(
        base_url=settings.youtube_api_base_url,
        timeout=settings.request_timeout_seconds,
    )
