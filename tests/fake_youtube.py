"""In-memory stand-in for the YouTube Data API, served through httpx.MockTransport."""

from typing import Dict, List, Optional

import httpx

BASE_URL = "https://youtube.test/youtube/v3"


def api_error(status: int, reason: str, message: str = "error") -> httpx.Response:
    return httpx.Response(status, json={
        "error": {
            "code": status,
            "message": message,
            "errors": [{"reason": reason, "message": message}],
        }
    })


class FakeYouTube:
    """
    Serves playlists, playlistItems and videos from plain dicts.

    `errors` maps a resource name to a response returned instead of data,
    and every request is recorded in `calls`.
    """

    def __init__(self, page_size: int = 50):
        self.page_size = page_size
        self.playlists: Dict[str, dict] = {}
        self.items: Dict[str, List[str]] = {}
        self.durations: Dict[str, Optional[str]] = {}
        self.errors: Dict[str, httpx.Response] = {}
        self.calls: List[httpx.Request] = []

    def add_playlist(self, playlist_id: str, durations: List[Optional[str]], snippet: Optional[dict] = None):
        self.playlists[playlist_id] = snippet or {"title": f"Playlist {playlist_id}"}
        video_ids = [f"{playlist_id}-v{i}" for i in range(len(durations))]
        self.items[playlist_id] = video_ids
        self.durations.update(zip(video_ids, durations))
        return video_ids

    def resource_calls(self, resource: str) -> List[httpx.Request]:
        return [r for r in self.calls if r.url.path.endswith(f"/{resource}")]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        resource = request.url.path.rsplit("/", 1)[-1]
        if resource in self.errors:
            return self.errors[resource]

        params = request.url.params
        if resource == "playlists":
            snippet = self.playlists.get(params["id"])
            return httpx.Response(200, json={"items": [{"snippet": snippet}] if snippet else []})

        if resource == "playlistItems":
            video_ids = self.items.get(params["playlistId"], [])
            start = int(params.get("pageToken", 0))
            page = video_ids[start:start + self.page_size]
            body = {"items": [{"contentDetails": {"videoId": v}} for v in page]}
            if start + self.page_size < len(video_ids):
                body["nextPageToken"] = str(start + self.page_size)
            return httpx.Response(200, json=body)

        if resource == "videos":
            items = []
            # The real API returns each requested video once.
            for video_id in dict.fromkeys(params["id"].split(",")):
                if video_id not in self.durations:
                    continue
                duration = self.durations[video_id]
                details = {"duration": duration} if duration is not None else {}
                items.append({"id": video_id, "contentDetails": details})
            return httpx.Response(200, json={"items": items})

        return httpx.Response(404)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(self.handler))
