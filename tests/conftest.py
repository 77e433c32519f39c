"""Shared fixtures for the API and service tests."""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.routers.playlist_info import get_youtube_client
from app.services.youtube import YouTubeClient
from tests.fake_youtube import FakeYouTube


@pytest.fixture
def fake_youtube():
    return FakeYouTube()


@pytest.fixture
def api_client(fake_youtube):
    """TestClient whose YouTube calls are served by `fake_youtube`."""
    async def override():
        async with fake_youtube.http_client() as http:
            yield YouTubeClient(http, "test-key", page_size=fake_youtube.page_size)

    app.dependency_overrides[get_youtube_client] = override
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
