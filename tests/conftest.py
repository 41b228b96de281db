"""
Shared pytest fixtures and configuration.
"""
import os

os.environ.setdefault("YOUTUBE_API_KEY", "test-api-key")
os.environ.setdefault("LOG_FILE", "")

import pytest
from unittest.mock import AsyncMock

from app.main import app
from app.api.dependencies import get_playlist_service
from app.core.providers.in_memory_youtube import InMemoryYouTubeProvider
from app.models import PlaylistMetadata, VideoDetails
from app.services.playlist import PlaylistService


def make_video(index: int, duration: str = "PT1M") -> VideoDetails:
    return VideoDetails(
        id=f"vid{index:03d}",
        title=f"Video {index}",
        description=f"Description {index}",
        thumbnail_url=f"https://i.ytimg.com/vi/vid{index:03d}/default.jpg",
        duration=duration,
    )


@pytest.fixture
def make_videos():
    """Factory building a list of videos with a fixed duration."""
    def _make(count: int, duration: str = "PT1M") -> list[VideoDetails]:
        return [make_video(i, duration) for i in range(count)]
    return _make


@pytest.fixture
def playlist_metadata():
    return PlaylistMetadata(
        id="PLtest123",
        title="Test Playlist",
        description="A playlist for tests",
        thumbnail_url="https://i.ytimg.com/pl/default.jpg",
    )


@pytest.fixture
def provider():
    """Create an empty in-memory YouTube provider."""
    return InMemoryYouTubeProvider()


@pytest.fixture
def playlist_service(provider):
    return PlaylistService(youtube_provider=provider)


@pytest.fixture
def mock_playlist_service():
    """Create a mock PlaylistService."""
    return AsyncMock(spec=PlaylistService)


@pytest.fixture
def override_dependencies(mock_playlist_service):
    """Override FastAPI dependencies for testing."""
    def override_get_playlist_service():
        return mock_playlist_service

    app.dependency_overrides[get_playlist_service] = override_get_playlist_service

    yield

    app.dependency_overrides.clear()
