"""
Dependency injection factories for FastAPI.

The YouTube provider is built once from settings and shared across requests;
it holds only read-only configuration.
"""
from functools import lru_cache
from fastapi import Depends

from app.core.config import settings
from app.core.exceptions import InternalServerError
from app.core.providers.youtube_provider import YouTubeProvider
from app.core.providers.youtube_data_api import YouTubeDataAPIProvider
from app.services.playlist import PlaylistService


@lru_cache
def get_youtube_provider() -> YouTubeProvider:
    """Get the YouTube Data API provider configured from settings."""
    if not settings.YOUTUBE_API_KEY:
        raise InternalServerError("YouTube API key is not configured.")
    return YouTubeDataAPIProvider(
        api_key=settings.YOUTUBE_API_KEY,
        timeout_seconds=settings.YOUTUBE_REQUEST_TIMEOUT_SECONDS,
    )


def get_playlist_service(
    youtube_provider: YouTubeProvider = Depends(get_youtube_provider),
) -> PlaylistService:
    """Get playlist service for duration analysis."""
    return PlaylistService(youtube_provider=youtube_provider)
