"""
Provider abstraction layer for access to the remote video platform.
"""
from app.core.providers.youtube_provider import YouTubeProvider
from app.core.providers.youtube_data_api import YouTubeDataAPIProvider
from app.core.providers.in_memory_youtube import InMemoryYouTubeProvider

__all__ = [
    "YouTubeProvider",
    "YouTubeDataAPIProvider",
    "InMemoryYouTubeProvider",
]
