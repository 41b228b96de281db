"""
Abstract base class for YouTube metadata providers.

This module defines the narrow capability the playlist pipeline needs from the
remote video platform. The production implementation talks to the YouTube
Data API v3; an in-memory implementation backs the tests.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.models.youtube import PlaylistItemsPage, PlaylistMetadata, VideoDetails


class YouTubeProvider(ABC):
    """
    Abstract interface for YouTube metadata providers.

    Implementations must raise UpstreamServiceError for any failed remote call
    and must not retry.

    Example:
        provider = YouTubeDataAPIProvider(api_key="...")
        page = await provider.list_playlist_items("PL123")
        details = await provider.get_videos_details(page.video_ids)
    """

    @abstractmethod
    async def list_playlist_items(
        self,
        playlist_id: str,
        page_token: Optional[str] = None,
        max_results: int = 50,
    ) -> PlaylistItemsPage:
        """
        Fetch one page of playlist members.

        Args:
            playlist_id: The playlist to list.
            page_token: Continuation token from the previous page, if any.
            max_results: Page size (1-50).

        Returns:
            PlaylistItemsPage with the video IDs in playlist order and the
            token of the next page (None on the last page).
        """
        ...

    @abstractmethod
    async def get_videos_details(self, video_ids: List[str]) -> List[VideoDetails]:
        """
        Fetch snippet and duration for up to 50 videos in one call.

        Args:
            video_ids: Video IDs to look up (at most 50).

        Returns:
            Details for each video the platform returned. Deleted or private
            videos are absent.
        """
        ...

    @abstractmethod
    async def get_playlist_metadata(self, playlist_id: str) -> Optional[PlaylistMetadata]:
        """
        Look up playlist-level metadata.

        Returns:
            PlaylistMetadata, or None if the playlist does not exist or is private.
        """
        ...
