"""
In-memory implementation of YouTubeProvider.

Serves playlists and videos from fixtures, records every call it receives and
can be told to fail a specific call, which lets the playlist pipeline be
exercised without network access.
"""
from typing import Dict, List, Optional

from app.core.constants import YouTubeConfig
from app.core.exceptions import UpstreamServiceError
from app.core.providers.youtube_provider import YouTubeProvider
from app.models.youtube import PlaylistItemsPage, PlaylistMetadata, VideoDetails


class InMemoryYouTubeProvider(YouTubeProvider):
    """
    Fixture-backed YouTubeProvider.

    Continuation tokens are the stringified offset of the next page.

    Example:
        provider = InMemoryYouTubeProvider()
        provider.add_playlist(PlaylistMetadata(id="PL1", title="Mix"), videos)
        page = await provider.list_playlist_items("PL1")
    """

    def __init__(
        self,
        fail_on_list_page: Optional[int] = None,
        fail_on_details_call: Optional[int] = None,
    ):
        """
        Args:
            fail_on_list_page: 1-based index of the listing call that raises
                UpstreamServiceError.
            fail_on_details_call: 1-based index of the detail call that raises
                UpstreamServiceError.
        """
        self.playlists: Dict[str, PlaylistMetadata] = {}
        self.playlist_items: Dict[str, List[str]] = {}
        self.videos: Dict[str, VideoDetails] = {}
        self.fail_on_list_page = fail_on_list_page
        self.fail_on_details_call = fail_on_details_call

        self.metadata_calls: List[str] = []
        self.list_calls: List[Optional[str]] = []
        self.details_calls: List[List[str]] = []

    def add_playlist(
        self,
        metadata: PlaylistMetadata,
        videos: List[VideoDetails],
    ) -> None:
        """Register a playlist together with its member videos, in order."""
        self.playlists[metadata.id] = metadata
        self.playlist_items[metadata.id] = [video.id for video in videos]
        for video in videos:
            self.videos[video.id] = video

    async def list_playlist_items(
        self,
        playlist_id: str,
        page_token: Optional[str] = None,
        max_results: int = YouTubeConfig.MAX_RESULTS_PER_PAGE,
    ) -> PlaylistItemsPage:
        self.list_calls.append(page_token)
        if self.fail_on_list_page == len(self.list_calls):
            raise UpstreamServiceError(
                f"Simulated failure on playlistItems.list page {len(self.list_calls)}"
            )

        members = self.playlist_items.get(playlist_id, [])
        start = int(page_token) if page_token else 0
        end = start + max_results
        return PlaylistItemsPage(
            video_ids=members[start:end],
            next_page_token=str(end) if end < len(members) else None,
        )

    async def get_videos_details(self, video_ids: List[str]) -> List[VideoDetails]:
        if len(video_ids) > YouTubeConfig.MAX_IDS_PER_REQUEST:
            raise ValueError(
                f"videos.list accepts at most {YouTubeConfig.MAX_IDS_PER_REQUEST} ids, got {len(video_ids)}"
            )
        self.details_calls.append(list(video_ids))
        if self.fail_on_details_call == len(self.details_calls):
            raise UpstreamServiceError(
                f"Simulated failure on videos.list call {len(self.details_calls)}"
            )

        # The real endpoint returns each distinct id once, in no guaranteed order
        unique_ids = sorted(set(video_ids))
        return [self.videos[video_id] for video_id in unique_ids if video_id in self.videos]

    async def get_playlist_metadata(self, playlist_id: str) -> Optional[PlaylistMetadata]:
        self.metadata_calls.append(playlist_id)
        return self.playlists.get(playlist_id)
