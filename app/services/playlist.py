"""
Playlist aggregation pipeline.

Lists every member of a playlist page by page, fetches video details in
batches and combines them with playlist metadata into a PlaylistSummary.
"""
import time
from typing import AsyncIterator, Iterator, List, Sequence, Tuple, TypeVar

from loguru import logger

from app.core.constants import YouTubeConfig
from app.core.exceptions import BadRequestError, EmptyPlaylistError, NotFoundError
from app.core.providers.youtube_provider import YouTubeProvider
from app.models.youtube import PlaylistSummary, VideoSummary
from app.services.duration import parse_duration
from app.services.url import extract_playlist_id

T = TypeVar("T")


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of ``items`` no longer than ``size``."""
    if size < 1:
        raise ValueError("size must be positive")
    for start in range(0, len(items), size):
        yield items[start:start + size]


class PlaylistService:
    """
    Service computing the total length of a YouTube playlist.

    This service handles:
    1. Walking the paginated playlist item listing.
    2. Fetching video details in batches and parsing their durations.
    3. Combining playlist metadata and videos into a summary.

    Every step is fail-fast: the first upstream error aborts the whole
    aggregation and no partial result is returned.
    """

    def __init__(
        self,
        youtube_provider: YouTubeProvider,
        page_size: int = YouTubeConfig.MAX_RESULTS_PER_PAGE,
        batch_size: int = YouTubeConfig.MAX_IDS_PER_REQUEST,
    ):
        """
        Initialize the PlaylistService.

        Args:
            youtube_provider: Access to the remote video platform.
            page_size: Items requested per listing page (max 50).
            batch_size: Video IDs sent per detail request (max 50).

        Raises:
            ValueError: If page_size or batch_size is not positive.
        """
        if page_size < 1 or batch_size < 1:
            raise ValueError(
                f"page_size and batch_size must be positive, got {page_size} and {batch_size}"
            )
        self.youtube_provider = youtube_provider
        self.page_size = min(page_size, YouTubeConfig.MAX_RESULTS_PER_PAGE)
        self.batch_size = min(batch_size, YouTubeConfig.MAX_IDS_PER_REQUEST)

    async def iter_video_ids(self, playlist_id: str) -> AsyncIterator[str]:
        """
        Yield the video IDs of a playlist in listing order.

        Follows continuation tokens until the last page. An empty page also
        ends the listing.
        """
        page_token = None
        page_number = 0

        while True:
            page = await self.youtube_provider.list_playlist_items(
                playlist_id, page_token=page_token, max_results=self.page_size
            )
            page_number += 1
            logger.debug(
                f"Playlist {playlist_id}: page {page_number} returned {len(page.video_ids)} items"
            )

            if not page.video_ids:
                break
            for video_id in page.video_ids:
                yield video_id

            if not page.next_page_token:
                break
            page_token = page.next_page_token

    async def list_video_ids(self, playlist_id: str) -> List[str]:
        """
        Collect all video IDs of a playlist.

        Raises:
            EmptyPlaylistError: If no page contained any member.
            UpstreamServiceError: If any page request fails.
        """
        video_ids = [video_id async for video_id in self.iter_video_ids(playlist_id)]

        if not video_ids:
            raise EmptyPlaylistError(playlist_id)

        logger.info(f"Playlist {playlist_id}: listed {len(video_ids)} videos")
        return video_ids

    async def fetch_videos(self, video_ids: List[str]) -> Tuple[List[VideoSummary], int]:
        """
        Fetch details for all videos in batches.

        Results within a batch are re-aligned to the requested order, so the
        output follows the listing order. IDs the platform does not return
        (deleted or private videos) are skipped.

        Args:
            video_ids: Video IDs in listing order.

        Returns:
            Tuple of the VideoSummary list and their total duration in seconds.

        Raises:
            UpstreamServiceError: If any batch request fails.
        """
        videos: List[VideoSummary] = []
        total_duration_sec = 0

        for batch_number, batch in enumerate(chunked(video_ids, self.batch_size), start=1):
            details = await self.youtube_provider.get_videos_details(list(batch))
            details_by_id = {item.id: item for item in details}
            logger.debug(
                f"Batch {batch_number}: requested {len(batch)} videos, received {len(details)}"
            )

            for video_id in batch:
                item = details_by_id.get(video_id)
                if item is None:
                    logger.warning(f"Video {video_id} was not returned (deleted or private), skipping")
                    continue

                video = VideoSummary(
                    id=item.id,
                    title=item.title,
                    description=item.description,
                    thumbnail=item.thumbnail_url,
                    duration=item.duration,
                    duration_sec=parse_duration(item.duration),
                )
                videos.append(video)
                total_duration_sec += video.duration_sec

        return videos, total_duration_sec

    async def analyze_playlist(self, playlist_id: str) -> PlaylistSummary:
        """
        Build the duration summary of a playlist.

        Args:
            playlist_id: The YouTube playlist ID.

        Returns:
            PlaylistSummary: Playlist metadata with every video and the total duration.

        Raises:
            NotFoundError: If the playlist does not exist or is private.
            EmptyPlaylistError: If the playlist has no members.
            UpstreamServiceError: If any remote call fails.
        """
        start_time = time.perf_counter()

        metadata = await self.youtube_provider.get_playlist_metadata(playlist_id)
        if metadata is None:
            raise NotFoundError("Playlist", playlist_id)

        video_ids = await self.list_video_ids(playlist_id)
        videos, total_duration_sec = await self.fetch_videos(video_ids)

        summary = PlaylistSummary(
            id=metadata.id,
            title=metadata.title,
            description=metadata.description,
            thumbnail=metadata.thumbnail_url,
            videos=videos,
        )

        duration = time.perf_counter() - start_time
        logger.info(
            f"Analyzed playlist '{summary.title}' ({playlist_id}): "
            f"{summary.video_count} videos, {total_duration_sec}s total in {duration:.2f}s"
        )
        return summary

    async def analyze_url(self, url: str) -> PlaylistSummary:
        """
        Build the duration summary of the playlist a URL points to.

        Raises:
            BadRequestError: If the URL does not carry a playlist ID.
        """
        playlist_id = extract_playlist_id(url)
        if not playlist_id:
            raise BadRequestError("Invalid YouTube URL")
        return await self.analyze_playlist(playlist_id)
