"""
YouTube Data API v3 implementation of YouTubeProvider.

The google-api-python-client is synchronous, so every request is executed in
a worker thread with its own HTTP transport and bounded by a timeout.
"""
import asyncio
from typing import Any, List, Optional

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import build_http
from loguru import logger

from app.core.constants import YouTubeConfig
from app.core.exceptions import UpstreamServiceError
from app.core.providers.youtube_provider import YouTubeProvider
from app.models.youtube import PlaylistItemsPage, PlaylistMetadata, VideoDetails


def _default_thumbnail(snippet: dict) -> str:
    return snippet.get("thumbnails", {}).get("default", {}).get("url", "")


class YouTubeDataAPIProvider(YouTubeProvider):
    """
    YouTube Data API v3 implementation of YouTubeProvider.

    Example:
        provider = YouTubeDataAPIProvider(api_key="your-api-key")
        metadata = await provider.get_playlist_metadata("PL123")
    """

    def __init__(
        self,
        api_key: str,
        timeout_seconds: float = 30.0,
        youtube: Optional[Any] = None,
    ):
        """
        Initialize the Data API provider.

        Args:
            api_key: YouTube Data API key.
            timeout_seconds: Upper bound for each individual API call.
            youtube: Prebuilt API resource (mainly for tests). Built from
                the bundled discovery document when omitted.
        """
        self.timeout_seconds = timeout_seconds
        self._youtube = youtube if youtube is not None else build(
            YouTubeConfig.API_SERVICE_NAME,
            YouTubeConfig.API_VERSION,
            developerKey=api_key,
            cache_discovery=False,
        )

    async def _execute(self, request: Any, label: str) -> dict:
        """
        Execute a googleapiclient request off the event loop.

        Raises:
            UpstreamServiceError: On API errors, transport errors or timeout.
        """
        logger.debug(f"YouTube API request: {label}")
        try:
            # httplib2.Http is not thread safe, so each call gets its own
            return await asyncio.wait_for(
                asyncio.to_thread(request.execute, http=build_http()),
                timeout=self.timeout_seconds,
            )
        except HttpError as e:
            raise UpstreamServiceError(
                f"YouTube API error on {label} ({e.resp.status}): {e.reason}"
            ) from e
        except asyncio.TimeoutError as e:
            raise UpstreamServiceError(
                f"YouTube API request {label} timed out after {self.timeout_seconds}s"
            ) from e
        except (httplib2.HttpLib2Error, OSError) as e:
            raise UpstreamServiceError(f"YouTube API request {label} failed: {e}") from e

    async def list_playlist_items(
        self,
        playlist_id: str,
        page_token: Optional[str] = None,
        max_results: int = YouTubeConfig.MAX_RESULTS_PER_PAGE,
    ) -> PlaylistItemsPage:
        params = {
            "part": "contentDetails",
            "playlistId": playlist_id,
            "maxResults": max_results,
        }
        if page_token:
            params["pageToken"] = page_token

        response = await self._execute(
            self._youtube.playlistItems().list(**params), "playlistItems.list"
        )
        video_ids = [
            item["contentDetails"]["videoId"]
            for item in response.get("items", [])
            if item.get("contentDetails", {}).get("videoId")
        ]
        return PlaylistItemsPage(
            video_ids=video_ids,
            next_page_token=response.get("nextPageToken") or None,
        )

    async def get_videos_details(self, video_ids: List[str]) -> List[VideoDetails]:
        if len(video_ids) > YouTubeConfig.MAX_IDS_PER_REQUEST:
            raise ValueError(
                f"videos.list accepts at most {YouTubeConfig.MAX_IDS_PER_REQUEST} ids, got {len(video_ids)}"
            )
        if not video_ids:
            return []

        response = await self._execute(
            self._youtube.videos().list(
                part="snippet,contentDetails",
                id=",".join(video_ids),
                maxResults=len(video_ids),
            ),
            "videos.list",
        )

        details = []
        for item in response.get("items", []):
            snippet = item.get("snippet", {})
            details.append(
                VideoDetails(
                    id=item["id"],
                    title=snippet.get("title", ""),
                    description=snippet.get("description", ""),
                    thumbnail_url=_default_thumbnail(snippet),
                    duration=item.get("contentDetails", {}).get("duration", ""),
                )
            )
        return details

    async def get_playlist_metadata(self, playlist_id: str) -> Optional[PlaylistMetadata]:
        response = await self._execute(
            self._youtube.playlists().list(part="snippet", id=playlist_id),
            "playlists.list",
        )
        items = response.get("items", [])
        if not items:
            return None

        item = items[0]
        snippet = item.get("snippet", {})
        return PlaylistMetadata(
            id=item["id"],
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            thumbnail_url=_default_thumbnail(snippet),
        )
