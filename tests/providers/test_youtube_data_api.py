import asyncio
from unittest.mock import MagicMock, patch

import pytest
from googleapiclient.errors import HttpError

from app.api import dependencies
from app.core.exceptions import InternalServerError, UpstreamServiceError
from app.core.providers.youtube_data_api import YouTubeDataAPIProvider


def _http_error(status: int, reason: str) -> HttpError:
    resp = MagicMock(status=status, reason=reason)
    return HttpError(resp, b"{}", uri="https://www.googleapis.com/youtube/v3/playlistItems")


@pytest.fixture
def youtube():
    """Mock googleapiclient resource."""
    return MagicMock()


@pytest.fixture
def data_api_provider(youtube):
    return YouTubeDataAPIProvider(api_key="test", youtube=youtube)


@pytest.mark.asyncio
async def test_list_playlist_items(data_api_provider, youtube):
    youtube.playlistItems.return_value.list.return_value.execute.return_value = {
        "items": [
            {"contentDetails": {"videoId": "a"}},
            {"contentDetails": {"videoId": "b"}},
        ],
        "nextPageToken": "TOKEN2",
    }

    page = await data_api_provider.list_playlist_items("PL1", page_token="TOKEN1")

    assert page.video_ids == ["a", "b"]
    assert page.next_page_token == "TOKEN2"
    youtube.playlistItems.return_value.list.assert_called_with(
        part="contentDetails", playlistId="PL1", maxResults=50, pageToken="TOKEN1"
    )


@pytest.mark.asyncio
async def test_list_playlist_items_last_page(data_api_provider, youtube):
    youtube.playlistItems.return_value.list.return_value.execute.return_value = {"items": []}

    page = await data_api_provider.list_playlist_items("PL1")

    assert page.video_ids == []
    assert page.next_page_token is None
    kwargs = youtube.playlistItems.return_value.list.call_args.kwargs
    assert "pageToken" not in kwargs


@pytest.mark.asyncio
async def test_get_videos_details(data_api_provider, youtube):
    youtube.videos.return_value.list.return_value.execute.return_value = {
        "items": [
            {
                "id": "a",
                "snippet": {
                    "title": "Video A",
                    "description": "About A",
                    "thumbnails": {"default": {"url": "https://i.ytimg.com/vi/a/default.jpg"}},
                },
                "contentDetails": {"duration": "PT4M13S"},
            },
            {"id": "b", "snippet": {"title": "No thumbnail"}, "contentDetails": {}},
        ]
    }

    details = await data_api_provider.get_videos_details(["a", "b"])

    assert details[0].title == "Video A"
    assert details[0].thumbnail_url == "https://i.ytimg.com/vi/a/default.jpg"
    assert details[0].duration == "PT4M13S"
    assert details[1].thumbnail_url == ""
    assert details[1].duration == ""
    youtube.videos.return_value.list.assert_called_with(
        part="snippet,contentDetails", id="a,b", maxResults=2
    )


@pytest.mark.asyncio
async def test_get_videos_details_rejects_oversized_batch(data_api_provider):
    with pytest.raises(ValueError):
        await data_api_provider.get_videos_details([str(i) for i in range(51)])


@pytest.mark.asyncio
async def test_get_playlist_metadata(data_api_provider, youtube):
    youtube.playlists.return_value.list.return_value.execute.return_value = {
        "items": [
            {
                "id": "PL1",
                "snippet": {
                    "title": "Mix",
                    "description": "Songs",
                    "thumbnails": {"default": {"url": "https://i.ytimg.com/pl.jpg"}},
                },
            }
        ]
    }

    metadata = await data_api_provider.get_playlist_metadata("PL1")

    assert metadata.id == "PL1"
    assert metadata.title == "Mix"
    assert metadata.thumbnail_url == "https://i.ytimg.com/pl.jpg"


@pytest.mark.asyncio
async def test_get_playlist_metadata_missing(data_api_provider, youtube):
    youtube.playlists.return_value.list.return_value.execute.return_value = {"items": []}

    assert await data_api_provider.get_playlist_metadata("PLmissing") is None


@pytest.mark.asyncio
async def test_http_error_becomes_upstream_error(data_api_provider, youtube):
    youtube.playlistItems.return_value.list.return_value.execute.side_effect = _http_error(
        403, "quotaExceeded"
    )

    with pytest.raises(UpstreamServiceError) as exc_info:
        await data_api_provider.list_playlist_items("PL1")

    assert exc_info.value.status_code == 502
    assert "playlistItems.list" in exc_info.value.detail


@pytest.mark.asyncio
async def test_timeout_becomes_upstream_error(youtube):
    provider = YouTubeDataAPIProvider(api_key="test", timeout_seconds=0.01, youtube=youtube)

    def slow_execute(**kwargs):
        import time
        time.sleep(0.2)
        return {"items": []}

    youtube.playlists.return_value.list.return_value.execute.side_effect = slow_execute

    with pytest.raises(UpstreamServiceError) as exc_info:
        await provider.get_playlist_metadata("PL1")

    assert "timed out" in exc_info.value.detail


def test_provider_factory_requires_api_key():
    dependencies.get_youtube_provider.cache_clear()
    with patch.object(dependencies.settings, "YOUTUBE_API_KEY", ""):
        with pytest.raises(InternalServerError):
            dependencies.get_youtube_provider()
    dependencies.get_youtube_provider.cache_clear()
