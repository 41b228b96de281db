"""
API endpoints for playlist duration analysis.
"""
from fastapi import APIRouter, Depends
from loguru import logger

from app.models.api import PlaylistAnalyzeRequest
from app.models.youtube import PlaylistSummary
from app.services.playlist import PlaylistService
from app.api.dependencies import get_playlist_service


router = APIRouter()


@router.post("/playlist/analyze", response_model=PlaylistSummary)
async def analyze_playlist(
    payload: PlaylistAnalyzeRequest,
    playlist_service: PlaylistService = Depends(get_playlist_service),
):
    """
    Computes the total and average length of a YouTube playlist.

    Args:
        payload: The request body containing the playlist URL.
        playlist_service: The service running the aggregation pipeline.

    Returns:
        PlaylistSummary: Playlist metadata, every video with its duration and the totals.
    """
    logger.info(f"Incoming analyze request for URL: {payload.youtube_url}")
    return await playlist_service.analyze_url(payload.youtube_url)
