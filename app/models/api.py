"""
Pydantic models for API request schemas.
"""
from pydantic import BaseModel, ConfigDict


class PlaylistAnalyzeRequest(BaseModel):
    """Request model for playlist analysis."""

    youtube_url: str

    model_config = ConfigDict(str_strip_whitespace=True)
