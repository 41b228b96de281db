from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, computed_field

from app.services.duration import format_duration

# --- Capability Models (YouTube Data API, normalized) ---

class PlaylistItemsPage(BaseModel):
    video_ids: List[str] = Field(default_factory=list)
    next_page_token: Optional[str] = None

    model_config = ConfigDict(frozen=True)

class VideoDetails(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    thumbnail_url: str = ""
    duration: str = ""

    model_config = ConfigDict(frozen=True)

class PlaylistMetadata(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    thumbnail_url: str = ""

    model_config = ConfigDict(frozen=True)

# --- Core Data Models ---

class VideoSummary(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    thumbnail: str = ""
    duration: str = ""
    duration_sec: int = 0

    model_config = ConfigDict(frozen=True)

class PlaylistSummary(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    thumbnail: str = ""
    videos: List[VideoSummary] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def total_duration_sec(self) -> int:
        """Sum of the parsed durations of all videos."""
        return sum(video.duration_sec for video in self.videos)

    @computed_field
    @property
    def video_count(self) -> int:
        return len(self.videos)

    @computed_field
    @property
    def average_duration_sec(self) -> int:
        """Mean video duration rounded half up to whole seconds, 0 for an empty listing."""
        count = len(self.videos)
        if not count:
            return 0
        return (2 * self.total_duration_sec + count) // (2 * count)

    @computed_field
    @property
    def total_duration(self) -> str:
        return format_duration(self.total_duration_sec)

    @computed_field
    @property
    def average_duration(self) -> str:
        return format_duration(self.average_duration_sec)
