"""
Unit tests for Pydantic models.
"""
import pytest
from app.models import PlaylistSummary, VideoSummary


def test_playlist_summary_totals():
    """Test that totals are derived from the videos."""
    videos = [
        VideoSummary(id="a", duration="PT1M", duration_sec=60),
        VideoSummary(id="b", duration="PT2M1S", duration_sec=121),
    ]
    summary = PlaylistSummary(id="PL1", title="Mix", videos=videos)

    assert summary.total_duration_sec == 181
    assert summary.video_count == 2
    assert summary.average_duration_sec == 91
    assert summary.total_duration == "3m 1s"
    assert summary.average_duration == "1m 31s"


@pytest.mark.parametrize(
    "durations, expected",
    [
        ([1, 1, 2], 1),
        ([1, 2], 2),
        ([10, 11, 11, 11], 11),
        ([59], 59),
    ],
)
def test_playlist_summary_average_rounds_half_up(durations, expected):
    videos = [VideoSummary(id=str(i), duration_sec=d) for i, d in enumerate(durations)]
    assert PlaylistSummary(id="PL1", videos=videos).average_duration_sec == expected


def test_playlist_summary_empty():
    """Test PlaylistSummary with no videos."""
    summary = PlaylistSummary(id="PL1")
    assert summary.videos == []
    assert summary.total_duration_sec == 0
    assert summary.average_duration_sec == 0


def test_playlist_summary_serialization():
    """Test that derived fields are part of the JSON shape."""
    summary = PlaylistSummary(
        id="PL1",
        title="Mix",
        description="desc",
        thumbnail="https://i.ytimg.com/pl.jpg",
        videos=[VideoSummary(id="a", title="A", duration="PT5S", duration_sec=5)],
    )
    data = summary.model_dump()

    assert data["total_duration_sec"] == 5
    assert data["videos"][0] == {
        "id": "a",
        "title": "A",
        "description": "",
        "thumbnail": "",
        "duration": "PT5S",
        "duration_sec": 5,
    }


def test_playlist_summary_immutable():
    """Test that PlaylistSummary is immutable (frozen)."""
    summary = PlaylistSummary(id="PL1")
    with pytest.raises(Exception):  # ValidationError for frozen model
        summary.title = "Changed"
