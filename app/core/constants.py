"""
Application-wide constants and limits imposed by the YouTube Data API.
"""


class YouTubeConfig:
    """Configuration for YouTube Data API access."""
    MAX_RESULTS_PER_PAGE = 50  # playlistItems.list maxResults upper bound
    MAX_IDS_PER_REQUEST = 50  # videos.list id parameter upper bound
    PLAYLIST_ID_PARAM = "list"
    API_SERVICE_NAME = "youtube"
    API_VERSION = "v3"
