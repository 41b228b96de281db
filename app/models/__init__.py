from .youtube import PlaylistItemsPage, VideoDetails, PlaylistMetadata, VideoSummary, PlaylistSummary
from .api import PlaylistAnalyzeRequest
