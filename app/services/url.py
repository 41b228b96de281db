from urllib.parse import parse_qs, urlsplit

from loguru import logger

from app.core.constants import YouTubeConfig


def extract_playlist_id(url: str) -> str:
    """
    Extract the playlist identifier from the ``list`` query parameter of a URL.

    Args:
        url: A YouTube playlist (or watch-in-playlist) URL.

    Returns:
        str: The playlist ID, or an empty string if the URL cannot be parsed
             or carries no ``list`` parameter.
    """
    try:
        query = urlsplit(url.strip()).query
    except (AttributeError, ValueError) as e:
        logger.debug(f"Could not parse URL {url!r}: {e}")
        return ""

    values = parse_qs(query).get(YouTubeConfig.PLAYLIST_ID_PARAM, [])
    if not values or not values[0].strip():
        logger.debug(f"URL {url!r} has no '{YouTubeConfig.PLAYLIST_ID_PARAM}' parameter")
        return ""
    return values[0].strip()
