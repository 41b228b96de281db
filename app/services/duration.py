"""
Parsing and formatting of YouTube video durations.

The Data API reports ``contentDetails.duration`` as a compact ISO 8601 token
such as ``PT1H2M3S``. Only the hour, minute and second groups are used.
"""
import re
from typing import Optional

_DURATION_RE = re.compile(
    r"^PT"
    r"(?:(?P<hours>[^HMS]*)H)?"
    r"(?:(?P<minutes>[^HMS]*)M)?"
    r"(?:(?P<seconds>[^HMS]*)S)?$"
)


def _group_value(raw: Optional[str]) -> int:
    if raw and raw.isascii() and raw.isdigit():
        return int(raw)
    return 0


def parse_duration(value: Optional[str]) -> int:
    """
    Convert a ``PT[n]H[n]M[n]S`` token into a number of seconds.

    Never raises. A group whose value is not a plain non-negative integer
    counts as zero, and input that does not have the token shape at all
    (including ``None`` and the empty string) yields 0.

    Args:
        value: The raw duration token.

    Returns:
        int: Total seconds, always >= 0.
    """
    if not value or not isinstance(value, str):
        return 0

    match = _DURATION_RE.match(value.strip())
    if not match:
        return 0

    hours = _group_value(match.group("hours"))
    minutes = _group_value(match.group("minutes"))
    seconds = _group_value(match.group("seconds"))
    return hours * 3600 + minutes * 60 + seconds


def format_duration(total_seconds: int) -> str:
    """Render seconds as ``'1h 2m 3s'``, ``'2m 3s'`` or ``'3s'``."""
    hours, remainder = divmod(max(total_seconds, 0), 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    if minutes > 0:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"
