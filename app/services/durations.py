"""Duration parsing and clock-style formatting."""

import logging
import math
import re

logger = logging.getLogger(__name__)

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_iso8601_duration(duration: str) -> int:
    """
    Parse a YouTube ISO-8601 duration (e.g. PT15S, PT1M2S, PT1H3M) into seconds.

    Missing components count as zero. Empty or unrecognised input yields 0
    instead of raising.
    """
    if not duration or not isinstance(duration, str):
        return 0

    match = _DURATION_RE.search(duration)
    if not match:
        logger.debug(f"Unrecognised duration string: {duration!r}")
        return 0

    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    seconds = int(match.group(3) or 0)

    return hours * 3600 + minutes * 60 + seconds


def format_duration(total_seconds: float) -> str:
    """
    Format seconds as H:MM:SS, or M:SS when under an hour.

    Minutes are only zero-padded when an hour component is shown, so five
    minutes and three seconds renders as "5:03". Fractions are floored.
    """
    total_seconds = max(0, math.floor(total_seconds))
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"
