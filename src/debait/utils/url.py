"""Link matching and video ID extraction."""

import re
from urllib.parse import parse_qs, urlsplit

# Maximum URL length to prevent potential abuse (standard browser limit)
MAX_URL_LENGTH = 2048

VIDEO_ID_PARAM = "v"


def is_eligible_link(link: str, pattern: re.Pattern[str]) -> bool:
    """Check whether an entry link should be processed.

    The pattern is searched as-is: no case folding and no implicit
    anchoring, so alternate front-ends can be supported by the pattern alone.

    Args:
        link: Entry link.
        pattern: Compiled link pattern from configuration.

    Returns:
        True if the pattern matches somewhere in the link.
    """
    if not link:
        return False
    return pattern.search(link) is not None


def parse_video_id(link: str) -> str | None:
    """Extract the video ID from the ``v`` query parameter of a link.

    Args:
        link: Eligible entry link, e.g. ``https://www.youtube.com/watch?v=ID``.

    Returns:
        The video ID, or None if the parameter is missing or empty,
        the URL is malformed, or the URL is too long.
    """
    if not link or len(link) > MAX_URL_LENGTH:
        return None

    try:
        query = urlsplit(link).query
    except ValueError:
        return None

    values = parse_qs(query).get(VIDEO_ID_PARAM)
    if not values:
        return None
    return values[0] or None
