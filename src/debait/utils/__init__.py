"""Utility functions for debait.

Available via `from debait.utils import ...` for power users.
Not re-exported at the top-level `debait` package.
"""

from debait.utils.url import MAX_URL_LENGTH, is_eligible_link, parse_video_id

__all__ = [
    "MAX_URL_LENGTH",
    "is_eligible_link",
    "parse_video_id",
]
