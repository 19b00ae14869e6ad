"""Enumerations for debait domain models."""

from enum import StrEnum


class TitleSource(StrEnum):
    """Where an applied title came from."""

    CURATED = "curated"  # Community-submitted title from the branding API
    FALLBACK = "fallback"  # Produced by the configured fallback strategy


class SkipReason(StrEnum):
    """Reason why an entry was left untouched.

    - Before the request: INELIGIBLE_LINK, NO_VIDEO_ID
    - After the request: TRANSPORT_ERROR, NO_TITLE
    """

    INELIGIBLE_LINK = "ineligible_link"
    NO_VIDEO_ID = "no_video_id"
    TRANSPORT_ERROR = "transport_error"
    NO_TITLE = "no_title"

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        match self:
            case SkipReason.INELIGIBLE_LINK:
                return "link does not match pattern"
            case SkipReason.NO_VIDEO_ID:
                return "no video ID"
            case SkipReason.TRANSPORT_ERROR:
                return "request failed"
            case SkipReason.NO_TITLE:
                return "no curated title and no fallback"


class FallbackMode(StrEnum):
    """Fallback selection available from settings."""

    DECLICKBAIT = "declickbait"
    NONE = "none"
