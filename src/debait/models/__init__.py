"""Data models for debait.

Public API:
    BrandingResult - Outcome of processing one entry
    FeedEntry - Plain in-memory entry implementation
    SkipReason, TitleSource - Result enums

Internal (not exported):
    branding.py - Models for parsing branding API responses
    outcome.py - Fetch outcome types
"""

from debait.models.entry import Entry, FeedEntry
from debait.models.enums import FallbackMode, SkipReason, TitleSource
from debait.models.results import BrandingResult

__all__ = [
    "BrandingResult",
    "Entry",
    "FallbackMode",
    "FeedEntry",
    "SkipReason",
    "TitleSource",
]
