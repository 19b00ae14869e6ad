"""Business logic services for debait.

Public API:
    BrandingProcessor - Per-entry branding flow (match, fetch, select, apply)
    EntryUpdater - Writes chosen titles into entries and triggers redraws
"""

from debait.services.processor import BrandingProcessor
from debait.services.updater import EntryUpdater

__all__ = [
    "BrandingProcessor",
    "EntryUpdater",
]
