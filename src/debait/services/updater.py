"""Writing chosen titles back into feed entries."""

import logging

from debait.models.entry import Entry, RedrawCallback

logger = logging.getLogger(__name__)


def _no_redraw(entry: Entry) -> None:
    pass


class EntryUpdater:
    """Single mutation point of the branding flow.

    Assigns the entry's display title, then asks the UI collaborator
    to redraw that entry. No other entry field is touched.
    """

    def __init__(self, on_update: RedrawCallback | None = None) -> None:
        """Initialize the updater.

        Args:
            on_update: Called with the entry after its title changes.
                Defaults to a no-op.
        """
        self._on_update = on_update or _no_redraw

    def apply(self, entry: Entry, title: str) -> None:
        """Write a title into an entry and trigger a redraw."""
        entry.display_title = title
        logger.debug("Updated title for %s: %r", entry.link, title)
        self._on_update(entry)
