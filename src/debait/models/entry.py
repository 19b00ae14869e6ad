"""Feed entry contract shared with the external feed store."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


class Entry(Protocol):
    """Feed entry as seen by debait.

    The feed store owns the entry; debait only reads ``link`` and ``title``
    and writes ``display_title`` through the EntryUpdater.
    """

    @property
    def link(self) -> str: ...

    @property
    def title(self) -> str: ...

    display_title: str | None


RedrawCallback = Callable[[Entry], None]


@dataclass
class FeedEntry:
    """Plain in-memory entry.

    Attributes:
        link: Link to the linked content.
        title: Title as published in the feed.
        display_title: Replacement title, None until one is applied.
    """

    link: str
    title: str
    display_title: str | None = None

    @property
    def shown_title(self) -> str:
        """Title to display: the replacement if set, the original otherwise."""
        return self.display_title if self.display_title is not None else self.title
