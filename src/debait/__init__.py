"""debait - Replace clickbait video titles in feed entries.

For feed entries linking to videos, this library looks up a
community-curated title in a branding database (queried by a hash prefix
of the video ID, so the server never learns which video was requested)
and falls back to a deterministic rewrite of the original title when no
curated title exists.

Designed for embedding in feed readers: the host owns the event loop and
the entry store, and hands each new entry to the processor.

Examples:
    Process entries from a running event loop:
    ```python
    from debait import FeedEntry, create_processor

    async with create_processor(on_update=redraw) as processor:
        processor.submit(FeedEntry(link=url, title="YOU WON'T BELIEVE THIS!!"))
    ```

    Rewrite a title without any network access:
    ```python
    from debait import declickbait

    declickbait("STOP!!")  # "Stop."
    ```
"""

from debait.client import BrandingClient, BrandingFetcher
from debait.config import BrandingConfig
from debait.exceptions import (
    BrandingFetchError,
    BrandingParseError,
    ConfigError,
    DebaitError,
)
from debait.lib.declickbait import (
    DeclickbaitFallback,
    FunctionFallback,
    TitleFallback,
    declickbait,
)
from debait.lib.routing import branding_url, hash_prefix
from debait.models.entry import Entry, FeedEntry, RedrawCallback
from debait.models.enums import SkipReason, TitleSource
from debait.models.results import BrandingResult
from debait.services import BrandingProcessor, EntryUpdater


def create_processor(
    config: BrandingConfig | None = None,
    on_update: RedrawCallback | None = None,
) -> BrandingProcessor:
    """Create a configured branding processor.

    This is the recommended way to create a processor for library usage.
    It handles client instantiation internally; close the processor (or use
    it as an async context manager) to release the HTTP connection pool.

    Args:
        config: Optional branding configuration. Uses defaults if not provided.
        on_update: Optional callback invoked with each entry whose title
            was changed, typically to redraw it.

    Returns:
        A configured BrandingProcessor instance.

    Examples:
        With a custom instance and no fallback:
        ```python
        config = BrandingConfig(api_base_url="https://dearrow.example", fallback=None)
        processor = create_processor(config)
        ```
    """
    config = config or BrandingConfig()
    return BrandingProcessor(
        BrandingClient(config),
        config=config,
        updater=EntryUpdater(on_update),
    )


__all__ = [
    "BrandingClient",
    "BrandingConfig",
    "BrandingFetchError",
    "BrandingFetcher",
    "BrandingParseError",
    "BrandingProcessor",
    "BrandingResult",
    "ConfigError",
    "DebaitError",
    "DeclickbaitFallback",
    "Entry",
    "EntryUpdater",
    "FeedEntry",
    "FunctionFallback",
    "SkipReason",
    "TitleFallback",
    "TitleSource",
    "branding_url",
    "create_processor",
    "declickbait",
    "hash_prefix",
]
