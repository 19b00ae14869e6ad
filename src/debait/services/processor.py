"""Per-entry branding flow."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from debait.client import BrandingFetcher, parse_branding_response
from debait.config import BrandingConfig
from debait.lib.routing import branding_url
from debait.models.entry import Entry
from debait.models.enums import SkipReason, TitleSource
from debait.models.outcome import FetchFailure
from debait.models.results import BrandingResult
from debait.services.updater import EntryUpdater
from debait.utils.url import is_eligible_link, parse_video_id

logger = logging.getLogger(__name__)


class BrandingProcessor:
    """Replaces entry titles with curated or rewritten ones.

    Each entry is processed independently: match the link, extract the
    video ID, fetch branding by hash prefix, then apply the curated title
    or the fallback rewrite.

    Architecture Notes:
        - Configuration is read-only; processing state lives in locals
        - No in-flight tracking: submitting an entry twice issues two
          requests and the later completion wins
        - Background tasks are tracked in a set to prevent garbage collection
    """

    def __init__(
        self,
        fetcher: BrandingFetcher,
        config: BrandingConfig | None = None,
        updater: EntryUpdater | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            fetcher: Branding transport (protocol-based for testability).
            config: Branding configuration. Uses defaults if not provided.
            updater: Entry updater. Defaults to one without a redraw callback.
        """
        self._fetcher = fetcher
        self._config = config or BrandingConfig()
        self._updater = updater or EntryUpdater()
        self._background_tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> int:
        """Number of submitted entries still being processed."""
        return len(self._background_tasks)

    async def process(self, entry: Entry) -> BrandingResult:
        """Run the branding flow for one entry.

        Ineligible links, missing video IDs, transport failures, and a
        missing title are reported through the result's skip_reason and
        leave the entry untouched. Exceptions raised by the fallback
        strategy or the redraw callback propagate to the caller.

        Args:
            entry: Entry to process.

        Returns:
            What was applied, or why nothing was.
        """
        link, original = entry.link, entry.title

        if not is_eligible_link(link, self._config.link_pattern):
            logger.debug("Skipping %s: link does not match pattern", link)
            return BrandingResult(
                link=link,
                original_title=original,
                skip_reason=SkipReason.INELIGIBLE_LINK,
            )

        video_id = parse_video_id(link)
        if video_id is None:
            logger.debug("Skipping %s: no video ID", link)
            return BrandingResult(
                link=link,
                original_title=original,
                skip_reason=SkipReason.NO_VIDEO_ID,
            )

        outcome = await self._fetcher.fetch(
            branding_url(self._config.api_base_url, video_id)
        )
        if isinstance(outcome, FetchFailure):
            return BrandingResult(
                link=link,
                original_title=original,
                video_id=video_id,
                skip_reason=SkipReason.TRANSPORT_ERROR,
            )

        title = parse_branding_response(outcome, video_id)
        source = TitleSource.CURATED
        if title is None:
            title = self._fallback_title(original)
            source = TitleSource.FALLBACK

        if title is None:
            return BrandingResult(
                link=link,
                original_title=original,
                video_id=video_id,
                skip_reason=SkipReason.NO_TITLE,
            )

        self._updater.apply(entry, title)
        logger.info("Applied %s title for %s: %r", source, video_id, title)
        return BrandingResult(
            link=link,
            original_title=original,
            video_id=video_id,
            title=title,
            source=source,
        )

    def _fallback_title(self, original: str) -> str | None:
        fallback = self._config.fallback
        if fallback is None:
            return None
        return fallback.replacement_title(original)

    async def process_many(
        self, entries: Iterable[Entry]
    ) -> list[BrandingResult | BaseException]:
        """Process several entries concurrently.

        An exception raised while processing one entry does not discard
        the results of the others; it takes that entry's place in the list.

        Returns:
            Results (or exceptions) in the same order as the entries.
        """
        results = await asyncio.gather(
            *(self.process(e) for e in entries), return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException):
                logger.error("Branding failed for an entry", exc_info=result)
        return list(results)

    def submit(self, entry: Entry) -> asyncio.Task[BrandingResult]:
        """Schedule an entry for processing and return immediately.

        Must be called from a running event loop. The entry is not marked
        as pending anywhere; the title changes whenever the response arrives.

        Args:
            entry: Entry to process.

        Returns:
            The scheduled task, for callers that want to await it.
        """
        task = asyncio.create_task(
            self.process(entry), name=f"branding-{entry.link[-16:]}"
        )
        self._background_tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task[BrandingResult]) -> None:
        self._background_tasks.discard(task)
        if task.cancelled():
            return
        if (exc := task.exception()) is not None:
            logger.error("Branding task %s failed", task.get_name(), exc_info=exc)

    async def aclose(self) -> None:
        """Wait for submitted entries, then close the fetcher."""
        await self.drain()
        await self._fetcher.aclose()

    async def __aenter__(self) -> "BrandingProcessor":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def drain(self) -> None:
        """Wait for all submitted entries to finish processing."""
        if self._background_tasks:
            await asyncio.gather(*self._background_tasks, return_exceptions=True)
