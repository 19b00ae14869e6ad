"""Tests for EntryUpdater."""

from conftest import RecordingRedraw
from debait.models.entry import FeedEntry
from debait.services import EntryUpdater


class TestEntryUpdater:
    """Tests for writing titles back into entries."""

    def test_sets_display_title_and_redraws(self, redraw: RecordingRedraw) -> None:
        entry = FeedEntry(link="https://www.youtube.com/watch?v=a1", title="OMG!!")

        EntryUpdater(redraw).apply(entry, "Calm Title")

        assert entry.display_title == "Calm Title"
        assert redraw.calls == [(entry, "Calm Title")]

    def test_leaves_other_fields_untouched(self) -> None:
        entry = FeedEntry(link="https://www.youtube.com/watch?v=a1", title="OMG!!")
        EntryUpdater().apply(entry, "Calm Title")
        assert entry.link == "https://www.youtube.com/watch?v=a1"
        assert entry.title == "OMG!!"

    def test_later_write_wins(self, redraw: RecordingRedraw) -> None:
        entry = FeedEntry(link="https://www.youtube.com/watch?v=a1", title="OMG!!")
        updater = EntryUpdater(redraw)
        updater.apply(entry, "First")
        updater.apply(entry, "Second")
        assert entry.shown_title == "Second"
        assert len(redraw.calls) == 2


class TestFeedEntry:
    """Tests for the in-memory entry."""

    def test_shown_title_defaults_to_original(self) -> None:
        entry = FeedEntry(link="https://example.com", title="Original")
        assert entry.shown_title == "Original"

    def test_shown_title_prefers_replacement(self) -> None:
        entry = FeedEntry(
            link="https://example.com", title="Original", display_title="New"
        )
        assert entry.shown_title == "New"
