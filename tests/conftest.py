"""Test fixtures and configuration."""

import json
import re
from typing import Any

import pytest
from debait.config import BrandingConfig
from debait.exceptions import BrandingFetchError
from debait.models.entry import FeedEntry
from debait.models.outcome import FetchFailure, FetchOutcome, FetchSuccess

VIDEO_ID = "abc123"
VIDEO_URL = f"https://www.youtube.com/watch?v={VIDEO_ID}"
API_BASE = "https://branding.test"


def branding_body(data: dict[str, Any]) -> bytes:
    """Encode a branding response body."""
    return json.dumps(data).encode()


def titles_record(*titles: str) -> dict[str, Any]:
    """Build a branding record with the given titles in order."""
    return {
        "titles": [
            {"title": t, "original": False, "votes": 0, "locked": False}
            for t in titles
        ],
        "thumbnails": [],
        "randomTime": 0.5,
    }


class FakeFetcher:
    """Minimal fake implementing the BrandingFetcher protocol."""

    def __init__(self, outcome: FetchOutcome | None = None) -> None:
        self.outcome = outcome or FetchSuccess(status_code=404, body=b"")
        self.urls: list[str] = []
        self.closed = False

    async def fetch(self, url: str) -> FetchOutcome:
        self.urls.append(url)
        return self.outcome

    async def aclose(self) -> None:
        self.closed = True


class RecordingRedraw:
    """Redraw callback that records the entries it was called with."""

    def __init__(self) -> None:
        self.calls: list[tuple[FeedEntry, str | None]] = []

    def __call__(self, entry: FeedEntry) -> None:
        self.calls.append((entry, entry.display_title))


@pytest.fixture
def config() -> BrandingConfig:
    """Configuration pointing at a fake API with the default fallback."""
    return BrandingConfig(api_base_url=API_BASE, timeout=None)


@pytest.fixture
def config_no_fallback() -> BrandingConfig:
    """Configuration with the fallback disabled."""
    return BrandingConfig(api_base_url=API_BASE, fallback=None)


@pytest.fixture
def entry() -> FeedEntry:
    """Eligible entry with a shouting title."""
    return FeedEntry(link=VIDEO_URL, title="STOP!!")


@pytest.fixture
def redraw() -> RecordingRedraw:
    return RecordingRedraw()


@pytest.fixture
def curated_fetcher() -> FakeFetcher:
    """Fetcher answering with a curated title and same-prefix noise."""
    body = branding_body(
        {
            "zzz999": titles_record("Somebody Else's Title"),
            VIDEO_ID: titles_record("Real Title", "Second Choice"),
        }
    )
    return FakeFetcher(FetchSuccess(status_code=200, body=body))


@pytest.fixture
def failing_fetcher() -> FakeFetcher:
    return FakeFetcher(FetchFailure(BrandingFetchError("ConnectError: refused")))


@pytest.fixture
def youtube_pattern() -> re.Pattern[str]:
    return re.compile(r"^https://www\.youtube\.com/watch\?v=")
