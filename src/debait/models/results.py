"""Per-entry processing results."""

from pydantic import BaseModel, ConfigDict

from debait.models.enums import SkipReason, TitleSource


class BrandingResult(BaseModel):
    """Result of processing a single entry.

    Exactly one of ``title`` and ``skip_reason`` is set.

    Attributes:
        link: Entry link that was processed.
        original_title: Entry title before processing.
        video_id: Extracted video ID, if any.
        title: Title applied to the entry.
        source: Where the applied title came from.
        skip_reason: Why the entry was left untouched.
    """

    model_config = ConfigDict(frozen=True)

    link: str
    original_title: str
    video_id: str | None = None
    title: str | None = None
    source: TitleSource | None = None
    skip_reason: SkipReason | None = None

    @property
    def applied(self) -> bool:
        """Whether a title was written to the entry."""
        return self.title is not None
