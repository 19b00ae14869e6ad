"""Models for parsing branding API responses.

These are internal models used to validate the JSON returned by
``/api/branding/{prefix}``. Only ``titles`` is consumed; other fields
the server sends are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BrandingRecord",
    "BrandingTitle",
]


class BrandingModel(BaseModel):
    """Base model for branding API responses."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class BrandingTitle(BrandingModel):
    """A single candidate title.

    Vote counts and lock flags sent by the server are ignored.
    """

    title: str


class BrandingRecord(BrandingModel):
    """Branding data for one video ID.

    Titles are ordered by the server; the first is its preferred choice.
    """

    titles: list[BrandingTitle] = Field(default_factory=list)

    @property
    def preferred_title(self) -> str | None:
        """The first candidate title, if any."""
        return self.titles[0].title if self.titles else None
