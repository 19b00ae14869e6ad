"""Outcome of a branding request."""

from dataclasses import dataclass

from debait.exceptions import BrandingFetchError


@dataclass(frozen=True)
class FetchSuccess:
    """The server answered, with any status code."""

    status_code: int
    body: bytes


@dataclass(frozen=True)
class FetchFailure:
    """No response was received."""

    error: BrandingFetchError


FetchOutcome = FetchSuccess | FetchFailure
