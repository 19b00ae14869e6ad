"""Custom exceptions for debait.

Most failures in the branding flow are silent by contract (the title simply
stays unchanged). These exceptions mark the internal boundaries where a
failure is detected before it is folded into that silent outcome.
"""


class DebaitError(Exception):
    """Base exception for debait."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(DebaitError):
    """Invalid configuration value.

    Raised for link patterns that do not compile or API base URLs
    that are not absolute http(s) URLs.
    """


class BrandingFetchError(DebaitError):
    """Branding request did not produce a response.

    Raised for DNS, connect, and timeout failures. Never propagates out of
    the fetcher; it is carried inside a FetchFailure outcome instead.
    """


class BrandingParseError(DebaitError):
    """Branding response body could not be decoded.

    Raised when the body is not JSON or does not have the expected
    video-id to record mapping shape.
    """
