"""Configuration for debait."""

import re
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from urllib.parse import urlsplit

from debait.exceptions import ConfigError
from debait.lib.declickbait import DeclickbaitFallback, TitleFallback

DEFAULT_API_BASE_URL = "https://sponsor.ajay.app"
DEFAULT_LINK_PATTERN = r"^https://www\.youtube\.com/watch\?v="
DEFAULT_TIMEOUT = 10.0


def _default_user_agent() -> str:
    try:
        return f"debait/{version('debait')}"
    except PackageNotFoundError:
        return "debait"


def compile_link_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a link pattern, keeping pre-compiled patterns as-is.

    Args:
        pattern: Regular expression source or compiled pattern.

    Returns:
        Compiled pattern. No flags are added, matching stays case-sensitive.

    Raises:
        ConfigError: If the pattern does not compile.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"Invalid link pattern {pattern!r}: {e}") from e


def validate_api_base_url(url: str) -> str:
    """Check that the API base URL is an absolute http(s) URL.

    Returns:
        The URL without trailing slashes.

    Raises:
        ConfigError: If the URL has no http(s) scheme or no host.
    """
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(f"Invalid API base URL: {url!r}")
    return url.rstrip("/")


@dataclass(frozen=True)
class BrandingConfig:
    """Branding lookup configuration.

    Set once at startup and passed to the processor; never mutated.

    Attributes:
        api_base_url: Base URL of the branding API instance.
        link_pattern: Links must match this pattern to be processed.
        fallback: Strategy used when no curated title exists.
            None disables the fallback entirely.
        timeout: Request timeout in seconds. None waits indefinitely.
        user_agent: User-Agent header sent with branding requests.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    link_pattern: re.Pattern[str] = field(
        default_factory=lambda: re.compile(DEFAULT_LINK_PATTERN)
    )
    fallback: TitleFallback | None = field(default_factory=DeclickbaitFallback)
    timeout: float | None = DEFAULT_TIMEOUT
    user_agent: str = field(default_factory=_default_user_agent)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(
            self, "api_base_url", validate_api_base_url(self.api_base_url)
        )
        object.__setattr__(
            self, "link_pattern", compile_link_pattern(self.link_pattern)
        )

    @property
    def fallback_enabled(self) -> bool:
        """Whether a fallback strategy is configured."""
        return self.fallback is not None
