"""Application settings using pydantic-settings."""

import re
from functools import cache
from typing import Annotated, Literal

from pydantic import AfterValidator, BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from debait.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_LINK_PATTERN,
    DEFAULT_TIMEOUT,
    BrandingConfig,
    validate_api_base_url,
)
from debait.exceptions import ConfigError
from debait.lib.declickbait import DeclickbaitFallback
from debait.models.enums import FallbackMode

LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    BeforeValidator(lambda v: v.upper() if isinstance(v, str) else v),
]


def _validate_pattern(v: str) -> str:
    """Validate link pattern by compiling it."""
    try:
        re.compile(v)
    except re.error as e:
        raise ValueError(f"Invalid link pattern: {e}") from e
    return v


def _validate_base_url(v: str) -> str:
    try:
        return validate_api_base_url(v)
    except ConfigError as e:
        raise ValueError(str(e)) from e


LinkPattern = Annotated[str, AfterValidator(_validate_pattern)]
BaseURL = Annotated[str, AfterValidator(_validate_base_url)]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DEBAIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: BaseURL = Field(
        default=DEFAULT_API_BASE_URL, description="Branding API instance"
    )
    link_pattern: LinkPattern = Field(
        default=DEFAULT_LINK_PATTERN, description="Links to process (regex)"
    )
    fallback: FallbackMode = Field(
        default=FallbackMode.DECLICKBAIT,
        description="Fallback when no curated title exists",
    )
    timeout: Annotated[float, Field(gt=0)] | None = Field(
        default=DEFAULT_TIMEOUT, description="Request timeout in seconds"
    )
    log_level: LogLevel = Field(default="WARNING", description="Log level")

    def to_config(self) -> BrandingConfig:
        """Build the immutable branding configuration."""
        return BrandingConfig(
            api_base_url=self.api_base_url,
            link_pattern=re.compile(self.link_pattern),
            fallback=(
                DeclickbaitFallback()
                if self.fallback is FallbackMode.DECLICKBAIT
                else None
            ),
            timeout=self.timeout,
        )


@cache
def get_settings() -> Settings:
    return Settings()
