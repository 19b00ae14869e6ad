"""Tests for BrandingConfig and Settings."""

import dataclasses
import re

import pytest
from debait.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_LINK_PATTERN,
    BrandingConfig,
    compile_link_pattern,
)
from debait.exceptions import ConfigError
from debait.lib.declickbait import DeclickbaitFallback
from debait.models.enums import FallbackMode
from debait.settings import Settings
from pydantic import ValidationError


class TestBrandingConfig:
    """Tests for the immutable branding configuration."""

    def test_defaults(self) -> None:
        config = BrandingConfig()
        assert config.api_base_url == DEFAULT_API_BASE_URL
        assert config.link_pattern.pattern == DEFAULT_LINK_PATTERN
        assert isinstance(config.fallback, DeclickbaitFallback)
        assert config.fallback_enabled
        assert config.user_agent.startswith("debait")

    def test_string_pattern_is_compiled(self) -> None:
        config = BrandingConfig(link_pattern=r"^https://invidious\.test/")  # type: ignore[arg-type]
        assert isinstance(config.link_pattern, re.Pattern)

    def test_strips_trailing_slash(self) -> None:
        assert BrandingConfig(api_base_url="https://x.test/").api_base_url == (
            "https://x.test"
        )

    def test_fallback_can_be_disabled(self) -> None:
        assert not BrandingConfig(fallback=None).fallback_enabled

    def test_is_frozen(self) -> None:
        config = BrandingConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_base_url = "https://other.test"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "url",
        ["sponsor.ajay.app", "ftp://x.test", "https://", ""],
        ids=["no_scheme", "ftp", "no_host", "empty"],
    )
    def test_rejects_invalid_base_url(self, url: str) -> None:
        with pytest.raises(ConfigError):
            BrandingConfig(api_base_url=url)

    def test_rejects_invalid_pattern(self) -> None:
        with pytest.raises(ConfigError, match="Invalid link pattern"):
            compile_link_pattern("(unclosed")


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("API_BASE_URL", "LINK_PATTERN", "FALLBACK", "TIMEOUT"):
            monkeypatch.delenv(f"DEBAIT_{name}", raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.api_base_url == DEFAULT_API_BASE_URL
        assert settings.fallback == FallbackMode.DECLICKBAIT

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBAIT_API_BASE_URL", "https://dearrow.test/")
        monkeypatch.setenv("DEBAIT_LINK_PATTERN", r"^https://yt\.test/watch")
        monkeypatch.setenv("DEBAIT_FALLBACK", "none")
        monkeypatch.setenv("DEBAIT_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.api_base_url == "https://dearrow.test"
        assert settings.fallback == FallbackMode.NONE
        assert settings.log_level == "DEBUG"

    def test_to_config(self) -> None:
        settings = Settings(
            api_base_url="https://dearrow.test",
            link_pattern=r"^https://yt\.test/",
            fallback=FallbackMode.NONE,
            timeout=2.5,
            _env_file=None,  # type: ignore[call-arg]
        )
        config = settings.to_config()
        assert config.api_base_url == "https://dearrow.test"
        assert config.link_pattern.pattern == r"^https://yt\.test/"
        assert config.fallback is None
        assert config.timeout == 2.5

    def test_to_config_default_fallback(self) -> None:
        config = Settings(_env_file=None).to_config()  # type: ignore[call-arg]
        assert isinstance(config.fallback, DeclickbaitFallback)

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("link_pattern", "(unclosed"),
            ("api_base_url", "not a url"),
            ("timeout", 0),
            ("fallback", "magic"),
        ],
    )
    def test_rejects_invalid_values(self, field: str, value: object) -> None:
        with pytest.raises(ValidationError):
            Settings(**{field: value}, _env_file=None)  # type: ignore[arg-type]
