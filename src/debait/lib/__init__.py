"""Pure building blocks: title rewriting and request routing."""

from debait.lib.declickbait import (
    DeclickbaitFallback,
    FunctionFallback,
    TitleFallback,
    declickbait,
)
from debait.lib.routing import HASH_PREFIX_LENGTH, branding_url, hash_prefix

__all__ = [
    "HASH_PREFIX_LENGTH",
    "DeclickbaitFallback",
    "FunctionFallback",
    "TitleFallback",
    "branding_url",
    "declickbait",
    "hash_prefix",
]
