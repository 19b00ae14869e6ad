"""Deterministic title rewriting for videos without a curated title.

The rewrite runs three stages in a fixed order, each feeding the next:

1. Shouted words (all-caps, more than one letter) become capitalized.
2. Runs of ``?`` and ``!`` collapse to their first character.
3. Remaining ``!`` characters become ``.``.

Examples:
    >>> declickbait("STOP!!")
    'Stop.'
    >>> declickbait("REALLY?!")
    'Really?'
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

__all__ = [
    "DeclickbaitFallback",
    "FunctionFallback",
    "TitleFallback",
    "collapse_punctuation",
    "declickbait",
    "repair_shouting",
    "soften_exclamations",
]

_RUN_CHARS = frozenset("?!")


def _is_shouted(word: str) -> bool:
    letters = "".join(ch for ch in word if ch.isalpha())
    return len(letters) > 1 and letters.isupper()


def _capitalize_word(word: str) -> str:
    lowered = word.lower()
    for i, ch in enumerate(lowered):
        if ch.isalpha():
            return lowered[:i] + ch.upper() + lowered[i + 1 :]
    return lowered


def repair_shouting(title: str) -> str:
    """Capitalize words written entirely in uppercase.

    The whole token is lowercased, then its first letter is uppercased;
    attached punctuation stays in place, so ``"(WOW)"`` becomes ``"(Wow)"``.
    Words are rejoined with single spaces.

    Args:
        title: Title to repair.

    Returns:
        Title with shouted words capitalized.
    """
    words = title.split()
    return " ".join(
        _capitalize_word(word) if _is_shouted(word) else word for word in words
    )


def collapse_punctuation(title: str) -> str:
    """Collapse each run of ``?``/``!`` characters to its first character."""
    kept: list[str] = []
    for ch in title:
        if ch in _RUN_CHARS and kept and kept[-1] in _RUN_CHARS:
            continue
        kept.append(ch)
    return "".join(kept)


def soften_exclamations(title: str) -> str:
    """Replace every ``!`` with ``.``."""
    return title.replace("!", ".")


def declickbait(title: str) -> str:
    """Apply all three rewrite stages in order.

    Args:
        title: Original entry title.

    Returns:
        The normalized title.
    """
    return soften_exclamations(collapse_punctuation(repair_shouting(title)))


@runtime_checkable
class TitleFallback(Protocol):
    """Strategy producing a replacement title when no curated title exists.

    Implementations return None to leave the entry untouched.
    """

    def replacement_title(self, title: str) -> str | None:
        """Produce a replacement for the original title."""
        ...


class DeclickbaitFallback:
    """Default fallback strategy using the three-stage rewrite."""

    def replacement_title(self, title: str) -> str | None:
        return declickbait(title)

    def __repr__(self) -> str:
        return "DeclickbaitFallback()"


class FunctionFallback:
    """Adapt a plain ``str -> str | None`` function to the fallback strategy.

    Examples:
        >>> FunctionFallback(str.lower).replacement_title("LOUD")
        'loud'
    """

    def __init__(self, func: Callable[[str], str | None]) -> None:
        self._func = func

    def replacement_title(self, title: str) -> str | None:
        return self._func(title)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"FunctionFallback({name})"
