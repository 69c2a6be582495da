"""Joining, cutting, trimming and splitting strings."""

from __future__ import annotations

__all__ = ["join", "substring", "trim", "split", "word_count"]

_BLANKS = " \t\n\r\v\f"


def join(s1: str, s2: str) -> str:
    """The concatenation of *s1* and *s2*."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def substring(text: str, start: int, length: int) -> str:
    """The *length* characters of *text* beginning at index *start*.

    Raises ValueError when the range does not lie within *text*.
    """
    if text is None:
        raise TypeError("a string is required")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(text):
        raise ValueError(
            f"range {start}..{start + length} exceeds string length {len(text)}"
        )
    return text[start : start + length]


def trim(text: str) -> str:
    """*text* without leading and trailing blanks."""
    if text is None:
        raise TypeError("a string is required")
    return text.strip(_BLANKS)


def _check_delimiter(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"delimiter must be a single character, got {c!r}")


def split(text: str, c: str) -> list[str]:
    """The non-empty words of *text* separated by the character *c*."""
    if text is None:
        raise TypeError("a string is required")
    _check_delimiter(c)
    return [word for word in text.split(c) if word]


def word_count(text: str, c: str) -> int:
    """Number of non-empty words of *text* separated by the character *c*."""
    return len(split(text, c))