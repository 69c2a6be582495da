"""Searching and comparing strings.

Positions are returned as indices, and ``None`` stands for "not found".
Comparisons return the difference of the first pair of characters that
differ, with the end of a string counting as code 0.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Sequence, Union

StrLike = Union[str, bytes, bytearray]

__all__ = [
    "str_length",
    "find_char",
    "rfind_char",
    "find_sub",
    "find_sub_n",
    "compare",
    "compare_n",
    "equal",
    "equal_n",
]


def _codes(text: StrLike) -> Sequence[int]:
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    raise TypeError(f"expected str or bytes, not {type(text).__name__}")


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def str_length(text: str) -> int:
    """Number of characters in *text*."""
    return len(text)


def find_char(text: str, c: str) -> Optional[int]:
    """Index of the first *c* in *text*; the NUL character matches the end."""
    _check_char(c)
    if c == "\0":
        index = text.find(c)
        return len(text) if index < 0 else index
    index = text.find(c)
    return None if index < 0 else index


def rfind_char(text: str, c: str) -> Optional[int]:
    """Index of the last *c* in *text*; the NUL character matches the end."""
    _check_char(c)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def find_sub(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of *needle*; an empty needle is found at 0."""
    index = haystack.find(needle)
    return None if index < 0 else index


def find_sub_n(haystack: str, needle: str, n: int) -> Optional[int]:
    """Like :func:`find_sub`, but the match must lie within the first *n* characters."""
    _check_count(n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def compare(s1: StrLike, s2: StrLike) -> int:
    """Zero when equal, else the code difference at the first mismatch."""
    for left, right in zip_longest(_codes(s1), _codes(s2), fillvalue=0):
        if left != right:
            return left - right
    return 0


def compare_n(s1: StrLike, s2: StrLike, n: int) -> int:
    """Compare at most the first *n* characters of both strings."""
    _check_count(n)
    return compare(s1[:n], s2[:n])


def _require(s1: object, s2: object) -> None:
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")


def equal(s1: StrLike, s2: StrLike) -> bool:
    """True when the two strings are equal."""
    _require(s1, s2)
    return compare(s1, s2) == 0


def equal_n(s1: StrLike, s2: StrLike, n: int) -> bool:
    """True when the first *n* characters of the two strings are equal."""
    _require(s1, s2)
    return compare_n(s1, s2, n) == 0