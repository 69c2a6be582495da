"""Character-wise replacement, iteration and mapping over strings."""

from __future__ import annotations

from typing import Callable, Optional

__all__ = [
    "replace_char",
    "iterate",
    "iterate_indexed",
    "map_chars",
    "map_chars_indexed",
]


def _check_char(value: object, what: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


def replace_char(text: str, find: str, replace: str) -> str:
    """A copy of *text* with every *find* character changed to *replace*."""
    _check_char(find, "find")
    _check_char(replace, "replace")
    return text.replace(find, replace)


def _apply_optional(text: str, results) -> str:
    out = []
    for ch, result in zip(text, results):
        out.append(ch if result is None else _check_char(result, "result"))
    return "".join(out)


def iterate(text: str, func: Optional[Callable[[str], Optional[str]]]) -> str:
    """Call *func* on each character in order.

    A character returned by *func* takes the place of the one passed in;
    ``None`` leaves it as it was.  Returns the resulting string.  Without a
    function the text comes back unchanged.
    """
    if func is None:
        return text
    return _apply_optional(text, (func(ch) for ch in text))


def iterate_indexed(
    text: str, func: Optional[Callable[[int, str], Optional[str]]]
) -> str:
    """Like :func:`iterate`, with the index passed before each character."""
    if func is None:
        return text
    return _apply_optional(text, (func(i, ch) for i, ch in enumerate(text)))


def map_chars(text: str, func: Callable[[str], str]) -> str:
    """A new string made of *func* applied to each character."""
    if func is None:
        raise TypeError("a mapping function is required")
    return "".join(_check_char(func(ch), "result") for ch in text)


def map_chars_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of *func* applied to each index and character."""
    if func is None:
        raise TypeError("a mapping function is required")
    return "".join(
        _check_char(func(i, ch), "result") for i, ch in enumerate(text)
    )