"""Character classification, case conversion and small integer helpers.

Every character function accepts either a one-character string or an
integer character code.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_lower",
    "to_upper",
    "int_abs",
    "int_pow",
]


def _code(ch: CharLike) -> int:
    """Return the integer code of *ch*, a single character or an int."""
    if isinstance(ch, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(ch, int):
        return ch
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {len(ch)}")
        return ord(ch)
    raise TypeError(f"expected a character or an integer code, not {type(ch).__name__}")


def is_alpha(ch: CharLike) -> bool:
    """True for ASCII letters a-z and A-Z."""
    code = _code(ch)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(ch: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(ch) <= ord("9")


def is_alnum(ch: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(ch) or is_digit(ch)


def is_ascii(ch: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(ch) < 128


def is_print(ch: CharLike) -> bool:
    """True for printable ASCII, codes 32 to 126."""
    return 31 < _code(ch) < 127


def _convert(ch: CharLike, low: str, high: str, shift: int) -> CharLike:
    code = _code(ch)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(ch, str) else code


def to_lower(ch: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    return _convert(ch, "A", "Z", 32)


def to_upper(ch: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    return _convert(ch, "a", "z", -32)


def int_abs(a: int) -> int:
    """Absolute value of an integer."""
    return -a if a < 0 else a


def int_pow(num: int, power: int) -> int:
    """Raise *num* to a non-negative integer *power*; powers of 0 or less give 1."""
    if power <= 0:
        return 1
    result = num
    reached = 1
    while reached < power // 2:
        result *= result
        reached *= 2
    while reached < power:
        result *= num
        reached += 1
    return result