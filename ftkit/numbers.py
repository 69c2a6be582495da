"""Conversion between integers and their decimal or based text form."""

from __future__ import annotations

__all__ = ["atoi", "atoi_base", "itoa"]

_BLANKS = " \t\n\r\v\f"


def _split_sign(text: str) -> tuple[int, str]:
    """Skip leading blanks and one sign; return the sign and the rest."""
    rest = text.lstrip(_BLANKS)
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    return sign, rest


def atoi(text: str) -> int:
    """Parse a leading decimal integer; text without digits gives 0."""
    sign, rest = _split_sign(text)
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result * sign


def _digit_value(ch: str, base: int) -> int | None:
    code = ord(ch)
    if base <= 10:
        if ord("0") <= code <= ord("0") + base - 1:
            return code - ord("0")
        return None
    if ord("0") <= code <= ord("9"):
        return code - ord("0")
    if ord("A") <= code <= ord("A") + base - 11:
        return code - ord("A") + 10
    if ord("a") <= code <= ord("a") + base - 11:
        return code - ord("a") + 10
    return None


def atoi_base(text: str, base: int) -> int:
    """Parse a leading integer in *base*, with letters for digits above 9."""
    sign, rest = _split_sign(text)
    result = 0
    for ch in rest:
        digit = _digit_value(ch, base)
        if digit is None:
            break
        result = result * base + digit
    return result * sign


def itoa(n: int) -> str:
    """Decimal text of *n*, with a leading minus for negatives."""
    if n == 0:
        return "0"
    digits = []
    value = -n if n < 0 else n
    while value:
        value, digit = divmod(value, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))