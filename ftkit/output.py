"""Writing characters, strings and numbers to text streams.

Every function writes to *stream*, which defaults to standard output, and
returns the number of characters written.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from ftkit.numbers import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> int:
    """Write the single character *c*."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    _target(stream).write(c)
    return 1


def put_str(text: str, stream: Optional[TextIO] = None) -> int:
    """Write *text* as it is."""
    _target(stream).write(text)
    return len(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> int:
    """Write *text* followed by a newline."""
    out = _target(stream)
    out.write(text)
    out.write("\n")
    return len(text) + 1


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal form of the integer *n*."""
    return put_str(itoa(n), stream)