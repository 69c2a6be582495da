"""Fixed-capacity character buffers with NUL-terminated string semantics.

A :class:`StringBuffer` created for *size* characters holds ``size + 1``
cells, the last of which is room for the terminating NUL.  Its string value
runs up to the first NUL cell.  Writing more than the buffer can hold raises
``ValueError``.
"""

from __future__ import annotations

__all__ = ["StringBuffer", "duplicate"]

_NUL = "\0"


def _c_str(text: str) -> str:
    """The part of *text* before its first NUL character."""
    return text.split(_NUL, 1)[0]


class StringBuffer:
    """A character buffer with room for *size* characters and a terminator."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._cells = [_NUL] * (size + 1)

    @property
    def capacity(self) -> int:
        """Largest string length the buffer can hold."""
        return len(self._cells) - 1

    def _put(self, start: int, text: str) -> None:
        """Write *text* at *start* followed by a NUL terminator."""
        end = start + len(text)
        if end > self.capacity:
            raise ValueError(
                f"{end} characters do not fit in a buffer of capacity {self.capacity}"
            )
        self._cells[start:end] = list(text)
        self._cells[end] = _NUL

    def cat(self, text: str) -> "StringBuffer":
        """Append *text* to the current string."""
        self._put(len(self), _c_str(text))
        return self

    def ncat(self, text: str, count: int) -> "StringBuffer":
        """Append at most *count* characters of *text*."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return self.cat(_c_str(text)[:count])

    def lcat(self, text: str, size: int) -> int:
        """Size-bounded append treating the buffer as *size* cells long.

        At most ``size - len(self) - 1`` characters are appended and the
        result stays terminated.  Returns the length of the string that a
        large enough buffer would have held: the current length (capped at
        *size*) plus the length of *text*.
        """
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if size > len(self._cells):
            raise ValueError(
                f"size {size} exceeds the buffer's {len(self._cells)} cells"
            )
        text = _c_str(text)
        start = min(len(self), size)
        if start == size:
            return size + len(text)
        self._put(start, text[: size - start - 1])
        return start + len(text)

    def copy(self, text: str) -> "StringBuffer":
        """Replace the contents with *text*."""
        self._put(0, _c_str(text))
        return self

    def ncopy(self, text: str, n: int) -> "StringBuffer":
        """Clear the first *n* cells, then copy at most *n* characters of *text*.

        When *text* has *n* characters or more no terminator is written, so
        whatever followed in the buffer stays part of the string.
        """
        if n < 0:
            raise ValueError(f"count must not be negative, got {n}")
        if n > len(self._cells):
            raise ValueError(f"count {n} exceeds the buffer's {len(self._cells)} cells")
        chunk = _c_str(text)[:n]
        self._cells[:n] = [_NUL] * n
        self._cells[: len(chunk)] = list(chunk)
        return self

    def clear(self) -> None:
        """Blank out the current string."""
        length = len(self)
        self._cells[:length] = [_NUL] * length

    def __str__(self) -> str:
        return _c_str("".join(self._cells))

    def __len__(self) -> int:
        return len(str(self))

    def __repr__(self) -> str:
        return f"StringBuffer({str(self)!r}, capacity={self.capacity})"


def duplicate(text: str) -> StringBuffer:
    """A new buffer just large enough to hold a copy of *text*."""
    text = _c_str(text)
    return StringBuffer(len(text)).copy(text)