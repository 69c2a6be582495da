"""A B-tree of order 4 holding lines ordered by their depth value ``z``.

Lines with equal ``z`` keep their insertion order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

__all__ = ["ORDER", "Point", "Line", "BTree"]

ORDER = 4


@dataclass
class Point:
    """A map point with a colour."""

    x: int = 0
    y: int = 0
    z: int = 0
    col: int = 0


@dataclass
class Line:
    """A segment between two points, keyed by its depth *z*."""

    p1: Optional[Point] = None
    p2: Optional[Point] = None
    z: int = 0


@dataclass
class _Node:
    keys: List[Line] = field(default_factory=list)
    children: List[Optional["_Node"]] = field(default_factory=list)


def _search_pos(key: Line, keys: List[Line]) -> int:
    pos = 0
    while pos < len(keys) and key.z >= keys[pos].z:
        pos += 1
    return pos


def _insert(node: Optional[_Node], key: Line) -> Optional[Tuple[Line, Optional[_Node]]]:
    """Insert below *node*; return the key and right node to push up on a split."""
    if node is None:
        return key, None
    pos = _search_pos(key, node.keys)
    pushed = _insert(node.children[pos], key)
    if pushed is None:
        return None
    new_key, new_node = pushed
    node.keys.insert(pos, new_key)
    node.children.insert(pos + 1, new_node)
    if len(node.keys) < ORDER:
        return None
    middle = (ORDER - 1) // 2
    up_key = node.keys[middle]
    right = _Node(node.keys[middle + 1 :], node.children[middle + 1 :])
    node.keys = node.keys[:middle]
    node.children = node.children[: middle + 1]
    return up_key, right


class BTree:
    """B-tree of :class:`Line` objects ordered by ``z``."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, line: Line) -> None:
        """Add *line* to the tree."""
        pushed = _insert(self._root, line)
        if pushed is not None:
            up_key, right = pushed
            self._root = _Node([up_key], [self._root, right])

    def _walk(self, node: Optional[_Node], depth: int) -> Iterator[Tuple[int, Line]]:
        if node is None:
            return
        for child, key in zip(node.children, node.keys):
            yield from self._walk(child, depth + 1)
            yield depth, key
        yield from self._walk(node.children[len(node.keys)], depth + 1)

    def __iter__(self) -> Iterator[Line]:
        for _, line in self._walk(self._root, 1):
            yield line

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def clear(self) -> None:
        """Remove every line."""
        self._root = None

    def format_in_order(self) -> str:
        """One line per key in sorted order, indented by tabs to its node depth."""
        return "".join(
            "\t" * depth + f"{line.z}\n" for depth, line in self._walk(self._root, 1)
        )