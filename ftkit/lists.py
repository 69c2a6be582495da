"""A singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front insertion, appending and mapping."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def append(self, content: Any) -> Node:
        """Add *content* at the end and return its node."""
        node = Node(content)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def for_each(self, func: Callable[[Node], Any]) -> None:
        """Call *func* on every node, front to back."""
        for node in list(self._nodes()):
            func(node)

    def map(self, func: Callable[[Node], Optional[Node]]) -> "LinkedList":
        """Build a new list from *func* applied to a fresh copy of each node.

        Raises ValueError if *func* returns no node for some element.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        for node in self._nodes():
            mapped = func(Node(node.content))
            if mapped is None:
                raise ValueError("mapping function returned no node")
            mapped.next = None
            if tail is None:
                result.head = mapped
            else:
                tail.next = mapped
            tail = mapped
        return result

    def clear(self, deleter: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing contents to *deleter* from back to front."""
        nodes = list(self._nodes())
        self.head = None
        if deleter is not None:
            for node in reversed(nodes):
                deleter(node.content)

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())