"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


def _require_callable(name: str, func: Any) -> None:
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {func!r}")


class LinkedList:
    """A singly linked list addressed through its first node."""

    def __init__(self, head: Optional[Node] = None) -> None:
        self.head = head

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Optional[Node]) -> None:
        """Make node the new first node; a missing node changes nothing."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Link node after the current last node."""
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every content to delete, front to back, and empty the list."""
        _require_callable("delete", delete)
        for node in list(self._nodes()):
            delete(node.content)
            node.next = None
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content, starting from the last node."""
        _require_callable("func", func)
        for content in reversed(list(self)):
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> "LinkedList":
        """Return a new list of func applied to every content.

        If func raises, the contents mapped so far are passed to delete and the
        error propagates.
        """
        _require_callable("func", func)
        _require_callable("delete", delete)
        result = LinkedList()
        tail: Optional[Node] = None
        for content in self:
            try:
                node = Node(func(content))
            except Exception:
                result.clear(delete)
                raise
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result