"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One element of a LinkedList."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list built from Node objects."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for content in contents:
            self.push_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Empty the list, passing each content to ``delete`` first."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        tail: Node | None = None
        for content in self:
            try:
                value = func(content)
            except BaseException:
                result.clear(delete)
                raise
            node = Node(value)
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result