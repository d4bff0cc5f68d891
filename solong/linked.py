"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One link of a list: its content and the node after it."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list whose head is its first node."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        for item in reversed(list(items)):
            self.push_front(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: T) -> Node[T]:
        """Insert content at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: T) -> Node[T]:
        """Append content at the end and return its node."""
        node: Node[T] = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node[T]]:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Empty the list, passing each content to delete first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call func on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """Return a new list of func applied to each content.

        If func raises, the contents already produced are passed to delete
        and the exception propagates.
        """
        produced: list[U] = []
        try:
            for content in self:
                produced.append(func(content))
        except BaseException:
            if delete is not None:
                for item in produced:
                    delete(item)
            raise
        return LinkedList(produced)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"