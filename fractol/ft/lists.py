"""A singly linked list with the classic push, walk, clear and map operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], object]]


@dataclass
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list of arbitrary contents."""

    def __init__(self, contents: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for content in contents or ():
            self.push_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the head and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def push_back(self, content: Any) -> Node:
        """Append ``content`` after the last node and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove_first(self, delete: Deleter = None) -> Any:
        """Unlink the head node, pass its content to ``delete`` and return the content."""
        if self.head is None:
            raise IndexError("remove_first from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to ``delete`` from head to tail."""
        while self.head is not None:
            self.remove_first(delete)

    def for_each(self, func: Optional[Callable[[Any], object]]) -> None:
        """Call ``func`` on every content from head to tail."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every content.

        If ``func`` fails, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        for content in self:
            try:
                mapped = func(content)
            except Exception:
                result.clear(delete)
                raise
            result.push_back(mapped)
        return result