"""A singly linked list of nodes that each hold one content value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any = None
    next: Optional["Node"] = None

    def delete(self, delete: Deleter) -> None:
        """Release the content through *delete* and detach the node.

        Nothing happens when *delete* is None.
        """
        if delete is None:
            return
        delete(self.content)
        self.next = None


class LinkedList:
    """A singly linked list reached through its first node, ``head``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items or ():
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of each node in order."""
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def push_front(self, node: Optional[Node]) -> None:
        """Make *node* the new head; whatever followed it before is dropped."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Attach *node*, and any nodes after it, at the end of the list."""
        if node is None:
            return
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, delete: Deleter) -> None:
        """Delete every node through *delete* and leave the list empty."""
        node = self.head
        while node is not None:
            following = node.next
            node.delete(delete)
            node = following
        self.head = None

    def iterate(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call *f* on the content of each node in order; None does nothing."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter) -> LinkedList:
        """Return a new list holding ``f(content)`` for each node.

        If *f* raises part-way, the nodes built so far are released through
        *delete* and the error propagates.
        """
        if not callable(f):
            raise TypeError("f must be callable")
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result