"""A singly linked chain of items with cheap appends at both ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class Chain(Generic[T]):
    """Ordered items held in singly linked nodes."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items or ():
            self.append(item)

    def append(self, item: T) -> None:
        """Add item after the last one."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, item: T) -> None:
        """Add item before the first one."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def last(self) -> Optional[T]:
        """The last item, or None when the chain is empty."""
        return self._tail.value if self._tail is not None else None

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call func on every item in order."""
        for item in self:
            func(item)

    def map(self, func: Callable[[T], U]) -> "Chain[U]":
        """A new chain holding func(item) for every item, in order."""
        return Chain(func(item) for item in self)

    def to_list(self) -> List[T]:
        """The items as a list, in order."""
        return list(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Chain({self.to_list()!r})"