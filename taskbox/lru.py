"""A doubly linked list and a thread-safe LRU cache built on it."""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListItem:
    """A node of :class:`LinkedList`."""

    value: Any
    next: ListItem | None = field(default=None, repr=False)
    prev: ListItem | None = field(default=None, repr=False)


class LinkedList:
    """A doubly linked list whose nodes can be moved and removed in O(1)."""

    def __init__(self) -> None:
        self._front: ListItem | None = None
        self._back: ListItem | None = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        item = self._front
        while item is not None:
            yield item.value
            item = item.next

    def front(self) -> ListItem | None:
        """Return the first node, or None if the list is empty."""
        return self._front

    def back(self) -> ListItem | None:
        """Return the last node, or None if the list is empty."""
        return self._back

    def push_front(self, value: Any) -> ListItem:
        """Insert ``value`` at the front and return its node."""
        return self._link_front(ListItem(value))

    def push_back(self, value: Any) -> ListItem:
        """Insert ``value`` at the back and return its node."""
        item = ListItem(value, prev=self._back)
        if self._back is not None:
            self._back.next = item
        else:
            self._front = item
        self._back = item
        self._length += 1
        return item

    def remove(self, item: ListItem) -> None:
        """Unlink ``item`` from the list."""
        if item.prev is not None:
            item.prev.next = item.next
        else:
            self._front = item.next
        if item.next is not None:
            item.next.prev = item.prev
        else:
            self._back = item.prev
        item.prev = item.next = None
        self._length -= 1

    def move_to_front(self, item: ListItem) -> None:
        """Move ``item`` to the front of the list, keeping the same node."""
        if item is self._front:
            return
        self.remove(item)
        self._link_front(item)

    def _link_front(self, item: ListItem) -> ListItem:
        item.prev = None
        item.next = self._front
        if self._front is not None:
            self._front.prev = item
        else:
            self._back = item
        self._front = item
        self._length += 1
        return item


@dataclass
class _Entry:
    key: Hashable
    value: Any


class LRUCache:
    """A fixed-capacity cache that evicts the least recently used entry."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._lock = threading.Lock()
        self._queue = LinkedList()
        self._items: dict[Hashable, ListItem] = {}

    def set(self, key: Hashable, value: Any) -> bool:
        """Store ``value`` under ``key``; return True if the key was present."""
        with self._lock:
            item = self._items.get(key)
            if item is not None:
                item.value.value = value
                self._queue.move_to_front(item)
                return True
            if len(self._queue) == self._capacity:
                oldest = self._queue.back()
                assert oldest is not None
                self._queue.remove(oldest)
                del self._items[oldest.value.key]
            self._items[key] = self._queue.push_front(_Entry(key, value))
            return False

    def get(self, key: Hashable) -> tuple[Any, bool]:
        """Return ``(value, True)`` for a cached key, ``(None, False)`` otherwise."""
        with self._lock:
            item = self._items.get(key)
            if item is None:
                return None, False
            self._queue.move_to_front(item)
            return item.value.value, True

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._queue = LinkedList()
            self._items = {}