"""Bounded, closable FIFO channel shared between the session and order workers."""

from __future__ import annotations

import threading
import time
from collections import deque
from queue import Empty
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class ChannelClosed(RuntimeError):
    """Raised when putting onto a channel that has been closed."""


class Channel(Generic[T]):
    """A fixed-capacity FIFO with blocking put/get and an explicit close.

    Once closed, ``put`` raises ``ChannelClosed`` and ``get`` keeps returning
    buffered items until drained, then raises ``queue.Empty``.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: Deque[T] = deque()
        self._closed = False
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def put(self, item: T, timeout: float | None = None) -> bool:
        """Append an item, waiting for space; returns False if the timeout elapses first."""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._not_full:
            while True:
                if self._closed:
                    raise ChannelClosed("put on closed channel")
                if len(self._items) < self._capacity:
                    break
                if deadline is None:
                    self._not_full.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._not_full.wait(remaining)
            self._items.append(item)
            self._not_empty.notify()
            return True

    def get(self, block: bool = True, timeout: float | None = None) -> T:
        """Pop the oldest item; raises ``queue.Empty`` once closed and drained."""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._not_empty:
            while not self._items:
                if self._closed or not block:
                    raise Empty
                if deadline is None:
                    self._not_empty.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise Empty
                self._not_empty.wait(remaining)
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def close(self) -> None:
        with self._lock:
            self._closed = True
            self._not_full.notify_all()
            self._not_empty.notify_all()
