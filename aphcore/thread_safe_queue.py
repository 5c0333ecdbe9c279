"""A deque guarded by a lock, used for work distribution between threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class ThreadSafeQueue(Generic[T]):
    """Double-ended queue whose operations are each atomic.

    The pop operations return ``None`` when the queue is empty.
    """

    def __init__(self) -> None:
        self._data: Deque[T] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def push_back(self, value: T) -> None:
        with self._lock:
            self._data.append(value)

    def push_front(self, value: T) -> None:
        with self._lock:
            self._data.appendleft(value)

    def pop_front(self) -> Optional[T]:
        with self._lock:
            return self._data.popleft() if self._data else None

    def pop_back(self) -> Optional[T]:
        with self._lock:
            return self._data.pop() if self._data else None

    def steal(self) -> Optional[T]:
        """Take an item from the back, the end the owner does not work from."""
        with self._lock:
            return self._data.pop() if self._data else None

    def rotate_to_front(self, item: T) -> None:
        """Move ``item`` to the front, inserting it if it is not present."""
        with self._lock:
            try:
                self._data.remove(item)
            except ValueError:
                pass
            self._data.appendleft(item)

    def copy_front_and_rotate_to_back(self) -> Optional[T]:
        """Return the front item after moving it to the back."""
        with self._lock:
            if not self._data:
                return None
            front = self._data.popleft()
            self._data.append(front)
            return front