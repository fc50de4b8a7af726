"""A fixed-capacity ring buffer used as a sliding window over characters."""

from __future__ import annotations

from typing import Any, Iterator

__all__ = ["CircularBuffer"]


class CircularBuffer:
    """Ring buffer of at most ``size`` items.

    Pushing onto a full buffer overwrites the slot at the write position
    without growing the buffer.
    """

    def __init__(self, size: int = 4) -> None:
        if size < 1:
            raise ValueError("buffer size must be at least 1")
        self._size = size
        self._items: list[Any] = [None] * size
        self._count = 0
        self._first = 0
        self._last = 0

    def push_back(self, item: Any) -> None:
        """Append ``item`` after the last element."""
        self._items[self._last] = item
        self._last = (self._last + 1) % self._size
        if self._count < self._size:
            self._count += 1

    def push_front(self, item: Any) -> None:
        """Insert ``item`` before the first element."""
        self._first = (self._first - 1) % self._size
        self._items[self._first] = item
        if self._count < self._size:
            self._count += 1

    def pop_front(self) -> None:
        """Drop the first element."""
        if not self._count:
            raise IndexError("pop from empty buffer")
        self._first = (self._first + 1) % self._size
        self._count -= 1

    def pop_back(self) -> None:
        """Drop the last element."""
        if not self._count:
            raise IndexError("pop from empty buffer")
        self._last = (self._last - 1) % self._size
        self._count -= 1

    def front(self) -> Any:
        """Return the first element."""
        if not self._count:
            raise IndexError("buffer is empty")
        return self._items[self._first]

    def back(self) -> Any:
        """Return the last element."""
        if not self._count:
            raise IndexError("buffer is empty")
        return self._items[(self._last - 1) % self._size]

    def __getitem__(self, index: int) -> Any:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("buffer index out of range")
        return self._items[(self._first + index) % self._size]

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._items[(self._first + offset) % self._size]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, str):
            return NotImplemented
        return str(self) == other

    __hash__ = None  # type: ignore[assignment]

    def compare(self, offset: int, count: int, text: str) -> bool:
        """Return True if ``count`` items from ``offset`` match the start of ``text``."""
        if offset < 0 or count < 0:
            return False
        if offset + count > self._count or count > len(text):
            return False
        window = "".join(str(self[offset + i]) for i in range(count))
        return window == text[:count]

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return "".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, size={self._size})"

    def max_size(self) -> int:
        """Return the capacity of the buffer."""
        return self._size