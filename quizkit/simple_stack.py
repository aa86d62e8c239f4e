"""A last-in, first-out stack backed by a list."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when reading from an empty stack."""


class SimpleStack(Generic[T]):
    """A LIFO stack that also tracks a reserved capacity."""

    def __init__(self) -> None:
        self._data: list[T] = []
        self._capacity = 0

    def push(self, item: T) -> None:
        self._data.append(item)
        if len(self._data) > self._capacity:
            self._capacity = max(len(self._data), self._capacity * 2)

    def pop(self) -> T:
        if not self._data:
            raise EmptyStackError("Cannot pop from empty stack")
        return self._data.pop()

    def top(self) -> T:
        if not self._data:
            raise EmptyStackError("Cannot access top of empty stack")
        return self._data[-1]

    def empty(self) -> bool:
        return not self._data

    def size(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        """Remove all items; the reserved capacity is kept."""
        self._data.clear()

    def capacity(self) -> int:
        return self._capacity

    def reserve(self, new_capacity: int) -> None:
        """Ensure capacity is at least new_capacity."""
        if new_capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = max(self._capacity, new_capacity)

    def shrink_to_fit(self) -> None:
        self._capacity = len(self._data)

    def __len__(self) -> int:
        return len(self._data)