"""A growable sequence with an explicit capacity and an optional hard limit."""

from __future__ import annotations

from typing import Any, Iterator

from .logger import get_logger

_log = get_logger()


class CapacityError(Exception):
    """Raised when a vector cannot grow to hold another element."""


class BoundedVector:
    """Sequence that doubles its capacity as it fills, up to a maximum."""

    def __init__(self, capacity_initial: int = 0, capacity_limit_max: int = 0) -> None:
        if capacity_initial < 0 or capacity_limit_max < 0:
            raise ValueError("capacities must not be negative")
        if capacity_limit_max and capacity_initial > capacity_limit_max:
            _log.warning("Clamping vector initial capacity to its max capacity limit")
            capacity_initial = capacity_limit_max
        self._items: list[Any] = []
        self._capacity = capacity_initial
        self._limit = capacity_limit_max

    @property
    def capacity_limit_max(self) -> int:
        """The hard capacity limit, or 0 when unlimited."""
        return self._limit

    def capacity(self) -> int:
        """Number of elements the vector can hold before it grows."""
        return self._capacity

    def append(self, value: Any) -> None:
        """Add ``value`` at the end, growing if needed."""
        size = len(self._items)
        if size >= self._capacity:
            if self._limit and size >= self._limit:
                raise CapacityError("pushing to vector failed: max capacity reached")
            self._grow(1 if self._capacity == 0 else self._capacity * 2)
        self._items.append(value)

    def _grow(self, new_capacity: int) -> None:
        if self._limit and new_capacity > self._limit:
            _log.warning("Vector resize attempt to a size bigger than max capacity, clamping it")
            new_capacity = self._limit
        if new_capacity <= self._capacity:
            raise CapacityError("won't resize vector to a capacity smaller or equal to the current one")
        self._capacity = new_capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"BoundedVector({self._items!r}, capacity={self._capacity}, limit={self._limit})"