"""Small data-structure designs: time-keyed store, trip statistics, queue and map."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque


class TimeMap:
    """Key-value store that keeps every value with the timestamp it was set at.

    Timestamps for a key are expected to be set in increasing order.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[tuple[int, str]]] = {}

    def set(self, key: str, value: str, timestamp: int) -> None:
        """Record ``value`` for ``key`` at ``timestamp``."""
        self._entries.setdefault(key, []).append((timestamp, value))

    def get(self, key: str, timestamp: int) -> str:
        """Return the value set most recently at or before ``timestamp``, or ""."""
        entries = self._entries.get(key)
        if not entries:
            return ""
        index = bisect_right(entries, timestamp, key=lambda entry: entry[0])
        return entries[index - 1][1] if index else ""


class UndergroundSystem:
    """Track passenger check-ins and check-outs and average travel times per route."""

    def __init__(self) -> None:
        self._check_ins: dict[int, tuple[str, int]] = {}
        self._routes: dict[tuple[str, str], tuple[int, int]] = {}

    def check_in(self, passenger_id: int, station_name: str, t: int) -> None:
        """Record that a passenger entered ``station_name`` at time ``t``."""
        self._check_ins[passenger_id] = (station_name, t)

    def check_out(self, passenger_id: int, station_name: str, t: int) -> None:
        """Record that a passenger left at ``station_name`` at time ``t``."""
        try:
            start, started_at = self._check_ins[passenger_id]
        except KeyError:
            raise KeyError(f"passenger {passenger_id} has not checked in") from None
        total, count = self._routes.get((start, station_name), (0, 0))
        self._routes[(start, station_name)] = (total + t - started_at, count + 1)

    def get_average_time(self, start_station: str, end_station: str) -> float:
        """Return the mean travel time of completed trips between two stations."""
        try:
            total, count = self._routes[(start_station, end_station)]
        except KeyError:
            raise KeyError(
                f"no trips from {start_station!r} to {end_station!r}"
            ) from None
        return total / count


class CircularQueue:
    """Bounded FIFO queue; ``front`` and ``rear`` return -1 when it is empty."""

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = k
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> bool:
        """Append ``value``; return False if the queue is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def dequeue(self) -> bool:
        """Drop the front value; return False if the queue is empty."""
        if not self._items:
            return False
        self._items.popleft()
        return True

    def front(self) -> int:
        return self._items[0] if self._items else -1

    def rear(self) -> int:
        return self._items[-1] if self._items else -1

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)


MAX_KEY = 10**6


class ArrayHashMap:
    """Integer map for keys in ``0..MAX_KEY``; ``get`` returns -1 for absent keys."""

    def __init__(self) -> None:
        self._values: dict[int, int] = {}

    @staticmethod
    def _check(key: int) -> None:
        if not 0 <= key <= MAX_KEY:
            raise KeyError(f"key {key} is outside 0..{MAX_KEY}")

    def put(self, key: int, value: int) -> None:
        self._check(key)
        self._values[key] = value

    def get(self, key: int) -> int:
        self._check(key)
        return self._values.get(key, -1)

    def remove(self, key: int) -> None:
        self._check(key)
        self._values.pop(key, None)