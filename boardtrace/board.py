"""Board data shared by the game: stones, points and per-stone storage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Generic, MutableSequence, TypeVar

T = TypeVar("T")

COLOR_TYPE_MAX = 3


class Stone(IntEnum):
    """The content of a board square."""

    WHITE = -1
    NONE = 0
    BLACK = 1


@dataclass
class Point:
    """A board coordinate."""

    x: int = 0
    y: int = 0


class StoneTypeDataStorage(Generic[T]):
    """One value for each stone kind, indexed by the stone."""

    def __init__(self, factory: Callable[[], T] = int) -> None:  # type: ignore[assignment]
        self._data: list[T] = [factory() for _ in range(COLOR_TYPE_MAX)]

    @staticmethod
    def _index(stone: int) -> int:
        index = int(stone) + 1
        if not 0 <= index < COLOR_TYPE_MAX:
            raise IndexError(f"no storage for stone value {stone}")
        return index

    def __getitem__(self, stone: int) -> T:
        return self._data[self._index(stone)]

    def __setitem__(self, stone: int, value: T) -> None:
        self._data[self._index(stone)] = value

    def merge(self, other: "StoneTypeDataStorage[T]") -> None:
        """Add the other storage's values to this one, kind by kind."""
        self._data = [mine + theirs for mine, theirs in zip(self._data, other._data)]  # type: ignore[operator]

    def __iadd__(self, other: "StoneTypeDataStorage[T]") -> "StoneTypeDataStorage[T]":
        self.merge(other)
        return self


def remove_object(item: object, items: MutableSequence) -> bool:
    """Remove the very object from the list by swapping it with the last entry.

    Returns whether it was found. The order of the remaining entries changes.
    """
    for position, candidate in enumerate(items):
        if candidate is item:
            items[position], items[-1] = items[-1], items[position]
            items.pop()
            return True
    return False