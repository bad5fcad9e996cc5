"""Boolean-vector sets and a stack of temps."""

from __future__ import annotations

from typing import Sequence

from fdmjc.temp import Temp


def _check(s1: Sequence[bool], s2: Sequence[bool]) -> None:
    if len(s1) != len(s2):
        raise ValueError("sets must have the same size")


def bool_union(s1: Sequence[bool], s2: Sequence[bool]) -> list[bool]:
    _check(s1, s2)
    return [bool(a or b) for a, b in zip(s1, s2)]


def bool_intersect(s1: Sequence[bool], s2: Sequence[bool]) -> list[bool]:
    _check(s1, s2)
    return [bool(a and b) for a, b in zip(s1, s2)]


def bool_equal(s1: Sequence[bool], s2: Sequence[bool]) -> bool:
    _check(s1, s2)
    return all(bool(a) == bool(b) for a, b in zip(s1, s2))


def bool_count(s: Sequence[bool]) -> int:
    """Number of members set."""
    return sum(1 for x in s if x)


class TempStack:
    """A stack of temps; popping or reading an empty stack is harmless."""

    def __init__(self) -> None:
        self._items: list[Temp] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, temp: Temp) -> None:
        self._items.append(temp)

    def pop(self) -> None:
        if self._items:
            self._items.pop()

    def top(self) -> Temp | None:
        return self._items[-1] if self._items else None