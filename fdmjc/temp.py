"""Temporaries, labels, temp-name maps and list helpers over them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TextIO, TypeVar

from fdmjc.symbol import Symbol, Table, symbol

T = TypeVar("T")


class TempType(Enum):
    INT = "int"
    FLOAT = "float"


@dataclass(eq=False)
class Temp:
    """A temporary; identity is what distinguishes temps."""

    num: int
    type: TempType


class TempMap:
    """Maps temps to names, falling back to an underlying map."""

    def __init__(self, under: TempMap | None = None, *, _table: Table | None = None) -> None:
        self._table = Table() if _table is None else _table
        self.under = under

    def enter(self, temp: Temp, name: str) -> None:
        self._table.enter(temp, name)

    def look(self, temp: Temp) -> str | None:
        """Return the name of ``temp`` here or in an underlying map."""
        name = self._table.look(temp)
        if name is not None:
            return name
        if self.under is not None:
            return self.under.look(temp)
        return None

    def layer(self, under: TempMap | None) -> TempMap:
        """Return a map that consults this map's layers, then ``under``."""
        below = self.under.layer(under) if self.under is not None else under
        return TempMap(below, _table=self._table)

    def dump(self, out: TextIO) -> None:
        def show(temp: Temp, _name: str) -> None:
            out.write(f"t{temp.num}, type={temp.type.value}\n")

        self._table.dump(show)
        if self.under is not None:
            out.write("---------\n")
            self.under.dump(out)


class TempPool:
    """Creates temps, registers and labels, and names them in ``names``."""

    FIRST_TEMP = 100
    THIS_TEMP = 99

    def __init__(self) -> None:
        self.names = TempMap()
        self._temps: dict[int, Temp] = {}
        self._regs: dict[str, Temp] = {}
        self._next_temp = self.FIRST_TEMP
        self._next_label = 0

    def new_temp(self, type_: TempType) -> Temp:
        num = self._next_temp
        self._next_temp += 1
        existing = self._temps.get(num)
        if existing is not None:
            existing.type = type_
            return existing
        temp = self._temps[num] = Temp(num, type_)
        self.names.enter(temp, str(num))
        return temp

    def named_temp(self, num: int, type_: TempType) -> Temp:
        """Return the temp numbered ``num``, creating it if needed."""
        existing = self._temps.get(num)
        if existing is not None:
            existing.type = type_
            return existing
        temp = self._temps[num] = Temp(num, type_)
        if num >= self._next_temp:
            self._next_temp = num + 1
        self.names.enter(temp, str(num))
        return temp

    def reg(self, num: int, type_: TempType) -> Temp:
        """Return the machine register ``rN`` (int) or ``sN`` (float)."""
        name = f"{'r' if type_ is TempType.INT else 's'}{num}"
        existing = self._regs.get(name)
        if existing is not None:
            existing.type = type_
            return existing
        temp = self._regs[name] = Temp(num, type_)
        self.names.enter(temp, name)
        return temp

    def this(self) -> Temp:
        return self.named_temp(self.THIS_TEMP, TempType.INT)

    def reset_temps(self) -> None:
        self._next_temp = self.FIRST_TEMP

    def reset_labels(self) -> None:
        self._next_label = 0

    def new_label(self, prefix: str = "L") -> Symbol:
        name = f"{prefix}{self._next_label}"
        self._next_label += 1
        return named_label(name)


def named_label(name: str) -> Symbol:
    return symbol(name)


def label_name(label: Symbol) -> str:
    return label.name


def list_union(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Add each item of ``b`` missing from ``a`` to the front."""
    result = list(a)
    for item in b:
        if item not in result:
            result.insert(0, item)
    return result


def list_intersect(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Items of ``a`` also in ``b``, in reverse order of ``a``."""
    return [item for item in reversed(a) if item in b]


def list_diff(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Items of ``a`` not in ``b``, in reverse order of ``a``."""
    return [item for item in reversed(a) if item not in b]


def list_equal(a: Sequence[T], b: Sequence[T]) -> bool:
    """True when both hold the same items, ignoring order."""
    return not list_diff(a, b) and not list_diff(b, a)