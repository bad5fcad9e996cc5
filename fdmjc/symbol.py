"""Interned symbols and scoped binding tables."""

from __future__ import annotations

from typing import Any, Callable


class Symbol:
    """A name that compares by identity; obtain shared instances via ``symbol``."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name

    def link(self, other: Symbol) -> Symbol:
        """Return the interned symbol ``self$other``."""
        return symbol(f"{self.name}${other.name}")


_interned: dict[str, Symbol] = {}


def symbol(name: str) -> Symbol:
    """Return the unique symbol for ``name``, creating it on first use."""
    found = _interned.get(name)
    if found is None:
        found = _interned[name] = Symbol(name)
    return found


class Table:
    """A table whose newer bindings shadow older ones until popped."""

    def __init__(self) -> None:
        self._bindings: dict[Any, list[Any]] = {}
        self._stack: list[tuple[Any, Any]] = []

    def __len__(self) -> int:
        return len(self._stack)

    def __contains__(self, key: Any) -> bool:
        return key in self._bindings

    def enter(self, key: Any, value: Any) -> None:
        """Bind ``key`` to ``value``, hiding any earlier binding of ``key``."""
        self._bindings.setdefault(key, []).append(value)
        self._stack.append((key, value))

    def look(self, key: Any) -> Any:
        """Return the newest value bound to ``key``, or None."""
        values = self._bindings.get(key)
        return values[-1] if values else None

    def pop(self) -> Any:
        """Remove the most recent binding and return its key."""
        if not self._stack:
            raise IndexError("pop from an empty table")
        key, _ = self._stack.pop()
        values = self._bindings[key]
        values.pop()
        if not values:
            del self._bindings[key]
        return key

    def dump(self, show: Callable[[Any, Any], None]) -> None:
        """Call ``show(key, value)`` for every binding, newest first."""
        for key, value in reversed(self._stack):
            show(key, value)


_MARK = Symbol("<mark>")


class SymbolTable(Table):
    """A table with nested scopes."""

    def begin_scope(self) -> None:
        self.enter(_MARK, None)

    def end_scope(self) -> None:
        """Drop every binding made since the matching ``begin_scope``."""
        while self.pop() is not _MARK:
            pass