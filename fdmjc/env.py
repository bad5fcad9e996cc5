"""Types and environment entries used during semantic analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fdmjc.symbol import Symbol, SymbolTable


class TyKind(Enum):
    INT = "int"
    FLOAT = "float"
    ARRAY = "vector"
    NAME = "class"
    VOID = "void"


@dataclass(frozen=True)
class Ty:
    """A source-language type: a scalar, an array of ``element`` or a class ``name``."""

    kind: TyKind
    element: Ty | None = None
    name: Symbol | None = None

    def __str__(self) -> str:
        if self.kind is TyKind.ARRAY:
            return f"{self.kind.value}<{self.element}>"
        if self.kind is TyKind.NAME:
            return f"{self.kind.value} {self.name.name}"
        return self.kind.value


_INT = Ty(TyKind.INT)
_FLOAT = Ty(TyKind.FLOAT)


def ty_int() -> Ty:
    return _INT


def ty_float() -> Ty:
    return _FLOAT


def ty_array(element: Ty) -> Ty:
    return Ty(TyKind.ARRAY, element=element)


def ty_name(sym: Symbol) -> Ty:
    return Ty(TyKind.NAME, name=sym)


@dataclass
class Field:
    name: Symbol
    ty: Ty


@dataclass
class VarEntry:
    vd: Any
    ty: Ty
    tmp: Any


@dataclass
class ClassEntry:
    """A class: its declaration, parent name, status and member tables."""

    cd: Any
    parent: Symbol | None
    status: Any
    vtbl: SymbolTable = field(default_factory=SymbolTable)
    mtbl: SymbolTable = field(default_factory=SymbolTable)


@dataclass
class MethodEntry:
    """A method: its declaration, defining class, return type and formals."""

    md: Any
    origin: Symbol | None
    ret: Ty
    fields: list[Field] = field(default_factory=list)