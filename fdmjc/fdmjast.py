"""Abstract syntax tree of FDMJ source programs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class Pos:
    line: int
    pos: int


class DataType(Enum):
    INT = "int"
    FLOAT = "float"
    ID = "class"
    INT_ARR = "int[]"
    FLOAT_ARR = "float[]"


@dataclass
class Type:
    """A declared type; ``id`` names the class when ``t`` is ``DataType.ID``."""

    pos: Pos | None
    t: DataType
    id: str | None = None


class BinOp(Enum):
    AND = "&&"
    OR = "||"
    LESS = "<"
    LE = "<="
    GREATER = ">"
    GE = ">="
    EQ = "=="
    NE = "!="
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIV = "/"


@dataclass
class Exp:
    """Base of all expressions."""

    pos: Pos | None


@dataclass
class Stm:
    """Base of all statements."""

    pos: Pos | None


@dataclass
class VarDecl:
    """A variable declaration with optional initial values."""

    pos: Pos | None
    t: Type
    v: str
    init: list[Exp] = field(default_factory=list)


@dataclass
class Formal:
    pos: Pos | None
    t: Type
    id: str


@dataclass
class MethodDecl:
    pos: Pos | None
    t: Type
    id: str
    formals: list[Formal] = field(default_factory=list)
    var_decls: list[VarDecl] = field(default_factory=list)
    stms: list[Stm] = field(default_factory=list)


@dataclass
class ClassDecl:
    pos: Pos | None
    id: str
    parent_id: str | None = None
    var_decls: list[VarDecl] = field(default_factory=list)
    method_decls: list[MethodDecl] = field(default_factory=list)


@dataclass
class MainMethod:
    pos: Pos | None
    var_decls: list[VarDecl] = field(default_factory=list)
    stms: list[Stm] = field(default_factory=list)


@dataclass
class Prog:
    pos: Pos | None
    main: MainMethod | None
    classes: list[ClassDecl] = field(default_factory=list)


# Statements


@dataclass
class NestedStm(Stm):
    stms: list[Stm] = field(default_factory=list)


@dataclass
class IfStm(Stm):
    e: Exp
    s1: Stm | None
    s2: Stm | None = None


@dataclass
class WhileStm(Stm):
    e: Exp
    s: Stm | None = None


@dataclass
class AssignStm(Stm):
    arr: Exp
    value: Exp


@dataclass
class ArrayInit(Stm):
    arr: Exp
    init_values: list[Exp] = field(default_factory=list)


@dataclass
class CallStm(Stm):
    obj: Exp
    fun: str
    args: list[Exp] = field(default_factory=list)


@dataclass
class Continue(Stm):
    pass


@dataclass
class Break(Stm):
    pass


@dataclass
class Return(Stm):
    e: Exp | None = None


@dataclass
class Putnum(Stm):
    e: Exp | None = None


@dataclass
class Putch(Stm):
    e: Exp | None = None


@dataclass
class Putarray(Stm):
    e1: Exp
    e2: Exp


@dataclass
class Starttime(Stm):
    pass


@dataclass
class Stoptime(Stm):
    pass


# Expressions


@dataclass
class OpExp(Exp):
    left: Exp
    op: BinOp
    right: Exp


@dataclass
class ArrayExp(Exp):
    arr: Exp
    index: Exp


@dataclass
class CallExp(Exp):
    obj: Exp
    fun: str
    args: list[Exp] = field(default_factory=list)


@dataclass
class ClassVarExp(Exp):
    obj: Exp
    var: str


@dataclass
class NumConst(Exp):
    num: float


@dataclass
class BoolConst(Exp):
    b: bool


@dataclass
class LengthExp(Exp):
    e: Exp


@dataclass
class IdExp(Exp):
    id: str


@dataclass
class ThisExp(Exp):
    pass


@dataclass
class NewIntArrExp(Exp):
    size: Exp


@dataclass
class NewFloatArrExp(Exp):
    size: Exp


@dataclass
class NewObjExp(Exp):
    id: str


@dataclass
class NotExp(Exp):
    e: Exp


@dataclass
class MinusExp(Exp):
    e: Exp


@dataclass
class EscExp(Exp):
    stms: list[Stm]
    exp: Exp


@dataclass
class Getnum(Exp):
    pass


@dataclass
class Getch(Exp):
    pass


@dataclass
class Getarray(Exp):
    arr: Exp