"""Assembly-like instructions for the ARM and LLVM back ends, and their text form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence, TextIO, Union

from fdmjc.symbol import Symbol
from fdmjc.temp import Temp, TempMap


class Dialect(Enum):
    """Target whose operand spelling is used when rendering instructions."""

    ARM = "arm"
    LLVM = "llvm"

    @property
    def temp_prefix(self) -> str:
        return "r" if self is Dialect.LLVM else ""


@dataclass(eq=False)
class Oper:
    """An operation; ``jumps`` lists its branch targets, None if it never jumps."""

    assem: str
    dst: list[Temp] = field(default_factory=list)
    src: list[Temp] = field(default_factory=list)
    jumps: list[Symbol] | None = None


@dataclass(eq=False)
class Label:
    assem: str
    label: Symbol


@dataclass(eq=False)
class Move:
    assem: str
    dst: list[Temp] = field(default_factory=list)
    src: list[Temp] = field(default_factory=list)


Instr = Union[Oper, Label, Move]


@dataclass
class Proc:
    prolog: str
    body: list[Instr]
    epilog: str


def _temp_name(names: TempMap, temp: Temp) -> str:
    name = names.look(temp)
    if name is None:
        raise KeyError(f"temp {temp.num} has no name")
    return name


def _nth(items: Sequence | None, index: int, what: str):
    if not items or index >= len(items):
        raise ValueError(f"no {what} operand {index}")
    return items[index]


def _operands(instr: Instr) -> tuple[list[Temp], list[Temp], list[Symbol] | None]:
    if isinstance(instr, Oper):
        return instr.dst, instr.src, instr.jumps
    if isinstance(instr, Move):
        return instr.dst, instr.src, None
    if isinstance(instr, Label):
        return [], [], None
    raise TypeError(f"not an instruction: {instr!r}")


def _expand(
    assem: str,
    dst: Sequence[Temp],
    src: Sequence[Temp],
    jumps: Sequence[Symbol] | None,
    names: TempMap,
    prefix: str,
) -> str:
    out: list[str] = []
    i, n = 0, len(assem)
    while i < n:
        ch = assem[i]
        if ch != "`":
            out.append(ch)
            i += 1
            continue
        kind = assem[i + 1] if i + 1 < n else ""
        if kind == "`":
            out.append("`")
            i += 2
            continue
        if kind not in ("s", "d", "j"):
            raise ValueError(f"bad operand placeholder in {assem!r}")
        j = i + 2
        while j < n and assem[j].isdigit():
            j += 1
        index = int(assem[i + 2 : j] or 0)
        i = j
        if kind == "s":
            out.append(prefix + _temp_name(names, _nth(src, index, "source")))
        elif kind == "d":
            out.append(prefix + _temp_name(names, _nth(dst, index, "destination")))
        else:
            if jumps is None:
                raise ValueError(f"jump placeholder without targets in {assem!r}")
            out.append(_nth(jumps, index, "jump").name)
    return "".join(out)


def render(instr: Instr, names: TempMap, dialect: Dialect = Dialect.ARM) -> str:
    """Fill the placeholders of ``instr``'s assem text with temp and label names."""
    dst, src, jumps = _operands(instr)
    return _expand(instr.assem, dst, src, jumps, names, dialect.temp_prefix)


def annotate(instr: Instr, names: TempMap, dialect: Dialect = Dialect.ARM) -> str:
    """Render ``instr`` followed by its destination and source temps."""
    dst, src, _ = _operands(instr)
    parts = [render(instr, names, dialect), "; d: "]
    if dst:
        parts.append(", ".join(f"r{_temp_name(names, t)}" for t in dst))
        parts.append("; ")
    parts.append("s: ")
    parts.append(", ".join(f"r{_temp_name(names, t)}" for t in src))
    return "".join(parts)


def print_instrs(
    out: TextIO, instrs: Iterable[Instr], names: TempMap, dialect: Dialect = Dialect.ARM
) -> None:
    """Write one rendered instruction per line, then a blank line."""
    for instr in instrs:
        out.write(render(instr, names, dialect))
        out.write("\n")
    out.write("\n")