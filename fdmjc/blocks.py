"""Basic blocks and trace scheduling of instruction lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from fdmjc.instr import Instr, Label, Oper
from fdmjc.symbol import Symbol


@dataclass(eq=False)
class Block:
    """A basic block: starts with a label and ends with a jump or return."""

    instrs: list[Instr]
    label: Symbol = field(init=False)
    succs: list[Symbol] = field(init=False)

    def __post_init__(self) -> None:
        self.instrs = list(self.instrs)
        if not self.instrs or not isinstance(self.instrs[0], Label):
            raise ValueError("a block must start with a label")
        last = self.instrs[-1]
        if not isinstance(last, Oper):
            raise ValueError("a block must end with an operation")
        self.label = self.instrs[0].label
        self.succs = list(last.jumps) if last.jumps else []


def trace_schedule(
    blocks: Sequence[Block],
    prolog: Iterable[Instr] = (),
    epilog: Iterable[Instr] = (),
    optimize: bool = False,
) -> list[Instr]:
    """Lay out ``blocks`` between ``prolog`` and ``epilog``.

    Blocks appear in order. With ``optimize``, a block ending in a jump to a
    single not-yet-placed block is followed directly by that block and the
    jump is dropped.
    """
    by_label = {block.label: block for block in blocks}
    traced: set[Symbol] = set()
    result = list(prolog)
    for block in blocks:
        if block.label in traced:
            continue
        current = block
        while True:
            traced.add(current.label)
            *body, last = current.instrs
            result.extend(body)
            follow = None
            if optimize and last.jumps and len(last.jumps) == 1:
                candidate = by_label.get(last.jumps[0])
                if candidate is not None and candidate.label not in traced:
                    follow = candidate
            if follow is None:
                result.append(last)
                break
            current = follow
    result.extend(epilog)
    return result