# fdmjc

Building blocks for a compiler of FDMJ, a small Java-like teaching
language. The package holds the data structures that a compiler's passes
share, and the code to write and read instruction lists.

## Modules

- `fdmjc.symbol`: interned symbols (`symbol`, `Symbol.link`, which gives
  the symbol `a$b`), tables whose newer bindings shadow older ones
  (`Table` with `enter`, `look`, `pop`, `dump`) and scoped tables
  (`SymbolTable` with `begin_scope` and `end_scope`).
- `fdmjc.temp`: typed temporaries (`Temp`, `TempType`) created by a
  `TempPool` (`new_temp`, `named_temp`, `reg`, `this`, `new_label`, and
  counter resets), layered temp-to-name maps (`TempMap`), labels
  (`named_label`, `label_name`) and set-like helpers over lists
  (`list_union`, `list_intersect`, `list_diff`, `list_equal`).
- `fdmjc.graph`: directed graphs (`Graph`, `Node`) with edge addition and
  removal, adjacency, degree and a text dump (`Graph.show`).
- `fdmjc.containers`: boolean-vector sets (`bool_union`,
  `bool_intersect`, `bool_equal`, `bool_count`) and a stack of temps
  (`TempStack`).
- `fdmjc.env`: semantic types (`Ty`, `TyKind`, `ty_int`, `ty_float`,
  `ty_array`, `ty_name`) and environment entries (`Field`, `VarEntry`,
  `ClassEntry`, `MethodEntry`).
- `fdmjc.fdmjast`: dataclasses for the FDMJ abstract syntax tree
  (`Prog`, `MainMethod`, `ClassDecl`, `MethodDecl`, `VarDecl`, statements
  such as `IfStm` and `WhileStm`, expressions such as `OpExp` and
  `CallExp`).
- `fdmjc.instr`: instructions (`Oper`, `Label`, `Move`, `Proc`) whose
  assem text holds `` `d0 ``, `` `s0 `` and `` `j0 `` placeholders.
  `render` fills them in for a `Dialect` (`LLVM` spells temps as `rN`,
  `ARM` as their bare name), `annotate` appends the destination and source
  temps, and `print_instrs` writes one instruction per line.
- `fdmjc.blocks`: basic blocks (`Block`, which must start with a label and
  end with an `Oper`) and `trace_schedule`, which lays blocks out between a
  prolog and an epilog and, with `optimize=True`, drops a jump to a single
  block that can follow directly.
- `fdmjc.insxml`: `instrs_to_xml` writes instructions as XML;
  `function_from_xml` and `load_functions` read them back, creating temps
  in a `TempPool`. Malformed documents raise `ValueError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import io
from fdmjc.temp import TempPool, TempType
from fdmjc.instr import Oper, Dialect, print_instrs

pool = TempPool()
a = pool.new_temp(TempType.INT)   # temp 100
b = pool.new_temp(TempType.INT)   # temp 101
out = io.StringIO()
print_instrs(out, [Oper("%`d0 = add i64 %`s0, 1", [b], [a], None)],
             pool.names, Dialect.LLVM)
print(out.getvalue())             # %r101 = add i64 %r100, 1
```

## What it does not do

The package is a library of parts, not a compiler. It has no parser for
FDMJ source, no typed IR tree or translation from the syntax tree, no
printers of syntax trees or IR, no liveness analysis, SSA conversion or
register allocation, and no command to run.