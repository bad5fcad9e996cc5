import io

import pytest

from fdmjc.instr import Dialect, Label, Move, Oper, Proc, annotate, print_instrs, render
from fdmjc.temp import Temp, TempPool, TempType, named_label


@pytest.fixture
def pool():
    return TempPool()


def test_render_arm_uses_plain_names(pool):
    a = pool.named_temp(100, TempType.INT)
    b = pool.named_temp(101, TempType.INT)
    instr = Oper("add `d0, `s0, `s1", [a], [b, a])
    assert render(instr, pool.names, Dialect.ARM) == "add 100, 101, 100"


def test_render_llvm_prefixes_temps(pool):
    a = pool.named_temp(100, TempType.INT)
    b = pool.named_temp(101, TempType.INT)
    instr = Oper("%`d0 = add i64 %`s0, 1", [a], [b])
    assert render(instr, pool.names, Dialect.LLVM) == "%r100 = add i64 %r101, 1"


def test_render_register_name(pool):
    r = pool.reg(3, TempType.INT)
    instr = Move("mov `d0, #0", [r], [])
    assert render(instr, pool.names) == f"mov {pool.names.look(r)}, #0"


def test_render_jump_label(pool):
    lab = named_label("Lx_jump")
    instr = Oper("br label %`j0", jumps=[lab])
    out = render(instr, pool.names, Dialect.LLVM)
    assert out.endswith(lab.name)
    assert "`" not in out


def test_render_escaped_backquote(pool):
    assert render(Oper("a``b"), pool.names) == "a`b"


def test_render_label(pool):
    lab = named_label("Lblock")
    instr = Label(f"{lab.name}:", lab)
    assert render(instr, pool.names) == instr.assem


def test_unknown_placeholder_raises(pool):
    with pytest.raises(ValueError):
        render(Oper("`x0"), pool.names)


def test_trailing_backquote_raises(pool):
    with pytest.raises(ValueError):
        render(Oper("abc`"), pool.names)


def test_missing_source_raises(pool):
    a = pool.named_temp(100, TempType.INT)
    with pytest.raises(ValueError):
        render(Oper("`s1", [], [a]), pool.names)


def test_jump_without_targets_raises(pool):
    with pytest.raises(ValueError):
        render(Oper("b `j0"), pool.names)


def test_unnamed_temp_raises(pool):
    with pytest.raises(KeyError):
        render(Oper("`d0", [Temp(5, TempType.INT)]), pool.names)


def test_annotate_lists_operands(pool):
    a = pool.named_temp(100, TempType.INT)
    b = pool.named_temp(101, TempType.INT)
    instr = Oper("`d0 = `s0", [a], [b])
    assert annotate(instr, pool.names, Dialect.LLVM) == "r100 = r101; d: r100; s: r101"


def test_annotate_without_operands_starts_with_render(pool):
    instr = Oper("ret i64 0")
    text = annotate(instr, pool.names)
    assert text.startswith(render(instr, pool.names))
    assert text == render(instr, pool.names) + "; d: s: "


def test_annotate_multiple_sources_joined(pool):
    a = pool.named_temp(100, TempType.INT)
    b = pool.named_temp(101, TempType.INT)
    text = annotate(Oper("x", [], [a, b]), pool.names)
    assert text.split("s: ")[1].split(", ") == ["r" + pool.names.look(a), "r" + pool.names.look(b)]


def test_print_instrs_one_line_each(pool):
    a = pool.named_temp(100, TempType.INT)
    lab = named_label("Lprint")
    instrs = [Label(f"{lab.name}:", lab), Move("mov `d0, `s0", [a], [a]), Oper("bx lr")]
    buf = io.StringIO()
    print_instrs(buf, instrs, pool.names)
    text = buf.getvalue()
    assert text.endswith("\n\n")
    assert text.split("\n")[: len(instrs)] == [render(i, pool.names) for i in instrs]


def test_proc_holds_parts():
    body = [Oper("nop")]
    proc = Proc("start", body, "end")
    assert proc.body is body
    assert (proc.prolog, proc.epilog) == ("start", "end")