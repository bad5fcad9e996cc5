from fdmjc.fdmjast import (
    BinOp,
    ClassDecl,
    DataType,
    Exp,
    IdExp,
    IfStm,
    MainMethod,
    NumConst,
    OpExp,
    Pos,
    Prog,
    Putnum,
    Return,
    Stm,
    ThisExp,
    Type,
    VarDecl,
    WhileStm,
)


def test_opexp_holds_operands():
    p = Pos(1, 2)
    left = NumConst(p, 3)
    right = IdExp(p, "x")
    e = OpExp(p, left, BinOp.PLUS, right)
    assert e.left is left
    assert e.right is right
    assert e.op is BinOp.PLUS
    assert isinstance(e, Exp) and e.pos.line == 1


def test_if_without_else():
    s = IfStm(None, IdExp(None, "c"), Putnum(None, NumConst(None, 1)))
    assert s.s2 is None
    assert isinstance(s, Stm)


def test_optional_statement_parts_default_to_none():
    assert Return(None).e is None
    assert WhileStm(None, ThisExp(None)).s is None


def test_var_decl_default_init_is_fresh_list():
    t = Type(None, DataType.INT)
    a = VarDecl(None, t, "a")
    b = VarDecl(None, t, "b")
    a.init.append(NumConst(None, 1))
    assert b.init == []
    assert len(a.init) == 1


def test_prog_structure_and_equality():
    main = MainMethod(None, [], [Return(None, NumConst(None, 0))])
    cls = ClassDecl(None, "A", "B")
    prog = Prog(Pos(1, 1), main, [cls])
    assert prog.classes[0].parent_id == "B"
    assert prog == Prog(Pos(1, 1), MainMethod(None, [], [Return(None, NumConst(None, 0))]), [ClassDecl(None, "A", "B")])


def test_type_id_only_for_classes():
    assert Type(None, DataType.ID, "Foo").id == "Foo"
    assert Type(None, DataType.FLOAT_ARR).id is None