import io

from fdmjc.temp import (
    TempMap,
    TempPool,
    TempType,
    label_name,
    list_diff,
    list_equal,
    list_intersect,
    list_union,
    named_label,
)


def test_first_temp_and_name():
    pool = TempPool()
    t = pool.new_temp(TempType.INT)
    assert t.num == 100
    assert pool.names.look(t) == "100"


def test_new_temps_are_distinct_and_increasing():
    pool = TempPool()
    a = pool.new_temp(TempType.INT)
    b = pool.new_temp(TempType.FLOAT)
    assert a is not b
    assert b.num == a.num + 1
    assert b.type is TempType.FLOAT


def test_named_temp_reuses_and_updates_type():
    pool = TempPool()
    t = pool.named_temp(150, TempType.INT)
    again = pool.named_temp(150, TempType.FLOAT)
    assert again is t
    assert t.type is TempType.FLOAT


def test_named_temp_advances_counter():
    pool = TempPool()
    named = pool.named_temp(150, TempType.INT)
    assert pool.new_temp(TempType.INT).num == named.num + 1


def test_reset_temps_reuses_existing():
    pool = TempPool()
    first = pool.new_temp(TempType.INT)
    pool.reset_temps()
    again = pool.new_temp(TempType.FLOAT)
    assert again is first
    assert again.type is TempType.FLOAT


def test_registers_are_named_by_type():
    pool = TempPool()
    r = pool.reg(3, TempType.INT)
    s = pool.reg(3, TempType.FLOAT)
    assert pool.names.look(r) == "r3"
    assert pool.names.look(s) == "s3"
    assert pool.reg(3, TempType.INT) is r


def test_this_is_temp_99():
    pool = TempPool()
    assert pool.this().num == 99
    assert pool.this() is pool.this()


def test_labels_count_up_and_reset():
    pool = TempPool()
    first = pool.new_label()
    second = pool.new_label()
    assert label_name(first) == "L0"
    assert first is not second
    pool.reset_labels()
    assert pool.new_label() is first


def test_named_label_is_interned():
    assert named_label("exit") is named_label("exit")
    assert label_name(named_label("exit")) == "exit"


def test_layered_map_falls_through():
    pool = TempPool()
    t = pool.new_temp(TempType.INT)
    over = TempMap()
    under = TempMap()
    under.enter(t, "low")
    layered = over.layer(under)
    assert layered.look(t) == "low"
    over.enter(t, "high")
    assert layered.look(t) == "high"
    assert over.look(pool.new_temp(TempType.INT)) is None


def test_dump_format():
    pool = TempPool()
    t = pool.new_temp(TempType.INT)
    m = TempMap()
    m.enter(t, "x")
    out = io.StringIO()
    m.dump(out)
    assert out.getvalue() == "t100, type=int\n"


def test_dump_includes_under_after_separator():
    pool = TempPool()
    t = pool.new_temp(TempType.FLOAT)
    under = TempMap()
    under.enter(t, "x")
    out = io.StringIO()
    TempMap().layer(under).dump(out)
    assert out.getvalue().startswith("---------\n")
    assert "type=float" in out.getvalue()


def test_list_operations():
    pool = TempPool()
    t1, t2, t3 = (pool.new_temp(TempType.INT) for _ in range(3))
    union = list_union([t1, t2], [t2, t3])
    assert len(union) == 3
    assert set(union) == {t1, t2, t3}
    assert list_intersect([t1, t2], [t2, t3]) == [t2]
    assert list_diff([t1, t2], [t2, t3]) == [t1]
    assert list_diff([t1, t2, t3], []) == [t3, t2, t1]


def test_list_equal_ignores_order():
    pool = TempPool()
    t1, t2 = pool.new_temp(TempType.INT), pool.new_temp(TempType.INT)
    assert list_equal([t1, t2], [t2, t1])
    assert not list_equal([t1], [t1, t2])