"""XML form of instruction lists: writing it and reading it back."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterable, Sequence
from xml.sax.saxutils import escape

from fdmjc.instr import Instr, Label, Move, Oper
from fdmjc.symbol import Symbol
from fdmjc.temp import Temp, TempMap, TempPool, TempType, label_name, named_label

_TYPE_NAMES = {TempType.INT: "T_int", TempType.FLOAT: "T_float"}
_TYPES_BY_NAME = {name: type_ for type_, name in _TYPE_NAMES.items()}


# Writing


def _temp_name(names: TempMap, temp: Temp) -> str:
    name = names.look(temp)
    if name is None:
        raise KeyError(f"temp {temp.num} has no name")
    return name


def _templist_xml(temps: Sequence[Temp], names: TempMap) -> str:
    opening = "".join(
        "<templist><temp><name>"
        f"{escape(_temp_name(names, temp))}</name>"
        f"<type>{_TYPE_NAMES[temp.type]}</type></temp>"
        for temp in temps
    )
    return opening + "</templist>" * len(temps)


def _labellist_xml(labels: Sequence[Symbol]) -> str:
    opening = "".join(
        f"<labellist><label>{escape(label_name(label))}</label>" for label in labels
    )
    return opening + "</labellist>" * len(labels)


def _inner_xml(
    assem: str,
    dst: Sequence[Temp],
    src: Sequence[Temp],
    jumps: Sequence[Symbol] | None,
    names: TempMap,
) -> str:
    parts = [f"\n<assem>{escape(assem)}</assem>\n"]
    if dst:
        parts.append(f"    <dst>{_templist_xml(dst, names)}</dst>\n")
    if src:
        parts.append(f"    <src>{_templist_xml(src, names)}</src>\n")
    if jumps is not None:
        parts.append(f"    <jumps>{_labellist_xml(jumps)}</jumps>")
    return "".join(parts)


def _instr_xml(instr: Instr, names: TempMap) -> str:
    if isinstance(instr, Oper):
        inner = _inner_xml(instr.assem, instr.dst, instr.src, instr.jumps, names)
        return f"<oper>{inner}</oper>"
    if isinstance(instr, Label):
        inner = _inner_xml(instr.assem, (), (), None, names)
        return (
            f"<label>{inner}"
            f"<temp_label>{escape(label_name(instr.label))}</temp_label></label>"
        )
    if isinstance(instr, Move):
        inner = _inner_xml(instr.assem, instr.dst, instr.src, None, names)
        return f"<move>{inner}</move>"
    raise TypeError(f"not an instruction: {instr!r}")


def instrs_to_xml(instrs: Iterable[Instr], names: TempMap) -> str:
    """Return the XML form of ``instrs``, one element per line."""
    return "".join(_instr_xml(instr, names) + "\n" for instr in instrs)


# Reading


def _text(element: ET.Element) -> str:
    return element.text or ""


def _child(element: ET.Element, tag: str) -> ET.Element | None:
    return element.find(tag)


def _required(element: ET.Element, tag: str) -> ET.Element:
    child = _child(element, tag)
    if child is None:
        raise ValueError(f"<{element.tag}> lacks <{tag}>")
    return child


def _temp_type(element: ET.Element) -> TempType:
    text = _text(element).strip()
    try:
        return _TYPES_BY_NAME[text]
    except KeyError:
        raise ValueError(f"unknown temp type {text!r}") from None


def _temp(element: ET.Element, pool: TempPool) -> Temp:
    name = _text(_required(element, "name")).strip()
    try:
        num = int(name)
    except ValueError:
        raise ValueError(f"temp name {name!r} is not a number") from None
    return pool.named_temp(num, _temp_type(_required(element, "type")))


def _templist(element: ET.Element | None, pool: TempPool) -> list[Temp]:
    temps: list[Temp] = []
    while element is not None and len(element):
        if len(element) > 2:
            raise ValueError("Invalid TempList Element.")
        temps.append(_temp(_required(element, "temp"), pool))
        if len(element) == 1:
            break
        element = _required(element, "templist")
    return temps


def _labellist(element: ET.Element | None) -> list[Symbol]:
    labels: list[Symbol] = []
    while element is not None and len(element):
        if len(element) > 2:
            raise ValueError("Invalid LabelList Element.")
        labels.append(named_label(_text(element[0])))
        if len(element) == 1:
            break
        element = _required(element, "labellist")
    return labels


def _operand_temps(ins: ET.Element, tag: str, pool: TempPool) -> list[Temp]:
    holder = _child(ins, tag)
    if holder is None or not len(holder):
        return []
    return _templist(holder[0], pool)


def _instr(ins: ET.Element, pool: TempPool) -> Instr:
    assem = _text(_required(ins, "assem"))
    if ins.tag == "oper":
        jumps_el = _child(ins, "jumps")
        jumps = None
        if jumps_el is not None:
            jumps = _labellist(jumps_el[0]) if len(jumps_el) else []
        return Oper(
            assem,
            _operand_temps(ins, "dst", pool),
            _operand_temps(ins, "src", pool),
            jumps,
        )
    if ins.tag == "label":
        return Label(assem, named_label(_text(_required(ins, "temp_label"))))
    if ins.tag == "move":
        return Move(assem, _operand_temps(ins, "dst", pool), _operand_temps(ins, "src", pool))
    raise ValueError(f"Invalid tag={ins.tag}")


def function_from_xml(element: ET.Element, pool: TempPool) -> list[Instr]:
    """Read the instructions of a ``<function>`` element, naming temps in ``pool``."""
    if element.tag != "function":
        raise ValueError(f"expected <function>, got <{element.tag}>")
    return [_instr(ins, pool) for ins in element]


def load_functions(text: str, pool: TempPool) -> list[tuple[str, list[Instr]]]:
    """Parse a whole instruction document into ``(name, instructions)`` pairs."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as err:
        raise ValueError(f"Invalid ins XML file: {err}") from err
    if root.tag != "root":
        raise ValueError(f"expected <root>, got <{root.tag}>")
    if not len(root):
        raise ValueError("No function in the ins XML file")
    functions = []
    for fn in root:
        if fn.tag != "function":
            raise ValueError("Invalid function in the ins XML file")
        functions.append((fn.get("name", ""), function_from_xml(fn, pool)))
    return functions