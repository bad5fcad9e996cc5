"""Directed graphs used for flow, liveness and interference."""

from __future__ import annotations

from typing import Any, Callable, TextIO


class Node:
    """A graph node; successors and predecessors are newest first."""

    def __init__(self, graph: Graph, key: int, info: Any) -> None:
        self.graph = graph
        self.key = key
        self.info = info
        self.succs: list[Node] = []
        self.preds: list[Node] = []

    def __repr__(self) -> str:
        return f"Node({self.key})"

    def goes_to(self, other: Node) -> bool:
        return other in self.succs

    def adjacent(self) -> list[Node]:
        """Successors followed by predecessors."""
        return self.succs + self.preds

    def degree(self) -> int:
        return len(self.succs) + len(self.preds)


class Graph:
    def __init__(self) -> None:
        self.nodes: list[Node] = []

    def add_node(self, info: Any = None) -> Node:
        node = Node(self, len(self.nodes), info)
        self.nodes.append(node)
        return node

    def add_edge(self, src: Node, dst: Node) -> None:
        """Add an edge unless it already exists."""
        if src.graph is not self or dst.graph is not self:
            raise ValueError("both nodes must belong to this graph")
        if src.goes_to(dst):
            return
        dst.preds.insert(0, src)
        src.succs.insert(0, dst)

    def remove_edge(self, src: Node, dst: Node) -> None:
        if src not in dst.preds or dst not in src.succs:
            raise ValueError(f"no edge from {src.key} to {dst.key}")
        dst.preds.remove(src)
        src.succs.remove(dst)

    def show(self, out: TextIO, show_info: Callable[[Any], str] | None = None) -> None:
        """Write each node having info, with the keys of its successors."""
        for node in self.nodes:
            if node.info is None:
                continue
            if show_info is not None:
                out.write(show_info(node.info))
            out.write(f" ({node.key}): ")
            out.write("".join(f"{succ.key} " for succ in node.succs))
            out.write("\n")