"""Generic directed multigraph using adjacency lists of Edge objects.

The graph stores nodes of any hashable type T and directed edges
between them.  Unlike a plain successor list, every edge is a real
object with its own id and an attribute dict, so two parallel edges
A -> B can carry different weights.

Two maps are kept in sync:
    _out[node]  -- edges leaving node, in insertion order
    _in[node]   -- edges entering node, in insertion order

The reverse map is what makes the longest-path relaxation cheap: it
walks the *entering* edges of every node, and with _in that lookup
is O(1) instead of a scan over the whole edge set.
"""
from __future__ import annotations

import math
from itertools import count
from typing import Any, Generic, Hashable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class Edge(Generic[T]):
    """A directed edge source -> target with free-form attributes."""

    __slots__ = ("id", "source", "target", "attributes")

    def __init__(
        self, edge_id: int, source: T, target: T, attributes: dict[str, Any]
    ) -> None:
        self.id = edge_id
        self.source = source
        self.target = target
        self.attributes = attributes

    def get_number(self, name: str) -> float:
        """Numeric value of attribute *name*, or NaN if there isn't one.

        Accepts ints, floats and strings that float() can parse.  Bools
        are not numbers here (True is not a weight of 1).
        """
        value = self.attributes.get(name)
        if value is None or isinstance(value, bool):
            return math.nan
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return math.nan
        return math.nan

    def __repr__(self) -> str:
        return f"Edge({self.source!r} -> {self.target!r}, id={self.id})"


class Graph(Generic[T]):
    """Directed graph backed by adjacency lists.

    Maintains both forward (leaving) and reverse (entering) edge maps
    so that in_degree and entering_edges lookups are constant time.
    """

    __slots__ = ("_out", "_in", "_ids")

    def __init__(self) -> None:
        self._out: dict[T, list[Edge[T]]] = {}
        self._in: dict[T, list[Edge[T]]] = {}
        self._ids = count()

    # ---- mutation --------------------------------------------------------

    def add_node(self, node: T) -> None:
        """Add *node* if it does not already exist."""
        if node not in self._out:
            self._out[node] = []
            self._in[node] = []

    def add_edge(self, src: T, dst: T, /, **attributes: Any) -> Edge[T]:
        """Add a directed edge src -> dst and return it.

        Creates both nodes if they are missing.  Parallel edges are
        allowed: each call makes a new Edge with a fresh id.  src and dst
        are positional-only, so "src" and "dst" are usable attribute names.
        """
        self.add_node(src)
        self.add_node(dst)
        edge = Edge(next(self._ids), src, dst, dict(attributes))
        self._out[src].append(edge)
        self._in[dst].append(edge)
        return edge

    def remove_edge(self, edge: Edge[T]) -> None:
        """Remove *edge*.

        Raises ValueError if the edge is not part of this graph.
        """
        try:
            self._out[edge.source].remove(edge)
            self._in[edge.target].remove(edge)
        except (KeyError, ValueError):
            raise ValueError(f"Edge {edge!r} not found") from None

    def remove_node(self, node: T) -> None:
        """Remove *node* and all edges touching it."""
        if node not in self._out:
            raise ValueError(f"Node {node!r} not found")
        for edge in self._out[node]:
            if edge.target != node:
                self._in[edge.target].remove(edge)
        for edge in self._in[node]:
            if edge.source != node:
                self._out[edge.source].remove(edge)
        del self._out[node]
        del self._in[node]

    # ---- queries ---------------------------------------------------------

    def has_node(self, node: T) -> bool:
        return node in self._out

    def has_edge(self, src: T, dst: T) -> bool:
        return any(e.target == dst for e in self._out.get(src, []))

    def successors(self, node: T) -> list[T]:
        """Direct successors, one entry per leaving edge."""
        return [e.target for e in self._out.get(node, [])]

    def predecessors(self, node: T) -> list[T]:
        """Direct predecessors, one entry per entering edge."""
        return [e.source for e in self._in.get(node, [])]

    def leaving_edges(self, node: T) -> list[Edge[T]]:
        return list(self._out.get(node, []))

    def entering_edges(self, node: T) -> list[Edge[T]]:
        return list(self._in.get(node, []))

    def edges_of(self, node: T) -> list[Edge[T]]:
        """Every edge touching *node*, leaving edges first.

        A self-loop is reported once.
        """
        leaving = self._out.get(node, [])
        entering = [e for e in self._in.get(node, []) if e.source != node]
        return [*leaving, *entering]

    def in_degree(self, node: T) -> int:
        return len(self._in.get(node, []))

    def out_degree(self, node: T) -> int:
        return len(self._out.get(node, []))

    def nodes(self) -> Iterator[T]:
        return iter(self._out)

    def edges(self) -> Iterator[Edge[T]]:
        for out in self._out.values():
            yield from out

    @property
    def node_count(self) -> int:
        return len(self._out)

    @property
    def edge_count(self) -> int:
        return sum(len(out) for out in self._out.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: T) -> bool:  # type: ignore[override]
        return self.has_node(node)

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
