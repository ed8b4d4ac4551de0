"""Read-only interfaces the longest-path engine is written against.

The engine never touches a concrete graph class.  Anything that can
answer these few questions (ours in adjacency.py, a wrapper around
another library's graph, a database view) can be fed to it.
"""
from __future__ import annotations

from typing import Callable, Hashable, Iterable, Protocol


class EdgeView(Protocol):
    """One directed edge as the engine sees it."""

    @property
    def source(self) -> Hashable: ...

    @property
    def target(self) -> Hashable: ...

    def get_number(self, name: str) -> float:
        """Value of attribute *name*, NaN when missing or not numeric."""
        ...


class GraphView(Protocol):
    """Read-only access to nodes, edges and per-node edge lists."""

    def nodes(self) -> Iterable[Hashable]: ...

    def edges(self) -> Iterable[EdgeView]: ...

    def edges_of(self, node: Hashable) -> Iterable[EdgeView]: ...

    def leaving_edges(self, node: Hashable) -> Iterable[EdgeView]: ...

    def entering_edges(self, node: Hashable) -> Iterable[EdgeView]: ...


# Given a graph, every node once, each after all nodes with edges into it.
TopologicalOrder = Callable[[GraphView], list]
