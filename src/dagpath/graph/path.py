"""A path through a graph: an ordered node list plus the edges joining it."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Hashable, Iterator, TypeVar

from dagpath.graph.protocols import EdgeView

T = TypeVar("T", bound=Hashable)


@dataclass(slots=True)
class Path(Generic[T]):
    """Nodes from root to head and the edges between consecutive nodes.

    When the graph has parallel edges between two path nodes, all of
    them are listed, so len(edges) can exceed len(nodes) - 1.
    """
    nodes: list[T] = field(default_factory=list)
    edges: list[EdgeView] = field(default_factory=list)

    @property
    def root(self) -> T | None:
        return self.nodes[0] if self.nodes else None

    @property
    def head(self) -> T | None:
        return self.nodes[-1] if self.nodes else None

    @property
    def hops(self) -> int:
        return max(len(self.nodes) - 1, 0)

    def weight(self, attribute: str) -> float:
        """Sum of *attribute* over the edges (NaN if any edge lacks it)."""
        return sum((e.get_number(attribute) for e in self.edges), 0.0)

    def is_empty(self) -> bool:
        return not self.nodes

    def __iter__(self) -> Iterator[T]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node: object) -> bool:
        return node in self.nodes
