"""Longest path in a DAG, weighted by an edge attribute or by hop count.

Algorithm:
  1.  Scan every edge of every node.  If any edge has no numeric value
      for the weight attribute, the whole run counts hops instead of
      summing weights.  Seed dist[v] = 0.0 for every node.
  2.  Topologically sort the DAG.
  3.  Walk nodes in that order.  For each node v and each edge u -> v
      entering it, relax: dist[v] = max(dist[v], dist[u] + step), where
      step is the edge weight, or 1 when counting hops.  Every
      predecessor comes earlier in the order, so dist[u] is final by
      the time it is read.
  4.  The node with the largest dist is the end of the longest path.
  5.  Walk back from the end: at each node take the entering edge whose
      dist[u] + step reaches dist[v] (the edge that produced the value)
      and stop at a node no entering edge reaches.  Reverse.

This is O(V + E) plus one scan of the edge set to turn the node list
back into edges.  Ties are broken by insertion order: step 4 keeps the
first node (in graph node order) holding the maximum, step 5 the first
qualifying entering edge.

The engine only reads the graph through GraphView and gets its order
from an injected TopologicalOrder, so it works on any graph that can
answer those calls.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Hashable, Mapping

from dagpath.graph.path import Path
from dagpath.graph.protocols import EdgeView, GraphView, TopologicalOrder
from dagpath.graph.topological import topological_sort

log = logging.getLogger(__name__)

DEFAULT_WEIGHT_ATTRIBUTE = "weight"


@dataclass(frozen=True, slots=True)
class LongestPathResult:
    """Outcome of one compute() run."""
    nodes: tuple[Hashable, ...]
    path: Path
    value: float              # weight sum, or hop count when not weighted
    weighted: bool
    distances: Mapping[Hashable, float]


@dataclass(slots=True)
class _Computation:
    """State owned by a single run: the mode flag and the distance map."""
    graph: GraphView
    weight_attribute: str
    weighted: bool = True
    distances: dict[Hashable, float] = field(default_factory=dict)

    def step(self, edge: EdgeView) -> float:
        if self.weighted:
            return edge.get_number(self.weight_attribute)
        return 1.0


class LongestPath:
    """Longest-path engine bound to one graph at a time.

    Usage:
        engine = LongestPath()
        engine.init(graph)
        engine.compute()
        engine.longest_path_list     # [A, B, C]
        engine.longest_path_value    # 2.0

    Args:
        weight_attribute: edge attribute holding the weight
            (default DEFAULT_WEIGHT_ATTRIBUTE)
        sort: topological ordering function, graph -> list of nodes
        use_weights: False forces hop counting even on a fully
            weighted graph
    """

    __slots__ = ("_graph", "_weight_attribute", "_sort", "_use_weights", "_result")

    def __init__(
        self,
        weight_attribute: str | None = None,
        sort: TopologicalOrder = topological_sort,
        use_weights: bool = True,
    ) -> None:
        self._graph: GraphView | None = None
        self._weight_attribute = weight_attribute
        self._sort = sort
        self._use_weights = use_weights
        self._result: LongestPathResult | None = None

    @property
    def weight_attribute(self) -> str:
        if self._weight_attribute is None:
            return DEFAULT_WEIGHT_ATTRIBUTE
        return self._weight_attribute

    @weight_attribute.setter
    def weight_attribute(self, name: str | None) -> None:
        self._weight_attribute = name

    def init(self, graph: GraphView) -> None:
        """Bind the engine to *graph* and drop any previous result."""
        self._graph = graph
        self._result = None

    def compute(self) -> LongestPathResult:
        """Run the full algorithm once on the bound graph.

        Raises RuntimeError if init() was never called.  Whatever the
        sort raises on a cyclic graph propagates unchanged.
        """
        if self._graph is None:
            raise RuntimeError("Call init() before compute()")

        run = _Computation(
            graph=self._graph,
            weight_attribute=self.weight_attribute,
            weighted=self._use_weights,
        )
        _initialize(run)
        _relax(run, self._sort(self._graph))

        end = _max_entry(run.distances)
        if end is None:
            log.debug("empty graph, longest path is empty")
            self._result = LongestPathResult(
                nodes=(),
                path=Path(),
                value=0.0,
                weighted=run.weighted,
                distances=MappingProxyType(run.distances),
            )
            return self._result

        end_node, value = end
        nodes = _backtrack(run, end_node)
        log.debug(
            "longest path ends at %r: %d node(s), value %s (%s)",
            end_node, len(nodes), value,
            "weighted" if run.weighted else "hops",
        )
        self._result = LongestPathResult(
            nodes=tuple(nodes),
            path=_materialize(run.graph, nodes),
            value=value,
            weighted=run.weighted,
            distances=MappingProxyType(run.distances),
        )
        return self._result

    # ---- results ---------------------------------------------------------

    @property
    def result(self) -> LongestPathResult:
        if self._result is None:
            raise RuntimeError("Call compute() before reading results")
        return self._result

    @property
    def longest_path_list(self) -> list[Any]:
        """Nodes of the longest path, start to end."""
        return list(self.result.nodes)

    def longest_path(self) -> Path:
        """The longest path as nodes joined by the graph's edges."""
        return self.result.path

    @property
    def longest_path_value(self) -> float:
        """Weight sum of the longest path, or its hop count if unweighted."""
        return self.result.value

    @property
    def weighted(self) -> bool:
        return self.result.weighted

    @property
    def distances(self) -> dict[Hashable, float]:
        return dict(self.result.distances)


def longest_path(
    graph: GraphView,
    weight_attribute: str = DEFAULT_WEIGHT_ATTRIBUTE,
    sort: TopologicalOrder = topological_sort,
    use_weights: bool = True,
) -> LongestPathResult:
    """Find the longest path through *graph* in one call."""
    engine = LongestPath(weight_attribute, sort=sort, use_weights=use_weights)
    engine.init(graph)
    return engine.compute()


def _initialize(run: _Computation) -> None:
    for node in run.graph.nodes():
        run.distances[node] = 0.0
        if not run.weighted:
            continue
        for edge in run.graph.edges_of(node):
            if math.isnan(edge.get_number(run.weight_attribute)):
                log.debug(
                    "%r has no numeric %r attribute, counting hops",
                    edge, run.weight_attribute,
                )
                run.weighted = False
                break


def _relax(run: _Computation, order: list) -> None:
    dist = run.distances
    for node in order:
        for edge in run.graph.entering_edges(node):
            candidate = dist[edge.source] + run.step(edge)
            if candidate > dist[node]:
                dist[node] = candidate


def _max_entry(distances: dict[Hashable, float]) -> tuple[Hashable, float] | None:
    best: tuple[Hashable, float] | None = None
    for node, value in distances.items():
        if best is None or value > best[1]:
            best = (node, value)
    return best


def _backtrack(run: _Computation, end: Hashable) -> list:
    dist = run.distances
    path = [end]
    seen = {end}
    node = end
    while True:
        best: tuple[Hashable, float] | None = None
        for edge in run.graph.entering_edges(node):
            reach = dist[edge.source] + run.step(edge)
            if reach >= dist[node] and (best is None or reach > best[1]):
                best = (edge.source, reach)
        # on cyclic input stop instead of walking the cycle forever
        if best is None or best[0] in seen:
            break
        node = best[0]
        seen.add(node)
        path.append(node)
    path.reverse()
    return path


def _materialize(graph: GraphView, nodes: list) -> Path:
    pairs = list(zip(nodes, nodes[1:]))
    wanted = set(pairs)
    found: dict[tuple[Hashable, Hashable], list[EdgeView]] = {}
    for edge in graph.edges():
        key = (edge.source, edge.target)
        if key in wanted:
            found.setdefault(key, []).append(edge)
    edges = [edge for pair in pairs for edge in found.get(pair, [])]
    return Path(nodes=list(nodes), edges=edges)
