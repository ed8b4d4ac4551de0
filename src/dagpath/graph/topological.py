"""Topological sort, depth-first (default) or Kahn's algorithm.

Depth-first is what the longest-path engine asks for.  It walks every
unvisited root in graph node order, emits nodes in post-order (a node
after all of its descendants) and reverses the result.  The DFS is
iterative with an explicit stack of successor iterators, so a chain of
100k nodes does not hit the recursion limit.

Three colors track progress:
  WHITE  -- not visited yet
  GRAY   -- on the current DFS path
  BLACK  -- fully explored
An edge into a GRAY node is a back edge, i.e. a cycle.

Kahn's algorithm is kept as the alternative because it produces a
breadth-first, layer-by-layer order:
  1.  Compute in-degree for every node.
  2.  Seed a queue with all nodes whose in-degree is 0.
  3.  Pop a node, append it to the result, decrement in-degree of its
      successors.  Any successor whose in-degree drops to 0 enters the
      queue.
  4.  If the result contains all nodes, the graph is a DAG.
"""
from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Hashable, Iterator

from dagpath.graph.protocols import GraphView

WHITE, GRAY, BLACK = 0, 1, 2


class SortAlgorithm(Enum):
    DEPTH_FIRST = "dfs"
    KAHN = "kahn"


class CyclicGraphError(Exception):
    """Raised when topological sort encounters a cycle."""

    def __init__(self, remaining_nodes: list) -> None:
        self.remaining_nodes = remaining_nodes
        super().__init__(
            f"Cycle detected: {len(remaining_nodes)} node(s) cannot be "
            f"topologically ordered"
        )


def topological_sort(
    graph: GraphView, algorithm: SortAlgorithm = SortAlgorithm.DEPTH_FIRST
) -> list[Hashable]:
    """Return nodes so that every edge goes from an earlier to a later one.

    Raises CyclicGraphError if the graph contains a cycle.
    """
    if algorithm is SortAlgorithm.KAHN:
        return _kahn(graph)
    return _depth_first(graph)


def _successors(graph: GraphView, node: Hashable) -> list[Hashable]:
    return [e.target for e in graph.leaving_edges(node)]


def _depth_first(graph: GraphView) -> list[Hashable]:
    color: dict[Hashable, int] = {n: WHITE for n in graph.nodes()}
    post: list[Hashable] = []

    for root in graph.nodes():
        if color[root] != WHITE:
            continue
        color[root] = GRAY
        stack: list[tuple[Hashable, Iterator[Hashable]]] = [
            (root, iter(_successors(graph, root)))
        ]
        while stack:
            node, succs = stack[-1]
            for succ in succs:
                if color[succ] == GRAY:
                    raise CyclicGraphError(
                        [n for n, c in color.items() if c != BLACK]
                    )
                if color[succ] == WHITE:
                    color[succ] = GRAY
                    stack.append((succ, iter(_successors(graph, succ))))
                    break
            else:
                # successors exhausted
                stack.pop()
                color[node] = BLACK
                post.append(node)

    post.reverse()
    return post


def _kahn(graph: GraphView) -> list[Hashable]:
    in_deg: dict[Hashable, int] = {}
    for node in graph.nodes():
        in_deg[node] = len(list(graph.entering_edges(node)))

    q: deque[Hashable] = deque()
    for node, deg in in_deg.items():
        if deg == 0:
            q.append(node)

    result: list[Hashable] = []
    while q:
        node = q.popleft()
        result.append(node)
        for succ in _successors(graph, node):
            in_deg[succ] -= 1
            if in_deg[succ] == 0:
                q.append(succ)

    if len(result) != len(in_deg):
        done = set(result)
        remaining = [n for n in graph.nodes() if n not in done]
        raise CyclicGraphError(remaining)

    return result
