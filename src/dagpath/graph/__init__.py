"""Graph model, topological ordering and longest-path analysis."""

from dagpath.graph.adjacency import Edge, Graph
from dagpath.graph.longest import (
    DEFAULT_WEIGHT_ATTRIBUTE,
    LongestPath,
    LongestPathResult,
    longest_path,
)
from dagpath.graph.path import Path
from dagpath.graph.protocols import EdgeView, GraphView, TopologicalOrder
from dagpath.graph.topological import (
    CyclicGraphError,
    SortAlgorithm,
    topological_sort,
)

__all__ = [
    "CyclicGraphError",
    "DEFAULT_WEIGHT_ATTRIBUTE",
    "Edge",
    "EdgeView",
    "Graph",
    "GraphView",
    "LongestPath",
    "LongestPathResult",
    "Path",
    "SortAlgorithm",
    "TopologicalOrder",
    "longest_path",
    "topological_sort",
]
