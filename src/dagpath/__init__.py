"""dagpath -- longest paths through directed acyclic graphs.

    from dagpath import Graph, LongestPath

    g = Graph()
    g.add_edge("A", "B", weight=1)
    g.add_edge("B", "C", weight=2)
    g.add_edge("A", "C", weight=5)

    engine = LongestPath()
    engine.init(g)
    engine.compute()
    engine.longest_path_list    # ["A", "C"]
    engine.longest_path_value   # 5.0
"""
from dagpath.graph import (
    CyclicGraphError,
    DEFAULT_WEIGHT_ATTRIBUTE,
    Edge,
    Graph,
    LongestPath,
    LongestPathResult,
    Path,
    SortAlgorithm,
    longest_path,
    topological_sort,
)

__all__ = [
    "CyclicGraphError",
    "DEFAULT_WEIGHT_ATTRIBUTE",
    "Edge",
    "Graph",
    "LongestPath",
    "LongestPathResult",
    "Path",
    "SortAlgorithm",
    "longest_path",
    "topological_sort",
]
