"""Shared fixtures for graph and longest-path tests."""
from __future__ import annotations

import pytest

from dagpath.graph.adjacency import Graph

SEED = 42


@pytest.fixture
def empty_graph() -> Graph[str]:
    return Graph()


@pytest.fixture
def linear_graph() -> Graph[str]:
    """A -> B -> C -> D, unweighted"""
    g: Graph[str] = Graph()
    for src, dst in [("A", "B"), ("B", "C"), ("C", "D")]:
        g.add_edge(src, dst)
    return g


@pytest.fixture
def diamond_graph() -> Graph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    g: Graph[str] = Graph()
    for src, dst in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]:
        g.add_edge(src, dst)
    return g


@pytest.fixture
def wide_dag() -> Graph[str]:
    """Root with 10 children, each with 2 grandchildren (all leaves)."""
    g: Graph[str] = Graph()
    for i in range(10):
        child = f"L1_{i}"
        g.add_edge("root", child)
        for j in range(2):
            g.add_edge(child, f"L2_{i}_{j}")
    return g


@pytest.fixture
def triangle() -> Graph[str]:
    """A -> B (1), B -> C (2), A -> C (5)"""
    g: Graph[str] = Graph()
    g.add_edge("A", "B", weight=1)
    g.add_edge("B", "C", weight=2)
    g.add_edge("A", "C", weight=5)
    return g
