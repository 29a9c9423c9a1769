"""Shared fixtures for the weightedgraph test suite."""
import pytest

from weightedgraph import pygraph


@pytest.fixture
def empty_graph():
    """Create an empty graph."""
    return pygraph()


@pytest.fixture
def abc_graph():
    """Nodes A, B, C with edges A->B(1), A->C(2), B->C(1)."""
    graph = pygraph()
    for value in ("A", "B", "C"):
        graph.add_node(value)
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", 2)
    graph.add_edge("B", "C", 1)
    return graph


@pytest.fixture
def int_graph():
    """Integer nodes 1, 2, 3 with parallel edges and a back edge."""
    graph = pygraph()
    for value in (1, 2, 3):
        graph.add_node(value)
    graph.add_edge(1, 2, 5)
    graph.add_edge(1, 3, 5)
    graph.add_edge(1, 2, 2)
    graph.add_edge(3, 1, 7)
    return graph
