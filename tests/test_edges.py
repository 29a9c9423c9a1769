"""
Tests for edge insertion, removal and connectivity queries.
"""
import pytest

from weightedgraph import NodeNotFoundError


class TestAddEdge:
    """Test edge insertion."""

    def test_duplicate_edge_rejected(self, abc_graph):
        abc_graph.add_node("D")
        assert abc_graph.add_edge("C", "D", 3) is True
        assert abc_graph.add_edge("C", "D", 3) is False
        assert abc_graph.get_edges("C") == [("D", 3)]

    def test_parallel_edges_with_different_weights(self, abc_graph):
        assert abc_graph.add_edge("A", "B", 2) is True
        assert abc_graph.get_edges("A") == [("B", 1), ("B", 2), ("C", 2)]
        assert abc_graph.find_parallel_edges() == {("A", "B"): [1, 2]}

    def test_self_loop_follows_duplicate_rule(self, abc_graph):
        assert abc_graph.add_edge("A", "A", 1) is True
        assert abc_graph.add_edge("A", "A", 1) is False
        assert abc_graph.is_connected("A", "A")

    def test_missing_origin_raises(self, abc_graph):
        with pytest.raises(NodeNotFoundError) as excinfo:
            abc_graph.add_edge("X", "A", 1)
        assert excinfo.value.side == "origin"

    def test_missing_destination_raises(self, abc_graph):
        with pytest.raises(NodeNotFoundError) as excinfo:
            abc_graph.addEdge("A", "X", 1)
        assert excinfo.value.side == "destination"
        assert abc_graph.get_edges("A") == [("B", 1), ("C", 2)]


class TestIsConnected:
    """Test direct connectivity queries."""

    def test_connection_is_directed(self, abc_graph):
        assert abc_graph.is_connected("A", "B")
        assert not abc_graph.is_connected("B", "A")

    def test_ignores_weight(self, abc_graph):
        abc_graph.add_edge("C", "A", "heavy")
        assert abc_graph.is_connected("C", "A")

    def test_missing_node_raises(self, abc_graph):
        with pytest.raises(NodeNotFoundError):
            abc_graph.is_connected("A", "missing")


class TestDeleteEdge:
    """Test edge removal."""

    def test_delete_then_not_connected(self, abc_graph):
        abc_graph.delete_edge("A", "B", 1)
        assert not abc_graph.is_connected("A", "B")

    def test_delete_only_matching_weight(self, abc_graph):
        abc_graph.add_edge("A", "B", 9)
        abc_graph.delete_edge("A", "B", 1)

        assert abc_graph.is_connected("A", "B")
        assert abc_graph.get_edges("A") == [("B", 9), ("C", 2)]

    @pytest.mark.parametrize("src,dst,weight", [
        ("X", "B", 1),
        ("A", "X", 1),
        ("A", "B", 42),
        ("C", "A", 1),
    ])
    def test_missing_targets_are_noop(self, abc_graph, src, dst, weight):
        before = abc_graph.copy()
        abc_graph.delete_edge(src, dst, weight)
        assert abc_graph == before


class TestDegrees:
    """Test degree counts, sources and sinks."""

    def test_degrees(self, abc_graph):
        assert abc_graph.get_out_degree("A") == 2
        assert abc_graph.get_in_degree("C") == 2
        assert abc_graph.get_in_degree("A") == 0

    def test_incoming_edges(self, abc_graph):
        assert abc_graph.get_incoming_edges("C") == [("A", 2), ("B", 1)]

    def test_sources_and_sinks(self, abc_graph):
        assert abc_graph.get_sources() == ["A"]
        assert abc_graph.get_sinks() == ["C"]
