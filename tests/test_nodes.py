"""
Tests for node insertion, lookup, renaming and deletion.
"""
import pytest

from weightedgraph import pygraph, NodeNotFoundError


class TestAddNode:
    """Test node insertion and existence queries."""

    def test_empty_graph_has_no_nodes(self, empty_graph):
        assert len(empty_graph) == 0
        assert empty_graph.nodes() == []
        assert not empty_graph.is_node("A")

    def test_add_node_returns_true_once(self, empty_graph):
        assert empty_graph.add_node("A") is True
        assert empty_graph.add_node("A") is False
        assert empty_graph.nodes() == ["A"]

    def test_is_node_matches_inserted_values(self, empty_graph):
        inserted = [5, 3, 9, 3, 5, 1]
        for value in inserted:
            empty_graph.add_node(value)

        assert empty_graph.nodes() == sorted(set(inserted))
        for value in range(10):
            assert empty_graph.is_node(value) == (value in inserted)

    def test_contains_and_camelcase_alias(self, empty_graph):
        empty_graph.addNode("x")
        assert "x" in empty_graph
        assert empty_graph.isNode("x")


class TestCheckNodes:
    """Test the endpoint precondition check."""

    def test_passes_when_both_exist(self, abc_graph):
        abc_graph.check_nodes("A", "B")

    def test_missing_origin_checked_first(self, abc_graph):
        with pytest.raises(NodeNotFoundError) as excinfo:
            abc_graph.check_nodes("X", "Y")
        assert excinfo.value.side == "origin"
        assert excinfo.value.value == "X"

    def test_missing_destination(self, abc_graph):
        with pytest.raises(NodeNotFoundError) as excinfo:
            abc_graph.check_nodes("A", "Y")
        assert excinfo.value.side == "destination"
        assert "Dest does not exist" in str(excinfo.value)

    def test_error_is_lookup_error(self, abc_graph):
        with pytest.raises(LookupError):
            abc_graph.check_nodes("Z", "A")


class TestReplace:
    """Test renaming nodes."""

    def test_rename_keeps_outgoing_and_incoming_edges(self, abc_graph):
        assert abc_graph.replace("B", "D") is True

        assert not abc_graph.is_node("B")
        assert abc_graph.nodes() == ["A", "C", "D"]
        assert abc_graph.get_edges("D") == [("C", 1)]
        assert abc_graph.get_edges("A") == [("C", 2), ("D", 1)]
        assert abc_graph.is_connected("A", "D")

    def test_rename_self_loop(self, empty_graph):
        empty_graph.add_node("A")
        empty_graph.add_edge("A", "A", 4)

        empty_graph.replace("A", "Z")

        assert empty_graph.get_edges("Z") == [("Z", 4)]

    def test_rename_to_existing_value_changes_nothing(self, abc_graph):
        before = abc_graph.copy()

        assert abc_graph.replace("A", "B") is False
        assert abc_graph == before

    def test_rename_missing_node_raises(self, abc_graph):
        with pytest.raises(NodeNotFoundError) as excinfo:
            abc_graph.replace("Q", "R")
        assert excinfo.value.side == "origin"
        assert not abc_graph.is_node("R")


class TestDeleteNode:
    """Test node deletion."""

    def test_delete_removes_node_and_outgoing_edges(self, abc_graph):
        abc_graph.delete_node("A")

        assert abc_graph.nodes() == ["B", "C"]
        assert abc_graph.get_edge_count() == 1

    def test_delete_removes_incoming_edges(self, abc_graph):
        abc_graph.delete_node("C")

        assert abc_graph.get_edges("A") == [("B", 1)]
        assert abc_graph.get_edges("B") == []
        assert abc_graph.find_dangling_edges() == []

    def test_delete_missing_node_is_noop(self, abc_graph):
        before = abc_graph.copy()
        abc_graph.delete_node("nope")
        assert abc_graph == before

    def test_deleted_value_can_be_added_again(self, abc_graph):
        abc_graph.delete_node("B")
        assert abc_graph.add_node("B") is True
        assert abc_graph.get_edges("B") == []
        assert not abc_graph.is_connected("A", "B")


class TestClear:
    """Test clearing the graph."""

    def test_clear_empties_graph(self, abc_graph):
        abc_graph.clear()

        assert len(abc_graph) == 0
        assert abc_graph.get_edge_count() == 0
        assert abc_graph == pygraph()

    def test_graph_usable_after_clear(self, abc_graph):
        abc_graph.clear()
        assert abc_graph.add_node("A")
        assert abc_graph.add_node("B")
        assert abc_graph.add_edge("A", "B", 1)
