"""
Main facade class for weighted graphs.

This module provides the pygraph class, which owns the node arena and
delegates editing, analysis and listing to specialized modules.
"""

import logging
from typing import Any, Dict, List, Optional, TextIO, Tuple

from .graph import WeightedGraph
from .cursor import NodeCursor
from ..classes.utils import graphs_equal
from ..operations.modification import GraphModifier
from ..analysis.connectivity import ConnectivityAnalyzer
from ..formats import listing
from ..formats.adjacency import to_adjacency_matrix

logger = logging.getLogger(__name__)


class pygraph:
    """
    Generic directed weighted graph with value semantics.

    Nodes are distinct, hashable and totally ordered values; edges carry a
    hashable, totally ordered weight. Between one ordered pair of nodes there
    may be several edges as long as their weights differ.

    Copies are independent: pygraph(other), other.copy(), copy.copy() and
    copy.deepcopy() rebuild every node and edge. Equality is structural.

    Example:
        >>> g = pygraph()
        >>> g.add_node("A")
        True
        >>> g.add_node("B")
        True
        >>> g.add_edge("A", "B", 1)
        True
        >>> g.is_connected("A", "B")
        True
    """

    # ========================================================================
    # CONSTRUCTION, COPY & MOVE
    # ========================================================================

    def __init__(self, other: Optional['pygraph'] = None):
        """
        Initialize an empty graph, or a copy of another graph.

        Args:
            other: Optional graph to copy
        """
        self._graph = WeightedGraph()
        self._modifier = GraphModifier(self._graph)
        self._analyzer = ConnectivityAnalyzer(self._graph)
        self._cursor: Optional[NodeCursor] = None

        if other is not None:
            self._graph.copy_from(other._graph)

    def copy(self) -> 'pygraph':
        return type(self)(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def assign(self, other: 'pygraph') -> 'pygraph':
        """Replace the contents of this graph with a copy of other."""
        if other is not self:
            self._graph.copy_from(other._graph)
        return self

    @classmethod
    def move(cls, other: 'pygraph') -> 'pygraph':
        """Create a graph that takes over the contents of other, leaving it empty."""
        graph = cls()
        graph._graph.take_from(other._graph)
        return graph

    def move_assign(self, other: 'pygraph') -> 'pygraph':
        """Take over the contents of other, leaving it empty."""
        if other is not self:
            self._graph.clear()
            self._graph.take_from(other._graph)
        return self

    def __eq__(self, other):
        if not isinstance(other, pygraph):
            return NotImplemented
        return graphs_equal(self._graph, other._graph)

    __hash__ = None

    def __repr__(self):
        return f"pygraph(nodes={self._graph.get_node_count()}, edges={self._graph.get_edge_count()})"

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def add_node(self, value: Any) -> bool:
        """Add a node; return False if a node with this value already exists."""
        return self._graph.add_node(value)

    def is_node(self, value: Any) -> bool:
        return self._graph.is_node(value)

    def check_nodes(self, src: Any, dst: Any):
        """Raise NodeNotFoundError if src or dst is not in the graph."""
        self._graph.check_nodes(src, dst, 'checkNodes')

    def clear(self):
        self._graph.clear()

    def get_node_count(self) -> int:
        return self._graph.get_node_count()

    def get_edge_count(self) -> int:
        return self._graph.get_edge_count()

    def nodes(self) -> List[Any]:
        """Get all node values in ascending order."""
        return self._graph.sorted_values()

    def __len__(self):
        return self._graph.get_node_count()

    def __contains__(self, value):
        return self._graph.is_node(value)

    # ========================================================================
    # MODIFICATION OPERATIONS
    # ========================================================================

    def add_edge(self, src: Any, dst: Any, weight: Any) -> bool:
        """Add an edge; see GraphModifier.add_edge."""
        return self._modifier.add_edge(src, dst, weight)

    def delete_edge(self, src: Any, dst: Any, weight: Any):
        self._modifier.delete_edge(src, dst, weight)

    def replace(self, old_value: Any, new_value: Any) -> bool:
        """Rename a node; see GraphModifier.replace."""
        return self._modifier.replace(old_value, new_value)

    def merge_replace(self, old_value: Any, new_value: Any):
        """Merge old_value into new_value; see GraphModifier.merge_replace."""
        self._modifier.merge_replace(old_value, new_value)

    def delete_node(self, value: Any):
        self._modifier.delete_node(value)

    # ========================================================================
    # CONNECTIVITY QUERIES
    # ========================================================================

    def is_connected(self, src: Any, dst: Any) -> bool:
        return self._analyzer.is_connected(src, dst)

    def get_edges(self, value: Any) -> List[Tuple[Any, Any]]:
        """Get outgoing edges as sorted (destination value, weight) pairs."""
        return self._analyzer.get_edges(value)

    def get_incoming_edges(self, value: Any) -> List[Tuple[Any, Any]]:
        """Get incoming edges as sorted (source value, weight) pairs."""
        return self._analyzer.get_incoming_edges(value)

    def get_out_degree(self, value: Any) -> int:
        return self._analyzer.get_out_degree(value)

    def get_in_degree(self, value: Any) -> int:
        return self._analyzer.get_in_degree(value)

    def get_sources(self) -> List[Any]:
        """Get nodes with no incoming edges."""
        return self._analyzer.get_sources()

    def get_sinks(self) -> List[Any]:
        """Get nodes with no outgoing edges."""
        return self._analyzer.get_sinks()

    def find_parallel_edges(self) -> Dict[Tuple[Any, Any], List[Any]]:
        return self._analyzer.find_parallel_edges()

    def find_dangling_edges(self) -> List[Tuple[Any, Any]]:
        return self._analyzer.find_dangling_edges()

    # ========================================================================
    # ENUMERATION
    # ========================================================================

    def cursor(self) -> NodeCursor:
        """Get a new, independent cursor over node values."""
        return NodeCursor(self._graph)

    def __iter__(self):
        return NodeCursor(self._graph)

    def begin(self):
        """Restart the graph's own cursor at the smallest node value."""
        self._cursor = NodeCursor(self._graph)

    def end(self) -> bool:
        if self._cursor is None:
            self.begin()
        return self._cursor.end()

    def next(self):
        if self._cursor is None:
            self.begin()
        self._cursor.next()

    def value(self) -> Any:
        if self._cursor is None:
            self.begin()
        return self._cursor.value()

    # ========================================================================
    # OUTPUT
    # ========================================================================

    def format_nodes(self) -> List[str]:
        return listing.format_nodes(self._graph)

    def format_edges(self, value: Any) -> List[str]:
        return listing.format_edges(self._graph, value)

    def print_nodes(self, stream: Optional[TextIO] = None):
        listing.print_nodes(self._graph, stream)

    def print_edges(self, value: Any, stream: Optional[TextIO] = None):
        listing.print_edges(self._graph, value, stream)

    def to_adjacency_matrix(self, weighted: bool = False, dtype=None):
        """Export as (numpy matrix, node values); see formats.adjacency."""
        return to_adjacency_matrix(self._graph, weighted=weighted, dtype=dtype)

    # ========================================================================
    # CAMELCASE ALIASES
    # ========================================================================

    addNode = add_node
    isNode = is_node
    checkNodes = check_nodes
    addEdge = add_edge
    deleteEdge = delete_edge
    deleteNode = delete_node
    mergeReplace = merge_replace
    isConnected = is_connected
    printNodes = print_nodes
    printEdges = print_edges
