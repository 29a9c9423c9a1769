"""
Core graph data structure for weighted graph representation.

This module provides the fundamental node arena without high-level operations.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..classes.node import pynode
from ..classes.exceptions import NodeNotFoundError, ORIGIN, DESTINATION

logger = logging.getLogger(__name__)


class WeightedGraph:
    """
    Core graph data structure for directed weighted graphs.

    This class manages the node arena without high-level operations like
    merging or listing. It provides:
    - Node id management (ids are never reused within one graph)
    - Value to node lookup
    - Node lifecycle (create, re-key, remove)
    - A modification counter used to invalidate active cursors
    """

    def __init__(self):
        self.id_to_node: Dict[int, pynode] = {}
        self.value_to_id: Dict[Any, int] = {}
        self._lNodeID_next = 0
        self._version = 0

    def touch(self):
        """Record a structural modification."""
        self._version += 1

    @property
    def version(self) -> int:
        return self._version

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def is_node(self, value: Any) -> bool:
        return value in self.value_to_id

    def get_node(self, value: Any) -> Optional[pynode]:
        """
        Get a node by its value.

        Args:
            value: Node value

        Returns:
            The node object, or None if not found
        """
        lNodeID = self.value_to_id.get(value)
        if lNodeID is None:
            return None
        return self.id_to_node.get(lNodeID)

    def resolve(self, lNodeID: int) -> Optional[pynode]:
        """
        Resolve an edge endpoint reference.

        Args:
            lNodeID: Arena id stored on an edge

        Returns:
            The node, or None if the reference has expired
        """
        return self.id_to_node.get(lNodeID)

    def require_node(self, value: Any, side: str = ORIGIN, operation: str = None) -> pynode:
        pNode = self.get_node(value)
        if pNode is None:
            raise NodeNotFoundError(value, side, operation)
        return pNode

    def check_nodes(self, src: Any, dst: Any, operation: str = None) -> Tuple[pynode, pynode]:
        """
        Check that both endpoints exist.

        Args:
            src: Origin node value
            dst: Destination node value
            operation: Operation name used in the error message

        Returns:
            Tuple of (origin node, destination node)

        Raises:
            NodeNotFoundError: If either node is missing; origin is checked first
        """
        pNode_src = self.require_node(src, ORIGIN, operation)
        pNode_dst = self.require_node(dst, DESTINATION, operation)
        return pNode_src, pNode_dst

    def sorted_values(self) -> List[Any]:
        """Get all node values in ascending order."""
        return sorted(self.value_to_id)

    def get_node_count(self) -> int:
        return len(self.id_to_node)

    def get_edge_count(self) -> int:
        return sum(pNode.edge_count for pNode in self.id_to_node.values())

    # ------------------------------------------------------------------
    # Node lifecycle
    # ------------------------------------------------------------------

    def create_node(self, value: Any) -> pynode:
        """
        Create and register a node for a value not yet in the graph.

        Args:
            value: Node value

        Returns:
            The new node
        """
        pNode = pynode(value, self._lNodeID_next)
        self._lNodeID_next += 1
        self.id_to_node[pNode.lNodeID] = pNode
        self.value_to_id[value] = pNode.lNodeID
        self.touch()
        return pNode

    def add_node(self, value: Any) -> bool:
        if value in self.value_to_id:
            return False
        self.create_node(value)
        logger.debug(f"Added node {value!r}")
        return True

    def rekey_node(self, pNode: pynode, new_value: Any):
        """
        Move a node to a new value keeping its arena id.

        The caller is responsible for making sure new_value is unused.
        """
        del self.value_to_id[pNode.value]
        pNode.value = new_value
        self.value_to_id[new_value] = pNode.lNodeID
        self.touch()

    def remove_node(self, pNode: pynode):
        """Remove a node and its outgoing edges from the arena."""
        del self.value_to_id[pNode.value]
        del self.id_to_node[pNode.lNodeID]
        pNode.aEdge_out.clear()
        self.touch()

    def clear(self):
        for pNode in self.id_to_node.values():
            pNode.aEdge_out.clear()
        self.id_to_node.clear()
        self.value_to_id.clear()
        self.touch()

    # ------------------------------------------------------------------
    # Whole-graph transfer
    # ------------------------------------------------------------------

    def copy_from(self, other: 'WeightedGraph'):
        """
        Rebuild this graph as an independent copy of another one.

        Every node gets a fresh arena id in this graph and every edge is
        recreated against the new ids. Edges whose destination has expired in
        the source graph are skipped.
        """
        if other is self:
            return

        self.clear()
        id_map: Dict[int, int] = {}
        for value in other.sorted_values():
            pNode_src = other.get_node(value)
            id_map[pNode_src.lNodeID] = self.create_node(value).lNodeID

        nSkipped = 0
        for lNodeID_src, pNode_src in other.id_to_node.items():
            pNode_new = self.id_to_node[id_map[lNodeID_src]]
            for pEdge in pNode_src.iter_edges():
                lNodeID_dst = id_map.get(pEdge.lNodeID_destination)
                if lNodeID_dst is None:
                    nSkipped += 1
                    continue
                pNode_new.add_edge(lNodeID_dst, pEdge.dWeight)

        if nSkipped:
            logger.debug(f"Skipped {nSkipped} expired edges while copying graph")
        logger.debug(f"Copied graph with {self.get_node_count()} nodes and {self.get_edge_count()} edges")

    def take_from(self, other: 'WeightedGraph'):
        """
        Move the arena of another graph into this one.

        The other graph is left empty and usable.
        """
        if other is self:
            return

        self.id_to_node, other.id_to_node = other.id_to_node, {}
        self.value_to_id, other.value_to_id = other.value_to_id, {}
        self._lNodeID_next = other._lNodeID_next
        other._lNodeID_next = 0
        self.touch()
        other.touch()
