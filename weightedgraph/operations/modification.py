"""
Graph modification operations.

This module provides operations that modify graph structure: edge insertion
and removal, node renaming, merging and deletion.
"""

import logging
from typing import Any

from ..classes.exceptions import ORIGIN
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class GraphModifier:
    """
    Handles graph modification operations.

    This class provides methods for:
    - Adding and deleting edges
    - Renaming nodes in place
    - Merging one node into another
    - Deleting nodes together with every edge that targets them

    Every operation validates its preconditions before touching the graph,
    so a failing call leaves the graph unchanged.
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the graph modifier.

        Args:
            graph: WeightedGraph instance to modify
        """
        self.graph = graph

    def add_edge(self, src: Any, dst: Any, weight: Any) -> bool:
        """
        Add a directed edge src -> dst with the given weight.

        Args:
            src: Origin node value
            dst: Destination node value
            weight: Edge weight

        Returns:
            False if an edge with the same destination and weight already exists

        Raises:
            NodeNotFoundError: If either node is missing
        """
        pNode_src, pNode_dst = self.graph.check_nodes(src, dst, 'addEdge')
        if not pNode_src.add_edge(pNode_dst.lNodeID, weight):
            return False

        self.graph.touch()
        logger.debug(f"Added edge {src!r} -> {dst!r} ({weight!r})")
        return True

    def delete_edge(self, src: Any, dst: Any, weight: Any):
        """Remove the edge src -> dst with exactly this weight, if present."""
        pNode_src = self.graph.get_node(src)
        pNode_dst = self.graph.get_node(dst)
        if pNode_src is None or pNode_dst is None:
            return

        if pNode_src.remove_edge(pNode_dst.lNodeID, weight):
            self.graph.touch()
            logger.debug(f"Deleted edge {src!r} -> {dst!r} ({weight!r})")

    def replace(self, old_value: Any, new_value: Any) -> bool:
        """
        Rename a node.

        The node object and its arena id are kept, so outgoing edges and edges
        elsewhere pointing to it follow the rename without being touched.

        Args:
            old_value: Current node value
            new_value: New node value

        Returns:
            False if a node with new_value already exists (graph unchanged)

        Raises:
            NodeNotFoundError: If old_value is not in the graph
        """
        pNode = self.graph.require_node(old_value, ORIGIN, 'replace')
        if self.graph.is_node(new_value):
            return False

        self.graph.rekey_node(pNode, new_value)
        logger.debug(f"Renamed node {old_value!r} to {new_value!r}")
        return True

    def merge_replace(self, old_value: Any, new_value: Any):
        """
        Fold the old node into the new node, then remove the old node.

        Outgoing edges of the old node are copied onto the new node, with
        self loops on the old node becoming self loops on the new node.
        Incoming edges of the old node, from any node in the graph, are
        retargeted to the new node. Edges already present on the new node
        (same destination and weight) are not duplicated.

        Args:
            old_value: Value of the node to fold away
            new_value: Value of the surviving node

        Raises:
            NodeNotFoundError: If either node is missing; nothing is changed
        """
        pNode_old, pNode_new = self.graph.check_nodes(old_value, new_value, 'mergeReplace')
        if pNode_old is pNode_new:
            return

        lNodeID_old = pNode_old.lNodeID
        lNodeID_new = pNode_new.lNodeID

        # Outgoing edges
        nOutgoing = 0
        for pEdge in list(pNode_old.iter_edges()):
            lNodeID_dst = pEdge.lNodeID_destination
            if lNodeID_dst == lNodeID_old:
                lNodeID_dst = lNodeID_new
            elif self.graph.resolve(lNodeID_dst) is None:
                logger.debug(f"Skipping expired edge from {old_value!r} during merge")
                continue
            if pNode_new.add_edge(lNodeID_dst, pEdge.dWeight):
                nOutgoing += 1

        # Incoming edges, from every node including the survivor
        nIncoming = 0
        for pNode in self.graph.id_to_node.values():
            if pNode is pNode_old:
                continue
            aEdge_in = [e for e in pNode.iter_edges() if e.lNodeID_destination == lNodeID_old]
            for pEdge in aEdge_in:
                pNode.aEdge_out.discard(pEdge)
                if pNode.add_edge(lNodeID_new, pEdge.dWeight):
                    nIncoming += 1

        self.graph.remove_node(pNode_old)
        logger.debug(f"Merged node {old_value!r} into {new_value!r} "
                     f"({nOutgoing} outgoing, {nIncoming} incoming edges moved)")

    def delete_node(self, value: Any):
        """
        Remove a node, its outgoing edges and every edge that targets it.

        Absent values are ignored.
        """
        pNode = self.graph.get_node(value)
        if pNode is None:
            return

        nIncoming = 0
        for pNode_other in self.graph.id_to_node.values():
            if pNode_other is pNode:
                continue
            nIncoming += pNode_other.remove_edges_to(pNode.lNodeID)

        nOutgoing = pNode.edge_count
        self.graph.remove_node(pNode)
        logger.debug(f"Deleted node {value!r} with {nOutgoing} outgoing and {nIncoming} incoming edges")
