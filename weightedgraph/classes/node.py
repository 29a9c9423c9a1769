"""
Node representation for the weighted graph.
"""

import logging
from typing import Any, Iterator, Set

from .edge import pyedge

logger = logging.getLogger(__name__)


class pynode:
    """
    Uniquely valued vertex owning its outgoing edges.

    The value is both the identity of the node within a graph and its payload.
    The arena id stays fixed for the lifetime of the node, including renames,
    so edges referring to it keep resolving.

    Attributes:
        value: Node value
        lNodeID: Arena id assigned by the owning graph
        aEdge_out: Set of outgoing edges (this node is their source)
    """

    def __init__(self, value: Any, lNodeID: int):
        self.value = value
        self.lNodeID = lNodeID
        self.aEdge_out: Set[pyedge] = set()

    def add_edge(self, lNodeID_destination: int, dWeight: Any) -> bool:
        """
        Add an outgoing edge unless an identical one is already present.

        Args:
            lNodeID_destination: Arena id of the destination node
            dWeight: Edge weight

        Returns:
            True if the edge was inserted
        """
        pEdge = pyedge(self.lNodeID, lNodeID_destination, dWeight)
        if pEdge in self.aEdge_out:
            return False
        self.aEdge_out.add(pEdge)
        return True

    def remove_edge(self, lNodeID_destination: int, dWeight: Any) -> bool:
        pEdge = pyedge(self.lNodeID, lNodeID_destination, dWeight)
        if pEdge in self.aEdge_out:
            self.aEdge_out.discard(pEdge)
            return True
        return False

    def remove_edges_to(self, lNodeID_destination: int) -> int:
        """Drop every outgoing edge targeting the given node; return how many went."""
        aEdge_drop = [e for e in self.aEdge_out if e.lNodeID_destination == lNodeID_destination]
        for pEdge in aEdge_drop:
            self.aEdge_out.discard(pEdge)
        return len(aEdge_drop)

    def has_edge_to(self, lNodeID_destination: int) -> bool:
        return any(e.lNodeID_destination == lNodeID_destination for e in self.aEdge_out)

    def iter_edges(self) -> Iterator[pyedge]:
        return iter(self.aEdge_out)

    @property
    def edge_count(self) -> int:
        return len(self.aEdge_out)

    def __repr__(self):
        return f"pynode({self.value!r}, id={self.lNodeID}, out={len(self.aEdge_out)})"
