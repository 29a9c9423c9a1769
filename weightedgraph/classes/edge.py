"""
Edge representation for the weighted graph.

An edge is stored once, inside the outgoing set of its source node. Its
endpoints are node ids into the owning graph's arena rather than node objects,
so an edge never keeps its endpoints alive.
"""

from typing import Any, Hashable, Tuple


class pyedge:
    """
    Directed, weighted edge between two nodes.

    Attributes:
        lNodeID_source: Arena id of the source node
        lNodeID_destination: Arena id of the destination node
        dWeight: Edge weight
    """

    __slots__ = ('lNodeID_source', 'lNodeID_destination', 'dWeight')

    def __init__(self, lNodeID_source: int, lNodeID_destination: int, dWeight: Any):
        self.lNodeID_source = lNodeID_source
        self.lNodeID_destination = lNodeID_destination
        self.dWeight = dWeight

    @property
    def key(self) -> Tuple[int, int, Hashable]:
        return (self.lNodeID_source, self.lNodeID_destination, self.dWeight)

    def __eq__(self, other):
        if not isinstance(other, pyedge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"pyedge({self.lNodeID_source} -> {self.lNodeID_destination}, weight={self.dWeight!r})"
