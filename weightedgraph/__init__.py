"""
PyWeightedGraph - Generic Directed Weighted Graph Library

A Python library providing a value-semantic directed weighted graph container.
Nodes are distinct, ordered values; edges are directed and weighted, and
several edges may join the same ordered pair of nodes when their weights
differ.

Main Classes:
    pygraph: Main graph class (facade)
    pynode: Node representation owning its outgoing edges
    pyedge: Edge representation between nodes
    NodeCursor: Independent cursor over node values
    NodeNotFoundError: Raised when a required node is missing

Example:
    >>> from weightedgraph import pygraph
    >>> graph = pygraph()
    >>> graph.add_node("A")
    True
    >>> graph.add_node("B")
    True
    >>> graph.add_edge("A", "B", 3)
    True
    >>> graph.merge_replace("A", "B")
"""

__version__ = "0.1.0"

from weightedgraph.classes.node import pynode
from weightedgraph.classes.edge import pyedge
from weightedgraph.classes.exceptions import GraphError, NodeNotFoundError
from weightedgraph.core.cursor import NodeCursor
from weightedgraph.core.weightedgraph import pygraph

__all__ = [
    'pygraph',
    'pynode',
    'pyedge',
    'NodeCursor',
    'GraphError',
    'NodeNotFoundError',
]
