"""
Diagnostic text listings of nodes and edges.

Node listing: node values grouped by outgoing edge count (ascending), values
ascending within a group, one value per line.

Edge listing: a header line, then either a single placeholder line when the
node has no outgoing edges, or one "<destination> <weight>" line per edge,
grouped by weight (ascending) with destinations ascending within a group.
"""

import logging
import sys
from typing import Any, List, Optional, TextIO

from ..classes.exceptions import ORIGIN
from ..classes.utils import group_sorted
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)

NULL_PLACEHOLDER = '(null)'
EDGE_HEADER = 'Edges attached to Node {value}'


def format_nodes(graph: WeightedGraph) -> List[str]:
    """
    Build the node listing.

    Args:
        graph: WeightedGraph instance

    Returns:
        One line per node value
    """
    groups = group_sorted(graph.id_to_node.values(),
                          key=lambda pNode: pNode.edge_count,
                          value=lambda pNode: pNode.value)
    return [str(value) for _, aValue in groups for value in aValue]


def format_edges(graph: WeightedGraph, value: Any) -> List[str]:
    """
    Build the edge listing for one node.

    Args:
        graph: WeightedGraph instance
        value: Node value

    Returns:
        Header line followed by the edge lines

    Raises:
        NodeNotFoundError: If the node is missing
    """
    pNode = graph.require_node(value, ORIGIN, 'printEdges')
    aLine = [EDGE_HEADER.format(value=value)]
    if pNode.edge_count == 0:
        aLine.append(NULL_PLACEHOLDER)
        return aLine

    aPair = []
    for pEdge in pNode.iter_edges():
        pDestination = graph.resolve(pEdge.lNodeID_destination)
        if pDestination is None:
            logger.debug(f"Skipping expired edge from {value!r} in listing")
            continue
        aPair.append((pDestination.value, pEdge.dWeight))

    groups = group_sorted(aPair, key=lambda pair: pair[1], value=lambda pair: pair[0])
    for weight, aDestination in groups:
        aLine.extend(f"{destination} {weight}" for destination in aDestination)
    return aLine


def _write_lines(aLine: List[str], stream: Optional[TextIO]):
    if stream is None:
        stream = sys.stdout
    for sLine in aLine:
        stream.write(sLine + '\n')


def print_nodes(graph: WeightedGraph, stream: Optional[TextIO] = None):
    """Write the node listing to stream (standard output by default)."""
    _write_lines(format_nodes(graph), stream)


def print_edges(graph: WeightedGraph, value: Any, stream: Optional[TextIO] = None):
    """Write the edge listing of one node to stream (standard output by default)."""
    _write_lines(format_edges(graph, value), stream)
