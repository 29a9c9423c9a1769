"""
Connectivity queries for weighted graphs.

This module answers questions about direct connections between nodes. It does
not walk paths; every query looks at single edges only.
"""

import logging
from typing import Any, DefaultDict, Dict, List, Tuple
from collections import defaultdict

from ..classes.exceptions import ORIGIN
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class ConnectivityAnalyzer:
    """
    Answers connectivity questions about a graph.

    This class provides methods for:
    - Checking direct connections between nodes
    - Listing outgoing and incoming edges by value
    - Degree counts, sources and sinks
    - Finding parallel edges (same ordered pair, different weights)
    - Finding dangling edges (integrity check)
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the connectivity analyzer.

        Args:
            graph: WeightedGraph instance to analyze
        """
        self.graph = graph

    def is_connected(self, src: Any, dst: Any) -> bool:
        """
        Check whether at least one edge src -> dst exists, whatever its weight.

        Raises:
            NodeNotFoundError: If either node is missing
        """
        pNode_src, pNode_dst = self.graph.check_nodes(src, dst, 'isConnected')
        return pNode_src.has_edge_to(pNode_dst.lNodeID)

    def get_edges(self, value: Any) -> List[Tuple[Any, Any]]:
        """
        Get the outgoing edges of a node as (destination value, weight) pairs.

        Args:
            value: Node value

        Returns:
            Pairs sorted by destination value, then weight

        Raises:
            NodeNotFoundError: If the node is missing
        """
        pNode = self.graph.require_node(value, ORIGIN, 'getEdges')
        aPair = []
        for pEdge in pNode.iter_edges():
            pDestination = self.graph.resolve(pEdge.lNodeID_destination)
            if pDestination is None:
                logger.debug(f"Skipping expired edge from {value!r}")
                continue
            aPair.append((pDestination.value, pEdge.dWeight))
        return sorted(aPair)

    def get_incoming_edges(self, value: Any) -> List[Tuple[Any, Any]]:
        """
        Get the edges targeting a node as (source value, weight) pairs.

        Raises:
            NodeNotFoundError: If the node is missing
        """
        pNode = self.graph.require_node(value, ORIGIN, 'getIncomingEdges')
        aPair = []
        for pNode_src in self.graph.id_to_node.values():
            for pEdge in pNode_src.iter_edges():
                if pEdge.lNodeID_destination == pNode.lNodeID:
                    aPair.append((pNode_src.value, pEdge.dWeight))
        return sorted(aPair)

    def get_out_degree(self, value: Any) -> int:
        return self.graph.require_node(value, ORIGIN, 'outDegree').edge_count

    def get_in_degree(self, value: Any) -> int:
        return len(self.get_incoming_edges(value))

    def _in_degrees(self) -> DefaultDict[int, int]:
        in_degree: DefaultDict[int, int] = defaultdict(int)
        for pNode in self.graph.id_to_node.values():
            for pEdge in pNode.iter_edges():
                in_degree[pEdge.lNodeID_destination] += 1
        return in_degree

    def get_sources(self) -> List[Any]:
        """Get node values with no incoming edges, in ascending order."""
        in_degree = self._in_degrees()
        return sorted(pNode.value for pNode in self.graph.id_to_node.values()
                      if in_degree[pNode.lNodeID] == 0)

    def get_sinks(self) -> List[Any]:
        """Get node values with no outgoing edges, in ascending order."""
        return sorted(pNode.value for pNode in self.graph.id_to_node.values()
                      if pNode.edge_count == 0)

    def find_parallel_edges(self) -> Dict[Tuple[Any, Any], List[Any]]:
        """
        Find ordered node pairs joined by more than one edge.

        Returns:
            Dictionary mapping (source value, destination value) to the sorted
            list of weights, for pairs with at least two edges
        """
        channel_groups: DefaultDict[Tuple[Any, Any], List[Any]] = defaultdict(list)
        for pNode in self.graph.id_to_node.values():
            for pEdge in pNode.iter_edges():
                pDestination = self.graph.resolve(pEdge.lNodeID_destination)
                if pDestination is None:
                    continue
                channel_groups[(pNode.value, pDestination.value)].append(pEdge.dWeight)

        parallel = {pair: sorted(aWeight) for pair, aWeight in channel_groups.items()
                    if len(aWeight) > 1}
        logger.debug(f"Found {len(parallel)} node pairs with parallel edges")
        return parallel

    def find_dangling_edges(self) -> List[Tuple[Any, Any]]:
        """
        Find edges whose destination is no longer in the graph.

        Returns:
            List of (source value, weight) for each dangling edge. Empty for a
            graph whose invariants hold.
        """
        aDangling = []
        for pNode in self.graph.id_to_node.values():
            for pEdge in pNode.iter_edges():
                if self.graph.resolve(pEdge.lNodeID_destination) is None:
                    aDangling.append((pNode.value, pEdge.dWeight))
        if aDangling:
            logger.warning(f"Found {len(aDangling)} dangling edges")
        return aDangling
