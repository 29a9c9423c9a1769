"""
Utility functions for pyweightedgraph.

This module provides shared helpers used across the weightedgraph package,
including grouping of values for the diagnostic listings and structural
signatures used for value-based graph comparison.
"""

from typing import Any, Callable, Dict, FrozenSet, Hashable, Iterable, List, Tuple
from collections import defaultdict
import logging

logger = logging.getLogger(__name__)


def group_sorted(items: Iterable[Any],
                 key: Callable[[Any], Hashable],
                 value: Callable[[Any], Any]) -> List[Tuple[Any, List[Any]]]:
    """
    Group items by key, ordering groups by key and members by value.

    Members are deduplicated within a group, mirroring an ordered map of
    ordered sets.

    Args:
        items: Items to group
        key: Function returning the group key of an item
        value: Function returning the member value of an item

    Returns:
        List of (key, sorted members) tuples in ascending key order
    """
    groups: Dict[Hashable, set] = defaultdict(set)
    for item in items:
        groups[key(item)].add(value(item))

    return [(k, sorted(groups[k])) for k in sorted(groups)]


def structural_signature(graph) -> Dict[Any, FrozenSet[Tuple[Any, Any]]]:
    """
    Build a value-level description of a graph.

    Args:
        graph: WeightedGraph instance

    Returns:
        Dictionary mapping each node value to the frozen set of its
        (destination value, weight) pairs. Expired destinations are left out.
    """
    signature = {}
    for pNode in graph.id_to_node.values():
        aPair = set()
        for pEdge in pNode.iter_edges():
            pDestination = graph.resolve(pEdge.lNodeID_destination)
            if pDestination is None:
                continue
            aPair.add((pDestination.value, pEdge.dWeight))
        signature[pNode.value] = frozenset(aPair)
    return signature


def graphs_equal(graph_a, graph_b) -> bool:
    """Compare two graphs by node values and per-node (destination, weight) pairs."""
    if graph_a is graph_b:
        return True
    if graph_a.get_node_count() != graph_b.get_node_count():
        return False
    return structural_signature(graph_a) == structural_signature(graph_b)
