"""
Export of a graph as a dense adjacency matrix.
"""

import logging
from typing import Any, List, Tuple

import numpy as np

from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


def to_adjacency_matrix(graph: WeightedGraph, weighted: bool = False,
                        dtype=None) -> Tuple[np.ndarray, List[Any]]:
    """
    Convert a graph to an adjacency matrix.

    Rows and columns follow the ascending order of node values. Parallel edges
    between the same pair are accumulated into one cell.

    Args:
        graph: WeightedGraph instance
        weighted: If True, cells hold the sum of edge weights (weights must be
            numeric); otherwise they hold the number of edges
        dtype: Optional numpy dtype; defaults to int for counts and float
            for weights

    Returns:
        Tuple of (matrix of shape (n, n), node values in row order)
    """
    aValue = graph.sorted_values()
    index = {graph.value_to_id[value]: i for i, value in enumerate(aValue)}

    if dtype is None:
        dtype = float if weighted else int
    aMatrix = np.zeros((len(aValue), len(aValue)), dtype=dtype)

    for lNodeID, i in index.items():
        pNode = graph.id_to_node[lNodeID]
        for pEdge in pNode.iter_edges():
            j = index.get(pEdge.lNodeID_destination)
            if j is None:
                continue
            aMatrix[i, j] += pEdge.dWeight if weighted else 1

    logger.debug(f"Built {len(aValue)}x{len(aValue)} adjacency matrix")
    return aMatrix, aValue
