"""
Output formats for weighted graphs: diagnostic listings and matrix export.
"""

from .listing import format_nodes, format_edges, print_nodes, print_edges, NULL_PLACEHOLDER
from .adjacency import to_adjacency_matrix

__all__ = [
    'format_nodes',
    'format_edges',
    'print_nodes',
    'print_edges',
    'NULL_PLACEHOLDER',
    'to_adjacency_matrix',
]
