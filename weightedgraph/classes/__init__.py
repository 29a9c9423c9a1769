"""
Core data classes for weighted graph representation.

This module contains the fundamental data structures used throughout
the weightedgraph library.
"""

from .edge import pyedge
from .node import pynode
from .exceptions import GraphError, NodeNotFoundError

__all__ = [
    'pyedge',
    'pynode',
    'GraphError',
    'NodeNotFoundError',
]
