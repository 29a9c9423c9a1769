"""
Core graph data structures and management.

This module contains the fundamental graph representation and basic
graph operations without high-level editing or analysis.
"""

from .graph import WeightedGraph
from .cursor import NodeCursor

__all__ = ['WeightedGraph', 'NodeCursor']
