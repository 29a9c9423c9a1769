"""
Graph operation modules for modifying graph structure.
"""

from .modification import GraphModifier

__all__ = ['GraphModifier']
