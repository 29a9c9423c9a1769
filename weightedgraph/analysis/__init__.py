"""
Graph analysis modules for connectivity queries.
"""

from .connectivity import ConnectivityAnalyzer

__all__ = ['ConnectivityAnalyzer']
