"""
Exception types raised by the weighted graph.
"""

from typing import Any

ORIGIN = 'origin'
DESTINATION = 'destination'


class GraphError(Exception):
    """Base class for graph errors."""


class NodeNotFoundError(GraphError, LookupError):
    """
    Raised when an operation requires a node that is not in the graph.

    Attributes:
        value: The missing node value
        side: Which endpoint is missing, 'origin' or 'destination'
        operation: Name of the failing operation, if known
    """

    def __init__(self, value: Any, side: str = ORIGIN, operation: str = None):
        self.value = value
        self.side = side
        self.operation = operation
        sLabel = 'Origin' if side == ORIGIN else 'Dest'
        sMessage = f"{sLabel} does not exist"
        if operation:
            sMessage += f" ({operation})"
        sMessage += f": {value!r}"
        super().__init__(sMessage)
