"""
Enumeration of node values.
"""

import logging
from typing import Any, List

from .graph import WeightedGraph

logger = logging.getLogger(__name__)


class NodeCursor:
    """
    Forward cursor over node values in ascending order.

    Each cursor captures its own position, so any number of cursors can walk
    the same graph at once. Mutating the graph invalidates every active
    cursor; any later access raises RuntimeError until begin() is called.

    The cursor supports both the explicit begin/end/next/value protocol and
    the Python iterator protocol:

        >>> cursor = graph.cursor()
        >>> while not cursor.end():
        ...     print(cursor.value())
        ...     cursor.next()
    """

    def __init__(self, graph: WeightedGraph):
        self._graph = graph
        self._aValue: List[Any] = []
        self._iIndex = 0
        self._version = -1
        self.begin()

    def _check_valid(self):
        if self._version != self._graph.version:
            raise RuntimeError("graph changed during iteration")

    def begin(self) -> 'NodeCursor':
        """Restart at the smallest node value."""
        self._aValue = self._graph.sorted_values()
        self._iIndex = 0
        self._version = self._graph.version
        return self

    def end(self) -> bool:
        """Whether the cursor is exhausted."""
        self._check_valid()
        return self._iIndex >= len(self._aValue)

    def next(self):
        self._check_valid()
        if self._iIndex < len(self._aValue):
            self._iIndex += 1

    def value(self) -> Any:
        self._check_valid()
        if self._iIndex >= len(self._aValue):
            raise IndexError("cursor is past the last node")
        return self._aValue[self._iIndex]

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        if self.end():
            raise StopIteration
        value = self._aValue[self._iIndex]
        self._iIndex += 1
        return value
