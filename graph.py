"""
Directed, weighted graph abstraction.

Nodes are Node instances.
Edges are directed: source -> destination with float weight.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from edges import Edge
from nodes import Node


class Graph(ABC):
    """Read-only directed, weighted graph over Node objects."""

    @abstractmethod
    def nodes(self) -> Sequence[Node]:
        """Return all nodes in the graph, in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Sequence[Edge]:
        """Return all edges in the graph, in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def outgoing_edges(self, node: Node) -> Sequence[Edge]:
        """
        Edges whose source is node, in insertion order.

        Returns an empty sequence for nodes without outgoing edges.
        """
        raise NotImplementedError
