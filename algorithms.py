"""
Algorithm interfaces for shortest-path computation.

Keeps the traversal contract separate from any particular frontier
implementation.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from edges import Edge
from graph import Graph
from nodes import Node


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.

    An engine owns the traversal state of its most recent run; distances and
    predecessors are read back through the query methods.
    """

    # --- Runs ----------------------------------------------------------------

    @abstractmethod
    def find_shortest_path(self, graph: Graph, start: Node, end: Node) -> None:
        """
        Settle nodes outward from start, stopping once end is settled.
        """
        raise NotImplementedError

    @abstractmethod
    def find_all_shortest_paths(self, graph: Graph, start: Node) -> None:
        """
        Settle every node reachable from start.
        """
        raise NotImplementedError

    # --- Queries -------------------------------------------------------------

    @abstractmethod
    def get_distance(self, node: Node) -> float:
        """
        Distance from the last run's start to node.

        Returns nodes.UNREACHED if node has not been reached.
        """
        raise NotImplementedError

    @abstractmethod
    def get_path(self, node: Node) -> List[Node]:
        """
        Nodes from the last run's start to node, both inclusive.

        An unreached node yields [node].
        """
        raise NotImplementedError

    @abstractmethod
    def distances(self) -> Dict[Node, float]:
        """Mapping node -> distance for every reached node."""
        raise NotImplementedError

    @abstractmethod
    def predecessors(self) -> Dict[Node, Node]:
        """Mapping node -> parent; the start has no parent and is omitted."""
        raise NotImplementedError

    # --- Relaxation primitives -----------------------------------------------

    @abstractmethod
    def mark_node_as_visited(self, node: Node) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_previous_node(self, source: Node, edge: Edge) -> None:
        raise NotImplementedError

    @abstractmethod
    def is_destination_node_unvisited(self, edge: Edge) -> bool:
        raise NotImplementedError

    @abstractmethod
    def select_minimum_unvisited(self) -> Optional[Node]:
        raise NotImplementedError

    # --- Map-style helpers ---------------------------------------------------

    def shortest_path_costs(self, graph: Graph, source: Node) -> Dict[Node, float]:
        """
        Compute only the cost map for all reachable nodes from source.
        """
        self.find_all_shortest_paths(graph, source)
        return self.distances()

    def shortest_paths(
        self, graph: Graph, source: Node
    ) -> tuple[Dict[Node, float], Dict[Node, Node]]:
        """
        Full run from source returning (dist, prev).

        prev lets a caller walk back from any reachable node to the source,
        for example to find the first hop towards a destination.
        """
        self.find_all_shortest_paths(graph, source)
        return self.distances(), self.predecessors()
