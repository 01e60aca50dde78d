"""
Concrete directed, weighted graph implementation.

Implements the Graph interface with an adjacency index built once at
construction time.
"""

from typing import Dict, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from edges import Edge
from graph import Graph
from nodes import Node

T = TypeVar("T")


class WeightedGraph(Graph, Generic[T]):
    """
    Immutable graph backed by a node -> outgoing edges mapping.

    Edge endpoints are not checked against the node list; Edge already
    guarantees both endpoints exist.
    """

    def __init__(self, nodes: Iterable[Node[T]], edges: Iterable[Edge[T]]) -> None:
        self._nodes: Tuple[Node[T], ...] = tuple(nodes)
        self._edges: Tuple[Edge[T], ...] = tuple(edges)
        self._node_set = frozenset(self._nodes)

        adj: Dict[Node[T], list] = {node: [] for node in self._nodes}
        for edge in self._edges:
            adj.setdefault(edge.source, []).append(edge)
        self._adj: Dict[Node[T], Tuple[Edge[T], ...]] = {
            node: tuple(out) for node, out in adj.items()
        }

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Tuple[Node[T], ...]:
        return self._nodes

    def edges(self) -> Tuple[Edge[T], ...]:
        return self._edges

    def outgoing_edges(self, node: Node[T]) -> Tuple[Edge[T], ...]:
        return self._adj.get(node, ())

    # --- Lookup helpers ------------------------------------------------------

    def find_node(self, label: T) -> Optional[Node[T]]:
        """First node (insertion order) carrying label, or None."""
        for node in self._nodes:
            if node.label == label:
                return node
        return None

    def __contains__(self, node: object) -> bool:
        return node in self._node_set

    def __iter__(self) -> Iterator[Node[T]]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)
