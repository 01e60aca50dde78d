"""
Dijkstra implementation of the ShortestPathEngine interface.

Distances and predecessors are kept in side tables keyed by node, so nodes
and graphs stay immutable and independent engines can share a graph.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple
import heapq
import logging

from algorithms import ShortestPathEngine
from edges import Edge
from errors import InvalidArgumentError, require_not_none
from graph import Graph
from nodes import Node, UNREACHED

logger = logging.getLogger(__name__)


class FrontierStrategy(Enum):
    """
    How the next node to settle is chosen.

    HEAP: binary heap with lazy deletion, O(E log V).
    SCAN: linear scan of the unvisited set per step, O(V^2).

    Both break ties by graph insertion order and settle nodes in the same
    order.
    """

    HEAP = "heap"
    SCAN = "scan"


@dataclass(frozen=True)
class EngineConfig:
    frontier: FrontierStrategy = FrontierStrategy.HEAP
    log_relaxations: bool = False

    def __post_init__(self) -> None:
        try:
            strategy = FrontierStrategy(self.frontier)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown frontier strategy: {self.frontier!r}"
            ) from None
        object.__setattr__(self, "frontier", strategy)


class DijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra over non-negative weights.

    Each run starts from a clean slate: unvisited holds every graph node,
    visited is empty and the side tables are cleared. After a run the
    partition and tables describe that run until the next one begins.

    Not thread-safe; use one engine per thread.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self._config = config or EngineConfig()
        # dicts used as insertion-ordered sets
        self._visited: Dict[Node, None] = {}
        self._unvisited: Dict[Node, None] = {}
        self._dist: Dict[Node, float] = {}
        self._prev: Dict[Node, Node] = {}
        self._order: Dict[Node, int] = {}
        self._heap: Optional[List[Tuple[float, int, Node]]] = None

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def visited_nodes(self) -> List[Node]:
        return list(self._visited)

    @property
    def unvisited_nodes(self) -> List[Node]:
        return list(self._unvisited)

    # --- Runs ----------------------------------------------------------------

    def find_shortest_path(self, graph: Graph, start: Node, end: Node) -> None:
        require_not_none(graph, "graph")
        require_not_none(start, "start")
        require_not_none(end, "end")
        self._run(graph, start, end)

    def find_all_shortest_paths(self, graph: Graph, start: Node) -> None:
        require_not_none(graph, "graph")
        require_not_none(start, "start")
        self._run(graph, start, None)

    def _run(self, graph: Graph, start: Node, end: Optional[Node]) -> None:
        self._reset(graph, start)
        logger.debug(
            "Dijkstra run from %r (%s, %s frontier): %d nodes, %d edges",
            start,
            "all targets" if end is None else f"target {end!r}",
            self._config.frontier.value,
            len(self._unvisited),
            len(graph.edges()),
        )

        while True:
            current = self._next_frontier_node()
            if current is None:
                logger.debug(
                    "Frontier exhausted with %d node(s) unreached",
                    len(self._unvisited),
                )
                break

            self.mark_node_as_visited(current)
            if current is end:
                logger.debug("Target %r settled at distance %s", end, self._dist[end])
                break

            self.update_distances(current, graph)

        self._heap = None
        logger.debug(
            "Dijkstra run finished: %d visited, %d unvisited",
            len(self._visited),
            len(self._unvisited),
        )

    def _reset(self, graph: Graph, start: Node) -> None:
        self._visited = {}
        self._unvisited = dict.fromkeys(graph.nodes())
        self._order = {}
        for index, node in enumerate(self._unvisited):
            self._order[node] = index
        if start not in self._unvisited:
            # start outside the node list still seeds the frontier
            self._order[start] = len(self._unvisited)
            self._unvisited[start] = None

        self._dist = {start: 0.0}
        self._prev = {}
        self._heap = None
        if self._config.frontier is FrontierStrategy.HEAP:
            self._heap = [(0.0, self._order[start], start)]

    def _next_frontier_node(self) -> Optional[Node]:
        if self._heap is None:
            return self.select_minimum_unvisited()

        while self._heap:
            d, _, node = heapq.heappop(self._heap)
            # Skip settled nodes and outdated entries
            if node in self._unvisited and d == self._dist.get(node):
                return node
        return None

    def update_distances(self, node: Node, graph: Graph) -> None:
        """
        Relax every outgoing edge of node whose destination is unvisited.

        A destination's distance changes only on strict improvement, so the
        first-found of several equal-cost predecessors is kept.
        """
        require_not_none(node, "node")
        require_not_none(graph, "graph")
        base = self._dist.get(node, UNREACHED)

        for edge in graph.outgoing_edges(node):
            if not self.is_destination_node_unvisited(edge):
                continue

            dest = edge.destination
            candidate = base + edge.weight
            if candidate < self._dist.get(dest, UNREACHED):
                self._dist[dest] = candidate
                self.set_previous_node(node, edge)
                if self._heap is not None:
                    heapq.heappush(
                        self._heap, (candidate, self._order.get(dest, -1), dest)
                    )
                if self._config.log_relaxations:
                    logger.debug("Relaxed %r -> %r to %s", node, dest, candidate)

    # --- Relaxation primitives -----------------------------------------------

    def mark_node_as_visited(self, node: Node) -> None:
        require_not_none(node, "node")
        self._unvisited.pop(node, None)
        self._visited[node] = None

    def set_previous_node(self, source: Node, edge: Edge) -> None:
        require_not_none(source, "source")
        require_not_none(edge, "edge")
        self._prev[edge.destination] = source

    def is_destination_node_unvisited(self, edge: Edge) -> bool:
        require_not_none(edge, "edge")
        return edge.destination in self._unvisited

    def select_minimum_unvisited(self) -> Optional[Node]:
        """
        Unvisited node with the smallest reached distance, or None.

        Nodes still at UNREACHED are never selected. Ties go to the node
        earliest in graph insertion order.
        """
        best: Optional[Node] = None
        best_distance = UNREACHED
        for node in self._unvisited:
            d = self._dist.get(node, UNREACHED)
            if d < best_distance:
                best, best_distance = node, d
        return best

    # --- Queries -------------------------------------------------------------

    def get_distance(self, node: Node) -> float:
        require_not_none(node, "node")
        return self._dist.get(node, UNREACHED)

    def get_previous(self, node: Node) -> Optional[Node]:
        require_not_none(node, "node")
        return self._prev.get(node)

    def get_path(self, node: Node) -> List[Node]:
        require_not_none(node, "node")
        path: List[Node] = []
        seen = set()
        current: Optional[Node] = node
        # seen guards against loops written through set_previous_node
        while current is not None and current not in seen:
            path.append(current)
            seen.add(current)
            current = self._prev.get(current)
        path.reverse()
        return path

    def is_reachable(self, node: Node) -> bool:
        require_not_none(node, "node")
        return node in self._dist

    def distances(self) -> Dict[Node, float]:
        return dict(self._dist)

    def predecessors(self) -> Dict[Node, Node]:
        return dict(self._prev)
