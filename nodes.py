"""
Node abstraction for the shortest-path engine.

Nodes are immutable, labelled vertices. Traversal state (distance,
predecessor) is kept by the engine for the duration of a run, never on the
node itself.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar
import sys

T = TypeVar("T")

# Distance reported for nodes with no known path: the largest finite float.
UNREACHED: float = sys.float_info.max


@dataclass(frozen=True, eq=False)
class Node(Generic[T]):
    """
    Labelled vertex.

    Identity is the node object itself: two Node("A") instances are two
    different vertices, and labels only need to support equality.
    """

    label: T

    def __repr__(self) -> str:
        return f"Node({self.label!r})"
