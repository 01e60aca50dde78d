"""
Directed, weighted edge between two nodes.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from errors import InvalidArgumentError
from nodes import Node

T = TypeVar("T")


@dataclass(frozen=True)
class Edge(Generic[T]):
    """
    Immutable connection source -> destination with a non-negative weight.
    """

    source: Node[T]
    destination: Node[T]
    weight: float

    def __post_init__(self) -> None:
        if self.source is None or self.destination is None:
            raise InvalidArgumentError("Source and destination nodes cannot be null")
        try:
            weight = float(self.weight)
        except (TypeError, ValueError):
            raise InvalidArgumentError(
                f"Weight must be a number, got {self.weight!r}"
            ) from None
        # NaN fails every comparison, so test for the valid range
        if not weight >= 0:
            raise InvalidArgumentError("Weight can't be a negative number")
        # frozen: bypass __setattr__ to store the float
        object.__setattr__(self, "weight", weight)
