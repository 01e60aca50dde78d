"""
Error types for the shortest-path engine.

Argument problems are programming-contract violations, so they surface as a
ValueError subclass and are never recovered internally.
"""

from typing import Any


class InvalidArgumentError(ValueError):
    """A required argument was missing or outside its valid range."""


def require_not_none(value: Any, name: str) -> None:
    """Raise if value is None."""
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None")
