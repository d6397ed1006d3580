"""Immutable domain models for edgegraph.

Edges are frozen dataclasses with slots. A weight change never mutates
an edge in place; the graph swaps in a new value instead.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Hashable, Tuple, TypeVar

from .errors import InvalidWeightError

L = TypeVar("L", bound=Hashable)


def validate_weight(weight: object, minimum: int = 0) -> int:
    """Return ``weight`` if it is an int no smaller than ``minimum``.

    Raises:
        InvalidWeightError: If the weight is not an int (bools rejected)
            or is below ``minimum``.
    """
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidWeightError(
            f"Weight must be an integer, got {type(weight).__name__}",
            weight=weight,
        )
    if weight < minimum:
        raise InvalidWeightError(
            f"Weight must be >= {minimum}, got {weight}",
            weight=weight,
        )
    return weight


@dataclass(frozen=True, slots=True)
class Edge(Generic[L]):
    """A directed, weighted connection between two vertices.

    Attributes:
        source: Vertex the edge leaves
        target: Vertex the edge enters
        weight: Strictly positive integer weight
    """

    source: L
    target: L
    weight: int

    def __post_init__(self) -> None:
        validate_weight(self.weight, minimum=1)

    @property
    def pair(self) -> Tuple[L, L]:
        """The ordered ``(source, target)`` pair identifying this edge."""
        return (self.source, self.target)

    def with_weight(self, weight: int) -> Edge[L]:
        """Return a copy of this edge carrying ``weight``."""
        return replace(self, weight=weight)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"
