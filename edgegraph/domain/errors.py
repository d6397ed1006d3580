"""Typed errors for the edgegraph package.

Two failure modes exist:

- InvalidWeightError is a caller error. It is raised before any state
  is touched, so the graph is unchanged.
- RepInvariantError is an internal fault. The representation has been
  corrupted and the graph must not be used further.

All errors inherit from EdgeGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class EdgeGraphError(Exception):
    """Base error for the edgegraph package.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidWeightError(EdgeGraphError, ValueError):
    """Edge weight is negative or not an integer.

    Attributes:
        weight: The rejected weight value
    """

    weight: Any = None


@dataclass
class RepInvariantError(EdgeGraphError, AssertionError):
    """The graph representation invariant does not hold.

    Signals a bug in the mutation logic, not a caller mistake.

    Attributes:
        vertex_count: Number of vertices when the check ran
        edge_count: Number of edges when the check ran
        min_vertices: Minimum vertex count required by the edges
    """

    vertex_count: int = 0
    edge_count: int = 0
    min_vertices: int = 0
