"""Graph port - The public contract of a weighted directed graph.

Implementation: adapters/graph/concrete_edges.py (ConcreteEdgesGraph)

Any representation satisfying this protocol can be swapped in for the
edge-list one. Vertex labels must be hashable and compare by value.
"""

from __future__ import annotations

from typing import Dict, Hashable, Protocol, Set, TypeVar

L = TypeVar("L", bound=Hashable)


class GraphPort(Protocol[L]):
    """Port for a mutable weighted directed graph.

    Edges have positive integer weights; weight 0 means "no edge". At
    most one edge exists per ordered (source, target) pair.
    """

    def add(self, vertex: L) -> bool:
        """Add a vertex.

        Args:
            vertex: Label of the vertex to add.

        Returns:
            True if the vertex was not already present.
        """
        ...

    def set(self, source: L, target: L, weight: int) -> int:
        """Add, change or remove the edge from source to target.

        A positive weight creates or updates the edge, adding missing
        endpoints as vertices. Zero removes the edge if present; its
        endpoints are kept.

        Args:
            source: Label of the source vertex.
            target: Label of the target vertex.
            weight: Non-negative integer weight.

        Returns:
            The previous weight of the edge, or 0 if there was none.

        Raises:
            InvalidWeightError: If weight is negative or not an int.
        """
        ...

    def remove(self, vertex: L) -> bool:
        """Remove a vertex and every edge touching it.

        Returns:
            True if the vertex was present.
        """
        ...

    def vertices(self) -> Set[L]:
        """Return a copy of the vertex set."""
        ...

    def sources(self, target: L) -> Dict[L, int]:
        """Map each vertex with an edge into ``target`` to its weight."""
        ...

    def targets(self, source: L) -> Dict[L, int]:
        """Map each vertex with an edge from ``source`` to its weight."""
        ...
