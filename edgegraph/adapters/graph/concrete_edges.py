"""Edge-list graph adapter.

Implements GraphPort with the plainest possible representation: a set
of vertex labels and a list of Edge values.

Abstraction function:
    The graph whose vertices are ``_vertices`` and which has an edge
    source -> target of weight w for each Edge(source, target, w) in
    ``_edges``. Pairs with no Edge have weight 0.

Representation invariant:
    - every edge endpoint is in ``_vertices``
    - no two edges share the same (source, target)
    - every weight is a positive int
    - with k distinct unordered non-loop endpoint pairs among the edges,
      len(_vertices) >= ceil(sqrt(2k) + 0.5) when k > 0

Safety from rep exposure:
    Both containers are private and never handed out. Queries build
    new sets and dicts; Edge values are immutable.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Generic, Hashable, List, Optional, Set, TypeVar

from ...config import get_config
from ...domain.errors import RepInvariantError
from ...domain.models import Edge, validate_weight

L = TypeVar("L", bound=Hashable)


def min_vertex_count(pair_count: int) -> int:
    """Smallest vertex count able to hold ``pair_count`` distinct pairs.

    Uses the bound ceil(sqrt(2k) + 0.5), which is never larger than the
    exact minimum n satisfying n * (n - 1) / 2 >= k.
    """
    if pair_count <= 0:
        return 0
    return math.ceil(math.sqrt(2 * pair_count) + 0.5)


@dataclass(eq=False)
class ConcreteEdgesGraph(Generic[L]):
    """Weighted directed graph stored as a vertex set plus an edge list.

    Attributes:
        check_rep: Verify the representation invariant after every
            mutation. Defaults to the ``graph.check_rep`` setting.

    Example:
        graph = ConcreteEdgesGraph[str]()
        graph.set("A", "B", 3)
        graph.targets("A")  # {"B": 3}
    """

    check_rep: bool = field(default_factory=lambda: get_config().graph.check_rep)

    _vertices: Set[L] = field(default_factory=set, init=False, repr=False)
    _edges: List[Edge[L]] = field(default_factory=list, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._check_rep()

    # --- Mutation API --------------------------------------------------------

    def add(self, vertex: L) -> bool:
        """Add ``vertex``; return True if it was not already present."""
        added = vertex not in self._vertices
        if added:
            self._vertices.add(vertex)
            self._logger.debug("Vertex added", extra={"vertex": vertex})
        self._check_rep()
        return added

    def set(self, source: L, target: L, weight: int) -> int:
        """Create, update or delete the edge ``source -> target``.

        Args:
            source: Label of the source vertex.
            target: Label of the target vertex.
            weight: New weight; 0 deletes the edge.

        Returns:
            The weight the edge had before the call, 0 if it did not exist.

        Raises:
            InvalidWeightError: If weight is negative or not an int. The
                graph is left untouched.
        """
        validate_weight(weight)

        index = self._index_of_edge(source, target)
        previous_weight = 0

        if weight > 0:
            if index is None:
                self._vertices.add(source)
                self._vertices.add(target)
                self._edges.append(Edge(source, target, weight))
            else:
                previous_edge = self._edges[index]
                previous_weight = previous_edge.weight
                self._edges[index] = previous_edge.with_weight(weight)
        elif index is not None:
            previous_weight = self._edges.pop(index).weight

        if weight > 0 or index is not None:
            self._logger.debug(
                "Edge set",
                extra={
                    "source": source,
                    "target": target,
                    "weight": weight,
                    "previous_weight": previous_weight,
                },
            )

        self._check_rep()
        return previous_weight

    def remove(self, vertex: L) -> bool:
        """Remove ``vertex`` and all edges into or out of it.

        Returns:
            True if the vertex existed.
        """
        if vertex not in self._vertices:
            self._check_rep()
            return False

        self._vertices.remove(vertex)
        kept = [e for e in self._edges if e.source != vertex and e.target != vertex]
        dropped = len(self._edges) - len(kept)
        self._edges[:] = kept

        self._logger.debug(
            "Vertex removed",
            extra={"vertex": vertex, "edges_removed": dropped},
        )
        self._check_rep()
        return True

    # --- Queries -------------------------------------------------------------

    def vertices(self) -> Set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: L) -> Dict[L, int]:
        return {e.target: e.weight for e in self._edges if e.source == source}

    def __str__(self) -> str:
        labels = ", ".join(sorted(str(v) for v in self._vertices))
        lines = [f"vertices: {{{labels}}}"]
        lines.extend(str(edge) for edge in self._edges)
        return "\n".join(lines)

    # --- Internals -----------------------------------------------------------

    def _index_of_edge(self, source: L, target: L) -> Optional[int]:
        """Position of the edge ``source -> target`` in the edge list.

        Returns:
            The index, or None if no such edge exists.
        """
        for index, edge in enumerate(self._edges):
            if edge.source == source and edge.target == target:
                return index
        return None

    def _check_rep(self) -> None:
        """Raise RepInvariantError if the representation is corrupt."""
        if not self.check_rep:
            return

        unordered = {frozenset(e.pair) for e in self._edges if e.source != e.target}
        required = min_vertex_count(len(unordered))
        if len(self._vertices) < required:
            self._fail(
                f"{len(unordered)} vertex pairs need at least {required} vertices, "
                f"found {len(self._vertices)}",
                required,
            )

        pairs = set()
        for edge in self._edges:
            if edge.source not in self._vertices or edge.target not in self._vertices:
                self._fail(f"Edge {edge} has an endpoint outside the vertex set", required)
            if edge.pair in pairs:
                self._fail(f"Duplicate edge {edge.source} -> {edge.target}", required)
            if edge.weight <= 0:
                self._fail(f"Edge {edge} has a non-positive weight", required)
            pairs.add(edge.pair)

    def _fail(self, message: str, required: int = 0) -> None:
        self._logger.error(
            "Representation invariant violated",
            extra={"reason": message},
        )
        raise RepInvariantError(
            message,
            vertex_count=len(self._vertices),
            edge_count=len(self._edges),
            min_vertices=required,
        )
