"""edgegraph - an in-memory weighted directed graph.

The graph is stored as a vertex set plus a list of immutable edges,
with its representation invariant re-checked after every mutation.

    from edgegraph import empty

    graph = empty()
    graph.set("A", "B", 3)
    graph.sources("B")  # {"A": 3}
"""

from .adapters.graph import ConcreteEdgesGraph
from .domain import Edge, EdgeGraphError, InvalidWeightError, RepInvariantError
from .graphs import empty
from .ports import GraphPort

__version__ = "0.1.0"

__all__ = [
    "ConcreteEdgesGraph",
    "Edge",
    "EdgeGraphError",
    "GraphPort",
    "InvalidWeightError",
    "RepInvariantError",
    "empty",
]
