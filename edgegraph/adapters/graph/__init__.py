"""Graph adapters - Implementations of GraphPort.

Available implementations:
- ConcreteEdgesGraph: vertex set plus edge list
"""

from .concrete_edges import ConcreteEdgesGraph, min_vertex_count

__all__ = ["ConcreteEdgesGraph", "min_vertex_count"]
