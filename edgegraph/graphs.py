"""Factory for new graphs."""

from __future__ import annotations

from typing import Hashable, TypeVar

from .adapters.graph import ConcreteEdgesGraph
from .ports.graph import GraphPort

L = TypeVar("L", bound=Hashable)


def empty() -> GraphPort[L]:
    """Create an empty graph using the default representation."""
    return ConcreteEdgesGraph()
