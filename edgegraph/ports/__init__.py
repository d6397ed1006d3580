"""Ports layer - Abstract interfaces (Protocols) for edgegraph.

Ports define the contract that graph representations implement, so
client code can depend on GraphPort rather than a concrete class.
"""

from .graph import GraphPort

__all__ = ["GraphPort"]
