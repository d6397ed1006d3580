"""Adapters layer - Concrete implementations of ports.

- graph/: graph representations implementing GraphPort
"""
