"""Domain layer - Edge value type and typed errors.

No external dependencies.
"""

from .errors import EdgeGraphError, InvalidWeightError, RepInvariantError
from .models import Edge, validate_weight

__all__ = [
    # Models
    "Edge",
    "validate_weight",
    # Errors
    "EdgeGraphError",
    "InvalidWeightError",
    "RepInvariantError",
]
