"""Shared typing constructs for SimplePath.

Type aliases and enums used by the path model. Contains no runtime logic.
"""

from simplepath.types.base import ConcatOperand, Ordering, Segments

__all__ = [
    # Enums
    "Ordering",
    # Type aliases
    "Segments",
    "ConcatOperand",
]
