"""Base types and enums shared by the path model."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Union

#: An ordered collection of path segments accepted by constructors.
Segments = Iterable[str]

#: Right-hand operands accepted by `SPath.concat` besides another path.
ConcatOperand = Union[str, Segments]


class Ordering(IntEnum):
    """Result of `SPath.compare_to`.

    Values follow the usual comparator convention so a result can be compared
    against zero.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1
