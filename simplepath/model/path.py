"""Delimiter-independent representation of a filesystem-style path.

The ``SPath`` class stores a path as a fixed-length list of string segments
plus a default delimiter used for rendering. Segments are parsed from text by
literal splitting and joined back with any delimiter, so the same path can be
rendered as ``a/b/c`` or ``a.b.c`` without re-parsing.

Helpers provide equality, parent/child checks, a comparator, composition with
``+`` and derivation of relative and common paths. No filesystem access or
``.``/``..`` normalization is performed.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Iterator, List, Optional, Tuple

from simplepath.config import PATH_CONFIG
from simplepath.logging import get_logger
from simplepath.types.base import ConcatOperand, Ordering, Segments

logger = get_logger(__name__)


def _owned_segments(segments: Segments) -> List[str]:
    """Copy `segments` into a new list, checking every item is a string."""
    owned = list(segments)
    for index, segment in enumerate(owned):
        if not isinstance(segment, str):
            raise TypeError(
                f"Path segment at index {index} must be a str, "
                f"got {type(segment).__name__}"
            )
    return owned


class SPath:
    """A path made of string segments, independent of any delimiter.

    The segment count is fixed at construction. Individual segments may be
    replaced by index, every other operation returns a new instance.

    Equality and hashing consider segments only; two paths with different
    default delimiters but the same segments are equal.

    Attributes:
        default_delimiter: Delimiter used by `to_string()` and `str()` when
            none is given explicitly.
    """

    __slots__ = ("_segments", "_default_delimiter")

    def __init__(self, *segments: str, delimiter: Optional[str] = None) -> None:
        """Create a path from individual segments.

        Args:
            *segments: Path segments in order. No splitting is done.
            delimiter: Default delimiter. Falls back to the configured default,
                then to the host directory separator.
        """
        self._segments: List[str] = _owned_segments(segments)
        self._default_delimiter: str = PATH_CONFIG.resolve_delimiter(delimiter)

    @classmethod
    def parse(cls, text: str, delimiter: Optional[str] = None) -> SPath:
        """Split `text` on `delimiter` into a new path.

        Splitting is literal with no limit and keeps empty segments, so
        ``"a//b"`` on ``"/"`` yields ``["a", "", "b"]`` and ``""`` yields a
        single empty segment.

        Args:
            text: Delimited path string.
            delimiter: Delimiter to split on and store as the default.

        Returns:
            The parsed path.

        Raises:
            TypeError: If `text` is not a string.
            ValueError: If the delimiter is empty.
        """
        if not isinstance(text, str):
            raise TypeError(f"Path text must be a str, got {type(text).__name__}")
        resolved = PATH_CONFIG.resolve_delimiter(delimiter)
        if not resolved:
            raise ValueError("Cannot parse a path with an empty delimiter")

        segments = text.split(resolved)
        logger.debug(
            "Parsed %r on %r into %d segment(s)", text, resolved, len(segments)
        )
        return cls.from_segments(segments, resolved)

    @classmethod
    def from_segments(
        cls, segments: Segments, delimiter: Optional[str] = None
    ) -> SPath:
        """Wrap an ordered iterable of segments without splitting them."""
        return cls(*segments, delimiter=delimiter)

    def copy(self) -> SPath:
        """Return a new path with the same segments and default delimiter.

        Also callable as ``SPath.copy(other)``.
        """
        return SPath.from_segments(self._segments, self._default_delimiter)

    def __copy__(self) -> SPath:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> SPath:
        return self.copy()

    @property
    def default_delimiter(self) -> str:
        return self._default_delimiter

    @property
    def segments(self) -> Tuple[str, ...]:
        """Snapshot of the segments as a tuple."""
        return tuple(self._segments)

    @property
    def length(self) -> int:
        """Number of segments."""
        return len(self._segments)

    def _check_index(self, index: Any) -> int:
        if not isinstance(index, int):
            raise TypeError(
                f"Path indices must be integers, got {type(index).__name__}"
            )
        if not 0 <= index < len(self._segments):
            raise IndexError(
                f"Segment index {index} out of range for path of length "
                f"{len(self._segments)}"
            )
        return index

    def get(self, index: int) -> str:
        """Return the segment at `index`.

        Negative indices are not supported.

        Raises:
            IndexError: If `index` is outside ``[0, length)``.
            TypeError: If `index` is not an integer.
        """
        return self._segments[self._check_index(index)]

    def set(self, index: int, value: str) -> None:
        """Replace the segment at `index` in place.

        Raises:
            IndexError: If `index` is outside ``[0, length)``.
            TypeError: If `index` is not an integer or `value` is not a string.
        """
        checked = self._check_index(index)
        if not isinstance(value, str):
            raise TypeError(f"Path segment must be a str, got {type(value).__name__}")
        self._segments[checked] = value

    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def __setitem__(self, index: int, value: str) -> None:
        self.set(index, value)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        """Iterate over a snapshot of the segments.

        Replacing a segment while iterating does not affect the iterator.
        """
        return iter(tuple(self._segments))

    def to_string(self, delimiter: Optional[str] = None) -> str:
        """Join the segments with `delimiter` or the default delimiter.

        An empty path renders as the empty string. For any text ``s`` and
        non-empty delimiter ``d``, ``SPath.parse(s, d).to_string(d) == s``.
        Segments containing the delimiter are not escaped.
        """
        if delimiter is None:
            delimiter = self._default_delimiter
        elif not isinstance(delimiter, str):
            raise TypeError(
                f"Delimiter must be a str, got {type(delimiter).__name__}"
            )
        return delimiter.join(self._segments)

    def with_default_delimiter(self, delimiter: str) -> SPath:
        """Return a path with the same segments and a different default delimiter."""
        return SPath.from_segments(self._segments, delimiter)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        """Render using the format spec as delimiter, e.g. ``f"{path:.}"``.

        An empty spec uses the default delimiter.
        """
        return self.to_string(format_spec or None)

    def __repr__(self) -> str:
        return f"SPath({self._segments!r}, delimiter={self._default_delimiter!r})"

    def concat(self, other: SPath | ConcatOperand) -> SPath:
        """Return a path with `other`'s segments appended to this path's.

        Args:
            other: Another path, a single segment string, or an iterable of
                segment strings.

        Returns:
            A new path that keeps this path's default delimiter.

        Raises:
            TypeError: If `other` is none of the supported operand types.
        """
        extra = _operand_segments(other)
        if extra is None:
            raise TypeError(
                f"Cannot concatenate SPath with {type(other).__name__}"
            )
        return self._extended(extra)

    def __add__(self, other: Any) -> SPath:
        extra = _operand_segments(other)
        if extra is None:
            return NotImplemented
        return self._extended(extra)

    def _extended(self, extra: List[str]) -> SPath:
        return SPath.from_segments(self._segments + extra, self._default_delimiter)

    def equals(self, other: SPath) -> bool:
        """Return True if both paths have the same segments in the same order.

        The default delimiter is ignored.
        """
        if not isinstance(other, SPath):
            return False
        return self._segments == other._segments

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SPath):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, SPath):
            return NotImplemented
        return not self.equals(other)

    def __hash__(self) -> int:
        # Changes if a segment is replaced via set().
        return hash(tuple(self._segments))

    def is_child_of(self, ancestor: SPath) -> bool:
        """Return True if `ancestor` is a strict leading prefix of this path.

        A path is never a child of itself, and every non-empty path is a child
        of the empty path.
        """
        if len(ancestor._segments) >= len(self._segments):
            return False
        return all(
            theirs == mine for theirs, mine in zip(ancestor._segments, self._segments)
        )

    def compare_to(self, other: SPath) -> Ordering:
        """Compare this path to `other` by ancestry.

        Returns `Ordering.LESS` when this path is a child of `other`,
        `Ordering.EQUAL` when the segments match, and `Ordering.GREATER`
        otherwise. This is not a total order: a parent compared to its child
        is also `GREATER`.
        """
        if self.is_child_of(other):
            return Ordering.LESS
        if self.equals(other):
            return Ordering.EQUAL
        return Ordering.GREATER

    def to_relative(self, base: SPath) -> SPath:
        """Strip the leading segments this path shares with `base`.

        Only the longest common leading run is removed. If `base` is not a
        prefix, the result may still contain segments found in `base`.

        Args:
            base: Path to make this path relative to.

        Returns:
            A new path with this path's remaining segments and default delimiter.
        """
        shared = 0
        for mine, theirs in zip(self._segments, base._segments):
            if mine != theirs:
                break
            shared += 1

        if shared < len(base._segments):
            logger.debug(
                "Base %r is not a prefix of %r; stripped %d leading segment(s)",
                base,
                self,
                shared,
            )
        return SPath.from_segments(self._segments[shared:], self._default_delimiter)

    def common_parent(self, other: SPath) -> SPath:
        """Return `other`'s segments at every index where both paths agree.

        Matches are not limited to a leading prefix: with ``a/x/c`` and
        ``a/b/c`` the result is ``a/c``. Indices past the shorter path are
        ignored.
        """
        matched = [
            index
            for index, (mine, theirs) in enumerate(zip(self._segments, other._segments))
            if mine == theirs
        ]
        if matched and matched[-1] >= len(matched):
            logger.debug(
                "Common segments of %r and %r are not a leading run: indices %s",
                self,
                other,
                matched,
            )
        return SPath.from_segments(
            (other._segments[index] for index in matched), self._default_delimiter
        )


def _operand_segments(other: Any) -> Optional[List[str]]:
    """Return the segments `other` contributes to a concatenation.

    Returns None for unsupported operand types.
    """
    if isinstance(other, SPath):
        return list(other._segments)
    if isinstance(other, str):
        return [other]
    if isinstance(other, Iterable):
        return _owned_segments(other)
    return None
