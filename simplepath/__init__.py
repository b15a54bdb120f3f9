"""SimplePath: delimiter-independent path values.

SimplePath represents a filesystem-style path as an ordered sequence of string
segments. Paths can be parsed from and rendered to text with any delimiter,
compared structurally, concatenated and made relative to one another. No
filesystem access is performed.

Primary API:
    SPath - Segment-based path value
    Ordering - Result of SPath.compare_to()
    PATH_CONFIG - Global defaults (e.g. delimiter override)

Example:
    from simplepath import SPath

    path = SPath.parse("usr/local/bin", "/")
    base = SPath.parse("usr/local", "/")

    assert path.is_child_of(base)
    assert path.to_relative(base).to_string() == "bin"
    assert f"{path:.}" == "usr.local.bin"
"""

from __future__ import annotations

from simplepath import logging
from simplepath._version import __version__
from simplepath.config import PATH_CONFIG, PathConfig
from simplepath.model.path import SPath
from simplepath.types.base import Ordering

__all__ = [
    # Version
    "__version__",
    # Model
    "SPath",
    # Types
    "Ordering",
    # Configuration
    "PathConfig",
    "PATH_CONFIG",
    # Utilities
    "logging",
]
