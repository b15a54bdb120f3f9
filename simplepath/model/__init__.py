"""Path model package.

Defines the segment-based `SPath` value type.
"""

from simplepath.model.path import SPath

__all__ = ["SPath"]
