"""Configuration for SimplePath defaults."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class PathConfig:
    """Defaults applied when a path is built or rendered without a delimiter."""

    # Delimiter override; None falls back to the host directory separator
    default_delimiter: Optional[str] = None

    def resolve_delimiter(self, delimiter: Optional[str] = None) -> str:
        """Return the delimiter to use for a single call.

        Resolution order is the explicit argument, then `default_delimiter`,
        then `os.sep`. Evaluated on every call so changes to the config or to
        `os.sep` (e.g. in tests) take effect immediately.

        Raises:
            TypeError: If the resolved delimiter is not a string.
        """
        if delimiter is None:
            delimiter = self.default_delimiter
        if delimiter is None:
            delimiter = os.sep
        if not isinstance(delimiter, str):
            raise TypeError(
                f"Delimiter must be a str, got {type(delimiter).__name__}"
            )
        return delimiter


# Global configuration instance
PATH_CONFIG = PathConfig()
