"""Global pytest configuration.

Restores the global path configuration after every test so that tests which
override the default delimiter do not leak into each other.
"""

from __future__ import annotations

import pytest

from simplepath.config import PATH_CONFIG


@pytest.fixture(autouse=True)
def _restore_path_config():
    saved = PATH_CONFIG.default_delimiter
    yield
    PATH_CONFIG.default_delimiter = saved
