"""
Root test configuration for Hearth.

- unit/: Fast, isolated unit tests (domain package and API routes)

Note: sys.path manipulation is handled here so `household` and `api` import
from the project root without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test so env patches apply."""
    from api.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
