"""Pytest configuration and fixtures for naivedate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so naivedate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _fresh_default_cache():
    """Start every test with an empty cache behind naivedate.complete()."""
    import naivedate

    naivedate.clear_cache()
    yield
    naivedate.clear_cache()
