"""Unit test conftest: marks everything collected under tests/unit."""

from pathlib import Path

import pytest


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in this directory as unit tests."""
    unit_dir = Path(__file__).parent
    for item in items:
        if unit_dir in Path(item.path).parents:
            item.add_marker(pytest.mark.unit)
