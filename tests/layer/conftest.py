"""
Layer test fixtures - a small states shapefile written per test.
"""

import pytest

from tests.factories.shapefile_factories import write_states


@pytest.fixture
def states_path(tmp_path):
    """Path to a Shapefile with one polygon per state in STATES."""
    return write_states(tmp_path)
