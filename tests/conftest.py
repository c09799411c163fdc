"""
Root conftest.py - sys.path, env vars, shared fixtures.

Every test starts from a clean process state: configuration reloaded
from the environment, default registry rebuilt, default engine recreated.
"""

import os
import sys

import pytest

# Add project root to sys.path so 'geobind' is importable without installing
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


GEOBIND_ENV_VARS = (
    "GEOBIND_LOG_LEVEL",
    "GEOBIND_JSON_LOGGING",
    "GEOBIND_SCHEMA_NAME",
    "GEOBIND_LAYER_NAME",
)


@pytest.fixture(autouse=True)
def reset_geobind_state(monkeypatch):
    """Clear geobind env vars and process singletons around each test."""
    from geobind.config import set_config
    from geobind.engine import set_engine
    from geobind.factory import set_registry

    for var in GEOBIND_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    set_registry(None)
    set_engine(None)
    yield
    set_config(None)
    set_registry(None)
    set_engine(None)


@pytest.fixture
def cities_config():
    """The schema configuration used in the package docs."""
    return {
        "name": "cities",
        "fields": [
            {"name": "the_geom", "type": "Point", "projection": "EPSG:4326"},
            {"name": "name", "type": "String"},
        ]
    }
