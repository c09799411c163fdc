"""
Factory Package - configuration normalization and polymorphic dispatch.

Usage:
    from geobind.factory import get_registry

    schema = get_registry().create({"fields": [{"name": "the_geom", "type": "Point"}]})
"""

from .normalizer import discriminator, normalize
from .registry import FactoryEntry, FactoryRegistry, get_registry, set_registry

__all__ = [
    'FactoryEntry',
    'FactoryRegistry',
    'discriminator',
    'get_registry',
    'normalize',
    'set_registry',
]
