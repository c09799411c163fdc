"""
geobind - configuration-driven wrappers over a geospatial engine.

Plain configurations (strings, lists, mappings) are normalized and
dispatched through a factory registry to wrapper objects (schemas,
fields, features, styles, layers) that own lazily created engine
objects and round-trip back to configuration.

Usage:
    import geobind

    schema = geobind.create({"fields": [
        {"name": "the_geom", "type": "Point", "projection": "EPSG:4326"},
        {"name": "name", "type": "String"},
    ]})
    shape = geobind.create({"name": "circle", "size": 10})
    schema.config
"""

from typing import Any

from .config import GeobindConfig, get_config, set_config
from .exceptions import (
    ConfigurationError,
    DataSourceError,
    GeobindError,
    InvalidConfiguration,
    NoMatchingFactory,
    RangeError,
    TypeMismatch,
)
from .factory import FactoryEntry, FactoryRegistry, get_registry, normalize, set_registry
from .feature import Feature, Field, Schema
from .filter import Expression, Filter
from .layer import FeatureCursor, Layer, ShapefileLayer
from .object import GeoObject
from .proj import Projection
from .style import Fill, Shape, Stroke, Style, Symbolizer

__version__ = "0.1.0"


def create(config: Any, *args, base: type = None, **kwargs):
    """
    Construct a wrapper from a configuration using the default registry.

    Raises:
        NoMatchingFactory: If no registered type accepts the configuration
        InvalidConfiguration: If the selected type rejects it
    """
    return get_registry().create(config, *args, base=base, **kwargs)


__all__ = [
    'ConfigurationError',
    'DataSourceError',
    'Expression',
    'FactoryEntry',
    'FactoryRegistry',
    'Feature',
    'FeatureCursor',
    'Field',
    'Fill',
    'Filter',
    'GeoObject',
    'GeobindConfig',
    'GeobindError',
    'InvalidConfiguration',
    'Layer',
    'NoMatchingFactory',
    'Projection',
    'RangeError',
    'Schema',
    'Shape',
    'ShapefileLayer',
    'Stroke',
    'Style',
    'Symbolizer',
    'TypeMismatch',
    'create',
    'get_config',
    'get_registry',
    'normalize',
    'set_config',
    'set_registry',
]
