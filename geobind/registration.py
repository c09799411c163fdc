"""
Registration of the built-in wrapper types.

The default registry is assembled here, in one place and in a fixed
order, instead of by decorators scattered across modules. Dispatch
precedence therefore never depends on import order: earlier entries win
ties, so the most specific configurations are registered first and the
most generic (Field) last.

Usage:
    from geobind.registration import build_default_registry

    registry = build_default_registry()
    registry.create({"type": "Fill", "color": "#ff0000"})

    # Extend a private registry without touching the process default
    registry.register(Marker, handles=lambda c: c.get("type") == "Marker", priority=10)
"""

from collections.abc import Mapping
from typing import Any, Dict

from geobind.factory.registry import FactoryRegistry
from geobind.util_logger import ComponentType, LoggerFactory


logger = LoggerFactory.create_logger(ComponentType.FACTORY, "registration")


def _is_schema(config: Dict[str, Any]) -> bool:
    return config.get("type") in (None, "Schema") and isinstance(config.get("fields"), (list, tuple))


def _is_feature(config: Dict[str, Any]) -> bool:
    if config.get("type") == "Feature":
        return True
    return config.get("type") is None and isinstance(config.get("properties"), Mapping)


def _is_shapefile(config: Dict[str, Any]) -> bool:
    if config.get("type") == "Shapefile":
        return True
    path = config.get("path")
    return config.get("type") is None and isinstance(path, str) and path.lower().endswith(".shp")


def _is_layer(config: Dict[str, Any]) -> bool:
    return config.get("type") == "Layer"


def _is_field(config: Dict[str, Any]) -> bool:
    from geobind.feature import FIELD_TYPES
    return (
        isinstance(config.get("name"), str)
        and config.get("type") in (None,) + FIELD_TYPES
        and "fields" not in config
    )


def build_default_registry(name: str = "default") -> FactoryRegistry:
    """
    Create a registry holding every built-in wrapper type.

    Order:
        Schema, Feature, Shape, Fill, Stroke, Style, ShapefileLayer,
        Layer, Field

    Args:
        name: Registry name used in log messages

    Returns:
        New FactoryRegistry (not a singleton)
    """
    from geobind.feature import Feature, Field, Schema
    from geobind.layer import Layer, ShapefileLayer
    from geobind.style import Fill, Shape, Stroke, Style
    from geobind.style.models import FillVariant, ShapeVariant, StrokeVariant, StyleVariant

    registry = FactoryRegistry(name)
    registry.register(Schema, handles=_is_schema)
    registry.register(Feature, handles=_is_feature)
    registry.register(Shape, model=ShapeVariant)
    registry.register(Fill, model=FillVariant)
    registry.register(Stroke, model=StrokeVariant)
    registry.register(Style, model=StyleVariant)
    registry.register(ShapefileLayer, handles=_is_shapefile)
    registry.register(Layer, handles=_is_layer)
    # most generic: any named mapping without a more specific match
    registry.register(Field, handles=_is_field)

    logger.debug(f"Built {name} registry with {len(registry)} wrapper types")
    return registry
