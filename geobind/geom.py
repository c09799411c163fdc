"""
Geometry helpers.

Geometries are shapely objects and are not wrapped; this module maps
geometry type names to shapely classes and converts between shapely
geometries and configuration values (GeoJSON-like mappings or WKT).

Exports:
    GEOMETRY_TYPES: Geometry type name -> shapely class
    is_geometry_type: Check a field type name
    type_name: Geometry type name of a shapely geometry
    create: Build a shapely geometry from a mapping, WKT or geometry
    to_config: GeoJSON-like mapping for a geometry
    transform: Reproject a geometry between projections
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from pyproj import Transformer
from shapely import wkt as shapely_wkt
from shapely.errors import ShapelyError
from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    mapping,
    shape,
)
from shapely.geometry.base import BaseGeometry
from shapely.ops import transform as shapely_transform

from geobind.exceptions import InvalidConfiguration, TypeMismatch


GEOMETRY_TYPES = {
    "Geometry": BaseGeometry,
    "Point": Point,
    "LineString": LineString,
    "Polygon": Polygon,
    "MultiPoint": MultiPoint,
    "MultiLineString": MultiLineString,
    "MultiPolygon": MultiPolygon,
    "GeometryCollection": GeometryCollection,
}


def is_geometry_type(name: Any) -> bool:
    """True if name is a geometry field type ("Point", "Geometry"...)."""
    return isinstance(name, str) and name in GEOMETRY_TYPES


def type_name(geometry: BaseGeometry) -> str:
    """Geometry type name, e.g. "Point"."""
    return geometry.geom_type


def create(config: Any) -> Optional[BaseGeometry]:
    """
    Build a shapely geometry.

    Args:
        config: shapely geometry (returned as is), GeoJSON-like mapping,
                WKT string, or None

    Raises:
        InvalidConfiguration: If the mapping or WKT cannot be parsed
        TypeMismatch: If config is none of the accepted kinds
    """
    if config is None or isinstance(config, BaseGeometry):
        return config
    if isinstance(config, Mapping):
        try:
            return shape(config)
        except (KeyError, ValueError, TypeError, AttributeError, ShapelyError) as e:
            raise InvalidConfiguration(f"Invalid geometry mapping {dict(config)!r}: {e}") from e
    if isinstance(config, str):
        try:
            return shapely_wkt.loads(config)
        except ShapelyError as e:
            raise InvalidConfiguration(f"Invalid geometry WKT {config!r}: {e}") from e
    raise TypeMismatch(
        f"Geometry must be a shapely geometry, mapping or WKT string, not {type(config).__name__}"
    )


def to_config(geometry: Optional[BaseGeometry]) -> Optional[Dict[str, Any]]:
    """GeoJSON-like mapping for a geometry, or None."""
    if geometry is None:
        return None
    return mapping(geometry)


def transform(geometry: BaseGeometry, from_projection: Any, to_projection: Any) -> BaseGeometry:
    """
    Reproject a geometry.

    Args:
        geometry: shapely geometry
        from_projection: Source Projection, or anything Projection accepts
        to_projection: Target Projection, or anything Projection accepts

    Returns:
        New shapely geometry in the target projection
    """
    # Imported here: proj imports the engine, which imports this module
    from geobind.proj import Projection

    source = from_projection if isinstance(from_projection, Projection) else Projection(from_projection)
    target = to_projection if isinstance(to_projection, Projection) else Projection(to_projection)
    transformer = Transformer.from_crs(source.handle, target.handle, always_xy=True)
    return shapely_transform(transformer.transform, geometry)
