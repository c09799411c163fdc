"""
Engine collaborator.

The engine performs the real geospatial work: pyproj resolves coordinate
reference systems, geopandas reads vector data sources, and the feature
type and styling modules supply the builder and descriptor objects the
wrappers adapt. Wrappers only ever talk to the engine through the
GeoEngine methods, so a stub engine can stand in for it.

Usage:
    from geobind.engine import get_engine

    engine = get_engine()
    builder = engine.feature_type_builder()

Exports:
    GeoEngine: Default engine
    get_engine: Process default engine
    set_engine: Replace the process default engine
"""

import itertools
from typing import Any, Dict, Optional

import geopandas
from pyproj import CRS

from geobind.config.defaults import FeatureDefaults
from geobind.engine.feature_type import (
    TYPE_BINDINGS,
    AttributeDescriptor,
    FeatureType,
    FeatureTypeBuilder,
    SimpleFeature,
)
from geobind.engine.styling import StyleBuilder


class GeoEngine:
    """Default engine backed by pyproj, shapely and geopandas."""

    def __init__(self):
        self._style_builder = StyleBuilder()
        self._fids = itertools.count(1)

    def feature_type_builder(self) -> FeatureTypeBuilder:
        return FeatureTypeBuilder()

    def attribute_descriptor(
        self,
        name: str,
        type_name: str,
        crs: Optional[CRS] = None,
        title: Optional[str] = None,
        description: Optional[str] = None
    ) -> AttributeDescriptor:
        """
        Create an attribute descriptor.

        Raises:
            ValueError: If type_name has no binding
        """
        if type_name not in TYPE_BINDINGS:
            raise ValueError(f"Unsupported attribute type: {type_name}")
        return AttributeDescriptor(
            local_name=name,
            type_name=type_name,
            binding=TYPE_BINDINGS[type_name],
            crs=crs,
            title=title,
            description=description,
        )

    def crs(self, code: Any) -> CRS:
        """Resolve anything pyproj understands (EPSG code, WKT, PROJ string)."""
        return CRS.from_user_input(code)

    def feature(
        self,
        feature_type: FeatureType,
        values: Dict[str, Any],
        fid: Optional[str] = None
    ) -> SimpleFeature:
        if fid is None:
            fid = f"{FeatureDefaults.FEATURE_ID_PREFIX}-{next(self._fids)}"
        return SimpleFeature(feature_type, values, fid)

    def style_builder(self) -> StyleBuilder:
        return self._style_builder

    def read_frame(self, path: str) -> geopandas.GeoDataFrame:
        """Read a vector data source into a GeoDataFrame."""
        return geopandas.read_file(path)


_default_engine: Optional[GeoEngine] = None


def get_engine() -> GeoEngine:
    """Get the process default engine, creating it on first call."""
    global _default_engine
    if _default_engine is None:
        _default_engine = GeoEngine()
    return _default_engine


def set_engine(engine: Optional[GeoEngine]) -> None:
    """Replace the process default engine (None recreates it on next use)."""
    global _default_engine
    _default_engine = engine


__all__ = [
    'GeoEngine',
    'get_engine',
    'set_engine',
]
