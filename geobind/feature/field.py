"""
Field wrapper - one attribute definition of a schema.

Field definitions have at least ``name`` and ``type``. Geometry fields
may carry a ``projection``.

Usage:
    field = Field({"name": "the_geom", "type": "Point", "projection": "EPSG:4326"})
    field.is_geometry   # True
    field.config        # {"name": "the_geom", "type": "Point", "projection": "EPSG:4326"}
"""

import datetime
from typing import Any, Dict, Optional

from shapely.geometry.base import BaseGeometry

from geobind.engine.feature_type import TYPE_BINDINGS
from geobind.exceptions import InvalidConfiguration, TypeMismatch
from geobind.factory.normalizer import normalize
from geobind.geom import is_geometry_type
from geobind.object import GeoObject
from geobind.proj import Projection


FIELD_TYPES = tuple(TYPE_BINDINGS)

_FIELD_KEYS = ("name", "type", "projection", "title", "description")


class Field(GeoObject):
    """
    An attribute definition.

    Supported types: String, Integer, Double, Boolean, Date, Datetime and
    the geometry types (Geometry, Point, LineString, Polygon, MultiPoint,
    MultiLineString, MultiPolygon, GeometryCollection).
    """

    type_name = "Field"

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        super().__init__(engine=engine, registry=registry)
        if config is None:
            return
        config = normalize(config)

        name = config.get("name")
        field_type = config.get("type")
        if not isinstance(name, str) or not name:
            raise InvalidConfiguration("Field name must be a non-empty string")
        if field_type not in FIELD_TYPES:
            raise InvalidConfiguration(
                f"Field '{name}' has unsupported type {field_type!r}. "
                f"Expected one of: {', '.join(FIELD_TYPES)}"
            )
        unknown = sorted(set(config) - set(_FIELD_KEYS))
        if unknown:
            raise InvalidConfiguration(f"Field '{name}' has unknown keys: {', '.join(unknown)}")

        projection = config.get("projection")
        if projection is not None:
            if not is_geometry_type(field_type):
                raise InvalidConfiguration(
                    f"Field '{name}' of type {field_type} cannot have a projection"
                )
            if not isinstance(projection, Projection):
                projection = Projection(projection, engine=self._engine)

        self.cache["handle"] = self.engine.attribute_descriptor(
            name,
            field_type,
            crs=projection.handle if projection is not None else None,
            title=config.get("title"),
            description=config.get("description"),
        )

    def _materialize(self):
        raise InvalidConfiguration("Field requires a name and a type")

    @classmethod
    def from_value(cls, name: str, value: Any, engine: Any = None, registry: Any = None) -> "Field":
        """
        Create a field definition with a type inferred from a value.

        Raises:
            TypeMismatch: If no field type fits the value
        """
        if isinstance(value, BaseGeometry):
            field_type = value.geom_type
        elif isinstance(value, bool):
            field_type = "Boolean"
        elif isinstance(value, int):
            field_type = "Integer"
        elif isinstance(value, float):
            field_type = "Double"
        elif isinstance(value, str):
            field_type = "String"
        elif isinstance(value, datetime.datetime):
            field_type = "Datetime"
        elif isinstance(value, datetime.date):
            field_type = "Date"
        else:
            raise TypeMismatch(
                f"Cannot infer a field type for '{name}' from {type(value).__name__}",
                property_name=name
            )
        return cls({"name": name, "type": field_type}, engine=engine, registry=registry)

    @property
    def name(self) -> str:
        return self.handle.local_name

    @property
    def type(self) -> str:
        return self.handle.type_name

    @property
    def is_geometry(self) -> bool:
        return self.handle.is_geometry

    @property
    def projection(self) -> Optional[Projection]:
        """Projection of a geometry field, or None."""
        def wrap():
            crs = self.handle.crs
            return Projection.from_(crs, engine=self._engine) if crs is not None else None
        return self.cached("projection", wrap)

    @property
    def title(self) -> Optional[str]:
        return self.handle.title

    @property
    def description(self) -> Optional[str]:
        return self.handle.description

    @property
    def config(self) -> Dict[str, Any]:
        config = {"name": self.name, "type": self.type}
        if self.projection is not None:
            config["projection"] = self.projection.config
        if self.title is not None:
            config["title"] = self.title
        if self.description is not None:
            config["description"] = self.description
        return config

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self.config == other.config

    def __hash__(self) -> int:
        return hash((self.name, self.type))

    def to_full_string(self) -> str:
        return f'name: "{self.name}", type: {self.type}'
