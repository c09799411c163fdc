"""
Feature wrapper - attribute values for one feature.

Configuration is GeoJSON-like:

    {
        "type": "Feature",
        "id": "city-1",
        "geometry": {"type": "Point", "coordinates": [1, 2]},
        "properties": {"name": "Springfield"},
        "schema": {...}        # optional, inferred from values when absent
    }
"""

import datetime
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from shapely.geometry.base import BaseGeometry

from geobind import geom
from geobind.config.defaults import FeatureDefaults
from geobind.exceptions import InvalidConfiguration, TypeMismatch
from geobind.factory.normalizer import normalize
from geobind.feature.field import Field
from geobind.feature.schema import Schema
from geobind.object import GeoObject


def _adapt_value(field: Field, value: Any) -> Any:
    """Adapt a domain value to the field's binding."""
    if value is None:
        return None
    binding = field.handle.binding

    if field.is_geometry:
        value = geom.create(value)
    elif binding is float and isinstance(value, int) and not isinstance(value, bool):
        value = float(value)
    elif binding is datetime.date and isinstance(value, datetime.datetime):
        value = value.date()

    mismatched = not isinstance(value, binding) or (
        binding is int and isinstance(value, bool)
    )
    if mismatched:
        raise TypeMismatch(
            f"Feature field '{field.name}' expects {field.type}, got {type(value).__name__}",
            property_name=field.name
        )
    return value


class Feature(GeoObject):
    """
    A feature: a geometry plus attribute values described by a schema.
    """

    type_name = "Feature"

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        super().__init__(engine=engine, registry=registry)
        if config is None:
            return
        config = normalize(config)

        if config.get("type", "Feature") != "Feature":
            raise InvalidConfiguration(f"Feature cannot be built from type '{config['type']}'")
        properties = config.get("properties", {})
        if not isinstance(properties, Mapping):
            raise InvalidConfiguration("Feature properties must be a mapping")
        values = dict(properties)
        geometry = geom.create(config.get("geometry"))

        schema = config.get("schema")
        if schema is None:
            inferred = dict(values)
            if geometry is not None:
                inferred = {FeatureDefaults.GEOMETRY_FIELD_NAME: geometry, **inferred}
            schema = Schema.from_values(inferred, engine=self._engine, registry=self._registry)
        elif not isinstance(schema, Schema):
            schema = self.registry.create(schema, base=Schema, engine=self._engine)

        if geometry is not None:
            geometry_field = schema.geometry
            if geometry_field is None:
                raise InvalidConfiguration(
                    f"Feature has a geometry but schema '{schema.name}' has no geometry field"
                )
            values[geometry_field.name] = geometry

        unknown = [name for name in values if schema.get(name) is None]
        if unknown:
            raise InvalidConfiguration(
                f"Feature properties not in schema '{schema.name}': {', '.join(unknown)}"
            )

        adapted = {name: _adapt_value(schema.get(name), value) for name, value in values.items()}
        self.cache["schema"] = schema
        self.cache["handle"] = self.engine.feature(schema.handle, adapted, fid=config.get("id"))

    def _materialize(self):
        raise InvalidConfiguration("Feature is not constructed; pass properties or use Feature.from_()")

    @property
    def id(self) -> str:
        return self.handle.fid

    @property
    def schema(self) -> Schema:
        return self.cached(
            "schema",
            lambda: Schema.from_(self.handle.feature_type, engine=self._engine, registry=self._registry)
        )

    @property
    def geometry(self) -> Optional[BaseGeometry]:
        return self.handle.get_default_geometry()

    @geometry.setter
    def geometry(self, value: Any) -> None:
        field = self.schema.geometry
        if field is None:
            raise InvalidConfiguration(f"Schema '{self.schema.name}' has no geometry field")
        self.handle.set_attribute(field.name, _adapt_value(field, value))

    @property
    def properties(self) -> Dict[str, Any]:
        """Non-geometry attribute values."""
        return {
            field.name: self.handle.get_attribute(field.name)
            for field in self.schema.fields
            if not field.is_geometry
        }

    @property
    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        geometry = self.geometry
        return geometry.bounds if geometry is not None else None

    def get(self, name: str) -> Any:
        """Attribute value by field name, or None if the schema has no such field."""
        if self.schema.get(name) is None:
            return None
        return self.handle.get_attribute(name)

    def set(self, name: str, value: Any) -> None:
        field = self.schema.get(name)
        if field is None:
            raise InvalidConfiguration(f"Feature has no field '{name}'")
        self.handle.set_attribute(name, _adapt_value(field, value))

    @property
    def config(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "id": self.id,
            "geometry": geom.to_config(self.geometry),
            "properties": self.properties,
            "schema": self.schema.config,
        }

    def to_full_string(self) -> str:
        items = ", ".join(f"{k}: {v!r}" for k, v in self.properties.items())
        geometry = self.geometry
        if geometry is not None:
            items = f"<{geometry.geom_type}>" + (", " + items if items else "")
        return items
