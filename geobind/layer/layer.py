"""
Layer - a named collection of features sharing one schema.

The base Layer keeps its features in memory. Subclasses backed by a data
source override the engine handle and feature iteration.

Usage:
    layer = Layer({"name": "cities", "fields": [
        {"name": "the_geom", "type": "Point", "projection": "EPSG:4326"},
        {"name": "name", "type": "String"},
    ]})
    layer.add({"the_geom": Point(1, 2), "name": "Springfield"})
    layer.count   # 1
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from geobind.config import get_config
from geobind.config.defaults import FeatureDefaults
from geobind.exceptions import InvalidConfiguration
from geobind.factory.normalizer import normalize
from geobind.feature import Feature, Schema
from geobind.filter import Filter
from geobind.layer.cursor import FeatureCursor
from geobind.object import GeoObject
from geobind.proj import Projection


_LAYER_KEYS = ("type", "name", "schema", "fields", "features")


class Layer(GeoObject):
    """
    In-memory layer.

    Configuration keys: ``name``, ``schema`` (or ``fields``) and
    ``features``. Without a schema the layer gets a single Geometry field.
    """

    type_name = "Layer"

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        super().__init__(engine=engine, registry=registry)
        self._name: Optional[str] = None
        if config is None:
            return
        config = self.prep_config(config)
        if config.get("type", self.type_name) != self.type_name:
            raise InvalidConfiguration(f"{self.type_name} cannot be built from type '{config['type']}'")
        self._configure(config)

    @classmethod
    def prep_config(cls, config: Any) -> Dict[str, Any]:
        return normalize(config)

    def _configure(self, config: Dict[str, Any]) -> None:
        unknown = sorted(set(config) - set(_LAYER_KEYS))
        if unknown:
            raise InvalidConfiguration(f"Layer has no properties: {', '.join(unknown)}")

        self._name = config.get("name")
        schema = config.get("schema")
        fields = config.get("fields")
        if schema is not None and fields is not None:
            raise InvalidConfiguration("Layer takes either 'schema' or 'fields', not both")
        if schema is not None and not isinstance(schema, Schema):
            schema = self.registry.create(schema, base=Schema, engine=self._engine)
        elif fields is not None:
            schema = Schema({"name": self.name, "fields": fields}, engine=self._engine, registry=self._registry)
        if schema is not None:
            self.cache["schema"] = schema

        for feature in config.get("features") or []:
            self.add(feature)

    def _materialize(self) -> List[Any]:
        return []

    def _default_schema(self) -> Schema:
        return Schema({
            "name": self.name,
            "fields": [{
                "name": FeatureDefaults.GEOMETRY_FIELD_NAME,
                "type": FeatureDefaults.GEOMETRY_FIELD_TYPE,
            }]
        }, engine=self._engine, registry=self._registry)

    @property
    def name(self) -> str:
        return self._name or get_config().default_layer_name

    @property
    def schema(self) -> Schema:
        return self.cached("schema", self._default_schema)

    @property
    def projection(self) -> Optional[Projection]:
        geometry = self.schema.geometry
        return geometry.projection if geometry is not None else None

    @property
    def count(self) -> int:
        return len(self.handle)

    def _iter_features(self) -> Iterator[Feature]:
        schema = self.schema
        for handle in self.handle:
            feature = Feature.from_(handle, engine=self._engine, registry=self._registry)
            feature.cache["schema"] = schema
            yield feature

    def features(self, filter: Union[Filter, Mapping, Callable[[Feature], bool], None] = None) -> FeatureCursor:
        """
        Cursor over the layer's features.

        Args:
            filter: Optional Filter, CQL2-JSON selector, or predicate callable
        """
        if filter is None:
            predicate = None
        elif callable(filter) and not isinstance(filter, Filter):
            predicate = filter
        else:
            predicate = (filter if isinstance(filter, Filter) else Filter(filter, engine=self._engine)).evaluate
        return FeatureCursor(
            feature for feature in self._iter_features()
            if predicate is None or predicate(feature)
        )

    def add(self, feature: Any) -> Feature:
        """
        Add a feature.

        Args:
            feature: Feature, Feature configuration, or mapping of attribute
                     values keyed by field name

        Returns:
            The stored Feature, bound to this layer's schema
        """
        if isinstance(feature, Feature):
            config = {"id": feature.id, "geometry": feature.geometry, "properties": feature.properties}
        elif isinstance(feature, Mapping) and ("properties" in feature or feature.get("type") == "Feature"):
            config = {k: v for k, v in feature.items() if k != "schema"}
        elif isinstance(feature, Mapping):
            config = {"properties": dict(feature)}
        else:
            raise InvalidConfiguration(
                f"Layer features must be Features or mappings, not {type(feature).__name__}"
            )
        config["schema"] = self.schema
        stored = Feature(config, engine=self._engine, registry=self._registry)
        self.handle.append(stored.handle)
        return stored

    @property
    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """(minx, miny, maxx, maxy) of all feature geometries, or None."""
        boxes = [f.bounds for f in self._iter_features() if f.bounds is not None]
        if not boxes:
            return None
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    @property
    def config(self) -> Dict[str, Any]:
        features = []
        for feature in self._iter_features():
            feature_config = feature.config
            del feature_config["schema"]
            features.append(feature_config)
        return {
            "type": "Layer",
            "name": self.name,
            "schema": self.schema.config,
            "features": features,
        }

    def to_full_string(self) -> str:
        return f'name: "{self.name}", count: {self.count}'
