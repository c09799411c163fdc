"""
Schema wrapper - field definitions of a feature type.

Sample code to create a new schema:

    cities = Schema({
        "name": "cities",
        "fields": [
            {"name": "the_geom", "type": "Point", "projection": "EPSG:4326"},
            {"name": "name", "type": "String"},
        ]
    })

    len(cities.fields)                  # 2
    cities.geometry.name                # "the_geom"
    cities.get("the_geom").type         # "Point"
    cities.get("the_geom").projection   # <Projection EPSG:4326>
"""

from typing import Any, Dict, List, Mapping, Optional

from geobind.config import get_config
from geobind.exceptions import InvalidConfiguration
from geobind.factory.normalizer import normalize
from geobind.feature.field import Field
from geobind.object import GeoObject
from geobind.util_logger import ComponentType, LoggerFactory


logger = LoggerFactory.create_logger(ComponentType.WRAPPER, "Schema")


def _field_name(field: Any) -> Optional[str]:
    if isinstance(field, Field):
        return field.name
    return normalize(field).get("name")


class Schema(GeoObject):
    """
    Field definitions of a feature type.

    Constructed from a list of field definitions, or a mapping with a
    ``fields`` list and an optional ``name`` (default "feature").
    """

    type_name = "Schema"

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        super().__init__(engine=engine, registry=registry)
        if config is None:
            return
        config = normalize(config)

        if config.get("type", "Schema") != "Schema":
            raise InvalidConfiguration(f"Schema cannot be built from type '{config['type']}'")
        fields = config.get("fields")
        if not isinstance(fields, (list, tuple)):
            raise InvalidConfiguration("Construct schema with a fields list (missing or not a list: 'fields')")

        name = config.get("name") or get_config().default_schema_name

        seen = set()
        for item in fields:
            field_name = _field_name(item)
            if not isinstance(field_name, str):
                continue
            if field_name in seen:
                raise InvalidConfiguration(
                    f"Schema '{name}' field names must be unique; '{field_name}' appears more than once"
                )
            seen.add(field_name)

        wrapped: List[Field] = [
            item if isinstance(item, Field) else self.registry.create(item, base=Field, engine=self._engine)
            for item in fields
        ]

        # generate the engine feature type from the field definitions
        builder = self.engine.feature_type_builder()
        builder.set_name(name)
        for field in wrapped:
            if field.is_geometry and field.projection is not None:
                builder.set_crs(field.projection.handle)
            builder.add(field.handle)
        self.cache["handle"] = builder.build_feature_type()

        logger.debug(f"Built schema '{name}' with {len(wrapped)} fields")

    def _materialize(self):
        raise InvalidConfiguration("Schema is not constructed; pass a fields list or use Schema.from_()")

    @classmethod
    def from_values(
        cls,
        values: Mapping[str, Any],
        name: Optional[str] = None,
        engine: Any = None,
        registry: Any = None
    ) -> "Schema":
        """Create a schema with field types inferred from a mapping of values."""
        fields = [
            Field.from_value(field_name, value, engine=engine, registry=registry)
            for field_name, value in values.items()
        ]
        config = {"fields": fields}
        if name:
            config["name"] = name
        return cls(config, engine=engine, registry=registry)

    def clone(self, config: Any = None) -> "Schema":
        """
        Create a copy of this schema, merging in overrides.

        Override fields replace existing fields with the same name in place;
        override fields with new names are appended.

        Args:
            config: Optional mapping with ``fields`` and/or ``name``
        """
        config = normalize(config)
        overrides = list(config.get("fields") or [])

        fields = []
        existing = set()
        # replace any existing fields with provided fields
        for field in self.fields:
            existing.add(field.name)
            replacement = next((o for o in overrides if _field_name(o) == field.name), None)
            fields.append(replacement if replacement is not None else field)
        # add any new fields
        fields.extend(o for o in overrides if _field_name(o) not in existing)

        return Schema(
            {"name": config.get("name") or self.name, "fields": fields},
            engine=self._engine,
            registry=self._registry
        )

    @property
    def name(self) -> str:
        """The schema name. Typically matches the layer name."""
        return self.handle.name

    @property
    def geometry(self) -> Optional[Field]:
        """Default geometry field, or None if the schema has no geometry field."""
        def wrap():
            descriptor = self.handle.get_geometry_descriptor()
            if descriptor is None:
                return None
            return Field.from_(descriptor, engine=self._engine, registry=self._registry)
        return self.cached("geometry", wrap)

    @property
    def fields(self) -> List[Field]:
        """Field definitions in declaration order."""
        wrapped = self.cached("fields", lambda: [
            Field.from_(descriptor, engine=self._engine, registry=self._registry)
            for descriptor in self.handle.get_attribute_descriptors()
        ])
        return list(wrapped)

    @property
    def field_names(self) -> List[str]:
        return [d.local_name for d in self.handle.get_attribute_descriptors()]

    def get(self, name: str) -> Optional[Field]:
        """Field definition with the given name, or None."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    @property
    def config(self) -> Dict[str, Any]:
        return {
            "type": "Schema",
            "name": self.name,
            "fields": [field.config for field in self.fields]
        }

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self.config == other.config

    def __hash__(self) -> int:
        return hash((self.name, tuple(self.field_names)))

    def to_full_string(self) -> str:
        names = '["' + '", "'.join(self.field_names) + '"]'
        return f'name: "{self.name}", fields: {names}'
