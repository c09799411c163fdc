"""
Feature wrapper tests - schema binding, value adaptation, round trip.
"""

import datetime

import pytest
from shapely.geometry import Point

from geobind import create
from geobind.exceptions import InvalidConfiguration, TypeMismatch
from geobind.feature import Feature, Schema
from tests.factories.config_factories import make_schema_config, make_values


class TestFeatureConstruction:

    def test_inferred_schema(self):
        feature = Feature({"geometry": Point(1, 2), "properties": {"name": "Springfield", "pop": 3}})
        assert feature.schema.field_names == ["geom", "name", "pop"]
        assert feature.geometry.equals(Point(1, 2))
        assert feature.get("name") == "Springfield"
        assert feature.properties == {"name": "Springfield", "pop": 3}

    def test_geojson_geometry(self):
        feature = Feature({"geometry": {"type": "Point", "coordinates": [1, 2]}, "properties": {}})
        assert feature.geometry.equals(Point(1, 2))

    def test_explicit_schema(self, cities_config):
        feature = Feature({
            "geometry": Point(1, 2),
            "properties": {"name": "Springfield"},
            "schema": cities_config,
        })
        assert feature.schema.name == "cities"
        assert feature.get("the_geom").equals(Point(1, 2))

    def test_schema_object_shared(self, cities_config):
        schema = Schema(cities_config)
        feature = Feature({"properties": {"name": "a"}, "schema": schema})
        assert feature.schema is schema

    def test_random_values(self):
        config = make_schema_config()
        values = make_values(config)
        feature = Feature({"properties": values, "schema": config})
        for name, value in values.items():
            assert feature.get(name) == value

    def test_explicit_id(self):
        assert Feature({"id": "city.1", "properties": {}}).id == "city.1"

    def test_generated_ids_are_unique(self):
        ids = {Feature({"properties": {}}).id for _ in range(5)}
        assert len(ids) == 5

    def test_bounds(self):
        feature = Feature({"geometry": "LINESTRING (0 0, 2 3)", "properties": {}})
        assert feature.bounds == (0.0, 0.0, 2.0, 3.0)

    def test_registry_dispatch(self):
        feature = create({"type": "Feature", "properties": {"a": 1}})
        assert isinstance(feature, Feature)


class TestFeatureValidation:

    def test_unknown_property(self, cities_config):
        with pytest.raises(InvalidConfiguration, match="population"):
            Feature({"properties": {"population": 3}, "schema": cities_config})

    def test_geometry_without_geometry_field(self):
        with pytest.raises(InvalidConfiguration, match="no geometry field"):
            Feature({"geometry": Point(0, 0), "properties": {}, "schema": [{"name": "a", "type": "String"}]})

    def test_wrong_value_type(self):
        with pytest.raises(TypeMismatch, match="expects Integer"):
            Feature({"properties": {"n": "three"}, "schema": [{"name": "n", "type": "Integer"}]})

    def test_bool_is_not_integer(self):
        with pytest.raises(TypeMismatch):
            Feature({"properties": {"n": True}, "schema": [{"name": "n", "type": "Integer"}]})

    def test_properties_must_be_mapping(self):
        with pytest.raises(InvalidConfiguration):
            Feature({"properties": ["a"]})


class TestFeatureValues:

    def test_integer_widened_to_double(self):
        feature = Feature({"properties": {"r": 2}, "schema": [{"name": "r", "type": "Double"}]})
        assert feature.get("r") == 2.0
        assert isinstance(feature.get("r"), float)

    def test_datetime_narrowed_to_date(self):
        feature = Feature({
            "properties": {"d": datetime.datetime(2024, 5, 1, 8)},
            "schema": [{"name": "d", "type": "Date"}],
        })
        assert feature.get("d") == datetime.date(2024, 5, 1)

    def test_set_value(self):
        feature = Feature({"properties": {"name": "a"}})
        feature.set("name", "b")
        assert feature.get("name") == "b"

    def test_set_unknown_field(self):
        feature = Feature({"properties": {"name": "a"}})
        with pytest.raises(InvalidConfiguration):
            feature.set("other", 1)

    def test_set_geometry(self):
        feature = Feature({"geometry": Point(0, 0), "properties": {}})
        feature.geometry = "POINT (5 6)"
        assert feature.geometry.equals(Point(5, 6))

    def test_get_unknown_returns_none(self):
        assert Feature({"properties": {"a": 1}}).get("b") is None


class TestFeatureRoundTrip:

    def test_config_shape(self):
        feature = Feature({"id": "f1", "geometry": Point(1, 2), "properties": {"name": "a"}})
        config = feature.config
        assert config["type"] == "Feature"
        assert config["id"] == "f1"
        assert config["geometry"] == {"type": "Point", "coordinates": (1.0, 2.0)}
        assert config["properties"] == {"name": "a"}
        assert config["schema"]["fields"][0] == {"name": "geom", "type": "Point"}

    def test_round_trip(self):
        feature = Feature({"id": "f1", "geometry": Point(1, 2), "properties": {"name": "a", "n": 1}})
        copy = Feature(feature.config)
        assert copy.config == feature.config

    def test_from_adopts_handle(self):
        feature = Feature({"properties": {"a": 1}})
        adopted = Feature.from_(feature.handle)
        assert adopted.get("a") == 1
        assert adopted.schema.field_names == ["a"]
