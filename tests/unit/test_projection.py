"""
Projection wrapper and geometry helper tests.
"""

import pytest
from shapely.geometry import Point

from geobind import geom
from geobind.exceptions import InvalidConfiguration, TypeMismatch
from geobind.proj import Projection


class TestProjection:

    def test_epsg_string(self):
        assert Projection("EPSG:4326").id == "EPSG:4326"

    def test_integer_code(self):
        assert Projection(3857).id == "EPSG:3857"

    def test_mapping_with_id(self):
        assert Projection({"id": "EPSG:4326"}) == Projection("EPSG:4326")

    def test_copy_shares_handle(self):
        original = Projection("EPSG:4326")
        assert Projection(original).handle is original.handle

    def test_config_is_id(self):
        assert Projection("EPSG:4326").config == "EPSG:4326"

    def test_wkt(self):
        assert "WGS 84" in Projection("EPSG:4326").wkt

    def test_invalid_code(self):
        with pytest.raises(InvalidConfiguration):
            Projection("EPSG:0")

    def test_repr(self):
        assert repr(Projection("EPSG:4326")) == "<Projection EPSG:4326>"


class TestGeometry:

    def test_create_from_geojson(self):
        point = geom.create({"type": "Point", "coordinates": [1, 2]})
        assert point.equals(Point(1, 2))

    def test_create_from_wkt(self):
        assert geom.create("POINT (1 2)").equals(Point(1, 2))

    def test_geometry_passes_through(self):
        point = Point(1, 2)
        assert geom.create(point) is point

    def test_none_passes_through(self):
        assert geom.create(None) is None

    def test_bad_wkt(self):
        with pytest.raises(InvalidConfiguration):
            geom.create("POINT (1")

    def test_bad_kind(self):
        with pytest.raises(TypeMismatch):
            geom.create(42)

    def test_to_config(self):
        assert geom.to_config(Point(1, 2)) == {"type": "Point", "coordinates": (1.0, 2.0)}

    def test_transform(self):
        projected = geom.transform(Point(0, 0), "EPSG:4326", "EPSG:3857")
        assert projected.x == pytest.approx(0)
        assert projected.y == pytest.approx(0)
        back = geom.transform(geom.transform(Point(10, 20), "EPSG:4326", "EPSG:3857"), "EPSG:3857", "EPSG:4326")
        assert back.x == pytest.approx(10)
        assert back.y == pytest.approx(20)
