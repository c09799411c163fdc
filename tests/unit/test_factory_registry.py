"""
Factory registry tests - first match wins, deterministic precedence,
dispatch failures versus construction failures.
"""

from pathlib import Path

import pytest
from pydantic import BaseModel
from typing import Literal

from geobind import create
from geobind.exceptions import InvalidConfiguration, NoMatchingFactory
from geobind.factory import FactoryEntry, FactoryRegistry, get_registry, set_registry
from geobind.feature import Feature, Field, Schema
from geobind.layer import Layer, ShapefileLayer
from geobind.registration import build_default_registry
from geobind.style import Fill, Shape, Stroke, Style, Symbolizer


class Widget:
    def __init__(self, config, *args, **kwargs):
        self.config = config
        self.args = args
        self.kwargs = kwargs


class Gadget(Widget):
    pass


class MarkerVariant(BaseModel):
    type: Literal["Marker"]
    label: str = ""


class TestFactoryEntry:

    def test_requires_predicate_or_model(self):
        with pytest.raises(TypeError):
            FactoryEntry(type=Widget)

    def test_model_predicate(self):
        entry = FactoryEntry(type=Widget, model=MarkerVariant)
        assert entry.matches({"type": "Marker", "label": "x"})
        assert not entry.matches({"type": "Pin"})

    def test_handles_and_model_both_apply(self):
        entry = FactoryEntry(type=Widget, model=MarkerVariant, handles=lambda c: c.get("label") == "ok")
        assert entry.matches({"type": "Marker", "label": "ok"})
        assert not entry.matches({"type": "Marker", "label": "no"})


class TestDispatch:

    def test_first_registered_match_wins(self):
        registry = FactoryRegistry("test")
        registry.register(Widget, handles=lambda c: "name" in c)
        registry.register(Gadget, handles=lambda c: "name" in c)
        assert type(registry.create({"name": "a"})) is Widget

    def test_dispatch_is_deterministic(self):
        registry = FactoryRegistry("test")
        registry.register(Widget, handles=lambda c: "name" in c)
        registry.register(Gadget, handles=lambda c: "name" in c)
        results = {type(registry.create({"name": "a"})) for _ in range(20)}
        assert results == {Widget}

    def test_priority_overrides_registration_order(self):
        registry = FactoryRegistry("test")
        registry.register(Widget, handles=lambda c: True)
        registry.register(Gadget, handles=lambda c: True, priority=10)
        assert type(registry.create({})) is Gadget

    def test_decorator_registration(self):
        registry = FactoryRegistry("test")

        @registry.factory(model=MarkerVariant)
        class Marker(Widget):
            pass

        assert type(registry.create({"type": "Marker"})) is Marker

    def test_receives_canonical_config_and_extra_args(self):
        registry = FactoryRegistry("test")
        registry.register(Widget, handles=lambda c: c.get("name") == "circle")
        widget = registry.create("circle", 1, 2, flag=True)
        assert widget.config == {"name": "circle"}
        assert widget.args == (1, 2)
        assert widget.kwargs == {"flag": True}

    def test_base_filters_candidates(self):
        registry = FactoryRegistry("test")
        registry.register(Widget, handles=lambda c: True)
        registry.register(Gadget, handles=lambda c: True)
        assert type(registry.create({}, base=Gadget)) is Gadget

    def test_find_returns_entry_without_constructing(self):
        registry = FactoryRegistry("test")
        entry = registry.register(Widget, handles=lambda c: True)
        assert registry.find({}) is entry

    def test_clear(self):
        registry = FactoryRegistry("test")
        registry.register(Widget, handles=lambda c: True)
        registry.clear()
        assert len(registry) == 0
        assert registry.find({}) is None


class TestDispatchFailures:

    def test_no_match_raises_no_matching_factory(self):
        registry = FactoryRegistry("test")
        registry.register(Widget, handles=lambda c: False)
        with pytest.raises(NoMatchingFactory) as exc_info:
            registry.create({"type": "Unknown"})
        assert exc_info.value.discriminator == "Unknown"
        assert "Unknown" in str(exc_info.value)

    def test_untyped_no_match_lists_keys(self):
        with pytest.raises(NoMatchingFactory, match="keys: bogus"):
            create({"bogus": 1})

    def test_no_matching_factory_is_lookup_error(self):
        with pytest.raises(LookupError):
            create({"type": "Nothing"})

    def test_constructor_failure_is_invalid_configuration(self):
        # Field accepts the configuration, then rejects the missing type
        with pytest.raises(InvalidConfiguration):
            create({"name": "the_geom"})

    def test_base_mismatch_is_no_matching_factory(self):
        with pytest.raises(NoMatchingFactory, match="for base Schema"):
            create({"type": "Fill"}, base=Schema)


class TestDefaultRegistry:

    def test_registration_order(self):
        registry = build_default_registry()
        assert [e.type for e in registry.entries] == [
            Schema, Feature, Shape, Fill, Stroke, Style, ShapefileLayer, Layer, Field
        ]

    def test_get_registry_is_cached(self):
        assert get_registry() is get_registry()

    def test_set_registry_replaces_default(self):
        registry = FactoryRegistry("custom")
        registry.register(Widget, handles=lambda c: True)
        set_registry(registry)
        assert type(create({"type": "Fill"})) is Widget

    @pytest.mark.parametrize("config, expected", [
        ([{"name": "a", "type": "String"}], Schema),
        ({"fields": []}, Schema),
        ({"type": "Feature", "properties": {}}, Feature),
        ({"properties": {"a": 1}}, Feature),
        ("circle", Shape),
        ({"name": "star", "size": 10}, Shape),
        ({"type": "Shape"}, Shape),
        ({"type": "Fill", "color": "#ff0000"}, Fill),
        ({"type": "Stroke", "width": 2}, Stroke),
        ({"parts": [{"type": "Fill"}]}, Style),
        ({"type": "Layer", "name": "roads"}, Layer),
        ({"name": "the_geom", "type": "Point"}, Field),
        ({"name": "circle", "type": "String"}, Field),
    ])
    def test_builtin_dispatch(self, config, expected):
        assert type(create(config)) is expected

    def test_shapefile_path_dispatch_does_not_read(self):
        layer = create({"path": "missing/roads.shp"})
        assert type(layer) is ShapefileLayer
        assert not layer.is_constructed

    def test_path_object_dispatches_to_shapefile(self):
        layer = create(Path("missing") / "roads.shp")
        assert type(layer) is ShapefileLayer
        assert layer.name == "roads"
        assert not layer.is_constructed

    def test_wrappers_receive_the_dispatching_registry(self):
        registry = build_default_registry("private")
        schema = registry.create([{"name": "a", "type": "String"}])
        assert schema.registry is registry

    def test_style_parts_dispatch_to_symbolizers(self):
        with pytest.raises(NoMatchingFactory):
            create({"parts": [{"name": "a", "type": "String"}]})
        style = create({"parts": ["circle", {"type": "Stroke"}]})
        assert all(isinstance(part, Symbolizer) for part in style.parts)
