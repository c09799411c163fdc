"""
Symbolizer tests - Shape, Fill and Stroke property adaptation, range
checks, round trip and lazy handles.
"""

import pytest

from geobind import create
from geobind.exceptions import InvalidConfiguration, RangeError, TypeMismatch
from geobind.filter import Expression
from geobind.style import Fill, Shape, Stroke
from tests.factories.config_factories import make_fill_config, make_stroke_config


class TestShape:

    def test_string_shorthand(self):
        shape = Shape("circle")
        assert shape.name.value == "circle"

    def test_defaults(self):
        shape = Shape()
        assert shape.name.value == "square"
        assert shape.size.value == 6
        assert shape.opacity.value == 1
        assert shape.rotation.value == 0

    def test_configured(self):
        shape = Shape({"name": "star", "size": 12, "rotation": 45, "fill": "#ffcc00"})
        assert shape.name.value == "star"
        assert shape.size.value == 12
        assert shape.rotation.value == 45
        assert shape.fill.color.value == "#ffcc00"

    @pytest.mark.parametrize("opacity", [0, 0.5, 1])
    def test_opacity_in_range(self, opacity):
        shape = Shape()
        shape.opacity = opacity
        assert shape.opacity.value == opacity

    @pytest.mark.parametrize("opacity", [1.5, -0.1, float("nan")])
    def test_opacity_out_of_range(self, opacity):
        shape = Shape()
        with pytest.raises(RangeError, match="Shape opacity must be a number between 0 and 1"):
            shape.opacity = opacity

    def test_opacity_string_rejected(self):
        shape = Shape()
        with pytest.raises(TypeMismatch, match="Shape opacity cannot be type: str"):
            shape.opacity = "0.5"

    def test_opacity_bool_rejected(self):
        with pytest.raises(TypeMismatch):
            Shape({"opacity": True})

    def test_negative_size_rejected(self):
        with pytest.raises(RangeError):
            Shape({"size": -1})

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rotation_rejected(self, value):
        with pytest.raises(RangeError, match="Shape rotation must be a finite number"):
            Shape({"rotation": value})

    def test_nan_size_rejected(self):
        shape = Shape()
        with pytest.raises(RangeError, match="Shape size"):
            shape.size = float("nan")

    def test_size_from_property(self):
        shape = Shape({"name": "circle", "size": {"property": "population"}})
        assert shape.size.property_name == "population"
        assert shape.size.evaluate({"population": 12}) == 12

    def test_expression_object_accepted(self):
        shape = Shape()
        shape.size = Expression("[magnitude]")
        assert shape.size.property_name == "magnitude"

    def test_literal_expression_range_checked(self):
        with pytest.raises(RangeError):
            Shape({"opacity": {"literal": 2}})

    def test_unknown_property_rejected(self):
        with pytest.raises(InvalidConfiguration, match="has no properties: color"):
            Shape({"name": "circle", "color": "#ff0000"})

    def test_wrong_type_rejected(self):
        with pytest.raises(InvalidConfiguration):
            Shape({"type": "Fill"})

    def test_fill_and_stroke_setters(self):
        shape = Shape("circle")
        shape.fill = Fill("#00ff00")
        shape.stroke = {"color": "#0000ff", "width": 2}
        assert shape.fill.color.value == "#00ff00"
        assert shape.stroke.width.value == 2

    def test_fill_removed(self):
        shape = Shape({"name": "circle", "fill": None})
        assert shape.fill is None
        assert shape.config["fill"] is None

    def test_symbolizer_is_cached(self):
        shape = Shape("circle")
        assert shape.handle is shape.handle
        assert shape.symbolizer is shape.handle
        assert shape.mark is shape.mark

    def test_handle_created_lazily(self):
        shape = Shape()
        assert not shape.is_constructed
        shape.symbolizer
        assert shape.is_constructed

    def test_config(self):
        shape = Shape({"name": "circle", "size": 10})
        assert shape.config == {
            "type": "Shape",
            "name": "circle",
            "size": 10,
            "opacity": 1,
            "rotation": 0,
            "fill": {"type": "Fill", "color": "#808080", "opacity": 1},
            "stroke": {
                "type": "Stroke", "color": "#000000", "width": 1,
                "opacity": 1, "cap": "butt", "join": "miter",
            },
        }

    def test_round_trip_through_registry(self):
        shape = Shape({"name": "triangle", "size": {"property": "pop"}, "opacity": 0.3})
        copy = create(shape.config)
        assert isinstance(copy, Shape)
        assert copy.config == shape.config

    def test_clone_is_independent(self):
        shape = Shape({"name": "circle", "size": 4})
        clone = shape.clone()
        clone.size = 8
        assert shape.size.value == 4
        assert clone.config["name"] == "circle"

    def test_repr(self):
        assert repr(Shape("circle")) == "<Shape name: 'circle', size: 6>"


class TestFill:

    def test_color_shorthand(self):
        assert Fill("#FF0000").color.value == "#ff0000"

    def test_short_hex_expanded(self):
        assert Fill("#abc").color.value == "#aabbcc"

    def test_invalid_color(self):
        with pytest.raises(RangeError, match="hex color"):
            Fill("red")

    def test_color_number_rejected(self):
        with pytest.raises(TypeMismatch):
            Fill({"color": 255})

    @pytest.mark.parametrize("opacity", [1.5, -0.1])
    def test_opacity_out_of_range(self, opacity):
        with pytest.raises(RangeError, match="Fill opacity"):
            Fill({"opacity": opacity})

    def test_data_driven_color(self):
        fill = Fill({"color": "[color]"})
        assert fill.color.property_name == "color"
        assert fill.config["color"] == {"property": "color"}

    def test_round_trip(self):
        config = make_fill_config()
        assert Fill(config).config == config

    def test_defaults(self):
        assert Fill().config == {"type": "Fill", "color": "#808080", "opacity": 1}


class TestStroke:

    def test_color_shorthand(self):
        assert Stroke("#00f").color.value == "#0000ff"

    def test_round_trip(self):
        config = make_stroke_config(cap="round", join="bevel", opacity=0.5)
        assert Stroke(config).config == config

    def test_negative_width(self):
        with pytest.raises(RangeError, match="Stroke width must be a non-negative number"):
            Stroke({"width": -2})

    def test_zero_width_allowed(self):
        assert Stroke({"width": 0}).width.value == 0

    def test_invalid_cap(self):
        with pytest.raises(RangeError, match="cap"):
            Stroke({"cap": "pointy"})

    def test_invalid_join(self):
        with pytest.raises(RangeError, match="join"):
            Stroke({"join": "glued"})

    def test_range_error_names_property(self):
        with pytest.raises(RangeError) as exc_info:
            Stroke({"opacity": 3})
        assert exc_info.value.property_name == "opacity"
