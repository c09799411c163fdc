"""
Shape symbolizer - renders points using a named mark.

Usage:
    shape = Shape("circle")
    shape = Shape({"name": "star", "size": 12, "fill": "#ffcc00"})
    shape.opacity = 0.5
"""

from typing import Any, Optional

from geobind.engine import styling
from geobind.filter import Expression
from geobind.style.fill import Fill
from geobind.style.stroke import Stroke
from geobind.style.symbolizer import Symbolizer, number_expression, text_expression


class Shape(Symbolizer):
    """
    A symbolizer that renders points using a named shape.

    The engine point symbolizer is created on first access and cached;
    the mark and graphic are read from it.
    """

    type_name = "Shape"
    properties = ("name", "size", "opacity", "rotation", "fill", "stroke")

    def _materialize(self):
        return self.engine.style_builder().create_point_symbolizer()

    @property
    def symbolizer(self) -> styling.PointSymbolizer:
        return self.handle

    @property
    def mark(self) -> styling.Mark:
        return styling.mark(self.handle)

    @property
    def graphic(self) -> styling.Graphic:
        return styling.graphic(self.handle)

    @property
    def name(self) -> Expression:
        """
        The shape name. Acceptable values include "circle", "square",
        "triangle", "star", "cross", and "x". Default is "square".
        """
        return Expression.from_(self.mark.well_known_name, engine=self._engine)

    @name.setter
    def name(self, value: Any) -> None:
        self.mark.well_known_name = text_expression(self, "name", value).handle

    @property
    def size(self) -> Expression:
        """The shape pixel size. Default is 6."""
        return Expression.from_(self.graphic.size, engine=self._engine)

    @size.setter
    def size(self, value: Any) -> None:
        self.graphic.size = number_expression(
            self, "size", value, minimum=0, constraint="a non-negative number"
        ).handle

    @property
    def opacity(self) -> Expression:
        """The opacity value (0 - 1). Default is 1."""
        return Expression.from_(self.graphic.opacity, engine=self._engine)

    @opacity.setter
    def opacity(self, value: Any) -> None:
        self.graphic.opacity = number_expression(
            self, "opacity", value, 0, 1, "a number between 0 and 1 (inclusive)"
        ).handle

    @property
    def rotation(self) -> Expression:
        """Rotation angle in degrees clockwise about the center point of the shape."""
        return Expression.from_(self.graphic.rotation, engine=self._engine)

    @rotation.setter
    def rotation(self, value: Any) -> None:
        self.graphic.rotation = number_expression(self, "rotation", value).handle

    @property
    def fill(self) -> Optional[Fill]:
        fill = self.mark.fill
        return Fill.from_(fill, engine=self._engine, registry=self._registry) if fill is not None else None

    @fill.setter
    def fill(self, value: Any) -> None:
        if value is not None and not isinstance(value, Fill):
            value = Fill(value, engine=self._engine, registry=self._registry)
        self.mark.fill = value.handle if value is not None else None

    @property
    def stroke(self) -> Optional[Stroke]:
        stroke = self.mark.stroke
        return Stroke.from_(stroke, engine=self._engine, registry=self._registry) if stroke is not None else None

    @stroke.setter
    def stroke(self, value: Any) -> None:
        if value is not None and not isinstance(value, Stroke):
            value = Stroke(value, engine=self._engine, registry=self._registry)
        self.mark.stroke = value.handle if value is not None else None

    def to_full_string(self) -> str:
        return f"name: {self.name.text}, size: {self.size.text}"
