"""
Stroke symbolizer.

Usage:
    stroke = Stroke("#0000ff")
    stroke = Stroke({"color": "#0000ff", "width": 2, "cap": "round"})
"""

from typing import Any, Dict

from geobind.config.defaults import StyleDefaults
from geobind.factory.normalizer import normalize
from geobind.filter import Expression
from geobind.style.symbolizer import (
    Symbolizer,
    choice_adapter,
    color_adapter,
    number_expression,
    text_expression,
)


class Stroke(Symbolizer):
    """
    A symbolizer that draws lines and outlines.

    A string configuration is shorthand for the color.
    """

    type_name = "Stroke"
    properties = ("color", "width", "opacity", "cap", "join")

    @classmethod
    def prep_config(cls, config: Any) -> Dict[str, Any]:
        if isinstance(config, str):
            return {"color": config}
        return normalize(config)

    def _materialize(self):
        return self.engine.style_builder().create_stroke()

    @property
    def color(self) -> Expression:
        """Stroke color. Default "#000000"."""
        return Expression.from_(self.handle.color, engine=self._engine)

    @color.setter
    def color(self, value: Any) -> None:
        self.handle.color = text_expression(self, "color", value, color_adapter(self)).handle

    @property
    def width(self) -> Expression:
        """Stroke width in pixels. Default is 1."""
        return Expression.from_(self.handle.width, engine=self._engine)

    @width.setter
    def width(self, value: Any) -> None:
        self.handle.width = number_expression(
            self, "width", value, minimum=0, constraint="a non-negative number"
        ).handle

    @property
    def opacity(self) -> Expression:
        """The opacity value (0 - 1). Default is 1."""
        return Expression.from_(self.handle.opacity, engine=self._engine)

    @opacity.setter
    def opacity(self, value: Any) -> None:
        self.handle.opacity = number_expression(
            self, "opacity", value, 0, 1, "a number between 0 and 1 (inclusive)"
        ).handle

    @property
    def cap(self) -> Expression:
        """Line cap: butt, round or square. Default "butt"."""
        return Expression.from_(self.handle.line_cap, engine=self._engine)

    @cap.setter
    def cap(self, value: Any) -> None:
        adapt = choice_adapter(self, "cap", StyleDefaults.STROKE_CAPS)
        self.handle.line_cap = text_expression(self, "cap", value, adapt).handle

    @property
    def join(self) -> Expression:
        """Line join: miter, round or bevel. Default "miter"."""
        return Expression.from_(self.handle.line_join, engine=self._engine)

    @join.setter
    def join(self, value: Any) -> None:
        adapt = choice_adapter(self, "join", StyleDefaults.STROKE_JOINS)
        self.handle.line_join = text_expression(self, "join", value, adapt).handle

    def to_full_string(self) -> str:
        return f"color: {self.color.text}, width: {self.width.text}"
