"""
Fill symbolizer.

Usage:
    fill = Fill("#ff0000")
    fill = Fill({"color": "#ff0000", "opacity": 0.5})
"""

from typing import Any, Dict

from geobind.factory.normalizer import normalize
from geobind.filter import Expression
from geobind.style.symbolizer import Symbolizer, color_adapter, number_expression, text_expression


class Fill(Symbolizer):
    """
    A symbolizer that fills polygon interiors (or shape marks).

    A string configuration is shorthand for the color.
    """

    type_name = "Fill"
    properties = ("color", "opacity")

    @classmethod
    def prep_config(cls, config: Any) -> Dict[str, Any]:
        if isinstance(config, str):
            return {"color": config}
        return normalize(config)

    def _materialize(self):
        return self.engine.style_builder().create_fill()

    @property
    def color(self) -> Expression:
        """Fill color as a hex string literal or expression. Default "#808080"."""
        return Expression.from_(self.handle.color, engine=self._engine)

    @color.setter
    def color(self, value: Any) -> None:
        self.handle.color = text_expression(self, "color", value, color_adapter(self)).handle

    @property
    def opacity(self) -> Expression:
        """The opacity value (0 - 1). Default is 1."""
        return Expression.from_(self.handle.opacity, engine=self._engine)

    @opacity.setter
    def opacity(self, value: Any) -> None:
        self.handle.opacity = number_expression(
            self, "opacity", value, 0, 1, "a number between 0 and 1 (inclusive)"
        ).handle

    def to_full_string(self) -> str:
        return f"color: {self.color.text}, opacity: {self.opacity.text}"
