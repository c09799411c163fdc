"""
Styling engine objects.

Mutable symbolizer parts in the shape of SLD: a point symbolizer holds a
graphic, the graphic holds marks plus size/opacity/rotation, and each mark
holds a well known name, a fill and a stroke. Values are expressions:
literals or property references evaluated against feature attributes.

Exports:
    Literal, PropertyName: Expression objects
    Fill, Stroke, Mark, Graphic, PointSymbolizer: Symbolizer parts
    StyleBuilder: Creates parts populated with defaults
    mark, graphic: Reach into a point symbolizer
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from geobind.config.defaults import StyleDefaults


# ============================================================================
# EXPRESSIONS
# ============================================================================

@dataclass(frozen=True)
class Literal:
    value: Any

    def evaluate(self, properties: Optional[Mapping[str, Any]] = None) -> Any:
        return self.value


@dataclass(frozen=True)
class PropertyName:
    name: str

    def evaluate(self, properties: Optional[Mapping[str, Any]] = None) -> Any:
        return (properties or {}).get(self.name)


EngineExpression = Union[Literal, PropertyName]


# ============================================================================
# SYMBOLIZER PARTS
# ============================================================================

@dataclass
class Fill:
    color: EngineExpression
    opacity: EngineExpression


@dataclass
class Stroke:
    color: EngineExpression
    width: EngineExpression
    opacity: EngineExpression
    line_cap: EngineExpression
    line_join: EngineExpression


@dataclass
class Mark:
    well_known_name: EngineExpression
    fill: Optional[Fill] = None
    stroke: Optional[Stroke] = None


@dataclass
class Graphic:
    size: EngineExpression
    opacity: EngineExpression
    rotation: EngineExpression
    marks: List[Mark] = field(default_factory=list)


@dataclass
class PointSymbolizer:
    graphic: Graphic


class StyleBuilder:
    """Creates symbolizer parts populated with StyleDefaults."""

    def literal(self, value: Any) -> Literal:
        return Literal(value)

    def property_name(self, name: str) -> PropertyName:
        return PropertyName(name)

    def create_fill(self) -> Fill:
        return Fill(
            color=Literal(StyleDefaults.FILL_COLOR),
            opacity=Literal(StyleDefaults.FILL_OPACITY),
        )

    def create_stroke(self) -> Stroke:
        return Stroke(
            color=Literal(StyleDefaults.STROKE_COLOR),
            width=Literal(StyleDefaults.STROKE_WIDTH),
            opacity=Literal(StyleDefaults.STROKE_OPACITY),
            line_cap=Literal(StyleDefaults.STROKE_CAP),
            line_join=Literal(StyleDefaults.STROKE_JOIN),
        )

    def create_mark(self) -> Mark:
        return Mark(
            well_known_name=Literal(StyleDefaults.SHAPE_NAME),
            fill=self.create_fill(),
            stroke=self.create_stroke(),
        )

    def create_point_symbolizer(self) -> PointSymbolizer:
        graphic = Graphic(
            size=Literal(StyleDefaults.SHAPE_SIZE),
            opacity=Literal(StyleDefaults.SHAPE_OPACITY),
            rotation=Literal(StyleDefaults.SHAPE_ROTATION),
            marks=[self.create_mark()],
        )
        return PointSymbolizer(graphic=graphic)


def graphic(symbolizer: PointSymbolizer) -> Graphic:
    return symbolizer.graphic


def mark(symbolizer: PointSymbolizer) -> Mark:
    """First mark of the symbolizer's graphic, created if missing."""
    marks = symbolizer.graphic.marks
    if not marks:
        marks.append(StyleBuilder().create_mark())
    return marks[0]
