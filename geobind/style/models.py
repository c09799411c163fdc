"""
Style Pydantic Models.

Defines schemas for:
- Variant models used by the factory registry to recognise style
  configurations (tagged-variant decode)
- CartoSym-JSON (OGC canonical style format) used for export
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from geobind.config.defaults import StyleDefaults


# ============================================================================
# CONFIGURATION VARIANTS (factory dispatch)
# ============================================================================

class _Variant(BaseModel):
    """Closed variant: unknown keys mean the configuration is something else."""
    model_config = ConfigDict(extra="forbid")


class FillVariant(_Variant):
    type: Literal["Fill"]
    color: Any = None
    opacity: Any = None


class StrokeVariant(_Variant):
    type: Literal["Stroke"]
    color: Any = None
    width: Any = None
    opacity: Any = None
    cap: Any = None
    join: Any = None


class ShapeVariant(_Variant):
    """
    Shape configuration.

    Untyped configurations only qualify when they name a well known shape,
    so {"name": "circle"} (or the string "circle") is a Shape while
    {"name": "the_geom"} is not.
    """
    type: Optional[Literal["Shape"]] = None
    name: Any = None
    size: Any = None
    opacity: Any = None
    rotation: Any = None
    fill: Any = None
    stroke: Any = None

    @model_validator(mode="after")
    def check_untyped_name(self):
        if self.type is None and self.name not in StyleDefaults.WELL_KNOWN_SHAPES:
            raise ValueError(
                "Untyped shape configuration needs a well known name: "
                f"{', '.join(StyleDefaults.WELL_KNOWN_SHAPES)}"
            )
        return self


class StyleVariant(_Variant):
    type: Optional[Literal["Style"]] = None
    name: Optional[str] = None
    parts: List[Any]


# ============================================================================
# CARTOSYM-JSON MODELS (export format)
# ============================================================================

class CartoSymFill(BaseModel):
    """CartoSym-JSON fill definition."""
    color: str
    opacity: float = 1.0


class CartoSymStroke(BaseModel):
    """CartoSym-JSON stroke definition."""
    color: str
    width: float = 1.0
    opacity: float = 1.0
    cap: str = StyleDefaults.STROKE_CAP
    join: str = StyleDefaults.STROKE_JOIN


class CartoSymMarker(BaseModel):
    """CartoSym-JSON marker definition for point geometries."""
    name: str = StyleDefaults.SHAPE_NAME
    size: float = StyleDefaults.SHAPE_SIZE
    opacity: float = StyleDefaults.SHAPE_OPACITY
    rotation: float = StyleDefaults.SHAPE_ROTATION
    fill: Optional[CartoSymFill] = None
    stroke: Optional[CartoSymStroke] = None


class CartoSymSymbolizer(BaseModel):
    """CartoSym-JSON symbolizer definition."""
    type: str  # "Polygon", "Line", "Point"
    fill: Optional[CartoSymFill] = None
    stroke: Optional[CartoSymStroke] = None
    marker: Optional[CartoSymMarker] = None


class CartoSymRule(BaseModel):
    """CartoSym-JSON styling rule."""
    name: str
    symbolizer: CartoSymSymbolizer


class CartoSymStyle(BaseModel):
    """CartoSym-JSON style document."""
    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    stylingRules: List[CartoSymRule]
