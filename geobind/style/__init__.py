"""
Style wrappers.

Exports:
    Symbolizer: Base class
    Shape: Point marks
    Fill: Polygon fills
    Stroke: Lines and outlines
    Style: Ordered composition of symbolizers with client export
    StyleTranslator: CartoSym-JSON to Leaflet / Mapbox GL
"""

from .symbolizer import Symbolizer
from .fill import Fill
from .stroke import Stroke
from .shape import Shape
from .style import Style
from .translator import StyleTranslator

__all__ = [
    'Fill',
    'Shape',
    'Stroke',
    'Style',
    'StyleTranslator',
    'Symbolizer',
]
