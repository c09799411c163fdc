"""
Layers - named collections of features.

Exports:
    Layer: In-memory layer
    ShapefileLayer: Read-only layer backed by a Shapefile
    FeatureCursor: One-pass iteration over layer features
"""

from .cursor import FeatureCursor
from .layer import Layer
from .shapefile import ShapefileLayer

__all__ = [
    'FeatureCursor',
    'Layer',
    'ShapefileLayer',
]
