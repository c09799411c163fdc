"""
Feature model wrappers.

Exports:
    Field: Attribute definition
    Schema: Field definitions of a feature type
    Feature: Attribute values for one feature
"""

from .field import FIELD_TYPES, Field
from .schema import Schema
from .feature import Feature

__all__ = [
    'FIELD_TYPES',
    'Feature',
    'Field',
    'Schema',
]
