"""
Feature type engine objects.

Attribute descriptors, the feature types they compose into, the builder
that assembles them, and simple features holding attribute values.
Geometry bindings are shapely classes and coordinate reference systems
are pyproj CRS objects.

Exports:
    TYPE_BINDINGS: Field type name -> Python binding class
    AttributeDescriptor: One attribute column
    FeatureType: Named, ordered collection of descriptors
    FeatureTypeBuilder: Incremental FeatureType construction
    SimpleFeature: Attribute values for one feature
"""

import datetime
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from pyproj import CRS
from shapely.geometry.base import BaseGeometry

from geobind.geom import GEOMETRY_TYPES


TYPE_BINDINGS = {
    "String": str,
    "Integer": int,
    "Double": float,
    "Boolean": bool,
    "Date": datetime.date,
    "Datetime": datetime.datetime,
    **GEOMETRY_TYPES,
}


@dataclass(frozen=True)
class AttributeDescriptor:
    """One attribute column of a feature type."""
    local_name: str
    type_name: str
    binding: type
    crs: Optional[CRS] = None
    title: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_geometry(self) -> bool:
        return issubclass(self.binding, BaseGeometry)


@dataclass(frozen=True)
class FeatureType:
    """Named, ordered collection of attribute descriptors."""
    name: str
    descriptors: Tuple[AttributeDescriptor, ...]
    crs: Optional[CRS] = None

    def get_attribute_descriptors(self) -> List[AttributeDescriptor]:
        return list(self.descriptors)

    def get_descriptor(self, name: str) -> Optional[AttributeDescriptor]:
        for descriptor in self.descriptors:
            if descriptor.local_name == name:
                return descriptor
        return None

    def get_geometry_descriptor(self) -> Optional[AttributeDescriptor]:
        """First geometry descriptor, or None."""
        for descriptor in self.descriptors:
            if descriptor.is_geometry:
                return descriptor
        return None


class FeatureTypeBuilder:
    """
    Builds a FeatureType one descriptor at a time.

    Usage:
        builder = FeatureTypeBuilder()
        builder.set_name("cities")
        builder.add(descriptor)
        feature_type = builder.build_feature_type()
    """

    def __init__(self):
        self._name: Optional[str] = None
        self._crs: Optional[CRS] = None
        self._descriptors: List[AttributeDescriptor] = []

    def set_name(self, name: str) -> None:
        self._name = name

    def set_crs(self, crs: Optional[CRS]) -> None:
        """Default CRS of the feature type."""
        self._crs = crs

    def add(self, descriptor: AttributeDescriptor) -> None:
        if any(d.local_name == descriptor.local_name for d in self._descriptors):
            raise ValueError(f"Duplicate attribute name: {descriptor.local_name}")
        self._descriptors.append(descriptor)

    def build_feature_type(self) -> FeatureType:
        if not self._name:
            raise ValueError("Feature type name must be set before building")
        return FeatureType(name=self._name, descriptors=tuple(self._descriptors), crs=self._crs)


class SimpleFeature:
    """
    Attribute values for one feature of a FeatureType.

    Values are stored by attribute name; unknown names raise KeyError.
    """

    def __init__(self, feature_type: FeatureType, values: Dict[str, Any], fid: str):
        self.feature_type = feature_type
        self.fid = fid
        self._values = {d.local_name: None for d in feature_type.descriptors}
        for name, value in values.items():
            self.set_attribute(name, value)

    def get_attribute(self, name: str) -> Any:
        if name not in self._values:
            raise KeyError(name)
        return self._values[name]

    def set_attribute(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise KeyError(name)
        self._values[name] = value

    def get_attributes(self) -> Dict[str, Any]:
        return dict(self._values)

    def get_default_geometry(self) -> Optional[BaseGeometry]:
        descriptor = self.feature_type.get_geometry_descriptor()
        if descriptor is None:
            return None
        return self._values[descriptor.local_name]
