"""
Shapefile layer - read-only features from an ESRI Shapefile.

The file is read lazily through the engine on first access to the
layer's features, schema or count.

Usage:
    layer = ShapefileLayer("data/states.shp")
    layer.count
    layer.schema.field_names
    for feature in layer.features({"op": "=", "args": [{"property": "STATE_ABBR"}, "TX"]}):
        ...
"""

from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import pandas as pd
from pandas.api import types as ptypes

from geobind.exceptions import DataSourceError, InvalidConfiguration
from geobind.feature import Feature, Schema
from geobind.layer.layer import Layer
from geobind.util_logger import ComponentType, LoggerFactory, log_exceptions


logger = LoggerFactory.create_logger(ComponentType.LAYER, "ShapefileLayer")

_SHAPEFILE_KEYS = ("type", "name", "path")


def _field_type(series: pd.Series) -> str:
    if ptypes.is_bool_dtype(series):
        return "Boolean"
    if ptypes.is_integer_dtype(series):
        return "Integer"
    if ptypes.is_float_dtype(series):
        return "Double"
    if ptypes.is_datetime64_any_dtype(series):
        return "Datetime"
    return "String"


def _python_value(value: Any) -> Any:
    """Convert pandas / numpy scalars to plain Python values."""
    if ptypes.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if hasattr(value, "item"):
        return value.item()
    return value


class ShapefileLayer(Layer):
    """
    Layer backed by a Shapefile on disk.

    A string configuration is shorthand for the path. The layer name
    defaults to the file stem.
    """

    type_name = "Shapefile"

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        self._path: Optional[str] = None
        super().__init__(config, engine=engine, registry=registry)

    @classmethod
    def prep_config(cls, config: Any) -> Dict[str, Any]:
        if isinstance(config, (str, Path)):
            return {"path": str(config)}
        return super().prep_config(config)

    def _configure(self, config: Dict[str, Any]) -> None:
        unknown = sorted(set(config) - set(_SHAPEFILE_KEYS))
        if unknown:
            raise InvalidConfiguration(f"Shapefile layer has no properties: {', '.join(unknown)}")
        path = config.get("path")
        if isinstance(path, Path):
            path = str(path)
        if not isinstance(path, str) or not path:
            raise InvalidConfiguration("Shapefile layer requires a 'path'")
        self._path = path
        self._name = config.get("name") or Path(path).stem

    @property
    def path(self) -> Optional[str]:
        return self._path

    def _materialize(self):
        return self._read_frame()

    @log_exceptions(ComponentType.LAYER, "ShapefileLayer")
    def _read_frame(self):
        if self._path is None:
            raise InvalidConfiguration("Shapefile layer requires a 'path'")
        if not Path(self._path).exists():
            raise DataSourceError(f"Shapefile not found: {self._path}")
        try:
            frame = self.engine.read_frame(self._path)
        except Exception as e:
            raise DataSourceError(f"Failed to read shapefile {self._path}: {e}") from e
        logger.info(f"Read {len(frame)} features from {self._path}")
        return frame

    def _default_schema(self) -> Schema:
        frame = self.handle
        geometry_column = frame.geometry.name
        fields: List[Dict[str, Any]] = []
        for column in frame.columns:
            if column == geometry_column:
                geom_types = set(frame.geom_type.dropna().unique())
                field = {
                    "name": column,
                    "type": geom_types.pop() if len(geom_types) == 1 else "Geometry",
                }
                if frame.crs is not None:
                    field["projection"] = frame.crs
                fields.append(field)
            else:
                fields.append({"name": column, "type": _field_type(frame[column])})
        return Schema({"name": self.name, "fields": fields}, engine=self._engine, registry=self._registry)

    @property
    def count(self) -> int:
        return len(self.handle)

    def _iter_features(self) -> Iterator[Feature]:
        schema = self.schema
        geometry_column = self.handle.geometry.name
        for position, (_, row) in enumerate(self.handle.iterrows(), start=1):
            properties = {
                column: _python_value(value)
                for column, value in row.items()
                if column != geometry_column
            }
            yield Feature({
                "id": f"{self.name}.{position}",
                "geometry": row[geometry_column],
                "properties": properties,
                "schema": schema,
            }, engine=self._engine, registry=self._registry)

    def add(self, feature: Any) -> Feature:
        raise DataSourceError(f"Shapefile layer '{self.name}' is read-only")

    @property
    def config(self) -> Dict[str, Any]:
        return {
            "type": "Shapefile",
            "name": self.name,
            "path": self.path,
        }

    def to_full_string(self) -> str:
        return f'name: "{self.name}", path: "{self.path}"'
