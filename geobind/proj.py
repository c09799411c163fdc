"""
Projection wrapper around pyproj coordinate reference systems.

Usage:
    from geobind.proj import Projection

    proj = Projection("EPSG:4326")
    proj.id        # "EPSG:4326"
    proj.config    # "EPSG:4326"
"""

from typing import Any, Optional

from pyproj.exceptions import CRSError

from geobind.exceptions import InvalidConfiguration
from geobind.object import GeoObject


class Projection(GeoObject):
    """
    A coordinate reference system.

    Accepts anything pyproj understands: "EPSG:4326", an integer EPSG
    code, WKT, a PROJ string, a pyproj CRS, or another Projection.
    """

    type_name = "Projection"

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        super().__init__(engine=engine, registry=registry)
        if config is None:
            return
        if isinstance(config, Projection):
            self.cache["handle"] = config.handle
            return
        if isinstance(config, dict):
            config = config.get("id")
        try:
            self.cache["handle"] = self.engine.crs(config)
        except CRSError as e:
            raise InvalidConfiguration(f"Invalid projection {config!r}: {e}") from e

    def _materialize(self):
        raise InvalidConfiguration("Projection requires a CRS code or definition")

    @property
    def id(self) -> Optional[str]:
        """Authority identifier such as "EPSG:4326", or None."""
        authority = self.handle.to_authority()
        if authority is None:
            return None
        return f"{authority[0]}:{authority[1]}"

    @property
    def wkt(self) -> str:
        return self.handle.to_wkt()

    @property
    def config(self) -> str:
        return self.id or self.wkt

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Projection):
            return NotImplemented
        return self.handle.equals(other.handle)

    def __hash__(self) -> int:
        return hash(self.config)

    def to_full_string(self) -> str:
        return self.id or self.handle.name
