"""
Shapefile factories - small on-disk data sources for layer tests.
"""

import geopandas
from shapely.geometry import Polygon


STATES = [
    ("Texas", "TX", 25145561, 268581.0, Polygon([(-106, 26), (-94, 26), (-94, 36), (-106, 36)])),
    ("Ohio", "OH", 11536504, 44825.0, Polygon([(-85, 38), (-80, 38), (-80, 42), (-85, 42)])),
    ("Maine", "ME", 1328361, 35385.0, Polygon([(-71, 43), (-67, 43), (-67, 47), (-71, 47)])),
]


def write_states(directory, name: str = "states") -> str:
    """
    Write STATES as a Shapefile.

    Returns:
        Path of the .shp file
    """
    frame = geopandas.GeoDataFrame(
        {
            "STATE_NAME": [s[0] for s in STATES],
            "STATE_ABBR": [s[1] for s in STATES],
            "POP": [s[2] for s in STATES],
            "AREA": [s[3] for s in STATES],
        },
        geometry=[s[4] for s in STATES],
        crs="EPSG:4326",
    )
    path = directory / f"{name}.shp"
    frame.to_file(path)
    return str(path)
