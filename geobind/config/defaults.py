"""
Configuration Defaults - Single source of truth for default values.

Organization:
    - FeatureDefaults: Schema, field and layer naming
    - StyleDefaults: Engine defaults for marks, fills and strokes
    - LoggingDefaults: Log level and handler settings

Usage:
    from geobind.config.defaults import StyleDefaults

    # In Pydantic Field definitions:
    log_level: str = Field(default=LoggingDefaults.LOG_LEVEL, ...)
"""


# =============================================================================
# FEATURE DEFAULTS
# =============================================================================

class FeatureDefaults:
    """Feature model naming defaults."""

    SCHEMA_NAME = "feature"
    LAYER_NAME = "layer"

    # Geometry field used when a layer is created without a schema
    GEOMETRY_FIELD_NAME = "geom"
    GEOMETRY_FIELD_TYPE = "Geometry"

    FEATURE_ID_PREFIX = "fid"


# =============================================================================
# STYLE DEFAULTS
# =============================================================================

class StyleDefaults:
    """
    Defaults applied by the style builder when it creates engine objects.

    Values follow the SLD defaults for marks, fills and strokes.
    """

    SHAPE_NAME = "square"
    SHAPE_SIZE = 6
    SHAPE_OPACITY = 1
    SHAPE_ROTATION = 0

    WELL_KNOWN_SHAPES = ("circle", "square", "triangle", "star", "cross", "x")

    FILL_COLOR = "#808080"
    FILL_OPACITY = 1

    STROKE_COLOR = "#000000"
    STROKE_WIDTH = 1
    STROKE_OPACITY = 1
    STROKE_CAP = "butt"
    STROKE_JOIN = "miter"

    STROKE_CAPS = ("butt", "round", "square")
    STROKE_JOINS = ("miter", "round", "bevel")


# =============================================================================
# LOGGING DEFAULTS
# =============================================================================

class LoggingDefaults:
    """Logging defaults."""

    LOG_LEVEL = "INFO"

    # JSON handlers are opt-in; by default records only propagate to the root logger
    JSON_LOGGING = False
