"""
Binding Configuration.

Process-wide settings for the binding layer, loaded from environment
variables with safe defaults.

Environment Variables:
    GEOBIND_LOG_LEVEL: Log level for geobind loggers (default INFO)
    GEOBIND_JSON_LOGGING: Attach JSON stdout handlers to loggers (default false)
    GEOBIND_SCHEMA_NAME: Name given to schemas built without one (default "feature")
    GEOBIND_LAYER_NAME: Name given to layers built without one (default "layer")

Exports:
    GeobindConfig: Pydantic settings model
"""

import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from geobind.config.defaults import FeatureDefaults, LoggingDefaults
from geobind.exceptions import ConfigurationError


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GeobindConfig(BaseModel):
    """
    Binding layer settings.

    Controls logging output and the names given to unnamed schemas and layers.
    """

    log_level: str = Field(
        default=LoggingDefaults.LOG_LEVEL,
        description="Log level applied to loggers created by LoggerFactory",
        examples=["DEBUG", "INFO", "WARNING"]
    )

    json_logging: bool = Field(
        default=LoggingDefaults.JSON_LOGGING,
        description="Attach a JSON formatted stdout handler to each geobind logger"
    )

    default_schema_name: str = Field(
        default=FeatureDefaults.SCHEMA_NAME,
        min_length=1,
        description="Schema name used when a schema configuration has no name"
    )

    default_layer_name: str = Field(
        default=FeatureDefaults.LAYER_NAME,
        min_length=1,
        description="Layer name used when a layer configuration has no name"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{value}'"
            )
        return level

    @classmethod
    def from_environment(cls) -> "GeobindConfig":
        """
        Load from environment variables.

        Raises:
            ConfigurationError: If an environment value fails validation
        """
        try:
            return cls(
                log_level=os.environ.get("GEOBIND_LOG_LEVEL", LoggingDefaults.LOG_LEVEL),
                json_logging=os.environ.get(
                    "GEOBIND_JSON_LOGGING", str(LoggingDefaults.JSON_LOGGING)
                ).lower() == "true",
                default_schema_name=os.environ.get("GEOBIND_SCHEMA_NAME", FeatureDefaults.SCHEMA_NAME),
                default_layer_name=os.environ.get("GEOBIND_LAYER_NAME", FeatureDefaults.LAYER_NAME),
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid geobind settings: {e}") from e
