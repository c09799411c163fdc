"""
Custom Exception Hierarchy

Distinguishes between:
1. Configuration errors raised while building a wrapper
2. Dispatch failures raised by the factory registry
3. Setter domain errors raised when a property is assigned

Every error is raised synchronously to the immediate caller. Messages name
the offending property or field and the constraint it violated.

Exports:
    GeobindError: Base class for all binding errors
    InvalidConfiguration: Required structure missing or malformed
    NoMatchingFactory: No registered factory handles a configuration
    TypeMismatch: Setter received a value of the wrong kind
    RangeError: Setter received a value outside its accepted range
    DataSourceError: Layer data could not be read or written
    ConfigurationError: Process settings are invalid
"""

from typing import Any, Optional


class GeobindError(Exception):
    """
    Base class for errors raised by the binding layer.

    Catch this to handle any geobind failure without catching
    unrelated Python errors.
    """
    pass


class InvalidConfiguration(GeobindError, ValueError):
    """
    Raised when a configuration lacks required structure.

    Raised during construction, before any engine object is created.

    Examples:
        - Schema built without a fields list
        - Field without a name or with an unknown type
        - Symbolizer configured with a property it does not have
    """
    pass


class NoMatchingFactory(GeobindError, LookupError):
    """
    Raised when no registered factory handles a configuration.

    This is a dispatch failure, distinct from InvalidConfiguration which
    the selected wrapper's own constructor raises.

    Attributes:
        config: The canonical configuration that failed to dispatch
        discriminator: The 'type' value of the configuration, if any
    """

    def __init__(self, config: Any, discriminator: Optional[str] = None, base: Optional[type] = None):
        self.config = config
        self.discriminator = discriminator
        self.base = base

        if discriminator is not None:
            described = f"type '{discriminator}'"
        elif isinstance(config, dict) and config:
            described = f"no 'type' discriminator (keys: {', '.join(sorted(map(str, config)))})"
        else:
            described = "no 'type' discriminator"

        message = f"No factory handles configuration with {described}"
        if base is not None:
            message += f" for base {base.__name__}"
        super().__init__(message)


class TypeMismatch(GeobindError, TypeError):
    """
    Raised when a setter receives a value of the wrong representational kind.

    Examples:
        - Shape opacity assigned a string
        - Feature attribute assigned a value that does not match its field type
    """

    def __init__(self, message: str, property_name: Optional[str] = None):
        self.property_name = property_name
        super().__init__(message)


class RangeError(GeobindError, ValueError):
    """
    Raised when a setter receives a value outside its accepted domain.

    Examples:
        - Opacity outside [0, 1]
        - Negative stroke width
        - Malformed hex colour
    """

    def __init__(self, message: str, property_name: Optional[str] = None):
        self.property_name = property_name
        super().__init__(message)


class DataSourceError(GeobindError):
    """
    Layer data could not be read or written.

    Examples:
        - Shapefile path does not exist
        - Attempt to add features to a read-only layer
    """
    pass


class ConfigurationError(Exception):
    """
    Process settings error.

    Raised when environment-provided settings fail validation.
    These are fatal and indicate misconfiguration of the host process.
    """
    pass
