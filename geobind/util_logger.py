"""
Unified Logger System.

Structured logging for the binding layer. Loggers are plain stdlib loggers
named "<component>.<name>" so host applications can route them with their
own logging configuration. When JSON logging is enabled in settings each
logger also gets a stdout handler emitting one JSON object per record.

Exports:
    ComponentType: Enum for component types
    LogLevel: Enum for log levels
    JSONFormatter: JSON record formatter
    LoggerFactory: Factory for creating loggers
    log_exceptions: Exception logging decorator
"""

from enum import Enum
from typing import Optional
from datetime import datetime, timezone
from functools import wraps
import json
import logging
import sys


# ============================================================================
# COMPONENT TYPES
# ============================================================================

class ComponentType(Enum):
    """
    Component types aligned with the binding layers.
    """
    FACTORY = "factory"    # Registry and dispatch
    WRAPPER = "wrapper"    # Feature model wrappers
    STYLE = "style"        # Symbolizer wrappers and exporters
    LAYER = "layer"        # Layers and cursors
    ENGINE = "engine"      # Engine collaborator


# ============================================================================
# LOG LEVELS - Standard Python levels with enum safety
# ============================================================================

class LogLevel(Enum):
    """
    Standard Python log levels as enum for type safety.
    """
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_python_level(self) -> int:
        """Convert to Python logging level constant."""
        return getattr(logging, self.value)

    @classmethod
    def from_string(cls, level: str) -> 'LogLevel':
        """Create from string, case-insensitive."""
        return cls[level.upper()]


# ============================================================================
# JSON FORMATTER
# ============================================================================

class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if hasattr(record, 'custom_dimensions'):
            log_obj['customDimensions'] = record.custom_dimensions

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_obj, default=str)


class _ComponentFilter(logging.Filter):
    """Stamps component identity onto each record as custom dimensions."""

    def __init__(self, component_type: ComponentType, name: str):
        super().__init__()
        self.component_type = component_type
        self.component_name = name

    def filter(self, record: logging.LogRecord) -> bool:
        dims = {
            'component_type': self.component_type.value,
            'component_name': self.component_name,
        }
        dims.update(getattr(record, 'custom_dimensions', None) or {})
        record.custom_dimensions = dims
        return True


# ============================================================================
# LOGGER FACTORY - Creates component-specific loggers
# ============================================================================

class LoggerFactory:
    """
    Factory for creating component-specific loggers.

    Example:
        logger = LoggerFactory.create_logger(ComponentType.FACTORY, "FactoryRegistry")
        logger.debug("Registered Schema")
    """

    @classmethod
    def create_logger(
        cls,
        component_type: ComponentType,
        name: str,
        level: Optional[LogLevel] = None
    ) -> logging.Logger:
        """
        Create a logger for a specific component.

        Args:
            component_type: Type of component
            name: Component name (e.g., "FactoryRegistry")
            level: Optional level override; defaults to the configured log level

        Returns:
            Configured Python logger
        """
        # Lazy import keeps config free to log during its own import
        from geobind.config import get_config
        config = get_config()

        if level is None:
            level = LogLevel.from_string(config.log_level)

        logger = logging.getLogger(f"{component_type.value}.{name}")
        logger.setLevel(level.to_python_level())

        if not any(isinstance(f, _ComponentFilter) for f in logger.filters):
            logger.addFilter(_ComponentFilter(component_type, name))

        if config.json_logging:
            # Prevent duplicate handlers when create_logger is called repeatedly
            has_json_handler = any(
                isinstance(h.formatter, JSONFormatter) for h in logger.handlers
            )
            if not has_json_handler:
                handler = logging.StreamHandler(sys.stdout)
                handler.setLevel(level.to_python_level())
                handler.setFormatter(JSONFormatter())
                logger.addHandler(handler)

        logger.propagate = True
        return logger


# ============================================================================
# EXCEPTION DECORATOR
# ============================================================================

def log_exceptions(component_type: ComponentType = ComponentType.WRAPPER,
                   component_name: Optional[str] = None):
    """
    Decorator to log exceptions with context, then re-raise them.

    Example:
        @log_exceptions(ComponentType.LAYER, "ShapefileLayer")
        def read(path):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log = LoggerFactory.create_logger(
                    component_type, component_name or func.__module__
                )
                log.error(
                    f"Exception in {func.__name__}: {e}",
                    exc_info=True,
                    extra={
                        'custom_dimensions': {
                            'function_name': func.__name__,
                            'exception_type': type(e).__name__,
                        }
                    }
                )
                raise
        return wrapper
    return decorator
