"""
Configuration Normalizer.

Turns heterogeneous caller input into a fresh canonical configuration dict.
Never mutates the caller's value and never raises; malformed shapes are
rejected downstream by the factory predicates or wrapper constructors.

Exports:
    normalize: Canonicalize a configuration value
    discriminator: Read the 'type' discriminator of a configuration
"""

import os
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Optional


def normalize(config: Any) -> Dict[str, Any]:
    """
    Canonicalize a configuration value.

    Args:
        config: None, a mapping, a string shorthand, a filesystem path, a sequence of
                field descriptors, or any other primitive

    Returns:
        New dict suitable for defaulting and merging

    Examples:
        normalize([{"name": "a", "type": "String"}])  # {"fields": [...]}
        normalize("circle")                            # {"name": "circle"}
        normalize(Path("roads.shp"))                   # {"path": "roads.shp"}
        normalize({"type": "Fill"})                    # shallow copy
    """
    if config is None:
        return {}
    if isinstance(config, Mapping):
        return dict(config)
    if isinstance(config, str):
        return {"name": config}
    if isinstance(config, os.PathLike):
        return {"path": os.fspath(config)}
    if isinstance(config, Sequence) and not isinstance(config, (bytes, bytearray)):
        return {"fields": list(config)}
    return {"value": config}


def discriminator(config: Any) -> Optional[str]:
    """Return the string 'type' of a mapping configuration, if it has one."""
    if isinstance(config, Mapping):
        value = config.get("type")
        if isinstance(value, str):
            return value
    return None
