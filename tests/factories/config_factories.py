"""
Randomized configuration factories - anti-overfitting design.

Every factory call generates randomized names and values so tests cannot
rely on specific defaults.
"""

import random
import string

from shapely.geometry import Point


ATTRIBUTE_TYPES = ("String", "Integer", "Double", "Boolean")


def _random_suffix(length: int = 6) -> str:
    """Generate random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def random_value(field_type: str):
    """Random Python value matching an attribute field type."""
    if field_type == "String":
        return f"value_{_random_suffix()}"
    if field_type == "Integer":
        return random.randint(-1000, 1000)
    if field_type == "Double":
        return random.uniform(-1000, 1000)
    if field_type == "Boolean":
        return random.choice([True, False])
    raise ValueError(f"No random value for {field_type}")


def make_field_config(name: str = None, field_type: str = None, **overrides):
    """
    Build an attribute field configuration.

    Args:
        name: Optional fixed name (random if None)
        field_type: Optional fixed type (random attribute type if None)
        **overrides: Any key override
    """
    base = {
        "name": name or f"attr_{_random_suffix()}",
        "type": field_type or random.choice(ATTRIBUTE_TYPES),
    }
    base.update(overrides)
    return base


def make_schema_config(name: str = None, attribute_count: int = None, projection: str = "EPSG:4326"):
    """
    Build a schema configuration with a Point geometry field first.

    Returns:
        dict suitable for Schema(result)
    """
    count = attribute_count if attribute_count is not None else random.randint(1, 5)
    fields = [{"name": f"geom_{_random_suffix()}", "type": "Point", "projection": projection}]
    names = set()
    while len(names) < count:
        names.add(f"attr_{_random_suffix()}")
    fields.extend(make_field_config(name=n) for n in sorted(names))
    return {"name": name or f"schema_{_random_suffix()}", "fields": fields}


def make_values(schema_config):
    """Random attribute values (geometry included) for a schema configuration."""
    values = {}
    for field in schema_config["fields"]:
        if field["type"] == "Point":
            values[field["name"]] = Point(random.uniform(-180, 180), random.uniform(-90, 90))
        else:
            values[field["name"]] = random_value(field["type"])
    return values


def make_fill_config(**overrides):
    """Build a Fill configuration with a random color and opacity."""
    base = {
        "type": "Fill",
        "color": "#%06x" % random.randint(0, 0xFFFFFF),
        "opacity": round(random.uniform(0, 1), 2),
    }
    base.update(overrides)
    return base


def make_stroke_config(**overrides):
    """Build a Stroke configuration with a random color and width."""
    base = {
        "type": "Stroke",
        "color": "#%06x" % random.randint(0, 0xFFFFFF),
        "width": random.randint(0, 10),
    }
    base.update(overrides)
    return base
