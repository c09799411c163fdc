"""
Expressions and filters.

An Expression is a literal value or a reference to a feature property.
A Filter is a CQL2-JSON selector evaluated against features:

    {"op": "=", "args": [{"property": "iucn_cat"}, "Ia"]}
    {"op": "and", "args": [{...}, {...}]}

Exports:
    Expression: Literal or property reference
    Filter: CQL2-JSON selector
"""

import operator
import re
from collections.abc import Mapping
from typing import Any, Dict, Optional

from geobind.engine.styling import Literal, PropertyName
from geobind.exceptions import InvalidConfiguration, TypeMismatch
from geobind.object import GeoObject


_PROPERTY_TEXT = re.compile(r"^\[([^\[\]]+)\]$")


def _properties_of(target: Any) -> Optional[Mapping]:
    """Attribute mapping of a Feature wrapper, or the mapping itself."""
    if target is None or isinstance(target, Mapping):
        return target
    handle = getattr(target, "handle", None)
    if handle is not None and hasattr(handle, "get_attributes"):
        return handle.get_attributes()
    raise TypeMismatch(
        f"Expressions evaluate against a Feature or a mapping, not {type(target).__name__}"
    )


class Expression(GeoObject):
    """
    A literal value or a property reference.

    Accepted configuration:
        6, 0.5, True, "circle"      -> literal
        "[population]"              -> property reference
        {"property": "population"}  -> property reference
        {"literal": "[not a ref]"}  -> literal
    """

    type_name = "Expression"

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        super().__init__(engine=engine, registry=registry)
        if config is None:
            return
        builder = self.engine.style_builder()

        if isinstance(config, Expression):
            handle = config.handle
        elif isinstance(config, Mapping):
            if "property" in config:
                name = config["property"]
                if not isinstance(name, str) or not name:
                    raise InvalidConfiguration("Expression property must be a non-empty string")
                handle = builder.property_name(name)
            elif "literal" in config:
                handle = builder.literal(config["literal"])
            else:
                raise InvalidConfiguration(
                    "Expression mapping needs a 'property' or 'literal' key"
                )
        elif isinstance(config, str):
            match = _PROPERTY_TEXT.match(config)
            handle = builder.property_name(match.group(1)) if match else builder.literal(config)
        elif isinstance(config, (bool, int, float)):
            handle = builder.literal(config)
        else:
            raise TypeMismatch(f"Expression cannot be built from type: {type(config).__name__}")

        self.cache["handle"] = handle

    def _materialize(self):
        raise InvalidConfiguration("Expression requires a literal value or a property reference")

    @classmethod
    def literal(cls, value: Any, engine: Any = None) -> "Expression":
        """Literal expression, never parsed as a property reference."""
        expression = cls(engine=engine)
        expression.cache["handle"] = expression.engine.style_builder().literal(value)
        return expression

    @property
    def is_literal(self) -> bool:
        return isinstance(self.handle, Literal)

    @property
    def value(self) -> Any:
        """Literal value (None for property references)."""
        return self.handle.value if self.is_literal else None

    @property
    def property_name(self) -> Optional[str]:
        return self.handle.name if isinstance(self.handle, PropertyName) else None

    @property
    def text(self) -> str:
        if self.is_literal:
            value = self.handle.value
            return f"'{value}'" if isinstance(value, str) else str(value)
        return f"[{self.handle.name}]"

    @property
    def config(self) -> Any:
        if self.is_literal:
            value = self.handle.value
            if isinstance(value, str) and _PROPERTY_TEXT.match(value):
                return {"literal": value}
            return value
        return {"property": self.handle.name}

    def evaluate(self, target: Any = None) -> Any:
        """Evaluate against a Feature or a mapping of properties."""
        return self.handle.evaluate(_properties_of(target))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return self.handle == other.handle

    def __hash__(self) -> int:
        return hash(self.handle)

    def to_full_string(self) -> str:
        return self.text


# ============================================================================
# FILTER
# ============================================================================

_COMPARISONS = {
    "=": operator.eq,
    "<>": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}

_LOGICAL = ("and", "or", "not")


def _validate_selector(selector: Any) -> None:
    if not isinstance(selector, Mapping):
        raise InvalidConfiguration(f"Filter selector must be a mapping, not {type(selector).__name__}")
    op = selector.get("op")
    args = selector.get("args")
    if op not in _COMPARISONS and op not in _LOGICAL:
        raise InvalidConfiguration(f"Unsupported filter op: {op!r}")
    if not isinstance(args, (list, tuple)):
        raise InvalidConfiguration(f"Filter op '{op}' needs an args list")
    if op in _COMPARISONS:
        if len(args) != 2:
            raise InvalidConfiguration(f"Filter op '{op}' takes 2 args, got {len(args)}")
        return
    if op == "not" and len(args) != 1:
        raise InvalidConfiguration(f"Filter op 'not' takes 1 arg, got {len(args)}")
    if not args:
        raise InvalidConfiguration(f"Filter op '{op}' needs at least 1 arg")
    for arg in args:
        _validate_selector(arg)


class Filter(GeoObject):
    """
    CQL2-JSON selector.

    Comparisons take two args, each a literal or {"property": name};
    "and"/"or" take one or more selectors and "not" takes one.
    """

    type_name = "Filter"

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        super().__init__(engine=engine, registry=registry)
        if config is None:
            return
        if isinstance(config, Filter):
            config = config.config
        _validate_selector(config)
        self.cache["handle"] = dict(config)

    def _materialize(self):
        raise InvalidConfiguration("Filter requires a CQL2-JSON selector")

    def _operand(self, arg: Any) -> Expression:
        if isinstance(arg, Expression):
            return arg
        if isinstance(arg, Mapping):
            return Expression(arg, engine=self._engine)
        return Expression.literal(arg, engine=self._engine)

    def _evaluate(self, selector: Mapping, properties: Optional[Mapping]) -> bool:
        op = selector["op"]
        args = selector["args"]
        if op == "and":
            return all(self._evaluate(arg, properties) for arg in args)
        if op == "or":
            return any(self._evaluate(arg, properties) for arg in args)
        if op == "not":
            return not self._evaluate(args[0], properties)

        left = self._operand(args[0]).evaluate(properties)
        right = self._operand(args[1]).evaluate(properties)
        if left is None or right is None:
            return op == "=" and left is right
        try:
            return bool(_COMPARISONS[op](left, right))
        except TypeError as e:
            raise TypeMismatch(
                f"Filter op '{op}' cannot compare {type(left).__name__} with {type(right).__name__}"
            ) from e

    def evaluate(self, target: Any) -> bool:
        """True if the Feature (or mapping of properties) passes the filter."""
        return self._evaluate(self.handle, _properties_of(target))

    @property
    def config(self) -> Dict[str, Any]:
        return dict(self.handle)

    def to_full_string(self) -> str:
        return str(self.handle)
