"""
Symbolizer base class and setter adaptation helpers.

Symbolizer properties hold engine expressions. Setters accept convenience
forms (numbers, strings, CQL2-JSON property references, Expression
objects), check them against the property's domain and write the engine
expression through.

Exports:
    Symbolizer: Base class for Shape, Fill and Stroke
    number_expression: Adapt a numeric property value
    text_expression: Adapt a text property value
"""

import math
import re
from collections.abc import Mapping
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple

from geobind.exceptions import InvalidConfiguration, RangeError, TypeMismatch
from geobind.factory.normalizer import normalize
from geobind.filter import Expression
from geobind.object import GeoObject


HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _wrap(owner: "Symbolizer", value: Any, prop: str, expected: str) -> Expression:
    if isinstance(value, Expression):
        return value
    try:
        return Expression(value, engine=owner._engine)
    except (InvalidConfiguration, TypeMismatch) as e:
        raise TypeMismatch(
            f"{owner.type_name} {prop} must be {expected} or an expression", property_name=prop
        ) from e


def number_expression(
    owner: "Symbolizer",
    prop: str,
    value: Any,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
    constraint: str = ""
) -> Expression:
    """
    Adapt a value for a numeric property.

    Numbers are range checked and become literals; mappings and Expression
    objects are accepted as expressions (literal ones are range checked too).

    Raises:
        TypeMismatch: For strings, booleans and other non-numeric kinds
        RangeError: For NaN, infinities and numbers outside [minimum, maximum]
    """
    if isinstance(value, bool) or isinstance(value, str):
        raise TypeMismatch(
            f"{owner.type_name} {prop} cannot be type: {type(value).__name__}", property_name=prop
        )
    if isinstance(value, (int, float)):
        expression = Expression.literal(value, engine=owner._engine)
    elif isinstance(value, (Mapping, Expression)):
        expression = _wrap(owner, value, prop, "a number")
    else:
        raise TypeMismatch(
            f"{owner.type_name} {prop} cannot be type: {type(value).__name__}", property_name=prop
        )

    if expression.is_literal:
        literal = expression.value
        if isinstance(literal, bool) or not isinstance(literal, (int, float)):
            raise TypeMismatch(
                f"{owner.type_name} {prop} must be a number or an expression", property_name=prop
            )
        if not math.isfinite(literal):
            raise RangeError(
                f"{owner.type_name} {prop} must be {constraint or 'a finite number'}", property_name=prop
            )
        if (minimum is not None and literal < minimum) or (maximum is not None and literal > maximum):
            raise RangeError(f"{owner.type_name} {prop} must be {constraint}", property_name=prop)
    return expression


def text_expression(
    owner: "Symbolizer",
    prop: str,
    value: Any,
    adapt: Optional[Callable[[str], str]] = None
) -> Expression:
    """
    Adapt a value for a text property.

    Strings are passed through ``adapt`` (which validates and normalizes)
    and become literals, except "[name]" which references a property;
    mappings and Expression objects are accepted as expressions.

    Raises:
        TypeMismatch: For values that are neither text nor expressions
    """
    if isinstance(value, str):
        expression = Expression(value, engine=owner._engine)
        if not expression.is_literal:
            return expression
        return Expression.literal(adapt(value) if adapt else value, engine=owner._engine)
    if isinstance(value, (Mapping, Expression)):
        expression = _wrap(owner, value, prop, "a string")
        if expression.is_literal and adapt:
            if not isinstance(expression.value, str):
                raise TypeMismatch(f"{owner.type_name} {prop} must be a string", property_name=prop)
            expression = Expression.literal(adapt(expression.value), engine=owner._engine)
        return expression
    raise TypeMismatch(
        f"{owner.type_name} {prop} cannot be type: {type(value).__name__}", property_name=prop
    )


def color_adapter(owner: "Symbolizer", prop: str = "color") -> Callable[[str], str]:
    """Validator normalizing "#abc" / "#AABBCC" to "#aabbcc"."""
    def adapt(value: str) -> str:
        if not HEX_COLOR.match(value):
            raise RangeError(
                f"{owner.type_name} {prop} must be a hex color like '#ff0000', got {value!r}",
                property_name=prop
            )
        digits = value[1:].lower()
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return f"#{digits}"
    return adapt


def choice_adapter(owner: "Symbolizer", prop: str, choices: Tuple[str, ...]) -> Callable[[str], str]:
    def adapt(value: str) -> str:
        if value not in choices:
            raise RangeError(
                f"{owner.type_name} {prop} must be one of {', '.join(choices)}, got {value!r}",
                property_name=prop
            )
        return value
    return adapt


class Symbolizer(GeoObject):
    """
    Base class for symbolizers.

    Subclasses list their settable properties in ``properties``; the
    constructor applies configuration keys through those property setters
    and ``config`` reads them back.
    """

    type_name = "Symbolizer"
    properties: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        super().__init__(engine=engine, registry=registry)
        if config is not None:
            self.apply(self.prep_config(config))

    @classmethod
    def prep_config(cls, config: Any) -> Dict[str, Any]:
        return normalize(config)

    def apply(self, config: Dict[str, Any]) -> None:
        """Assign every property present in a configuration mapping."""
        config = dict(config)
        kind = config.pop("type", self.type_name)
        if kind != self.type_name:
            raise InvalidConfiguration(f"{self.type_name} cannot be built from type '{kind}'")
        unknown = sorted(set(config) - set(self.properties))
        if unknown:
            raise InvalidConfiguration(
                f"{self.type_name} has no properties: {', '.join(unknown)}. "
                f"Expected: {', '.join(self.properties)}"
            )
        for prop in self.properties:
            if prop in config:
                setattr(self, prop, config[prop])

    @property
    def config(self) -> Dict[str, Any]:
        config = {"type": self.type_name}
        for prop in self.properties:
            value = getattr(self, prop)
            config[prop] = value.config if isinstance(value, GeoObject) else value
        return config

    def clone(self) -> "Symbolizer":
        return type(self)(self.config, engine=self._engine, registry=self._registry)
