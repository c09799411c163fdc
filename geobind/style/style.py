"""
Style - an ordered composition of symbolizers.

Usage:
    style = Style({"name": "parks", "parts": [
        {"type": "Fill", "color": "#00ff00", "opacity": 0.4},
        {"type": "Stroke", "color": "#006600", "width": 2},
    ]})
    style.to_leaflet()
    style.to_mapbox()
"""

from collections.abc import Sequence
from typing import Any, Dict, List, Optional

from geobind.exceptions import InvalidConfiguration, TypeMismatch
from geobind.factory.normalizer import normalize
from geobind.filter import Expression
from geobind.object import GeoObject
from geobind.style.fill import Fill
from geobind.style.models import (
    CartoSymFill,
    CartoSymMarker,
    CartoSymRule,
    CartoSymStroke,
    CartoSymStyle,
    CartoSymSymbolizer,
)
from geobind.style.shape import Shape
from geobind.style.stroke import Stroke
from geobind.style.symbolizer import Symbolizer
from geobind.style.translator import StyleTranslator


_STYLE_KEYS = ("type", "name", "parts")


def _literal(part: Symbolizer, prop: str) -> Any:
    expression: Expression = getattr(part, prop)
    if not expression.is_literal:
        raise TypeMismatch(
            f"{part.type_name} {prop} is data-driven ({expression.text}) and cannot be exported",
            property_name=prop
        )
    return expression.value


def _cartosym_fill(fill: Optional[Fill]) -> Optional[CartoSymFill]:
    if fill is None:
        return None
    return CartoSymFill(color=_literal(fill, "color"), opacity=_literal(fill, "opacity"))


def _cartosym_stroke(stroke: Optional[Stroke]) -> Optional[CartoSymStroke]:
    if stroke is None:
        return None
    return CartoSymStroke(
        color=_literal(stroke, "color"),
        width=_literal(stroke, "width"),
        opacity=_literal(stroke, "opacity"),
        cap=_literal(stroke, "cap"),
        join=_literal(stroke, "join"),
    )


class Style(GeoObject):
    """
    Ordered symbolizer parts, drawn first to last.

    A list configuration is shorthand for the parts; each part that is not
    already a Symbolizer is dispatched through the registry.
    """

    type_name = "Style"

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        super().__init__(engine=engine, registry=registry)
        self._name: Optional[str] = None
        self._parts: List[Symbolizer] = []
        if config is None:
            return

        if isinstance(config, Symbolizer):
            config = {"parts": [config]}
        elif isinstance(config, Sequence) and not isinstance(config, str):
            config = {"parts": list(config)}
        else:
            config = normalize(config)

        if config.get("type", "Style") != "Style":
            raise InvalidConfiguration(f"Style cannot be built from type '{config['type']}'")
        unknown = sorted(set(config) - set(_STYLE_KEYS))
        if unknown:
            raise InvalidConfiguration(f"Style has no properties: {', '.join(unknown)}")
        parts = config.get("parts")
        if not isinstance(parts, (list, tuple)):
            raise InvalidConfiguration("Construct style with a parts list (missing or not a list: 'parts')")

        self._name = config.get("name")
        self._parts = [
            part if isinstance(part, Symbolizer)
            else self.registry.create(part, base=Symbolizer, engine=self._engine)
            for part in parts
        ]

    def _materialize(self):
        return [part.handle for part in self._parts]

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def parts(self) -> List[Symbolizer]:
        return list(self._parts)

    @property
    def config(self) -> Dict[str, Any]:
        return {
            "type": "Style",
            "name": self.name,
            "parts": [part.config for part in self._parts]
        }

    # ========================================================================
    # EXPORT
    # ========================================================================

    def to_cartosym(self) -> CartoSymStyle:
        """
        Export as a CartoSym-JSON document, one rule per part.

        Raises:
            TypeMismatch: If a part uses a data-driven (property) expression
        """
        name = self.name or "style"
        rules = []
        for index, part in enumerate(self._parts):
            if isinstance(part, Shape):
                symbolizer = CartoSymSymbolizer(type="Point", marker=CartoSymMarker(
                    name=_literal(part, "name"),
                    size=_literal(part, "size"),
                    opacity=_literal(part, "opacity"),
                    rotation=_literal(part, "rotation"),
                    fill=_cartosym_fill(part.fill),
                    stroke=_cartosym_stroke(part.stroke),
                ))
            elif isinstance(part, Fill):
                symbolizer = CartoSymSymbolizer(type="Polygon", fill=_cartosym_fill(part))
            elif isinstance(part, Stroke):
                symbolizer = CartoSymSymbolizer(type="Line", stroke=_cartosym_stroke(part))
            else:
                raise TypeMismatch(f"{part.type_name} parts cannot be exported to CartoSym-JSON")
            rules.append(CartoSymRule(name=f"{name}-{index}-{part.type_name.lower()}", symbolizer=symbolizer))
        return CartoSymStyle(name=name, stylingRules=rules)

    def to_leaflet(self) -> Dict[str, Any]:
        return StyleTranslator(self.to_cartosym().model_dump(exclude_none=True)).to_leaflet()

    def to_mapbox(self) -> Dict[str, Any]:
        return StyleTranslator(self.to_cartosym().model_dump(exclude_none=True)).to_mapbox()

    def to_full_string(self) -> str:
        return ", ".join(part.type_name for part in self._parts)
