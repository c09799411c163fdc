"""
Style Translator.

Translates CartoSym-JSON to client formats:
- Leaflet (static path/circle-marker options)
- Mapbox GL (layer definitions)

Usage:
    translator = StyleTranslator(cartosym_dict)
    leaflet_style = translator.to_leaflet()
    mapbox_style = translator.to_mapbox()
"""

from typing import Any, Dict, List, Optional

from geobind.config.defaults import StyleDefaults
from geobind.util_logger import ComponentType, LoggerFactory


logger = LoggerFactory.create_logger(ComponentType.STYLE, "StyleTranslator")


def _stroke_options(stroke: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "color": stroke.get("color"),
        "weight": stroke.get("width", StyleDefaults.STROKE_WIDTH),
        "opacity": stroke.get("opacity", StyleDefaults.STROKE_OPACITY),
        "lineCap": stroke.get("cap", StyleDefaults.STROKE_CAP),
        "lineJoin": stroke.get("join", StyleDefaults.STROKE_JOIN),
    }


def _line_paint(stroke: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "paint": {
            "line-color": stroke.get("color", StyleDefaults.STROKE_COLOR),
            "line-width": stroke.get("width", StyleDefaults.STROKE_WIDTH),
            "line-opacity": stroke.get("opacity", StyleDefaults.STROKE_OPACITY),
        },
        "layout": {
            "line-cap": stroke.get("cap", StyleDefaults.STROKE_CAP),
            "line-join": stroke.get("join", StyleDefaults.STROKE_JOIN),
        },
    }


class StyleTranslator:
    """
    Translates a CartoSym-JSON document to client formats.

    Rules are applied in order, so later rules override earlier ones in
    the merged Leaflet options.
    """

    def __init__(self, cartosym: Dict[str, Any]):
        self.cartosym = cartosym
        self.rules = cartosym.get("stylingRules", [])

    # ========================================================================
    # LEAFLET OUTPUT
    # ========================================================================

    def to_leaflet(self) -> Dict[str, Any]:
        """Merge all rules into one static Leaflet style object."""
        style: Dict[str, Any] = {}
        for rule in self.rules:
            style.update(self._symbolizer_to_leaflet(rule["symbolizer"]))
        # Remove None values for cleaner output
        return {k: v for k, v in style.items() if v is not None}

    def _symbolizer_to_leaflet(self, symbolizer: Dict[str, Any]) -> Dict[str, Any]:
        sym_type = symbolizer.get("type")
        if sym_type == "Polygon":
            fill = symbolizer.get("fill", {})
            style = {
                "fillColor": fill.get("color"),
                "fillOpacity": fill.get("opacity", StyleDefaults.FILL_OPACITY),
            }
            if symbolizer.get("stroke"):
                style.update(_stroke_options(symbolizer["stroke"]))
            return style
        if sym_type == "Line":
            return _stroke_options(symbolizer.get("stroke", {}))
        if sym_type == "Point":
            marker = symbolizer.get("marker", {})
            fill = marker.get("fill", {})
            stroke = marker.get("stroke", {})
            opacity = marker.get("opacity", StyleDefaults.SHAPE_OPACITY)
            return {
                "radius": marker.get("size", StyleDefaults.SHAPE_SIZE),
                "fillColor": fill.get("color"),
                "fillOpacity": fill.get("opacity", StyleDefaults.FILL_OPACITY) * opacity,
                "color": stroke.get("color"),
                "weight": stroke.get("width", StyleDefaults.STROKE_WIDTH),
                "opacity": stroke.get("opacity", StyleDefaults.STROKE_OPACITY) * opacity,
            }
        logger.warning(f"Skipping symbolizer with unsupported type: {sym_type}")
        return {}

    # ========================================================================
    # MAPBOX GL OUTPUT
    # ========================================================================

    def to_mapbox(self) -> Dict[str, Any]:
        """
        Convert to Mapbox GL style layers.

        Returns a partial Mapbox GL style with a layers array.
        The source must be added client-side.
        """
        layers: List[Dict[str, Any]] = []
        for rule in self.rules:
            layers.extend(self._rule_to_mapbox(rule))
        return {
            "version": 8,
            "name": self.cartosym.get("name", "style"),
            "layers": layers
        }

    def _rule_to_mapbox(self, rule: Dict[str, Any]) -> List[Dict[str, Any]]:
        symbolizer = rule["symbolizer"]
        sym_type = symbolizer.get("type")
        layer_id = rule.get("name", "layer")

        if sym_type == "Polygon":
            fill = symbolizer.get("fill", {})
            layers = [{
                "id": f"{layer_id}-fill",
                "type": "fill",
                "paint": {
                    "fill-color": fill.get("color", StyleDefaults.FILL_COLOR),
                    "fill-opacity": fill.get("opacity", StyleDefaults.FILL_OPACITY),
                }
            }]
            stroke: Optional[Dict[str, Any]] = symbolizer.get("stroke")
            if stroke:
                layers.append({"id": f"{layer_id}-stroke", "type": "line", **_line_paint(stroke)})
            return layers

        if sym_type == "Line":
            return [{"id": layer_id, "type": "line", **_line_paint(symbolizer.get("stroke", {}))}]

        if sym_type == "Point":
            # circle layers have no mark name or rotation; marker opacity scales fill and stroke
            marker = symbolizer.get("marker", {})
            fill = marker.get("fill", {})
            stroke = marker.get("stroke", {})
            opacity = marker.get("opacity", StyleDefaults.SHAPE_OPACITY)
            return [{
                "id": layer_id,
                "type": "circle",
                "paint": {
                    "circle-radius": marker.get("size", StyleDefaults.SHAPE_SIZE),
                    "circle-color": fill.get("color", StyleDefaults.FILL_COLOR),
                    "circle-opacity": fill.get("opacity", StyleDefaults.FILL_OPACITY) * opacity,
                    "circle-stroke-color": stroke.get("color", StyleDefaults.STROKE_COLOR),
                    "circle-stroke-width": stroke.get("width", StyleDefaults.STROKE_WIDTH),
                    "circle-stroke-opacity": stroke.get("opacity", StyleDefaults.STROKE_OPACITY) * opacity,
                }
            }]

        logger.warning(f"Skipping rule '{layer_id}' with unsupported symbolizer type: {sym_type}")
        return []
