"""Map widget with a fixed-index layer stack and click forwarding."""

from typing import Any, Callable, Optional

from loguru import logger
from nicegui import events, ui

from s2inspector.api.collections import Coordinate

COMPOSITE_LAYER = 0
MARKER_LAYER = 1

MARKER_COLOR = "#000000"
MARKER_RADIUS = 4

CROSSHAIR_CSS = ".leaflet-container.inspector-map { cursor: crosshair; }"


class InspectorMapWidget:
    """Leaflet map whose layers live in numbered slots.

    Setting a slot removes whatever layer occupied it before, so the map never
    accumulates composites or click markers.
    """

    def __init__(self, center: Coordinate, zoom: int = 12):
        self.center = center
        self.zoom = zoom
        self.map = None
        self.layers: dict[int, object] = {}
        self.layer_names: dict[int, str] = {}

    def create(self, on_click: Optional[Callable[[Coordinate], Any]] = None):
        """Create the map centered on the initial point and subscribe ``on_click``."""
        ui.add_css(CROSSHAIR_CSS)
        self.map = ui.leaflet(center=self.center.to_latlng(), zoom=self.zoom)
        self.map.classes("inspector-map w-full h-full")

        if on_click is not None:
            self._setup_map_handlers(self.map, on_click)

        return self.map

    def _setup_map_handlers(self, m, on_click: Callable[[Coordinate], Any]):
        """Forward map clicks as coordinates. ``on_click`` may be sync or async."""

        async def handle_click(e: events.GenericEventArguments):
            latlng = e.args["latlng"]
            result = on_click(Coordinate(lon=latlng["lng"], lat=latlng["lat"]))
            if hasattr(result, "__await__"):
                await result

        m.on("map-click", handle_click)

    def set_layer(self, index: int, layer, name: str):
        """Put ``layer`` in slot ``index``, removing the previous occupant."""
        previous = self.layers.get(index)
        if previous is not None:
            self.map.remove_layer(previous)
        self.layers[index] = layer
        self.layer_names[index] = name
        logger.debug(f"Map layer {index} set to '{name}'")

    def set_composite(self, tile_url: str, name: str = "NDVI Composite"):
        """Show an Earth Engine tile layer in the composite slot."""
        layer = self.map.tile_layer(url_template=tile_url, options={"attribution": "Google Earth Engine", "maxZoom": 20})
        self.set_layer(COMPOSITE_LAYER, layer, name)

    def set_marker(self, coordinate: Coordinate, name: str = "clicked location"):
        """Show a dot at ``coordinate`` in the marker slot."""
        layer = self.map.generic_layer(
            name="circleMarker",
            args=[list(coordinate.to_latlng()), {"color": MARKER_COLOR, "fillColor": MARKER_COLOR, "fillOpacity": 1, "radius": MARKER_RADIUS}],
        )
        self.set_layer(MARKER_LAYER, layer, name)
