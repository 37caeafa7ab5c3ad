"""Side panel with fixed widget slots: intro, coordinates, chart and legend."""

from typing import Callable

from nicegui import ui

from s2inspector.api.collections import Coordinate

INTRO_SLOT = 0
COORDINATES_SLOT = 1
CHART_SLOT = 2
LEGEND_SLOT = 3

APP_TITLE = "Sentinel-2 Vegetation Index — Time Series Inspector"
APP_INSTRUCTIONS = "Click anywhere on the map to view a point NDVI time series."


class InspectorPanel:
    """Encapsulates the inspector side panel.

    Each slot is a container; ``set_widget`` clears it before building the new
    widget inside, so regenerating the chart only ever touches slot 2.
    """

    def __init__(self):
        self.slots = []
        self.widgets: dict[int, object] = {}
        self.lon_label = None
        self.lat_label = None

    def create(self):
        """Create and return the panel with its four slots populated."""
        with ui.column().classes("w-full gap-4 p-4") as panel:
            for _ in range(4):
                self.slots.append(ui.column().classes("w-full"))

        self.set_widget(INTRO_SLOT, self._create_intro)
        self.set_widget(COORDINATES_SLOT, self._create_coordinates)
        self.set_widget(CHART_SLOT, lambda: ui.label("[Chart]"))
        self.set_widget(LEGEND_SLOT, lambda: ui.label("[Legend]"))

        return panel

    def set_widget(self, index: int, build: Callable[[], object]):
        """Replace the content of slot ``index`` with the widget ``build`` creates."""
        slot = self.slots[index]
        slot.clear()
        with slot:
            widget = build()
        self.widgets[index] = widget
        return widget

    def set_coordinates(self, coordinate: Coordinate):
        """Update the lon/lat readout."""
        lon_text, lat_text = coordinate.labels()
        self.lon_label.set_text(lon_text)
        self.lat_label.set_text(lat_text)

    def _create_intro(self):
        with ui.column().classes("w-full gap-1") as intro:
            ui.label(APP_TITLE).style("font-size: 20px; font-weight: bold")
            ui.label(APP_INSTRUCTIONS)
        return intro

    def _create_coordinates(self):
        with ui.row().classes("w-full gap-4") as row:
            self.lon_label = ui.label("").classes("text-sm font-mono")
            self.lat_label = ui.label("").classes("text-sm font-mono")
        return row
