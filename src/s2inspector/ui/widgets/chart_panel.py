"""NDVI time series chart bound to the inspector panel's chart slot."""

import asyncio

import ee
from loguru import logger
from nicegui import ui

from s2inspector.api.collections import Coordinate
from s2inspector.api.timeseries import extract_ndvi_series
from s2inspector.ui.visualization.helpers import create_ndvi_series_figure
from s2inspector.ui.widgets.inspector_panel import CHART_SLOT, InspectorPanel


class ChartGenerator:
    """Request a point time series from Earth Engine and show it in the chart slot."""

    def __init__(self, panel: InspectorPanel, collection: ee.ImageCollection, scale: int = 10):
        """Initialize chart generator.

        Args:
            panel: Inspector panel owning the chart slot
            collection: Masked time series collection with an NDVI band
            scale: Sampling scale in meters
        """
        self.panel = panel
        self.collection = collection
        self.scale = scale
        self._latest_request = 0

    async def generate(self, coordinate: Coordinate):
        """Replace the chart slot with the NDVI series at ``coordinate``.

        A spinner holds the slot while the request runs in a worker thread. Only
        the most recent request may fill the slot; results of requests that were
        overtaken by a newer click are dropped. Earth Engine errors are logged,
        notified and shown in place of the chart.

        Returns:
            The widget placed in the chart slot, or None if the request was overtaken
        """
        self._latest_request += 1
        request = self._latest_request

        logger.info(f"Generating NDVI chart at lon={coordinate.lon:.6f}, lat={coordinate.lat:.6f}")
        self.panel.set_widget(CHART_SLOT, lambda: ui.spinner(size="lg"))

        try:
            series = await asyncio.to_thread(extract_ndvi_series, self.collection, coordinate.to_point(), self.scale)
        except ee.EEException as e:
            if request != self._latest_request:
                return None
            logger.error(f"Time series request failed: {e}")
            ui.notify(f"❌ Time series request failed: {str(e)}", position="top", type="negative")
            return self.panel.set_widget(CHART_SLOT, lambda: ui.label(f"Error: {str(e)}").classes("text-red-600 text-sm"))

        if request != self._latest_request:
            logger.debug(f"Dropping chart for lon={coordinate.lon:.6f}, lat={coordinate.lat:.6f}: superseded by a newer click")
            return None

        fig = create_ndvi_series_figure(series)
        return self.panel.set_widget(CHART_SLOT, lambda: ui.plotly(fig).classes("w-full"))
