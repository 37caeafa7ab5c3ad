"""Inspector layout: split view with the side panel on the left and the NDVI map on the right."""

import asyncio
from datetime import datetime
from typing import Optional

from loguru import logger
from nicegui import ui

from s2inspector.api import CollectionBuilder, Coordinate, InspectorConfig, NDVI_VIS, build_max_ndvi_composite, get_color_bar_url, get_tile_url
from s2inspector.api.collections import SCL_KEEP_CLASSES
from s2inspector.ui.visualization.helpers import describe_scl_classes
from s2inspector.ui.widgets.chart_panel import ChartGenerator
from s2inspector.ui.widgets.inspector_panel import LEGEND_SLOT, InspectorPanel
from s2inspector.ui.widgets.legend import LegendWidget
from s2inspector.ui.widgets.map_widget import InspectorMapWidget

# Example point shown at startup (southern Sweden)
INITIAL_POINT = Coordinate(lon=13.140410, lat=55.688018)
INITIAL_ZOOM = 12
PANEL_WIDTH_PERCENT = 30


async def create_inspector_interface(root, config: Optional[InspectorConfig] = None, now: Optional[datetime] = None):
    """Build the whole inspector inside ``root``, replacing its previous content.

    The layout is installed first; Earth Engine registrations (composite tiles,
    color bar thumbnail, the startup chart) then run in worker threads so the
    page stays responsive.

    Args:
        root: Container element that holds the app
        config: InspectorConfig instance. If not provided, will create one from env vars.
        now: End of the composite and time series windows (defaults to the current time)

    Returns:
        Dict with the panel, map widget and chart generator
    """
    config = config or InspectorConfig()

    builder = CollectionBuilder(config)
    logger.info(f"Masking scenes to SCL classes {describe_scl_classes(SCL_KEEP_CLASSES)}")
    composite_source = builder.composite_source(now)
    series_source = builder.time_series_source(now)

    panel = InspectorPanel()
    map_widget = InspectorMapWidget(center=INITIAL_POINT, zoom=INITIAL_ZOOM)
    chart = ChartGenerator(panel, series_source, scale=config.series_scale)

    async def handle_click(coordinate: Coordinate):
        """Update the readout and marker, then regenerate the chart."""
        logger.info(f"Map clicked at lon={coordinate.lon:.6f}, lat={coordinate.lat:.6f}")
        panel.set_coordinates(coordinate)
        map_widget.set_marker(coordinate)
        await chart.generate(coordinate)

    root.clear()
    with root:
        with ui.splitter(value=PANEL_WIDTH_PERCENT).classes("w-full h-screen") as splitter:
            with splitter.before:
                panel.create()
            with splitter.after:
                map_widget.create(on_click=handle_click)

    # Send the layout before the Earth Engine requests; later updates go over the websocket
    await ui.context.client.connected()

    composite = build_max_ndvi_composite(composite_source, NDVI_VIS)
    map_widget.set_composite(await asyncio.to_thread(get_tile_url, composite))

    color_bar_url = await asyncio.to_thread(get_color_bar_url, NDVI_VIS.palette)
    legend = LegendWidget(NDVI_VIS, lookback_months=config.lookback_months)
    panel.set_widget(LEGEND_SLOT, lambda: legend.create(color_bar_url))

    # Chart for the example point without waiting for a click
    await handle_click(INITIAL_POINT)

    return {
        "panel": panel,
        "map": map_widget,
        "chart": chart,
        "on_click": handle_click,
    }
