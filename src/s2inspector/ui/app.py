"""Sentinel-2 NDVI Inspector App - click a map to chart the NDVI history of a point.

This is the main entry point for the web interface. It can be run with:
    python src/s2inspector/ui/app.py
    s2inspector  (when installed)
"""

import os

from nicegui import ui

from s2inspector.api import InspectorConfig, initialize_earth_engine
from s2inspector.ui.inspector import create_inspector_interface


@ui.page("/")
async def index_page():
    """Create the main page UI."""
    with ui.column().classes("w-full h-screen p-0 gap-0") as root:
        await create_inspector_interface(root)


def main():
    """Main entry point for the inspector web interface.

    Initializes Earth Engine for the configured project, then starts the web server.
    """
    initialize_earth_engine(InspectorConfig())

    # Get port and host from environment variables
    port = int(os.getenv("NICEGUI_WEBSERVER_PORT", 8080))
    host = os.getenv("NICEGUI_WEBSERVER_HOST", "0.0.0.0")

    # Start the web server (blocks until interrupted)
    ui.run(host=host, port=port, title="Sentinel-2 NDVI Inspector", reload=False)


if __name__ in {"__main__", "__mp_main__"}:
    main()
