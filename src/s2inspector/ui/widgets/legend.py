"""Static legend for the NDVI composite."""

from typing import Sequence

from nicegui import ui

from s2inspector.api.collections import SCL_KEEP_CLASSES
from s2inspector.api.composite import VisParams
from s2inspector.ui.visualization.helpers import describe_scl_classes, legend_labels, legend_title


class LegendWidget:
    """Color bar plus min/mid/max labels, built once from the visualization parameters."""

    def __init__(self, vis: VisParams, lookback_months: int = 6, kept_classes: Sequence[int] = SCL_KEEP_CLASSES):
        self.vis = vis
        self.lookback_months = lookback_months
        self.kept_classes = kept_classes

    def create(self, color_bar_url: str):
        """Create and return the legend column.

        Args:
            color_bar_url: Thumbnail URL of the palette color bar (see ``get_color_bar_url``)
        """
        min_text, mid_text, max_text = legend_labels(self.vis)

        with ui.column().classes("w-full gap-1") as legend:
            ui.label(legend_title(self.lookback_months)).classes("font-bold")
            ui.image(color_bar_url).classes("w-full").style("margin: 0px 8px; max-height: 24px")
            with ui.row().classes("w-full justify-between no-wrap"):
                ui.label(min_text).style("margin: 4px 8px")
                ui.label(mid_text).classes("flex-1 text-center").style("margin: 4px 8px")
                ui.label(max_text).style("margin: 4px 8px")
            ui.label(f"Pixels kept (SCL): {describe_scl_classes(self.kept_classes)}").classes("text-xs text-gray-600")

        return legend
