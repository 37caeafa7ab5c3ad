"""Visualization helpers for the inspector chart and legend.

This module provides utilities for:
- The NDVI time series chart figure (Plotly)
- Legend label values derived from visualization parameters
- SCL (Scene Classification Layer) class names used in log and UI texts
"""

from typing import Sequence

import plotly.graph_objects as go

from s2inspector.api.composite import VisParams
from s2inspector.api.timeseries import SeriesPoint

# ============================================================================
# SCL (Scene Classification Layer) labels
# ============================================================================

# Reference: https://sentinels.copernicus.eu/documents/247904/685211/Sentinel-2_L2A_SCP_PDGS.pdf
SCL_LABELS = {
    0: "No Data (Missing data)",
    1: "Saturated or defective pixel",
    2: "Topographic casted shadows",
    3: "Cloud shadows",
    4: "Vegetation",
    5: "Not-vegetated",
    6: "Water",
    7: "Unclassified",
    8: "Cloud medium probability",
    9: "Cloud high probability",
    10: "Thin cirrus",
    11: "Snow or ice",
}


def describe_scl_classes(classes: Sequence[int]) -> str:
    """Return a readable list of SCL classes, e.g. ``"4 (Vegetation), 5 (Not-vegetated)"``."""
    return ", ".join(f"{c} ({SCL_LABELS.get(c, f'Class {c}')})" for c in classes)


# ============================================================================
# Time series chart
# ============================================================================

CHART_TITLE = "Vegetation Index: time series"
CHART_X_TITLE = "Date"
CHART_Y_TITLE = "NDVI"
CHART_DATE_FORMAT = "%m-%y"  # MM-yy
CHART_GRIDLINES = 7
SERIES_COLOR = "blue"
SERIES_POINT_SIZE = 2


def create_ndvi_series_figure(series: Sequence[SeriesPoint], name: str = "NDVI") -> go.Figure:
    """Create a Plotly scatter figure for a point NDVI time series.

    Points only, no connecting line, legend on the right.

    Args:
        series: Observations to plot
        name: Legend entry for the series

    Returns:
        A Plotly figure object
    """
    fig = go.Figure(
        data=[
            go.Scatter(
                x=[p.date for p in series],
                y=[p.ndvi for p in series],
                mode="markers",
                name=name,
                marker=dict(color=SERIES_COLOR, size=SERIES_POINT_SIZE * 2),  # plotly size is a diameter
                hovertemplate="%{x|%Y-%m-%d}: %{y:.3f}<extra></extra>",
                showlegend=True,
            )
        ]
    )

    fig.update_layout(
        title=CHART_TITLE,
        xaxis=dict(title=CHART_X_TITLE, tickformat=CHART_DATE_FORMAT, nticks=CHART_GRIDLINES),
        yaxis=dict(title=CHART_Y_TITLE),
        legend=dict(x=1.02, y=0.5, xanchor="left", yanchor="middle"),
        margin=dict(l=50, r=20, t=40, b=40),
        height=320,
        template="plotly_white",
    )

    return fig


# ============================================================================
# Legend
# ============================================================================

LEGEND_TITLE = "Map Legend: NDVI composite (max over last {months} months)"


def format_legend_value(value: float) -> str:
    """Format a legend number without trailing zeros (``1.0`` -> ``"1"``)."""
    return f"{value:g}"


def legend_labels(vis: VisParams) -> tuple[str, str, str]:
    """Return the (min, mid, max) legend label texts for ``vis``."""
    return format_legend_value(vis.min), format_legend_value(vis.midpoint), format_legend_value(vis.max)


def legend_title(lookback_months: int = 6) -> str:
    """Return the legend title for a composite over ``lookback_months``."""
    return LEGEND_TITLE.format(months=lookback_months)
