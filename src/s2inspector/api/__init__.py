"""Earth Engine access for the inspector."""

from .collections import CollectionBuilder, Coordinate, mask_s2_clouds
from .composite import NDVI_VIS, VisParams, build_max_ndvi_composite, get_color_bar_url, get_tile_url
from .config import InspectorConfig
from .engine import initialize_earth_engine
from .timeseries import SeriesPoint, extract_ndvi_series

__all__ = [
    "CollectionBuilder",
    "Coordinate",
    "InspectorConfig",
    "NDVI_VIS",
    "SeriesPoint",
    "VisParams",
    "build_max_ndvi_composite",
    "extract_ndvi_series",
    "get_color_bar_url",
    "get_tile_url",
    "initialize_earth_engine",
    "mask_s2_clouds",
]
