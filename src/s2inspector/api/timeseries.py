"""Point time series extraction from a masked NDVI collection."""

from dataclasses import dataclass
from datetime import datetime, timezone

import ee
from loguru import logger

from .collections import NDVI_BAND


@dataclass
class SeriesPoint:
    """One NDVI observation at a point."""

    date: datetime
    ndvi: float


def build_point_series(collection: ee.ImageCollection, point: ee.Geometry, scale: int = 10) -> ee.FeatureCollection:
    """Build a deferred feature collection with one ``(time, ndvi)`` row per image.

    Images whose pixel at ``point`` is masked produce no row.
    """

    def _sample(image):
        value = image.select(NDVI_BAND).reduceRegion(reducer=ee.Reducer.mean(), geometry=point, scale=scale).get(NDVI_BAND)
        return ee.Feature(None, {"time": image.get("system:time_start"), "ndvi": value})

    return ee.FeatureCollection(collection.map(_sample)).filter(ee.Filter.notNull(["ndvi"])).sort("time")


def extract_ndvi_series(collection: ee.ImageCollection, point: ee.Geometry, scale: int = 10) -> list[SeriesPoint]:
    """Fetch the NDVI time series at ``point``.

    Args:
        collection: Masked collection carrying an NDVI band
        point: Point geometry to sample
        scale: Sampling scale in meters

    Returns:
        Observations sorted by acquisition time
    """
    rows = build_point_series(collection, point, scale).reduceColumns(ee.Reducer.toList(2), ["time", "ndvi"]).get("list").getInfo()
    series = [SeriesPoint(date=datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc), ndvi=ndvi) for time_ms, ndvi in rows]
    logger.info(f"Extracted {len(series)} NDVI observations")
    return series
