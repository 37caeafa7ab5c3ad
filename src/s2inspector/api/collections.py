"""Sentinel-2 collection building: date filtering, SCL masking and NDVI derivation.

Nothing here touches pixel data. Every function returns a deferred Earth Engine
object that is evaluated remotely when a map tile, thumbnail or chart asks for it.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import ee
from loguru import logger

from .config import InspectorConfig

# SCL classes kept by the mask: 4 (Vegetation) and 5 (Not-vegetated / bare soil).
# The original mask comment also named 6 (Water) and 7 (Unclassified / low
# probability clouds) but only 4 and 5 were ever applied.
SCL_KEEP_CLASSES = (4, 5)

NIR_BAND = "B8"
RED_BAND = "B4"
NDVI_BAND = "NDVI"

SIX_DECIMALS = Decimal("0.000001")


def _fixed6(value: float) -> str:
    return f"{Decimal(value).quantize(SIX_DECIMALS, rounding=ROUND_HALF_UP):f}"


@dataclass
class Coordinate:
    """A clicked map location."""

    lon: float
    lat: float

    def to_point(self) -> ee.Geometry:
        """Build the Earth Engine point geometry for this location."""
        return ee.Geometry.Point([self.lon, self.lat])

    def labels(self) -> tuple[str, str]:
        """Return the (lon, lat) readout texts with 6 decimals.

        Ties on the exact binary value round away from zero, so 13.0078125
        reads ``13.007813`` rather than Python's half-to-even ``13.007812``.
        """
        return f"lon: {_fixed6(self.lon)}", f"lat: {_fixed6(self.lat)}"

    def to_latlng(self) -> tuple[float, float]:
        """Return (lat, lon) as expected by Leaflet."""
        return self.lat, self.lon


def mask_s2_clouds(image: ee.Image) -> ee.Image:
    """Mask a Sentinel-2 L2A scene with its SCL band and add an NDVI band.

    A pixel stays valid only if its SCL value is one of ``SCL_KEEP_CLASSES``.
    NDVI is ``(B8 - B4) / (B8 + B4)``.
    """
    scl = image.select("SCL")
    mask = scl.eq(SCL_KEEP_CLASSES[0])
    for scl_class in SCL_KEEP_CLASSES[1:]:
        mask = mask.Or(scl.eq(scl_class))
    ndvi = image.normalizedDifference([NIR_BAND, RED_BAND]).rename(NDVI_BAND)
    return image.addBands(ndvi).updateMask(mask)


class CollectionBuilder:
    """Build the masked Sentinel-2 collections used by the inspector."""

    def __init__(self, config: Optional[InspectorConfig] = None):
        """Initialize collection builder.

        Args:
            config: InspectorConfig instance. If not provided, will create one from env vars.
        """
        self.config = config or InspectorConfig()

    def build(self, start, end) -> ee.ImageCollection:
        """Filter the Sentinel-2 collection to [start, end) and apply the SCL mask.

        Args:
            start: Start date (``ee.Date``, ``datetime`` or ISO string)
            end: End date, exclusive

        Returns:
            Deferred masked collection with an NDVI band
        """
        return ee.ImageCollection(self.config.collection_id).filterDate(start, end).map(mask_s2_clouds)

    def composite_source(self, now: Optional[datetime] = None) -> ee.ImageCollection:
        """Collection covering the lookback window ending at ``now``."""
        end = ee.Date(now or datetime.now(timezone.utc))
        start = end.advance(-self.config.lookback_months, "month")
        logger.info(f"Building composite collection: last {self.config.lookback_months} months of {self.config.collection_id}")
        return self.build(start, end)

    def time_series_source(self, now: Optional[datetime] = None) -> ee.ImageCollection:
        """Collection covering the whole time series, from the configured start to ``now``."""
        end = ee.Date(now or datetime.now(timezone.utc))
        logger.info(f"Building time series collection: {self.config.series_start} to now")
        return self.build(self.config.series_start, end)
