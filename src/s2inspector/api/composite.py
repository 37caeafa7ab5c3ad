"""Max-NDVI composite rendering and Earth Engine tile/thumbnail URLs."""

from dataclasses import dataclass, field

import ee
from loguru import logger

from .collections import NDVI_BAND


@dataclass(frozen=True)
class VisParams:
    """How scalar band values map to colors."""

    min: float
    max: float
    palette: tuple[str, ...] = field(default_factory=tuple)

    def to_ee(self) -> dict:
        """Return the parameters in the form ``ee.Image.visualize`` accepts."""
        return {"min": self.min, "max": self.max, "palette": list(self.palette)}

    @property
    def midpoint(self) -> float:
        """Middle legend label value (``max / 2``)."""
        return self.max / 2


NDVI_VIS = VisParams(min=0.2, max=1.0, palette=("white", "green", "black"))

# Horizontal color bar rendered from the longitude of a 1 x 0.1 degree box
COLOR_BAR_REGION = [0, 0, 1, 0.1]
COLOR_BAR_DIMENSIONS = "100x10"


def build_max_ndvi_composite(collection: ee.ImageCollection, vis: VisParams = NDVI_VIS) -> ee.Image:
    """Reduce the NDVI band of ``collection`` to its per-pixel maximum and visualize it."""
    return collection.select(NDVI_BAND).max().visualize(**vis.to_ee())


def get_tile_url(image: ee.Image) -> str:
    """Register ``image`` with Earth Engine and return its XYZ tile URL template."""
    map_id = image.getMapId()
    url = map_id["tile_fetcher"].url_format
    logger.info(f"Registered Earth Engine tile layer: {url}")
    return url


def color_bar_params(palette) -> dict:
    """Thumbnail parameters for a horizontal color bar of ``palette``."""
    return {
        "region": ee.Geometry.Rectangle(COLOR_BAR_REGION),
        "dimensions": COLOR_BAR_DIMENSIONS,
        "format": "png",
        "min": 0,
        "max": 1,
        "palette": list(palette),
    }


def get_color_bar_url(palette) -> str:
    """Return the URL of a color bar thumbnail rendered by Earth Engine."""
    return ee.Image.pixelLonLat().select(0).getThumbURL(color_bar_params(palette))
