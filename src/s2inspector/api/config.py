"""Configuration for the Earth Engine backed inspector."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Try to load .env file from project root
_project_root = Path(__file__).parent.parent.parent.parent
_env_file = _project_root / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


class InspectorConfig:
    """Configuration for the Sentinel-2 collections and the Earth Engine session."""

    # Earth Engine catalog
    DEFAULT_COLLECTION_ID = "COPERNICUS/S2_SR_HARMONIZED"
    DEFAULT_SERIES_START = "2018-01-01"
    DEFAULT_LOOKBACK_MONTHS = 6
    DEFAULT_SERIES_SCALE = 10

    def __init__(
        self,
        project: Optional[str] = None,
        collection_id: Optional[str] = None,
        series_start: Optional[str] = None,
        lookback_months: Optional[int] = None,
        series_scale: Optional[int] = None,
    ):
        """Initialize configuration.

        Args:
            project: Google Cloud project registered for Earth Engine. If not provided, will try
                EE_PROJECT and then GOOGLE_CLOUD_PROJECT
            collection_id: Sentinel-2 collection asset id (env S2_COLLECTION_ID)
            series_start: First date of the time series collection (env S2_SERIES_START)
            lookback_months: Length of the composite window in months (env S2_LOOKBACK_MONTHS)
            series_scale: Sampling scale in meters for point time series (env S2_SERIES_SCALE)
        """
        self.project = project or os.getenv("EE_PROJECT") or os.getenv("GOOGLE_CLOUD_PROJECT")
        self.collection_id = collection_id or os.getenv("S2_COLLECTION_ID", self.DEFAULT_COLLECTION_ID)
        self.series_start = series_start or os.getenv("S2_SERIES_START", self.DEFAULT_SERIES_START)
        self.lookback_months = lookback_months if lookback_months is not None else int(os.getenv("S2_LOOKBACK_MONTHS", self.DEFAULT_LOOKBACK_MONTHS))
        self.series_scale = series_scale if series_scale is not None else int(os.getenv("S2_SERIES_SCALE", self.DEFAULT_SERIES_SCALE))

    def validate(self) -> bool:
        """Check if an Earth Engine project is configured."""
        return bool(self.project)

    def get_project(self) -> str:
        """Get the Earth Engine project or raise error if not configured.

        Raises:
            ValueError: If no project is configured
        """
        if not self.validate():
            raise ValueError("Earth Engine project not configured. Set the EE_PROJECT (or GOOGLE_CLOUD_PROJECT) environment variable or provide it when initializing InspectorConfig.")
        return self.project
