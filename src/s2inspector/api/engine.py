"""Earth Engine session setup."""

from typing import Optional

import ee
from loguru import logger

from .config import InspectorConfig


def initialize_earth_engine(config: Optional[InspectorConfig] = None) -> InspectorConfig:
    """Initialize the Earth Engine client for the configured project.

    Falls back to an interactive ``ee.Authenticate()`` once when no stored
    credentials are available.

    Args:
        config: InspectorConfig instance. If not provided, will create one from env vars.

    Returns:
        The configuration that was used

    Raises:
        ValueError: If no Earth Engine project is configured
        ee.EEException: If initialization still fails after authenticating
    """
    config = config or InspectorConfig()
    project = config.get_project()

    try:
        ee.Initialize(project=project)
    except ee.EEException as e:
        logger.warning(f"Earth Engine initialization failed ({e}), authenticating")
        ee.Authenticate()
        ee.Initialize(project=project)

    logger.info(f"Earth Engine initialized for project {project}")
    return config
