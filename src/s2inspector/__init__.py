"""Sentinel-2 NDVI time series inspector built on Earth Engine and NiceGUI."""

__version__ = "0.1.0"
