"""Locate small character sprites in raster images."""

__version__ = "0.1.0"
