"""NDVI and NDMI index maps from Sentinel-2 band rasters, with a desktop viewer."""

__version__ = "0.1.0"

__all__ = [
    "data_loader",
    "gui",
    "index_calculator",
    "pipeline",
    "resampler",
    "utils",
    "visualization",
]