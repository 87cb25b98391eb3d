"""Colour mapping of index rasters to RGB images."""

import numpy as np
from PIL import Image

from .index_calculator import INDEX_NO_DATA_VALUE


def _rgb_channels(values: np.ndarray) -> np.ndarray:
    """Map float32 index values to uint8 RGB triples (last axis)."""
    values = np.asarray(values, dtype=np.float32)
    invalid = (values == np.float32(INDEX_NO_DATA_VALUE)) | ~np.isfinite(values)
    negative = values < np.float32(0.0)
    full = np.float32(255.0)

    with np.errstate(invalid="ignore", over="ignore"):
        t_negative = (values - np.float32(-1.0)) / (np.float32(0.0) - np.float32(-1.0))
        t_positive = (values - np.float32(0.0)) / (np.float32(1.0) - np.float32(0.0))
        green_ramp = np.float32(0.0) + t_negative * (full - np.float32(0.0))
        red_ramp = full + t_positive * (np.float32(0.0) - full)

        red = np.where(negative, full, np.trunc(red_ramp))
        green = np.where(negative, np.trunc(green_ramp), full)
        red = np.where(invalid, 0.0, red)
        green = np.where(invalid, 0.0, green)

    red = np.clip(red, 0, 255).astype(np.uint8)
    green = np.clip(green, 0, 255).astype(np.uint8)
    blue = np.zeros_like(red)
    return np.stack([red, green, blue], axis=-1)


def map_index_value_to_rgb(value: float) -> tuple[int, int, int]:
    """Colour for one index value: red at -1, yellow at 0, green at 1, black for no data."""
    red, green, blue = _rgb_channels(np.asarray(value, dtype=np.float32))
    return int(red), int(green), int(blue)


def index_to_rgb(index_data) -> np.ndarray:
    """Convert a 2-D index raster to a (height, width, 3) uint8 array."""
    if index_data is None:
        raise ValueError("Invalid input parameters for creating image buffer")
    data = np.asarray(index_data, dtype=np.float32)
    if data.ndim != 2 or data.shape[0] <= 0 or data.shape[1] <= 0:
        raise ValueError(
            f"Invalid input parameters for creating image buffer: shape {data.shape}"
        )
    return _rgb_channels(data)


def index_to_image(index_data) -> Image.Image:
    """Render a 2-D index raster as an RGB image."""
    return Image.fromarray(index_to_rgb(index_data))