"""Vegetation (NDVI) and moisture (NDMI) index computation with SCL masking."""

import numpy as np

INDEX_NO_DATA_VALUE = -2.0

# SCL classes excluded from index computation: no data, saturated/defective,
# cloud shadow, water, medium/high cloud probability, thin cirrus, snow/ice.
SCL_EXCLUDE_VALUES = (0.0, 1.0, 3.0, 6.0, 8.0, 9.0, 10.0, 11.0)

_FLT_EPSILON = np.finfo(np.float32).eps


class IndexError_(ValueError):
    """Raised when the bands handed to an index calculation are invalid."""


def _round_half_away(values: np.ndarray) -> np.ndarray:
    wide = np.asarray(values, dtype=np.float64)
    return np.sign(wide) * np.floor(np.abs(wide) + 0.5)


def is_scl_pixel_masked(scl_value: float) -> bool:
    """Tell whether an SCL class value marks a pixel to exclude."""
    rounded = float(_round_half_away(np.float32(scl_value)))
    return rounded in SCL_EXCLUDE_VALUES


def scl_mask(scl_band) -> np.ndarray:
    """Return a boolean array, True where the SCL band marks an excluded pixel."""
    rounded = _round_half_away(np.asarray(scl_band, dtype=np.float32))
    return np.isin(rounded, SCL_EXCLUDE_VALUES)


def _validated_bands(name: str, *bands) -> list[np.ndarray]:
    if any(band is None for band in bands):
        raise IndexError_(f"Invalid input parameters for {name}: missing band")
    arrays = [np.asarray(band, dtype=np.float32) for band in bands]
    shape = arrays[0].shape
    if len(shape) != 2 or shape[0] <= 0 or shape[1] <= 0:
        raise IndexError_(f"Invalid input parameters for {name}: bad shape {shape}")
    if any(array.shape != shape for array in arrays):
        raise IndexError_(f"Invalid input parameters for {name}: band shapes differ")
    return arrays


def _normalized_difference(name: str, first, second, scl_band) -> np.ndarray:
    a, b, scl = _validated_bands(name, first, second, scl_band)
    denominator = a + b
    no_data = scl_mask(scl) | (np.abs(denominator) < _FLT_EPSILON)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = (a - b) / np.where(no_data, np.float32(1.0), denominator)
    ratio = np.clip(ratio, np.float32(-1.0), np.float32(1.0))
    return np.where(no_data, np.float32(INDEX_NO_DATA_VALUE), ratio).astype(np.float32)


def calculate_ndvi(nir_band, red_band, scl_band) -> np.ndarray:
    """NDVI = (NIR - RED) / (NIR + RED), no-data where masked or undefined."""
    return _normalized_difference("calculate_ndvi", nir_band, red_band, scl_band)


def calculate_ndmi(nir_band, swir1_band, scl_band) -> np.ndarray:
    """NDMI = (NIR - SWIR1) / (NIR + SWIR1), no-data where masked or undefined."""
    return _normalized_difference("calculate_ndmi", nir_band, swir1_band, scl_band)