"""Resampling of single raster bands to a new grid size."""

import warnings

import numpy as np


class ResampleError(ValueError):
    """Raised when a band or the requested output size is invalid."""


def clamp(value: int, low: int, high: int) -> int:
    """Limit ``value`` to the closed range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def _prepare(band, output_width: int, output_height: int, name: str) -> np.ndarray:
    if band is None:
        raise ResampleError(f"Invalid input parameters in {name}: no band given")
    data = np.asarray(band, dtype=np.float32)
    if data.ndim != 2:
        raise ResampleError(f"Invalid input parameters in {name}: band must be 2-D")
    height, width = data.shape
    if width <= 0 or height <= 0 or output_width <= 0 or output_height <= 0:
        raise ResampleError(
            f"Invalid input parameters in {name}: "
            f"{width}x{height} -> {output_width}x{output_height}"
        )
    return data


def _ratio(input_size: int, output_size: int) -> np.float32:
    return np.float32(input_size) / np.float32(output_size)


def _roundf(values: np.ndarray) -> np.ndarray:
    """Round half away from zero, returning integers."""
    wide = values.astype(np.float64)
    return (np.sign(wide) * np.floor(np.abs(wide) + 0.5)).astype(np.int64)


def nearest_neighbor_resample(band, output_width: int, output_height: int) -> np.ndarray:
    """Resample with nearest-neighbour lookup; suited to class maps such as SCL."""
    data = _prepare(band, output_width, output_height, "nearest_neighbor_resample")
    in_height, in_width = data.shape
    half = np.float32(0.5)

    def source_indices(out_size: int, in_size: int) -> np.ndarray:
        positions = np.arange(out_size, dtype=np.float32) * _ratio(in_size, out_size) + half
        return np.clip(positions.astype(np.int64), 0, in_size - 1)

    xs = source_indices(output_width, in_width)
    ys = source_indices(output_height, in_height)
    return data[np.ix_(ys, xs)].astype(np.float32)


def bilinear_resample(band, output_width: int, output_height: int) -> np.ndarray:
    """Resample with bilinear interpolation between pixel centres."""
    data = _prepare(band, output_width, output_height, "bilinear_resample")
    in_height, in_width = data.shape
    half = np.float32(0.5)
    one = np.float32(1.0)

    def neighbours(out_size: int, in_size: int):
        projected = (np.arange(out_size, dtype=np.float32) + half) * _ratio(in_size, out_size) - half
        lower = np.floor(projected).astype(np.int64)
        fraction = (projected - lower.astype(np.float32)).astype(np.float32)
        upper = np.clip(lower + 1, 0, in_size - 1)
        lower = np.clip(lower, 0, in_size - 1)
        return lower, upper, fraction

    x1, x2, dx = neighbours(output_width, in_width)
    y1, y2, dy = neighbours(output_height, in_height)
    dx = dx[np.newaxis, :]
    dy = dy[:, np.newaxis]

    p11 = data[np.ix_(y1, x1)]
    p21 = data[np.ix_(y1, x2)]
    p12 = data[np.ix_(y2, x1)]
    p22 = data[np.ix_(y2, x2)]

    result = (
        p11 * (one - dx) * (one - dy)
        + p21 * dx * (one - dy)
        + p12 * (one - dx) * dy
        + p22 * dx * dy
    )
    return result.astype(np.float32)


def average_resample(band, output_width: int, output_height: int) -> np.ndarray:
    """Resample by averaging the block of input pixels under each output pixel.

    Meant for downsampling; upsampling triggers a RuntimeWarning.
    """
    data = _prepare(band, output_width, output_height, "average_resample")
    in_height, in_width = data.shape
    if output_width > in_width or output_height > in_height:
        warnings.warn(
            "average_resample called for upsampling. Results may be incorrect.",
            RuntimeWarning,
            stacklevel=2,
        )

    def block_bounds(out_size: int, in_size: int):
        scale = _ratio(in_size, out_size)
        starts = _roundf(np.arange(out_size, dtype=np.float32) * scale)
        ends = _roundf(np.arange(1, out_size + 1, dtype=np.float32) * scale)
        starts = np.clip(starts, 0, in_size - 1)
        ends = np.clip(ends, starts + 1, in_size)
        return starts, ends

    x0, x1 = block_bounds(output_width, in_width)
    y0, y1 = block_bounds(output_height, in_height)

    integral = np.zeros((in_height + 1, in_width + 1), dtype=np.float64)
    integral[1:, 1:] = data.astype(np.float64).cumsum(axis=0).cumsum(axis=1)

    top, bottom = y0[:, np.newaxis], y1[:, np.newaxis]
    left, right = x0[np.newaxis, :], x1[np.newaxis, :]
    sums = (
        integral[bottom, right]
        - integral[top, right]
        - integral[bottom, left]
        + integral[top, left]
    )
    counts = (bottom - top) * (right - left)
    return (sums / counts).astype(np.float32)