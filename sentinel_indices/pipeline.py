"""Band loading, resampling and index computation for one analysis run."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from .data_loader import BandLoadError, load_band
from .index_calculator import IndexError_, calculate_ndmi, calculate_ndvi
from .resampler import (
    ResampleError,
    average_resample,
    bilinear_resample,
    nearest_neighbor_resample,
)


class ProcessingError(RuntimeError):
    """Raised when the bands cannot be turned into index maps."""


class Resolution(enum.Enum):
    """Target grid for the computation."""

    R10M = "upscaling do 10m"
    R20M = "downscaling do 20m"

    @property
    def label(self) -> str:
        return self.value


class MapType(enum.Enum):
    """Which index map to display."""

    NDVI = "NDVI"
    NDMI = "NDMI"


_BAND_NAMES = ("B04", "B08", "B11", "SCL")


@dataclass
class BandPaths:
    """Paths of the four input band files; None where not chosen yet."""

    b04: str | None = None
    b08: str | None = None
    b11: str | None = None
    scl: str | None = None

    def _by_name(self) -> dict[str, str | None]:
        return dict(zip(_BAND_NAMES, (self.b04, self.b08, self.b11, self.scl)))

    def missing(self) -> list[str]:
        """Names of the bands whose file has not been chosen."""
        return [name for name, path in self._by_name().items() if not path]


@dataclass
class IndexMaps:
    """NDVI and NDMI rasters computed on the same grid."""

    ndvi: np.ndarray
    ndmi: np.ndarray

    @property
    def width(self) -> int:
        return int(self.ndvi.shape[1])

    @property
    def height(self) -> int:
        return int(self.ndvi.shape[0])

    def for_type(self, map_type: MapType | str) -> np.ndarray:
        """Return the raster for the given map type."""
        kind = MapType(map_type)
        return self.ndvi if kind is MapType.NDVI else self.ndmi


def _shape(band: np.ndarray) -> tuple[int, int]:
    return band.shape[1], band.shape[0]


def compute_indices(
    b04, b08, b11, scl, resolution: Resolution = Resolution.R10M
) -> IndexMaps:
    """Bring the bands to the chosen grid and compute NDVI and NDMI.

    At 10 m, B11 is upsampled bilinearly and SCL by nearest neighbour to the
    B04 grid. At 20 m, B04 and B08 are averaged down to the B11 grid.
    """
    red, nir, swir1, scl_band = (
        np.asarray(band, dtype=np.float32) for band in (b04, b08, b11, scl)
    )
    resolution = Resolution(resolution)
    try:
        if resolution is Resolution.R10M:
            width, height = _shape(red)
            if _shape(swir1) != (width, height):
                swir1 = bilinear_resample(swir1, width, height)
            if _shape(scl_band) != (width, height):
                scl_band = nearest_neighbor_resample(scl_band, width, height)
        else:
            width, height = _shape(swir1)
            if _shape(red) != (width, height):
                red = average_resample(red, width, height)
            if _shape(nir) != (width, height):
                nir = average_resample(nir, width, height)
    except (ResampleError, IndexError) as exc:
        raise ProcessingError(f"Błąd resamplingu: {exc}") from exc

    try:
        ndvi = calculate_ndvi(nir, red, scl_band)
    except IndexError_ as exc:
        raise ProcessingError(f"Błąd podczas obliczania NDVI: {exc}") from exc
    try:
        ndmi = calculate_ndmi(nir, swir1, scl_band)
    except IndexError_ as exc:
        raise ProcessingError(f"Błąd podczas obliczania NDMI: {exc}") from exc
    return IndexMaps(ndvi=ndvi, ndmi=ndmi)


def process_files(
    paths: BandPaths, resolution: Resolution = Resolution.R10M
) -> IndexMaps:
    """Load the four band files and compute the index maps."""
    missing = paths.missing()
    if missing:
        raise ProcessingError(
            "Nie wszystkie pasma zostały wybrane: " + ", ".join(missing)
        )
    bands = []
    for name, path in paths._by_name().items():
        try:
            bands.append(load_band(path))
        except BandLoadError as exc:
            raise ProcessingError(f"Błąd wczytywania {name}: {exc}") from exc
    return compute_indices(*bands, resolution)