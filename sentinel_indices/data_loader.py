"""Reading a single raster band from an image file."""

from __future__ import annotations

import os

import numpy as np
from PIL import Image, UnidentifiedImageError


class BandLoadError(OSError):
    """Raised when a band file cannot be opened or read."""


def load_band(path: str | os.PathLike) -> np.ndarray:
    """Read the first band of the raster at ``path`` as a 2-D float32 array."""
    try:
        with Image.open(path) as image:
            if len(image.getbands()) > 1:
                image = image.getchannel(0)
            data = np.asarray(image).astype(np.float32)
    except FileNotFoundError as exc:
        raise BandLoadError(f"Nie można otworzyć pliku {path}: {exc}") from exc
    except UnidentifiedImageError as exc:
        raise BandLoadError(f"Nie można otworzyć pliku {path}: {exc}") from exc
    except (OSError, ValueError) as exc:
        raise BandLoadError(
            f"Błąd podczas wczytywania danych rastrowych z {path}: {exc}"
        ) from exc

    if data.ndim != 2 or data.shape[0] <= 0 or data.shape[1] <= 0:
        height, width = (data.shape + (0, 0))[:2]
        raise BandLoadError(
            f"Nieprawidłowe wymiary rastra w pliku {path} ({width}x{height})."
        )
    return data