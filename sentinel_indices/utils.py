"""Small helpers shared by the raster processing modules."""

NO_FILE_SELECTED = "(nie wybrano)"


def get_short_filename(filepath: str | None) -> str:
    """Return the part of ``filepath`` after its last '/' or '\\' separator."""
    if filepath is None:
        return NO_FILE_SELECTED
    cut = max(filepath.rfind("/"), filepath.rfind("\\"))
    return filepath[cut + 1:]


def pixel_index(x: int, y: int, width: int) -> int:
    """Return the row-major offset of pixel (x, y) in an image ``width`` wide."""
    return y * width + x