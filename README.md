# sentinel-indices

Compute vegetation (NDVI) and moisture (NDMI) index maps from Sentinel-2
band rasters and look at them in a small desktop window.

The package takes four single-band rasters:

| Band | Role                         | Native resolution |
|------|------------------------------|-------------------|
| B04  | red                          | 10 m              |
| B08  | near infrared (NIR)          | 10 m              |
| B11  | short-wave infrared (SWIR 1) | 20 m              |
| SCL  | scene classification layer   | 20 m              |

The bands are brought to a common grid in one of two ways:

- **10 m** (`Resolution.R10M`, the default): B11 is upsampled bilinearly and
  SCL by nearest neighbour to the grid of B04.
- **20 m** (`Resolution.R20M`): B04 and B08 are averaged down to the grid of
  B11.

Then

    NDVI = (B08 - B04) / (B08 + B04)
    NDMI = (B08 - B11) / (B08 + B11)

are computed per pixel and clamped to [-1, 1]. Pixels whose SCL class
(rounded to the nearest integer) is 0 no data, 1 saturated/defective,
3 cloud shadow, 6 water, 8 or 9 medium/high-probability cloud, 10 thin
cirrus or 11 snow/ice are masked, as are pixels whose denominator is zero
(below float32 epsilon in magnitude). Masked pixels hold the no-data value
`INDEX_NO_DATA_VALUE = -2.0`.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## The desktop application

    sentinel-indices

The window is built with tkinter, so a Python with Tk support is needed.

The configuration window ("Konfiguracja Analizy") has a button for each of
B04, B08, B11 and SCL that opens a file dialog filtered to `*.jp2` files;
after a choice the button shows the file name. Two radio buttons choose
between "upscaling do 10m" and "downscaling do 20m". The "Rozpocznij"
button runs the analysis. If a band has no file yet, or loading or
processing fails, an error dialog is shown (processing details go to
standard error).

The result opens in its own scrollable window, where radio buttons switch
between NDVI and NDMI (NDVI is shown first). Negative index values are drawn
from red (-1) to yellow (0), positive ones from yellow (0) to green (1);
masked, NaN and infinite values are black. While the map window is open the
configuration window is hidden; closing the map window brings it back.

## Using the library

```python
from sentinel_indices.pipeline import BandPaths, MapType, Resolution, process_files
from sentinel_indices.visualization import index_to_image

paths = BandPaths(
    b04="T33UXP_B04_10m.jp2",
    b08="T33UXP_B08_10m.jp2",
    b11="T33UXP_B11_20m.jp2",
    scl="T33UXP_SCL_20m.jp2",
)
maps = process_files(paths, Resolution.R10M)
print(maps.width, maps.height)
index_to_image(maps.for_type(MapType.NDVI)).save("ndvi.png")
```

`process_files` raises `ProcessingError` when a path is missing
(`BandPaths.missing()` lists the bands without a file), when a file cannot
be loaded, or when resampling or index calculation fails.

The building blocks are available on their own:

- `sentinel_indices.pipeline.compute_indices(b04, b08, b11, scl, resolution)`
  runs resampling and index calculation on arrays already in memory and
  returns an `IndexMaps` with `ndvi` and `ndmi` arrays, `width`, `height`
  and `for_type(map_type)`.
- `sentinel_indices.data_loader.load_band(path)` reads a raster with Pillow
  as a 2-D float32 array (the first channel of a multi-channel image) and
  raises `BandLoadError` on failure.
- `sentinel_indices.resampler` offers `nearest_neighbor_resample`,
  `bilinear_resample` and `average_resample`, each taking a 2-D array and
  the output width and height and returning a float32 array; invalid
  arguments raise `ResampleError`. `average_resample` emits a
  `RuntimeWarning` when asked to upsample.
- `sentinel_indices.index_calculator` offers `calculate_ndvi`,
  `calculate_ndmi` (raising `IndexError_` for missing, empty or mismatched
  bands) and the SCL masking helpers `scl_mask` and `is_scl_pixel_masked`.
- `sentinel_indices.visualization` turns index values into colours:
  `map_index_value_to_rgb` for one value, `index_to_rgb` for a
  `(height, width, 3)` uint8 array and `index_to_image` for a Pillow image.
- `sentinel_indices.gui.MapWindow(maps).show(map_type)` renders a map to a
  Pillow image without opening a window; `band_button_label` gives the text
  a band's button carries.

## What it does not do

Band files are read through Pillow only. Reading `.jp2` files needs a
Pillow built with JPEG 2000 support, and formats Pillow cannot open are not
supported. Only pixel values are read: georeferencing, projections, nodata
metadata and scaling offsets in the files are ignored, and the computed
maps cannot be saved from the desktop window (use `index_to_image(...).save`
from the library instead).