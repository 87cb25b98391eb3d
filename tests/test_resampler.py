import numpy as np
import pytest

from sentinel_indices.resampler import (
    ResampleError,
    average_resample,
    bilinear_resample,
    clamp,
    nearest_neighbor_resample,
)


def create_test_matrix(width, height):
    values = (np.arange(width * height) % 90 + 10).astype(np.float32)
    return values.reshape(height, width)


STANDARD_CASES = [
    (2, 2, 4, 4),
    (4, 4, 2, 2),
    (3, 3, 6, 6),
    (4, 4, 8, 8),
    (10, 1, 20, 2),
    (1, 10, 2, 20),
    (10, 10, 5, 5),
    (10, 10, 7, 7),
]

AVERAGE_CASES = [
    (4, 4, 2, 2),
    (10, 10, 5, 5),
    (10, 10, 7, 7),
    (8, 8, 3, 3),
    (6, 6, 2, 2),
]


@pytest.mark.parametrize("in_w,in_h,out_w,out_h", STANDARD_CASES)
def test_nearest_standard_cases_shape_and_range(in_w, in_h, out_w, out_h):
    source = create_test_matrix(in_w, in_h)
    result = nearest_neighbor_resample(source, out_w, out_h)
    assert result.shape == (out_h, out_w)
    assert result.dtype == np.float32
    assert result.min() >= source.min()
    assert result.max() <= source.max()


@pytest.mark.parametrize("in_w,in_h,out_w,out_h", STANDARD_CASES)
def test_bilinear_standard_cases_shape_and_range(in_w, in_h, out_w, out_h):
    source = create_test_matrix(in_w, in_h)
    result = bilinear_resample(source, out_w, out_h)
    assert result.shape == (out_h, out_w)
    assert result.dtype == np.float32
    assert result.min() >= source.min()
    assert result.max() <= source.max()


@pytest.mark.parametrize("in_w,in_h,out_w,out_h", AVERAGE_CASES)
def test_average_cases_shape_and_range(in_w, in_h, out_w, out_h):
    source = create_test_matrix(in_w, in_h)
    result = average_resample(source, out_w, out_h)
    assert result.shape == (out_h, out_w)
    assert result.min() >= source.min()
    assert result.max() <= source.max()


@pytest.mark.parametrize("in_w,in_h,out_w,out_h", STANDARD_CASES)
def test_nearest_output_values_come_from_input(in_w, in_h, out_w, out_h):
    source = create_test_matrix(in_w, in_h)
    result = nearest_neighbor_resample(source, out_w, out_h)
    assert set(np.unique(result)) <= set(np.unique(source))


def test_nearest_2x2_to_4x4():
    result = nearest_neighbor_resample(create_test_matrix(2, 2), 4, 4)
    expected = np.array(
        [
            [10, 11, 11, 11],
            [12, 13, 13, 13],
            [12, 13, 13, 13],
            [12, 13, 13, 13],
        ],
        dtype=np.float32,
    )
    np.testing.assert_array_equal(result, expected)


def test_nearest_4x4_to_2x2():
    result = nearest_neighbor_resample(create_test_matrix(4, 4), 2, 2)
    np.testing.assert_array_equal(result, np.array([[10, 12], [18, 20]], dtype=np.float32))


def test_nearest_10x1_to_20x2():
    result = nearest_neighbor_resample(create_test_matrix(10, 1), 20, 2)
    row = [10, 11, 11, 12, 12, 13, 13, 14, 14, 15, 15, 16, 16, 17, 17, 18, 18, 19, 19, 19]
    np.testing.assert_array_equal(result, np.array([row, row], dtype=np.float32))


def test_nearest_1x10_to_2x20_is_transpose_of_flat_case():
    narrow = nearest_neighbor_resample(create_test_matrix(1, 10), 2, 20)
    flat = nearest_neighbor_resample(create_test_matrix(10, 1), 20, 2)
    np.testing.assert_array_equal(narrow, flat.T)


def test_bilinear_2x2_to_4x4():
    result = bilinear_resample(create_test_matrix(2, 2), 4, 4)
    steps = np.array([0.0, 0.25, 0.75, 1.0])
    expected = 10 + steps[np.newaxis, :] + 2 * steps[:, np.newaxis]
    np.testing.assert_allclose(result, expected, rtol=0, atol=1e-5)


@pytest.mark.parametrize("size", [4, 10])
def test_bilinear_halving_equals_block_average(size):
    source = create_test_matrix(size, size)
    half = size // 2
    np.testing.assert_allclose(
        bilinear_resample(source, half, half),
        average_resample(source, half, half),
        atol=1e-5,
    )


def test_average_4x4_to_2x2():
    result = average_resample(create_test_matrix(4, 4), 2, 2)
    np.testing.assert_allclose(result, [[12.5, 14.5], [20.5, 22.5]])


def test_average_6x6_to_2x2():
    result = average_resample(create_test_matrix(6, 6), 2, 2)
    np.testing.assert_allclose(result, [[17.0, 20.0], [35.0, 38.0]])


def test_average_10x10_to_5x5_handles_wrapped_values():
    result = average_resample(create_test_matrix(10, 10), 5, 5)
    assert result[0, 0] == pytest.approx(15.5)
    assert result[4, 0] == pytest.approx(50.5)


def test_average_10x10_to_7x7_uneven_blocks():
    result = average_resample(create_test_matrix(10, 10), 7, 7)
    assert result[0, 0] == pytest.approx(10.0)
    assert result[0, 1] == pytest.approx(11.5)


def test_average_8x8_to_3x3_first_block():
    result = average_resample(create_test_matrix(8, 8), 3, 3)
    assert result[0, 0] == pytest.approx(19.0)


def test_average_upsampling_warns():
    with pytest.warns(RuntimeWarning):
        result = average_resample(create_test_matrix(2, 2), 4, 4)
    assert result.shape == (4, 4)


@pytest.mark.parametrize("out_w,out_h", [(3, 2), (7, 5)])
def test_constant_band_is_preserved(out_w, out_h):
    source = np.full((5, 7), 42.0, dtype=np.float32)
    np.testing.assert_allclose(nearest_neighbor_resample(source, out_w, out_h), 42.0)
    np.testing.assert_allclose(bilinear_resample(source, out_w, out_h), 42.0)
    np.testing.assert_allclose(average_resample(source, out_w, out_h), 42.0)


def test_same_size_is_identity():
    source = create_test_matrix(6, 4)
    np.testing.assert_allclose(nearest_neighbor_resample(source, 6, 4), source)
    np.testing.assert_allclose(bilinear_resample(source, 6, 4), source)
    np.testing.assert_allclose(average_resample(source, 6, 4), source)


@pytest.mark.parametrize("out_w,out_h", [(0, 2), (2, 0), (-1, 3)])
def test_invalid_output_size_raises(out_w, out_h):
    source = create_test_matrix(4, 4)
    with pytest.raises(ResampleError):
        nearest_neighbor_resample(source, out_w, out_h)
    with pytest.raises(ResampleError):
        bilinear_resample(source, out_w, out_h)
    with pytest.raises(ResampleError):
        average_resample(source, out_w, out_h)


@pytest.mark.parametrize(
    "band",
    [None, np.zeros((0, 3), dtype=np.float32), np.zeros(5, dtype=np.float32)],
    ids=["none", "empty", "one-dimensional"],
)
def test_invalid_band_raises(band):
    with pytest.raises(ResampleError):
        nearest_neighbor_resample(band, 2, 2)
    with pytest.raises(ResampleError):
        bilinear_resample(band, 2, 2)
    with pytest.raises(ResampleError):
        average_resample(band, 2, 2)


def test_resample_error_is_value_error():
    with pytest.raises(ValueError):
        bilinear_resample(create_test_matrix(2, 2), 0, 0)


@pytest.mark.parametrize(
    "value,low,high,expected",
    [(5, 0, 3, 3), (-1, 0, 3, 0), (2, 0, 3, 2), (0, 0, 3, 0), (3, 0, 3, 3)],
)
def test_clamp(value, low, high, expected):
    assert clamp(value, low, high) == expected