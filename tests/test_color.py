import numpy as np
import pytest

from sprite_spotter.matching import color_distance, is_same


def test_distance_sums_all_four_channels():
    assert color_distance((10, 20, 30, 40), (13, 18, 30, 50)) == 3 + 2 + 0 + 10


def test_distance_does_not_wrap():
    assert color_distance((255, 255, 255, 255), (0, 0, 0, 0)) == 1020
    assert color_distance((0, 0, 0, 0), (255, 255, 255, 255)) == 1020


def test_tolerance_boundary_is_exclusive():
    a = (100, 100, 100, 255)
    assert not is_same(a, (108, 100, 100, 255), 8)
    assert is_same(a, (107, 100, 100, 255), 8)


def test_zero_tolerance_never_matches():
    assert not is_same((1, 2, 3, 4), (1, 2, 3, 4), 0)


def test_negative_tolerance_rejected():
    with pytest.raises(ValueError):
        is_same((0, 0, 0, 0), (0, 0, 0, 0), -1)


def test_is_same_is_symmetric():
    rng = np.random.default_rng(7)
    a = rng.integers(0, 256, size=(500, 4), dtype=np.uint8)
    b = rng.integers(0, 256, size=(500, 4), dtype=np.uint8)
    for tolerance in (0, 6, 8, 16, 300):
        assert np.array_equal(is_same(a, b, tolerance), is_same(b, a, tolerance))


def test_vectorised_comparison_broadcasts_reference_color():
    pixels = np.array([[[0, 0, 0, 255], [4, 0, 0, 255]]], dtype=np.uint8)
    result = is_same(pixels, np.array([0, 0, 0, 255]), 4)
    assert result.shape == (1, 2)
    assert result.tolist() == [[True, False]]


def test_scratch_buffer_receives_channel_differences():
    a = np.array([[[10, 0, 0, 255], [0, 0, 0, 0]]], dtype=np.int32)
    b = np.array([0, 5, 0, 250], dtype=np.int32)
    scratch = np.empty((1, 2, 4), dtype=np.int32)

    distance = color_distance(a, b, out=scratch)

    assert distance.tolist() == [[20, 255]]
    assert scratch.tolist() == [[[10, 5, 0, 5], [0, 5, 0, 250]]]
    assert is_same(a, b, 21, out=scratch).tolist() == [[True, False]]
