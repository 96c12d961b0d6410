# tests/test_color.py
import numpy as np
import pytest
from palred import color
from palred.errors import MalformedBufferError


def test_channels_round_trip_through_make_color():
    packed = color.make_color(10, 20, 30, 40)
    assert packed == 0x0A141E28
    assert color.red(packed) == 10
    assert color.green(packed) == 20
    assert color.blue(packed) == 30
    assert color.alpha(packed) == 40
    assert color.color_to_rgba(packed) == (10, 20, 30, 40)


def test_make_color_defaults_to_opaque():
    assert color.alpha(color.make_color(1, 2, 3)) == 255


def test_channel_extraction_is_total_over_32_bits():
    assert color.color_to_rgba(0xFFFFFFFF) == (255, 255, 255, 255)
    assert color.color_to_rgba(0) == (0, 0, 0, 0)


def test_pixels_from_rgba_bytes_packs_each_pixel():
    data = bytes([255, 0, 0, 255, 0, 255, 0, 128])
    pixels = color.pixels_from_rgba_bytes(data)

    assert pixels.dtype == np.uint32
    assert pixels.tolist() == [color.make_color(255, 0, 0, 255), color.make_color(0, 255, 0, 128)]


def test_pixels_from_rgba_bytes_rejects_partial_pixels():
    with pytest.raises(MalformedBufferError):
        color.pixels_from_rgba_bytes(bytes(7))


def test_pixels_from_array_rejects_wrong_channel_count():
    with pytest.raises(MalformedBufferError):
        color.pixels_from_array(np.zeros((2, 2, 3), dtype=np.uint8))


def test_pixels_to_array_restores_image_layout():
    rgba = np.arange(2 * 3 * 4, dtype=np.uint8).reshape((2, 3, 4))
    pixels = color.pixels_from_array(rgba)

    assert pixels.shape == (6,)
    assert np.array_equal(color.pixels_to_array(pixels, 3, 2), rgba)


def test_pixels_to_array_checks_dimensions():
    with pytest.raises(MalformedBufferError):
        color.pixels_to_array([0, 0, 0], 2, 2)


def test_pixels_from_array_rejects_non_uint8_data():
    wide = np.array([[300, 0, 0, 255]], dtype=np.int64)
    with pytest.raises(MalformedBufferError):
        color.pixels_from_array(wide)
    with pytest.raises(MalformedBufferError):
        color.pixels_from_array(wide.astype(np.uint16))
