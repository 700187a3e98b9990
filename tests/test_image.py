import numpy as np
import pytest
from PIL import Image

from filters.errors import MalformedImageError
from filters.image import PackedImage
from utils.imaging import from_pil, parse_sigma, to_pil


def test_pixel_count_must_match():
    with pytest.raises(MalformedImageError):
        PackedImage(3, 3, np.zeros(8, dtype=np.int64))


def test_negative_size():
    with pytest.raises(MalformedImageError):
        PackedImage(-1, 0, np.zeros(0, dtype=np.int64))


def test_grid_view_writes_through():
    img = PackedImage.filled(3, 2, 7)
    img.as_grid()[1, 2] = 9
    assert img.pixels.tolist() == [7, 7, 7, 7, 7, 9]


def test_pil_round_trip_row_major():
    rgb = np.zeros((2, 3, 3), dtype=np.uint8)
    rgb[0, 1] = (0x12, 0x34, 0x56)
    rgb[1, 2] = (255, 0, 1)
    img = from_pil(Image.fromarray(rgb))
    assert (img.width, img.height) == (3, 2)
    assert img.pixels[1] == 0x123456
    assert img.pixels[5] == 0xFF0001
    back = np.array(to_pil(img))
    np.testing.assert_array_equal(back, rgb)


def test_from_pil_drops_alpha():
    rgba = Image.new("RGBA", (2, 2), (1, 2, 3, 4))
    img = from_pil(rgba)
    assert (img.pixels == 0x010203).all()


def test_to_pil_masks_overflowing_channels():
    img = PackedImage(1, 1, np.array([0x1FF0000 | 0x0102]))
    assert to_pil(img).getpixel((0, 0)) == (0xFF, 0x01, 0x02)


@pytest.mark.parametrize("text, value", [("1.0", 1.0), (" 2.5 ", 2.5), (3, 3.0), ("-1", -1.0)])
def test_parse_sigma(text, value):
    assert parse_sigma(text) == value


@pytest.mark.parametrize("text", ["", "abc", None, "1,5"])
def test_parse_sigma_rejects(text):
    with pytest.raises(ValueError):
        parse_sigma(text)
