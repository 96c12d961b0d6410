# tests/test_palette_tools.py
import numpy as np
from palred import palette_tools
from palred.color import make_color

RED = make_color(255, 0, 0)
GREEN = make_color(0, 255, 0)
BLUE = make_color(0, 0, 255)


def test_extract_palette_keeps_first_seen_order():
    image = [GREEN, RED, GREEN, BLUE, RED, BLUE]
    assert palette_tools.extract_palette(image) == [GREEN, RED, BLUE]


def test_extract_palette_has_no_duplicates():
    rng = np.random.default_rng(7)
    image = rng.choice(np.array([RED, GREEN, BLUE], dtype=np.uint32), size=500)

    palette = palette_tools.extract_palette(image)

    assert len(palette) == len(set(palette))
    assert set(palette) == set(image.tolist())


def test_extract_palette_treats_alpha_as_distinct():
    translucent_red = make_color(255, 0, 0, 128)
    assert palette_tools.extract_palette([RED, translucent_red, RED]) == [RED, translucent_red]


def test_extract_palette_does_not_modify_image():
    image = [RED, RED, BLUE]
    palette_tools.extract_palette(image)
    assert image == [RED, RED, BLUE]


def test_extract_palette_of_empty_image_is_empty():
    assert palette_tools.extract_palette([]) == []
