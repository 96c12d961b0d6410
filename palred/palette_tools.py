from typing import List

from palred.color import Color, PixelBuffer, as_color_list

Palette = List[Color]


def extract_palette(image: PixelBuffer) -> Palette:
    """
    Collect the distinct colors of an image, e.g. a palette swatch sheet.

    Args:
        image (PixelBuffer): Packed RGBA pixels in row-major order.

    Returns:
        list[int]: Each distinct color once, in the order first encountered.
    """
    seen = set()
    palette: Palette = []
    for color in as_color_list(image):
        if color not in seen:
            seen.add(color)
            palette.append(color)
    return palette
