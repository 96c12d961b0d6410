from typing import Mapping

from palred.color import Color, PixelBuffer
from palred.errors import InvalidColorCountError
from palred.palette_tools import Palette
from palred.quantize import replace_colors_by_closest


def select_reduced_palette(histogram: Mapping[Color, int], max_colors: int) -> Palette:
    """
    Pick the `max_colors` most frequent colors of a histogram.

    Equal counts keep the histogram's insertion order, i.e. the color the
    quantizer produced first ranks first.
    """
    if max_colors < 0:
        raise InvalidColorCountError(f"max_colors must be >= 0, got {max_colors}")

    color_frequency = sorted(histogram.items(), key=lambda item: item[1], reverse=True)
    return [color for color, _count in color_frequency[:max_colors]]


def reduce_colors(image: PixelBuffer, histogram: Mapping[Color, int], max_colors: int) -> Palette:
    """
    Re-quantize `image` in place against its `max_colors` most frequent colors.

    Args:
        image (PixelBuffer): Pixels already quantized by the histogram pass.
        histogram (Mapping[int, int]): Counts from that pass. Not modified.
        max_colors (int): Upper bound on the reduced palette size.

    Returns:
        list[int]: The reduced palette, most frequent color first.
    """
    reduced_palette = select_reduced_palette(histogram, max_colors)
    replace_colors_by_closest(image, reduced_palette)
    return reduced_palette
