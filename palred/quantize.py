from typing import Callable, Dict, Optional, Sequence

from palred.color import Color, PixelBuffer, as_color_list
from palred.match import find_closest_color

ColorCache = Dict[Color, Color]
Histogram = Dict[Color, int]
ColorCallback = Callable[[Color], None]


def _ignore(color: Color) -> None:
    pass


def replace_colors_by_closest(
    image: PixelBuffer,
    palette: Sequence[Color],
    on_first_seen: Optional[ColorCallback] = None,
    on_repeat: Optional[ColorCallback] = None,
    cache: Optional[ColorCache] = None,
) -> ColorCache:
    """
    Rewrite every pixel of `image` in place with its closest palette color.

    Lookups are memoized per original color, so the matcher runs once per
    distinct input color rather than once per pixel.

    Args:
        image (PixelBuffer): Packed pixels, mutated in place.
        palette (Sequence[int]): Target colors.
        on_first_seen (callable, optional): Called with the resolved color on a cache miss.
        on_repeat (callable, optional): Called with the resolved color on a cache hit.
        cache (dict, optional): Original -> resolved color map to fill. A fresh one is used if None.

    Returns:
        dict: The cache after the pass.
    """
    on_first_seen = on_first_seen or _ignore
    on_repeat = on_repeat or _ignore
    color_map: ColorCache = {} if cache is None else cache

    for index, color in enumerate(as_color_list(image)):
        closest_color = color_map.get(color)
        if closest_color is None:
            closest_color = find_closest_color(color, palette)
            color_map[color] = closest_color
            image[index] = closest_color
            on_first_seen(closest_color)
        else:
            image[index] = closest_color
            on_repeat(closest_color)

    return color_map


class HistogramRecorder:
    """Counts resolved colors through the quantizer callbacks."""

    def __init__(self):
        self.histogram: Histogram = {}

    def first_seen(self, color: Color) -> None:
        # Several original colors may resolve to one palette color
        self.histogram[color] = self.histogram.get(color, 0) + 1

    def repeat(self, color: Color) -> None:
        self.histogram[color] += 1


def quantize_with_histogram(image: PixelBuffer, palette: Sequence[Color]) -> Histogram:
    recorder = HistogramRecorder()
    replace_colors_by_closest(image, palette, recorder.first_seen, recorder.repeat)
    return recorder.histogram
