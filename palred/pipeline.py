from dataclasses import dataclass
from typing import Sequence

from palred.color import Color, PixelBuffer
from palred.palette_tools import Palette
from palred.quantize import Histogram, quantize_with_histogram
from palred.reduce import reduce_colors


@dataclass
class ReductionResult:
    histogram: Histogram  # counts after mapping onto the full palette
    reduced_palette: Palette


def convert(image: PixelBuffer, palette: Sequence[Color], max_colors: int) -> ReductionResult:
    """
    Map `image` onto `palette`, then onto its `max_colors` most used colors.

    The image is rewritten in place; the two passes run one after the other.
    """
    histogram = quantize_with_histogram(image, palette)
    reduced_palette = reduce_colors(image, histogram, max_colors)
    return ReductionResult(histogram=histogram, reduced_palette=reduced_palette)
