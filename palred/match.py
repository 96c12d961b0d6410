from typing import Sequence

from palred.color import Color, red, green, blue, alpha


def color_square_distance(c1: Color, c2: Color) -> int:
    red_difference = red(c1) - red(c2)
    green_difference = green(c1) - green(c2)
    blue_difference = blue(c1) - blue(c2)
    # Product of the alphas, not their difference
    alpha_product = alpha(c1) * alpha(c2)
    return (red_difference * red_difference
            + green_difference * green_difference
            + blue_difference * blue_difference
            + alpha_product * alpha_product)


def find_closest_color(color: Color, palette: Sequence[Color]) -> Color:
    """
    Linear search for the palette entry nearest to `color`.

    The first entry reaching the minimum distance wins. An empty palette
    gives back `color` itself.
    """
    closest_color = color
    distance = None
    for palette_color in palette:
        d = color_square_distance(color, palette_color)
        if distance is None or d < distance:
            distance = d
            closest_color = palette_color
    return closest_color
