from PIL import Image, ImageDraw, ImageFont
import os

from palred.color import color_to_rgba


def create_legend_image(palette, font_path=None, font_size=14, swatch_size=40, padding=10):
    """
    Creates a palette legend PIL Image object.

    Args:
        palette (list[int]): Packed RGBA colors, most frequent first.
        font_path (str, optional): Path to a TTF font file.
        font_size (int): Font size for the index numbers.
        swatch_size (int): Width/height of each color swatch.
        padding (int): Space around elements and between swatches.

    Returns:
        PIL.Image.Image: The generated RGBA legend image, or None if the palette is empty.
    """
    num_colors = len(palette)
    if num_colors == 0:
        return None

    width = (swatch_size * num_colors) + (padding * (num_colors + 1))
    height = swatch_size + (2 * padding)

    image = Image.new("RGBA", (width, height), color=(255, 255, 255, 255))
    draw = ImageDraw.Draw(image)

    loaded_font = None
    try:
        if font_path and os.path.isfile(font_path):
            loaded_font = ImageFont.truetype(font_path, font_size)
    except IOError:
        pass # Will fall through to default if custom font fails

    if not loaded_font:
        try:
            loaded_font = ImageFont.load_default(size=font_size)
        except TypeError: # Older Pillow versions might not support size for load_default
            loaded_font = ImageFont.load_default()

    for idx, color in enumerate(palette):
        x_start_swatch = padding + idx * (swatch_size + padding)
        y_start_swatch = padding

        draw.rectangle(
            [x_start_swatch, y_start_swatch, x_start_swatch + swatch_size, y_start_swatch + swatch_size],
            fill=color_to_rgba(int(color)),
            outline=(0, 0, 0, 255)
        )

        text_content = str(idx)
        bbox = draw.textbbox((0, 0), text_content, font=loaded_font)
        text_w = bbox[2] - bbox[0]
        text_h = bbox[3] - bbox[1]

        # Center text within the swatch, offset by the glyph's bbox origin
        text_x_position = x_start_swatch + (swatch_size - text_w) / 2.0 - bbox[0]
        text_y_position = y_start_swatch + (swatch_size - text_h) / 2.0 - bbox[1]

        draw.text((text_x_position, text_y_position), text_content, fill=(0, 0, 0, 255), font=loaded_font)

    return image
