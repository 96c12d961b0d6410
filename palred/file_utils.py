import re
from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np
from PIL import Image, PngImagePlugin, UnidentifiedImageError

from palred.color import PixelBuffer, pixels_from_array, pixels_to_array
from palred.errors import DecodeError, EncodeError
from palred.palette_tools import Palette, extract_palette

PNG_METADATA_PREFIX = "colorreducer:"
SOFTWARE_NAME = "colorreducer"


def _decode_error(path, e: Exception) -> DecodeError:
    if isinstance(e, FileNotFoundError):
        return DecodeError(path, "not_found", str(e.strerror or e))
    if isinstance(e, UnidentifiedImageError):
        return DecodeError(path, "unidentified", "not a recognized image format")
    if isinstance(e, Image.DecompressionBombError):
        return DecodeError(path, "too_large", str(e))
    return DecodeError(path, "io", str(e))


def decode_image(path) -> Tuple[np.ndarray, int, int]:
    """
    Reads an image file as packed RGBA pixels.

    Returns:
        Tuple[np.ndarray, int, int]: (pixels, width, height).

    Raises:
        DecodeError: The file is missing, unreadable, too large or not a recognized image.
    """
    try:
        with Image.open(path) as img:
            rgba = img.convert("RGBA")
    except (Image.DecompressionBombError, OSError) as e:
        raise _decode_error(path, e) from e

    width, height = rgba.size
    return pixels_from_array(np.array(rgba, dtype=np.uint8)), width, height


def load_palette(path) -> Palette:
    """Decodes a palette image and returns its distinct colors in first-seen order."""
    pixels, _width, _height = decode_image(path)
    return extract_palette(pixels)


def _metadata_key(key: str) -> str:
    # tEXt keywords are limited to 79 bytes, leave room for the prefix
    key_clean = re.sub(r'\s+', '_', key)
    key_clean = re.sub(r'[^a-zA-Z0-9_.-]', '', key_clean)
    if not re.match(r'^[a-zA-Z_]', key_clean):
        key_clean = "colorreducer_" + key_clean
    return key_clean[:60]


def encode_image(
    output_path,
    pixels: PixelBuffer,
    width: int,
    height: int,
    command_line_invocation: Optional[str] = None,
    additional_metadata: Optional[Dict[str, str]] = None,
    embed_metadata: bool = True,
):
    """
    Saves packed RGBA pixels as a PNG file, embedding run metadata as tEXt chunks.

    Raises:
        EncodeError: The image could not be written.
    """
    output_path = Path(output_path)
    image_to_save = Image.fromarray(pixels_to_array(pixels, width, height), "RGBA")

    png_info = None
    if embed_metadata:
        png_info = PngImagePlugin.PngInfo()
        png_info.add_text("Software", SOFTWARE_NAME)
        if command_line_invocation:
            png_info.add_text(f"{PNG_METADATA_PREFIX}command_line", command_line_invocation)
        if additional_metadata:
            for key, value in additional_metadata.items():
                png_info.add_text(f"{PNG_METADATA_PREFIX}{_metadata_key(key)}", str(value))

    try:
        if not output_path.parent.exists():
            output_path.parent.mkdir(parents=True, exist_ok=True)
        image_to_save.save(output_path, "PNG", pnginfo=png_info)
    except (OSError, ValueError) as e:
        raise EncodeError(output_path, str(e)) from e


def read_png_metadata(path) -> Dict[str, str]:
    """Returns the colorreducer text entries of a PNG, keys without the prefix."""
    try:
        with Image.open(path) as img:
            info = dict(img.info)
    except (Image.DecompressionBombError, OSError) as e:
        raise _decode_error(path, e) from e

    return {
        key[len(PNG_METADATA_PREFIX):]: value
        for key, value in info.items()
        if isinstance(key, str) and key.startswith(PNG_METADATA_PREFIX)
    }
