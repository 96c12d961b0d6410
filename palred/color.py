import numpy as np
from typing import List, MutableSequence, Tuple, Union

from palred.errors import MalformedBufferError

# Colors are packed as 0xRRGGBBAA in a plain int
Color = int
PixelBuffer = Union[np.ndarray, MutableSequence[int]]

PIXEL_STRIDE = 4  # bytes per RGBA pixel


def red(color: Color) -> int:
    return (color >> 24) & 0xFF


def green(color: Color) -> int:
    return (color >> 16) & 0xFF


def blue(color: Color) -> int:
    return (color >> 8) & 0xFF


def alpha(color: Color) -> int:
    return color & 0xFF


def make_color(r: int, g: int, b: int, a: int = 255) -> Color:
    """Packs four 8-bit channels into a single color value."""
    return (r & 0xFF) << 24 | (g & 0xFF) << 16 | (b & 0xFF) << 8 | (a & 0xFF)


def color_to_rgba(color: Color) -> Tuple[int, int, int, int]:
    return red(color), green(color), blue(color), alpha(color)


def pixels_from_array(array: np.ndarray) -> np.ndarray:
    """
    Packs an RGBA array into a flat pixel buffer.

    Args:
        array (np.ndarray): uint8 data shaped (H, W, 4) or (N, 4).

    Returns:
        np.ndarray: 1-D uint32 buffer in row-major order, one packed color per pixel.
    """
    array = np.asarray(array)
    if array.ndim not in (2, 3) or array.shape[-1] != PIXEL_STRIDE:
        raise MalformedBufferError(
            f"Expected RGBA data shaped (H, W, 4) or (N, 4), got {array.shape}"
        )
    if array.dtype != np.uint8:
        raise MalformedBufferError(f"Expected uint8 RGBA data, got {array.dtype}")
    channels = array.reshape(-1, PIXEL_STRIDE).astype(np.uint32)
    return (channels[:, 0] << 24) | (channels[:, 1] << 16) | (channels[:, 2] << 8) | channels[:, 3]


def pixels_from_rgba_bytes(data: bytes) -> np.ndarray:
    """Packs raw RGBA bytes (4 per pixel) into a flat pixel buffer."""
    if len(data) % PIXEL_STRIDE != 0:
        raise MalformedBufferError(
            f"RGBA data length {len(data)} is not a multiple of {PIXEL_STRIDE}",
            length=len(data),
        )
    raw = np.frombuffer(data, dtype=np.uint8)
    return pixels_from_array(raw.reshape(-1, PIXEL_STRIDE))


def pixels_to_array(pixels: PixelBuffer, width: int, height: int) -> np.ndarray:
    """Unpacks a pixel buffer into an (H, W, 4) uint8 array."""
    packed = np.asarray(pixels, dtype=np.uint32)
    if packed.ndim != 1 or packed.shape[0] != width * height:
        raise MalformedBufferError(
            f"Pixel buffer of length {packed.size} does not match {width}x{height}",
            length=int(packed.size),
        )
    out = np.empty((packed.shape[0], PIXEL_STRIDE), dtype=np.uint8)
    out[:, 0] = (packed >> 24) & 0xFF
    out[:, 1] = (packed >> 16) & 0xFF
    out[:, 2] = (packed >> 8) & 0xFF
    out[:, 3] = packed & 0xFF
    return out.reshape((height, width, PIXEL_STRIDE))


def as_color_list(pixels: PixelBuffer) -> List[Color]:
    # numpy scalars hash like ints, but tolist() is much faster to walk
    if hasattr(pixels, 'tolist'):
        return pixels.tolist()
    return list(pixels)
