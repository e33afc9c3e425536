"""
Image encoding utilities for PyFlowTex.

Serializes PixelBuffers to PNG with Pillow and reads images back as
PixelBuffers. Buffers store y = 0 in row 0 (bottom of the texture) while image
files store the top row first, so rows are flipped on the way in and out.

Dependencies:
- numpy: For buffer conversion
- pillow: For PNG encoding and decoding

Author: B.G.
"""

import io
import os
from pathlib import Path

import numpy as np
from PIL import Image

from .. import constants as cte
from ..rastermanip import scalar_to_rgba, to_uint8, to_uint16


def _as_rgba(pixels: np.ndarray) -> np.ndarray:
    pixels = np.asarray(pixels)
    if pixels.ndim == 2:
        return scalar_to_rgba(pixels)
    if pixels.ndim == 3 and pixels.shape[2] == cte.RGBA:
        return pixels
    raise ValueError("pixels must be a (ny, nx) field or a (ny, nx, 4) RGBA buffer")


def to_image(pixels: np.ndarray, uint16: bool = False) -> Image.Image:
    """
    Convert a PixelBuffer (or scalar field) to a PIL image.

    Args:
        pixels: float buffer in [0, 1], shape (ny, nx) or (ny, nx, 4)
        uint16: If True, build a 16-bit grayscale image from the red channel,
                otherwise an 8-bit RGBA image

    Returns:
        PIL.Image.Image
    """
    rgba = np.flipud(_as_rgba(pixels))

    if uint16:
        # Pillow infers the 16-bit grayscale mode ("I;16") from uint16 data
        return Image.fromarray(np.ascontiguousarray(to_uint16(rgba[..., 0])))
    return Image.fromarray(np.ascontiguousarray(to_uint8(rgba)))


def encode_png(pixels: np.ndarray, uint16: bool = False) -> bytes:
    """Encode a PixelBuffer as PNG bytes (see :func:`to_image` for modes)."""
    buffer = io.BytesIO()
    to_image(pixels, uint16=uint16).save(buffer, format="PNG")
    return buffer.getvalue()


def save_png(pixels: np.ndarray, path, uint16: bool = False) -> Path:
    """
    Save a PixelBuffer as a PNG file.

    Args:
        pixels: float buffer in [0, 1], shape (ny, nx) or (ny, nx, 4)
        path: Output file path; missing parent directories are created
        uint16: Save 16-bit grayscale instead of 8-bit RGBA

    Returns:
        pathlib.Path: The written path

    Raises:
        ComputationError: If the buffer holds values outside [0, 1]
        OSError: If the file cannot be written
    """
    path = Path(path)
    data = encode_png(pixels, uint16=uint16)
    os.makedirs(path.parent, exist_ok=True)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise OSError(f"Failed to write PNG to '{path}': {e}") from e
    return path


def load_png(path) -> np.ndarray:
    """
    Load an image file as a float32 RGBA PixelBuffer in [0, 1].

    16-bit grayscale images keep their full precision. Any other mode is
    converted to 8-bit RGBA by Pillow.

    Args:
        path: Image file readable by Pillow

    Returns:
        numpy.ndarray: float32 array of shape (ny, nx, 4), row 0 is the bottom row
    """
    with Image.open(path) as img:
        if img.mode in ("I;16", "I;16B", "I;16L", "I"):
            gray = np.asarray(img, dtype=np.float64) / 65535.0
            pixels = scalar_to_rgba(np.clip(gray, 0.0, 1.0))
        else:
            rgba = np.asarray(img.convert("RGBA"), dtype=cte.FLOAT_TYPE_NP)
            pixels = rgba / 255.0
    return np.ascontiguousarray(np.flipud(pixels), dtype=cte.FLOAT_TYPE_NP)


__all__ = ["to_image", "encode_png", "save_png", "load_png"]
