"""
Miscellaneous Utilities for PyFlowTex

Encoding and persistence helpers that sit outside the generation core:
PixelBuffers go in, PNG files come out (and back).

Available Functions:
- to_image: Convert a PixelBuffer to a PIL image
- encode_png: Encode a PixelBuffer as PNG bytes
- save_png: Write a PixelBuffer to a PNG file
- load_png: Read an image file as a PixelBuffer

Author: B.G.
"""

from .image_io import encode_png, load_png, save_png, to_image

# Export public API
__all__ = [
    "to_image",
    "encode_png",
    "save_png",
    "load_png",
]
