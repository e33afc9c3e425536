"""Raster manipulation module for PyFlowTex.

Provides the Taichi-accelerated directional blur applied to flow textures and
the small helpers converting between scalar fields and RGBA pixel buffers.
All functions take and return NumPy arrays laid out row-major as (ny, nx) or
(ny, nx, channels).

Author: B.G.
"""

from .channels import check_unit_range, scalar_to_rgba, to_uint8, to_uint16
from .directional_blur import blur_direction, directional_blur, directional_blur_kernel

__all__ = [
    "directional_blur",
    "directional_blur_kernel",
    "blur_direction",
    "scalar_to_rgba",
    "check_unit_range",
    "to_uint8",
    "to_uint16",
]
