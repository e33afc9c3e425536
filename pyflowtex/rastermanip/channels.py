"""Buffer format helpers: scalar fields to RGBA pixels, range checks, quantization.

Author: B.G.
"""

import numpy as np

from .. import constants as cte
from ..errors import ComputationError


def check_unit_range(array: np.ndarray, what: str = "buffer") -> None:
    """Raise ComputationError if ``array`` holds non-finite values or leaves [0, 1]."""
    if array.size == 0:
        return
    if not np.all(np.isfinite(array)):
        raise ComputationError(f"{what} contains non-finite values")
    lo = float(array.min())
    hi = float(array.max())
    if lo < 0.0 or hi > 1.0:
        raise ComputationError(f"{what} values out of [0, 1]: [{lo}, {hi}]")


def scalar_to_rgba(field: np.ndarray) -> np.ndarray:
    """
    Expand a (ny, nx) scalar field to a grayscale (ny, nx, 4) RGBA buffer.

    Each cell becomes (v, v, v, 1). The input is not modified.
    """
    field = np.asarray(field, dtype=cte.FLOAT_TYPE_NP)
    if field.ndim != 2:
        raise ValueError("Scalar field must be 2D")
    pixels = np.empty(field.shape + (cte.RGBA,), dtype=cte.FLOAT_TYPE_NP)
    pixels[..., :3] = field[..., None]
    pixels[..., 3] = 1.0
    return pixels


def to_uint8(buffer: np.ndarray) -> np.ndarray:
    """Quantize a [0, 1] float buffer to uint8 (0-255) with rounding."""
    check_unit_range(buffer)
    return np.rint(np.asarray(buffer) * 255.0).astype(np.uint8)


def to_uint16(buffer: np.ndarray) -> np.ndarray:
    """Quantize a [0, 1] float buffer to uint16 (0-65535) with rounding."""
    check_unit_range(buffer)
    return np.rint(np.asarray(buffer) * 65535.0).astype(np.uint16)


__all__ = ["check_unit_range", "scalar_to_rgba", "to_uint8", "to_uint16"]
