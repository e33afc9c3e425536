"""
Directional blur for PyFlowTex.

Averages samples taken along a single direction through every pixel, which
streaks the texture along the flow direction like a motion blur. This is a
1D convolution along an arbitrary angle, not a square box kernel.

The kernel reads from the source array only and writes a separate output, so
destination pixels can be processed in any order (and in parallel).

Author: B.G.
"""

import math
import numbers

import numpy as np
import taichi as ti

from .. import constants as cte
from ..errors import ParameterValidationError


@ti.func
def _round_half_even(v: cte.FLOAT_TYPE_TI) -> ti.i32:
    f = ti.floor(v)
    diff = v - f
    r = ti.cast(f, ti.i32)
    if diff > 0.5:
        r += 1
    elif diff == 0.5:
        # ties go to the even neighbour
        r += r & 1
    return r


@ti.kernel
def directional_blur_kernel(source: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=3),
                            target: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=3),
                            dx: cte.FLOAT_TYPE_TI, dy: cte.FLOAT_TYPE_TI, strength: ti.i32):
    """
    Average 2*strength+1 samples along (dx, dy) for every cell.

    Args:
        source: Input buffer of shape (ny, nx, nc), read-only
        target: Output buffer of the same shape, fully overwritten
        dx, dy: Unit direction vector of the blur
        strength: Sample radius in pixels
    """
    ny = source.shape[0]
    nx = source.shape[1]
    nc = source.shape[2]

    for j, i in ti.ndrange(ny, nx):
        for c in range(nc):
            target[j, i, c] = 0.0

        count = 0
        for s in range(-strength, strength + 1):
            sx = _round_half_even(ti.cast(i, cte.FLOAT_TYPE_TI) + dx * s)
            sy = _round_half_even(ti.cast(j, cte.FLOAT_TYPE_TI) + dy * s)
            if 0 <= sx < nx and 0 <= sy < ny:
                for c in range(nc):
                    target[j, i, c] += source[sy, sx, c]
                count += 1

        if count > 0:
            for c in range(nc):
                target[j, i, c] /= count
        else:
            for c in range(nc):
                target[j, i, c] = source[j, i, c]


def blur_direction(angle_degrees: float) -> tuple:
    """Unit vector (cos, sin) of an angle in degrees; 0 points to +x, 90 to +y."""
    rad = math.radians(angle_degrees)
    return math.cos(rad), math.sin(rad)


def directional_blur(source: np.ndarray, angle_degrees: float, strength: int) -> np.ndarray:
    """
    Blur a buffer along a direction.

    Each destination cell (x, y) averages the in-bounds source samples at
    (round(x + dx*s), round(y + dy*s)) for s in [-strength, strength], where
    (dx, dy) is the unit vector of ``angle_degrees``. Rounding is half to even.
    When no sample falls inside the buffer the source pixel is copied.

    Args:
        source: Buffer of shape (ny, nx) or (ny, nx, channels), e.g. an RGBA
                PixelBuffer. Row j holds y = j.
        angle_degrees: Blur direction in degrees (0 horizontal, 90 vertical)
        strength: Sample radius in pixels, in [0, MAX_BLUR_STRENGTH]. 0 returns
                  an exact copy.

    Returns:
        numpy.ndarray: New float32 buffer with the same shape as ``source``

    Raises:
        ParameterValidationError: If strength is not an integer in
                                  [0, MAX_BLUR_STRENGTH], or the angle is
                                  not a finite number
        ValueError: If source is not a non-empty 2D or 3D array

    Example:
        streaked = directional_blur(pixels, angle_degrees=30.0, strength=5)
    """
    if isinstance(strength, (bool, np.bool_)) or not isinstance(strength, numbers.Integral):
        raise ParameterValidationError(f"strength must be an integer, got {strength!r}")
    if not 0 <= strength <= cte.MAX_BLUR_STRENGTH:
        raise ParameterValidationError(f"strength must be in [0, {cte.MAX_BLUR_STRENGTH}], got {strength}")
    if isinstance(angle_degrees, (bool, np.bool_)) or not isinstance(angle_degrees, numbers.Real) \
            or not math.isfinite(angle_degrees):
        raise ParameterValidationError(f"angle_degrees must be a finite number, got {angle_degrees!r}")

    source = np.asarray(source)
    if source.ndim not in (2, 3):
        raise ValueError("Input buffer must be 2D (ny, nx) or 3D (ny, nx, channels)")
    if source.size == 0:
        raise ValueError("Input buffer must not be empty")

    if strength == 0:
        return source.astype(cte.FLOAT_TYPE_NP, copy=True)

    # kernel input is a C-ordered float32 (ny, nx, nc) copy, never the caller array
    src = np.array(source, dtype=cte.FLOAT_TYPE_NP, order="C", copy=True)
    if src.ndim == 2:
        src = src.reshape(src.shape + (1,))
    target = np.zeros_like(src)

    dx, dy = blur_direction(angle_degrees)
    directional_blur_kernel(src, target, dx, dy, int(strength))

    return target.reshape(source.shape)


__all__ = ["directional_blur", "directional_blur_kernel", "blur_direction"]
