"""
Fractal noise field synthesis for PyFlowTex.

Evaluates multi-octave coherent noise at every pixel of a width x height grid
and normalizes the octave sum by the total amplitude actually used, which
keeps the field in [0, 1] for any primitive with that range.

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import constants as cte
from ..params import GenerationParameters
from ..rastermanip.channels import check_unit_range
from .perlin_noise import GRADIENTS_2D, PerlinNoise2D, fisher_yates_permutation, perlin_unit_at


@ti.kernel
def fractal_noise_kernel(noise_field: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2),
                         noise: ti.template(), octaves: ti.i32,
                         scale_x: cte.FLOAT_TYPE_TI, scale_y: cte.FLOAT_TYPE_TI,
                         offset_x: cte.FLOAT_TYPE_TI, offset_y: cte.FLOAT_TYPE_TI,
                         lacunarity: cte.FLOAT_TYPE_TI, gain: cte.FLOAT_TYPE_TI):
    """
    Fill a (ny, nx) array with normalized fractal noise.

    Args:
        noise_field: Output array, row j holds y = j
        noise: Primitive exposing a ``sample(x, y)`` Taichi function in [0, 1]
        octaves: Number of octaves to combine (> 0)
        scale_x, scale_y: Spatial frequency multipliers
        offset_x, offset_y: Field translation in noise space
        lacunarity: Frequency ratio between octaves
        gain: Amplitude ratio between octaves
    """
    ny = noise_field.shape[0]
    nx = noise_field.shape[1]

    for j, i in ti.ndrange(ny, nx):
        u = ti.cast(i, cte.FLOAT_TYPE_TI) / ti.cast(nx, cte.FLOAT_TYPE_TI)
        v = ti.cast(j, cte.FLOAT_TYPE_TI) / ti.cast(ny, cte.FLOAT_TYPE_TI)

        total = 0.0
        max_value = 0.0
        amplitude = 1.0
        frequency = 1.0

        for octave in range(octaves):
            sample_x = (offset_x + u * scale_x) * frequency
            sample_y = (offset_y + v * scale_y) * frequency
            total += noise.sample(sample_x, sample_y) * amplitude
            max_value += amplitude

            amplitude *= gain
            frequency *= lacunarity

        # max_value >= 1 since the first octave has unit amplitude
        noise_field[j, i] = total / max_value


@ti.kernel
def perlin_fractal_kernel(noise_field: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2),
                          perm: ti.types.ndarray(dtype=ti.i32, ndim=1),
                          gradients: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2),
                          octaves: ti.i32,
                          scale_x: cte.FLOAT_TYPE_TI, scale_y: cte.FLOAT_TYPE_TI,
                          offset_x: cte.FLOAT_TYPE_TI, offset_y: cte.FLOAT_TYPE_TI,
                          lacunarity: cte.FLOAT_TYPE_TI, gain: cte.FLOAT_TYPE_TI):
    """
    Same octave loop as :func:`fractal_noise_kernel` with Perlin noise read
    from plain permutation and gradient arrays.

    One compiled kernel serves every seed and no Taichi field is allocated
    per call.
    """
    ny = noise_field.shape[0]
    nx = noise_field.shape[1]

    for j, i in ti.ndrange(ny, nx):
        u = ti.cast(i, cte.FLOAT_TYPE_TI) / ti.cast(nx, cte.FLOAT_TYPE_TI)
        v = ti.cast(j, cte.FLOAT_TYPE_TI) / ti.cast(ny, cte.FLOAT_TYPE_TI)

        total = 0.0
        max_value = 0.0
        amplitude = 1.0
        frequency = 1.0

        for octave in range(octaves):
            sample_x = (offset_x + u * scale_x) * frequency
            sample_y = (offset_y + v * scale_y) * frequency
            total += perlin_unit_at(sample_x, sample_y, perm, gradients) * amplitude
            max_value += amplitude

            amplitude *= gain
            frequency *= lacunarity

        noise_field[j, i] = total / max_value


def synthesize(params: GenerationParameters, noise=None) -> np.ndarray:
    """
    Generate the normalized fractal noise field described by ``params``.

    Deterministic for a given parameter set and primitive: repeated calls give
    bit-identical arrays.

    Args:
        params: Validated GenerationParameters
        noise: Coherent noise primitive with a ``sample(x, y)`` Taichi function
               returning values in [0, 1]. The default is Perlin noise seeded
               with params.seed. A PerlinNoise2D runs through the same
               table kernel as the default.

    Returns:
        numpy.ndarray: float32 field of shape (height, width), values in [0, 1]

    Raises:
        TypeError: If params is not a GenerationParameters
        ComputationError: If the produced field leaves [0, 1] or is not finite,
                          which means the primitive broke its contract

    Example:
        field = synthesize(GenerationParameters(width=256, height=256, octaves=6))
    """
    if not isinstance(params, GenerationParameters):
        raise TypeError("params must be a GenerationParameters instance")
    params.validate()

    noise_field = np.zeros(params.shape, dtype=cte.FLOAT_TYPE_NP)

    if noise is None or isinstance(noise, PerlinNoise2D):
        perm = fisher_yates_permutation(params.seed) if noise is None else noise.perm_table
        perlin_fractal_kernel(noise_field, perm, GRADIENTS_2D, params.octaves,
                              params.scale_x, params.scale_y,
                              params.offset_x, params.offset_y,
                              params.lacunarity, params.gain)
    else:
        # custom primitives specialise the template kernel once per instance
        fractal_noise_kernel(noise_field, noise, params.octaves,
                             params.scale_x, params.scale_y,
                             params.offset_x, params.offset_y,
                             params.lacunarity, params.gain)

    check_unit_range(noise_field, "noise field")
    return noise_field


def perlin_noise(nx: int, ny: int, frequency: float = 8.0, octaves: int = 4,
                 persistence: float = 0.5, seed: int = cte.SEED) -> np.ndarray:
    """
    Generate isotropic Perlin fBm over the unit square, values in [0, 1].

    Shortcut for :func:`synthesize` with equal scales, no offset and a
    lacunarity of 2.

    Args:
        nx: Number of cells in x direction
        ny: Number of cells in y direction
        frequency: Base frequency of noise patterns (default: 8.0)
        octaves: Number of noise layers to combine (default: 4)
        persistence: Amplitude ratio between octaves (default: 0.5)
        seed: Seed of the permutation table (default: 42)

    Returns:
        numpy.ndarray: float32 array of shape (ny, nx)
    """
    params = GenerationParameters(width=nx, height=ny, octaves=octaves,
                                  scale_x=frequency, scale_y=frequency,
                                  offset_x=0.0, offset_y=0.0, lacunarity=2.0,
                                  gain=persistence, apply_blur=False, seed=seed)
    return synthesize(params)


__all__ = ["synthesize", "perlin_noise", "fractal_noise_kernel", "perlin_fractal_kernel"]
