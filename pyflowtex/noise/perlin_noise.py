"""
Perlin noise primitive for PyFlowTex.

Provides the coherent 2D noise function sampled by the fractal noise
synthesizer: classic gradient noise with a seeded permutation table, remapped
to [0, 1]. The primitive is a Taichi data-oriented object whose ``sample``
Taichi function is inlined into the synthesis kernel.

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import constants as cte


def fisher_yates_permutation(seed: int) -> np.ndarray:
    """
    Generate a permutation table using Fisher-Yates shuffle algorithm.

    Args:
        seed: Random seed for reproducible permutation

    Returns:
        512-element permutation array (256 values duplicated)
    """
    rng = np.random.default_rng(seed)

    perm = np.arange(256, dtype=np.int32)

    for i in range(255, 0, -1):
        j = int(rng.integers(0, i + 1))
        perm[i], perm[j] = perm[j], perm[i]

    # Duplicate to 512 elements for easier wrapping
    return np.concatenate([perm, perm])


# 8-direction 2D gradient vectors
GRADIENTS_2D = np.array([
    [1, 1], [-1, 1], [1, -1], [-1, -1],  # Diagonal gradients
    [1, 0], [-1, 0], [0, 1], [0, -1]      # Axis-aligned gradients
], dtype=np.float32)


@ti.func
def fade(t: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@ti.func
def lerp(t: cte.FLOAT_TYPE_TI, a: cte.FLOAT_TYPE_TI, b: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    """Linear interpolation between a and b by factor t"""
    return a + t * (b - a)


@ti.func
def grad(hash_val: ti.i32, dx: cte.FLOAT_TYPE_TI, dy: cte.FLOAT_TYPE_TI, gradients: ti.template()) -> cte.FLOAT_TYPE_TI:
    """Compute dot product of gradient vector and distance vector"""
    idx = hash_val & 7
    return gradients[idx, 0] * dx + gradients[idx, 1] * dy


@ti.func
def perlin_noise_at(x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, perm: ti.template(),
                    gradients: ti.template()) -> cte.FLOAT_TYPE_TI:
    """
    Raw Perlin noise value at (x, y), in range [-1, 1].

    Args:
        x, y: Coordinates for noise evaluation
        perm: 512-element permutation table (read-only Taichi field)
        gradients: 8x2 gradient vector table (read-only Taichi field)
    """
    fx = ti.floor(x)
    fy = ti.floor(y)

    # Lattice cell, wrapped into the 256 periodic table
    X = ti.cast(fx, ti.i32) & 255
    Y = ti.cast(fy, ti.i32) & 255

    # Position inside the cell
    rx = x - fx
    ry = y - fy

    u = fade(rx)
    v = fade(ry)

    A = perm[X] + Y
    B = perm[(X + 1) & 255] + Y
    AA = perm[A & 255]
    AB = perm[(A + 1) & 255]
    BA = perm[B & 255]
    BB = perm[(B + 1) & 255]

    return lerp(v,
                lerp(u, grad(AA, rx, ry, gradients), grad(BA, rx - 1.0, ry, gradients)),
                lerp(u, grad(AB, rx, ry - 1.0, gradients), grad(BB, rx - 1.0, ry - 1.0, gradients)))


@ti.func
def perlin_unit_at(x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, perm: ti.template(),
                   gradients: ti.template()) -> cte.FLOAT_TYPE_TI:
    """Perlin noise at (x, y) remapped from [-1, 1] to [0, 1] and clamped."""
    n = 0.5 * (perlin_noise_at(x, y, perm, gradients) + 1.0)
    return ti.min(ti.max(n, 0.0), 1.0)


@ti.data_oriented
class PerlinNoise2D:
    """
    Seeded 2D Perlin noise returning values in [0, 1].

    Any object with a ``sample(x, y)`` Taichi function honouring the same
    contract (continuous, deterministic, range [0, 1]) can replace it in
    :func:`pyflowtex.noise.synthesize`. The synthesizer reads ``perm_table``
    through its table kernel, the Taichi fields serve ``sample`` in user kernels.

    Requires an initialised Taichi runtime (``ti.init``).
    """

    def __init__(self, seed: int = cte.SEED):
        self.seed = seed
        self.perm_table = fisher_yates_permutation(seed)
        self.perm = ti.field(ti.i32, shape=(512,))
        self.gradients = ti.field(cte.FLOAT_TYPE_TI, shape=(8, 2))
        self.perm.from_numpy(self.perm_table)
        self.gradients.from_numpy(GRADIENTS_2D)

    @ti.func
    def sample(self, x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
        return perlin_unit_at(x, y, self.perm, self.gradients)

    def __repr__(self):
        return f"PerlinNoise2D(seed={self.seed})"


__all__ = ["PerlinNoise2D", "fisher_yates_permutation", "perlin_noise_at", "perlin_unit_at",
           "GRADIENTS_2D"]
