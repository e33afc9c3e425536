"""
Noise generation module for PyFlowTex.

Provides the coherent noise primitive and the fractal (multi-octave) noise
synthesizer producing the base field of a flow texture.

Components:
- PerlinNoise2D: Seeded gradient noise in [0, 1], usable inside Taichi kernels
- synthesize: Normalized fractal noise field for a GenerationParameters value
- perlin_noise: Isotropic fBm shortcut over the unit square

Usage:
    import taichi as ti
    import pyflowtex as pft

    ti.init(arch=ti.cpu)

    params = pft.GenerationParameters(width=256, height=256, octaves=5)
    field = pft.noise.synthesize(params)

    # Another pattern from a different permutation table
    other = pft.noise.synthesize(params, noise=pft.noise.PerlinNoise2D(seed=7))

Author: B.G.
"""

from .perlin_noise import PerlinNoise2D, fisher_yates_permutation
from .fractal_noise import synthesize, perlin_noise, fractal_noise_kernel, perlin_fractal_kernel

__all__ = [
    "PerlinNoise2D", "fisher_yates_permutation",
    "synthesize", "perlin_noise", "fractal_noise_kernel", "perlin_fractal_kernel",
]
