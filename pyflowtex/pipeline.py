"""
Flow texture generation pipeline for PyFlowTex.

Chains the two stages of the tool in a single call:

    parameters -> fractal noise field -> grayscale RGBA -> directional blur (optional)

Every call allocates fresh buffers; nothing is cached between calls.

Author: B.G.
"""

from dataclasses import dataclass

import numpy as np

from .noise import synthesize
from .params import GenerationParameters
from .rastermanip import check_unit_range, directional_blur, scalar_to_rgba


@dataclass(frozen=True, eq=False)
class FlowTexture:
    """
    Result of one generation request.

    Attributes:
        field: Pre-blur scalar field, float32 (height, width) in [0, 1]
        pixels: Final RGBA buffer, float32 (height, width, 4) in [0, 1]
    """

    field: np.ndarray
    pixels: np.ndarray

    @property
    def shape(self) -> tuple:
        return self.field.shape


def generate_flow_texture(params: GenerationParameters, noise=None) -> FlowTexture:
    """
    Generate a flow texture.

    Args:
        params: Validated GenerationParameters
        noise: Optional coherent noise primitive (see :func:`pyflowtex.noise.synthesize`)

    Returns:
        FlowTexture: Scalar field and final RGBA pixels, both params.width x params.height

    Raises:
        ParameterValidationError: On invalid parameters, before any computation
        ComputationError: If a stage produced values outside [0, 1]

    Example:
        import taichi as ti
        import pyflowtex as pft

        ti.init(arch=ti.gpu)
        texture = pft.generate_flow_texture(pft.GenerationParameters(blur_angle_degrees=45.0))
        pft.misc.save_png(texture.pixels, "flow_texture.png")
    """
    field = synthesize(params, noise=noise)
    pixels = scalar_to_rgba(field)

    if params.apply_blur:
        pixels = directional_blur(pixels, params.blur_angle_degrees, params.blur_strength)
        check_unit_range(pixels, "blurred pixels")

    return FlowTexture(field=field, pixels=pixels)


__all__ = ["FlowTexture", "generate_flow_texture"]
