"""
PyFlowTex: procedural flow textures with Taichi.

Synthesizes grayscale "flow" textures for directional motion effects (wind,
water) by layering octaves of coherent noise and streaking the result with a
directional blur. Both stages run as Taichi kernels on CPU or GPU.

Submodules:
- noise: Perlin primitive and fractal noise synthesis
- rastermanip: Directional blur and buffer format helpers
- misc: PNG encoding and loading
- visu: Matplotlib preview (imported lazily)
- cli: Command line tools (imported lazily)

Usage:
    import taichi as ti
    import pyflowtex as pft

    ti.init(arch=ti.gpu)

    params = pft.GenerationParameters(width=512, height=512, octaves=4,
                                      scale_x=8.0, scale_y=2.0,
                                      blur_angle_degrees=0.0, blur_strength=3)
    texture = pft.generate_flow_texture(params)
    pft.misc.save_png(texture.pixels, "flow_texture.png")

Author: B.G.
"""

__version__ = "0.0.1"

from . import constants
from . import misc, noise, rastermanip
from .errors import ComputationError, ParameterValidationError
from .params import GenerationParameters
from .pipeline import FlowTexture, generate_flow_texture

__all__ = [
    "__version__",
    "constants",
    "noise",
    "rastermanip",
    "misc",
    "visu",
    "cli",
    "GenerationParameters",
    "FlowTexture",
    "generate_flow_texture",
    "ParameterValidationError",
    "ComputationError",
]


def __getattr__(name: str):
    if name in ("visu", "cli"):
        import importlib
        mod = importlib.import_module(f".{name}", __name__)
        globals()[name] = mod
        return mod
    raise AttributeError(name)
