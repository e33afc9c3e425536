"""
Global constants for PyFlowTex.

Float types shared by the Taichi kernels and the NumPy buffers they fill,
plus the default generation parameters of the flow texture tool.

Author: B.G.
"""

import numpy as np
import taichi as ti

# Precision of every buffer handled by the kernels
FLOAT_TYPE_TI = ti.f32
FLOAT_TYPE_NP = np.float32

# Texture size
WIDTH = 512
HEIGHT = 512

# Fractal noise
OCTAVES = 4
SCALE_X = 8.0
SCALE_Y = 2.0
OFFSET_X = 0.0
OFFSET_Y = 0.0
LACUNARITY = 2.0
GAIN = 0.5
SEED = 42

# Directional blur
APPLY_BLUR = True
BLUR_ANGLE = 0.0
BLUR_STRENGTH = 3
# Largest sample radius whose loop bound (strength + 1) fits the kernel i32
MAX_BLUR_STRENGTH = 2**31 - 2

# Number of channels of a PixelBuffer (RGBA)
RGBA = 4
