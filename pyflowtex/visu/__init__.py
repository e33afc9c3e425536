"""
Visualization helpers for PyFlowTex.

- preview: Matplotlib display of a scalar field or RGBA PixelBuffer

Author: B.G.
"""

from .preview import preview

__all__ = ["preview"]
