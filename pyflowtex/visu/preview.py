"""Matplotlib preview of flow textures.

Author: B.G.
"""

import matplotlib.pyplot as plt
import numpy as np


def preview(buffer: np.ndarray, title: str = None, show: bool = True):
    """
    Display a scalar field or RGBA PixelBuffer.

    The buffer is drawn with row 0 at the bottom, matching texture coordinates,
    and its aspect ratio is kept. The buffer is only read.

    Args:
        buffer: (ny, nx) scalar field or (ny, nx, 4) RGBA buffer in [0, 1]
        title: Optional figure title
        show: Call ``plt.show()`` before returning (default: True)

    Returns:
        matplotlib.figure.Figure
    """
    buffer = np.asarray(buffer)
    if buffer.ndim not in (2, 3):
        raise ValueError("buffer must be 2D (ny, nx) or 3D (ny, nx, channels)")

    fig, ax = plt.subplots()
    if buffer.ndim == 2:
        ax.imshow(buffer, cmap="gray", vmin=0.0, vmax=1.0, origin="lower", interpolation="nearest")
    else:
        ax.imshow(np.clip(buffer, 0.0, 1.0), origin="lower", interpolation="nearest")
    ax.set_aspect("equal")
    ax.set_axis_off()
    if title:
        ax.set_title(title)

    if show:
        plt.show()
    return fig


__all__ = ["preview"]
