"""
Quick-look previews of normalized grids with matplotlib.

Draws the same pixels the PNG sink would write, so a terrain can be inspected
in a notebook or saved into a larger figure without touching the disk.

Author: B.G.
"""

import numpy as np
from matplotlib.figure import Figure

from ..colormap import colorize


def preview_grid(grid: np.ndarray, colormap: str = "terracolor", ax=None, title=None):
    """
    Draw a normalized grid on a matplotlib Axes.

    Args:
        grid: 2D array of values in [0, 1]
        colormap: "grayscale" or "terracolor"
        ax: Axes to draw on; a new standalone Figure is created when None
        title: Optional axes title

    Returns:
        matplotlib.axes.Axes: the axes holding the image
    """
    if ax is None:
        ax = Figure(figsize=(4, 4)).add_subplot(1, 1, 1)

    pixels = colorize(grid, colormap)
    if pixels.ndim == 2:
        ax.imshow(pixels, cmap="gray", vmin=0, vmax=255, interpolation="nearest")
    else:
        ax.imshow(pixels, interpolation="nearest")
    ax.set_axis_off()
    if title:
        ax.set_title(title)
    return ax
