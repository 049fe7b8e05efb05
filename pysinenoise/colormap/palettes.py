"""
Colour policies for PySineNoise.

Two fixed mappings from a normalized value in [0, 1] to a colour:

- grayscale: one channel, floor(v * 256) clamped to [0, 255]
- terracolor: RGB from an ordered table of terrain bands; the first band whose
  threshold is strictly greater than v wins, anything above the last
  threshold is snow

Scalar functions map a single value; colorize() applies a policy to a whole
grid at once and returns a uint8 pixel buffer.

Author: B.G.
"""

import math

import numpy as np

# (threshold, (R, G, B), band name), checked in order with v < threshold
TERRAIN_BANDS = (
    (0.50, (0x20, 0x20, 0xFF), "ocean"),
    (0.55, (0x40, 0x40, 0xFF), "shallow water"),
    (0.60, (0x40, 0xA0, 0x40), "plains"),
    (0.80, (0x30, 0x80, 0x30), "forest"),
    (0.85, (0x80, 0x80, 0x80), "mountain"),
    (0.90, (0x60, 0x60, 0x60), "tall mountain"),
)
SNOW = ((0xFF, 0xFF, 0xFF), "snow")

# name -> number of channels
COLORMAPS = {"grayscale": 1, "terracolor": 3}

_THRESHOLDS = np.array([band[0] for band in TERRAIN_BANDS])
_PALETTE = np.array([band[1] for band in TERRAIN_BANDS] + [SNOW[0]], dtype=np.uint8)


def grayscale(v: float) -> tuple:
    """Map v to a single 8-bit channel; v == 1.0 reaches 255 through the clamp."""
    return (int(min(max(math.floor(v * 256.0), 0), 255)),)


def _band(v):
    for threshold, color, name in TERRAIN_BANDS:
        if v < threshold:
            return color, name
    return SNOW


def terracolor(v: float) -> tuple:
    """Map v to the RGB colour of its terrain band."""
    return _band(v)[0]


def terrain_band(v: float) -> str:
    """Name of the terrain band v falls in, e.g. 'ocean' or 'snow'."""
    return _band(v)[1]


def colorize(grid: np.ndarray, colormap: str = "grayscale") -> np.ndarray:
    """
    Apply a colour policy to every cell of a normalized grid.

    Args:
        grid: 2D array of values in [0, 1]
        colormap: "grayscale" or "terracolor"

    Returns:
        numpy.ndarray: uint8 pixel buffer of shape (height, width) for
        grayscale or (height, width, 3) for terracolor

    Raises:
        ValueError: for an unknown colormap or a grid that is not 2D
    """
    if colormap not in COLORMAPS:
        raise ValueError(f"colormap must be one of {tuple(COLORMAPS)}, got '{colormap}'")

    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim != 2:
        raise ValueError("grid must be a 2D array")

    if colormap == "grayscale":
        return np.clip(np.floor(grid * 256.0), 0, 255).astype(np.uint8)

    # Count of thresholds <= v is the index of the first band with v < threshold
    bands = np.searchsorted(_THRESHOLDS, grid, side="right")
    return _PALETTE[bands]
