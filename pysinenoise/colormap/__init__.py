"""
Colour mapping module for PySineNoise.

Provides the grayscale ramp and the banded terrain palette, both as scalar
functions of a normalized value and as a vectorized colorize() over a grid.

Author: B.G.
"""

from .palettes import (
    TERRAIN_BANDS,
    SNOW,
    COLORMAPS,
    grayscale,
    terracolor,
    terrain_band,
    colorize,
)

__all__ = [
    "TERRAIN_BANDS", "SNOW", "COLORMAPS",
    "grayscale", "terracolor", "terrain_band", "colorize",
]
