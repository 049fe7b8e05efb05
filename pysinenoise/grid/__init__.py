"""
Grid sampling module for PySineNoise.

Turns a continuous field into a normalized 2D grid: every pixel (x, y) of a
width x height lattice samples field(x/width - 0.5, y/height - 0.5), and the
samples are stretched to [0, 1] by their min/max. A constant field yields an
all-zero grid.

Backends:
- numpy: vectorized evaluation of the field tree (default, float64)
- taichi: flattened sine terms in a Taichi kernel (optional extra)

Author: B.G.
"""

from .sampler import lattice, sample_field, normalize_grid, sample_and_normalize

__all__ = ["lattice", "sample_field", "normalize_grid", "sample_and_normalize"]
